"""
i18n configuration provider.

Loads the i18n configuration once at process start from a JSON or YAML file.
A missing file means "no i18n" and the service runs with the default (empty)
configuration; a file that exists but cannot be parsed or validated is a
startup error.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from edge_i18n.exceptions import I18nConfigError
from edge_i18n.schemas.i18n import I18nConfig

logger = logging.getLogger(__name__)

JSON_SUFFIXES = frozenset({".json"})
YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def build_i18n_config(data: Mapping[str, Any] | None, source: str = "<memory>") -> I18nConfig | None:
    """Validate an already-parsed configuration document.

    ``data`` may be the i18n block itself or a framework config holding it
    under an ``i18n`` key. An empty document or ``{"i18n": null}`` disables
    i18n.
    """
    if not data:
        return None
    if not isinstance(data, Mapping):
        raise I18nConfigError("i18n configuration must be a mapping", source=source)
    if "i18n" in data:
        data = data["i18n"]
        if data is None:
            return None
        if not isinstance(data, Mapping):
            raise I18nConfigError("'i18n' entry must be a mapping", source=source)

    try:
        return I18nConfig.model_validate(data)
    except ValidationError as e:
        errors = [
            {"field": ".".join(str(loc) for loc in error["loc"]), "message": error["msg"]} for error in e.errors()
        ]
        raise I18nConfigError("Invalid i18n configuration", source=source, errors=errors) from e


def _read_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    try:
        if suffix in JSON_SUFFIXES:
            return json.loads(text)
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise I18nConfigError(f"Cannot parse i18n configuration: {e}", source=str(path)) from e
    raise I18nConfigError(f"Unsupported i18n configuration format '{suffix}'", source=str(path))


def load_i18n_config(path: str | Path | None) -> I18nConfig | None:
    """Load and validate the i18n configuration at ``path``.

    Args:
        path: JSON (``.json``) or YAML (``.yaml``/``.yml``) file, or None.

    Returns:
        The validated configuration, or None when i18n is not configured.

    Raises:
        I18nConfigError: the file exists but is unreadable or invalid.
    """
    if path is None:
        logger.debug("No i18n configuration path set. Using default config.")
        return None

    config_path = Path(path)
    if not config_path.is_file():
        logger.debug("Cannot find %s. Using default config.", config_path)
        return None

    config = build_i18n_config(_read_document(config_path), source=str(config_path))
    if config is None:
        logger.info("i18n disabled by %s", config_path)
    else:
        logger.info(
            "Loaded i18n configuration from %s (locales=%s, default=%s, domains=%d)",
            config_path,
            ",".join(config.locales),
            config.default_locale,
            len(config.domains or ()),
        )
    return config
