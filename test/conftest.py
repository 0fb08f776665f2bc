"""
Pytest configuration and fixtures for edge-i18n tests
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

from edge_i18n.schemas.event import InternalEvent  # noqa: E402
from edge_i18n.schemas.i18n import I18nConfig  # noqa: E402


def make_event(
    raw_path: str = "/",
    host: str | None = "localhost",
    accept_language: str | None = None,
    cookies: dict[str, str] | None = None,
    url: str | None = None,
) -> InternalEvent:
    """Build an InternalEvent the way the routing middleware would."""
    headers = {}
    if host is not None:
        headers["host"] = host
    if accept_language is not None:
        headers["accept-language"] = accept_language
    return InternalEvent(
        raw_path=raw_path,
        url=url or f"https://{host or 'localhost'}{raw_path}",
        headers=headers,
        cookies=cookies or {},
    )


@pytest.fixture
def event_factory():
    return make_event


@pytest.fixture
def basic_i18n() -> I18nConfig:
    """Two locales, no domains."""
    return I18nConfig(locales=("en", "fr"), default_locale="en")


@pytest.fixture
def domain_i18n() -> I18nConfig:
    """en/fr with a single French delivery domain."""
    return I18nConfig.model_validate(
        {
            "locales": ["en", "fr"],
            "defaultLocale": "en",
            "localeDetection": True,
            "domains": [{"domain": "fr.example.com", "defaultLocale": "fr"}],
        }
    )


@pytest.fixture
def multi_domain_i18n() -> I18nConfig:
    """Two delivery domains, the second owning French."""
    return I18nConfig.model_validate(
        {
            "locales": ["en", "fr"],
            "defaultLocale": "en",
            "domains": [
                {"domain": "a.com", "defaultLocale": "en"},
                {"domain": "b.com", "defaultLocale": "fr", "locales": ["fr"]},
            ],
        }
    )
