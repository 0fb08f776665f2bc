"""
i18n package: locale detection and redirect decisions for incoming requests.
"""

from .accept_header import match_language
from .provider import build_i18n_config, load_i18n_config
from .routing import (
    LOCALE_COOKIE,
    detect_domain_locale,
    detect_locale,
    get_locale_from_cookie,
    handle_locale_redirect,
    is_localized_path,
    localize_path,
)

__all__ = [
    "LOCALE_COOKIE",
    "build_i18n_config",
    "detect_domain_locale",
    "detect_locale",
    "get_locale_from_cookie",
    "handle_locale_redirect",
    "is_localized_path",
    "load_i18n_config",
    "localize_path",
    "match_language",
]
