"""
Locale routing: per-request locale detection and redirect decisions.

Every function here is a pure function of the incoming ``InternalEvent`` and
the immutable ``I18nConfig`` passed in by the caller. Nothing is cached and
nothing raises: absent configuration, cookies or headers all degrade to a
defined answer.

Detection precedence (``detect_locale``):
  1. default locale of the domain matching the ``Host`` header
  2. ``NEXT_LOCALE`` cookie, when it names a configured locale
  3. ``Accept-Language`` best match
  4. ``defaultLocale`` of the configuration
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Literal

from edge_i18n.i18n.accept_header import match_language
from edge_i18n.schemas.event import InternalEvent, InternalResult
from edge_i18n.schemas.i18n import DomainLocale, I18nConfig
from edge_i18n.utils.url import construct_next_url

logger = logging.getLogger(__name__)

LOCALE_COOKIE = "NEXT_LOCALE"
REDIRECT_STATUS = 307


def is_localized_path(path: str, i18n: I18nConfig) -> bool:
    """Return True when the first path segment is a configured locale (any case)."""
    segments = path.split("/")
    if len(segments) < 2:
        return False
    first = segments[1].lower()
    return any(first == locale.lower() for locale in i18n.locales)


def get_locale_from_cookie(cookies: Mapping[str, str], i18n: I18nConfig) -> str | None:
    """Return the configured locale named by the ``NEXT_LOCALE`` cookie, if any."""
    cookie = cookies.get(LOCALE_COOKIE)
    if not cookie:
        return None
    wanted = cookie.lower()
    return next((locale for locale in i18n.locales if locale.lower() == wanted), None)


def detect_domain_locale(
    i18n: I18nConfig | None,
    hostname: str | None = None,
    detected_locale: str | None = None,
) -> DomainLocale | None:
    """Find the first configured domain matching a hostname or a locale.

    A domain matches when ``hostname`` equals its host (port removed,
    case-insensitive), or when ``detected_locale`` is its default locale or
    one of its extra locales. Either key may be given alone.

    Args:
        i18n:            Active configuration, or None when i18n is disabled.
        hostname:        Value of the Host header.
        detected_locale: Locale to look up.

    Returns:
        The first matching ``DomainLocale`` in configuration order, or None
        when no domains are configured or none match.
    """
    if i18n is None or not i18n.domains:
        return None

    host = hostname.lower() if hostname is not None else None
    locale = detected_locale.lower() if detected_locale is not None else None

    for domain in i18n.domains:
        if host is not None and host == domain.hostname:
            return domain
        if locale is None:
            continue
        if locale == domain.default_locale.lower():
            return domain
        if domain.locales and any(locale == candidate.lower() for candidate in domain.locales):
            return domain
    return None


def detect_locale(event: InternalEvent, i18n: I18nConfig) -> str:
    """Resolve the locale to serve for ``event``.

    When ``localeDetection`` is disabled only the domain default and the
    configured default are considered; cookie and header are ignored.
    """
    domain_locale = detect_domain_locale(i18n, hostname=event.host)
    if i18n.locale_detection is False:
        return domain_locale.default_locale if domain_locale else i18n.default_locale

    cookie_locale = get_locale_from_cookie(event.cookies, i18n)
    preferred_locale = match_language(event.accept_language, i18n.locales)
    logger.debug(
        "Locale signals: cookie=%s preferred=%s default=%s domain=%s",
        cookie_locale,
        preferred_locale,
        i18n.default_locale,
        domain_locale.domain if domain_locale else None,
    )

    if domain_locale is not None:
        return domain_locale.default_locale
    return cookie_locale or preferred_locale or i18n.default_locale


def localize_path(event: InternalEvent, i18n: I18nConfig | None) -> str:
    """Return the locale-prefixed path used for internal rewrites.

    The raw path is returned untouched when i18n is disabled or the path
    already starts with a locale segment.
    """
    if i18n is None:
        return event.raw_path
    if is_localized_path(event.raw_path, i18n):
        return event.raw_path
    return f"/{detect_locale(event, i18n)}{event.raw_path}"


def handle_locale_redirect(
    event: InternalEvent,
    i18n: I18nConfig | None,
    base_path: str = "",
) -> Literal[False] | InternalResult:
    """Decide whether a request for the site root must be redirected.

    Only ``/`` is ever redirected, and only while locale detection is on.
    Two checks run in order:

    1. Domain canonicalisation: when the Host header matches a configured
       domain and the Accept-Language locale belongs to a configured domain,
       the client is sent to the domain owning that locale, without a locale
       segment when it is that domain's default.
    2. Locale canonicalisation: otherwise, when the detected locale differs
       from the default of the current domain (or of the configuration), the
       current URL is prefixed with ``/{locale}``.

    The first check is keyed on the Accept-Language locale alone while the
    second uses the full detection precedence.

    Returns:
        ``False`` when the request should proceed, otherwise a 307
        ``InternalResult``.
    """
    if i18n is None or i18n.locale_detection is False or event.raw_path != "/":
        return False

    preferred_locale = match_language(event.accept_language, i18n.locales)
    detected_locale = detect_locale(event, i18n)

    domain_locale = detect_domain_locale(i18n, hostname=event.host)
    preferred_domain = detect_domain_locale(i18n, detected_locale=preferred_locale)

    if domain_locale is not None and preferred_domain is not None:
        is_same_domain = preferred_domain.domain == domain_locale.domain
        is_preferred_default = preferred_domain.default_locale == preferred_locale
        if not is_same_domain or not is_preferred_default:
            scheme = "http" if preferred_domain.http else "https"
            segment = "" if is_preferred_default else preferred_locale
            location = f"{scheme}://{preferred_domain.domain}/{segment}"
            logger.info(
                "Redirecting to preferred domain %s (locale=%s)",
                preferred_domain.domain,
                preferred_locale,
            )
            return InternalResult.redirect(location, status_code=REDIRECT_STATUS)

    default_locale = domain_locale.default_locale if domain_locale is not None else i18n.default_locale

    if detected_locale.lower() != default_locale.lower():
        location = construct_next_url(event.url, f"/{detected_locale}", base_path)
        logger.info("Redirecting to detected locale %s", detected_locale)
        return InternalResult.redirect(location, status_code=REDIRECT_STATUS)

    return False
