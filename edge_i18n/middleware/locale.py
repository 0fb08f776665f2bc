"""
Locale Routing Middleware

Runs the locale decision engine in front of the application:

  - ``/`` requests may be answered directly with a 307 redirect to the
    preferred domain or to a locale-prefixed URL
  - every other request continues with ``request.state.locale`` and
    ``request.state.localized_path`` set for downstream handlers

The configuration is injected when the middleware is registered, so several
applications with different configurations can share a process.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from edge_i18n.i18n.routing import detect_locale, handle_locale_redirect, localize_path
from edge_i18n.schemas.event import InternalEvent, InternalResult
from edge_i18n.utils.url import has_base_path, strip_base_path

if TYPE_CHECKING:
    from collections.abc import Callable

    from starlette.requests import Request
    from starlette.types import ASGIApp

    from edge_i18n.schemas.i18n import I18nConfig

logger = logging.getLogger(__name__)


def build_internal_event(request: Request, base_path: str = "") -> InternalEvent:
    """Convert a Starlette request into the transport-neutral event."""
    return InternalEvent(
        raw_path=strip_base_path(request.url.path, base_path),
        url=str(request.url),
        headers={key.lower(): value for key, value in request.headers.items()},
        cookies=dict(request.cookies),
    )


def to_response(result: InternalResult) -> Response:
    """Render an ``InternalResult`` as a Starlette response."""
    return Response(
        content=result.body.getvalue(),
        status_code=result.status_code,
        headers=result.headers,
    )


class LocaleRoutingMiddleware(BaseHTTPMiddleware):
    """Redirect root requests to their canonical locale and tag the rest.

    Args:
        app:       The wrapped ASGI application.
        i18n:      Active configuration; None disables all locale handling.
        base_path: Application base path removed before deciding. Requests
                   outside it pass through without a locale.
    """

    def __init__(self, app: ASGIApp, i18n: I18nConfig | None = None, base_path: str = ""):
        super().__init__(app)
        self.i18n = i18n
        self.base_path = base_path

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not has_base_path(request.url.path, self.base_path):
            request.state.locale = None
            request.state.localized_path = request.url.path
            return await call_next(request)

        event = build_internal_event(request, self.base_path)

        redirect = handle_locale_redirect(event, self.i18n, self.base_path)
        if redirect is not False:
            logger.debug("Locale redirect %s -> %s", event.url, redirect.location)
            return to_response(redirect)

        request.state.locale = detect_locale(event, self.i18n) if self.i18n else None
        request.state.localized_path = localize_path(event, self.i18n)
        return await call_next(request)
