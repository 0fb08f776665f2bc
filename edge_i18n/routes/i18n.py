"""
i18n inspection routes

i18n_router  (prefix: /api/v1/i18n)
    GET    /config    → active i18n configuration (404 when i18n is disabled)
    POST   /resolve   → run the locale decision engine over a described request

Both endpoints read the configuration injected into ``app.state.i18n`` by
``create_app``.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from edge_i18n.exceptions import I18nNotConfiguredError
from edge_i18n.i18n.routing import detect_locale, handle_locale_redirect, localize_path
from edge_i18n.schemas.event import InternalEvent
from edge_i18n.schemas.i18n import I18nConfig

i18n_router = APIRouter(tags=["Internationalization"])
logger = logging.getLogger(__name__)


# ── Pydantic schemas ───────────────────────────────────────────────────────────


class ResolveRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    raw_path: str = Field("/", pattern=r"^/")
    url: str | None = None
    headers: dict[str, str] = Field(default_factory=dict)
    cookies: dict[str, str] = Field(default_factory=dict)


class RedirectInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status_code: int
    location: str


class ResolveResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    locale: str | None
    localized_path: str
    redirect: RedirectInfo | None = None


# ── Dependencies ───────────────────────────────────────────────────────────────


def get_i18n_config(request: Request) -> I18nConfig | None:
    return getattr(request.app.state, "i18n", None)


def get_base_path(request: Request) -> str:
    return getattr(request.app.state, "base_path", "")


# ── Routes ─────────────────────────────────────────────────────────────────────


@i18n_router.get("/config")
async def read_i18n_config(i18n: I18nConfig | None = Depends(get_i18n_config)) -> dict[str, Any]:
    """Return the active configuration with its camelCase keys."""
    if i18n is None:
        raise I18nNotConfiguredError()
    return i18n.model_dump(by_alias=True, exclude_none=True)


@i18n_router.post("/resolve", response_model=ResolveResponse, response_model_by_alias=True)
async def resolve_locale(
    payload: ResolveRequest,
    i18n: I18nConfig | None = Depends(get_i18n_config),
    base_path: str = Depends(get_base_path),
) -> ResolveResponse:
    """Show what the router would do with the described request."""
    headers = {key.lower(): value for key, value in payload.headers.items()}
    url = payload.url
    if url is None:
        host = headers.get("host", "localhost")
        url = f"https://{host}{payload.raw_path}"

    event = InternalEvent(raw_path=payload.raw_path, url=url, headers=headers, cookies=payload.cookies)

    redirect = handle_locale_redirect(event, i18n, base_path)
    redirect_info = None
    if redirect is not False:
        redirect_info = RedirectInfo(status_code=redirect.status_code, location=redirect.location or "")

    logger.debug("Resolved %s for host=%s", payload.raw_path, event.host)
    return ResolveResponse(
        locale=detect_locale(event, i18n) if i18n else None,
        localized_path=localize_path(event, i18n),
        redirect=redirect_info,
    )
