import logging

import uvicorn
from fastapi import FastAPI, Request

from edge_i18n.config import Settings, settings
from edge_i18n.exception_handlers import register_exception_handlers
from edge_i18n.i18n.provider import load_i18n_config
from edge_i18n.middleware.locale import LocaleRoutingMiddleware
from edge_i18n.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from edge_i18n.routes.i18n import i18n_router
from edge_i18n.schemas.i18n import I18nConfig

logger = logging.getLogger("edge_i18n")


def create_app(app_settings: Settings, i18n: I18nConfig | None) -> FastAPI:
    """Build the application around an already-loaded i18n configuration.

    ``i18n=None`` runs the router with locale handling disabled.
    """
    app = FastAPI(title=app_settings.app_name, version=app_settings.app_version, debug=app_settings.debug)
    app.state.i18n = i18n
    app.state.base_path = app_settings.base_path

    # Starlette runs the last added middleware first: logging wraps routing.
    app.add_middleware(LocaleRoutingMiddleware, i18n=i18n, base_path=app_settings.base_path)
    app.add_middleware(StructuredLoggingMiddleware)

    register_exception_handlers(app)
    app.include_router(i18n_router, prefix="/api/v1/i18n")

    @app.get("/health")
    async def health():
        return {"status": "ok", "i18n": i18n is not None}

    @app.get("/{path:path}")
    async def passthrough(request: Request, path: str):
        return {
            "path": f"/{path}",
            "locale": request.state.locale,
            "localized_path": request.state.localized_path,
        }

    return app


setup_structured_logging(log_level=settings.log_level, json_format=settings.log_json, log_file=settings.log_file)
app = create_app(settings, load_i18n_config(settings.i18n_config_path))


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
