import os
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from app.config import Settings, configure_logging
from app.context import PanelContext
from app.errors import PanelError

# Router Imports
from routes import auth, servers, catalog, backups, operations, players, economy, integrations, audit, system, dashboard

logger = logging.getLogger("app")

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "views", "static")


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"Invalid request: {field}: {first.get('msg')}" if field else f"Invalid request: {first.get('msg')}"


def create_app(settings: Optional[Settings] = None, context: Optional[PanelContext] = None, **context_kwargs) -> FastAPI:
    """
    Build the panel. Extra keyword arguments (store, shell, ai, seed) go to PanelContext.
    """
    settings = settings or (context.settings if context else Settings())
    configure_logging(settings.log_level)
    context = context or PanelContext(settings, **context_kwargs)

    app = FastAPI(title="Lonely Control Panel", version=settings.app_version)
    app.state.panel = context

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # Include API Routers
    app.include_router(dashboard.router)
    app.include_router(auth.router)
    app.include_router(servers.router)
    app.include_router(catalog.router)
    app.include_router(backups.router)
    app.include_router(operations.router)
    app.include_router(players.router)
    app.include_router(economy.router)
    app.include_router(integrations.router)
    app.include_router(audit.router)
    app.include_router(system.router)

    @app.exception_handler(PanelError)
    async def _panel_error_handler(request: Request, exc: PanelError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_exc_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"message": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def _unhandled_exc_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    return app


app = create_app()

if __name__ == "__main__":
    host = app.state.panel.settings.host
    port = app.state.panel.settings.port

    uvicorn.run(
        app,
        host=host,
        port=port,
        reload=False,
        log_level="info"
    )
