"""
FastAPI application bootstrap with: \n
- Lifespan-managed `AppContext` (settings, database, store, gateways) \n
- Schema creation and optional demo seeding on startup \n
- CORS configured for the frontend \n
- Request logging middleware for ``/api`` routes \n
- A `PortfolioError` handler mapping application errors to HTTP statuses \n
- Optional static serving of the built SPA, with a catch-all for client-side routing \n

Environment contract (from `Settings`): \n
- FRONTEND_URL: allowed CORS origin. \n
- FRONTEND_DIST_DIR: prebuilt SPA directory; static serving is skipped when unset. \n
- SEED_ON_STARTUP: seed demo content into an empty store. \n
- LOG_LEVEL: root log level used by `run`. \n
"""

import asyncio
import logging
import os
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from portfolio_site.api.chat_api import router as chat_router
from portfolio_site.api.fast_api import router as content_router
from portfolio_site.app_context import AppContext
from portfolio_site.database.config.config import Settings, load_settings
from portfolio_site.database.core.seed import seed_database
from portfolio_site.errors import PortfolioError

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Parameters
    ----------
    settings : Settings, optional
        Loaded from the environment when omitted.
    context : AppContext, optional
        Pre-built collaborators (tests). When omitted, the lifespan builds one
        from `settings` and closes it on shutdown.
    """
    if settings is None:
        settings = context.settings if context is not None else load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        App lifespan manager.

        - On startup: build (or adopt) the `AppContext`, create tables, seed
          demo content if enabled, attach the context to `app.state`.
        - On shutdown: release HTTP clients and the connection pool, but only
          for a context this lifespan created.
        """
        owned = context is None
        app_context = AppContext.from_settings(settings) if owned else context
        await asyncio.to_thread(app_context.database.create_all)
        if settings.SEED_ON_STARTUP:
            await asyncio.to_thread(seed_database, app_context.store)
        app.state.context = app_context
        logger.info("Portfolio backend ready")
        try:
            yield
        finally:
            if owned:
                await app_context.aclose()
            logger.info("Portfolio backend shut down")

    app = FastAPI(title="Portfolio Site", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],  # Frontend origin
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_api_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        if request.url.path.startswith("/api"):
            duration = (time.perf_counter() - start) * 1000
            logger.info("%s %s %s in %dms", request.method, request.url.path, response.status_code, duration)
        return response

    @app.exception_handler(PortfolioError)
    async def portfolio_error_handler(request: Request, exc: PortfolioError):
        if exc.status_code >= 500:
            logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc,
                         exc_info=exc.__cause__ or exc)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.public_message})

    app.include_router(content_router)
    app.include_router(chat_router)

    dist_dir = settings.FRONTEND_DIST_DIR
    if dist_dir and os.path.isdir(dist_dir):
        assets_dir = os.path.join(dist_dir, "assets")
        if os.path.isdir(assets_dir):
            app.mount("/assets", StaticFiles(directory=assets_dir), name="static")

        # Catch-all for client-side routing (must come after the API routers)
        @app.get("/", include_in_schema=False)
        @app.get("/{full_path:path}", include_in_schema=False)
        async def serve_spa(full_path: str = ""):
            """Serve index.html for every non-API path."""
            if full_path.startswith("api/"):
                return JSONResponse(status_code=404, content={"detail": "Not Found"})
            return FileResponse(os.path.join(dist_dir, "index.html"))

    return app


def run() -> None:
    """Console entry point: configure logging and serve with uvicorn."""
    import uvicorn

    settings = load_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(settings), host="0.0.0.0", port=int(os.environ.get("PORT", "8000")))


if __name__ == "__main__":
    run()
