"""
PMO Backend: FastAPI ASGI entry point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pmo.api.v1.router import api_router
from pmo.config import Settings, get_settings
from pmo.core.auth_middleware import JWTAuthMiddleware
from pmo.core.logging import RequestLoggingMiddleware, configure_logging
from pmo.core.responses import register_exception_handlers
from pmo.stores import Store, build_store

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: Store | None = None) -> FastAPI:
    """
    Composition root. The store is built here (or injected by tests), started
    by the lifespan and handed to handlers through app.state.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: store startup/shutdown."""
        if getattr(app.state, "store", None) is None:
            app.state.store = build_store(settings)
        await app.state.store.start()
        logger.info("PMO backend started (store=%s, env=%s)", type(app.state.store).__name__, settings.ENVIRONMENT)
        yield
        await app.state.store.close()
        logger.info("PMO backend stopped")

    app = FastAPI(
        title="PMO Backend",
        description="Project Management Office: construction and repair projects, contractors, documents and settings",
        version="0.1.0",
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
    )
    app.state.store = store

    # Last added runs first: CORS, then request logging, then auth
    app.add_middleware(JWTAuthMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    async def health():
        """Health check for load balancers and Docker."""
        return {"status": "ok", "service": "pmo-backend"}

    return app


app = create_app()
