"""Remote MCP Server — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Dispatcher built once in create_app() and held on app.state
    - Global error handlers map McpError / Exception → JSON-RPC error envelopes
    - CORS configured from settings (not hardcoded)
    - Missing ARCHIVE_BASE_URL never blocks startup

Design Decisions:
    - create_app() factory over a bare module-level app: tests inject their own
      settings and dispatcher; `app` stays available for `uvicorn mcp_remote.main:app`
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mcp_remote.api.error_handlers import register_error_handlers
from mcp_remote.api.routes import health, mcp
from mcp_remote.config import Settings, get_settings
from mcp_remote.infrastructure.archive_client import ArchiveClient
from mcp_remote.infrastructure.observability import setup_logging
from mcp_remote.services.method_dispatch import Dispatcher, ServerMetadata
from mcp_remote.services.tools_registry import build_default_registry

logger = logging.getLogger(__name__)


def build_dispatcher(settings: Settings) -> Dispatcher:
    """Wire archive client → tool registry → dispatcher from settings."""
    archive_client = ArchiveClient(
        settings.archive_base_url,
        timeout_seconds=settings.archive_timeout_seconds,
    )
    return Dispatcher(
        build_default_registry(archive_client),
        ServerMetadata(
            protocol_version=settings.protocol_version,
            name=settings.server_name,
            version=settings.server_version,
        ),
    )


def create_app(
    settings: Settings | None = None, dispatcher: Dispatcher | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        if not settings.archive_base_url:
            logger.warning("ARCHIVE_BASE_URL not set — save_conversation will fail")
        logger.info(
            f"{settings.server_name} listening on http://{settings.host}:{settings.port}/mcp",
        )
        yield
        logger.info(f"{settings.server_name} shutting down")

    app = FastAPI(
        title=settings.server_name, version=settings.server_version, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.dispatcher = dispatcher or build_dispatcher(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(mcp.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the default app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
