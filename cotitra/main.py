"""CoTiTra: FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cotitra.adapters.email.factory import build_email_transport
from cotitra.adapters.email.templates import EmailTemplates
from cotitra.adapters.persistence.database import engine
from cotitra.application.ports.email_port import EmailTransport
from cotitra.application.ports.template_port import EmailTemplateRenderer
from cotitra.config import settings
from cotitra.infrastructure.api.errors import register_exception_handlers
from cotitra.infrastructure.api.routes_auth import router as auth_router
from cotitra.infrastructure.api.routes_comments import router as comments_router
from cotitra.infrastructure.api.routes_health import router as health_router
from cotitra.infrastructure.api.routes_tickets import router as tickets_router
from cotitra.infrastructure.api.routes_users import router as users_router
from cotitra.infrastructure.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app(
    email_transport: EmailTransport | None = None,
    email_templates: EmailTemplateRenderer | None = None,
) -> FastAPI:
    configure_logging(settings)

    app = FastAPI(
        title="CoTiTra: shared-property maintenance tickets",
        description="Tickets, comments and member notifications",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Adapters shared by every request
    app.state.email_transport = email_transport or build_email_transport(settings)
    app.state.email_templates = email_templates or EmailTemplates()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.app_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router, prefix="/api")
    app.include_router(tickets_router, prefix="/api")
    app.include_router(comments_router, prefix="/api")
    app.include_router(users_router, prefix="/api")
    app.include_router(auth_router, prefix="/api")

    return app


app = create_app()
