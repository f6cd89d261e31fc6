"""FastAPI application entry point."""
import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI

from afterwork.config import Settings
from afterwork.context import build_context
from afterwork.database import Base
from afterwork.scheduler import start_scheduler, stop_scheduler
from afterwork.services.notifier import Notifier

# Import routers
from afterwork.routers import incoming, health, users, sweep

# Import all models so Base.metadata knows about them
from afterwork.models.user import UserRecord      # noqa: F401
from afterwork.models.health import HealthCheck   # noqa: F401

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def create_app(settings: Optional[Settings] = None, notifier: Optional[Notifier] = None) -> FastAPI:
    """Build the app and its service context from ``settings``."""
    settings = settings or Settings()
    ctx = build_context(settings, notifier=notifier)

    app = FastAPI(
        title="AfterWork Buddy",
        description="Reminds chat users to mute work channels during work hours and unmute them after",
        version="0.1.0",
    )
    app.state.context = ctx
    app.state.scheduler = None

    # Register routers
    app.include_router(incoming.router, tags=["Bot"])
    app.include_router(health.router, tags=["Health"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(sweep.router, prefix="/api", tags=["Sweep"])

    @app.on_event("startup")
    def on_startup():
        """Create tables for SQLite and start the sweep triggers."""
        if settings.DATABASE_URL.startswith("sqlite"):
            Base.metadata.create_all(bind=ctx.engine)
        app.state.scheduler = start_scheduler(ctx)
        logger.info("AfterWork Buddy running on port %d", settings.PORT)
        logger.info("Incoming Webhook Endpoint: %s", settings.BOT_INCOMING_URL)

    @app.on_event("shutdown")
    def on_shutdown():
        stop_scheduler(app.state.scheduler)
        ctx.close()

    return app


def run() -> None:
    settings = Settings()
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run("afterwork.main:create_app", factory=True, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
