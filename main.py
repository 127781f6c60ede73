import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.infrastructure.database import engine, initialize_database
from app.infrastructure.scheduler import shutdown_scheduler, start_scheduler
from app.interfaces.api.routes import register_routes

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and start the notification scheduler; stop both on exit."""

    initialize_database()
    start_scheduler()
    yield
    shutdown_scheduler()
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="Inactivity Notifications", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
