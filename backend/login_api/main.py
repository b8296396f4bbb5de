import logging
import sys

from fastapi import FastAPI

from .core.config import get_settings
from .core.middleware import register_middleware
from .routers import api_router
from .services import database

log = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s – %(message)s",
        stream=sys.stdout,
    )


def create_app() -> FastAPI:
    app = FastAPI(title="Login API")
    register_middleware(app)
    app.include_router(api_router)

    # mongo client lifecycle -------------------------------------------
    @app.on_event("startup")
    async def _connect() -> None:
        configure_logging()
        database.connect()
        log.info("login api ready")

    @app.on_event("shutdown")
    async def _disconnect() -> None:
        database.disconnect()

    return app


app = create_app()
