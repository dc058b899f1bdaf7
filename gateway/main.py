# gateway/main.py

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from . import __version__
from .config import Settings, resolve_path, settings as default_settings
from .middleware import setup_middleware
from .database.connection import MongoDB
from .routers import collections, system
from .utils.exceptions import register_exception_handlers
from .utils.responses import PrettyJSONResponse

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def mount_static(app: FastAPI, settings: Settings) -> None:
    """Serve /images and, when configured, a static site root"""
    images_path = resolve_path(settings.images_dir)
    if images_path.is_dir():
        app.mount("/images", StaticFiles(directory=images_path), name="images")
        logger.info(f"Serving images from {images_path}")
    else:
        logger.warning(f"Images directory not found, /images disabled: {images_path}")

    # Mounted last so API routes take precedence
    if settings.static_dir:
        static_path = resolve_path(settings.static_dir)
        if static_path.is_dir():
            app.mount("/", StaticFiles(directory=static_path), name="static")
            logger.info(f"Serving static files from {static_path}")
        else:
            logger.warning(f"Static directory not found: {static_path}")


def create_app(
    settings: Optional[Settings] = None, mongodb: Optional[MongoDB] = None
) -> FastAPI:
    """Build the gateway application around one owned MongoDB connection"""
    settings = settings or default_settings
    mongodb = mongodb or MongoDB(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: requests are only served once the connection is up
        logger.info("Starting collection gateway...")
        try:
            await mongodb.connect()
        except Exception as e:
            logger.error(f"Startup failed: {e}")
            raise
        app.state.mongodb = mongodb
        logger.info("Gateway startup completed")

        yield

        # Shutdown
        logger.info("Shutting down collection gateway...")
        await mongodb.disconnect()
        logger.info("Gateway shutdown completed")

    app = FastAPI(
        title="Collection Gateway",
        version=__version__,
        description="Generic REST endpoints over MongoDB collections",
        lifespan=lifespan,
        default_response_class=PrettyJSONResponse,
        docs_url=None if settings.is_production() else "/docs",
        redoc_url=None,
    )

    setup_middleware(app, settings)
    register_exception_handlers(app)

    app.include_router(system.router)
    app.include_router(collections.router)
    mount_static(app, settings)

    return app


setup_logging(default_settings)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=default_settings.api_host,
        port=default_settings.api_port,
        log_level=default_settings.log_level.lower(),
    )
