import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from upload_gateway import __version__
from upload_gateway.api import create_api_router
from upload_gateway.api.errors import register_exception_handlers
from upload_gateway.api.static import AssetFiles
from upload_gateway.core.config import Settings, get_settings
from upload_gateway.modules.assets import AssetStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Serving %s at %s", app.state.storage.storage_dir, app.state.settings.uploads_url_prefix
    )
    yield


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    storage = AssetStorage.from_settings(settings)
    storage.ensure_storage()

    app = FastAPI(
        title=settings.project_name,
        description="Accepts image uploads, stores them on disk and returns their public URL",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(create_api_router())
    app.mount(
        settings.uploads_url_prefix,
        AssetFiles(directory=storage.storage_dir, extensions=settings.upload.static_extensions),
        name="uploads",
    )

    return app
