"""Reusable FastAPI dependencies."""
from typing import Optional

from fastapi import Request, UploadFile

from upload_gateway.core.config import Settings
from upload_gateway.modules.assets import AssetStorage, TooManyFilesError, select_single_file

UPLOAD_FIELD = "file"


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_asset_storage(request: Request) -> AssetStorage:
    return request.app.state.storage


async def get_upload_file(request: Request) -> Optional[UploadFile]:
    """The single file part of the ``file`` field, or None when no file was sent."""
    form = await request.form()
    parts = form.getlist(UPLOAD_FIELD)
    try:
        return select_single_file(parts)
    except TooManyFilesError:
        for part in parts:
            if hasattr(part, "close"):
                await part.close()
        raise


__all__ = [
    "UPLOAD_FIELD",
    "get_app_settings",
    "get_asset_storage",
    "get_upload_file",
]
