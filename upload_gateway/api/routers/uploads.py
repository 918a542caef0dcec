"""Image upload endpoint."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request, UploadFile

from upload_gateway.api.deps import get_app_settings, get_asset_storage, get_upload_file
from upload_gateway.core.config import Settings
from upload_gateway.modules.assets import AssetStorage, build_public_url
from upload_gateway.schemas import ErrorResponse, UploadResponse

router = APIRouter(tags=["uploads"])


def request_base_url(request: Request, settings: Settings) -> str:
    """Public base URL: the configured override, else the request's scheme and host."""
    if settings.public_base_url:
        return settings.public_base_url
    host = request.headers.get("host") or request.url.netloc
    return f"{request.url.scheme}://{host}"


@router.post(
    "/upload",
    response_model=UploadResponse,
    summary="Upload an image and get its public URL",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_image(
    request: Request,
    file: Optional[UploadFile] = Depends(get_upload_file),
    storage: AssetStorage = Depends(get_asset_storage),
    settings: Settings = Depends(get_app_settings),
) -> UploadResponse:
    asset = await storage.store_upload(file)
    url = build_public_url(request_base_url(request, settings), settings.uploads_url_prefix, asset.file_name)
    return UploadResponse(url=url)
