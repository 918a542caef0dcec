from fastapi import APIRouter

from upload_gateway.api.routers import health, uploads


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(health.router)
    router.include_router(uploads.router)
    return router


__all__ = [
    "create_api_router",
]
