"""Pydantic schemas used across the project."""
from pydantic import BaseModel


class HealthResponse(BaseModel):
    ok: bool = True


class UploadResponse(BaseModel):
    url: str


class ErrorResponse(BaseModel):
    error: str
