"""Application configuration using pydantic settings with structured sections."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

MEBIBYTE = 1024 * 1024


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    reload: bool = False


class UploadSettings(BaseModel):
    max_bytes: int = Field(default=10 * MEBIBYTE, gt=0)
    chunk_size: int = Field(default=MEBIBYTE, gt=0)
    url_prefix: str = "/uploads"
    allowed_content_types: frozenset[str] = frozenset(
        {"image/png", "image/jpeg", "image/jpg", "image/webp"}
    )
    static_extensions: tuple[str, ...] = ("png", "jpg", "jpeg", "webp")


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    project_name: str = "Image Upload Gateway"
    log_level: str = "INFO"
    port: int = 3000

    uploads_dir: Path = Path("uploads")
    public_base_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("public_base_url", "render_base_url"),
    )
    cors_origins: Annotated[List[str], NoDecode] = ["*"]

    server: ServerSettings = ServerSettings()
    upload: UploadSettings = UploadSettings()

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            stripped = value.strip()
            if stripped.startswith("["):
                return json.loads(stripped)
            return [item.strip() for item in stripped.split(",") if item.strip()]
        return value

    @field_validator("public_base_url", mode="before")
    @classmethod
    def _blank_base_url(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def upload_dir(self) -> Path:
        return self.uploads_dir.expanduser().resolve()

    @property
    def max_upload_bytes(self) -> int:
        return self.upload.max_bytes

    @property
    def uploads_url_prefix(self) -> str:
        return self.upload.url_prefix


@lru_cache()
def get_settings() -> Settings:
    return Settings()
