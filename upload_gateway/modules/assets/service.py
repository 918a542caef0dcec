"""Image asset storage: validation, naming and streaming uploads to disk."""

from __future__ import annotations

import hashlib
import logging
import os
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Callable, Iterable, Optional
from urllib.parse import quote

from fastapi import UploadFile
from starlette.datastructures import UploadFile as FormFile

from upload_gateway.core.config import Settings
from .exceptions import (
    FileTooLargeError,
    InvalidFileTypeError,
    MissingFileError,
    StorageError,
    TooManyFilesError,
)
from .models import StoredAsset, UploadLimits

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_MAX_NAME_ATTEMPTS = 1000
DEFAULT_NAME = "upload"


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def validate_upload(
    content_type: Optional[str],
    declared_size: Optional[int],
    limits: UploadLimits,
) -> None:
    """Reject a file part that falls outside ``limits``.

    ``declared_size`` may be unknown until the part has been read; the limit
    is enforced again while streaming.
    """
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type not in limits.allowed_content_types:
        raise InvalidFileTypeError()
    if declared_size is not None and declared_size > limits.max_bytes:
        raise FileTooLargeError()


def select_single_file(parts: Iterable[Any]) -> Optional[UploadFile]:
    """Pick the one file part among the form values sent under the upload field.

    Plain text values are ignored; more than one file part is rejected.
    """
    files = [part for part in parts if isinstance(part, FormFile)]
    if len(files) > 1:
        raise TooManyFilesError()
    return files[0] if files else None


def sanitize_original_name(filename: Optional[str]) -> str:
    if not filename:
        return DEFAULT_NAME
    # strip client-side directories and NUL bytes
    name = os.path.basename(filename.replace("\\", "/")).replace("\0", "")
    return name or DEFAULT_NAME


def generate_file_name(original_name: Optional[str], timestamp_ms: Optional[int] = None) -> str:
    if timestamp_ms is None:
        timestamp_ms = now_ms()
    safe_name = _WHITESPACE.sub("-", sanitize_original_name(original_name))
    return f"{timestamp_ms}-{safe_name}"


def build_public_url(base_url: str, url_prefix: str, file_name: str) -> str:
    encoded = quote(file_name, safe="!*'()")
    return f"{base_url.rstrip('/')}/{url_prefix.strip('/')}/{encoded}"


@dataclass(slots=True)
class AssetStorage:
    storage_dir: Path
    limits: UploadLimits
    chunk_size: int = 1024 * 1024
    clock: Callable[[], int] = now_ms

    @classmethod
    def from_settings(cls, settings: Settings) -> "AssetStorage":
        return cls(
            storage_dir=settings.upload_dir,
            limits=UploadLimits(
                allowed_content_types=frozenset(settings.upload.allowed_content_types),
                max_bytes=settings.upload.max_bytes,
            ),
            chunk_size=settings.upload.chunk_size,
        )

    def ensure_storage(self) -> None:
        """Create the storage directory if it does not exist."""
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Failed creating uploads dir %s: %s", self.storage_dir, exc)
            raise StorageError(f"Cannot create storage directory {self.storage_dir}") from exc
        logger.info("Uploads directory ensured at %s", self.storage_dir)

    def resolve(self, file_name: str) -> Path:
        return self.storage_dir / file_name

    def _reserve(self, original_name: Optional[str]) -> tuple[str, Path, BinaryIO]:
        """Open a fresh file exclusively, advancing the timestamp on collision."""
        timestamp_ms = self.clock()
        for _ in range(_MAX_NAME_ATTEMPTS):
            file_name = generate_file_name(original_name, timestamp_ms)
            target_path = self.resolve(file_name)
            try:
                return file_name, target_path, target_path.open("xb")
            except FileExistsError:
                timestamp_ms += 1
            except OSError as exc:
                raise StorageError(f"Failed to open {target_path}: {exc}") from exc
        raise StorageError(f"No free file name for {original_name!r}")

    async def store_upload(self, upload: Optional[UploadFile]) -> StoredAsset:
        if upload is None:
            raise MissingFileError()

        try:
            validate_upload(upload.content_type, upload.size, self.limits)

            file_name, target_path, buffer = self._reserve(upload.filename)
            hasher = hashlib.sha256()
            total_size = 0
            try:
                with buffer:
                    while True:
                        chunk = await upload.read(self.chunk_size)
                        if not chunk:
                            break
                        total_size += len(chunk)
                        if total_size > self.limits.max_bytes:
                            raise FileTooLargeError()
                        buffer.write(chunk)
                        hasher.update(chunk)
            except FileTooLargeError:
                target_path.unlink(missing_ok=True)
                raise
            except OSError as exc:
                target_path.unlink(missing_ok=True)
                raise StorageError(f"Failed to write {target_path}: {exc}") from exc
        finally:
            await upload.close()

        asset = StoredAsset(
            file_name=file_name,
            storage_path=target_path,
            content_type=upload.content_type or "",
            size_bytes=total_size,
            checksum_sha256=hasher.hexdigest(),
            original_name=upload.filename,
        )
        logger.info(
            "Stored %s (%s, %d bytes, sha256=%s)",
            asset.file_name,
            asset.content_type,
            asset.size_bytes,
            asset.checksum_sha256,
        )
        return asset
