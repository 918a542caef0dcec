"""Domain models for stored image assets."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import FrozenSet, Optional


@dataclass(slots=True)
class StoredAsset:
    file_name: str
    storage_path: Path
    content_type: str
    size_bytes: int
    checksum_sha256: str
    original_name: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True, slots=True)
class UploadLimits:
    """Constraints an incoming file part has to satisfy."""

    allowed_content_types: FrozenSet[str]
    max_bytes: int
