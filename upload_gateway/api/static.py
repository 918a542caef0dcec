"""Static serving for stored assets."""
from __future__ import annotations

import mimetypes
import os
from typing import Iterable, Optional

from starlette.staticfiles import StaticFiles

# Older interpreters ship without a .webp mapping
mimetypes.add_type("image/webp", ".webp")


class AssetFiles(StaticFiles):
    """StaticFiles without directory indexes that retries bare names with image extensions."""

    def __init__(self, *, directory: str | os.PathLike[str], extensions: Iterable[str] = ()) -> None:
        super().__init__(directory=directory, html=False)
        self.extensions = tuple(ext.lstrip(".") for ext in extensions)

    def lookup_path(self, path: str) -> tuple[str, Optional[os.stat_result]]:
        full_path, stat_result = super().lookup_path(path)
        if stat_result is not None or not path or path.endswith("/"):
            return full_path, stat_result
        for extension in self.extensions:
            candidate_path, candidate_stat = super().lookup_path(f"{path}.{extension}")
            if candidate_stat is not None:
                return candidate_path, candidate_stat
        return full_path, stat_result
