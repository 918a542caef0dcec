"""Image asset domain exports."""

from .exceptions import (
    ClientInputError,
    FileTooLargeError,
    InvalidFileTypeError,
    MissingFileError,
    StorageError,
    TooManyFilesError,
    UploadError,
)
from .models import StoredAsset, UploadLimits
from .service import (
    AssetStorage,
    build_public_url,
    generate_file_name,
    select_single_file,
    validate_upload,
)

__all__ = [
    "AssetStorage",
    "ClientInputError",
    "FileTooLargeError",
    "InvalidFileTypeError",
    "MissingFileError",
    "StorageError",
    "StoredAsset",
    "TooManyFilesError",
    "UploadError",
    "UploadLimits",
    "build_public_url",
    "generate_file_name",
    "select_single_file",
    "validate_upload",
]
