"""Upload domain specific exceptions."""


class UploadError(Exception):
    """Base class for upload related domain errors."""

    message = "Upload failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def detail(self) -> str:
        return str(self)


class ClientInputError(UploadError):
    """Raised when the request itself is at fault."""


class MissingFileError(ClientInputError):
    """Raised when the multipart body carries no ``file`` part."""

    message = "No file provided"


class InvalidFileTypeError(ClientInputError):
    """Raised when the part's content type is outside the allow-list."""

    message = "Invalid file type. Only PNG, JPG, JPEG and WebP are allowed."


class FileTooLargeError(ClientInputError):
    """Raised when the payload exceeds the configured size limit."""

    message = "File too large"


class StorageError(UploadError):
    """Raised when the asset could not be written to disk."""

    message = "Failed to store file"


class TooManyFilesError(ClientInputError):
    """Raised when more than one file part arrives under the upload field."""

    message = "Only one file may be uploaded per request"
