from bgeraser.errors import BgEraserError, ErrorKind


class StorageWriteFailedError(BgEraserError):
    """Raised when an artifact cannot be written to its bucket."""

    kind = ErrorKind.STORAGE_WRITE_FAILED
