from bgeraser.errors import BgEraserError, ErrorKind


class ImageRejectedError(BgEraserError):
    """Base exception for uploads rejected before any work is done."""


class MissingFileError(ImageRejectedError):
    """Raised when no file (or an empty file) was submitted."""

    kind = ErrorKind.MISSING_FILE


class UnsupportedTypeError(ImageRejectedError):
    """Raised when the declared MIME type is not accepted."""

    kind = ErrorKind.UNSUPPORTED_TYPE


class FileTooLargeError(ImageRejectedError):
    """Raised when the file exceeds the configured size ceiling."""

    kind = ErrorKind.TOO_LARGE
