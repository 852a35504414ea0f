from bgeraser.errors import BgEraserError, ErrorKind


class MalformedEncodingError(BgEraserError):
    """Raised when a data URI cannot be decoded back to bytes."""

    kind = ErrorKind.MALFORMED_ENCODING
