from bgeraser.errors import BgEraserError, ErrorKind


class RemovalFailedError(BgEraserError):
    """Raised by the pipeline when the removal client reports a failure."""

    def __init__(self, kind: ErrorKind, detail: str) -> None:
        super().__init__(detail)
        self.kind = kind
