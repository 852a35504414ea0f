from dataclasses import dataclass

from bgeraser.codec.media_codec import EncodedImage
from bgeraser.errors import ErrorKind


@dataclass(frozen=True)
class RemovalResult:
    """Outcome of one removal attempt: an image or a classified failure."""

    image: EncodedImage | None = None
    error_kind: ErrorKind | None = None
    detail: str = ""

    @classmethod
    def success(cls, image: EncodedImage) -> "RemovalResult":
        return cls(image=image)

    @classmethod
    def failure(cls, error_kind: ErrorKind, detail: str) -> "RemovalResult":
        return cls(error_kind=error_kind, detail=detail)

    @property
    def succeeded(self) -> bool:
        return self.image is not None and self.error_kind is None
