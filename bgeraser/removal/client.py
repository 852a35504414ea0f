from bgeraser.codec.media_codec import EncodedImage
from bgeraser.errors import BgEraserError
from bgeraser.logging.logger import Log
from bgeraser.removal.base import BaseBackgroundRemover
from bgeraser.removal.models import RemovalResult


class BackgroundRemovalClient:
    """Runs the configured strategy once and folds its errors into a RemovalResult."""

    def __init__(self, remover: BaseBackgroundRemover) -> None:
        self._remover = remover

    @property
    def remover(self) -> BaseBackgroundRemover:
        return self._remover

    def remove(self, image: EncodedImage) -> RemovalResult:
        strategy = type(self._remover).__name__
        Log.info(f"Requesting background removal via {strategy} ({image.mime_type})")
        try:
            processed = self._remover.remove_background(image)
        except BgEraserError as exc:
            Log.error(f"Background removal failed: {exc}", kind=exc.kind.value, strategy=strategy)
            return RemovalResult.failure(exc.kind, str(exc))
        return RemovalResult.success(processed)
