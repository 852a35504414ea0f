from abc import ABC, abstractmethod

from bgeraser.codec.media_codec import EncodedImage


class BaseBackgroundRemover(ABC):
    """Contract for all background removal strategies."""

    @abstractmethod
    def remove_background(self, image: EncodedImage) -> EncodedImage:
        """Return a copy of the image with its background removed.

        Args:
            image: The uploaded image as an encoded data URI payload.

        Returns:
            The processed image, encoded the same way.

        Raises:
            RemovalError: on any backend failure.
            MalformedEncodingError: if the input payload cannot be decoded.
        """
