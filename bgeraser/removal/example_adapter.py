"""Example removal strategy.

Use this module as a reference when implementing new removal strategies.
Implement BaseBackgroundRemover and register the strategy in RemoverFactory.
"""

from bgeraser.codec.media_codec import EncodedImage
from bgeraser.removal.base import BaseBackgroundRemover


class ExampleRemover(BaseBackgroundRemover):
    """Returns the input image unchanged.

    No network calls. Useful for local development and tests of the rest of
    the pipeline.
    """

    def remove_background(self, image: EncodedImage) -> EncodedImage:
        return image
