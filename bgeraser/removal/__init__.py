from bgeraser.removal.base import BaseBackgroundRemover
from bgeraser.removal.client import BackgroundRemovalClient
from bgeraser.removal.factory import RemoverFactory
from bgeraser.removal.models import RemovalResult

__all__ = [
    "BackgroundRemovalClient",
    "BaseBackgroundRemover",
    "RemovalResult",
    "RemoverFactory",
]
