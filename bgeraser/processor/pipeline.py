from abc import ABC, abstractmethod
from dataclasses import dataclass

from bgeraser.codec.media_codec import EncodedImage
from bgeraser.processor.models import PipelineState
from bgeraser.removal.models import RemovalResult
from bgeraser.storage.artifact_store import ArtifactRecord
from bgeraser.validation.models import UploadRequest


@dataclass(slots=True)
class PipelineContext:
    upload: UploadRequest | None
    state: PipelineState = PipelineState.START
    original_artifact: ArtifactRecord | None = None
    encoded_original: EncodedImage | None = None
    removal_result: RemovalResult | None = None
    processed_artifact: ArtifactRecord | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
