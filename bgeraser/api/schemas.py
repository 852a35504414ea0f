from pydantic import BaseModel

from bgeraser.errors import ErrorKind
from bgeraser.processor.models import PipelineOutcome, PipelineState
from bgeraser.storage.artifact_store import ArtifactRecord


class ArtifactResponse(BaseModel):
    locator: str
    mimeType: str
    sizeBytes: int

    @classmethod
    def from_record(cls, record: ArtifactRecord | None) -> "ArtifactResponse | None":
        if record is None:
            return None
        return cls(
            locator=record.locator,
            mimeType=record.mime_type,
            sizeBytes=record.size_bytes,
        )


class PipelineOutcomeResponse(BaseModel):
    originalArtifact: ArtifactResponse | None = None
    processedArtifact: ArtifactResponse | None = None
    errorKind: ErrorKind | None = None
    errorDetail: str | None = None
    statusMessage: str | None = None
    failedAt: PipelineState | None = None

    @classmethod
    def from_outcome(cls, outcome: PipelineOutcome) -> "PipelineOutcomeResponse":
        return cls(
            originalArtifact=ArtifactResponse.from_record(outcome.original_artifact),
            processedArtifact=ArtifactResponse.from_record(outcome.processed_artifact),
            errorKind=outcome.error_kind,
            errorDetail=outcome.error_detail,
            statusMessage=outcome.status_message,
            failedAt=outcome.failed_at,
        )
