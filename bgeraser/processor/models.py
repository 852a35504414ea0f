from dataclasses import dataclass
from enum import Enum

from bgeraser.errors import ErrorKind
from bgeraser.storage.artifact_store import ArtifactRecord


class PipelineState(str, Enum):
    """States of a single orchestration run. FAILED absorbs from any other."""

    START = "start"
    VALIDATED = "validated"
    ORIGINAL_PERSISTED = "original_persisted"
    REMOVAL_REQUESTED = "removal_requested"
    REMOVAL_COMPLETED = "removal_completed"
    RESULT_PERSISTED = "result_persisted"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class PipelineOutcome:
    """Sole return value of an orchestration run.

    Exactly one of processed_artifact and error_kind is set. original_artifact
    may accompany an error when the upload was saved before the failure.
    """

    original_artifact: ArtifactRecord | None = None
    processed_artifact: ArtifactRecord | None = None
    error_kind: ErrorKind | None = None
    error_detail: str | None = None
    status_message: str | None = None
    failed_at: PipelineState | None = None

    @property
    def succeeded(self) -> bool:
        return self.error_kind is None
