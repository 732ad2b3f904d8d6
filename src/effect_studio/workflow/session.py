"""Per-page workflow state owned by the orchestrator."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import ArtifactReference, WorkflowStatus


@dataclass(slots=True)
class WorkflowSession:
    """Current uploaded artifact, result URL and status token."""

    artifact: ArtifactReference | None = None
    result_url: str | None = None
    status: WorkflowStatus | None = None

    @property
    def has_artifact(self) -> bool:
        return self.artifact is not None

    def reset(self) -> None:
        self.artifact = None
        self.result_url = None
        self.status = None
