"""Data structures shared across the generation workflow."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any


class MediaKind(StrEnum):
    """Kind of media the configured effect produces."""

    IMAGE = "image"
    VIDEO = "video"


class JobStatus(StrEnum):
    """Status tokens the remote API is known to report.

    The set is open: any other token is treated as still running.
    """

    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    ERROR = "error"


TERMINAL_FAILURE_STATUSES = frozenset({JobStatus.FAILED.value, JobStatus.ERROR.value})


class WorkflowStatus(StrEnum):
    """Status tokens reflected into the presentation layer."""

    UPLOADING = "UPLOADING"
    READY = "READY"
    SUBMITTING = "SUBMITTING"
    PROCESSING = "PROCESSING"
    COMPLETE = "COMPLETE"
    ERROR = "ERROR"

    def label(self, attempt: int | None = None) -> str:
        if self is WorkflowStatus.UPLOADING:
            return "UPLOADING..."
        if self is WorkflowStatus.SUBMITTING:
            return "SUBMITTING JOB..."
        if self is WorkflowStatus.PROCESSING:
            if attempt is None:
                return "JOB QUEUED..."
            return f"PROCESSING... ({attempt})"
        return self.value

    @property
    def is_busy(self) -> bool:
        return self in (
            WorkflowStatus.UPLOADING,
            WorkflowStatus.SUBMITTING,
            WorkflowStatus.PROCESSING,
        )


class RetrievalStrategy(StrEnum):
    PROXY = "proxy"
    DIRECT = "direct"


@dataclass(slots=True, frozen=True)
class SourceFile:
    """User-selected file awaiting upload."""

    filename: str
    content_type: str
    data: bytes


@dataclass(slots=True, frozen=True)
class UploadTarget:
    """Single-use write URL issued for one file name."""

    url: str
    filename: str


@dataclass(slots=True, frozen=True)
class ArtifactReference:
    """Publicly resolvable URL of uploaded or generated media."""

    url: str
    filename: str | None = None

    def __str__(self) -> str:
        return self.url


@dataclass(slots=True)
class GenerationJob:
    """Remote unit of work; only ever observed, never written."""

    job_id: str
    media_kind: MediaKind
    status: str
    result: Any = None


@dataclass(slots=True)
class JobResult:
    """Decoded terminal status body of a completed job."""

    job_id: str
    status: str
    result: Any = None
    error: str | None = None
    raw: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class DownloadedArtifact:
    """Outcome of a successful retrieval."""

    payload: bytes
    content_type: str | None
    extension: str
    filename: str
    strategy: RetrievalStrategy
    path: Path


@dataclass(slots=True, frozen=True)
class ResultMedia:
    """Rendered result: a video element or a cache-busted image element."""

    kind: MediaKind
    source: str
    url: str
