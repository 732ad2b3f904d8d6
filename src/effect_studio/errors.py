"""Error taxonomy for the generation workflow."""

from __future__ import annotations

__all__ = [
    "StudioError",
    "UploadTargetError",
    "TransferError",
    "SubmissionError",
    "StatusCheckError",
    "JobProcessingError",
    "PollTimeoutError",
    "MissingResultError",
    "DownloadError",
    "OperationCancelledError",
]


class StudioError(Exception):
    """Base class for workflow errors surfaced to the user."""


class UploadTargetError(StudioError):
    """Raised when the remote API does not issue a write target."""


class TransferError(StudioError):
    """Raised when writing the file bytes to the target fails."""


class SubmissionError(StudioError):
    """Raised when a generation job cannot be submitted."""


class StatusCheckError(StudioError):
    """Raised when a job status request is not successful."""


class JobProcessingError(StudioError):
    """Raised when the remote job reports ``failed`` or ``error``."""


class PollTimeoutError(StudioError):
    """Raised when the polling budget is exhausted without a terminal status."""


class MissingResultError(StudioError):
    """Raised when a completed job carries no media URL."""


class DownloadError(StudioError):
    """Raised after every automated retrieval strategy has failed."""


class OperationCancelledError(Exception):
    """Raised inside an operation superseded by a reset or a newer action.

    Not a :class:`StudioError`: cancellation is never reported to the user.
    """
