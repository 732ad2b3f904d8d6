"""Clients for the remote effects API."""

from .polling import JobPoller
from .retrieval import DownloadDirectory, RetrievalClient
from .submission import SubmissionClient
from .transfer import TransferClient

__all__ = [
    "DownloadDirectory",
    "JobPoller",
    "RetrievalClient",
    "SubmissionClient",
    "TransferClient",
]
