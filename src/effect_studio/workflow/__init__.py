"""User-action orchestration over the remote clients."""

from .orchestrator import WorkflowOrchestrator
from .results import extract_result_url
from .session import WorkflowSession
from .view import SessionView, WorkflowView

__all__ = [
    "SessionView",
    "WorkflowOrchestrator",
    "WorkflowSession",
    "WorkflowView",
    "extract_result_url",
]
