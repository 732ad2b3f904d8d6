"""Effect Studio client workflow.

Uploads a source image, submits a generation job to the remote effects API,
polls it to completion and retrieves the produced artifact.
"""

from .workflow.orchestrator import WorkflowOrchestrator
from .workflow.session import WorkflowSession

__all__ = ["WorkflowOrchestrator", "WorkflowSession"]
