"""Dependency wiring helpers."""

from fastapi import FastAPI

from .api.workflow_api import router as workflow_router
from .clients.polling import JobPoller
from .clients.retrieval import DownloadDirectory, RetrievalClient
from .clients.submission import SubmissionClient
from .clients.transfer import TransferClient
from .config import StudioConfig
from .workflow.orchestrator import WorkflowOrchestrator
from .workflow.session import WorkflowSession
from .workflow.view import SessionView


def build_orchestrator(config: StudioConfig, view: SessionView) -> WorkflowOrchestrator:
    """Assemble the remote clients around a fresh session."""
    transfer = TransferClient(
        upload_endpoint=config.endpoints.upload,
        cdn_domain=config.cdn_domain,
        timeout_seconds=config.request_timeout_seconds,
        id_length=config.upload_id_length,
    )
    retrieval = RetrievalClient(
        proxy_endpoint=config.endpoints.download_proxy,
        destination=DownloadDirectory(config.download_dir),
        timeout_seconds=config.request_timeout_seconds,
        id_length=config.download_id_length,
    )
    return WorkflowOrchestrator(
        transfer=transfer,
        submission=SubmissionClient(config=config),
        poller=JobPoller(config=config),
        retrieval=retrieval,
        view=view,
        session=WorkflowSession(),
    )


def include_routers(app: FastAPI, config: StudioConfig) -> None:
    """Mount routers and attach the workflow to application state."""
    view = SessionView()
    app.state.config = config
    app.state.view = view
    app.state.orchestrator = build_orchestrator(config, view)

    app.include_router(workflow_router)
