"""HTTP routes driving the generation workflow."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile, status

from ..models import SourceFile
from ..workflow.orchestrator import WorkflowOrchestrator
from ..workflow.view import SessionView
from .schemas import WorkflowSnapshot

router = APIRouter(prefix="/api/workflow", tags=["workflow"])
logger = logging.getLogger(__name__)


def get_orchestrator(request: Request) -> WorkflowOrchestrator:
    """Fetch the orchestrator from application state."""
    try:
        return request.app.state.orchestrator  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("WorkflowOrchestrator is not configured") from exc


def get_view(request: Request) -> SessionView:
    try:
        return request.app.state.view  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("SessionView is not configured") from exc


@router.get("/state", response_model=WorkflowSnapshot)
async def read_state(view: SessionView = Depends(get_view)) -> WorkflowSnapshot:
    return WorkflowSnapshot.model_validate(view.snapshot())


@router.post("/upload", response_model=WorkflowSnapshot)
async def upload_file(
    file: UploadFile = File(...),
    orchestrator: WorkflowOrchestrator = Depends(get_orchestrator),
    view: SessionView = Depends(get_view),
) -> WorkflowSnapshot:
    """Select a file; the upload runs before the response is returned."""
    source = SourceFile(
        filename=file.filename or "upload",
        content_type=file.content_type or "application/octet-stream",
        data=await file.read(),
    )
    logger.info(
        "workflow.api.upload",
        extra={"file_name": source.filename, "content_type": source.content_type},
    )
    await orchestrator.handle_file_selected(source)
    return WorkflowSnapshot.model_validate(view.snapshot())


@router.post(
    "/generate",
    response_model=WorkflowSnapshot,
    status_code=status.HTTP_202_ACCEPTED,
)
async def generate(
    orchestrator: WorkflowOrchestrator = Depends(get_orchestrator),
    view: SessionView = Depends(get_view),
) -> WorkflowSnapshot:
    """Start generation in the background; poll ``/state`` for progress."""
    orchestrator.launch_generate()
    return WorkflowSnapshot.model_validate(view.snapshot())


@router.post("/download", response_model=WorkflowSnapshot)
async def download(
    orchestrator: WorkflowOrchestrator = Depends(get_orchestrator),
    view: SessionView = Depends(get_view),
) -> WorkflowSnapshot:
    await orchestrator.handle_download()
    return WorkflowSnapshot.model_validate(view.snapshot())


@router.post("/reset", response_model=WorkflowSnapshot)
async def reset(
    orchestrator: WorkflowOrchestrator = Depends(get_orchestrator),
    view: SessionView = Depends(get_view),
) -> WorkflowSnapshot:
    orchestrator.reset()
    return WorkflowSnapshot.model_validate(view.snapshot())
