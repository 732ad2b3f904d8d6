"""Workflow orchestration: upload, generate, download and reset actions."""

from __future__ import annotations

import asyncio
import base64
import logging
from collections.abc import Iterable

from ..clients.polling import JobPoller
from ..clients.retrieval import RetrievalClient
from ..clients.submission import SubmissionClient
from ..clients.transfer import TransferClient
from ..errors import DownloadError, OperationCancelledError, StudioError
from ..models import SourceFile, WorkflowStatus
from .results import build_result_media, extract_result_url
from .session import WorkflowSession
from .view import DOWNLOAD_LABEL, GENERATE_LABEL, WorkflowView

logger = logging.getLogger(__name__)

INVALID_FILE_MESSAGE = "Please upload a valid image file (JPG, PNG)."
MISSING_UPLOAD_MESSAGE = "Please upload an image first."
GENERATE_AGAIN_LABEL = "Generate Again"
DOWNLOADING_LABEL = "Downloading..."

UPLOAD = "upload"
GENERATE = "generate"
DOWNLOAD = "download"


def preview_data_url(source: SourceFile) -> str:
    encoded = base64.b64encode(source.data).decode("ascii")
    return f"data:{source.content_type};base64,{encoded}"


class WorkflowOrchestrator:
    """Sequences the remote clients per user action and mirrors progress into the view.

    Every action family holds its own cancellation event. Starting an action
    sets the event of the previous action of the same family, and ``reset``
    sets all of them, so a superseded task stops at its next suspension point
    and never touches the view or the session again.
    """

    def __init__(
        self,
        *,
        transfer: TransferClient,
        submission: SubmissionClient,
        poller: JobPoller,
        retrieval: RetrievalClient,
        view: WorkflowView,
        session: WorkflowSession | None = None,
    ) -> None:
        self.transfer = transfer
        self.submission = submission
        self.poller = poller
        self.retrieval = retrieval
        self.view = view
        self.session = session or WorkflowSession()
        self._inflight: dict[str, asyncio.Event] = {}
        self._tasks: set[asyncio.Task[None]] = set()
        self._logger = logger

    # ------------------------------------------------------------------
    # Cancellation bookkeeping
    # ------------------------------------------------------------------
    def _begin(self, operation: str) -> asyncio.Event:
        self._supersede((operation,))
        event = asyncio.Event()
        self._inflight[operation] = event
        return event

    def _finish(self, operation: str, event: asyncio.Event) -> None:
        if self._inflight.get(operation) is event:
            del self._inflight[operation]

    def _supersede(self, operations: Iterable[str]) -> list[str]:
        superseded = []
        for operation in operations:
            event = self._inflight.pop(operation, None)
            if event is not None:
                event.set()
                superseded.append(operation)
                self._logger.info("workflow.superseded", extra={"operation": operation})
        return superseded

    def is_running(self, operation: str) -> bool:
        return operation in self._inflight

    # ------------------------------------------------------------------
    # Status handling
    # ------------------------------------------------------------------
    def _set_status(self, status: WorkflowStatus, *, attempt: int | None = None) -> None:
        text = status.label(attempt)
        self.session.status = status
        self.view.set_status(status, text)
        if status.is_busy:
            self.view.set_generate_control(enabled=False, label=text)
        elif status is WorkflowStatus.COMPLETE:
            self.view.set_generate_control(enabled=True, label=GENERATE_AGAIN_LABEL)
        else:
            self.view.set_generate_control(enabled=True, label=GENERATE_LABEL)

    def _show_error(self, message: str) -> None:
        self.view.alert(f"Error: {message}")
        self._set_status(WorkflowStatus.ERROR)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    async def handle_file_selected(self, source: SourceFile) -> None:
        if not source.content_type.startswith("image/"):
            self.view.alert(INVALID_FILE_MESSAGE)
            return

        if self._supersede((GENERATE,)):
            # the cancelled generation no longer owns the overlay
            self.view.hide_loading()
        cancel_event = self._begin(UPLOAD)
        self.view.show_preview(preview_data_url(source))
        self._set_status(WorkflowStatus.UPLOADING)
        try:
            artifact = await self.transfer.upload(source)
        except StudioError as exc:
            if cancel_event.is_set():
                return
            self._logger.error("workflow.upload.failed", extra={"error": str(exc)})
            self._show_error(str(exc))
            return
        finally:
            self._finish(UPLOAD, cancel_event)

        if cancel_event.is_set():
            self._logger.info("workflow.upload.discarded", extra={"url": artifact.url})
            return
        self.session.artifact = artifact
        self._set_status(WorkflowStatus.READY)

    def launch_generate(self) -> asyncio.Task[None] | None:
        """Schedule :meth:`handle_generate` on the running loop.

        Returns ``None`` (after alerting) when nothing has been uploaded yet.
        """
        if not self.session.has_artifact:
            self.view.alert(MISSING_UPLOAD_MESSAGE)
            return None
        task = asyncio.get_running_loop().create_task(self.handle_generate())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def handle_generate(self) -> None:
        artifact = self.session.artifact
        if artifact is None:
            self.view.alert(MISSING_UPLOAD_MESSAGE)
            return

        cancel_event = self._begin(GENERATE)
        self._supersede((DOWNLOAD,))

        def report_progress(attempt: int) -> None:
            if not cancel_event.is_set():
                self._set_status(WorkflowStatus.PROCESSING, attempt=attempt)

        try:
            self.session.result_url = None
            self.view.clear_result()
            self.view.show_loading()
            self._set_status(WorkflowStatus.SUBMITTING)
            job = await self.submission.submit(artifact.url)
            if cancel_event.is_set():
                raise OperationCancelledError(f"Job {job.job_id} superseded")

            self._set_status(WorkflowStatus.PROCESSING)
            outcome = await self.poller.poll(
                job.job_id, on_progress=report_progress, cancel_event=cancel_event
            )
            if cancel_event.is_set():
                raise OperationCancelledError(f"Job {job.job_id} superseded")

            result_url = extract_result_url(outcome.result)
            self._logger.info(
                "workflow.generate.completed", extra={"job_id": job.job_id, "result_url": result_url}
            )
            self.view.render_result(build_result_media(result_url))
            self.view.set_download_control(enabled=True, url=result_url)
            self.session.result_url = result_url
            self._set_status(WorkflowStatus.COMPLETE)
            self.view.hide_loading()
        except OperationCancelledError:
            self._logger.info("workflow.generate.cancelled")
        except StudioError as exc:
            if cancel_event.is_set():
                return
            self._logger.error("workflow.generate.failed", extra={"error": str(exc)})
            self.view.hide_loading()
            self._show_error(str(exc))
        finally:
            self._finish(GENERATE, cancel_event)

    async def handle_download(self) -> None:
        url = self.session.result_url
        if not url:
            return

        cancel_event = self._begin(DOWNLOAD)
        self.view.set_download_control(enabled=False, busy=True, label=DOWNLOADING_LABEL)
        try:
            await self.retrieval.download(url, cancel_event=cancel_event)
        except OperationCancelledError:
            self._logger.info("workflow.download.cancelled", extra={"url": url})
        except DownloadError as exc:
            if not cancel_event.is_set():
                self.view.alert(str(exc))
        except OSError as exc:
            if not cancel_event.is_set():
                self._logger.error("workflow.download.failed", extra={"url": url, "error": str(exc)})
                self.view.alert(f"Error: {exc}")
        finally:
            self._finish(DOWNLOAD, cancel_event)
            if not cancel_event.is_set():
                self.view.set_download_control(enabled=True, busy=False, label=DOWNLOAD_LABEL)

    def reset(self) -> None:
        self._supersede(tuple(self._inflight))
        self.session.reset()
        self.view.clear_preview()
        self.view.clear_result()
        self.view.hide_loading()
        self.view.set_status(None, "")
        self.view.set_download_control(enabled=False, busy=False)
        self.view.set_generate_control(enabled=False, label=GENERATE_LABEL)

