"""Job status polling engine."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from ..config import StudioConfig
from ..errors import (
    JobProcessingError,
    OperationCancelledError,
    PollTimeoutError,
    StatusCheckError,
)
from ..models import TERMINAL_FAILURE_STATUSES, JobResult, JobStatus
from .payloads import JobStatusBody
from .submission import JSON_ACCEPT

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], Any]


@dataclass(slots=True)
class JobPoller:
    """Query a job until it completes, fails or the attempt budget runs out.

    Any status other than ``completed``, ``failed`` or ``error`` counts as still
    running, so new intermediate tokens from the server are tolerated.
    """

    config: StudioConfig
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep
    log: logging.Logger = field(default_factory=lambda: logger)

    def status_url(self, job_id: str) -> str:
        base = self.config.generation_endpoint.rstrip("/")
        return f"{base}/{self.config.user_id}/{job_id}/status"

    async def poll(
        self,
        job_id: str,
        *,
        on_progress: ProgressCallback | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> JobResult:
        max_attempts = self.config.max_poll_attempts
        url = self.status_url(job_id)

        for attempt in range(1, max_attempts + 1):
            _raise_if_cancelled(cancel_event, job_id)
            body = await self._fetch_status(url)
            self.log.info(
                "polling.status",
                extra={"job_id": job_id, "attempt": attempt, "status": body.status},
            )

            if body.status == JobStatus.COMPLETED:
                return JobResult(
                    job_id=job_id,
                    status=body.status,
                    result=body.result,
                    raw=body.model_dump(),
                )
            if body.status in TERMINAL_FAILURE_STATUSES:
                message = str(body.error) if body.error else "Job processing failed"
                raise JobProcessingError(message)

            if on_progress is not None:
                outcome = on_progress(attempt)
                if inspect.isawaitable(outcome):
                    await outcome
            await self.sleep(self.config.poll_interval_seconds)
            _raise_if_cancelled(cancel_event, job_id)

        self.log.warning("polling.timeout", extra={"job_id": job_id, "attempts": max_attempts})
        raise PollTimeoutError(f"Job timed out after {max_attempts} polls")

    async def _fetch_status(self, url: str) -> JobStatusBody:
        headers = {"Accept": JSON_ACCEPT}
        try:
            async with httpx.AsyncClient(timeout=self.config.request_timeout_seconds) as client:
                response = await client.get(url, headers=headers)
        except httpx.HTTPError as exc:
            raise StatusCheckError(f"Failed to check status: {exc}") from exc
        if not response.is_success:
            raise StatusCheckError(f"Failed to check status: {response.reason_phrase}")
        try:
            return JobStatusBody.model_validate(response.json())
        except ValueError as exc:
            raise StatusCheckError("Failed to check status: malformed response") from exc


def _raise_if_cancelled(cancel_event: asyncio.Event | None, job_id: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        logger.info("polling.cancelled", extra={"job_id": job_id})
        raise OperationCancelledError(f"Polling for job {job_id} was cancelled")
