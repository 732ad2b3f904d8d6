"""Generation job submission."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from ..config import StudioConfig
from ..errors import SubmissionError
from ..models import GenerationJob
from .payloads import JobHandle, build_submission

logger = logging.getLogger(__name__)

JSON_ACCEPT = "application/json, text/plain, */*"


@dataclass(slots=True)
class SubmissionClient:
    """Submit one generation job for an uploaded artifact."""

    config: StudioConfig
    log: logging.Logger = field(default_factory=lambda: logger)

    async def submit(self, artifact_url: str) -> GenerationJob:
        submission = build_submission(self.config, artifact_url)
        endpoint = self.config.generation_endpoint
        headers = {"Accept": JSON_ACCEPT, "Content-Type": "application/json"}

        try:
            async with httpx.AsyncClient(timeout=self.config.request_timeout_seconds) as client:
                response = await client.post(endpoint, headers=headers, json=submission.to_payload())
        except httpx.HTTPError as exc:
            raise SubmissionError(f"Failed to submit job: {exc}") from exc
        if not response.is_success:
            raise SubmissionError(f"Failed to submit job: {response.reason_phrase}")

        try:
            handle = JobHandle.model_validate(response.json())
        except ValueError as exc:
            raise SubmissionError("Failed to submit job: malformed response") from exc

        self.log.info(
            "submission.accepted",
            extra={"job_id": handle.job_id, "status": handle.status, "media_kind": submission.kind.value},
        )
        return GenerationJob(job_id=handle.job_id, media_kind=submission.kind, status=handle.status)
