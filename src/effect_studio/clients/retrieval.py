"""Layered retrieval of generated artifacts.

Strategies run in order and stop at the first success:

1. ``proxy`` - fetch through the download proxy, which retrieves the artifact
   server-side;
2. ``direct`` - fetch the artifact URL itself with a cache-busting parameter;
3. manual - nothing automated is left, :class:`DownloadError` carries the
   instruction to save the displayed media by hand.

Exactly one file is written on success and none on failure.
"""

from __future__ import annotations

import asyncio
import logging
import re
import time
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from ..errors import DownloadError, OperationCancelledError
from ..identifiers import DOWNLOAD_ID_LENGTH, generate_id
from ..models import DownloadedArtifact, RetrievalStrategy

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "png"
MANUAL_SAVE_MESSAGE = (
    "Download failed due to cross-origin restrictions. "
    'Please open the result, right-click it and select "Save As".'
)

_URL_EXTENSION = re.compile(r"\.(jpe?g|png|webp|mp4|webm)", re.IGNORECASE)


def infer_extension(url: str, content_type: str | None) -> str:
    """Pick a file extension, preferring the declared content type."""
    if content_type:
        lowered = content_type.lower()
        if "jpeg" in lowered or "jpg" in lowered:
            return "jpg"
        if "png" in lowered:
            return "png"
    match = _URL_EXTENSION.search(url)
    if match is None:
        return DEFAULT_EXTENSION
    return match.group(1).lower().replace("jpeg", "jpg")


def cache_busted(url: str, *, now_ms: int | None = None) -> str:
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}t={stamp}"


class _StrategyFailed(Exception):
    pass


@dataclass(slots=True)
class DownloadDirectory:
    """Local destination for retrieved artifacts."""

    root: Path

    def save(self, payload: bytes, filename: str) -> Path:
        self.root.mkdir(parents=True, exist_ok=True)
        target = self.root / filename
        target.write_bytes(payload)
        return target


@dataclass(slots=True)
class RetrievalClient:
    proxy_endpoint: str
    destination: DownloadDirectory
    timeout_seconds: float = 30.0
    id_length: int = DOWNLOAD_ID_LENGTH
    log: logging.Logger = field(default_factory=lambda: logger)

    async def download(
        self,
        artifact_url: str,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> DownloadedArtifact:
        strategies = (
            (RetrievalStrategy.PROXY, self._fetch_via_proxy),
            (RetrievalStrategy.DIRECT, self._fetch_direct),
        )
        for strategy, fetch in strategies:
            _raise_if_cancelled(cancel_event, artifact_url)
            try:
                payload, content_type = await fetch(artifact_url)
            except _StrategyFailed as exc:
                self.log.warning(
                    "retrieval.strategy.failed",
                    extra={"strategy": strategy.value, "url": artifact_url, "reason": str(exc)},
                )
                continue

            _raise_if_cancelled(cancel_event, artifact_url)
            extension = infer_extension(artifact_url, content_type)
            filename = f"result_{generate_id(self.id_length)}.{extension}"
            try:
                path = self.destination.save(payload, filename)
            except OSError as exc:
                raise DownloadError(f"Failed to save {filename}: {exc}") from exc
            self.log.info(
                "retrieval.saved",
                extra={"strategy": strategy.value, "path": str(path), "size_bytes": len(payload)},
            )
            return DownloadedArtifact(
                payload=payload,
                content_type=content_type,
                extension=extension,
                filename=filename,
                strategy=strategy,
                path=path,
            )

        raise DownloadError(MANUAL_SAVE_MESSAGE)

    async def _fetch_via_proxy(self, artifact_url: str) -> tuple[bytes, str | None]:
        return await self._fetch(self.proxy_endpoint, params={"url": artifact_url})

    async def _fetch_direct(self, artifact_url: str) -> tuple[bytes, str | None]:
        return await self._fetch(cache_busted(artifact_url))

    async def _fetch(
        self, url: str, *, params: dict[str, str] | None = None
    ) -> tuple[bytes, str | None]:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, follow_redirects=True
            ) as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise _StrategyFailed(str(exc)) from exc
        if not response.is_success:
            raise _StrategyFailed(f"status {response.status_code}")
        return response.content, response.headers.get("content-type")


def _raise_if_cancelled(cancel_event: asyncio.Event | None, url: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise OperationCancelledError(f"Download of {url} was cancelled")
