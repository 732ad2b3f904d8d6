"""Two-phase upload: obtain a write target, then PUT the file bytes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from ..errors import TransferError, UploadTargetError
from ..identifiers import UPLOAD_ID_LENGTH, generate_id
from ..models import ArtifactReference, SourceFile, UploadTarget

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "jpg"


@dataclass(slots=True)
class TransferClient:
    """Upload source media and compose its public CDN URL."""

    upload_endpoint: str
    cdn_domain: str
    timeout_seconds: float = 30.0
    id_length: int = UPLOAD_ID_LENGTH
    log: logging.Logger = field(default_factory=lambda: logger)

    async def upload(self, source: SourceFile) -> ArtifactReference:
        filename = f"{generate_id(self.id_length)}.{derive_extension(source.filename)}"
        target = await self.request_target(filename)
        await self.transfer(target, source)

        artifact = ArtifactReference(url=f"{self.cdn_domain.rstrip('/')}/{filename}", filename=filename)
        self.log.info(
            "transfer.uploaded",
            extra={"file_name": filename, "size_bytes": len(source.data), "url": artifact.url},
        )
        return artifact

    async def request_target(self, filename: str) -> UploadTarget:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.get(self.upload_endpoint, params={"fileName": filename})
        except httpx.HTTPError as exc:
            raise UploadTargetError(f"Failed to get signed URL: {exc}") from exc
        if not response.is_success:
            raise UploadTargetError(f"Failed to get signed URL: {response.reason_phrase}")

        url = response.text.strip()
        if not url:
            raise UploadTargetError("Failed to get signed URL: empty response")
        self.log.info("transfer.target.issued", extra={"file_name": filename})
        return UploadTarget(url=url, filename=filename)

    async def transfer(self, target: UploadTarget, source: SourceFile) -> None:
        headers = {"Content-Type": source.content_type}
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.put(target.url, content=source.data, headers=headers)
        except httpx.HTTPError as exc:
            raise TransferError(f"Failed to upload file: {exc}") from exc
        if not response.is_success:
            raise TransferError(f"Failed to upload file: {response.reason_phrase}")


def derive_extension(filename: str) -> str:
    """Return the text after the last dot, or :data:`DEFAULT_EXTENSION`."""
    _, dot, suffix = filename.rpartition(".")
    if not dot or not suffix:
        return DEFAULT_EXTENSION
    return suffix
