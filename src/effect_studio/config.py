"""Application configuration builder."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .identifiers import DOWNLOAD_ID_LENGTH, UPLOAD_ID_LENGTH
from .models import MediaKind

VIDEO_MODEL = "video-effects"


@dataclass(slots=True)
class Endpoints:
    upload: str
    image_gen: str
    video_gen: str
    download_proxy: str


@dataclass(slots=True)
class StudioConfig:
    effect_id: str
    model: str
    tool_type: str
    user_id: str
    endpoints: Endpoints
    cdn_domain: str
    download_dir: Path
    poll_interval_seconds: float = 2.0
    max_poll_attempts: int = 60
    request_timeout_seconds: float = 30.0
    upload_id_length: int = UPLOAD_ID_LENGTH
    download_id_length: int = DOWNLOAD_ID_LENGTH
    log_level: str = "INFO"

    @property
    def media_kind(self) -> MediaKind:
        return MediaKind.VIDEO if self.model == VIDEO_MODEL else MediaKind.IMAGE

    @property
    def generation_endpoint(self) -> str:
        """Endpoint used both for submission and for status polling."""
        if self.media_kind is MediaKind.VIDEO:
            return self.endpoints.video_gen
        return self.endpoints.image_gen


def load_config() -> StudioConfig:
    """Load configuration from environment (defaults target the public API)."""
    api_base = os.getenv("STUDIO_API_BASE_URL", "https://api.chromastudio.ai").rstrip("/")
    endpoints = Endpoints(
        upload=os.getenv("STUDIO_UPLOAD_ENDPOINT", f"{api_base}/get-emd-upload-url"),
        image_gen=os.getenv("STUDIO_IMAGE_GEN_ENDPOINT", f"{api_base}/image-gen"),
        video_gen=os.getenv("STUDIO_VIDEO_GEN_ENDPOINT", f"{api_base}/video-gen"),
        download_proxy=os.getenv("STUDIO_DOWNLOAD_PROXY_ENDPOINT", f"{api_base}/download-proxy"),
    )

    download_dir = Path(os.getenv("STUDIO_DOWNLOAD_DIR", "downloads"))

    return StudioConfig(
        effect_id=os.getenv("STUDIO_EFFECT_ID", "removeMustacheFromPhoto"),
        model=os.getenv("STUDIO_MODEL", "image-effects"),
        tool_type=os.getenv("STUDIO_TOOL_TYPE", "image-effects"),
        user_id=os.getenv("STUDIO_USER_ID", "DObRu1vyStbUynoQmTcHBlhs55z2"),
        endpoints=endpoints,
        cdn_domain=os.getenv("STUDIO_CDN_DOMAIN", "https://contents.maxstudio.ai").rstrip("/"),
        download_dir=download_dir,
        poll_interval_seconds=float(os.getenv("STUDIO_POLL_INTERVAL_SECONDS", 2.0)),
        max_poll_attempts=int(os.getenv("STUDIO_MAX_POLL_ATTEMPTS", 60)),
        request_timeout_seconds=float(os.getenv("STUDIO_REQUEST_TIMEOUT_SECONDS", 30.0)),
        log_level=os.getenv("STUDIO_LOG_LEVEL", "INFO"),
    )
