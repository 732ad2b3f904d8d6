"""Test configuration pointing at fake endpoints."""

from __future__ import annotations

from pathlib import Path

from src.effect_studio.config import Endpoints, StudioConfig

API_BASE = "https://api.studio.test"
CDN_DOMAIN = "https://cdn.studio.test"
USER_ID = "user-123"


def make_config(tmp_path: Path, *, model: str = "image-effects", **overrides) -> StudioConfig:
    values = dict(
        effect_id="removeMustacheFromPhoto",
        model=model,
        tool_type="image-effects",
        user_id=USER_ID,
        endpoints=Endpoints(
            upload=f"{API_BASE}/get-emd-upload-url",
            image_gen=f"{API_BASE}/image-gen",
            video_gen=f"{API_BASE}/video-gen",
            download_proxy=f"{API_BASE}/download-proxy",
        ),
        cdn_domain=CDN_DOMAIN,
        download_dir=tmp_path / "downloads",
        poll_interval_seconds=0,
    )
    values.update(overrides)
    return StudioConfig(**values)
