from __future__ import annotations

from pathlib import Path

from src.effect_studio.config import load_config
from src.effect_studio.models import MediaKind


def test_load_config_defaults(monkeypatch) -> None:
    for name in ("STUDIO_MODEL", "STUDIO_API_BASE_URL", "STUDIO_IMAGE_GEN_ENDPOINT", "STUDIO_DOWNLOAD_DIR"):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.media_kind is MediaKind.IMAGE
    assert config.generation_endpoint == "https://api.chromastudio.ai/image-gen"
    assert config.cdn_domain == "https://contents.maxstudio.ai"
    assert config.poll_interval_seconds == 2.0
    assert config.max_poll_attempts == 60
    assert config.download_dir == Path("downloads")


def test_video_model_switches_endpoint(monkeypatch) -> None:
    monkeypatch.setenv("STUDIO_MODEL", "video-effects")
    monkeypatch.setenv("STUDIO_API_BASE_URL", "https://api.example.test/")

    config = load_config()

    assert config.media_kind is MediaKind.VIDEO
    assert config.generation_endpoint == "https://api.example.test/video-gen"


def test_log_level_from_env(monkeypatch) -> None:
    monkeypatch.setenv("STUDIO_LOG_LEVEL", "DEBUG")

    assert load_config().log_level == "DEBUG"
