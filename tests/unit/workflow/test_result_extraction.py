from __future__ import annotations

import pytest

from src.effect_studio.errors import MissingResultError
from src.effect_studio.models import MediaKind
from src.effect_studio.workflow.results import build_result_media, extract_result_url


@pytest.mark.parametrize(
    "result",
    [
        {"mediaUrl": "x"},
        {"video": "x"},
        {"image": "x"},
        [{"mediaUrl": "x"}],
    ],
)
def test_extract_result_url_variants(result) -> None:
    assert extract_result_url(result) == "x"


def test_extract_prefers_media_url() -> None:
    result = {"image": "img", "video": "vid", "mediaUrl": "media"}
    assert extract_result_url(result) == "media"
    assert extract_result_url({"image": "img", "video": "vid"}) == "vid"


@pytest.mark.parametrize("result", [{}, [], None, [{}], {"mediaUrl": ""}])
def test_extract_missing_url(result) -> None:
    with pytest.raises(MissingResultError):
        extract_result_url(result)


def test_video_result_media() -> None:
    media = build_result_media("https://cdn/out.MP4?sig=1")

    assert media.kind is MediaKind.VIDEO
    assert media.source == "https://cdn/out.MP4?sig=1"


def test_image_result_media_is_cache_busted() -> None:
    media = build_result_media("https://cdn/out.png", now_ms=42)

    assert media.kind is MediaKind.IMAGE
    assert media.source == "https://cdn/out.png?t=42"
    assert media.url == "https://cdn/out.png"
