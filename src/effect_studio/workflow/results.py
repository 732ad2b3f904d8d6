"""Helpers turning a completed job result into rendered media."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from ..clients.retrieval import cache_busted
from ..errors import MissingResultError
from ..models import MediaKind, ResultMedia

RESULT_URL_FIELDS = ("mediaUrl", "video", "image")

_VIDEO_URL = re.compile(r"\.(mp4|webm)(\?.*)?$", re.IGNORECASE)


def extract_result_url(result: Any) -> str:
    """Return the media URL of a job result.

    ``result`` may be a mapping or a sequence whose first element is used. The
    URL is read from ``mediaUrl``, then ``video``, then ``image``.

    Raises:
        MissingResultError: If none of the fields carries a value.
    """

    item: Any = result
    if isinstance(result, Sequence) and not isinstance(result, (str, bytes)):
        item = result[0] if result else None

    if isinstance(item, Mapping):
        for name in RESULT_URL_FIELDS:
            value = item.get(name)
            if value:
                return str(value)
    raise MissingResultError("No media URL in response")


def is_video_url(url: str) -> bool:
    return _VIDEO_URL.search(url) is not None


def build_result_media(url: str, *, now_ms: int | None = None) -> ResultMedia:
    if is_video_url(url):
        return ResultMedia(kind=MediaKind.VIDEO, source=url, url=url)
    return ResultMedia(kind=MediaKind.IMAGE, source=cache_busted(url, now_ms=now_ms), url=url)
