from __future__ import annotations

from pathlib import Path

import pytest

from src.effect_studio.config import StudioConfig
from tests.helpers.config import make_config


@pytest.fixture
def config(tmp_path: Path) -> StudioConfig:
    return make_config(tmp_path)


@pytest.fixture
def video_config(tmp_path: Path) -> StudioConfig:
    return make_config(tmp_path, model="video-effects")
