"""Wire models for the generation endpoints."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ..config import StudioConfig
from ..models import MediaKind


class _Submission(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    effect_id: str = Field(..., alias="effectId")
    user_id: str = Field(..., alias="userId")
    remove_watermark: Literal[True] = Field(True, alias="removeWatermark")
    is_private: Literal[True] = Field(True, alias="isPrivate")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude={"kind"})


class ImageSubmission(_Submission):
    """Image effects take the source URL as a plain string."""

    kind: Literal[MediaKind.IMAGE] = MediaKind.IMAGE
    model: str
    tool_type: str = Field(..., alias="toolType")
    image_url: str = Field(..., alias="imageUrl")


class VideoSubmission(_Submission):
    """Video effects take the source URL wrapped in a one-element list."""

    kind: Literal[MediaKind.VIDEO] = MediaKind.VIDEO
    model: str = "video-effects"
    image_url: list[str] = Field(..., alias="imageUrl", min_length=1, max_length=1)


Submission = Annotated[Union[ImageSubmission, VideoSubmission], Field(discriminator="kind")]


def build_submission(config: StudioConfig, image_url: str) -> Submission:
    """Select the payload variant from the configured media kind only."""
    kind = config.media_kind
    if kind is MediaKind.VIDEO:
        return VideoSubmission(
            effect_id=config.effect_id,
            user_id=config.user_id,
            model=config.model,
            image_url=[image_url],
        )
    if kind is MediaKind.IMAGE:
        return ImageSubmission(
            effect_id=config.effect_id,
            user_id=config.user_id,
            model=config.model,
            tool_type=config.tool_type,
            image_url=image_url,
        )
    raise ValueError(f"Unsupported media kind '{kind}'")


class JobHandle(BaseModel):
    """Body returned by a successful submission."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    job_id: str = Field(..., alias="jobId", min_length=1)
    status: str = "queued"


class JobStatusBody(BaseModel):
    """Body returned by the status endpoint."""

    model_config = ConfigDict(extra="allow")

    status: str = ""
    result: Any = None
    error: Any = None
