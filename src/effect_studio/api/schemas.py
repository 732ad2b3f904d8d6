"""Pydantic models for the workflow HTTP surface."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ControlModel(BaseModel):
    enabled: bool
    label: str
    busy: bool = False
    url: str | None = None


class ResultModel(BaseModel):
    kind: str = Field(..., description="``image`` or ``video``")
    source: str = Field(..., description="Source attribute for the rendered element")
    url: str = Field(..., description="Artifact URL used for downloads")


class WorkflowSnapshot(BaseModel):
    """Everything the page needs to render the workflow panel."""

    preview: str | None = None
    status: str | None = None
    status_text: str = ""
    loading: bool = False
    result: ResultModel | None = None
    video_playing: bool = False
    generate: ControlModel
    download: ControlModel
    alerts: list[str] = Field(default_factory=list)
