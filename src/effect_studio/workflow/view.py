"""Presentation seam between the orchestrator and whatever renders the page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from ..models import MediaKind, ResultMedia, WorkflowStatus


class WorkflowView(Protocol):
    """Narrow interface the orchestrator drives."""

    def show_preview(self, source: str) -> None: ...

    def clear_preview(self) -> None: ...

    def set_status(self, status: WorkflowStatus | None, text: str) -> None: ...

    def set_generate_control(self, *, enabled: bool, label: str) -> None: ...

    def set_download_control(
        self, *, enabled: bool, busy: bool = False, label: str | None = None, url: str | None = None
    ) -> None: ...

    def show_loading(self) -> None: ...

    def hide_loading(self) -> None: ...

    def render_result(self, media: ResultMedia) -> None: ...

    def clear_result(self) -> None:
        """Remove the rendered result and stop any playing video."""

    def alert(self, message: str) -> None: ...


@dataclass(slots=True)
class ControlState:
    enabled: bool
    label: str
    busy: bool = False
    url: str | None = None


GENERATE_LABEL = "Generate"
DOWNLOAD_LABEL = "Download"


@dataclass(slots=True)
class SessionView:
    """In-memory view whose snapshot is served to the page."""

    preview: str | None = None
    status: WorkflowStatus | None = None
    status_text: str = ""
    loading: bool = False
    result: ResultMedia | None = None
    video_playing: bool = False
    generate: ControlState = field(
        default_factory=lambda: ControlState(enabled=False, label=GENERATE_LABEL)
    )
    download: ControlState = field(
        default_factory=lambda: ControlState(enabled=False, label=DOWNLOAD_LABEL)
    )
    alerts: list[str] = field(default_factory=list)

    def show_preview(self, source: str) -> None:
        self.preview = source

    def clear_preview(self) -> None:
        self.preview = None

    def set_status(self, status: WorkflowStatus | None, text: str) -> None:
        self.status = status
        self.status_text = text

    def set_generate_control(self, *, enabled: bool, label: str) -> None:
        self.generate = ControlState(enabled=enabled, label=label)

    def set_download_control(
        self, *, enabled: bool, busy: bool = False, label: str | None = None, url: str | None = None
    ) -> None:
        self.download = ControlState(
            enabled=enabled,
            label=label or self.download.label,
            busy=busy,
            url=url if url is not None else self.download.url,
        )

    def show_loading(self) -> None:
        self.loading = True

    def hide_loading(self) -> None:
        self.loading = False

    def render_result(self, media: ResultMedia) -> None:
        self.result = media
        self.video_playing = media.kind is MediaKind.VIDEO

    def clear_result(self) -> None:
        self.result = None
        self.video_playing = False
        self.download = ControlState(enabled=False, label=DOWNLOAD_LABEL)

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def snapshot(self) -> dict[str, Any]:
        result = None
        if self.result is not None:
            result = {
                "kind": self.result.kind.value,
                "source": self.result.source,
                "url": self.result.url,
            }
        return {
            "preview": self.preview,
            "status": self.status.value if self.status else None,
            "status_text": self.status_text,
            "loading": self.loading,
            "result": result,
            "video_playing": self.video_playing,
            "generate": _control_dict(self.generate),
            "download": _control_dict(self.download),
            "alerts": list(self.alerts),
        }


def _control_dict(control: ControlState) -> dict[str, Any]:
    return {
        "enabled": control.enabled,
        "label": control.label,
        "busy": control.busy,
        "url": control.url,
    }
