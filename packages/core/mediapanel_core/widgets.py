"""Widget-tree collaborator protocols implemented by the host toolkit."""

from __future__ import annotations

from typing import Protocol

from mediapanel_color.models import PixelBuffer

from .metadata import LabelRole

GENERIC_AUDIO_ICON = "audio-x-generic-symbolic"


class Widget(Protocol):
    def get_style(self) -> str: ...

    def set_style(self, style: str) -> None: ...

    def get_style_role(self) -> str | None: ...

    def add_style_class(self, name: str) -> None: ...

    def destroy(self) -> None: ...


class Container(Widget, Protocol):
    def get_children(self) -> list[Widget]: ...

    def insert_at(self, child: Widget, index: int) -> None: ...

    def replace(self, old: Widget, new: Widget) -> None: ...

    def remove(self, child: Widget) -> None: ...

    def set_fixed_width(self, width: int) -> None: ...


class ScrollingText(Widget, Protocol):
    """A single continuous label; ``label`` is the element that carries text color."""

    label: Widget


class Toolkit(Protocol):
    def app_icon_name(self, identity: str, desktop_entry: str | None) -> str | None: ...

    def fallback_icon(self, icon_name: str, colored: bool) -> Widget: ...

    def art_icon(self, buffer: PixelBuffer, size: int, style: str, image_style: str) -> Widget: ...

    def scrolling_label(
        self,
        text: str,
        width: int,
        fixed_width: bool,
        paused: bool,
        scroll_speed: int,
    ) -> ScrollingText: ...

    def label_box(self) -> Container: ...

    def label(self, text: str, role: LabelRole) -> Widget: ...
