"""Panel ownership of the displayed icon and label widgets."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum

from mediapanel_color.models import Color

from .config import LabelConfig
from .metadata import PlayerState
from .widgets import Container, Widget


class IconState(str, Enum):
    EMPTY = "Empty"
    FALLBACK = "Fallback"
    ART_LOADED = "ArtLoaded"


@dataclass
class IconHandle:
    widget: Widget
    state: IconState
    color: Color | None = None


class Panel:
    """Single owner of one icon slot and one label slot inside a container.

    Replaced widgets are destroyed exactly once, in the same synchronous
    section that installs their successor.
    """

    def __init__(self, container: Container, player: PlayerState, labels: LabelConfig | None = None) -> None:
        self.container = container
        self.player = player
        self.labels = labels or LabelConfig()
        self.icon: IconHandle | None = None
        self.label: Widget | None = None
        self.art_task: asyncio.Task | None = None
        self._generation = 0

    @property
    def icon_state(self) -> IconState:
        return self.icon.state if self.icon is not None else IconState.EMPTY

    @property
    def icon_color(self) -> Color | None:
        return self.icon.color if self.icon is not None else None

    @property
    def generation(self) -> int:
        return self._generation

    def next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def is_current(self, generation: int, widget: Widget) -> bool:
        return generation == self._generation and self.icon is not None and self.icon.widget is widget

    def _is_child(self, widget: Widget | None) -> bool:
        return widget is not None and any(child is widget for child in self.container.get_children())

    def _index_of(self, widget: Widget) -> int:
        for i, child in enumerate(self.container.get_children()):
            if child is widget:
                return i
        return -1

    def _install(self, old: Widget | None, new: Widget, index: int) -> None:
        if self._is_child(old):
            self.container.replace(old, new)
        else:
            self.container.insert_at(new, index)
        if old is not None:
            old.destroy()

    def install_fallback(self, widget: Widget, index: int) -> IconHandle:
        self._install(self.icon.widget if self.icon else None, widget, index)
        self.icon = IconHandle(widget=widget, state=IconState.FALLBACK)
        return self.icon

    def swap_icon(self, widget: Widget, color: Color) -> bool:
        """Put art in place of the current icon, keeping its index."""
        if self.icon is None:
            return False
        old = self.icon.widget
        index = self._index_of(old)
        if index < 0:
            return False
        self.container.remove(old)
        self.container.insert_at(widget, index)
        old.destroy()
        self.icon = IconHandle(widget=widget, state=IconState.ART_LOADED, color=color)
        return True

    def install_label(self, widget: Widget, index: int) -> None:
        self._install(self.label, widget, index)
        self.label = widget

    def cancel_art_task(self) -> None:
        if self.art_task is not None and not self.art_task.done():
            self.art_task.cancel()
        self.art_task = None

    def destroy(self) -> None:
        self.cancel_art_task()
        self._generation += 1
        for widget in (self.icon.widget if self.icon else None, self.label):
            if widget is None:
                continue
            if self._is_child(widget):
                self.container.remove(widget)
            widget.destroy()
        self.icon = None
        self.label = None
