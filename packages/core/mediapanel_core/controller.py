"""Panel refresh logic driving the icon and label builders on player changes."""

from __future__ import annotations

import asyncio

from .icon_builder import PanelIconBuilder
from .label_builder import PanelLabelBuilder
from .metadata import PlayerState
from .panel import Panel

ICON_INDEX = 0
LABEL_INDEX = 1


class PanelController:
    def __init__(self, panel: Panel, icon_builder: PanelIconBuilder, label_builder: PanelLabelBuilder) -> None:
        self.panel = panel
        self.icon_builder = icon_builder
        self.label_builder = label_builder

    def refresh(self) -> asyncio.Task | None:
        task = self.icon_builder.rebuild_icon(self.panel, ICON_INDEX)
        self.label_builder.rebuild_label(self.panel, LABEL_INDEX)
        return task

    def update_player(self, state: PlayerState) -> asyncio.Task | None:
        """Apply a new player state, rebuilding only the parts it changes."""
        previous = self.panel.player
        self.panel.player = state

        icon_changed = (
            self.panel.icon is None
            or previous.identity != state.identity
            or previous.desktop_entry != state.desktop_entry
            or previous.metadata.art_url != state.metadata.art_url
        )
        label_changed = (
            self.panel.label is None
            or previous.metadata != state.metadata
            or previous.playback_status != state.playback_status
        )

        task = None
        if icon_changed:
            task = self.icon_builder.rebuild_icon(self.panel, ICON_INDEX)
        if label_changed:
            self.label_builder.rebuild_label(self.panel, LABEL_INDEX)
        return task

    def close(self) -> None:
        self.panel.destroy()
