"""Panel label composition in scrolling or segmented mode."""

from __future__ import annotations

import logging

from .config import TintConfig
from .logging_setup import get_logger
from .metadata import LabelSegment, collapse_line_breaks, resolve_segment
from .panel import Panel
from .tinter import tint_labels
from .widgets import Toolkit, Widget

SCROLLING_TEXT_CLASS = "panel-label-text"


def label_segments(panel: Panel) -> list[LabelSegment]:
    metadata = panel.player.metadata
    segments = (resolve_segment(entry, metadata) for entry in panel.labels.labels_order)
    return [s for s in segments if s.text]


def label_text(panel: Panel) -> str:
    return collapse_line_breaks(" ".join(s.text for s in label_segments(panel)))


class PanelLabelBuilder:
    def __init__(self, config: TintConfig, toolkit: Toolkit, logger: logging.Logger | None = None) -> None:
        self.config = config
        self.toolkit = toolkit
        self.logger = logger or get_logger("label")

    def rebuild_label(self, panel: Panel, index: int) -> None:
        try:
            widget = self._scrolling(panel) if panel.labels.scroll_labels else self._segmented(panel)
            panel.install_label(widget, index)
            if self.config.enable_debug:
                self.logger.debug("label installed at %d", index, extra={"event": "label_installed"})

            color = panel.icon_color
            if color is not None:
                tint_labels(widget, color, self.config, self.logger)
        except Exception:
            self.logger.exception("label rebuild failed", extra={"event": "label_rebuild_error"})

    def _scrolling(self, panel: Panel) -> Widget:
        labels = panel.labels
        scrolling = self.toolkit.scrolling_label(
            text=label_text(panel),
            width=labels.label_width,
            fixed_width=labels.fixed_label_width,
            paused=not panel.player.is_playing,
            scroll_speed=labels.scroll_speed,
        )
        scrolling.label.add_style_class(SCROLLING_TEXT_CLASS)
        return scrolling

    def _segmented(self, panel: Panel) -> Widget:
        box = self.toolkit.label_box()
        for i, segment in enumerate(label_segments(panel)):
            box.insert_at(self.toolkit.label(segment.text, segment.role), i)

        width = panel.labels.label_width
        if width > 0 and panel.labels.fixed_label_width:
            box.set_style(f"max-width: {width}px;")
            box.set_fixed_width(width)
        return box
