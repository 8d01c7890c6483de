"""Desktop preview window hosting a media panel, driven by QtAsyncio."""

from __future__ import annotations

import os
import sys

import PySide6.QtAsyncio as QtAsyncio
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QHBoxLayout, QWidget

from mediapanel_artwork import decode_image_async, fetch_image_async
from mediapanel_core import (
    AppConfig,
    Panel,
    PanelController,
    PanelIconBuilder,
    PanelLabelBuilder,
    PlayerState,
)
from mediapanel_core.logging_setup import configure_from_config, get_logger, install_crash_hooks

from .qt_toolkit import QtContainer, QtToolkit

PANEL_STYLE = "padding: 2px 8px; background: rgb(24, 24, 28); color: rgb(255, 255, 255);"


def build_controller(container: QtContainer, state: PlayerState, config: AppConfig) -> PanelController:
    toolkit = QtToolkit()
    panel = Panel(container, state, config.labels)
    icon_builder = PanelIconBuilder(config.tint, toolkit, fetch=fetch_image_async, decode=decode_image_async)
    label_builder = PanelLabelBuilder(config.tint, toolkit)
    return PanelController(panel, icon_builder, label_builder)


class PanelWindow(QWidget):
    def __init__(self, bar: QtContainer) -> None:
        super().__init__()
        self.setWindowTitle("MediaPanel")
        self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(bar.widget)
        layout.addStretch(1)


def run_gui(state: PlayerState, config: AppConfig) -> int:
    configure_from_config(config)
    install_crash_hooks()
    logger = get_logger()

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("MediaPanel")

    bar = QtContainer()
    bar.set_style(PANEL_STYLE)
    controller = build_controller(bar, state, config)
    window = PanelWindow(bar)
    window.resize(420, 32)
    window.show()

    async def _start() -> None:
        controller.refresh()

    QtAsyncio.run(_start(), keep_running=True, quit_qapp=True)
    controller.close()
    logger.info("app shutdown", extra={"event": "shutdown"})
    return 0
