"""Album art icon pipeline: fallback, fetch, decode, sample, glow, swap."""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Awaitable, Callable

from mediapanel_color.models import Color, PixelBuffer
from mediapanel_color.sampler import average_color
from mediapanel_color.transform import brighten

from .config import TintConfig
from .logging_setup import get_logger
from .panel import IconState, Panel
from .tinter import tint_labels
from .widgets import GENERIC_AUDIO_ICON, Container, Toolkit, Widget

FetchFn = Callable[[str], Awaitable[bytes | None]]
DecodeFn = Callable[[bytes | None], Awaitable[PixelBuffer | None]]

_GRADIENT_RE = re.compile(r"\s*background: linear-gradient\(90deg, transparent, rgba\([^)]*\)\);")


def _px(value: float) -> str:
    return f"{value:g}px"


def glow_shadows(color: Color, config: TintConfig) -> list[str]:
    """Concentric shadows with radius growing linearly up to ``glow_radius``."""
    bright = brighten(color, config.glow_brightness)
    layers = max(1, config.glow_layers)
    step = config.glow_radius / layers
    return [f"0 0 {_px(step * i)} {bright.css()}" for i in range(1, layers + 1)]


def art_widget_style(color: Color, config: TintConfig) -> str:
    size = config.album_art_size
    style = f"width: {size}px; height: {size}px;"
    if config.enable_album_art_glow:
        style += f" box-shadow: {', '.join(glow_shadows(color, config))};"
    return style


def art_image_style(config: TintConfig) -> str:
    size = config.album_art_size
    return f"width: {size}px; height: {size}px; border-radius: {config.album_art_border_radius}px;"


def with_background_gradient(style: str, color: Color, opacity: float) -> str:
    base = _GRADIENT_RE.sub("", style or "").strip()
    directive = f"background: linear-gradient(90deg, transparent, {color.css_alpha(opacity)});"
    return f"{base} {directive}" if base else directive


class PanelIconBuilder:
    def __init__(
        self,
        config: TintConfig,
        toolkit: Toolkit,
        fetch: FetchFn,
        decode: DecodeFn,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config
        self.toolkit = toolkit
        self.fetch = fetch
        self.decode = decode
        self.logger = logger or get_logger("icon")

    def _debug(self, msg: str, *args, event: str) -> None:
        if self.config.enable_debug:
            self.logger.debug(msg, *args, extra={"event": event})

    def _fallback_widget(self, panel: Panel) -> Widget:
        player = panel.player
        icon_name = self.toolkit.app_icon_name(player.identity, player.desktop_entry) or GENERIC_AUDIO_ICON
        return self.toolkit.fallback_icon(icon_name, panel.labels.colored_player_icon)

    def rebuild_icon(self, panel: Panel, index: int) -> asyncio.Task | None:
        """Show the fallback icon now and start loading album art.

        Returns the art task, or ``None`` when there is no art URL or the
        fallback could not be installed.
        """
        try:
            panel.cancel_art_task()
            generation = panel.next_generation()
            fallback = self._fallback_widget(panel)
            panel.install_fallback(fallback, index)
            self._debug("fallback icon installed at %d", index, event="icon_fallback")

            url = panel.player.metadata.art_url
            if not url:
                return None
            panel.art_task = asyncio.get_running_loop().create_task(self.load_art(panel, generation, fallback, url))
            return panel.art_task
        except Exception:
            self.logger.exception("icon rebuild failed", extra={"event": "icon_rebuild_error"})
            return None

    async def load_art(self, panel: Panel, generation: int, fallback: Widget, url: str) -> bool:
        """Fetch, decode and apply art; ``True`` only when it was displayed."""
        self._debug("loading album art %s", url, event="art_load_start")
        try:
            data = await self.fetch(url)
            if not data:
                self._debug("no art data for %s", url, event="art_empty")
                return False
            buffer = await self.decode(data)
            if buffer is None:
                self._debug("art decode produced nothing for %s", url, event="art_empty")
                return False
        except Exception as exc:
            self.logger.warning("album art load failed for %s: %s", url, exc, extra={"event": "art_load_error"})
            return False

        if not panel.is_current(generation, fallback):
            self._debug("discarding stale art for %s", url, event="art_stale")
            return False

        try:
            return self.apply_art(panel, buffer)
        except Exception:
            self.logger.exception("album art apply failed", extra={"event": "art_apply_error"})
            return False

    def apply_art(self, panel: Panel, buffer: PixelBuffer) -> bool:
        config = self.config
        color = average_color(buffer, config.sample_step)
        self._debug("album art average color %s", color, event="art_color")

        widget = self.toolkit.art_icon(
            buffer,
            config.album_art_size,
            art_widget_style(color, config),
            art_image_style(config),
        )
        if not panel.swap_icon(widget, color):
            widget.destroy()
            return False

        if config.enable_album_art_background:
            self._apply_background(panel.container, color)

        if panel.label is not None:
            tint_labels(panel.label, color, config, self.logger)
        self._debug("album art applied", event="art_applied")
        return panel.icon_state is IconState.ART_LOADED

    def _apply_background(self, container: Container, color: Color) -> None:
        container.set_style(with_background_gradient(container.get_style(), color, self.config.background_opacity))
