"""Album-art color tinting of panel labels."""

from __future__ import annotations

import logging

from mediapanel_color.models import ARTIST_BASE, WHITE, Color
from mediapanel_color.transform import blend

from .config import TintConfig
from .metadata import LabelRole
from .logging_setup import get_logger


def color_style(color: Color) -> str:
    return f"color: {color.css()} !important;"


def tint_labels(target, color: Color, config: TintConfig, logger: logging.Logger | None = None) -> None:
    if target is None:
        return
    if not (config.enable_title_color_tint or config.enable_artist_color_tint):
        return
    logger = logger or get_logger("tinter")

    text_element = getattr(target, "label", None)
    if text_element is not None:
        if config.enable_title_color_tint:
            tinted = blend(color, config.title_tint_opacity, WHITE)
            text_element.set_style(color_style(tinted))
            if config.enable_debug:
                logger.debug("scrolling label tinted %s", tinted, extra={"event": "label_tint"})
        return

    for child in target.get_children():
        role = child.get_style_role()
        if role == LabelRole.TITLE.value and config.enable_title_color_tint:
            tinted = blend(color, config.title_tint_opacity, WHITE)
        elif role == LabelRole.ARTIST.value and config.enable_artist_color_tint:
            tinted = blend(color, config.artist_tint_opacity, ARTIST_BASE)
        else:
            continue
        child.set_style(color_style(tinted))
        if config.enable_debug:
            logger.debug("%s label tinted %s", role, tinted, extra={"event": "label_tint"})
