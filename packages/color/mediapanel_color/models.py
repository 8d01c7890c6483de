"""Typed color and pixel buffer models."""

from __future__ import annotations

import re
from dataclasses import dataclass

_RGB_RE = re.compile(r"rgb\((\d+),\s*(\d+),\s*(\d+)\)")


def _clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name}={value} outside 0..255")

    @classmethod
    def clamped(cls, r: int, g: int, b: int) -> Color:
        return cls(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))

    @classmethod
    def parse(cls, text: str) -> Color | None:
        """Parse ``rgb(r, g, b)`` text; anything else yields ``None``."""
        match = _RGB_RE.search(text or "")
        if match is None:
            return None
        return cls.clamped(*(int(v) for v in match.groups()))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def css_alpha(self, alpha: float) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {alpha:g})"

    def __str__(self) -> str:
        return self.css()


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
# Artist labels blend toward gray for a muted tone.
ARTIST_BASE = Color(170, 170, 170)


@dataclass(frozen=True)
class PixelBuffer:
    width: int
    height: int
    rowstride: int
    channels: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.channels not in (3, 4):
            raise ValueError(f"channels must be 3 or 4, got {self.channels}")
        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must be non-negative")
        if self.rowstride < self.width * self.channels:
            raise ValueError("rowstride is smaller than width * channels")
        if self.width and self.height:
            needed = (self.height - 1) * self.rowstride + self.width * self.channels
            if len(self.pixels) < needed:
                raise ValueError(f"pixel data too short: {len(self.pixels)} < {needed}")

    @property
    def has_alpha(self) -> bool:
        return self.channels == 4

    @classmethod
    def filled(cls, width: int, height: int, color: Color, channels: int = 3, padding: int = 0) -> PixelBuffer:
        """Uniform buffer, with optional per-row padding bytes."""
        pixel = bytes(color.as_tuple()) + (b"\xff" if channels == 4 else b"")
        row = pixel * width + b"\x00" * padding
        return cls(width=width, height=height, rowstride=len(row), channels=channels, pixels=row * height)
