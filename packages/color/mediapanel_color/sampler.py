"""Strided average-color sampling over raw pixel buffers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .models import BLACK, Color, PixelBuffer
from .transform import round_half_up

DEFAULT_STEP = 4


@dataclass(frozen=True)
class ColorSample:
    color: Color
    count: int


def sample_count(width: int, height: int, step: int = DEFAULT_STEP) -> int:
    if step < 1:
        raise ValueError("step must be >= 1")
    if width <= 0 or height <= 0:
        return 0
    return -(-width // step) * -(-height // step)


def sample_color(buffer: PixelBuffer, step: int = DEFAULT_STEP) -> ColorSample:
    if step < 1:
        raise ValueError("step must be >= 1")

    pixels = buffer.pixels
    channels = buffer.channels
    total_r = total_g = total_b = 0
    count = 0

    for y in range(0, buffer.height, step):
        row_start = y * buffer.rowstride
        for x in range(0, buffer.width, step):
            offset = row_start + x * channels
            total_r += pixels[offset]
            total_g += pixels[offset + 1]
            total_b += pixels[offset + 2]
            count += 1

    if count == 0:
        return ColorSample(color=BLACK, count=0)

    div = Decimal(count)
    return ColorSample(
        color=Color.clamped(
            round_half_up(Decimal(total_r) / div),
            round_half_up(Decimal(total_g) / div),
            round_half_up(Decimal(total_b) / div),
        ),
        count=count,
    )


def average_color(buffer: PixelBuffer, step: int = DEFAULT_STEP) -> Color:
    """Average R/G/B over every ``step``-th pixel of every ``step``-th row.

    Alpha is ignored. A buffer with no sampled pixels averages to black.
    """
    return sample_color(buffer, step).color
