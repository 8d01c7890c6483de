"""Brighten/blend transforms over typed colors, with text-edge wrappers.

Channel math runs in decimal on the shortest repr of each float operand and
rounds half away from zero, so results do not depend on binary float noise
(``blend(rgb(200, 100, 50), 0.3)`` toward white is ``rgb(239, 209, 194)``).
An infinite factor saturates each channel that it moves; a NaN factor leaves
the color as it was.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .models import WHITE, Color

_ONE = Decimal(1)


def _dec(value: float | int) -> Decimal:
    return Decimal(repr(value)) if isinstance(value, float) else Decimal(value)


def round_half_up(value: Decimal | float) -> int:
    if not isinstance(value, Decimal):
        value = _dec(value)
    return int(value.quantize(_ONE, rounding=ROUND_HALF_UP))


def _scale(start: int, delta: int, factor: Decimal) -> int:
    if factor.is_infinite():
        if delta == 0:
            return start
        return 255 if (delta > 0) == (factor > 0) else 0
    return round_half_up(start + delta * factor)


def brighten(color: Color, multiplier: float) -> Color:
    m = _dec(multiplier)
    if m.is_nan():
        return color
    return Color.clamped(*(min(255, _scale(0, c, m)) for c in color.as_tuple()))


def blend(color: Color, opacity: float, base: Color = WHITE) -> Color:
    """Mix ``opacity`` of ``color`` into ``base``.

    Opacity is not clamped; extrapolated channels are clamped to 0..255.
    """
    a = _dec(opacity)
    if a.is_nan():
        return color
    return Color.clamped(*(_scale(b, c - b, a) for c, b in zip(color.as_tuple(), base.as_tuple())))


def brighten_css(text: str, multiplier: float) -> str:
    color = Color.parse(text)
    if color is None:
        return text
    return brighten(color, multiplier).css()


def blend_css(text: str, opacity: float, base: str = "rgb(255, 255, 255)") -> str:
    color = Color.parse(text)
    base_color = Color.parse(base)
    if color is None or base_color is None:
        return text
    return blend(color, opacity, base_color).css()
