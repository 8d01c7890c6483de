"""Color derivation package: pixel sampling and color transforms."""

from .models import ARTIST_BASE, BLACK, WHITE, Color, PixelBuffer
from .sampler import ColorSample, average_color, sample_color, sample_count
from .transform import blend, blend_css, brighten, brighten_css, round_half_up

__all__ = [
    "ARTIST_BASE",
    "BLACK",
    "Color",
    "ColorSample",
    "PixelBuffer",
    "WHITE",
    "average_color",
    "blend",
    "blend_css",
    "brighten",
    "brighten_css",
    "round_half_up",
    "sample_color",
    "sample_count",
]
