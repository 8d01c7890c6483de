"""Pillow-backed decoding of art bytes into pixel buffers."""

from __future__ import annotations

import asyncio
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from mediapanel_color.models import PixelBuffer

from .errors import ArtworkError


def _normalized(image: Image.Image) -> Image.Image:
    if image.mode == "RGBA":
        return image
    if image.mode in ("LA", "PA") or (image.mode == "P" and "transparency" in image.info):
        return image.convert("RGBA")
    if image.mode != "RGB":
        return image.convert("RGB")
    return image


def decode_image(data: bytes | None) -> PixelBuffer | None:
    if not data:
        return None
    try:
        with Image.open(BytesIO(data)) as raw:
            raw.load()
            image = _normalized(raw)
            channels = 4 if image.mode == "RGBA" else 3
            width, height = image.size
            pixels = image.tobytes()
    except (UnidentifiedImageError, OSError, ValueError, Image.DecompressionBombError) as exc:
        raise ArtworkError(f"cannot decode art image: {exc}") from exc

    return PixelBuffer(width=width, height=height, rowstride=width * channels, channels=channels, pixels=pixels)


async def decode_image_async(data: bytes | None) -> PixelBuffer | None:
    return await asyncio.to_thread(decode_image, data)
