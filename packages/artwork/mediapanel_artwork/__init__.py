"""Album art retrieval and decoding collaborators."""

from .decode import decode_image, decode_image_async
from .errors import ArtworkError
from .fetch import fetch_image, fetch_image_async, normalize_url

__all__ = [
    "ArtworkError",
    "decode_image",
    "decode_image_async",
    "fetch_image",
    "fetch_image_async",
    "normalize_url",
]
