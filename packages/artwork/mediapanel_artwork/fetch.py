"""Art URL retrieval over urllib (http(s), file and data URLs)."""

from __future__ import annotations

import asyncio
import urllib.error
import urllib.request
from pathlib import Path
from urllib.parse import urlparse

from .errors import ArtworkError

DEFAULT_TIMEOUT_S = 10
MAX_ART_BYTES = 16 * 1024 * 1024
_SCHEMES = ("http", "https", "file", "data")


def normalize_url(url: str) -> str:
    """Turn bare filesystem paths into ``file://`` URIs."""
    url = (url or "").strip()
    if not url:
        raise ArtworkError("empty art url")
    scheme = urlparse(url).scheme.lower()
    if scheme in _SCHEMES:
        return url
    # Single-letter schemes are Windows drive letters.
    if not scheme or len(scheme) == 1:
        return Path(url).expanduser().resolve().as_uri()
    raise ArtworkError(f"unsupported art url scheme: {scheme}")


def fetch_image(url: str, timeout_s: float = DEFAULT_TIMEOUT_S, max_bytes: int = MAX_ART_BYTES) -> bytes | None:
    req = urllib.request.Request(normalize_url(url), headers={"User-Agent": "mediapanel"})
    try:
        with urllib.request.urlopen(req, timeout=timeout_s) as resp:
            data = resp.read(max_bytes + 1)
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise ArtworkError(f"fetch failed for {url}: {exc}") from exc

    if len(data) > max_bytes:
        raise ArtworkError(f"art at {url} exceeds {max_bytes} bytes")
    return data or None


async def fetch_image_async(url: str, timeout_s: float = DEFAULT_TIMEOUT_S) -> bytes | None:
    return await asyncio.to_thread(fetch_image, url, timeout_s)
