from __future__ import annotations


class ArtworkError(RuntimeError):
    """Album art could not be fetched or decoded."""
