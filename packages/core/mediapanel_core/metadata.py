"""Player metadata models and label segment resolution."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

UNKNOWN_ARTIST = "Unknown artist"
UNKNOWN_ALBUM = "Unknown album"

_LINE_BREAKS = re.compile(r"[\r\n]+")


class PlaybackStatus(str, Enum):
    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"

    @classmethod
    def parse(cls, value: Any) -> PlaybackStatus:
        try:
            return cls(value)
        except ValueError:
            return cls.STOPPED


class LabelType(str, Enum):
    TITLE = "TITLE"
    ARTIST = "ARTIST"
    ALBUM = "ALBUM"
    TRACK_NUMBER = "TRACK_NUMBER"
    DISC_NUMBER = "DISC_NUMBER"


class LabelRole(str, Enum):
    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    TRACK = "track"
    DISC = "disc"
    SEPARATOR = "separator"

    @property
    def style_class(self) -> str:
        return f"panel-label-{self.value}"


@dataclass(frozen=True)
class PlayerMetadata:
    title: str = ""
    artists: tuple[str, ...] = ()
    album: str = ""
    track_number: int | None = None
    disc_number: int | None = None
    art_url: str | None = None

    @classmethod
    def from_mpris(cls, raw: dict[str, Any] | None) -> PlayerMetadata:
        raw = raw or {}
        artists = raw.get("xesam:artist") or ()
        if isinstance(artists, str):
            artists = (artists,)
        return cls(
            title=str(raw.get("xesam:title") or ""),
            artists=tuple(str(a) for a in artists if a),
            album=str(raw.get("xesam:album") or ""),
            track_number=_opt_int(raw.get("xesam:trackNumber")),
            disc_number=_opt_int(raw.get("xesam:discNumber")),
            art_url=(str(raw["mpris:artUrl"]) if raw.get("mpris:artUrl") else None),
        )


@dataclass(frozen=True)
class PlayerState:
    identity: str = ""
    desktop_entry: str | None = None
    metadata: PlayerMetadata = field(default_factory=PlayerMetadata)
    playback_status: PlaybackStatus = PlaybackStatus.STOPPED

    @property
    def is_playing(self) -> bool:
        return self.playback_status is PlaybackStatus.PLAYING


@dataclass(frozen=True)
class LabelSegment:
    text: str
    role: LabelRole


def _opt_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def collapse_line_breaks(text: str) -> str:
    return _LINE_BREAKS.sub(" ", text)


def resolve_segment(entry: str, metadata: PlayerMetadata) -> LabelSegment:
    """Resolve one ``labels_order`` entry; unknown entries are literal separators."""
    try:
        kind = LabelType(entry)
    except ValueError:
        return LabelSegment(text=collapse_line_breaks(entry), role=LabelRole.SEPARATOR)

    if kind is LabelType.TITLE:
        text, role = metadata.title, LabelRole.TITLE
    elif kind is LabelType.ARTIST:
        text, role = ", ".join(metadata.artists) or UNKNOWN_ARTIST, LabelRole.ARTIST
    elif kind is LabelType.ALBUM:
        text, role = metadata.album or UNKNOWN_ALBUM, LabelRole.ALBUM
    elif kind is LabelType.TRACK_NUMBER:
        text = "" if metadata.track_number is None else str(metadata.track_number)
        role = LabelRole.TRACK
    else:
        text = "" if metadata.disc_number is None else str(metadata.disc_number)
        role = LabelRole.DISC
    return LabelSegment(text=collapse_line_breaks(text), role=role)
