"""Immutable app settings schema and load/save helpers."""

from __future__ import annotations

import json
import math
import os
import platform
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any


CONFIG_VERSION = 2


@dataclass(frozen=True)
class TintConfig:
    album_art_size: int = 14
    album_art_border_radius: int = 0
    enable_album_art_glow: bool = True
    glow_radius: float = 8
    glow_layers: int = 4
    glow_brightness: float = 1.7
    enable_album_art_background: bool = False
    background_opacity: float = 0.15
    enable_title_color_tint: bool = True
    title_tint_opacity: float = 0.3
    enable_artist_color_tint: bool = True
    artist_tint_opacity: float = 0.25
    enable_debug: bool = False
    sample_step: int = 4


@dataclass(frozen=True)
class LabelConfig:
    labels_order: tuple[str, ...] = ("ARTIST", "-", "TITLE")
    scroll_labels: bool = True
    label_width: int = 200
    fixed_label_width: bool = True
    scroll_speed: int = 5
    colored_player_icon: bool = True


@dataclass(frozen=True)
class DiagnosticsConfig:
    keep_log_files: int = 7
    console_logging: bool = True


@dataclass(frozen=True)
class AppConfig:
    config_version: int = CONFIG_VERSION
    tint: TintConfig = field(default_factory=TintConfig)
    labels: LabelConfig = field(default_factory=LabelConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)

# Option names used by the GNOME extension settings this widget grew out of.
_ALIASES: dict[str, str] = {
    "albumArtSize": "album_art_size",
    "albumArtBorderRadius": "album_art_border_radius",
    "enableAlbumArtGlow": "enable_album_art_glow",
    "glowRadius": "glow_radius",
    "glowLayers": "glow_layers",
    "glowBrightness": "glow_brightness",
    "enableAlbumArtBackground": "enable_album_art_background",
    "backgroundOpacity": "background_opacity",
    "enableTitleColorTint": "enable_title_color_tint",
    "titleTintOpacity": "title_tint_opacity",
    "enableArtistColorTint": "enable_artist_color_tint",
    "artistTintOpacity": "artist_tint_opacity",
    "enableDebug": "enable_debug",
    "labelsOrder": "labels_order",
    "scrollLabels": "scroll_labels",
    "labelWidth": "label_width",
    "isFixedLabelWidth": "fixed_label_width",
    "scrollSpeed": "scroll_speed",
    "coloredPlayerIcon": "colored_player_icon",
}

_TINT_KEYS = {f.name for f in fields(TintConfig)}


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "MediaPanel"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "MediaPanel"
    return Path.home() / ".config" / "mediapanel"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any] | None):
    known = {f.name for f in fields(dataclass_type)}
    values: dict[str, Any] = {}
    for k, v in (raw or {}).items():
        k = _ALIASES.get(k, k)
        if k in known:
            values[k] = v
    return dataclass_type(**values)


def _clamp(value: Any, low: float, high: float | None = None) -> float:
    out = float(value)
    if not math.isfinite(out):
        raise ValueError(f"setting is not a finite number: {value!r}")
    out = max(low, out)
    return out if high is None else min(high, out)


def _normalize_tint(cfg: TintConfig) -> TintConfig:
    return replace(
        cfg,
        album_art_size=int(_clamp(cfg.album_art_size, 1)),
        album_art_border_radius=int(_clamp(cfg.album_art_border_radius, 0)),
        glow_radius=_clamp(cfg.glow_radius, 0.0),
        glow_layers=int(_clamp(cfg.glow_layers, 1)),
        glow_brightness=_clamp(cfg.glow_brightness, 0.0),
        background_opacity=_clamp(cfg.background_opacity, 0.0, 1.0),
        title_tint_opacity=_clamp(cfg.title_tint_opacity, 0.0, 1.0),
        artist_tint_opacity=_clamp(cfg.artist_tint_opacity, 0.0, 1.0),
        sample_step=int(_clamp(cfg.sample_step, 1)),
        enable_album_art_glow=bool(cfg.enable_album_art_glow),
        enable_album_art_background=bool(cfg.enable_album_art_background),
        enable_title_color_tint=bool(cfg.enable_title_color_tint),
        enable_artist_color_tint=bool(cfg.enable_artist_color_tint),
        enable_debug=bool(cfg.enable_debug),
    )


def _normalize_labels(cfg: LabelConfig) -> LabelConfig:
    order = cfg.labels_order
    if isinstance(order, str):
        order = (order,)
    return replace(
        cfg,
        labels_order=tuple(str(e) for e in order),
        label_width=int(_clamp(cfg.label_width, 0)),
        scroll_speed=int(_clamp(cfg.scroll_speed, 1)),
    )


def _normalize_diagnostics(cfg: DiagnosticsConfig) -> DiagnosticsConfig:
    return replace(
        cfg,
        keep_log_files=int(_clamp(cfg.keep_log_files, 1)),
        console_logging=bool(cfg.console_logging),
    )


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(_clamp(raw.get("config_version", 1), 1))
    data = dict(raw)

    if version < 2:
        # v1 stored the extension options flat at the top level.
        tint = dict(data.get("tint", {}) or {})
        labels = dict(data.get("labels", {}) or {})
        for key in list(data):
            name = _ALIASES.get(key, key)
            if name in _TINT_KEYS:
                tint.setdefault(name, data.pop(key))
            elif name in {f.name for f in fields(LabelConfig)}:
                labels.setdefault(name, data.pop(key))
        data["tint"] = tint
        data["labels"] = labels
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    try:
        data = _migrate(raw)
        return AppConfig(
            config_version=CONFIG_VERSION,
            tint=_normalize_tint(_merge(TintConfig, data.get("tint"))),
            labels=_normalize_labels(_merge(LabelConfig, data.get("labels"))),
            diagnostics=_normalize_diagnostics(_merge(DiagnosticsConfig, data.get("diagnostics"))),
        )
    except (TypeError, ValueError, OverflowError):
        return AppConfig()


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg = replace(cfg, config_version=CONFIG_VERSION)
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path


def config_to_dict(cfg: AppConfig) -> dict[str, Any]:
    return asdict(cfg)
