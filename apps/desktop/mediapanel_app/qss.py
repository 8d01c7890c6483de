"""Translation of the panel's CSS-like style text into Qt style sheets.

Qt style sheets have no ``box-shadow`` and spell gradients differently, so
shadows are returned separately for a ``QGraphicsDropShadowEffect`` and
``linear-gradient(90deg, a, b)`` becomes a horizontal ``qlineargradient``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from mediapanel_color.models import Color

_PX_RE = re.compile(r"(-?\d+(?:\.\d+)?)px")
_RGBA_RE = re.compile(r"rgba\((\d+),\s*(\d+),\s*(\d+),\s*([\d.]+)\)")
_GRADIENT_RE = re.compile(r"linear-gradient\(\s*90deg\s*,(.*)\)\s*$")


@dataclass(frozen=True)
class Shadow:
    blur: float
    color: Color


def split_top_level(text: str, sep: str) -> list[str]:
    """Split on ``sep`` outside parentheses."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        if ch == sep and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return [p.strip() for p in parts if p.strip()]


def declarations(css: str) -> list[tuple[str, str]]:
    out: list[tuple[str, str]] = []
    for decl in split_top_level(css or "", ";"):
        name, colon, value = decl.partition(":")
        if not colon:
            continue
        value = value.replace("!important", "").strip()
        out.append((name.strip().lower(), value))
    return out


def parse_shadows(value: str) -> list[Shadow]:
    shadows: list[Shadow] = []
    for layer in split_top_level(value, ","):
        color = Color.parse(layer)
        lengths = _PX_RE.findall(layer)
        if color is None or not lengths:
            continue
        # "<x> <y> <blur>px <color>" with unitless zero offsets.
        shadows.append(Shadow(blur=float(lengths[-1]), color=color))
    return shadows


def _qt_rgba(value: str) -> str:
    def repl(match: re.Match) -> str:
        r, g, b, a = match.groups()
        alpha = float(a)
        alpha_255 = round(alpha * 255) if alpha <= 1 else int(alpha)
        return f"rgba({r}, {g}, {b}, {max(0, min(255, alpha_255))})"

    return _RGBA_RE.sub(repl, value)


def _qt_background(value: str) -> str:
    match = _GRADIENT_RE.search(value)
    if match is None:
        return _qt_rgba(value)
    stops = split_top_level(match.group(1), ",")
    if len(stops) < 2:
        return _qt_rgba(value)
    last = len(stops) - 1
    stop_list = ", ".join(f"stop:{i / last:g} {_qt_rgba(s)}" for i, s in enumerate(stops))
    return f"qlineargradient(x1:0, y1:0, x2:1, y2:0, {stop_list})"


def to_qt_stylesheet(css: str) -> tuple[str, Shadow | None]:
    """Return ``(qss, strongest_shadow)`` for CSS-like style text."""
    rules: list[str] = []
    shadow: Shadow | None = None
    for name, value in declarations(css):
        if name == "box-shadow":
            layers = parse_shadows(value)
            if layers:
                shadow = max(layers, key=lambda s: s.blur)
        elif name in ("width", "height"):
            rules.append(f"min-{name}: {value};")
            rules.append(f"max-{name}: {value};")
        elif name in ("background", "background-color"):
            rules.append(f"background: {_qt_background(value)};")
        else:
            rules.append(f"{name}: {_qt_rgba(value)};")
    return " ".join(rules), shadow
