"""CLI entrypoints for the MediaPanel preview, art color sampling and config."""

from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path

from mediapanel_artwork import ArtworkError, decode_image, fetch_image
from mediapanel_color import ARTIST_BASE, WHITE, blend, brighten, sample_color
from mediapanel_core.config import config_path, config_to_dict, load_config, save_config
from mediapanel_core.icon_builder import art_widget_style, glow_shadows
from mediapanel_core.logging_setup import configure_logging, get_logger
from mediapanel_core.metadata import PlaybackStatus, PlayerMetadata, PlayerState


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _load(args: argparse.Namespace):
    return load_config(Path(args.config).expanduser() if getattr(args, "config", None) else None)


def player_state_from_args(args: argparse.Namespace) -> PlayerState:
    metadata = PlayerMetadata(
        title=args.title or "",
        artists=tuple(a for a in (args.artist or []) if a),
        album=args.album or "",
        track_number=args.track,
        disc_number=args.disc,
        art_url=args.art_url,
    )
    return PlayerState(
        identity=args.identity,
        desktop_entry=args.desktop_entry,
        metadata=metadata,
        playback_status=PlaybackStatus.parse(args.status),
    )


def cmd_run(args: argparse.Namespace) -> int:
    from .app import run_gui

    cfg = _load(args)
    if args.no_scroll:
        cfg = replace(cfg, labels=replace(cfg.labels, scroll_labels=False))
    return run_gui(player_state_from_args(args), cfg)


def cmd_sample(args: argparse.Namespace) -> int:
    cfg = _load(args).tint
    step = args.step or cfg.sample_step
    try:
        buffer = decode_image(fetch_image(args.source))
    except ArtworkError as exc:
        get_logger("cli").warning("sample failed: %s", exc, extra={"event": "sample_error"})
        _print_json({"source": args.source, "error": str(exc)})
        return 2
    if buffer is None:
        _print_json({"source": args.source, "error": "empty image"})
        return 2

    sample = sample_color(buffer, step)
    color = sample.color
    _print_json(
        {
            "source": args.source,
            "size": [buffer.width, buffer.height],
            "channels": buffer.channels,
            "samples": sample.count,
            "average": color.css(),
            "glow": brighten(color, cfg.glow_brightness).css(),
            "shadows": glow_shadows(color, cfg),
            "art_style": art_widget_style(color, cfg),
            "title_tint": blend(color, cfg.title_tint_opacity, WHITE).css(),
            "artist_tint": blend(color, cfg.artist_tint_opacity, ARTIST_BASE).css(),
        }
    )
    return 0


def cmd_config_show(args: argparse.Namespace) -> int:
    _print_json(config_to_dict(_load(args)))
    return 0


def cmd_config_init(args: argparse.Namespace) -> int:
    path = Path(args.config).expanduser() if args.config else config_path()
    cfg = load_config(path)
    _print_json({"path": str(save_config(cfg, path))})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mediapanel", description="Album-art tinted media panel and tools")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Run desktop panel preview")
    run_cmd.add_argument("--title", default="")
    run_cmd.add_argument("--artist", action="append", default=None, help="Repeat for multiple artists")
    run_cmd.add_argument("--album", default="")
    run_cmd.add_argument("--track", type=int, default=None)
    run_cmd.add_argument("--disc", type=int, default=None)
    run_cmd.add_argument("--art-url", default=None, help="http(s)/file/data URL or local path")
    run_cmd.add_argument("--identity", default="")
    run_cmd.add_argument("--desktop-entry", default=None)
    run_cmd.add_argument("--status", default="Playing", choices=[s.value for s in PlaybackStatus])
    run_cmd.add_argument("--no-scroll", action="store_true", help="Use segmented labels")
    run_cmd.add_argument("--config", default=None, help="Optional config file path")
    run_cmd.set_defaults(func=cmd_run)

    sample_cmd = sub.add_parser("sample", help="Print derived colors for an album art image")
    sample_cmd.add_argument("source", help="Image URL or path")
    sample_cmd.add_argument("--step", type=int, default=None, help="Pixel stride (default from config)")
    sample_cmd.add_argument("--config", default=None, help="Optional config file path")
    sample_cmd.set_defaults(func=cmd_sample)

    config_cmd = sub.add_parser("config", help="Inspect or create settings")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    show_cmd = config_sub.add_parser("show", help="Print effective settings")
    show_cmd.add_argument("--config", default=None)
    show_cmd.set_defaults(func=cmd_config_show)
    init_cmd = config_sub.add_parser("init", help="Write settings file with defaults filled in")
    init_cmd.add_argument("--config", default=None)
    init_cmd.set_defaults(func=cmd_config_init)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(console=False)
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
