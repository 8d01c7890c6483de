import json
import sys
import tempfile
import unittest
from io import StringIO
from pathlib import Path
from unittest.mock import patch

try:
    from PIL import Image
except Exception:  # pragma: no cover
    Image = None

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "desktop"))
sys.path.insert(0, str(ROOT / "packages" / "color"))
sys.path.insert(0, str(ROOT / "packages" / "artwork"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from mediapanel_app.cli import build_parser, cmd_config_init, cmd_sample, player_state_from_args
from mediapanel_core.metadata import PlaybackStatus


class CliTests(unittest.TestCase):
    def test_run_command(self):
        args = build_parser().parse_args(["run", "--title", "T", "--artist", "A", "--artist", "B", "--status", "Paused"])
        self.assertEqual(args.command, "run")
        state = player_state_from_args(args)
        self.assertEqual(state.metadata.artists, ("A", "B"))
        self.assertIs(state.playback_status, PlaybackStatus.PAUSED)

    def test_sample_command(self):
        args = build_parser().parse_args(["sample", "cover.png", "--step", "2"])
        self.assertEqual(args.command, "sample")
        self.assertEqual(args.step, 2)

    def test_config_commands(self):
        args = build_parser().parse_args(["config", "init", "--config", "x.json"])
        self.assertEqual(args.config_cmd, "init")

    def test_sample_prints_derived_colors(self):
        if Image is None:
            self.skipTest("Pillow not installed")
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cover.png"
            Image.new("RGB", (8, 8), (100, 50, 0)).save(path)
            args = build_parser().parse_args(["sample", str(path), "--config", str(Path(tmp) / "none.json")])
            with patch("sys.stdout", new_callable=StringIO) as out:
                self.assertEqual(cmd_sample(args), 0)
            payload = json.loads(out.getvalue())
        self.assertEqual(payload["average"], "rgb(100, 50, 0)")
        self.assertEqual(payload["glow"], "rgb(170, 85, 0)")
        self.assertEqual(payload["samples"], 4)
        self.assertEqual(len(payload["shadows"]), 4)

    def test_sample_reports_missing_file(self):
        args = build_parser().parse_args(["sample", "/nonexistent/cover.png", "--config", "/nonexistent/c.json"])
        with patch("sys.stdout", new_callable=StringIO) as out:
            self.assertEqual(cmd_sample(args), 2)
        self.assertIn("error", json.loads(out.getvalue()))

    def test_config_init_writes_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "sub" / "config.json"
            args = build_parser().parse_args(["config", "init", "--config", str(path)])
            with patch("sys.stdout", new_callable=StringIO):
                self.assertEqual(cmd_config_init(args), 0)
            self.assertTrue(path.exists())
            self.assertEqual(json.loads(path.read_text(encoding="utf-8"))["config_version"], 2)


if __name__ == "__main__":
    unittest.main()
