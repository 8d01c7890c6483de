import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "color"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(Path(__file__).resolve().parent))

from fakes import FakeContainer, FakeScrolling, FakeToolkit, FakeWidget
from mediapanel_color.models import Color
from mediapanel_core.config import LabelConfig, TintConfig
from mediapanel_core.label_builder import PanelLabelBuilder, label_text
from mediapanel_core.metadata import PlaybackStatus, PlayerMetadata, PlayerState
from mediapanel_core.panel import IconHandle, IconState, Panel


def _player(**kw) -> PlayerState:
    md = PlayerMetadata(title=kw.pop("title", "Song\nTitle"), artists=kw.pop("artists", ("Band",)), album="")
    return PlayerState(identity="player", metadata=md, **kw)


class LabelBuilderTests(unittest.TestCase):
    def setUp(self):
        self.toolkit = FakeToolkit()
        self.builder = PanelLabelBuilder(TintConfig(), self.toolkit)
        self.bar = FakeContainer()

    def test_scrolling_mode_joins_segments(self):
        labels = LabelConfig(labels_order=("ARTIST", "-", "TITLE", "ALBUM", "TRACK_NUMBER"))
        panel = Panel(self.bar, _player(playback_status=PlaybackStatus.PAUSED), labels)
        self.builder.rebuild_label(panel, 0)

        label = panel.label
        self.assertIsInstance(label, FakeScrolling)
        self.assertEqual(label.text, "Band - Song Title Unknown album")
        self.assertTrue(label.paused)
        self.assertEqual(label.width, 200)
        self.assertIn("panel-label-text", label.label.classes)
        self.assertEqual(self.bar.children, [label])

    def test_playing_is_not_paused(self):
        panel = Panel(self.bar, _player(playback_status=PlaybackStatus.PLAYING))
        self.builder.rebuild_label(panel, 0)
        self.assertFalse(panel.label.paused)

    def test_segmented_mode_skips_empty_segments(self):
        labels = LabelConfig(labels_order=("TITLE", " - ", "ARTIST", "DISC_NUMBER"), scroll_labels=False, label_width=150)
        panel = Panel(self.bar, _player(title=""), labels)
        self.builder.rebuild_label(panel, 0)

        box = panel.label
        self.assertEqual([(c.text, c.role) for c in box.children], [(" - ", "separator"), ("Band", "artist")])
        self.assertEqual(box.style, "max-width: 150px;")
        self.assertEqual(box.fixed_width, 150)

    def test_segmented_without_fixed_width(self):
        labels = LabelConfig(scroll_labels=False, fixed_label_width=False)
        panel = Panel(self.bar, _player(), labels)
        self.builder.rebuild_label(panel, 0)
        self.assertEqual(panel.label.style, "")
        self.assertIsNone(panel.label.fixed_width)

    def test_rebuild_replaces_and_destroys_previous_once(self):
        icon = FakeWidget("icon")
        self.bar.insert_at(icon, 0)
        panel = Panel(self.bar, _player())
        self.builder.rebuild_label(panel, 1)
        first = panel.label
        self.builder.rebuild_label(panel, 1)

        self.assertEqual(first.destroy_count, 1)
        self.assertEqual(self.bar.children, [icon, panel.label])

    def test_applies_cached_icon_color(self):
        labels = LabelConfig(scroll_labels=False)
        panel = Panel(self.bar, _player(), labels)
        panel.icon = IconHandle(widget=FakeWidget("art"), state=IconState.ART_LOADED, color=Color(0, 0, 0))
        self.builder.rebuild_label(panel, 0)
        styles = {c.role: c.style for c in panel.label.children}
        self.assertEqual(styles["artist"], "color: rgb(128, 128, 128) !important;")
        self.assertEqual(styles["title"], "color: rgb(179, 179, 179) !important;")

    def test_untinted_without_cached_color(self):
        panel = Panel(self.bar, _player())
        self.builder.rebuild_label(panel, 0)
        self.assertEqual(panel.label.label.style, "")

    def test_toolkit_failure_does_not_escape(self):
        class Broken(FakeToolkit):
            def scrolling_label(self, *a, **kw):
                raise RuntimeError("toolkit gone")

        builder = PanelLabelBuilder(TintConfig(), Broken())
        panel = Panel(self.bar, _player())
        with self.assertLogs("mediapanel.label", level="ERROR"):
            builder.rebuild_label(panel, 0)
        self.assertIsNone(panel.label)

    def test_label_text_collapses_line_breaks(self):
        panel = Panel(self.bar, _player(title="a\r\n\nb"), LabelConfig(labels_order=("TITLE",)))
        self.assertEqual(label_text(panel), "a b")


if __name__ == "__main__":
    unittest.main()
