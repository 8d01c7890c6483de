import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "color"))

from mediapanel_color.models import ARTIST_BASE, WHITE, Color
from mediapanel_color.transform import blend, blend_css, brighten, brighten_css, round_half_up


class BrightenTests(unittest.TestCase):
    def test_doubles_channels(self):
        self.assertEqual(brighten_css("rgb(100,100,100)", 2.0), "rgb(200, 200, 200)")

    def test_clamps_at_255(self):
        self.assertEqual(brighten_css("rgb(200,200,200)", 2.0), "rgb(255, 255, 255)")

    def test_channels_stay_in_range_and_do_not_decrease(self):
        for color in (Color(0, 0, 0), Color(1, 128, 254), Color(255, 255, 255), Color(37, 90, 201)):
            for m in (1.0, 1.05, 1.7, 3.0, 100.0):
                out = brighten(color, m)
                for before, after in zip(color.as_tuple(), out.as_tuple()):
                    self.assertGreaterEqual(after, before)
                    self.assertLessEqual(after, 255)

    def test_zero_multiplier(self):
        self.assertEqual(brighten(Color(9, 9, 9), 0), Color(0, 0, 0))

    def test_infinite_multiplier_saturates_lit_channels(self):
        self.assertEqual(brighten(Color(100, 0, 50), float("inf")), Color(255, 0, 255))
        self.assertEqual(brighten_css("rgb(1, 0, 0)", 1e400), "rgb(255, 0, 0)")

    def test_nan_multiplier_keeps_color(self):
        self.assertEqual(brighten(Color(100, 0, 50), float("nan")), Color(100, 0, 50))

    def test_malformed_text_returned_unchanged(self):
        self.assertEqual(brighten_css("not a color", 2.0), "not a color")


class BlendTests(unittest.TestCase):
    def test_boundary_identities(self):
        c = Color(200, 100, 50)
        self.assertEqual(blend(c, 0, ARTIST_BASE), ARTIST_BASE)
        self.assertEqual(blend(c, 1, ARTIST_BASE), c)
        self.assertEqual(blend(c, 0.0), WHITE)

    def test_half_rounds_away_from_zero(self):
        # Each channel lands exactly on .5: 238.5, 208.5, 193.5.
        self.assertEqual(blend_css("rgb(200,100,50)", 0.3, "rgb(255,255,255)"), "rgb(239, 209, 194)")

    def test_artist_base(self):
        self.assertEqual(blend(Color(0, 0, 0), 0.25, ARTIST_BASE), Color(128, 128, 128))

    def test_extrapolation_is_clamped(self):
        self.assertEqual(blend(Color(255, 0, 0), 2.0, WHITE), Color(255, 0, 0))
        self.assertEqual(blend(Color(0, 0, 0), -1.0, WHITE), Color(255, 255, 255))

    def test_infinite_opacity_saturates_toward_color(self):
        self.assertEqual(blend(Color(255, 0, 200), float("inf"), ARTIST_BASE), Color(255, 0, 255))
        self.assertEqual(blend(Color(255, 0, 170), float("-inf"), ARTIST_BASE), Color(0, 255, 170))

    def test_nan_opacity_keeps_color(self):
        self.assertEqual(blend(Color(1, 2, 3), float("nan")), Color(1, 2, 3))

    def test_malformed_inputs_returned_unchanged(self):
        self.assertEqual(blend_css("rgb(1, 2)", 0.5), "rgb(1, 2)")
        self.assertEqual(blend_css("rgb(1, 2, 3)", 0.5, "white"), "rgb(1, 2, 3)")

    def test_round_half_up(self):
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(2.4999), 2)


if __name__ == "__main__":
    unittest.main()
