"""Unit tests for xfertime.gui.themes."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import unittest
import xfertime.gui.themes as themes
from xfertime.core.estimator import SpeedClass


class TestThemes(unittest.TestCase):

    def setUp(self):
        themes.set_current("dark")

    def tearDown(self):
        themes.set_current("dark")

    def test_theme_names(self):
        keys = [k for k, _ in themes.get_theme_names()]
        self.assertIn("dark", keys)
        self.assertIn("light", keys)

    def test_unknown_theme_falls_back(self):
        themes.set_current("neon")
        self.assertEqual(themes.active_key(), "dark")
        self.assertIs(themes.get_palette("neon"), themes.PALETTES["dark"])

    def test_stylesheets_render(self):
        for key, _ in themes.get_theme_names():
            qss = themes.get_stylesheet(key)
            self.assertIn(themes.PALETTES[key]["bg"], qss)
            self.assertNotIn("{bg", qss)
            self.assertNotIn("_rgb}", qss)

    def test_unknown_color_key(self):
        self.assertEqual(themes.c("no_such_key"), "#ff00ff")


class TestClassificationScheme(unittest.TestCase):

    def setUp(self):
        themes.set_current("light")

    def tearDown(self):
        themes.set_current("dark")

    def test_colors(self):
        p = themes.PALETTES["light"]
        self.assertEqual(themes.classification_color(SpeedClass.FAST), p["green"])
        self.assertEqual(themes.classification_color(SpeedClass.MODERATE), p["orange"])
        self.assertEqual(themes.classification_color(SpeedClass.SLOW), p["red"])

    def test_plain_string_values(self):
        self.assertEqual(themes.classification_color("slow"), themes.PALETTES["light"]["red"])
        self.assertEqual(themes.classification_label("fast"), "Fast Connection")

    def test_labels(self):
        self.assertEqual(themes.classification_label(SpeedClass.FAST), "Fast Connection")
        self.assertEqual(themes.classification_label(SpeedClass.MODERATE), "Moderate Connection")
        self.assertEqual(themes.classification_label(SpeedClass.SLOW), "Slow Connection")

    def test_labels_match_speed_class_names(self):
        for speed_class in SpeedClass:
            self.assertEqual(themes.classification_label(speed_class), speed_class.display_name)
            self.assertEqual(themes.classification_label(speed_class.value), speed_class.display_name)

    def test_neutral_default(self):
        self.assertEqual(themes.classification_label("warp"), "Connection")
        self.assertEqual(themes.classification_label(None), "Connection")
        self.assertEqual(themes.classification_color(None), themes.PALETTES["light"]["text_muted"])

    def test_card_style_uses_class_color(self):
        style = themes.classification_card_style(SpeedClass.FAST)
        self.assertIn("resultCard", style)
        self.assertIn("22, 163, 74", style)  # light green #16a34a


if __name__ == "__main__":
    unittest.main()
