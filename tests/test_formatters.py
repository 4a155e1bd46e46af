"""Unit tests for xfertime.utils.formatters."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import unittest
from xfertime.utils.formatters import format_duration, format_quantity


class TestFormatDurationSubSecond(unittest.TestCase):
    def test_zero(self):
        self.assertEqual(format_duration(0), "<1 second")

    def test_just_below_one(self):
        self.assertEqual(format_duration(0.999), "<1 second")

    def test_exactly_one(self):
        self.assertEqual(format_duration(1.0), "1s")


class TestFormatDurationSeconds(unittest.TestCase):
    def test_whole(self):
        self.assertEqual(format_duration(8.0), "8s")

    def test_rounds_up(self):
        self.assertEqual(format_duration(8.01), "9s")

    def test_upper_edge_rounds_to_sixty(self):
        self.assertEqual(format_duration(59.5), "60s")


class TestFormatDurationMinutes(unittest.TestCase):
    def test_exact_minute(self):
        self.assertEqual(format_duration(60), "1m")

    def test_with_seconds(self):
        self.assertEqual(format_duration(80), "1m 20s")

    def test_small_remainder_dropped(self):
        self.assertEqual(format_duration(65), "1m")

    def test_remainder_nine_dropped(self):
        self.assertEqual(format_duration(128.5), "2m")

    def test_remainder_ten_kept(self):
        self.assertEqual(format_duration(130), "2m 10s")

    def test_rollover(self):
        self.assertEqual(format_duration(299.6), "5m")

    def test_last_minute(self):
        self.assertEqual(format_duration(3599), "59m 59s")


class TestFormatDurationHours(unittest.TestCase):
    def test_exact_hour(self):
        self.assertEqual(format_duration(3600), "1h 0m")

    def test_minutes_floored(self):
        self.assertEqual(format_duration(8000), "2h 13m")

    def test_seconds_ignored(self):
        self.assertEqual(format_duration(3600 + 59.9), "1h 0m")

    def test_many_hours(self):
        self.assertEqual(format_duration(100 * 3600 + 61), "100h 1m")


class TestFormatQuantity(unittest.TestCase):
    def test_fraction(self):
        self.assertEqual(format_quantity(0.056, "Mbps"), "0.056 Mbps")

    def test_whole(self):
        self.assertEqual(format_quantity(1000, "Mbps"), "1000 Mbps")


if __name__ == "__main__":
    unittest.main()
