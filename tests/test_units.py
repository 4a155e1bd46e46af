"""Unit tests for xfertime.core.units."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import unittest
from xfertime.core.exceptions import InvalidUnitError, InvalidValueError
from xfertime.core.units import (
    SIZE_UNITS, SPEED_UNITS, check_positive, parse_quantity,
    size_multiplier, speed_multiplier,
)


class TestUnitTables(unittest.TestCase):
    def test_size_units_decimal(self):
        self.assertEqual(SIZE_UNITS["KB"], 10 ** 3)
        self.assertEqual(SIZE_UNITS["MB"], 10 ** 6)
        self.assertEqual(SIZE_UNITS["GB"], 10 ** 9)
        self.assertEqual(SIZE_UNITS["TB"], 10 ** 12)

    def test_speed_units_kilobits(self):
        self.assertEqual(SPEED_UNITS, {"Kbps": 1, "Mbps": 1000, "Gbps": 1000000})

    def test_selector_order(self):
        self.assertEqual(list(SIZE_UNITS), ["KB", "MB", "GB", "TB"])
        self.assertEqual(list(SPEED_UNITS), ["Kbps", "Mbps", "Gbps"])

    def test_multipliers(self):
        self.assertEqual(size_multiplier("GB"), 10 ** 9)
        self.assertEqual(speed_multiplier("Gbps"), 1000000)

    def test_unknown_unit(self):
        with self.assertRaises(InvalidUnitError):
            size_multiplier("PB")
        with self.assertRaises(InvalidUnitError):
            speed_multiplier(None)


class TestCheckPositive(unittest.TestCase):
    def test_int_becomes_float(self):
        self.assertEqual(check_positive("speed", 5), 5.0)
        self.assertIsInstance(check_positive("speed", 5), float)

    def test_rejects_bool(self):
        with self.assertRaises(InvalidValueError):
            check_positive("speed", True)

    def test_rejects_negative(self):
        with self.assertRaises(InvalidValueError):
            check_positive("speed", -0.1)


class TestParseQuantity(unittest.TestCase):
    def test_compact(self):
        self.assertEqual(parse_quantity("100MB", SIZE_UNITS), (100.0, "MB"))

    def test_spaced(self):
        self.assertEqual(parse_quantity(" 2.5 GB ", SIZE_UNITS), (2.5, "GB"))

    def test_leading_dot(self):
        self.assertEqual(parse_quantity(".5TB", SIZE_UNITS), (0.5, "TB"))

    def test_speed(self):
        self.assertEqual(parse_quantity("0.056Mbps", SPEED_UNITS), (0.056, "Mbps"))

    def test_wrong_table(self):
        with self.assertRaises(InvalidUnitError):
            parse_quantity("100Mbps", SIZE_UNITS)

    def test_no_unit(self):
        with self.assertRaises(InvalidValueError):
            parse_quantity("100", SIZE_UNITS)

    def test_garbage(self):
        with self.assertRaises(InvalidValueError):
            parse_quantity("fast", SPEED_UNITS)

    def test_none(self):
        with self.assertRaises(InvalidValueError):
            parse_quantity(None, SPEED_UNITS)

    def test_zero(self):
        with self.assertRaises(InvalidValueError):
            parse_quantity("0MB", SIZE_UNITS)


if __name__ == "__main__":
    unittest.main()
