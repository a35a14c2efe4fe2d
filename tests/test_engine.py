"""Tests for the conversion engine."""

import math
import unittest

from unit_converter.engine import convert, convert_all, convert_request, round_result
from unit_converter.errors import (
    ConversionError,
    InvalidValueError,
    MissingFieldError,
    UnitLookupError,
)
from unit_converter.models import ConversionRequest
from unit_converter.registry import REGISTRY, get_unit


class TestConvert(unittest.TestCase):
    def test_meter_to_foot(self):
        # meter(10) = 10, foot(10) = 32.8084
        self.assertEqual(convert("length", "meter", "foot", 10), 32.8084)

    def test_celsius_to_fahrenheit(self):
        # celsius(100) = 100, fahrenheit(100) = 100 * 9 / 5 + 32 = 212
        self.assertEqual(convert("temperature", "celsius", "fahrenheit", 100), 212)

    def test_kilogram_to_pound(self):
        self.assertEqual(convert("weight", "kilogram", "pound", 2), 4.4092)

    def test_liter_to_milliliter(self):
        self.assertEqual(convert("volume", "liter", "milliliter", 1.5), 1500)

    def test_source_function_applied_forward(self):
        # fahrenheit(212) = 413.6, celsius is the identity
        self.assertAlmostEqual(convert("temperature", "fahrenheit", "celsius", 212), 413.6)
        # kilometer(1000) = 1
        self.assertEqual(convert("length", "kilometer", "meter", 1000), 1)

    def test_same_unit_base_is_identity(self):
        for category, units in REGISTRY.items():
            base = next(iter(units))
            self.assertEqual(convert(category, base, base, 12.5), 12.5, f"Failed for {category}")

    def test_same_unit_applies_function_twice(self):
        for category, units in REGISTRY.items():
            for unit, definition in units.items():
                expected = round_result(definition.from_base(definition.from_base(7)))
                self.assertEqual(convert(category, unit, unit, 7), expected, f"Failed for {unit}")

    def test_same_unit_not_idempotent(self):
        # 10 * 3.28084 * 3.28084 = 107.639111...
        self.assertEqual(convert("length", "foot", "foot", 10), 107.6391)
        self.assertAlmostEqual(convert("temperature", "kelvin", "kelvin", 0), 546.3)

    def test_result_rounded_to_four_digits(self):
        # 1 * 0.000621371
        self.assertEqual(convert("length", "meter", "mile", 1), 0.0006)

    def test_numeric_string_value(self):
        self.assertEqual(convert("length", "meter", "foot", "10"), 32.8084)

    def test_zero_value(self):
        self.assertEqual(convert("length", "meter", "foot", 0), 0)

    def test_negative_value(self):
        self.assertEqual(convert("temperature", "celsius", "fahrenheit", -40), -40)


class TestPhysicalMode(unittest.TestCase):
    def test_foot_to_meter(self):
        self.assertEqual(convert("length", "foot", "meter", 32.8084, mode="physical"), 10)

    def test_fahrenheit_to_celsius(self):
        self.assertEqual(convert("temperature", "fahrenheit", "celsius", 212, mode="physical"), 100)

    def test_kilometer_to_meter(self):
        self.assertEqual(convert("length", "kilometer", "meter", 1.5, mode="physical"), 1500)

    def test_base_source_matches_compat(self):
        self.assertEqual(
            convert("volume", "liter", "gallon", 10, mode="physical"),
            convert("volume", "liter", "gallon", 10),
        )

    def test_same_unit_is_identity(self):
        for category, units in REGISTRY.items():
            for unit in units:
                self.assertAlmostEqual(
                    convert(category, unit, unit, 42, mode="physical"), 42, places=4
                )

    def test_unknown_mode(self):
        with self.assertRaises(ValueError):
            convert("length", "meter", "foot", 1, mode="inverse")


class TestConvertErrors(unittest.TestCase):
    def test_missing_value(self):
        with self.assertRaises(MissingFieldError) as ctx:
            convert("length", "meter", "foot", None)
        self.assertEqual(ctx.exception.fields, ("value",))

    def test_missing_units(self):
        with self.assertRaises(MissingFieldError) as ctx:
            convert("length", "", None, 1)
        self.assertEqual(ctx.exception.fields, ("from_unit", "to_unit"))

    def test_missing_category(self):
        with self.assertRaises(MissingFieldError):
            convert(None, "meter", "foot", 1)

    def test_unit_from_other_category(self):
        with self.assertRaises(UnitLookupError):
            convert("length", "kilogram", "foot", 1)
        with self.assertRaises(UnitLookupError):
            convert("length", "meter", "liter", 1)

    def test_unknown_category(self):
        with self.assertRaises(UnitLookupError):
            convert("speed", "meter", "foot", 1)

    def test_non_finite_value(self):
        for value in (math.nan, math.inf, -math.inf):
            with self.assertRaises(InvalidValueError):
                convert("length", "meter", "foot", value)

    def test_non_numeric_value(self):
        for value in ("abc", True, [1]):
            with self.assertRaises(InvalidValueError):
                convert("length", "meter", "foot", value)

    def test_overflowing_result(self):
        with self.assertRaises(InvalidValueError):
            convert("length", "meter", "centimeter", 1e308)

    def test_errors_are_value_errors(self):
        self.assertTrue(issubclass(MissingFieldError, ConversionError))
        self.assertTrue(issubclass(UnitLookupError, ConversionError))
        self.assertTrue(issubclass(ConversionError, ValueError))


class TestRoundResult(unittest.TestCase):
    def test_four_digits(self):
        self.assertEqual(round_result(1.23456), 1.2346)
        self.assertEqual(round_result(-1.23456), -1.2346)

    def test_halves_away_from_zero(self):
        self.assertEqual(round_result(2.5, 0), 3)
        self.assertEqual(round_result(-2.5, 0), -3)
        self.assertEqual(round_result(0.125, 2), 0.13)

    def test_large_value(self):
        self.assertEqual(round_result(1e300), 1e300)


class TestConvertRequest(unittest.TestCase):
    def test_result_carries_target_unit(self):
        request = ConversionRequest("length", "meter", "foot", 10)
        result = convert_request(request)
        self.assertEqual(result.value, 32.8084)
        self.assertEqual(result.unit, "foot")
        self.assertIs(result.request, request)

    def test_convert_all(self):
        results = convert_all("length", "meter", 1)
        self.assertEqual(
            [r.unit for r in results],
            ["meter", "kilometer", "centimeter", "mile", "inch", "foot"],
        )
        self.assertEqual(
            [r.value for r in results],
            [1, 0.001, 100, 0.0006, 39.3701, 3.2808],
        )

    def test_convert_all_unknown_unit(self):
        with self.assertRaises(UnitLookupError):
            convert_all("weight", "meter", 1)

    def test_lookup_is_by_name(self):
        self.assertEqual(get_unit("volume", "gallon").name, "gallon")


if __name__ == "__main__":
    unittest.main()
