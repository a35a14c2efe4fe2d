"""Command-line interface for the unit converter."""

import argparse
import logging
import sys
from typing import NoReturn

from unit_converter.config import CONVERSION_MODES, DEFAULT_MODE, LOG_FORMAT, LOG_LEVEL
from unit_converter.engine import convert_all, convert_request
from unit_converter.errors import ConversionError
from unit_converter.models import ConversionRequest
from unit_converter.registry import get_category, list_categories


def _fail(message: str) -> NoReturn:
    print(message, file=sys.stderr)
    sys.exit(1)


# --- Command handlers ---

def cmd_categories(args):
    for name in list_categories():
        category = get_category(name)
        print(f"{category.label:<12}  {', '.join(category.units)}")


def cmd_units(args):
    try:
        category = get_category(args.category)
    except ConversionError as e:
        _fail(f"{e}. Choose from: {', '.join(list_categories())}")

    for unit in category.units:
        marker = "  (base)" if unit == category.base_unit else ""
        print(f"  {unit}{marker}")


def cmd_convert(args):
    request = ConversionRequest(args.category, args.from_unit, args.to_unit, args.value)
    try:
        result = convert_request(request, args.mode)
    except ConversionError as e:
        _fail(f"Conversion failed: {e}")

    print(f"Result: {result.label()}")


def cmd_table(args):
    try:
        results = convert_all(args.category, args.from_unit, args.value, args.mode)
    except ConversionError as e:
        _fail(f"Conversion failed: {e}")

    print(f"{args.value} {args.from_unit} ({args.mode} mode)")
    print("-" * 40)
    for result in results:
        print(f"  {result.unit:<14}  {result.display_value:>20}")


# --- Argument parser ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unit-converter",
        description="Convert values between units of length, weight, temperature and volume",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    categories_p = subparsers.add_parser("categories", help="List unit categories")
    categories_p.set_defaults(func=cmd_categories)

    units_p = subparsers.add_parser("units", help="List the units of a category")
    units_p.add_argument("category")
    units_p.set_defaults(func=cmd_units)

    convert_p = subparsers.add_parser("convert", help="Convert a value")
    convert_p.add_argument("category", help="e.g. length")
    convert_p.add_argument("from_unit", metavar="from", help="Source unit")
    convert_p.add_argument("to_unit", metavar="to", help="Target unit")
    convert_p.add_argument("value", help="Value to convert")
    convert_p.add_argument("--mode", choices=CONVERSION_MODES, default=DEFAULT_MODE)
    convert_p.set_defaults(func=cmd_convert)

    table_p = subparsers.add_parser("table", help="Convert a value to every unit of its category")
    table_p.add_argument("category")
    table_p.add_argument("from_unit", metavar="from", help="Source unit")
    table_p.add_argument("value", help="Value to convert")
    table_p.add_argument("--mode", choices=CONVERSION_MODES, default=DEFAULT_MODE)
    table_p.set_defaults(func=cmd_table)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level="DEBUG" if args.verbose else LOG_LEVEL, format=LOG_FORMAT)

    if not args.command:
        parser.print_help()
        return

    args.func(args)
