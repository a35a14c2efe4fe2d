"""Conversion engine.

A conversion always goes through the category's base unit:

1. apply the source unit's function to the value (compat mode), or its
   inverse (physical mode), to get an intermediate value
2. apply the target unit's function to the intermediate value
3. round to RESULT_DECIMALS fractional digits

Compat mode reproduces the converter's historical output, where the source
unit's base->unit function is applied directly. For non-base source units
that is not a physical conversion, e.g. foot -> meter multiplies by 3.28084
instead of dividing. Physical mode gives the textbook result.
"""

import logging
import math
import numbers
from decimal import ROUND_HALF_UP, Context, Decimal

from unit_converter.config import CONVERSION_MODES, DEFAULT_MODE, RESULT_DECIMALS
from unit_converter.errors import InvalidValueError, MissingFieldError
from unit_converter.models import ConversionRequest, ConversionResult
from unit_converter.registry import get_category, get_unit

logger = logging.getLogger(__name__)


def round_result(value: float, decimals: int = RESULT_DECIMALS) -> float:
    """Round to a fixed number of fractional digits, halves away from zero.

    Works on the exact binary value of ``value``, the same way fixed-point
    formatting does.
    """
    quantum = Decimal(1).scaleb(-decimals)
    # Wide enough for any finite float
    context = Context(prec=400)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=context))


def _coerce_value(value) -> float:
    if isinstance(value, bool):
        raise InvalidValueError(f"Expected a number, got {value!r}")
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise InvalidValueError(f"Expected a number, got {value!r}") from None
    elif not isinstance(value, numbers.Real):
        raise InvalidValueError(f"Expected a number, got {type(value).__name__}")

    try:
        value = float(value)
    except OverflowError:
        raise InvalidValueError("Value is out of range") from None
    if not math.isfinite(value):
        raise InvalidValueError(f"Value must be finite, got {value}")
    return value


def convert(category, from_unit, to_unit, value, mode: str = DEFAULT_MODE) -> float:
    """Convert ``value`` from ``from_unit`` to ``to_unit`` within ``category``.

    Raises:
        MissingFieldError: an input is None (or an empty name / empty string value)
        UnitLookupError: the category or a unit is not registered
        InvalidValueError: the value is not a finite number
    """
    request = ConversionRequest(category, from_unit, to_unit, value)
    missing = request.missing_fields()
    if missing:
        logger.warning("Rejected conversion, missing %s", ", ".join(missing))
        raise MissingFieldError(missing)
    if mode not in CONVERSION_MODES:
        raise ValueError(f"Unknown mode '{mode}'. Choose from: {', '.join(CONVERSION_MODES)}")

    source = get_unit(category, from_unit)
    target = get_unit(category, to_unit)
    number = _coerce_value(value)

    if mode == "physical":
        intermediate = source.to_base(number)
    else:
        intermediate = source.from_base(number)
    converted = target.from_base(intermediate)
    if not math.isfinite(converted):
        raise InvalidValueError(f"{number} {from_unit} is out of range for {to_unit}")
    result = round_result(converted)

    logger.debug(
        "%s: %s %s -> %s %s (%s mode)", category, number, from_unit, result, to_unit, mode
    )
    return result


def convert_request(request: ConversionRequest, mode: str = DEFAULT_MODE) -> ConversionResult:
    """Convert a request and pair the value with its target unit."""
    value = convert(request.category, request.from_unit, request.to_unit, request.value, mode)
    return ConversionResult(value=value, unit=request.to_unit, request=request)


def convert_all(category, from_unit, value, mode: str = DEFAULT_MODE) -> list:
    """Convert ``value`` to every unit of ``category``, in display order."""
    if not category:
        raise MissingFieldError(["category"])
    return [
        convert_request(ConversionRequest(category, from_unit, unit, value), mode)
        for unit in get_category(category).units
    ]
