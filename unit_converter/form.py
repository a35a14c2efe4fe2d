"""Converter form state.

Holds what the user has entered in the conversion form and turns a submit
into a notification, independent of the toolkit that renders it.
"""

import logging
from typing import Optional

from unit_converter.config import (
    DEFAULT_CATEGORY,
    DEFAULT_MODE,
    MSG_FAILED,
    MSG_FIELDS_REQUIRED,
    MSG_SUCCESS,
)
from unit_converter.engine import convert_request
from unit_converter.errors import (
    ConversionError,
    InvalidValueError,
    MissingFieldError,
    UnitLookupError,
)
from unit_converter.models import ConversionRequest, ConversionResult, Notification
from unit_converter.registry import get_category

logger = logging.getLogger(__name__)


class ConverterForm:
    """Category, units, value and last result of the conversion form."""

    def __init__(self, mode: str = DEFAULT_MODE):
        self.mode = mode
        self.category = DEFAULT_CATEGORY
        self.from_unit: Optional[str] = None
        self.to_unit: Optional[str] = None
        self.value: Optional[float] = None
        self.result: Optional[ConversionResult] = None

    def unit_options(self) -> list:
        """Units selectable for the current category, in display order."""
        return list(get_category(self.category).units)

    def select_category(self, name: str) -> None:
        """Switch category. The selected units are cleared."""
        get_category(name)
        self.category = name
        self.from_unit = None
        self.to_unit = None

    def _check_unit(self, unit: Optional[str]) -> Optional[str]:
        if unit is None:
            return None
        if unit not in get_category(self.category):
            raise UnitLookupError(f"Unit '{unit}' is not a {self.category} unit")
        return unit

    def set_from_unit(self, unit: Optional[str]) -> None:
        self.from_unit = self._check_unit(unit)

    def set_to_unit(self, unit: Optional[str]) -> None:
        self.to_unit = self._check_unit(unit)

    def set_value(self, value) -> None:
        if value is None:
            self.value = None
            return
        try:
            self.value = float(value)
        except (TypeError, ValueError, OverflowError):
            raise InvalidValueError(f"Expected a number, got {value!r}") from None

    def request(self) -> ConversionRequest:
        return ConversionRequest(self.category, self.from_unit, self.to_unit, self.value)

    def submit(self) -> Notification:
        """Convert the current input.

        On success the result is stored; on failure nothing changes.
        """
        try:
            result = convert_request(self.request(), self.mode)
        except MissingFieldError:
            return Notification("error", MSG_FIELDS_REQUIRED)
        except ConversionError as e:
            logger.warning("Conversion failed: %s", e)
            return Notification("error", MSG_FAILED)

        self.result = result
        return Notification("success", MSG_SUCCESS)

    def reset(self) -> None:
        """Clear everything and go back to the default category."""
        self.category = DEFAULT_CATEGORY
        self.from_unit = None
        self.to_unit = None
        self.value = None
        self.result = None
