"""Data models for the unit converter."""

from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class UnitDefinition:
    """A unit and its conversion functions.

    ``from_base`` maps a value in the category's base unit to this unit.
    ``to_base`` is its inverse.
    """
    name: str
    from_base: Callable[[float], float]
    to_base: Callable[[float], float]


@dataclass(frozen=True)
class UnitCategory:
    """A unit category with its units in display order."""
    name: str
    units: tuple

    @property
    def base_unit(self) -> str:
        return self.units[0]

    def __contains__(self, unit) -> bool:
        return unit in self.units

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass
class ConversionRequest:
    """A single conversion asked for by the user."""
    category: Optional[str]
    from_unit: Optional[str]
    to_unit: Optional[str]
    value: Optional[float]

    def missing_fields(self) -> list:
        """Return the names of inputs that were not provided."""
        missing = []
        for name in ("category", "from_unit", "to_unit"):
            if not getattr(self, name):
                missing.append(name)
        if self.value is None or self.value == "":
            missing.append("value")
        return missing


@dataclass
class ConversionResult:
    """A converted value paired with its target unit."""
    value: float
    unit: str
    request: Optional[ConversionRequest] = None

    @property
    def display_value(self) -> str:
        """Value without trailing zeros, e.g. 212.0 -> "212"."""
        if self.value == 0:
            return "0"
        if abs(self.value) >= 1e21:
            return repr(self.value)
        return f"{self.value:.4f}".rstrip("0").rstrip(".")

    def label(self) -> str:
        return f"{self.display_value} {self.unit}"


@dataclass(frozen=True)
class Notification:
    """A user-facing message produced by the form."""
    level: str  # "success" or "error"
    message: str

    @property
    def ok(self) -> bool:
        return self.level == "success"
