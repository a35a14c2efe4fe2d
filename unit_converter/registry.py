"""Registry of unit categories and their conversion functions.

Each unit's ``from_base`` function takes a value in the category's base unit
(meter, kilogram, celsius, liter) and returns it in that unit. The registry
is built once at import and is read-only afterwards.
"""

import logging
from types import MappingProxyType

from unit_converter.config import UNIT_TYPES
from unit_converter.errors import RegistryError, UnitLookupError
from unit_converter.models import UnitCategory, UnitDefinition

logger = logging.getLogger(__name__)


def _identity(name: str) -> UnitDefinition:
    return UnitDefinition(name, lambda v: v, lambda v: v)


def _times(name: str, factor: float) -> UnitDefinition:
    return UnitDefinition(name, lambda v: v * factor, lambda v: v / factor)


def _divided_by(name: str, divisor: float) -> UnitDefinition:
    return UnitDefinition(name, lambda v: v / divisor, lambda v: v * divisor)


UNIT_DEFINITIONS = {
    "length": [
        _identity("meter"),
        _divided_by("kilometer", 1000),
        _times("centimeter", 100),
        _times("mile", 0.000621371),
        _times("inch", 39.3701),
        _times("foot", 3.28084),
    ],
    "weight": [
        _identity("kilogram"),
        _times("gram", 1000),
        _times("pound", 2.20462),
        _times("ounce", 35.274),
    ],
    "temperature": [
        _identity("celsius"),
        UnitDefinition("fahrenheit", lambda v: (v * 9) / 5 + 32, lambda v: (v - 32) * 5 / 9),
        UnitDefinition("kelvin", lambda v: v + 273.15, lambda v: v - 273.15),
    ],
    "volume": [
        _identity("liter"),
        _times("milliliter", 1000),
        _times("gallon", 0.264172),
        _divided_by("cubic_meter", 1000),
    ],
}


def build_registry(unit_types: dict = UNIT_TYPES, definitions: dict = UNIT_DEFINITIONS):
    """Build the read-only category -> unit -> UnitDefinition mapping.

    Raises RegistryError if a listed unit has no function, a function has no
    listed unit, or a unit is listed twice.
    """
    if set(unit_types) != set(definitions):
        raise RegistryError(
            f"Categories differ: listed {sorted(unit_types)}, defined {sorted(definitions)}"
        )

    registry = {}
    for category, units in unit_types.items():
        if len(set(units)) != len(units):
            raise RegistryError(f"Duplicate unit names in category '{category}'")

        table = {}
        for definition in definitions[category]:
            if definition.name in table:
                raise RegistryError(
                    f"Unit '{definition.name}' defined twice in category '{category}'"
                )
            table[definition.name] = definition

        orphans = set(table) ^ set(units)
        if orphans:
            raise RegistryError(
                f"Units without a matching entry in category '{category}': {', '.join(sorted(orphans))}"
            )

        # Keep display order from the unit list
        registry[category] = MappingProxyType({unit: table[unit] for unit in units})

    logger.debug("Built unit registry with %d categories", len(registry))
    return MappingProxyType(registry)


REGISTRY = build_registry()


def list_categories() -> list:
    """Return category names in display order."""
    return list(REGISTRY)


def get_category(name: str) -> UnitCategory:
    if name not in REGISTRY:
        raise UnitLookupError(f"Unknown category '{name}'")
    return UnitCategory(name=name, units=tuple(REGISTRY[name]))


def list_units(category: str) -> list:
    """Return the units of a category in display order."""
    return list(get_category(category).units)


def get_unit(category: str, unit: str) -> UnitDefinition:
    """Look up a unit's definition within a category."""
    units = REGISTRY.get(category)
    if units is None:
        raise UnitLookupError(f"Unknown category '{category}'")
    definition = units.get(unit)
    if definition is None:
        raise UnitLookupError(f"Unit '{unit}' is not a {category} unit")
    return definition
