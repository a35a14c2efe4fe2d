"""Application configuration and constants."""

import os

# Unit categories and their units, in display order.
# The first unit of each category is its base unit.
UNIT_TYPES = {
    "length": ("meter", "kilometer", "centimeter", "mile", "inch", "foot"),
    "weight": ("kilogram", "gram", "pound", "ounce"),
    "temperature": ("celsius", "fahrenheit", "kelvin"),
    "volume": ("liter", "milliliter", "gallon", "cubic_meter"),
}

# Must be the first key of UNIT_TYPES
DEFAULT_CATEGORY = "length"

# Fixed-point precision of every converted result
RESULT_DECIMALS = 4

# "compat" applies both unit functions forward (the form's historical output).
# "physical" inverts the source unit's function first.
CONVERSION_MODES = ("compat", "physical")
DEFAULT_MODE = "compat"

# Logging
LOG_LEVEL = os.environ.get("UNIT_CONVERTER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Form notifications
MSG_FIELDS_REQUIRED = "All fields are required!"
MSG_SUCCESS = "Conversion successful!"
MSG_FAILED = "Conversion failed."
