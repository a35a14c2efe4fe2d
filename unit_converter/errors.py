"""Exceptions raised by the conversion engine.

Every ``ConversionError`` is recoverable: callers report it to the user and
keep their previous state.
"""


class ConversionError(ValueError):
    """Base class for rejected conversion requests."""


class MissingFieldError(ConversionError):
    """One or more required inputs were not provided."""

    def __init__(self, fields):
        self.fields = tuple(fields)
        super().__init__(f"Missing required field(s): {', '.join(self.fields)}")


class UnitLookupError(ConversionError):
    """A category or unit name is not registered."""


class InvalidValueError(ConversionError):
    """The value to convert is not a finite real number."""


class RegistryError(RuntimeError):
    """The unit registry does not match the configured unit list."""
