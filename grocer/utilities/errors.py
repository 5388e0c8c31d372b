"""Exceptions raised by the planning and import code."""


class GrocerError(ValueError):
    """Base class for errors surfaced to the user."""


class FormatError(GrocerError):
    """An imported or stored document does not have the expected shape."""


class ConfigurationError(GrocerError):
    """Caller supplied values the computation cannot work with (e.g. zero servings)."""
