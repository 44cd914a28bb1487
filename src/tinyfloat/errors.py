"""Errors raised when a tiny float format is configured."""


class FormatConfigError(ValueError):
    pass


class InvalidSignedFlag(FormatConfigError):
    """The signed flag is not a bool."""


class InvalidExponentConfig(FormatConfigError):
    """Exponent size out of range for the signedness, or bias not an int."""
