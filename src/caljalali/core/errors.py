class CaljalaliError(Exception):
    """Base error."""

class MissingTranslation(CaljalaliError, LookupError):
    """Raised when a locale provider has no string for a required key."""

class InvalidDateError(CaljalaliError, ValueError):
    """Raised by explicit validation helpers; the converters never raise it."""
