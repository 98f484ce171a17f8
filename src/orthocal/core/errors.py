class OrthocalError(Exception):
    """Base error."""

class YearParseError(OrthocalError, ValueError):
    """Raised when a year value cannot be read as a decimal integer."""

class YearRangeError(OrthocalError, ValueError):
    """Raised when a year is below the supported minimum."""

class InvalidDateError(OrthocalError, ValueError):
    """Raised when (year, month, day) does not name a valid day."""

class EmptyDateError(OrthocalError, ValueError):
    """Raised when an operation needs a valid date but got the empty one."""

class IndentConfigError(OrthocalError, ValueError):
    """Raised for an invalid indention (otstupka) configuration."""

class ScheduleError(OrthocalError, LookupError):
    """Raised when a built year lacks a day every year must have (Pascha, Pentecost, ...)."""
