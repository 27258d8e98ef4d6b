class CalethError(Exception):
    """Base error."""

class InvalidMonthError(CalethError, ValueError):
    """Month outside 1..13 (Ethiopian) or 1..12 (Gregorian)."""

class InvalidDateError(CalethError, ValueError):
    """Day outside the valid range for its year and month."""
