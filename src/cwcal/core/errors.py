class CwcalError(Exception):
    """Base error."""

class InputTypeError(CwcalError, TypeError):
    """Raised when an input is not a year, ISO string, date or date-like mapping."""

class InvalidArgumentError(CwcalError, ValueError):
    """Raised for non-integer years, impossible month/day combinations and malformed strings."""

class OutOfRangeError(CwcalError, ValueError):
    """Raised when a year falls outside the supported 1583..9999 window."""

class CalendarDataError(CwcalError, ValueError):
    """Raised when the fixed-calendar table cannot be parsed."""

class UnknownReckoningError(CwcalError, KeyError):
    """Raised when a named Easter reckoning is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
