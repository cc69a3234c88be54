class BsdualError(Exception):
    """Base error."""

class InvalidDateString(BsdualError, ValueError):
    """Raised when an initial value is not a Y-M-D triple valid in its calendar."""

class DayOutOfRange(BsdualError, ValueError):
    """Raised when a selected day falls outside the displayed month."""

    def __init__(self, day: int, limit: int):
        super().__init__(f"Day {day} is outside 1..{limit} for the displayed month")
        self.day = day
        self.limit = limit

class UnsupportedTemplate(BsdualError, KeyError):
    """Raised by strict template resolution for an unknown layout."""

class UnsupportedEra(BsdualError):
    """Raised when the oracle cannot represent the requested date."""

class OracleUnavailableError(BsdualError, KeyError):
    """Raised when an oracle name is not registered."""
