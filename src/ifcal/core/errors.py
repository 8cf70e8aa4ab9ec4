class IfcalError(Exception):
    """Base error."""

class InvalidArgument(IfcalError, ValueError):
    """Raised when an out-of-range month, day or label is passed into the core."""

class InvalidDateInput(IfcalError, ValueError):
    """Raised when user-supplied date text cannot be parsed into a valid date."""

    def __init__(self, text: str, reason: str = "expected YYYY-MM-DD"):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid date {text!r}: {reason}")
