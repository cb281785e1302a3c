from typing import Optional


class NumeralError(ValueError):
    """Base class for input that cannot become a numeral."""

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.text = text


class MalformedNumberError(NumeralError):
    pass


class ValueOutOfBoundsError(NumeralError):
    pass
