"""
Exceptions and warnings raised by numstr.

Every exception also derives from the builtin a caller would expect for the same
failure (TypeError, ValueError, ArithmeticError), so generic handlers keep working.
"""


# Classes --------------------------------------------------------------------------------------------------------------

class NumStrError(Exception):
    """Base exception for all numstr errors."""


class NilInputError(NumStrError, TypeError):
    """A required argument is None."""


class MalformedInputError(NumStrError, ValueError):
    """Input text or digits do not describe a number, e.g. no digits found."""


class InvalidFormatError(MalformedInputError):
    """Input violates the strict Native Number String dialect."""


class InvalidArgumentError(NumStrError, ValueError):
    """Argument value out of range, e.g. a negative fractional width or a bad decimal separator."""


class UnsupportedRoundingModeError(NumStrError, ValueError):
    """Rounding type is not one of the enumerated rounding modes."""


class AccuracyLossError(NumStrError, ArithmeticError):
    """
    Binary float assignment could not represent the decimal value exactly.

    Recoverable: retry with a larger extra digits buffer or a precision override.
    """

    def __init__(self, message: str, *, precision_bits: int | None = None) -> None:
        self.precision_bits = precision_bits
        super().__init__(message)


class NumStrWarning(UserWarning):
    """Base warning category for numstr diagnostics."""


class PrecisionWarning(NumStrWarning):
    """Requested binary precision is smaller than the estimate for the digits involved."""
