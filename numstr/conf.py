"""
Default configuration constants for number string parsing, rounding and conversion.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math


# @formatter:off

class NumStrConf:
    """
    Default configuration constants shared by numstr modules.

    Values here are package-wide defaults only. Callers override them per call through
    keyword arguments or through the frozen spec objects (RoundingSpec, PrecisionBitsSpec)
    and their merge() methods.

    Attributes:
        DECIMAL_SEPARATOR: Radix point used by Native Number Strings and the default
            for Pure and Dirty parsing.

        DEFAULT_ROUNDING_TYPE: Name of the rounding mode applied when none is given.
            Rounding half away from zero is the reference mode.

        DIGITS: The only characters a DigitSequence may hold.

        INVALID_SEPARATOR_CHARS: Characters which may never appear in a decimal
            separator, in addition to the digits.

        DIRTY_NEGATIVE_OPEN, DIRTY_NEGATIVE_CLOSE: Parentheses denoting negation
            in Dirty Number Strings, e.g. "(123.45)".

        MINUS_SIGN: Negative number sign recognized by all dialects.

        LOG2_10: Binary digits per decimal digit, used to estimate precision bits.

        PRECISION_BITS_ALIGNMENT: Estimated precision bits are rounded up to a multiple
            of this value.

        MAX_PRECISION_BITS: Upper bound of estimated precision bits (uint32 max).

        MIN_PRECISION_BITS: Smallest precision accepted when estimating digit capacity.

    Examples:
        >>> NumStrConf.DECIMAL_SEPARATOR
        '.'
        >>> NumStrConf.PRECISION_BITS_ALIGNMENT
        8
    """

    DECIMAL_SEPARATOR = "."
    DEFAULT_ROUNDING_TYPE = "HalfAwayFromZero"

    DIGITS = "0123456789"
    MINUS_SIGN = "-"
    DIRTY_NEGATIVE_OPEN = "("
    DIRTY_NEGATIVE_CLOSE = ")"
    INVALID_SEPARATOR_CHARS = "-()"

    LOG2_10 = math.log2(10)
    PRECISION_BITS_ALIGNMENT = 8
    MAX_PRECISION_BITS = 2 ** 32 - 1
    MIN_PRECISION_BITS = 4

# @formatter:on
