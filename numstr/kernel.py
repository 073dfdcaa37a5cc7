"""
Number string kernel: the canonical decimal value, its sign and its descriptive statistics.

A NumberStrKernel stores integer and fractional digits as separate DigitSequence runs plus
a NumberSign. It is a mutable value owned by a single caller; only the rounding engine
mutates kernels it is handed.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import IntEnum, StrEnum, unique
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import NumStrConf
from .digits import DigitSequence
from .errors import InvalidArgumentError, NilInputError
from .formatters import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class NumberSign(IntEnum):
    """
    Sign of a kernel value.

    Integer values order POSITIVE > ZERO > NEGATIVE. NONE marks an uninitialized
    kernel and never appears on a parsed or rounded kernel.
    """
    NONE = -2
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


@unique
class NumericValueType(StrEnum):
    """Integer or floating point classification of a kernel value."""
    NONE = "None"
    INTEGER = "Integer"
    FLOATING_POINT = "FloatingPoint"


@dataclass(frozen=True)
class NumberStrStatsDto:
    """
    Read-only snapshot of kernel digit counts and classification.

    Attributes:
        num_of_integer_digits: Integer digits held, leading zeros included.
        num_of_significant_integer_digits: Integer digits without leading zeros.
        num_of_fractional_digits: Fractional digits held, trailing zeros included.
        num_of_significant_fractional_digits: Fractional digits without trailing zeros.
        number_value_type: INTEGER iff there are no significant fractional digits.
        number_sign: Sign of the value.
        is_zero_value: True iff both significant counts are zero.
    """
    num_of_integer_digits: int = 0
    num_of_significant_integer_digits: int = 0
    num_of_fractional_digits: int = 0
    num_of_significant_fractional_digits: int = 0
    number_value_type: NumericValueType = NumericValueType.INTEGER
    number_sign: NumberSign = NumberSign.ZERO
    is_zero_value: bool = True


class NumberStrKernel:
    """
    Canonical decimal value made of integer digits, fractional digits and a sign.

    Use the parsers in numstr.parsing to build kernels from text, or NumberStrKernel.new()
    to build one from digit strings directly.

    Attributes:
        integer_digits: Digits left of the radix point, most significant first.
        fractional_digits: Digits right of the radix point, most significant first.
        number_sign: NumberSign of the value.

    Examples:
        >>> k = NumberStrKernel.new("0012", "3400", NumberSign.NEGATIVE)
        >>> k.to_native_str()
        '-0012.3400'
        >>> k.normalize()
        >>> str(k)
        '-12.34'
        >>> k.stats().num_of_significant_fractional_digits
        2
    """
    __slots__ = ('integer_digits', 'fractional_digits', 'number_sign')

    def __init__(self,
                 integer_digits: DigitSequence | None = None,
                 fractional_digits: DigitSequence | None = None,
                 number_sign: NumberSign = NumberSign.NONE) -> None:
        self.integer_digits = integer_digits if integer_digits is not None else DigitSequence()
        self.fractional_digits = fractional_digits if fractional_digits is not None else DigitSequence()
        if not isinstance(self.integer_digits, DigitSequence):
            raise TypeError(f"integer_digits must be DigitSequence, but got {fmt_type(self.integer_digits)}")
        if not isinstance(self.fractional_digits, DigitSequence):
            raise TypeError(f"fractional_digits must be DigitSequence, but got {fmt_type(self.fractional_digits)}")
        self.number_sign = NumberSign(number_sign)

    @classmethod
    def new(cls,
            integer_digits: str = "0",
            fractional_digits: str = "",
            number_sign: NumberSign = NumberSign.POSITIVE) -> Self:
        """
        Build a settled kernel from digit strings.

        The sign is reconciled with the digits: any sign of an all-zero value becomes ZERO,
        and ZERO or NONE on a nonzero value becomes POSITIVE.

        Raises:
            MalformedInputError: If a digit string holds non-digit characters.
        """
        kernel = cls(DigitSequence(integer_digits), DigitSequence(fractional_digits), number_sign)
        kernel.settle()
        return kernel

    @classmethod
    def zero(cls) -> Self:
        return cls(DigitSequence("0"), DigitSequence(), NumberSign.ZERO)

    # Dunder ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Digit-exact equality: '1.50' and '1.5' differ, use compare_kernels() for numeric order."""
        if not isinstance(other, NumberStrKernel):
            return NotImplemented
        return (self.number_sign == other.number_sign
                and self.integer_digits == other.integer_digits
                and self.fractional_digits == other.fractional_digits)

    __hash__ = None

    def __str__(self) -> str:
        return self.to_native_str()

    def __repr__(self) -> str:
        return f"NumberStrKernel({self.to_native_str()!r}, sign={self.number_sign.name})"

    # Properties -----------------------------------------------------------

    @property
    def is_non_zero_value(self) -> bool:
        return not (self.integer_digits.is_all_zeros() and self.fractional_digits.is_all_zeros())

    @property
    def numeric_value_type(self) -> NumericValueType:
        if self.fractional_digits.is_all_zeros():
            return NumericValueType.INTEGER
        return NumericValueType.FLOATING_POINT

    @property
    def is_negative(self) -> bool:
        return self.number_sign == NumberSign.NEGATIVE

    # Methods --------------------------------------------------------------

    def copy(self) -> Self:
        return self.__class__(self.integer_digits.copy(), self.fractional_digits.copy(), self.number_sign)

    def settle(self) -> None:
        """
        Restore kernel invariants after its digits changed.

        Guarantees at least one integer digit and a sign consistent with the digits.
        """
        if self.integer_digits.is_empty():
            self.integer_digits.append("0")
        if not self.is_non_zero_value:
            self.number_sign = NumberSign.ZERO
        elif self.number_sign not in (NumberSign.NEGATIVE, NumberSign.POSITIVE):
            self.number_sign = NumberSign.POSITIVE

    def normalize(self) -> None:
        """Remove leading integer zeros (keeping one digit) and trailing fractional zeros in place."""
        self.integer_digits.strip_leading_zeros(keep_one=True)
        self.fractional_digits.strip_trailing_zeros()
        self.settle()

    def stats(self) -> NumberStrStatsDto:
        return compute_stats(self)

    def to_native_str(self) -> str:
        """
        Format as a Native Number String, keeping digits exactly as held.

        A leading '-' marks negative values and '.' separates fractional digits when present.
        """
        return self.to_pure_str()

    def to_pure_str(self,
                    decimal_separator: str = NumStrConf.DECIMAL_SEPARATOR,
                    leading_minus_sign: bool = True) -> str:
        """
        Format as a Pure Number String with a custom decimal separator and minus sign position.

        Examples:
            >>> NumberStrKernel.new("1234", "5", NumberSign.NEGATIVE).to_pure_str(",", leading_minus_sign=False)
            '1234,5-'
        """
        if not isinstance(decimal_separator, str):
            raise TypeError(f"decimal_separator must be str, but got {fmt_type(decimal_separator)}")
        if not decimal_separator:
            raise InvalidArgumentError("decimal_separator must not be empty")

        number = str(self.integer_digits) or "0"
        if not self.fractional_digits.is_empty():
            number += decimal_separator + str(self.fractional_digits)

        if self.number_sign != NumberSign.NEGATIVE:
            return number
        if leading_minus_sign:
            return NumStrConf.MINUS_SIGN + number
        return number + NumStrConf.MINUS_SIGN


# Methods --------------------------------------------------------------------------------------------------------------

def compute_stats(kernel: NumberStrKernel) -> NumberStrStatsDto:
    """
    Derive digit counts, sign and zero classification from a kernel without mutating it.

    Raises:
        NilInputError: If kernel is None.
        TypeError: If kernel is not a NumberStrKernel.

    Examples:
        >>> s = compute_stats(NumberStrKernel.new("007", "250"))
        >>> (s.num_of_integer_digits, s.num_of_significant_integer_digits)
        (3, 1)
        >>> (s.num_of_fractional_digits, s.num_of_significant_fractional_digits)
        (3, 2)
    """
    validate_kernel(kernel)

    num_int = len(kernel.integer_digits)
    num_frac = len(kernel.fractional_digits)
    sig_int = num_int - kernel.integer_digits.leading_zero_count()
    sig_frac = num_frac - kernel.fractional_digits.trailing_zero_count()
    is_zero = sig_int == 0 and sig_frac == 0

    if is_zero:
        sign = NumberSign.ZERO
    elif kernel.number_sign == NumberSign.NEGATIVE:
        sign = NumberSign.NEGATIVE
    else:
        sign = NumberSign.POSITIVE

    return NumberStrStatsDto(
        num_of_integer_digits=num_int,
        num_of_significant_integer_digits=sig_int,
        num_of_fractional_digits=num_frac,
        num_of_significant_fractional_digits=sig_frac,
        number_value_type=NumericValueType.INTEGER if sig_frac == 0 else NumericValueType.FLOATING_POINT,
        number_sign=sign,
        is_zero_value=is_zero,
    )


def validate_kernel(kernel: NumberStrKernel, name: str = "kernel") -> None:
    """
    Check that kernel is a NumberStrKernel with both digit sequences present.

    Raises:
        NilInputError: If kernel or one of its digit sequences is None.
        TypeError: If kernel is not a NumberStrKernel.
    """
    if kernel is None:
        raise NilInputError(f"{name} must not be None")
    if not isinstance(kernel, NumberStrKernel):
        raise TypeError(f"{name} must be NumberStrKernel, but got {fmt_type(kernel)}")
    if kernel.integer_digits is None or kernel.fractional_digits is None:
        raise NilInputError(f"{name} digit sequences must not be None: {fmt_value(kernel)}")
