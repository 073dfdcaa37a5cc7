"""
Bridge between exact decimal kernels, rationals and arbitrary-precision binary floats.

Binary floats are mpmath.mpf values built with an explicit number of precision bits.
The bit count is estimated from the decimal digits involved: one decimal digit needs
log2(10) ~ 3.32 bits, and estimates are rounded up to a multiple of 8.

Examples:
    >>> estimate_precision_bits(3, 3)
    24
    >>> kernel_to_rational("-12.50")
    (-1250, 100)
    >>> rational_to_native_str(Fraction(2, 3), 4)
    '0.6667'
    >>> str(binary_float_to_kernel(kernel_to_binary_float("123.456"), 3))
    '123.456'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import warnings
from dataclasses import dataclass, field
from enum import StrEnum, unique
from fractions import Fraction
from typing import Any, Self

# Third-party ----------------------------------------------------------------------------------------------------------
import mpmath
from mpmath import libmp

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import NumStrConf
from .errors import AccuracyLossError, InvalidArgumentError, NilInputError, PrecisionWarning
from .formatters import fmt_type, fmt_value
from .kernel import NumberSign, NumberStrKernel, validate_kernel
from .parsing import parse_native, parse_pure
from .sentinels import UNSET, UnsetType, ifnotunset


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class BinaryRounding(StrEnum):
    """
    Rounding applied when a rational is stored in a binary float, as mpmath rounding codes.
    """
    NEAREST_EVEN = libmp.round_nearest
    TOWARD_ZERO = libmp.round_down
    AWAY_FROM_ZERO = libmp.round_up
    FLOOR = libmp.round_floor
    CEILING = libmp.round_ceiling


@dataclass(frozen=True)
class PrecisionBitsSpec:
    """
    Digit counts and the binary precision they require.

    Attributes:
        num_integer_digits: Integer digits to represent.
        num_fractional_digits: Fractional digits to represent.
        num_extra_digits_buffer: Additional decimal digits of headroom.
        precision_bits_override: If positive, used verbatim as precision_bits.
        precision_bits: Estimated or overridden precision bits, computed on init.

    Examples:
        >>> PrecisionBitsSpec(13, 50, 100).precision_bits
        544
        >>> PrecisionBitsSpec(13, 50, 100).merge(num_extra_digits_buffer=0).precision_bits
        216
    """
    num_integer_digits: int = 0
    num_fractional_digits: int = 0
    num_extra_digits_buffer: int = 0
    precision_bits_override: int = 0
    precision_bits: int = field(init=False)

    def __post_init__(self):
        """Compute precision bits"""
        bits = estimate_precision_bits(self.num_integer_digits,
                                       self.num_fractional_digits,
                                       self.num_extra_digits_buffer,
                                       self.precision_bits_override)
        object.__setattr__(self, "precision_bits", bits)

    @classmethod
    def from_kernel(cls,
                    kernel: NumberStrKernel,
                    extra_digits_buffer: int = 0,
                    precision_bits_override: int = 0) -> Self:
        """Size precision for all digits held by kernel."""
        validate_kernel(kernel)
        return cls(num_integer_digits=len(kernel.integer_digits),
                   num_fractional_digits=len(kernel.fractional_digits),
                   num_extra_digits_buffer=extra_digits_buffer,
                   precision_bits_override=precision_bits_override)

    def merge(self,
              num_integer_digits: int | UnsetType = UNSET,
              num_fractional_digits: int | UnsetType = UNSET,
              num_extra_digits_buffer: int | UnsetType = UNSET,
              precision_bits_override: int | UnsetType = UNSET,
              ) -> Self:
        """
        Create a new PrecisionBitsSpec with merged options.

        Parameters not provided (UNSET) are inherited from the current instance.
        """
        return self.__class__(
            num_integer_digits=ifnotunset(num_integer_digits, default=self.num_integer_digits),
            num_fractional_digits=ifnotunset(num_fractional_digits, default=self.num_fractional_digits),
            num_extra_digits_buffer=ifnotunset(num_extra_digits_buffer, default=self.num_extra_digits_buffer),
            precision_bits_override=ifnotunset(precision_bits_override, default=self.precision_bits_override),
        )


# Methods --------------------------------------------------------------------------------------------------------------

def estimate_precision_bits(num_integer_digits: int,
                            num_fractional_digits: int,
                            extra_digits_buffer: int = 0,
                            precision_bits_override: int = 0) -> int:
    """
    Estimate binary precision bits needed to hold a decimal value.

    The estimate is ceil(total_digits * log2(10)) rounded up to a multiple of 8.
    A positive precision_bits_override is returned verbatim, without checking the
    estimate against NumStrConf.MAX_PRECISION_BITS; if it is below an in-range
    estimate a PrecisionWarning is issued.

    Raises:
        TypeError: If an argument is not an int.
        InvalidArgumentError: If an argument is negative, or the estimate exceeds
            NumStrConf.MAX_PRECISION_BITS and no override is given.

    Examples:
        >>> estimate_precision_bits(1, 0)
        8
        >>> estimate_precision_bits(13, 50, extra_digits_buffer=100)
        544
        >>> estimate_precision_bits(3, 3, precision_bits_override=128)
        128
    """
    num_integer_digits = _validate_count(num_integer_digits, "num_integer_digits")
    num_fractional_digits = _validate_count(num_fractional_digits, "num_fractional_digits")
    extra_digits_buffer = _validate_count(extra_digits_buffer, "extra_digits_buffer")
    precision_bits_override = _validate_count(precision_bits_override, "precision_bits_override")

    total_digits = num_integer_digits + num_fractional_digits + extra_digits_buffer
    bits = math.ceil(total_digits * NumStrConf.LOG2_10)
    alignment = NumStrConf.PRECISION_BITS_ALIGNMENT
    bits = -(-bits // alignment) * alignment

    if precision_bits_override > 0:
        if precision_bits_override < bits <= NumStrConf.MAX_PRECISION_BITS:
            warnings.warn(f"precision bits override {precision_bits_override} is below the estimate "
                          f"{bits} for {total_digits} digits, binary values may lose accuracy",
                          PrecisionWarning, stacklevel=2)
        return precision_bits_override

    if bits > NumStrConf.MAX_PRECISION_BITS:
        raise InvalidArgumentError(f"estimated precision bits {bits} exceed the maximum "
                                   f"{NumStrConf.MAX_PRECISION_BITS} for {total_digits} digits")

    return bits


def estimate_precision_digits(precision_bits: int) -> int:
    """
    Estimate how many decimal digits precision_bits can hold.

    Returns -1 if precision_bits is below NumStrConf.MIN_PRECISION_BITS.

    Examples:
        >>> estimate_precision_digits(504)
        151
        >>> estimate_precision_digits(3)
        -1
    """
    precision_bits = _validate_count(precision_bits, "precision_bits")
    if precision_bits < NumStrConf.MIN_PRECISION_BITS:
        return -1
    return int(precision_bits / NumStrConf.LOG2_10)


def kernel_to_rational(kernel_or_native_str: NumberStrKernel | str) -> tuple[int, int]:
    """
    Exact (numerator, denominator) of a kernel, not reduced.

    The numerator is the signed concatenation of all digits and the denominator
    is 10 ** number_of_fractional_digits.
    """
    kernel = _as_kernel(kernel_or_native_str, native=True)
    numerator = int(str(kernel.integer_digits) + str(kernel.fractional_digits) or "0")
    if kernel.number_sign == NumberSign.NEGATIVE:
        numerator = -numerator
    return numerator, 10 ** len(kernel.fractional_digits)


def kernel_to_fraction(kernel_or_native_str: NumberStrKernel | str) -> Fraction:
    """Exact value of a kernel as a reduced Fraction."""
    return Fraction(*kernel_to_rational(kernel_or_native_str))


def rational_to_native_str(rational: Fraction | tuple[int, int] | int, round_to_fractional_digits: int) -> str:
    """
    Decimal expansion of a rational rounded half away from zero at round_to_fractional_digits.

    Args:
        rational: Fraction, (numerator, denominator) tuple or int.
        round_to_fractional_digits: Fractional digits in the result, >= 0.

    Raises:
        NilInputError: If rational is None.
        TypeError: If rational has an unsupported type.
        InvalidArgumentError: If the denominator is zero or the width is negative.

    Examples:
        >>> rational_to_native_str((-1, 8), 2)
        '-0.13'
        >>> rational_to_native_str(Fraction(-1, 1000), 2)
        '0.00'
        >>> rational_to_native_str(7, 2)
        '7.00'
    """
    numerator, denominator = _as_rational(rational)
    digits = _validate_count(round_to_fractional_digits, "round_to_fractional_digits")

    is_negative = (numerator < 0) != (denominator < 0)
    numerator, denominator = abs(numerator), abs(denominator)

    quotient, remainder = divmod(numerator * 10 ** digits, denominator)
    if 2 * remainder >= denominator:
        quotient += 1

    number = str(quotient).rjust(digits + 1, "0")
    if digits:
        number = f"{number[:-digits]}{NumStrConf.DECIMAL_SEPARATOR}{number[-digits:]}"

    if is_negative and quotient != 0:
        return NumStrConf.MINUS_SIGN + number
    return number


def rational_to_kernel(rational: Fraction | tuple[int, int] | int, round_to_fractional_digits: int) -> NumberStrKernel:
    """Kernel of a rational rounded half away from zero at round_to_fractional_digits."""
    kernel, _ = parse_native(rational_to_native_str(rational, round_to_fractional_digits))
    return kernel


def kernel_to_binary_float(kernel_or_pure_str: NumberStrKernel | str,
                           precision: int | PrecisionBitsSpec | None = None,
                           rounding: BinaryRounding | str = BinaryRounding.AWAY_FROM_ZERO,
                           extra_digits_buffer: int = 0) -> mpmath.mpf:
    """
    Convert a kernel to an arbitrary-precision binary float.

    The value is built from the kernel's exact rational at the estimated precision,
    then verified: rounded back to the kernel's fractional width it must reproduce the
    decimal value exactly.

    Args:
        kernel_or_pure_str: Kernel or Pure Number String with '.' separator.
        precision: Precision bits override, a PrecisionBitsSpec, or None to estimate
            from the kernel's digits plus extra_digits_buffer.
        rounding: Binary rounding of the stored value.
        extra_digits_buffer: Additional decimal digits of headroom for the estimate.

    Returns:
        mpmath.mpf: Binary float holding the value.

    Raises:
        AccuracyLossError: If the binary value does not reproduce the decimal digits.
            Retry with a larger extra_digits_buffer or precision.
        PrecisionWarning: Issued when an int precision is below the estimate.

    Examples:
        >>> kernel_to_binary_float("-0.5")
        mpf('-0.5')
    """
    kernel = _as_kernel(kernel_or_pure_str, native=False)
    rounding = BinaryRounding(rounding)

    if precision is None:
        bits = PrecisionBitsSpec.from_kernel(kernel, extra_digits_buffer).precision_bits
    elif isinstance(precision, PrecisionBitsSpec):
        bits = precision.precision_bits
    elif isinstance(precision, int) and not isinstance(precision, bool):
        bits = estimate_precision_bits(len(kernel.integer_digits),
                                       len(kernel.fractional_digits),
                                       extra_digits_buffer,
                                       precision_bits_override=precision)
    else:
        raise TypeError(f"precision must be int, PrecisionBitsSpec or None, but got {fmt_type(precision)}")

    if bits < 1:
        raise InvalidArgumentError(f"precision bits must be positive, but got {bits}")

    numerator, denominator = kernel_to_rational(kernel)
    raw = libmp.from_rational(numerator, denominator, bits, rounding.value)

    restored = rational_to_native_str(libmp.to_rational(raw), len(kernel.fractional_digits))
    if kernel_to_fraction(restored) != Fraction(numerator, denominator):
        raise AccuracyLossError(f"binary float with {bits} precision bits does not reproduce "
                                f"{fmt_value(kernel.to_native_str())}, got {fmt_value(restored)}",
                                precision_bits=bits)

    return mpmath.mp.make_mpf(raw)


def binary_float_to_kernel(value: mpmath.mpf | float | int, round_to_fractional_digits: int) -> NumberStrKernel:
    """
    Convert a binary float to a kernel rounded half away from zero at round_to_fractional_digits.

    Raises:
        NilInputError: If value is None.
        TypeError: If value is not an mpmath.mpf, float or int.
        InvalidArgumentError: If value is infinite or NaN.

    Examples:
        >>> str(binary_float_to_kernel(0.1, 20))
        '0.10000000000000000555'
    """
    if value is None:
        raise NilInputError("value must not be None")
    if isinstance(value, bool) or not isinstance(value, (mpmath.mpf, float, int)):
        raise TypeError(f"value must be mpmath.mpf, float or int, but got {fmt_type(value)}")

    if isinstance(value, int):
        return rational_to_kernel(value, round_to_fractional_digits)

    value = mpmath.mpf(value) if isinstance(value, float) else value
    if not mpmath.isfinite(value):
        raise InvalidArgumentError(f"value must be finite, but got {fmt_value(value)}")
    return rational_to_kernel(libmp.to_rational(value._mpf_), round_to_fractional_digits)


# Private Methods ------------------------------------------------------------------------------------------------------

def _as_kernel(value: Any, native: bool) -> NumberStrKernel:
    if isinstance(value, str):
        kernel, _ = parse_native(value) if native else parse_pure(value)
        return kernel
    validate_kernel(value, "kernel_or_str")
    return value


def _as_rational(rational: Any) -> tuple[int, int]:
    if rational is None:
        raise NilInputError("rational must not be None")
    if isinstance(rational, bool):
        raise TypeError(f"rational must be Fraction, (numerator, denominator) or int, but got {fmt_type(rational)}")
    if isinstance(rational, int):
        return rational, 1
    if isinstance(rational, Fraction):
        return rational.numerator, rational.denominator
    if isinstance(rational, tuple) and len(rational) == 2 and all(
            isinstance(x, int) and not isinstance(x, bool) for x in rational):
        numerator, denominator = rational
        if denominator == 0:
            raise InvalidArgumentError(f"denominator must not be zero: {fmt_value(rational)}")
        return numerator, denominator
    raise TypeError(f"rational must be Fraction, (numerator, denominator) or int, but got {fmt_value(rational)}")


def _validate_count(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, but got {fmt_type(value)}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, but got {value}")
    return value
