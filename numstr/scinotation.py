"""
Scientific notation for number string kernels.

A kernel is split into a significand with one nonzero integer digit and a signed
integer exponent of ten: "1234.5" becomes 1.2345 x 10^3 and "0.00012" becomes 1.2 x 10^-4.
Both parts stay exact decimal kernels; formatting to text happens only in format().
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .digits import DigitSequence
from .formatters import fmt_type, fmt_value
from .kernel import NumberSign, NumberStrKernel, validate_kernel
from .rounding import RoundingSpec, RoundingType, round_kernel


# @formatter:off

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class SciNotationFormat(StrEnum):
    """
    Text layouts of a scientific notation value.

    E_NOTATION renders "2.652e+8", EXPONENTIAL renders "2.652 x 10^8".
    """
    E_NOTATION = "e_notation"
    EXPONENTIAL = "exponential"


@unique
class MultSymbol(StrEnum):
    """Multiplier symbols joining significand and power in EXPONENTIAL layout."""
    ASTERISK = "*"
    CDOT = "⋅"
    CROSS = "×"
    X = "x"


@dataclass(frozen=True)
class SciNotationKernel:
    """
    Scientific notation value: significand x 10^exponent.

    Attributes:
        significand: Kernel with exactly one integer digit, 1-9 for nonzero values and 0 for zero.
            Carries the sign of the value.
        exponent: Integer-only kernel holding the signed power of ten.

    Examples:
        >>> sci = to_sci_notation(NumberStrKernel.new("265200000"))
        >>> str(sci)
        '2.652e+8'
        >>> sci.format(SciNotationFormat.EXPONENTIAL, mult="unicode", symbol=MultSymbol.CROSS)
        '2.652 × 10⁸'
    """
    significand: NumberStrKernel
    exponent: NumberStrKernel

    def __post_init__(self):
        """Validate fields"""
        validate_kernel(self.significand, "significand")
        validate_kernel(self.exponent, "exponent")
        if not self.exponent.fractional_digits.is_all_zeros():
            raise ValueError(f"exponent must be an integer kernel, but got {fmt_value(self.exponent)}")

    def __str__(self) -> str:
        return self.format()

    @property
    def exponent_value(self) -> int:
        """Exponent as a Python int."""
        return int(self.exponent.to_native_str())

    def format(self,
               notation: SciNotationFormat | str = SciNotationFormat.E_NOTATION,
               *,
               mult: Literal["caret", "latex", "python", "unicode"] = "caret",
               symbol: MultSymbol | str = MultSymbol.X) -> str:
        """
        Format as text.

        Args:
            notation: E_NOTATION ("1.25e-3") or EXPONENTIAL ("1.25 x 10^-3").
            mult: Power style of EXPONENTIAL layout, one of:
                - "caret": "10^3"
                - "latex": "10^{3}"
                - "python": "10**3"
                - "unicode": "10³"
            symbol: Multiplier symbol of EXPONENTIAL layout.

        Raises:
            ValueError: If notation, mult or symbol is not supported.

        Examples:
            >>> sci = to_sci_notation(NumberStrKernel.new("0", "00125", NumberSign.NEGATIVE))
            >>> sci.format()
            '-1.25e-3'
            >>> sci.format("exponential", mult="latex")
            '-1.25 x 10^{-3}'
        """
        notation = SciNotationFormat(notation)
        power = self.exponent_value
        significand = self.significand.to_native_str()

        if notation == SciNotationFormat.E_NOTATION:
            return f"{significand}e{'+' if power >= 0 else '-'}{abs(power)}"

        symbol = MultSymbol(symbol)
        return f"{significand} {symbol.value} {_fmt_power(10, power, mult)}"


# Methods --------------------------------------------------------------------------------------------------------------

def to_sci_notation(kernel: NumberStrKernel, rounding_spec: RoundingSpec | None = None) -> SciNotationKernel:
    """
    Convert kernel to scientific notation.

    Leading integer zeros and trailing fractional zeros are ignored, so "00120.50" and
    "120.5" give the same result: 1.205 x 10^2. The input kernel is never modified.

    Args:
        kernel: Value to convert.
        rounding_spec: Optional rounding applied to the significand's fractional digits.
            A carry producing "10" is renormalized: 9.996 rounded to 2 digits is 1.00 x 10^1.

    Returns:
        SciNotationKernel: significand and exponent.

    Raises:
        NilInputError: If kernel or its digit sequences are None.
        TypeError: If kernel or rounding_spec has a wrong type.

    Examples:
        >>> str(to_sci_notation(NumberStrKernel.new("1234", "5")))
        '1.2345e+3'
        >>> str(to_sci_notation(NumberStrKernel.new("0", "00012")))
        '1.2e-4'
        >>> str(to_sci_notation(NumberStrKernel.new("9", "996"), RoundingSpec("HalfAwayFromZero", 2)))
        '1.00e+1'
    """
    validate_kernel(kernel)
    if rounding_spec is not None and not isinstance(rounding_spec, RoundingSpec):
        raise TypeError(f"rounding_spec must be RoundingSpec or None, but got {fmt_type(rounding_spec)}")

    if not kernel.is_non_zero_value:
        return SciNotationKernel(significand=NumberStrKernel.zero(), exponent=NumberStrKernel.zero())

    integer_str = str(kernel.integer_digits).lstrip("0")
    fractional_str = str(kernel.fractional_digits).rstrip("0")

    if integer_str:
        exponent = len(integer_str) - 1
        lead_digit = integer_str[0]
        tail_digits = (integer_str[1:] + fractional_str).rstrip("0")
    else:
        offset = len(fractional_str) - len(fractional_str.lstrip("0"))
        exponent = -(offset + 1)
        lead_digit = fractional_str[offset]
        tail_digits = fractional_str[offset + 1:]

    sign = NumberSign.NEGATIVE if kernel.number_sign == NumberSign.NEGATIVE else NumberSign.POSITIVE
    significand = NumberStrKernel.new(lead_digit, tail_digits, sign)

    if rounding_spec is not None and rounding_spec.rounding_type != RoundingType.NO_ROUNDING:
        round_kernel(significand, rounding_spec)
        if len(significand.integer_digits) > 1:
            # Carry out of 9.99...: 10.00 -> 1.000 x 10^1
            significand.integer_digits = DigitSequence("1")
            exponent += 1

    return SciNotationKernel(significand=significand, exponent=_exponent_kernel(exponent))


# Private Methods ------------------------------------------------------------------------------------------------------

def _exponent_kernel(power: int) -> NumberStrKernel:
    sign = NumberSign.NEGATIVE if power < 0 else NumberSign.POSITIVE
    return NumberStrKernel.new(str(abs(power)), "", sign)


def _fmt_power(base: int, power: int, mult: str) -> str:
    """Format base^power in the requested style."""
    if mult == "caret":
        return f"{base}^{power}"
    elif mult == "latex":
        return f"{base}^{{{power}}}"
    elif mult == "python":
        return f"{base}**{power}"
    elif mult == "unicode":
        return f"{base}{str(power).translate(_SUPERSCRIPTS)}"
    else:
        raise ValueError(f"mult format expected one of 'caret', 'latex', 'python', 'unicode' "
                         f"but found {fmt_value(mult)}")
