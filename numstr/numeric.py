"""
Conversion between number string kernels and Python numeric types.

Supports Python int/float, Decimal, Fraction, mpmath.mpf, and third-party scalars
exposing __index__ (NumPy integers) or .item() (NumPy, PyTorch, JAX array scalars).
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from decimal import Decimal
from fractions import Fraction
from typing import Any, Literal

# Third-party ----------------------------------------------------------------------------------------------------------
import mpmath
from mpmath import libmp

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidArgumentError, NilInputError
from .formatters import fmt_type, fmt_value
from .kernel import NumberStrKernel, NumericValueType, validate_kernel
from .parsing import parse_native
from .precision import kernel_to_fraction, rational_to_native_str


# Methods --------------------------------------------------------------------------------------------------------------

def kernel_from_number(value: Any, *, allow_bool: bool = False) -> NumberStrKernel:
    """
    Build a kernel holding the exact decimal value of a number.

    Floats use their shortest round-trip representation, so 0.1 gives "0.1" rather
    than the full binary expansion. Integral floats carry no fractional digits:
    2.0 gives "2" and 1e16 gives "10000000000000000". Decimal keeps its digits as
    held: Decimal("1.50") gives "1.50". Fractions must have a terminating decimal
    expansion.

    Conversion priority for other types:
        1. __index__() -> int (NumPy integers)
        2. .item() -> int or float (array scalars)

    Args:
        value: Number to convert.
        allow_bool: If True, convert bool to int (True -> 1). If False, reject bool,
            since bool is a subclass of int.

    Raises:
        NilInputError: If value is None.
        TypeError: If value type is unsupported, or value is a bool and allow_bool is False.
        InvalidArgumentError: If value is infinite, NaN, or a Fraction with a
            non-terminating decimal expansion.

    Examples:
        >>> str(kernel_from_number(-42))
        '-42'
        >>> str(kernel_from_number(1e-5))
        '0.00001'
        >>> str(kernel_from_number(Fraction(3, 8)))
        '0.375'
        >>> str(kernel_from_number(Decimal("-1.50")))
        '-1.50'
    """
    if value is None:
        raise NilInputError("value must not be None")

    if isinstance(value, bool):
        if not allow_bool:
            raise TypeError(f"boolean values not supported, got {value}")
        return _kernel_from_native(str(int(value)))

    if isinstance(value, int):
        return _kernel_from_native(str(value))

    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidArgumentError(f"value must be finite, but got {fmt_value(value)}")
        decimal_value = Decimal(repr(value))
        if value.is_integer():
            decimal_value = decimal_value.to_integral_value()
        return _kernel_from_decimal(decimal_value)

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidArgumentError(f"value must be finite, but got {fmt_value(value)}")
        return _kernel_from_decimal(value)

    if isinstance(value, Fraction):
        return _kernel_from_fraction(value)

    if isinstance(value, mpmath.mpf):
        if not mpmath.isfinite(value):
            raise InvalidArgumentError(f"value must be finite, but got {fmt_value(value)}")
        return _kernel_from_fraction(Fraction(*libmp.to_rational(value._mpf_)))

    # Priority 1: true integers
    if hasattr(value, '__index__'):
        try:
            return _kernel_from_native(str(operator.index(value)))
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    # Priority 2: array/tensor scalars
    if hasattr(value, 'item') and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} via .item(): {e}") from e
        if isinstance(result, (int, float)):
            return kernel_from_number(result, allow_bool=allow_bool)

    raise TypeError(f"unsupported numeric type: {fmt_type(value)}. "
                    f"Expected int, float, Decimal, Fraction, mpmath.mpf, or types implementing "
                    f"__index__ or .item()")


def kernel_to_number(kernel: NumberStrKernel,
                     kind: Literal["auto", "int", "float", "decimal", "fraction"] = "auto"
                     ) -> int | float | Decimal | Fraction:
    """
    Convert a kernel to a Python number.

    Args:
        kernel: Value to convert.
        kind: Target type:
            - "auto": int for integer values, float otherwise
            - "int": int, truncating toward zero like int()
            - "float": nearest float
            - "decimal": Decimal holding the digits exactly
            - "fraction": reduced Fraction

    Raises:
        NilInputError: If kernel or its digit sequences are None.
        TypeError: If kernel is not a NumberStrKernel.
        InvalidArgumentError: If kind is not supported, or the value exceeds the
            float range when a float is produced.

    Examples:
        >>> kernel_to_number(NumberStrKernel.new("12", "000"))
        12
        >>> kernel_to_number(NumberStrKernel.new("12", "5"))
        12.5
        >>> kernel_to_number(NumberStrKernel.new("12", "50"), kind="decimal")
        Decimal('12.50')
    """
    validate_kernel(kernel)
    native = kernel.to_native_str()

    if kind == "auto":
        kind = "int" if kernel.numeric_value_type == NumericValueType.INTEGER else "float"

    if kind == "int":
        return int(Decimal(native))
    elif kind == "float":
        result = float(native)
        if math.isinf(result):
            raise InvalidArgumentError(f"value out of range for float: {fmt_value(native, max_repr=40)}")
        return result
    elif kind == "decimal":
        return Decimal(native)
    elif kind == "fraction":
        return kernel_to_fraction(kernel)
    else:
        raise InvalidArgumentError(f"kind expected one of 'auto', 'int', 'float', 'decimal', 'fraction' "
                                   f"but found {fmt_value(kind)}")


# Private Methods ------------------------------------------------------------------------------------------------------

def _kernel_from_native(native: str) -> NumberStrKernel:
    kernel, _ = parse_native(native)
    return kernel


def _kernel_from_decimal(value: Decimal) -> NumberStrKernel:
    # Positional notation, never exponent form
    return _kernel_from_native(format(value, "f"))


def _kernel_from_fraction(value: Fraction) -> NumberStrKernel:
    denominator = value.denominator
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        raise InvalidArgumentError(f"fraction has a non-terminating decimal expansion: {fmt_value(value)}")
    return _kernel_from_native(rational_to_native_str(value, max(twos, fives)))
