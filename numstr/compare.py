"""
Numeric ordering of number string kernels.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import functools
from typing import Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .kernel import NumberSign, NumberStrKernel, compute_stats


# Methods --------------------------------------------------------------------------------------------------------------

def compare_kernels(a: NumberStrKernel, b: NumberStrKernel) -> Literal[-1, 0, 1]:
    """
    Compare two kernels by numeric value.

    Leading integer zeros and trailing fractional zeros do not affect the result,
    so "001.50" and "1.5" compare equal, and so do "-0.0" and "0".

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b.

    Raises:
        NilInputError: If a kernel or its digit sequences are None.
        TypeError: If a or b is not a NumberStrKernel.

    Examples:
        >>> compare_kernels(NumberStrKernel.new("12", "5"), NumberStrKernel.new("012", "50"))
        0
        >>> compare_kernels(NumberStrKernel.new("2", "", NumberSign.NEGATIVE), NumberStrKernel.new("10"))
        -1
        >>> sorted([NumberStrKernel.new("3"), NumberStrKernel.new("0", "25")], key=kernel_sort_key)
        [NumberStrKernel('0.25', sign=POSITIVE), NumberStrKernel('3', sign=POSITIVE)]
    """
    stats_a = compute_stats(a)
    stats_b = compute_stats(b)

    if stats_a.is_zero_value and stats_b.is_zero_value:
        return 0

    if stats_a.number_sign != stats_b.number_sign:
        return 1 if stats_a.number_sign > stats_b.number_sign else -1

    # Same nonzero sign: compare magnitudes, invert for negatives
    direction = -1 if stats_a.number_sign == NumberSign.NEGATIVE else 1

    if stats_a.num_of_significant_integer_digits != stats_b.num_of_significant_integer_digits:
        larger = stats_a.num_of_significant_integer_digits > stats_b.num_of_significant_integer_digits
        return direction if larger else -direction

    integer_a = str(a.integer_digits).lstrip("0")
    integer_b = str(b.integer_digits).lstrip("0")
    width = max(len(a.fractional_digits), len(b.fractional_digits))
    magnitude_a = integer_a + str(a.fractional_digits).ljust(width, "0")
    magnitude_b = integer_b + str(b.fractional_digits).ljust(width, "0")

    # Equal lengths here, so lexicographic order is numeric order
    if magnitude_a == magnitude_b:
        return 0
    return direction if magnitude_a > magnitude_b else -direction


kernel_sort_key = functools.cmp_to_key(compare_kernels)
