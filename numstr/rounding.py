"""
Decimal rounding of number string kernels.

Rounding works on digit characters only, so it is exact for any number of digits.
Every mode shares one carry propagation: the kernel is truncated to the requested
fractional width and, when the mode decides to round up, one unit is added to the
least significant retained digit and carried leftward ("9.99" -> "10.00").
"""

# Standard library -----------------------------------------------------------------------------------------------------
import random
from dataclasses import dataclass
from enum import Enum, StrEnum, unique
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import NumStrConf
from .errors import InvalidArgumentError, UnsupportedRoundingModeError
from .formatters import fmt_type, fmt_value
from .kernel import NumberSign, NumberStrKernel, validate_kernel
from .parsing import parse_native
from .sentinels import UNSET, UnsetType, ifnotunset


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class RoundingType(StrEnum):
    """
    Decimal rounding modes.

    Tie modes decide what happens when the dropped digits are exactly half a unit
    of the last retained digit. HALF_UP and HALF_DOWN are sign-aware: ties go toward
    +infinity and -infinity respectively, so -7.5 becomes -7 and -8.

    Examples:
        >>> RoundingType.parse("halfToEven")
        <RoundingType.HALF_TO_EVEN: 'HalfToEven'>
        >>> round_native_str("-7.5", RoundingType.HALF_UP_WITH_NEG_NUMS, 0)
        '-7'
    """
    NONE = "None"
    NO_ROUNDING = "NoRounding"
    HALF_UP_WITH_NEG_NUMS = "HalfUpWithNegNums"
    HALF_DOWN_WITH_NEG_NUMS = "HalfDownWithNegNums"
    HALF_AWAY_FROM_ZERO = "HalfAwayFromZero"
    HALF_TOWARDS_ZERO = "HalfTowardsZero"
    HALF_TO_EVEN = "HalfToEven"
    HALF_TO_ODD = "HalfToOdd"
    RANDOMLY = "Randomly"
    FLOOR = "Floor"
    CEILING = "Ceiling"
    TRUNCATE = "Truncate"

    @classmethod
    def parse(cls, name: "str | RoundingType") -> "RoundingType":
        """
        Look up a rounding type by value or member name, ignoring case and underscores.

        Raises:
            UnsupportedRoundingModeError: If name matches no rounding type.
            TypeError: If name is not a str.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise TypeError(f"rounding type name must be str, but got {fmt_type(name)}")

        key = name.replace("_", "").strip().lower()
        for member in cls:
            if key in (member.value.lower(), member.name.replace("_", "").lower()):
                return member
        raise UnsupportedRoundingModeError(f"unknown rounding type: {fmt_value(name)}")


@dataclass(frozen=True)
class RoundingSpec:
    """
    Rounding request: mode, target fractional width and optional seed.

    Attributes:
        rounding_type: RoundingType or its name; names are parsed with RoundingType.parse().
        round_to_fractional_digits: Fractional digits kept after rounding, >= 0.
        seed: Seeds the tie breaker of RANDOMLY. If None, random.SystemRandom is used.

    Raises:
        UnsupportedRoundingModeError: If rounding_type is NONE or unknown.
        InvalidArgumentError: If round_to_fractional_digits is negative.
        TypeError: If round_to_fractional_digits or seed has a wrong type.

    Examples:
        >>> spec = RoundingSpec(RoundingType.HALF_TO_EVEN, 2)
        >>> spec.merge(round_to_fractional_digits=4)
        RoundingSpec(rounding_type=<RoundingType.HALF_TO_EVEN: 'HalfToEven'>, round_to_fractional_digits=4, seed=None)
    """
    rounding_type: RoundingType = RoundingType(NumStrConf.DEFAULT_ROUNDING_TYPE)
    round_to_fractional_digits: int = 0
    seed: int | None = None

    def __post_init__(self):
        """Validate and normalize fields"""
        rounding_type = RoundingType.parse(self.rounding_type)
        if rounding_type == RoundingType.NONE:
            raise UnsupportedRoundingModeError("rounding type must be set, but got RoundingType.NONE")
        object.__setattr__(self, "rounding_type", rounding_type)

        digits = self.round_to_fractional_digits
        if isinstance(digits, bool) or not isinstance(digits, int):
            raise TypeError(f"round_to_fractional_digits must be int, but got {fmt_type(digits)}")
        if digits < 0:
            raise InvalidArgumentError(f"round_to_fractional_digits must be >= 0, but got {digits}")

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise TypeError(f"seed must be int or None, but got {fmt_type(self.seed)}")

    def merge(self,
              rounding_type: RoundingType | str | UnsetType = UNSET,
              round_to_fractional_digits: int | UnsetType = UNSET,
              seed: int | None | UnsetType = UNSET,
              ) -> Self:
        """
        Create a new RoundingSpec with merged options.

        Parameters not provided (UNSET) are inherited from the current instance.
        """
        return self.__class__(
            rounding_type=ifnotunset(rounding_type, default=self.rounding_type),
            round_to_fractional_digits=ifnotunset(round_to_fractional_digits,
                                                  default=self.round_to_fractional_digits),
            seed=ifnotunset(seed, default=self.seed),
        )


class _Remainder(Enum):
    ZERO = 0
    BELOW_HALF = 1
    HALF = 2
    ABOVE_HALF = 3


# Methods --------------------------------------------------------------------------------------------------------------

def round_kernel(kernel: NumberStrKernel, spec: RoundingSpec) -> None:
    """
    Round the fractional digits of kernel in place.

    A width larger than the current fractional run right-pads it with zeros, an equal
    width leaves the digits untouched. The rounded kernel is settled: a result with no
    nonzero digit gets sign ZERO. Rounding the same kernel twice to one width is a no-op
    the second time.

    Args:
        kernel: Kernel to round, mutated in place.
        spec: Rounding mode, width and seed.

    Raises:
        NilInputError: If kernel or its digit sequences are None.
        TypeError: If kernel or spec has a wrong type.

    Examples:
        >>> k, _ = parse_native("9.9999999")
        >>> round_kernel(k, RoundingSpec(RoundingType.HALF_AWAY_FROM_ZERO, 3))
        >>> str(k)
        '10.000'
    """
    validate_kernel(kernel)
    if not isinstance(spec, RoundingSpec):
        raise TypeError(f"spec must be RoundingSpec, but got {fmt_type(spec)}")

    if spec.rounding_type == RoundingType.NO_ROUNDING:
        return

    width = spec.round_to_fractional_digits
    fractional = kernel.fractional_digits

    if width >= len(fractional):
        fractional.extend_right(width)
        kernel.settle()
        return

    dropped = str(fractional)[width:]
    if width > 0:
        last_retained = fractional[width - 1]
    elif not kernel.integer_digits.is_empty():
        last_retained = kernel.integer_digits[-1]
    else:
        last_retained = "0"

    round_up = _is_round_up(spec,
                            remainder=_classify_remainder(dropped),
                            is_negative=kernel.number_sign == NumberSign.NEGATIVE,
                            last_retained=last_retained)

    fractional.truncate(width)
    if round_up:
        _add_unit_in_last_place(kernel)
    kernel.settle()


def rounded(kernel: NumberStrKernel, spec: RoundingSpec) -> NumberStrKernel:
    """Return a rounded copy of kernel, leaving kernel unchanged."""
    validate_kernel(kernel)
    result = kernel.copy()
    round_kernel(result, spec)
    return result


def round_native_str(text: str,
                     rounding_type: RoundingType | str,
                     round_to_fractional_digits: int,
                     seed: int | None = None) -> str:
    """
    Round a Native Number String and return the rounded Native Number String.

    Examples:
        >>> round_native_str("1.23456789", "HalfAwayFromZero", 3)
        '1.235'
        >>> round_native_str("3.1", RoundingType.TRUNCATE, 4)
        '3.1000'
        >>> round_native_str("-0.004", RoundingType.HALF_AWAY_FROM_ZERO, 2)
        '0.00'
    """
    kernel, _ = parse_native(text)
    round_kernel(kernel, RoundingSpec(rounding_type, round_to_fractional_digits, seed))
    return kernel.to_native_str()


# Private Methods ------------------------------------------------------------------------------------------------------

def _classify_remainder(dropped: str) -> _Remainder:
    """Compare the dropped digits against half a unit of the last retained digit."""
    round_from, rest = dropped[0], dropped[1:]
    rest_is_zero = all(d == "0" for d in rest)

    if round_from == "0" and rest_is_zero:
        return _Remainder.ZERO
    if round_from < "5":
        return _Remainder.BELOW_HALF
    if round_from == "5" and rest_is_zero:
        return _Remainder.HALF
    return _Remainder.ABOVE_HALF


def _is_round_up(spec: RoundingSpec, *, remainder: _Remainder, is_negative: bool, last_retained: str) -> bool:
    """Decide whether the magnitude of the truncated value grows by one unit."""
    rounding_type = spec.rounding_type

    if rounding_type == RoundingType.TRUNCATE:
        return False
    if rounding_type == RoundingType.FLOOR:
        return is_negative and remainder != _Remainder.ZERO
    if rounding_type == RoundingType.CEILING:
        return not is_negative and remainder != _Remainder.ZERO

    if remainder == _Remainder.ABOVE_HALF:
        return True
    if remainder != _Remainder.HALF:
        return False

    # Exact tie
    if rounding_type == RoundingType.HALF_AWAY_FROM_ZERO:
        return True
    if rounding_type == RoundingType.HALF_TOWARDS_ZERO:
        return False
    if rounding_type == RoundingType.HALF_UP_WITH_NEG_NUMS:
        return not is_negative
    if rounding_type == RoundingType.HALF_DOWN_WITH_NEG_NUMS:
        return is_negative
    if rounding_type == RoundingType.HALF_TO_EVEN:
        return int(last_retained) % 2 == 1
    if rounding_type == RoundingType.HALF_TO_ODD:
        return int(last_retained) % 2 == 0
    if rounding_type == RoundingType.RANDOMLY:
        rng = random.Random(spec.seed) if spec.seed is not None else random.SystemRandom()
        return rng.random() < 0.5

    raise UnsupportedRoundingModeError(f"unsupported rounding type: {fmt_value(rounding_type)}")


def _add_unit_in_last_place(kernel: NumberStrKernel) -> None:
    """Add one unit to the least significant digit, carrying through fractional then integer digits."""
    for digits in (kernel.fractional_digits, kernel.integer_digits):
        for i in range(len(digits) - 1, -1, -1):
            if digits[i] != "9":
                digits[i] = str(int(digits[i]) + 1)
                return
            digits[i] = "0"
    kernel.integer_digits.prepend("1")
