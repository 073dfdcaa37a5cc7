"""
Mutable sequences of decimal digit characters.

DigitSequence holds the integer or fractional digits of a number string kernel,
most significant digit first. Only the characters '0' through '9' are ever stored:
every constructor and mutator validates its input.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from typing import Iterable, Iterator, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import NumStrConf
from .errors import InvalidArgumentError, MalformedInputError
from .formatters import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

class DigitSequence:
    """
    Ordered run of decimal digit characters with trim and extend primitives.

    Args:
        digits: Initial digits as a str or an iterable of single-character strings.
            Every character must be one of '0'-'9'.

    Raises:
        TypeError: If digits is not a str or an iterable of str.
        MalformedInputError: If any character is not a decimal digit.

    Examples:
        >>> seq = DigitSequence("00120")
        >>> len(seq), seq.leading_zero_count(), seq.trailing_zero_count()
        (5, 2, 1)
        >>> seq.trim_left(2)
        >>> str(seq)
        '120'
        >>> seq.extend_right(6)
        >>> str(seq)
        '120000'
    """
    __slots__ = ('_digits',)

    def __init__(self, digits: str | Iterable[str] = "") -> None:
        self._digits: list[str] = _validated_digits(digits)

    # Dunder ---------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._digits)

    def __iter__(self) -> Iterator[str]:
        return iter(self._digits)

    def __getitem__(self, index: int) -> str:
        return self._digits[index]

    def __setitem__(self, index: int, digit: str) -> None:
        _validate_digit(digit)
        self._digits[index] = digit

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DigitSequence):
            return self._digits == other._digits
        if isinstance(other, str):
            return "".join(self._digits) == other
        return NotImplemented

    __hash__ = None

    def __str__(self) -> str:
        return "".join(self._digits)

    def __repr__(self) -> str:
        return f"DigitSequence({str(self)!r})"

    # Queries --------------------------------------------------------------

    def is_empty(self) -> bool:
        return not self._digits

    def is_all_zeros(self) -> bool:
        """True for an empty sequence or one holding only '0' characters."""
        return all(d == "0" for d in self._digits)

    def leading_zero_count(self) -> int:
        """Count of '0' characters before the first nonzero digit."""
        count = 0
        for d in self._digits:
            if d != "0":
                break
            count += 1
        return count

    def trailing_zero_count(self) -> int:
        """Count of '0' characters after the last nonzero digit."""
        count = 0
        for d in reversed(self._digits):
            if d != "0":
                break
            count += 1
        return count

    def copy(self) -> Self:
        new = self.__class__.__new__(self.__class__)
        new._digits = list(self._digits)
        return new

    # Mutators -------------------------------------------------------------

    def append(self, digit: str) -> None:
        _validate_digit(digit)
        self._digits.append(digit)

    def extend(self, digits: str | Iterable[str]) -> None:
        self._digits.extend(_validated_digits(digits))

    def prepend(self, digit: str) -> None:
        _validate_digit(digit)
        self._digits.insert(0, digit)

    def clear(self) -> None:
        self._digits.clear()

    def trim_left(self, count: int) -> None:
        """Delete count digits from the most significant end."""
        count = _validate_count(count)
        del self._digits[:count]

    def trim_right(self, count: int) -> None:
        """Delete count digits from the least significant end."""
        count = _validate_count(count)
        if count:
            del self._digits[-count:]

    def truncate(self, length: int) -> None:
        """Keep only the first length digits."""
        length = _validate_count(length)
        del self._digits[length:]

    def extend_right(self, length: int, fill: str = "0") -> None:
        """Right-pad with fill until the sequence holds length digits. Longer sequences are untouched."""
        _validate_digit(fill)
        length = _validate_count(length)
        if length > len(self._digits):
            self._digits.extend(fill * (length - len(self._digits)))

    def extend_left(self, length: int, fill: str = "0") -> None:
        """Left-pad with fill until the sequence holds length digits. Longer sequences are untouched."""
        _validate_digit(fill)
        length = _validate_count(length)
        if length > len(self._digits):
            self._digits[:0] = fill * (length - len(self._digits))

    def strip_leading_zeros(self, keep_one: bool = True) -> int:
        """
        Remove leading zeros and return how many were removed.

        With keep_one=True an all-zero sequence keeps a single '0'.
        """
        count = self.leading_zero_count()
        if keep_one and count == len(self._digits) and count > 0:
            count -= 1
        del self._digits[:count]
        return count

    def strip_trailing_zeros(self) -> int:
        """Remove trailing zeros and return how many were removed."""
        count = self.trailing_zero_count()
        self.trim_right(count)
        return count


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_digit(digit: str) -> None:
    if not isinstance(digit, str):
        raise TypeError(f"digit must be str, but got {fmt_type(digit)}")
    if len(digit) != 1 or digit not in NumStrConf.DIGITS:
        raise MalformedInputError(f"digit must be a single character '0'-'9', but got {fmt_value(digit)}")


def _validated_digits(digits: str | Iterable[str]) -> list[str]:
    if isinstance(digits, DigitSequence):
        return list(digits)
    if isinstance(digits, str):
        chars = list(digits)
    elif isinstance(digits, abc.Iterable):
        chars = list(digits)
    else:
        raise TypeError(f"digits must be str or Iterable[str], but got {fmt_type(digits)}")
    for c in chars:
        _validate_digit(c)
    return chars


def _validate_count(count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"count must be int, but got {fmt_type(count)}")
    if count < 0:
        raise InvalidArgumentError(f"count must be >= 0, but got {count}")
    return count
