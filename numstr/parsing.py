"""
Parse Pure, Native and Dirty number strings into NumberStrKernel values.

Dialects:
    Pure Number String:
        Digits, an optional caller-defined decimal separator of one or more characters and
        an optional leading or trailing minus sign (position selected by the caller).
        All other characters are ignored.

    Native Number String:
        Digits, at most one '.', an optional single leading '-' and nothing else,
        e.g. "-1234.5678". This is the format Python's int(), float(), Decimal() and
        Fraction() constructors accept.

    Dirty Number String:
        Locale-formatted text with grouping separators, currency symbols, trailing minus
        signs or parentheses denoting negation, e.g. "1.000.000,00 €" or "(123.45)".
        Reduced to a Native Number String before parsing.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import NumStrConf
from .digits import DigitSequence
from .errors import InvalidArgumentError, InvalidFormatError, MalformedInputError, NilInputError
from .formatters import fmt_type, fmt_value
from .kernel import NumberSign, NumberStrKernel, NumberStrStatsDto


# Methods --------------------------------------------------------------------------------------------------------------

def parse_pure(text: str,
               decimal_separator: str = NumStrConf.DECIMAL_SEPARATOR,
               leading_minus_sign: bool = True) -> tuple[NumberStrKernel, NumberStrStatsDto]:
    """
    Parse a Pure Number String into a kernel and its stats.

    The text is scanned left to right. Digits accumulate into the integer run until the
    first decimal separator, then into the fractional run; later separators are ignored.

    Args:
        text: The Pure Number String.
        decimal_separator: Radix point of one or more characters, e.g. "." or ",".
        leading_minus_sign: If True, a '-' found before the first digit marks the value
            negative. If False, a '-' found after a digit marks the value negative and
            terminates the scan: no further characters are consumed.

    Returns:
        tuple[NumberStrKernel, NumberStrStatsDto]: settled kernel and its stats.

    Raises:
        NilInputError: If text is None.
        TypeError: If text or decimal_separator is not a str.
        InvalidArgumentError: If decimal_separator is empty or holds digits, '-', '(' or ')'.
        MalformedInputError: If text holds no digits.

    Examples:
        >>> kernel, stats = parse_pure("- 1 234,50 EUR", decimal_separator=",")
        >>> kernel.to_native_str()
        '-1234.50'
        >>> parse_pure("1234.5-", leading_minus_sign=False)[0].to_native_str()
        '-1234.5'
        >>> parse_pure("12-34", leading_minus_sign=False)[0].to_native_str()
        '-12'
    """
    _validate_text(text)
    _validate_decimal_separator(decimal_separator)

    integer_digits = DigitSequence()
    fractional_digits = DigitSequence()
    found_separator = False
    found_minus = False
    found_digit = False

    i = 0
    while i < len(text):
        char = text[i]

        if char == NumStrConf.MINUS_SIGN:
            if leading_minus_sign and not found_digit:
                found_minus = True
            elif not leading_minus_sign and found_digit:
                found_minus = True
                break
            i += 1
            continue

        if text.startswith(decimal_separator, i):
            found_separator = True
            i += len(decimal_separator)
            continue

        if char in NumStrConf.DIGITS:
            found_digit = True
            if found_separator:
                fractional_digits.append(char)
            else:
                integer_digits.append(char)

        i += 1

    if not found_digit:
        raise MalformedInputError(f"number string contains zero numeric digits: {fmt_value(text)}")

    kernel = NumberStrKernel(integer_digits,
                             fractional_digits,
                             NumberSign.NEGATIVE if found_minus else NumberSign.POSITIVE)
    kernel.settle()
    return kernel, kernel.stats()


def parse_native(text: str) -> tuple[NumberStrKernel, NumberStrStatsDto]:
    """
    Parse a strictly formatted Native Number String.

    Raises:
        NilInputError: If text is None.
        TypeError: If text is not a str.
        InvalidFormatError: If text holds anything but digits, one '.' and a single leading '-',
            or holds no digits at all.

    Examples:
        >>> parse_native("-0012.50")[0].to_native_str()
        '-0012.50'
        >>> parse_native("1,000")
        Traceback (most recent call last):
            ...
        numstr.errors.InvalidFormatError: invalid character ',' at index 1 in native number string: <str: '1,000'>
    """
    validate_native(text)
    return parse_pure(text, NumStrConf.DECIMAL_SEPARATOR, leading_minus_sign=True)


def validate_native(text: str) -> None:
    """
    Check that text follows the Native Number String dialect.

    Raises:
        NilInputError: If text is None.
        TypeError: If text is not a str.
        InvalidFormatError: On any dialect violation.
    """
    _validate_text(text)

    if not text:
        raise InvalidFormatError("native number string is empty")

    num_digits = 0
    num_separators = 0
    for i, char in enumerate(text):
        if char in NumStrConf.DIGITS:
            num_digits += 1
        elif char == NumStrConf.DECIMAL_SEPARATOR:
            num_separators += 1
            if num_separators > 1:
                raise InvalidFormatError(
                    f"native number string contains more than one decimal point: {fmt_value(text)}")
        elif char == NumStrConf.MINUS_SIGN:
            if i != 0:
                raise InvalidFormatError(
                    f"minus sign is only valid as the first character of a native number string, "
                    f"found at index {i}: {fmt_value(text)}")
        else:
            raise InvalidFormatError(
                f"invalid character {char!r} at index {i} in native number string: {fmt_value(text)}")

    if num_digits == 0:
        raise InvalidFormatError(f"native number string contains zero numeric digits: {fmt_value(text)}")


def is_valid_native(text: Any) -> bool:
    """
    Check whether text is a valid Native Number String without raising.

    Examples:
        >>> is_valid_native("-12.5"), is_valid_native("12.5-"), is_valid_native(None)
        (True, False, False)
    """
    try:
        validate_native(text)
    except (MalformedInputError, NilInputError, TypeError):
        return False
    return True


def dirty_to_native(text: str, decimal_separator: str = NumStrConf.DECIMAL_SEPARATOR) -> str:
    """
    Reduce a Dirty Number String to a Native Number String.

    Digits are kept, the first decimal separator becomes '.', and every other character
    (grouping separators, spaces, currency symbols) is dropped. The value is negative if a
    '-' appears anywhere, or if a '(' before the first digit is closed by a ')' after a digit.
    An empty decimal_separator reads every digit as an integer digit.

    Raises:
        NilInputError: If text is None.
        TypeError: If text or decimal_separator is not a str.
        InvalidArgumentError: If decimal_separator holds digits, '-', '(' or ')'.
        MalformedInputError: If text holds no digits.

    Examples:
        >>> dirty_to_native("1.000.000,00 €", decimal_separator=",")
        '1000000.00'
        >>> dirty_to_native("(123.45)")
        '-123.45'
        >>> dirty_to_native("$ 1,234.50-")
        '-1234.50'
    """
    _validate_text(text)
    _validate_decimal_separator(decimal_separator, allow_empty=True)

    native_chars: list[str] = []
    found_negative = False
    found_leading_paren = False
    found_digit = False
    found_separator = False

    i = 0
    while i < len(text):
        char = text[i]

        if char in NumStrConf.DIGITS:
            native_chars.append(char)
            found_digit = True
            i += 1
            continue

        if char == NumStrConf.MINUS_SIGN:
            found_negative = True
        elif char == NumStrConf.DIRTY_NEGATIVE_OPEN and not found_digit:
            found_leading_paren = True
        elif char == NumStrConf.DIRTY_NEGATIVE_CLOSE and found_leading_paren and found_digit:
            found_negative = True
        elif decimal_separator and not found_separator and text.startswith(decimal_separator, i):
            native_chars.append(NumStrConf.DECIMAL_SEPARATOR)
            found_separator = True
            i += len(decimal_separator)
            continue

        i += 1

    if not found_digit:
        raise MalformedInputError(f"dirty number string contains zero numeric digits: {fmt_value(text)}")

    native = "".join(native_chars)
    return NumStrConf.MINUS_SIGN + native if found_negative else native


def parse_dirty(text: str,
                decimal_separator: str = NumStrConf.DECIMAL_SEPARATOR) -> tuple[NumberStrKernel, NumberStrStatsDto]:
    """
    Parse a locale-formatted Dirty Number String via its Native reduction.

    Examples:
        >>> kernel, _ = parse_dirty("1.000.000,00 €", decimal_separator=",")
        >>> kernel.normalize()
        >>> str(kernel)
        '1000000'
    """
    return parse_native(dirty_to_native(text, decimal_separator))


def normalize(native_text: str) -> tuple[str, NumberStrStatsDto]:
    """
    Strip leading integer zeros and trailing fractional zeros from a Native Number String.

    At least one integer digit is retained; the decimal point is dropped when no fractional
    digits remain and a zero value loses its minus sign. Idempotent.

    Returns:
        tuple[str, NumberStrStatsDto]: normalized Native Number String and its stats.

    Raises:
        InvalidFormatError: If native_text is not a valid Native Number String.

    Examples:
        >>> normalize("-0001234.567800")[0]
        '-1234.5678'
        >>> normalize("-000.000")[0]
        '0'
        >>> normalize(".5")[0]
        '0.5'
    """
    kernel, _ = parse_native(native_text)
    kernel.normalize()
    return kernel.to_native_str(), kernel.stats()


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_text(text: Any) -> None:
    if text is None:
        raise NilInputError("number string must not be None")
    if not isinstance(text, str):
        raise TypeError(f"number string must be str, but got {fmt_type(text)}")


def _validate_decimal_separator(decimal_separator: Any, allow_empty: bool = False) -> None:
    if decimal_separator is None:
        raise NilInputError("decimal_separator must not be None")
    if not isinstance(decimal_separator, str):
        raise TypeError(f"decimal_separator must be str, but got {fmt_type(decimal_separator)}")
    if not decimal_separator and not allow_empty:
        raise InvalidArgumentError("decimal_separator must not be empty")
    for char in decimal_separator:
        if char in NumStrConf.DIGITS or char in NumStrConf.INVALID_SEPARATOR_CHARS:
            raise InvalidArgumentError(
                f"decimal_separator must not contain digits or any of "
                f"{NumStrConf.INVALID_SEPARATOR_CHARS!r}, but got {fmt_value(decimal_separator)}")
