"""
Type-aware formatters for numstr exception and warning messages.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Literal


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any, *, style: Literal["ascii", "unicode-angle"] = "ascii") -> str:
    """
    Format type information of an instance or a type for exception messages.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(str)
        '<type: str>'
        >>> fmt_type(None, style="unicode-angle")
        '⟨type: NoneType⟩'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)
    return _fmt_format_pair("type", type_name, style)


def fmt_value(x: Any, *, style: Literal["ascii", "unicode-angle"] = "ascii", max_repr: int = 80) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Long reprs are shortened to about max_repr characters, keeping their head and tail
    around the ellipsis. Digit strings can be very long, so messages never echo them
    in full.

    Examples:
        >>> fmt_value("12.5")
        "<str: '12.5'>"
        >>> fmt_value("1234567890" * 3, max_repr=8)
        "<str: '123...890'>"
    """
    t = type(x).__name__
    ellipsis = "..." if style == "ascii" else "…"

    # Broken __repr__ must not mask the original error
    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    if style == "ascii":
        base_repr = base_repr.replace(">", "\\>")

    return _fmt_format_pair(t, _fmt_truncate(base_repr, max_repr, ellipsis=ellipsis), style)


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(s: str, max_len: int, ellipsis: str = "…") -> str:
    """
    Shorten s to max_len characters plus an ellipsis placed in the middle.

    Both ends survive, so a truncated digit string still shows its leading digits and
    its last digits. Quotes of a quoted repr are kept around the shortened text.
    """
    if max_len <= 0:
        return ""
    if len(s) <= max_len:
        return s

    quote = ""
    if len(s) >= 2 and s[0] in ("'", '"') and s[-1] == s[0]:
        quote, s = s[0], s[1:-1]
        max_len -= 2

    budget = max(2, max_len)
    head, tail = budget - budget // 2, budget // 2
    return f"{quote}{s[:head]}{ellipsis}{s[-tail:]}{quote}"


def _fmt_format_pair(type_name: str, value_repr: str, style: str) -> str:
    if style == "unicode-angle":
        return f"⟨{type_name}: {value_repr}⟩"
    return f"<{type_name}: {value_repr}>"
