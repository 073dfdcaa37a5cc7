"""
UNSET sentinel for merge() style overrides where None is a meaningful value.

Example:
    >>> def merge_seed(current, seed=UNSET):
    ...     return ifnotunset(seed, default=current)
    >>> merge_seed(7, None) is None      # None is an explicit value
    True
    >>> merge_seed(7)                    # UNSET keeps the current value
    7
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Final

__all__ = ['UNSET', 'UnsetType', 'ifnotunset']


# Classes --------------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Singleton type of UNSET.

    Falsy, compared by identity, and pickles back to the same instance.
    """
    __slots__ = ()
    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        return (self.__class__, ())


UNSET: Final[UnsetType] = UnsetType()


# Methods --------------------------------------------------------------------------------------------------------------

def ifnotunset(value: Any, *, default: Any = None) -> Any:
    """Return value unless it is UNSET, otherwise return default. Backs every merge() override."""
    return default if value is UNSET else value
