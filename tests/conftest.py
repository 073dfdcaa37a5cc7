#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from typing import Callable

# Local ----------------------------------------------------------------------------------------------------------------
from numstr.kernel import NumberStrKernel
from numstr.parsing import parse_native


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def kernel() -> Callable[[str], NumberStrKernel]:
    """Factory building a kernel from a Native Number String."""

    def _kernel(native: str) -> NumberStrKernel:
        k, _ = parse_native(native)
        return k

    return _kernel


@pytest.fixture
def native_samples() -> list[str]:
    """Native Number Strings covering signs, zeros and digit run shapes."""
    return [
        "0", "-0", "0.000", "000.5", "-0.0001",
        "1", "-1", "7.5", "-7.5", "12.50",
        "-0012.3400", "999.999", "1000000", "-123456789.987654321",
    ]
