#
# NumStr - Rounding Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numstr.errors import InvalidArgumentError, NilInputError, UnsupportedRoundingModeError
from numstr.kernel import NumberSign, NumberStrKernel
from numstr.rounding import RoundingSpec, RoundingType, round_kernel, round_native_str, rounded


# Tests ----------------------------------------------------------------------------------------------------------------

class TestRoundingType:

    @pytest.mark.parametrize(
        "name, expected",
        [
            pytest.param("HalfToEven", RoundingType.HALF_TO_EVEN, id="value"),
            pytest.param("halftoeven", RoundingType.HALF_TO_EVEN, id="lower"),
            pytest.param("HALF_TO_EVEN", RoundingType.HALF_TO_EVEN, id="member-name"),
            pytest.param("noRounding", RoundingType.NO_ROUNDING, id="camel"),
            pytest.param(RoundingType.FLOOR, RoundingType.FLOOR, id="member"),
        ],
    )
    def test_parse(self, name, expected):
        assert RoundingType.parse(name) is expected

    def test_parse_unknown(self):
        with pytest.raises(UnsupportedRoundingModeError, match="unknown rounding type"):
            RoundingType.parse("Bankers")

    def test_parse_wrong_type(self):
        with pytest.raises(TypeError):
            RoundingType.parse(4)


class TestRoundingSpec:

    def test_defaults(self):
        spec = RoundingSpec()
        assert spec.rounding_type is RoundingType.HALF_AWAY_FROM_ZERO
        assert spec.round_to_fractional_digits == 0
        assert spec.seed is None

    def test_name_is_parsed(self):
        assert RoundingSpec("truncate", 2).rounding_type is RoundingType.TRUNCATE

    def test_none_rejected(self):
        with pytest.raises(UnsupportedRoundingModeError):
            RoundingSpec(RoundingType.NONE, 2)

    def test_negative_width(self):
        with pytest.raises(InvalidArgumentError, match=">= 0"):
            RoundingSpec(RoundingType.TRUNCATE, -1)

    @pytest.mark.parametrize(
        "kwargs",
        [
            pytest.param({"round_to_fractional_digits": 1.5}, id="float-width"),
            pytest.param({"round_to_fractional_digits": True}, id="bool-width"),
            pytest.param({"seed": "7"}, id="str-seed"),
        ],
    )
    def test_wrong_types(self, kwargs):
        with pytest.raises(TypeError):
            RoundingSpec(RoundingType.TRUNCATE, **kwargs)

    def test_merge(self):
        spec = RoundingSpec(RoundingType.RANDOMLY, 2, seed=7)
        merged = spec.merge(round_to_fractional_digits=4)
        assert merged == RoundingSpec(RoundingType.RANDOMLY, 4, seed=7)
        assert spec.merge(seed=None).seed is None
        assert spec.merge() == spec

    def test_merge_falsy_override(self):
        spec = RoundingSpec(RoundingType.FLOOR, 3, seed=1)
        assert spec.merge(round_to_fractional_digits=0).round_to_fractional_digits == 0
        assert spec.merge(seed=0).seed == 0

    def test_frozen(self):
        with pytest.raises(AttributeError):
            RoundingSpec().seed = 1


class TestRoundKernel:

    @pytest.mark.parametrize(
        "text, digits, expected",
        [
            pytest.param("1.23456789", 3, "1.235", id="round-up"),
            pytest.param("1.9999999", 3, "2.000", id="carry-into-integer"),
            pytest.param("9.9999999", 3, "10.000", id="carry-prepends-digit"),
            pytest.param("999.999", 0, "1000", id="carry-width-zero"),
            pytest.param("3.1", 4, "3.1000", id="pad"),
            pytest.param("3.14", 2, "3.14", id="equal-width"),
            pytest.param("-0.004", 2, "0.00", id="rounds-to-zero"),
            pytest.param("0.004", 0, "0", id="drops-fraction"),
        ],
    )
    def test_half_away_from_zero(self, text, digits, expected):
        assert round_native_str(text, RoundingType.HALF_AWAY_FROM_ZERO, digits) == expected

    @pytest.mark.parametrize(
        "rounding_type, values",
        [
            pytest.param(RoundingType.HALF_UP_WITH_NEG_NUMS,
                         {"7.5": "8", "-7.5": "-7", "7.6": "8", "-7.6": "-8", "7.4": "7"}, id="half-up"),
            pytest.param(RoundingType.HALF_DOWN_WITH_NEG_NUMS,
                         {"7.5": "7", "-7.5": "-8", "7.6": "8", "-7.6": "-8", "-7.4": "-7"}, id="half-down"),
            pytest.param(RoundingType.HALF_AWAY_FROM_ZERO,
                         {"7.5": "8", "-7.5": "-8", "7.4": "7", "-7.4": "-7"}, id="half-away"),
            pytest.param(RoundingType.HALF_TOWARDS_ZERO,
                         {"7.5": "7", "-7.5": "-7", "7.6": "8", "-7.6": "-8"}, id="half-towards"),
            pytest.param(RoundingType.HALF_TO_EVEN,
                         {"7.5": "8", "6.5": "6", "-7.5": "-8", "-6.5": "-6", "6.51": "7", "0.5": "0"}, id="half-even"),
            pytest.param(RoundingType.HALF_TO_ODD,
                         {"7.5": "7", "6.5": "7", "-7.5": "-7", "-6.5": "-7", "7.51": "8"}, id="half-odd"),
            pytest.param(RoundingType.FLOOR,
                         {"7.9": "7", "-7.1": "-8", "-7.0": "-7", "7.0": "7"}, id="floor"),
            pytest.param(RoundingType.CEILING,
                         {"7.1": "8", "-7.9": "-7", "7.0": "7", "-7.0": "-7"}, id="ceiling"),
            pytest.param(RoundingType.TRUNCATE,
                         {"7.9": "7", "-7.9": "-7", "9.999": "9"}, id="truncate"),
        ],
    )
    def test_modes_to_integer(self, rounding_type, values):
        for text, expected in values.items():
            assert round_native_str(text, rounding_type, 0) == expected, text

    def test_tie_uses_all_dropped_digits(self):
        """A 5 followed by nonzero digits is above half, not a tie."""
        assert round_native_str("2.2501", RoundingType.HALF_TO_EVEN, 1) == "2.3"
        assert round_native_str("2.2500", RoundingType.HALF_TO_EVEN, 1) == "2.2"
        assert round_native_str("2.2501", RoundingType.HALF_TOWARDS_ZERO, 1) == "2.3"

    def test_floor_ceiling_at_width(self):
        assert round_native_str("-1.231", RoundingType.FLOOR, 2) == "-1.24"
        assert round_native_str("1.231", RoundingType.CEILING, 2) == "1.24"
        assert round_native_str("1.230", RoundingType.CEILING, 2) == "1.23"

    def test_no_rounding(self, kernel):
        k = kernel("1.23456")
        round_kernel(k, RoundingSpec(RoundingType.NO_ROUNDING, 2))
        assert str(k) == "1.23456"

    def test_randomly_seeded_is_deterministic(self):
        results = {round_native_str("2.5", RoundingType.RANDOMLY, 0, seed=42) for _ in range(5)}
        assert len(results) == 1
        assert results <= {"2", "3"}

    def test_randomly_tie_picks_neighbour(self):
        for seed in range(20):
            assert round_native_str("-2.5", RoundingType.RANDOMLY, 0, seed=seed) in ("-2", "-3")

    def test_randomly_non_tie(self):
        assert round_native_str("2.6", RoundingType.RANDOMLY, 0) == "3"
        assert round_native_str("2.4", RoundingType.RANDOMLY, 0) == "2"

    def test_zero_result_sign(self, kernel):
        k = kernel("-0.0004")
        round_kernel(k, RoundingSpec(RoundingType.HALF_AWAY_FROM_ZERO, 3))
        assert k.number_sign == NumberSign.ZERO
        assert str(k) == "0.000"

    @pytest.mark.parametrize("rounding_type", [t for t in RoundingType if t != RoundingType.NONE])
    def test_idempotent(self, kernel, native_samples, rounding_type):
        for text in native_samples:
            spec = RoundingSpec(rounding_type, 2, seed=1)
            once = rounded(kernel(text), spec)
            twice = rounded(once, spec)
            assert once == twice, text

    def test_rounded_leaves_input(self, kernel):
        k = kernel("1.25")
        result = rounded(k, RoundingSpec(RoundingType.HALF_AWAY_FROM_ZERO, 1))
        assert str(k) == "1.25"
        assert str(result) == "1.3"

    def test_none_kernel(self):
        with pytest.raises(NilInputError):
            round_kernel(None, RoundingSpec())

    def test_wrong_spec(self):
        with pytest.raises(TypeError, match="RoundingSpec"):
            round_kernel(NumberStrKernel.zero(), "HalfToEven")

    def test_unknown_type_name(self):
        with pytest.raises(UnsupportedRoundingModeError):
            round_native_str("1.5", "Sideways", 0)
