#
# NumStr - Digit Sequence Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numstr.digits import DigitSequence
from numstr.errors import InvalidArgumentError, MalformedInputError


# Tests ----------------------------------------------------------------------------------------------------------------

class TestDigitSequenceInit:

    @pytest.mark.parametrize(
        "digits, expected",
        [
            pytest.param("", "", id="empty"),
            pytest.param("0123", "0123", id="str"),
            pytest.param(["4", "5"], "45", id="list"),
            pytest.param(DigitSequence("89"), "89", id="sequence"),
        ],
    )
    def test_valid(self, digits, expected):
        """Accept digit strings, iterables and other sequences."""
        assert str(DigitSequence(digits)) == expected

    @pytest.mark.parametrize(
        "digits",
        [
            pytest.param("12a", id="letter"),
            pytest.param("1.5", id="dot"),
            pytest.param("-1", id="minus"),
            pytest.param("١٢", id="arabic-indic-digits"),
            pytest.param(["12"], id="multi-char-item"),
        ],
    )
    def test_malformed(self, digits):
        """Reject anything but ASCII digits."""
        with pytest.raises(MalformedInputError, match="(?i)digit"):
            DigitSequence(digits)

    def test_wrong_type(self):
        """Reject non-iterables."""
        with pytest.raises(TypeError, match="(?i)digits must be"):
            DigitSequence(123)


class TestDigitSequenceQueries:

    @pytest.mark.parametrize(
        "digits, leading, trailing, all_zeros",
        [
            pytest.param("", 0, 0, True, id="empty"),
            pytest.param("000", 3, 3, True, id="zeros"),
            pytest.param("00120", 2, 1, False, id="mixed"),
            pytest.param("7", 0, 0, False, id="single"),
        ],
    )
    def test_zero_counts(self, digits, leading, trailing, all_zeros):
        """Count leading and trailing zeros."""
        seq = DigitSequence(digits)
        assert seq.leading_zero_count() == leading
        assert seq.trailing_zero_count() == trailing
        assert seq.is_all_zeros() is all_zeros

    def test_indexing_and_iteration(self):
        """Support len, index and iteration."""
        seq = DigitSequence("321")
        assert len(seq) == 3
        assert seq[0] == "3" and seq[-1] == "1"
        assert list(seq) == ["3", "2", "1"]

    def test_equality(self):
        """Compare against sequences and plain strings."""
        assert DigitSequence("12") == DigitSequence("12")
        assert DigitSequence("12") == "12"
        assert DigitSequence("12") != DigitSequence("120")

    def test_copy_is_independent(self):
        """Mutating a copy leaves the original untouched."""
        seq = DigitSequence("12")
        dup = seq.copy()
        dup.append("3")
        assert str(seq) == "12"
        assert str(dup) == "123"


class TestDigitSequenceMutators:

    def test_append_prepend_extend(self):
        seq = DigitSequence("5")
        seq.append("6")
        seq.prepend("4")
        seq.extend("78")
        assert str(seq) == "45678"

    def test_setitem_validates(self):
        """Item assignment accepts digits only."""
        seq = DigitSequence("10")
        seq[1] = "9"
        assert str(seq) == "19"
        with pytest.raises(MalformedInputError):
            seq[0] = "x"

    @pytest.mark.parametrize(
        "method, count, expected",
        [
            pytest.param("trim_left", 2, "345", id="trim_left"),
            pytest.param("trim_right", 2, "123", id="trim_right"),
            pytest.param("trim_right", 0, "12345", id="trim_right-zero"),
            pytest.param("truncate", 1, "1", id="truncate"),
            pytest.param("trim_left", 9, "", id="trim_left-past-end"),
        ],
    )
    def test_trim(self, method, count, expected):
        seq = DigitSequence("12345")
        getattr(seq, method)(count)
        assert str(seq) == expected

    @pytest.mark.parametrize(
        "method, length, expected",
        [
            pytest.param("extend_right", 5, "12000", id="extend_right"),
            pytest.param("extend_left", 5, "00012", id="extend_left"),
            pytest.param("extend_right", 1, "12", id="no-shrink"),
        ],
    )
    def test_extend_to_length(self, method, length, expected):
        seq = DigitSequence("12")
        getattr(seq, method)(length)
        assert str(seq) == expected

    def test_negative_count(self):
        with pytest.raises(InvalidArgumentError, match=">= 0"):
            DigitSequence("1").trim_left(-1)

    def test_bool_count(self):
        with pytest.raises(TypeError, match="count must be int"):
            DigitSequence("1").trim_right(True)

    @pytest.mark.parametrize(
        "digits, keep_one, removed, expected",
        [
            pytest.param("00120", True, 2, "120", id="mixed"),
            pytest.param("000", True, 2, "0", id="keep-one"),
            pytest.param("000", False, 3, "", id="drop-all"),
            pytest.param("", True, 0, "", id="empty"),
        ],
    )
    def test_strip_leading_zeros(self, digits, keep_one, removed, expected):
        seq = DigitSequence(digits)
        assert seq.strip_leading_zeros(keep_one=keep_one) == removed
        assert str(seq) == expected

    def test_strip_trailing_zeros(self):
        seq = DigitSequence("12300")
        assert seq.strip_trailing_zeros() == 2
        assert str(seq) == "123"
