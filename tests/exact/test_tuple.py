"""Tests for ExactTuple."""

import math

import pytest

from mathplot.core.errors import InvalidValue
from mathplot.exact import ExactNumber, ExactTuple


class TestTupleConstruction:
    """Test construction from strings and sequences."""

    def test_from_string(self):
        """Test a simple tuple string."""
        t = ExactTuple("(1/2, pi, 3pi)")
        assert t.length == 3
        assert t[0] == ExactNumber(1, 2)
        assert t[2] == ExactNumber("3pi")

    def test_whitespace_is_ignored(self):
        """Test whitespace anywhere in the string."""
        assert ExactTuple(" ( 0 ,\t2pi ) ") == ExactTuple("(0,2pi)")

    def test_from_sequence(self):
        """Test a sequence of ExactNumber is stored in order."""
        t = ExactTuple([ExactNumber(0), ExactNumber("2pi")])
        assert list(t) == [ExactNumber(0), ExactNumber("2pi")]

    @pytest.mark.parametrize("text", ["1, 2", "(1)", "((1,2))", "(1,,2)", "()", "(1,2", "(1, x)"])
    def test_invalid_strings(self, text):
        """Test malformed tuples raise InvalidValue."""
        with pytest.raises(InvalidValue):
            ExactTuple(text)

    def test_non_exact_element(self):
        """Test plain floats are not accepted as elements."""
        with pytest.raises(InvalidValue):
            ExactTuple([ExactNumber(1), 2.0])


class TestTupleValues:
    """Test approximation and text forms."""

    def test_approx_preserves_order(self):
        """Test (1, pi) approximates to [1, pi], not [pi, 1]."""
        assert ExactTuple("(1, pi)").approx == [1.0, math.pi]

    def test_length_and_iteration(self):
        """Test len, iteration and indexing."""
        t = ExactTuple("(1, 2, 3)")
        assert len(t) == t.length == 3
        assert [n.numerator for n in t] == [1, 2, 3]

    def test_equals(self):
        """Test element-wise equality."""
        assert ExactTuple("(2/4, pi)").equals(ExactTuple("(1/2, pi)"))
        assert not ExactTuple("(1, 2)").equals(ExactTuple("(1, 2, 3)"))
        assert not ExactTuple("(1, 2)").equals("(1, 2)")

    def test_hashable(self):
        """Test equal tuples hash equal."""
        assert hash(ExactTuple("(2/4, pi)")) == hash(ExactTuple("(1/2, pi)"))

    def test_to_string(self):
        """Test text form and repr."""
        t = ExactTuple("(1/2,pi)")
        assert t.to_string() == "(1/2, pi)"
        assert repr(t) == "ExactTuple('(1/2, pi)')"

    def test_to_tex(self):
        """Test LaTeX form."""
        assert ExactTuple("(0, pi/2)").to_tex() == r"\left(0, \frac{\pi}{2}\right)"

    def test_has_fractions(self):
        """Test fraction detection across elements."""
        assert ExactTuple("(1, pi/2)").has_fractions
        assert not ExactTuple("(1, 2pi)").has_fractions
