"""Tests for exact evaluation of MathML expressions."""

import math

import pytest

from mathplot.core.errors import (
    ArityMismatch,
    IncompatibleSymbol,
    InvalidValue,
    MisplacedQualifier,
    NoExactValue,
    UnsupportedExactOperation,
    UnsupportedOperation,
)
from mathplot.exact import ExactNumber, ExactTuple
from mathplot.mathml import MathML, Operator
from mathplot.mathml.visitors import _EXACT_OPERATIONS, _INEXACT_OPERATORS


def apply(operator, *args):
    return f"<apply><{operator}/>{''.join(args)}</apply>"


def cn(value):
    return f"<cn>{value}</cn>"


class TestExactValues:
    """Test the exactly supported operators."""

    def test_two_pi(self, mathml):
        """Test 2 * pi evaluates to 2pi."""
        assert mathml(apply("times", cn(2), "<pi/>")).rational() == ExactNumber("2pi")

    def test_leaves(self, mathml):
        """Test constants and symbols."""
        assert mathml(cn("0.25")).rational() == ExactNumber(1, 4)
        assert mathml(cn(-3)).rational() == ExactNumber(-3)
        assert mathml("<pi/>").rational() == ExactNumber(1, 1, 1)
        assert mathml("<exponentiale/>").rational() == ExactNumber(1, 1, 0, 1)

    def test_long_integer_literal(self, mathml):
        """Test integer literals keep every digit."""
        result = mathml(cn("12345678901234567891")).rational()
        assert result.numerator == 12345678901234567891
        assert result == ExactNumber("12345678901234567891")

    @pytest.mark.parametrize("markup,expected", [
        (apply("plus", cn(1), cn("0.5")), ExactNumber(3, 2)),
        (apply("minus", "<pi/>"), ExactNumber("-pi")),
        (apply("minus", cn(1), cn(3)), ExactNumber(-2)),
        (apply("divide", "<pi/>", cn(4)), ExactNumber("pi/4")),
        (apply("power", "<pi/>", cn(2)), ExactNumber(1, 1, 2)),
        (apply("power", cn(2), cn(-2)), ExactNumber(1, 4)),
        (apply("abs", cn(-2)), ExactNumber(2)),
        (apply("root", cn(9)), ExactNumber(3)),
        (apply("root", "<degree><cn>3</cn></degree>", cn(64)), ExactNumber(4)),
    ])
    def test_operator(self, mathml, markup, expected):
        """Test one exactly supported operator."""
        assert mathml(markup).rational() == expected

    def test_list(self, mathml):
        """Test <list> evaluates to a tuple in order."""
        result = mathml(f"<list>{cn(0)}{apply('times', cn(2), '<pi/>')}</list>").rational()
        assert isinstance(result, ExactTuple)
        assert result == ExactTuple("(0, 2pi)")

    def test_rational_is_cached(self, mathml):
        """Test the exact value is computed once."""
        expression = mathml(apply("divide", "<pi/>", cn(2)))
        assert expression.rational() is expression.rational()


class TestExactFailures:
    """Test expressions without an exact value."""

    def test_sin_has_no_exact_value(self, mathml):
        """Test sin(0) evaluates numerically but not exactly."""
        expression = mathml(apply("sin", cn(0)))
        assert expression.exec()(1.234) == 0
        with pytest.raises(UnsupportedExactOperation) as exc_info:
            expression.rational()
        assert exc_info.value.operator == "sin"

    @pytest.mark.parametrize("operator", ["cos", "tan", "ln", "log"])
    def test_inexact_operators(self, mathml, operator):
        """Test the transcendental operators."""
        with pytest.raises(UnsupportedExactOperation):
            mathml(apply(operator, cn(1))).rational()

    def test_irrational_root(self, mathml):
        """Test sqrt(2) has no exact value."""
        with pytest.raises(UnsupportedExactOperation) as exc_info:
            mathml(apply("root", cn(2))).rational()
        assert exc_info.value.operator == "root"

    def test_free_variable(self, mathml):
        """Test <ci> has no exact value."""
        with pytest.raises(NoExactValue):
            mathml(apply("times", cn(2), "<ci>x</ci>")).rational()

    def test_pi_times_e(self, mathml):
        """Test symbol mixing is reported."""
        with pytest.raises(IncompatibleSymbol):
            mathml(apply("times", "<pi/>", "<exponentiale/>")).rational()

    def test_fractional_power(self, mathml):
        """Test non-integer exponents are reported."""
        with pytest.raises(UnsupportedOperation):
            mathml(apply("power", cn(2), cn("0.5"))).rational()

    def test_division_by_zero(self, mathml):
        """Test exact division by zero."""
        with pytest.raises(InvalidValue):
            mathml(apply("divide", cn(1), cn(0))).rational()

    def test_list_argument(self, mathml):
        """Test operators reject list arguments."""
        with pytest.raises(InvalidValue):
            mathml(apply("abs", f"<list>{cn(1)}{cn(2)}</list>")).rational()

    def test_arity_checked(self, mathml):
        """Test <plus/> with one argument."""
        with pytest.raises(ArityMismatch):
            mathml(apply("plus", cn(1))).rational()

    def test_qualifier_checked(self, mathml):
        """Test the degree must come first."""
        with pytest.raises(MisplacedQualifier):
            mathml(apply("root", cn(64), "<degree><cn>3</cn></degree>")).rational()


class TestConsistency:
    """Test exec() and rational() agree wherever both succeed."""

    @pytest.mark.parametrize("markup", [
        apply("times", cn(2), "<pi/>"),
        apply("divide", apply("times", cn(3), "<pi/>"), cn(4)),
        apply("minus", "<exponentiale/>", apply("divide", "<exponentiale/>", cn(2))),
        apply("power", apply("divide", cn(2), cn(3)), cn(3)),
        apply("abs", apply("minus", cn("0.75"))),
        apply("root", "<degree><cn>3</cn></degree>", cn(64)),
    ])
    def test_exec_matches_rational(self, markup):
        """Test the numeric function equals the exact approximation."""
        expression = MathML(markup)
        exact = expression.rational().approx
        for x in (0, 1.5, -7):
            assert expression.exec()(x) == pytest.approx(exact)

    def test_two_pi_approx(self, mathml):
        """Test 2 * pi is about 6.283 both ways."""
        expression = mathml(apply("times", cn(2), "<pi/>"))
        assert expression.exec()(0) == pytest.approx(2 * math.pi)
        assert expression.rational().approx == pytest.approx(6.283, abs=1e-3)

    def test_every_operator_is_classified(self):
        """Test each operator is either exact or explicitly inexact."""
        exact = set(_EXACT_OPERATIONS)
        assert exact.isdisjoint(_INEXACT_OPERATORS)
        assert exact | _INEXACT_OPERATORS == set(Operator)
