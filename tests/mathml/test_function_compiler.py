"""Tests for compiling MathML to numeric functions."""

import math

import pytest

from mathplot.core.errors import ArityMismatch, InvalidVariable, MisplacedQualifier
from mathplot.mathml import Operator
from mathplot.mathml.visitors import _FUNCTIONS


def apply(operator, *args):
    return f"<apply><{operator}/>{''.join(args)}</apply>"


def cn(value):
    return f"<cn>{value}</cn>"


X = "<ci>x</ci>"


class TestLeaves:
    """Test constants, variables and lists."""

    def test_constant_ignores_x(self, mathml):
        """Test a constant is the same for every x."""
        f = mathml(cn("2.5")).exec()
        assert f(0) == f(100) == 2.5

    def test_identity(self, mathml):
        """Test <ci>x</ci> is the identity."""
        f = mathml(X).exec()
        assert f(3) == 3
        assert f(-1.5) == -1.5

    def test_symbolic_constants(self, mathml):
        """Test pi and e."""
        assert mathml("<pi/>").exec()(0) == math.pi
        assert mathml("<exponentiale/>").exec()(0) == math.e

    def test_invalid_variable(self, mathml):
        """Test <ci> must name x."""
        with pytest.raises(InvalidVariable) as exc_info:
            mathml(apply("plus", "<ci>y</ci>", cn(1))).exec()
        assert exc_info.value.name == "y"

    def test_list(self, mathml):
        """Test a list evaluates each element at x, in order."""
        f = mathml(f"<list>{cn(0)}{apply('times', cn(2), X)}<pi/></list>").exec()
        assert f(1) == [0.0, 2.0, math.pi]


class TestOperators:
    """Test every operator numerically."""

    @pytest.mark.parametrize("markup,x,expected", [
        (apply("plus", X, cn(1)), 2, 3),
        (apply("minus", X, cn(1)), 2, 1),
        (apply("minus", X), 2, -2),
        (apply("times", X, cn(3)), 2, 6),
        (apply("divide", X, cn(4)), 2, 0.5),
        (apply("power", X, cn(3)), 2, 8),
        (apply("root", cn(16)), 0, 4),
        (apply("root", "<degree><cn>3</cn></degree>", X), 27, 3),
        (apply("sin", X), math.pi / 2, 1),
        (apply("cos", X), 0, 1),
        (apply("tan", X), math.pi / 4, 1),
        (apply("abs", X), -3, 3),
        (apply("ln", "<exponentiale/>"), 0, 1),
        (apply("log", cn(1000)), 0, 3),
        (apply("log", "<logbase><cn>2</cn></logbase>", X), 8, 3),
    ])
    def test_operator(self, mathml, markup, x, expected):
        """Test one operator."""
        assert mathml(markup).exec()(x) == pytest.approx(expected)

    def test_log_base_three_is_exact(self, mathml):
        """Test log base 3 of 27 is exactly 3."""
        f = mathml(apply("log", "<logbase><cn>3</cn></logbase>", cn(27))).exec()
        assert f(0) == 3

    def test_cube_root_is_exact(self, mathml):
        """Test the cube root of 64 is exactly 4."""
        f = mathml(apply("root", "<degree><cn>3</cn></degree>", cn(64))).exec()
        assert f(0) == 4

    def test_nested(self, mathml):
        """Test x^2 + 2x + 1."""
        markup = apply(
            "plus",
            apply("plus", apply("power", X, cn(2)), apply("times", cn(2), X)),
            cn(1),
        )
        f = mathml(markup).exec()
        assert f(3) == 16
        assert f(-1) == 0

    def test_every_operator_has_a_function(self):
        """Test the function table covers the vocabulary."""
        assert set(_FUNCTIONS) == set(Operator)


class TestDomain:
    """Test out-of-domain inputs give nan or inf."""

    def test_division_by_zero(self, mathml):
        """Test 1/0, -1/0 and 0/0."""
        f = mathml(apply("divide", cn(1), X)).exec()
        assert f(0) == math.inf
        assert mathml(apply("divide", cn(-1), X)).exec()(0) == -math.inf
        assert math.isnan(mathml(apply("divide", X, X)).exec()(0))

    def test_logarithms_of_non_positive(self, mathml):
        """Test ln 0 = -inf and log of a negative is nan."""
        assert mathml(apply("ln", X)).exec()(0) == -math.inf
        assert math.isnan(mathml(apply("log", X)).exec()(-1))

    def test_even_root_of_negative(self, mathml):
        """Test sqrt(-4) is nan."""
        assert math.isnan(mathml(apply("root", X)).exec()(-4))

    def test_odd_root_of_negative(self, mathml):
        """Test the cube root of -8 is -2."""
        f = mathml(apply("root", "<degree><cn>3</cn></degree>", X)).exec()
        assert f(-8) == pytest.approx(-2)

    def test_fractional_power_of_negative(self, mathml):
        """Test (-8) ** 0.5 is nan, not complex."""
        assert math.isnan(mathml(apply("power", X, cn("0.5"))).exec()(-8))

    def test_overflow(self, mathml):
        """Test huge powers give inf."""
        assert mathml(apply("power", cn(10), X)).exec()(1000) == math.inf

    def test_overflow_keeps_sign(self, mathml):
        """Test odd powers of a negative base overflow to -inf."""
        assert mathml(apply("power", cn(-10), cn(401))).exec()(0) == -math.inf
        assert mathml(apply("power", cn(-10), cn(400))).exec()(0) == math.inf

    def test_trig_of_infinity(self, mathml):
        """Test sin(inf) is nan."""
        f = mathml(apply("sin", apply("divide", cn(1), X))).exec()
        assert math.isnan(f(0))


class TestValidation:
    """Test arity and qualifier checks at compile time."""

    def test_plus_with_one_argument(self, mathml):
        """Test <plus/> needs two arguments."""
        with pytest.raises(ArityMismatch) as exc_info:
            mathml(apply("plus", cn(1))).exec()
        assert exc_info.value.expected == (2,)
        assert exc_info.value.actual == 1

    @pytest.mark.parametrize("markup", [
        apply("minus"),
        apply("minus", cn(1), cn(2), cn(3)),
        apply("sin", cn(1), cn(2)),
        apply("root"),
        apply("log", cn(1), cn(2), cn(3)),
    ])
    def test_arity_mismatch(self, mathml, markup):
        """Test wrong argument counts."""
        with pytest.raises(ArityMismatch):
            mathml(markup).exec()

    @pytest.mark.parametrize("markup", [
        apply("root", cn(64), "<degree><cn>3</cn></degree>"),
        apply("root", cn(2), cn(81)),
        apply("root", "<degree><cn>3</cn></degree>"),
        apply("log", "<degree><cn>3</cn></degree>", cn(27)),
        apply("log", "<logbase><cn>3</cn></logbase>", "<logbase><cn>3</cn></logbase>"),
    ])
    def test_misplaced_qualifier(self, mathml, markup):
        """Test two-argument root/log need their qualifier first."""
        with pytest.raises(MisplacedQualifier):
            mathml(markup).exec()

    def test_exec_is_cached(self, mathml):
        """Test the compiled function is built once."""
        expression = mathml(apply("times", cn(2), X))
        assert expression.exec() is expression.exec()
        assert expression.evaluate(4) == 8
