"""
AST Visitor implementations for MathML trees.

- FunctionCompiler: compile the tree into a closure ``f(x) -> float``
- ExactEvaluator: evaluate a variable-free tree to an ExactNumber/ExactTuple
- StringVisitor: render the tree as infix text

Both evaluators validate arity and qualifier placement the same way, through
``check_arity`` and ``split_qualifier``, and both key their operator tables
by Operator so every operator is accounted for in each.
"""

from __future__ import annotations

import math
from typing import Any, Callable

from ..core.errors import (
    InvalidValue,
    InvalidVariable,
    MisplacedQualifier,
    NoExactValue,
    UnsupportedExactOperation,
    UnsupportedOperation,
)
from ..exact.number import ExactNumber, Symbol
from ..exact.tuples import ExactTuple
from .ast import (
    Apply,
    ASTNode,
    ASTVisitor,
    Constant,
    Degree,
    List,
    LogBase,
    Qualifier,
    SymbolicConstant,
    Variable,
)
from .operators import OPERATORS, Operator, check_arity

FREE_VARIABLE = "x"

# how close a float root/log must be to an integer before it is checked for exactness
_SNAP_TOLERANCE = 1e-9

_QUALIFIER_TYPES: dict[str, type[Qualifier]] = {
    "degree": Degree,
    "logbase": LogBase,
}


def split_qualifier(node: Apply) -> tuple[list[ASTNode], Qualifier | None]:
    """
    Separate the <degree>/<logbase> argument of root/log from its operand.

    Returns ``(operands, qualifier)``. The qualifier must be the first of two
    arguments and may appear nowhere else.

    Raises:
        MisplacedQualifier: A qualifier is missing, misplaced or of the wrong kind
    """
    config = OPERATORS[node.operator]
    args = list(node.args)
    if config.qualifier is None:
        return args, None

    qualifier_type = _QUALIFIER_TYPES[config.qualifier]
    if len(args) == 2:
        qualifier, operand = args
        if not isinstance(qualifier, qualifier_type) or isinstance(operand, Qualifier):
            raise MisplacedQualifier(node.operator.value, config.qualifier)
        return [operand], qualifier

    if any(isinstance(arg, Qualifier) for arg in args):
        raise MisplacedQualifier(node.operator.value, config.qualifier)
    return args, None


# Numeric functions. Out-of-domain inputs give nan/inf, as a curve sampler
# skips those points rather than aborting the whole curve.


def _snap(result: float, matches: Callable[[int], bool]) -> float:
    """Return the nearest integer instead of ``result`` if it is exactly right."""
    if not math.isfinite(result):
        return result
    nearest = round(result)
    if nearest != result and abs(result - nearest) < _SNAP_TOLERANCE and matches(nearest):
        return float(nearest)
    return result


def _plus(a: float, b: float) -> float:
    return a + b


def _minus(a: float, b: float | None = None) -> float:
    return -a if b is None else a - b


def _times(a: float, b: float) -> float:
    return a * b


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _power(a: float, b: float) -> float:
    try:
        result = a ** b
    except ZeroDivisionError:
        return math.inf
    except OverflowError:
        # odd integer powers keep the sign of the base
        if a < 0 and float(b).is_integer() and int(b) % 2 == 1:
            return -math.inf
        return math.inf
    if isinstance(result, complex):
        return math.nan
    return result


def _nth_root(value: float, degree: float = 2.0) -> float:
    if degree == 0 or math.isnan(degree):
        return math.nan
    if value < 0:
        # odd integer roots of negatives are real
        if float(degree).is_integer() and int(degree) % 2 == 1:
            return -_nth_root(-value, degree)
        return math.nan
    result = math.sqrt(value) if degree == 2 else _power(value, 1.0 / degree)
    return _snap(result, lambda n: n ** degree == value)


def _trig(function: Callable[[float], float]) -> Callable[[float], float]:
    def evaluate(value: float) -> float:
        if math.isinf(value):
            return math.nan
        return function(value)

    return evaluate


def _abs(value: float) -> float:
    return abs(value)


def _ln(value: float) -> float:
    if value > 0:
        return math.log(value)
    if value == 0:
        return -math.inf
    return math.nan


def _log(value: float, base: float = 10.0) -> float:
    if not base > 0 or base == 1:
        return math.nan
    result = _ln(value) / math.log(base)
    return _snap(result, lambda n: base ** n == value)


_FUNCTIONS: dict[Operator, Callable[..., float]] = {
    Operator.PLUS: _plus,
    Operator.MINUS: _minus,
    Operator.TIMES: _times,
    Operator.DIVIDE: _divide,
    Operator.POWER: _power,
    Operator.ROOT: _nth_root,
    Operator.SIN: _trig(math.sin),
    Operator.COS: _trig(math.cos),
    Operator.TAN: _trig(math.tan),
    Operator.ABS: _abs,
    Operator.LN: _ln,
    Operator.LOG: _log,
}


class FunctionCompiler(ASTVisitor):
    """
    Compile an AST into a unary function of the free variable x.

    Each node becomes a closure taking x; <apply> closures call their
    argument closures and combine the results.

    Examples:
    - <apply><power/><ci>x</ci><cn>2</cn></apply> → f(x) = x ** 2
    - <list><cn>0</cn><pi/></list> → f(x) = [0.0, 3.14159...]
    """

    def visit_apply(self, node: Apply) -> Callable[[float], Any]:
        check_arity(node.operator, len(node.args))
        operands, qualifier = split_qualifier(node)

        arguments = [operand.accept(self) for operand in operands]
        if qualifier is not None:
            # root(value, degree), log(value, base)
            arguments.append(qualifier.accept(self))

        function = _FUNCTIONS[node.operator]

        def evaluate(x: float) -> float:
            return function(*[argument(x) for argument in arguments])

        return evaluate

    def visit_variable(self, node: Variable) -> Callable[[float], Any]:
        if node.name != FREE_VARIABLE:
            raise InvalidVariable(node.name)
        return lambda x: x

    def visit_constant(self, node: Constant) -> Callable[[float], Any]:
        value = node.value
        return lambda x: value

    def visit_symbolic_constant(self, node: SymbolicConstant) -> Callable[[float], Any]:
        value = node.symbol.constant
        return lambda x: value

    def visit_degree(self, node: Degree) -> Callable[[float], Any]:
        return node.child.accept(self)

    def visit_logbase(self, node: LogBase) -> Callable[[float], Any]:
        return node.child.accept(self)

    def visit_list(self, node: List) -> Callable[[float], Any]:
        elements = [element.accept(self) for element in node.elements]
        return lambda x: [element(x) for element in elements]


# Exact evaluation


def _exact_minus(a: ExactNumber, b: ExactNumber | None = None) -> ExactNumber:
    return -a if b is None else a.subtract(b)


def _exact_root(value: ExactNumber, degree: ExactNumber | int = 2) -> ExactNumber:
    try:
        return value.nth_root(degree)
    except UnsupportedOperation as e:
        raise UnsupportedExactOperation(Operator.ROOT.value, e.message) from e


_EXACT_OPERATIONS: dict[Operator, Callable[..., ExactNumber]] = {
    Operator.PLUS: ExactNumber.add,
    Operator.MINUS: _exact_minus,
    Operator.TIMES: ExactNumber.multiply,
    Operator.DIVIDE: ExactNumber.divide,
    Operator.POWER: ExactNumber.power,
    Operator.ROOT: _exact_root,
    Operator.ABS: ExactNumber.abs,
}

# results of these are not of the form (a/b)*symbol^c in general
_INEXACT_OPERATORS = frozenset({
    Operator.SIN,
    Operator.COS,
    Operator.TAN,
    Operator.LN,
    Operator.LOG,
})


class ExactEvaluator(ASTVisitor):
    """
    Evaluate an AST to an ExactNumber, or an ExactTuple for <list>.

    Only variable-free trees using +, -, *, /, integer powers, perfect roots
    and abs have exact values.
    """

    def visit_apply(self, node: Apply) -> ExactNumber:
        check_arity(node.operator, len(node.args))
        operands, qualifier = split_qualifier(node)

        if node.operator in _INEXACT_OPERATORS:
            raise UnsupportedExactOperation(node.operator.value)

        values = [self._number(operand.accept(self), node.operator) for operand in operands]
        if qualifier is not None:
            values.append(self._number(qualifier.accept(self), node.operator))

        return _EXACT_OPERATIONS[node.operator](*values)

    def visit_variable(self, node: Variable) -> ExactNumber:
        raise NoExactValue(node.name)

    def visit_constant(self, node: Constant) -> ExactNumber:
        # the literal text keeps digits that the float value has rounded away
        try:
            return ExactNumber(node.text)
        except InvalidValue:
            return ExactNumber(node.value)

    def visit_symbolic_constant(self, node: SymbolicConstant) -> ExactNumber:
        if node.symbol is Symbol.PI:
            return ExactNumber(1, 1, 1)
        return ExactNumber(1, 1, 0, 1)

    def visit_degree(self, node: Degree) -> ExactNumber | ExactTuple:
        return node.child.accept(self)

    def visit_logbase(self, node: LogBase) -> ExactNumber | ExactTuple:
        return node.child.accept(self)

    def visit_list(self, node: List) -> ExactTuple:
        return ExactTuple([element.accept(self) for element in node.elements])

    @staticmethod
    def _number(value: ExactNumber | ExactTuple, operator: Operator) -> ExactNumber:
        if not isinstance(value, ExactNumber):
            raise InvalidValue(
                f"<{operator.value}/> cannot take a list argument", value.to_string()
            )
        return value


class StringVisitor(ASTVisitor):
    """
    Convert AST to infix text.

    Examples:
    - <apply><times/><cn>2</cn><pi/></apply> → "2 * pi"
    - <apply><root/><degree><cn>3</cn></degree><ci>x</ci></apply> → "root(x, 3)"
    """

    def visit_apply(self, node: Apply) -> str:
        config = OPERATORS[node.operator]
        operands, qualifier = split_qualifier(node)
        parts = [self._operand(operand) for operand in operands]

        if config.symbol is not None:
            if len(parts) == 1:
                return f"{config.symbol}{parts[0]}"
            return f" {config.symbol} ".join(parts)

        name = node.operator.value
        if qualifier is not None:
            parts.append(qualifier.accept(self))
        elif node.operator is Operator.ROOT:
            name = "sqrt"
        return f"{name}({', '.join(parts)})"

    def visit_variable(self, node: Variable) -> str:
        return node.name

    def visit_constant(self, node: Constant) -> str:
        return node.text

    def visit_symbolic_constant(self, node: SymbolicConstant) -> str:
        return node.symbol.value

    def visit_degree(self, node: Degree) -> str:
        return node.child.accept(self)

    def visit_logbase(self, node: LogBase) -> str:
        return node.child.accept(self)

    def visit_list(self, node: List) -> str:
        return "[" + ", ".join(element.accept(self) for element in node.elements) + "]"

    def _operand(self, node: ASTNode) -> str:
        text = node.accept(self)
        if isinstance(node, Apply) and OPERATORS[node.operator].symbol is not None:
            return f"({text})"
        return text
