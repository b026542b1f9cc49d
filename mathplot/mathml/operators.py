"""
The MathML operator vocabulary.

Each operator that may appear as the first child of <apply> is listed here
with the argument counts it accepts and, for <root/> and <log/>, the
qualifier element that marks the optional first argument.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.errors import ArityMismatch, UnknownOperator


class Operator(str, Enum):
    """Operators allowed as the first child of <apply>."""

    PLUS = "plus"
    MINUS = "minus"
    TIMES = "times"
    DIVIDE = "divide"
    POWER = "power"
    ROOT = "root"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ABS = "abs"
    LN = "ln"
    LOG = "log"


@dataclass(frozen=True)
class OperatorConfig:
    """Configuration for an operator."""

    operator: Operator
    arities: tuple[int, ...]
    qualifier: str | None = None  # tag of the optional first argument
    symbol: str | None = None  # infix symbol, None for function notation


OPERATORS: dict[Operator, OperatorConfig] = {
    Operator.PLUS: OperatorConfig(Operator.PLUS, (2,), symbol="+"),
    Operator.MINUS: OperatorConfig(Operator.MINUS, (1, 2), symbol="-"),
    Operator.TIMES: OperatorConfig(Operator.TIMES, (2,), symbol="*"),
    Operator.DIVIDE: OperatorConfig(Operator.DIVIDE, (2,), symbol="/"),
    Operator.POWER: OperatorConfig(Operator.POWER, (2,), symbol="^"),
    Operator.ROOT: OperatorConfig(Operator.ROOT, (1, 2), qualifier="degree"),
    Operator.SIN: OperatorConfig(Operator.SIN, (1,)),
    Operator.COS: OperatorConfig(Operator.COS, (1,)),
    Operator.TAN: OperatorConfig(Operator.TAN, (1,)),
    Operator.ABS: OperatorConfig(Operator.ABS, (1,)),
    Operator.LN: OperatorConfig(Operator.LN, (1,)),
    Operator.LOG: OperatorConfig(Operator.LOG, (1, 2), qualifier="logbase"),
}


def get_operator(tag: str) -> Operator:
    """
    Look up the operator for an <apply> child tag.

    Raises:
        UnknownOperator: The tag is not in the vocabulary
    """
    try:
        return Operator(tag)
    except ValueError:
        raise UnknownOperator(tag) from None


def check_arity(operator: Operator, count: int) -> OperatorConfig:
    """
    Validate an argument count against the operator table.

    Raises:
        ArityMismatch: ``count`` is not one of the operator's arities
    """
    config = OPERATORS[operator]
    if count not in config.arities:
        raise ArityMismatch(operator.value, config.arities, count)
    return config
