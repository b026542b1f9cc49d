"""
MathML expressions.

Parses a small content-MathML vocabulary into an AST that can be compiled to
a numeric function of x or evaluated to an exact value.
"""

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
from .expression import MathML
from .operators import OPERATORS, Operator, OperatorConfig, check_arity, get_operator
from .parser import MathMLParser
from .visitors import ExactEvaluator, FunctionCompiler, StringVisitor, split_qualifier

__all__ = [
    "MathML",
    "MathMLParser",
    "ASTNode",
    "ASTVisitor",
    "Apply",
    "Variable",
    "Constant",
    "SymbolicConstant",
    "Qualifier",
    "Degree",
    "LogBase",
    "List",
    "Operator",
    "OperatorConfig",
    "OPERATORS",
    "get_operator",
    "check_arity",
    "split_qualifier",
    "FunctionCompiler",
    "ExactEvaluator",
    "StringVisitor",
]
