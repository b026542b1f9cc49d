"""
mathplot - exact numbers and MathML expressions for declarative plots

- ExactNumber / ExactTuple: (a/b) * symbol^c arithmetic for axis ticks
- MathML: content-MathML expressions compiled to f(x) or evaluated exactly
- plot: attribute parsing and axis step selection
"""

import logging

from .core.errors import (
    ArityMismatch,
    ExpressionError,
    IncompatibleSymbol,
    InvalidValue,
    InvalidVariable,
    MalformedExpression,
    MathPlotError,
    MisplacedQualifier,
    NoExactValue,
    UnknownElement,
    UnknownOperator,
    UnsupportedExactOperation,
    UnsupportedOperation,
)
from .exact import ExactNumber, ExactTuple, Symbol, TextMeasurer
from .mathml import MathML

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ExactNumber",
    "ExactTuple",
    "Symbol",
    "TextMeasurer",
    "MathML",
    "MathPlotError",
    "InvalidValue",
    "IncompatibleSymbol",
    "UnsupportedOperation",
    "ExpressionError",
    "MalformedExpression",
    "UnknownElement",
    "UnknownOperator",
    "ArityMismatch",
    "InvalidVariable",
    "MisplacedQualifier",
    "UnsupportedExactOperation",
    "NoExactValue",
]
