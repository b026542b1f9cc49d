"""
Ambient services shared by the exact-number and MathML layers.
"""

from .config import Settings, get_settings, settings
from .errors import (
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
from .logging import get_context_logger, get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "get_logger",
    "get_context_logger",
    "setup_logging",
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
