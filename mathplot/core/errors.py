"""
Exceptions raised by the exact-number and MathML layers.

Every error is terminal for the operation that raised it and carries a
``details`` dict so callers can report the offending token, tag or operator.
"""

from typing import Any, Dict, Optional


class MathPlotError(Exception):
    """Base exception for mathplot errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# Exact numbers

class InvalidValue(MathPlotError):
    """Raised for a malformed number, tuple or range"""

    def __init__(self, message: str, value: Any = None):
        details = {"value": value} if value is not None else {}
        super().__init__(message=message, details=details)


class IncompatibleSymbol(MathPlotError):
    """Raised when an operation would combine incompatible symbolic factors"""

    def __init__(self, operation: str, left: str, right: str):
        super().__init__(
            message=f"Cannot {operation} {left} and {right}: incompatible symbolic factors",
            details={"operation": operation, "left": left, "right": right}
        )


class UnsupportedOperation(MathPlotError):
    """Raised for an operation that has no exact result, e.g. a fractional power"""

    def __init__(self, message: str, operand: Optional[str] = None):
        details = {"operand": operand} if operand is not None else {}
        super().__init__(message=message, details=details)


# MathML expressions

class ExpressionError(MathPlotError):
    """Base exception for MathML expression errors"""


class MalformedExpression(ExpressionError):
    """Raised when the markup is not a well-formed expression tree"""

    def __init__(self, message: str):
        super().__init__(message=message)


class UnknownElement(ExpressionError):
    """Raised for a tag outside the MathML vocabulary"""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(
            message=f"Unknown MathML element: <{tag}>",
            details={"tag": tag}
        )


class UnknownOperator(ExpressionError):
    """Raised for an <apply> operator outside the MathML vocabulary"""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(
            message=f"Unknown <apply> operator: <{operator}/>",
            details={"operator": operator}
        )


class ArityMismatch(ExpressionError):
    """Raised when an operator is applied to the wrong number of arguments"""

    def __init__(self, operator: str, expected: tuple[int, ...], actual: int):
        self.operator = operator
        self.expected = expected
        self.actual = actual
        expected_str = " or ".join(str(count) for count in expected)
        super().__init__(
            message=f"<apply><{operator}/> takes {expected_str} argument(s), got {actual}",
            details={"operator": operator, "expected": list(expected), "actual": actual}
        )


class InvalidVariable(ExpressionError):
    """Raised for a <ci> that does not name the free variable x"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            message=f"<ci> can only contain 'x', got {name!r}",
            details={"name": name}
        )


class MisplacedQualifier(ExpressionError):
    """Raised when <degree>/<logbase> is missing from, or misplaced in, root/log"""

    def __init__(self, operator: str, qualifier: str):
        self.operator = operator
        self.qualifier = qualifier
        super().__init__(
            message=(
                f"<apply><{operator}/> with two arguments needs <{qualifier}> "
                f"as its first argument and only there"
            ),
            details={"operator": operator, "qualifier": qualifier}
        )


class UnsupportedExactOperation(ExpressionError):
    """Raised when an operator has no exact (a/b)*symbol^c result"""

    def __init__(self, operator: str, reason: Optional[str] = None):
        self.operator = operator
        message = f"<{operator}/> cannot be evaluated exactly"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message=message, details={"operator": operator})


class NoExactValue(ExpressionError):
    """Raised when exact evaluation meets the free variable"""

    def __init__(self, name: str = "x"):
        super().__init__(
            message=f"Expression depends on the free variable {name!r} and has no exact value",
            details={"name": name}
        )
