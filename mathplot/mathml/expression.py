"""
MathML: a parsed content-MathML expression.

Usage:
    mathml = MathML('<apply><times/><pi/><ci>x</ci></apply>')
    mathml.exec()(2)        # => 6.283...
    mathml2 = MathML('<apply><times/><pi/><cn>2</cn></apply>')
    mathml2.rational()      # => ExactNumber('2pi')

The markup is parsed once, at construction. The compiled function and the
exact value are derived on first use and cached; neither touches the tree.
"""

from __future__ import annotations

from typing import Any, Callable

from ..core.logging import get_context_logger
from ..exact.number import ExactNumber
from ..exact.tuples import ExactTuple
from .ast import ASTNode
from .parser import MathMLParser
from .visitors import ExactEvaluator, FunctionCompiler, StringVisitor


class MathML:
    """
    A MathML expression, evaluable as a function of x or as an exact value.

    Args:
        markup: MathML string with exactly one root element
        parser: Parser to use (defaults to a fresh MathMLParser)
    """

    def __init__(self, markup: str, parser: MathMLParser | None = None):
        self.markup = markup
        self.root: ASTNode = (parser or MathMLParser()).parse(markup)
        self._function: Callable[[float], Any] | None = None
        self._exact: ExactNumber | ExactTuple | None = None
        self._logger = get_context_logger(__name__, markup=markup)

    def exec(self) -> Callable[[float], Any]:
        """
        The numeric function described by the markup.

        Raises:
            ArityMismatch, InvalidVariable, MisplacedQualifier
        """
        if self._function is None:
            self._function = self.root.accept(FunctionCompiler())
            self._logger.debug("Compiled expression")
        return self._function

    def evaluate(self, x: float = 0.0) -> Any:
        """Shorthand for ``exec()(x)``."""
        return self.exec()(x)

    def rational(self) -> ExactNumber | ExactTuple:
        """
        The exact value of a variable-free expression.

        Raises:
            NoExactValue: The expression contains <ci>
            UnsupportedExactOperation: An operator such as <sin/> has no exact result
            ArityMismatch, MisplacedQualifier, IncompatibleSymbol, UnsupportedOperation
        """
        if self._exact is None:
            self._exact = self.root.accept(ExactEvaluator())
            self._logger.debug(
                "Evaluated exactly", extra_data={"value": self._exact.to_string()}
            )
        return self._exact

    def to_string(self) -> str:
        return self.root.accept(StringVisitor())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"MathML({self.markup!r})"
