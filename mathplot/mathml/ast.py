"""
Abstract Syntax Tree (AST) node definitions for MathML expressions.

The tree is built once by the parser and never mutated. Evaluators walk it
through the Visitor pattern: every node kind has a ``visit_*`` method on
ASTVisitor, and ASTVisitor declares them abstract so a visitor that forgets a
node kind cannot be instantiated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..exact.number import Symbol
from .operators import Operator


class ASTVisitor(ABC):
    """
    Base visitor for MathML trees.

    Implementations compile to a numeric function, evaluate exactly, render
    text, etc.
    """

    @abstractmethod
    def visit_apply(self, node: Apply) -> Any:
        ...

    @abstractmethod
    def visit_variable(self, node: Variable) -> Any:
        ...

    @abstractmethod
    def visit_constant(self, node: Constant) -> Any:
        ...

    @abstractmethod
    def visit_symbolic_constant(self, node: SymbolicConstant) -> Any:
        ...

    @abstractmethod
    def visit_degree(self, node: Degree) -> Any:
        ...

    @abstractmethod
    def visit_logbase(self, node: LogBase) -> Any:
        ...

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        ...


class ASTNode(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor for traversal."""

    @abstractmethod
    def __repr__(self) -> str:
        """Return string representation for debugging."""


# Leaf Nodes (terminals)


class Variable(ASTNode):
    """
    A <ci> element: the free variable.

    Only "x" compiles; the name is kept so the error can report what was written.
    """

    def __init__(self, name: str):
        self.name = name

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_variable(self)

    def __repr__(self) -> str:
        return f"Variable({self.name!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Variable) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("ci", self.name))


class Constant(ASTNode):
    """
    A <cn> element: a numeric literal.

    Examples: 2, -3, 0.25
    """

    def __init__(self, value: float, text: str | None = None):
        self.value = float(value)
        self.text = text if text is not None else repr(value)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_constant(self)

    def __repr__(self) -> str:
        return f"Constant({self.text})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Constant) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("cn", self.value))


class SymbolicConstant(ASTNode):
    """A <pi/> or <exponentiale/> element."""

    def __init__(self, symbol: Symbol):
        if symbol is Symbol.NONE:
            raise ValueError("SymbolicConstant needs pi or e")
        self.symbol = symbol

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_symbolic_constant(self)

    def __repr__(self) -> str:
        return f"SymbolicConstant({self.symbol.value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SymbolicConstant) and self.symbol is other.symbol

    def __hash__(self) -> int:
        return hash(("symbol", self.symbol))


# Qualifiers


class Qualifier(ASTNode):
    """Wrapper carrying the index of <root/> or the base of <log/>."""

    tag: str = ""

    def __init__(self, child: ASTNode):
        self.child = child

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.child!r})"

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.child == other.child

    def __hash__(self) -> int:
        return hash((self.tag, self.child))


class Degree(Qualifier):
    """A <degree> element, e.g. the 3 in a cube root."""

    tag = "degree"

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_degree(self)


class LogBase(Qualifier):
    """A <logbase> element, e.g. the 2 in log base 2."""

    tag = "logbase"

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_logbase(self)


# Composite Nodes


class Apply(ASTNode):
    """
    An <apply> element: an operator applied to arguments.

    Arity is not checked here; evaluators check it against the operator table.
    """

    def __init__(self, operator: Operator, args: list[ASTNode]):
        self.operator = operator
        self.args = tuple(args)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_apply(self)

    def __repr__(self) -> str:
        args_repr = ", ".join(repr(arg) for arg in self.args)
        return f"Apply({self.operator.value!r}, [{args_repr}])"

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Apply)
            and self.operator is other.operator
            and self.args == other.args
        )

    def __hash__(self) -> int:
        return hash((self.operator, self.args))


class List(ASTNode):
    """
    A <list> element.

    Examples: a range <list><cn>0</cn><apply>...</apply></list>
    """

    def __init__(self, elements: list[ASTNode]):
        self.elements = tuple(elements)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_list(self)

    def __repr__(self) -> str:
        elements_repr = ", ".join(repr(el) for el in self.elements)
        return f"List([{elements_repr}])"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, List) and self.elements == other.elements

    def __hash__(self) -> int:
        return hash(("list", self.elements))
