"""
Parser for content-MathML markup.

Walks the XML tree once, top-down, and builds the AST defined in ``ast.py``.
Only the shape of the tree is checked here: unknown tags and operators fail
immediately, while arity and qualifier placement are checked by the
evaluators, since e.g. a <ci> is fine for function compilation but has no
exact value.

Supported elements:
    <apply>, <ci>, <cn>, <pi/>, <exponentiale/>, <list>, <degree>, <logbase>
and, as the first child of <apply>, the operators in ``operators.py``.
"""

from __future__ import annotations

import re

from lxml import etree

from ..core.errors import InvalidValue, MalformedExpression, UnknownElement
from ..core.logging import get_logger
from ..exact.number import Symbol
from .ast import (
    Apply,
    ASTNode,
    Constant,
    Degree,
    List,
    LogBase,
    SymbolicConstant,
    Variable,
)
from .operators import get_operator

logger = get_logger(__name__)

_NUMBER_PATTERN = re.compile(r"^-?[0-9]+(\.[0-9]+)?$")

_SYMBOLIC_CONSTANTS = {
    "pi": Symbol.PI,
    "exponentiale": Symbol.E,
}


def _local_name(element: etree._Element) -> str:
    """Tag without namespace, so <m:apply> and <apply> are the same element."""
    return etree.QName(element).localname


def _child_elements(element: etree._Element) -> list[etree._Element]:
    # skips comments and processing instructions
    return [child for child in element if isinstance(child.tag, str)]


def _text(element: etree._Element) -> str:
    return "".join(element.itertext()).strip()


class MathMLParser:
    """
    Recursive descent over an lxml element tree.

    The parser holds no per-parse state, so one instance can be reused.
    """

    def __init__(self):
        self._xml_parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            remove_comments=True,
            remove_pis=True,
        )

    def parse(self, markup: str) -> ASTNode:
        """
        Parse a MathML string with exactly one root element.

        Raises:
            MalformedExpression: Not well-formed XML, or an invalid tree shape
            UnknownElement: A tag outside the vocabulary
            UnknownOperator: An <apply> operator outside the vocabulary
            InvalidValue: A <cn> that does not contain a number
        """
        if not isinstance(markup, str) or not markup.strip():
            raise MalformedExpression("MathML markup must be a non-empty string")

        try:
            root = etree.fromstring(markup.strip().encode("utf-8"), parser=self._xml_parser)
        except etree.XMLSyntaxError as e:
            raise MalformedExpression(f"Invalid MathML markup: {e}") from e

        node = self.parse_element(root)
        logger.debug(
            "Parsed MathML expression",
            extra={"extra_data": {"root": _local_name(root)}},
        )
        return node

    def parse_element(self, element: etree._Element) -> ASTNode:
        """Parse a single element and its subtree."""
        tag = _local_name(element)
        children = _child_elements(element)

        if tag == "apply":
            return self._parse_apply(children)

        elif tag == "ci":
            return Variable(_text(element))

        elif tag == "cn":
            text = _text(element)
            if not _NUMBER_PATTERN.match(text):
                raise InvalidValue(f"<cn> must contain a number, got {text!r}", text)
            return Constant(float(text), text)

        elif tag in _SYMBOLIC_CONSTANTS:
            if children:
                raise MalformedExpression(f"<{tag}/> cannot have children")
            return SymbolicConstant(_SYMBOLIC_CONSTANTS[tag])

        elif tag == "degree":
            return Degree(self._parse_single_child(tag, children))

        elif tag == "logbase":
            return LogBase(self._parse_single_child(tag, children))

        elif tag == "list":
            return List([self.parse_element(child) for child in children])

        raise UnknownElement(tag)

    def _parse_apply(self, children: list[etree._Element]) -> Apply:
        if not children:
            raise MalformedExpression("<apply> must have an operator as its first child")

        operator_element, *arg_elements = children
        operator = get_operator(_local_name(operator_element))
        if _child_elements(operator_element):
            raise MalformedExpression(f"<{operator.value}/> cannot have children")

        return Apply(operator, [self.parse_element(child) for child in arg_elements])

    def _parse_single_child(self, tag: str, children: list[etree._Element]) -> ASTNode:
        if len(children) != 1:
            raise MalformedExpression(
                f"<{tag}> must wrap exactly one element, got {len(children)}"
            )
        return self.parse_element(children[0])
