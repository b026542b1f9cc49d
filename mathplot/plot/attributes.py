"""
Attribute parsing for plot declarations.

Markup attributes are plain strings such as "(-10, 10)", "2pi", "pi/2" or a
MathML fragment. The leading character decides how a string is read:

    "<..."  MathML expression
    "(..."  ExactTuple
    other   ExactNumber

The value types themselves only accept their own textual form; this module
is the one place that sniffs.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..core.config import settings
from ..core.errors import InvalidValue
from ..core.logging import get_logger
from ..exact.number import ExactNumber
from ..exact.tuples import ExactTuple
from ..mathml.expression import MathML

logger = get_logger(__name__)


class AttributeKind(Enum):
    """How an attribute string is read."""

    EXPRESSION = "expression"
    TUPLE = "tuple"
    NUMBER = "number"


class PlotRange(BaseModel):
    """An axis range in graph coordinates, with ``min < max``."""

    model_config = ConfigDict(frozen=True)

    min: float = Field(description="Lower bound")
    max: float = Field(description="Upper bound")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def size(self) -> float:
        return self.max - self.min


def sniff(text: str) -> AttributeKind:
    """Classify an attribute string by its first non-blank character."""
    stripped = text.strip()
    if stripped.startswith("<"):
        return AttributeKind.EXPRESSION
    if stripped.startswith("("):
        return AttributeKind.TUPLE
    return AttributeKind.NUMBER


def parse_exact(text: str) -> ExactNumber | ExactTuple:
    """
    Exact value of an attribute string.

    Raises:
        InvalidValue: Malformed number or tuple
        ExpressionError: Malformed or inexact MathML
    """
    kind = sniff(text)
    if kind is AttributeKind.EXPRESSION:
        return MathML(text.strip()).rational()
    if kind is AttributeKind.TUPLE:
        return ExactTuple(text)
    return ExactNumber(text.strip())


def parse_number(text: str) -> float:
    """
    Float value of a single-number attribute, e.g. "2pi" → 6.283...

    MathML numbers are evaluated as functions at x = 0; a number attribute
    has no free variable, so the argument is irrelevant.
    """
    kind = sniff(text)
    if kind is AttributeKind.EXPRESSION:
        value = MathML(text.strip()).exec()(0)
    elif kind is AttributeKind.TUPLE:
        raise InvalidValue(f"Expected a number, got a tuple: {text!r}", text)
    else:
        value = ExactNumber(text.strip()).approx

    if isinstance(value, list):
        raise InvalidValue(f"Expected a number, got a list: {text!r}", text)
    return float(value)


def parse_list(text: str) -> list[float]:
    """
    Float values of a list attribute, given as "(0, 1, 2pi)" or <list>...</list>.
    """
    kind = sniff(text)
    if kind is AttributeKind.EXPRESSION:
        values: Any = MathML(text.strip()).exec()(0)
        if not isinstance(values, list):
            raise InvalidValue(f"Expected a <list>, got {text!r}", text)
        return [float(value) for value in values]
    if kind is AttributeKind.TUPLE:
        return ExactTuple(text).approx
    raise InvalidValue(f"Expected a list, got {text!r}", text)


def parse_range(text: str | None = None) -> PlotRange:
    """
    Parse a ``range-x``/``range-y`` attribute.

    Defaults to ``settings.DEFAULT_RANGE`` when the attribute is absent.

    Raises:
        InvalidValue: Not exactly two values, or not strictly increasing
    """
    if text is None:
        text = settings.DEFAULT_RANGE

    values = parse_list(text)
    if len(values) != 2 or not values[0] < values[1]:
        raise InvalidValue(f"Invalid range: {text!r}", text)

    plot_range = PlotRange(min=values[0], max=values[1])
    logger.debug(
        "Parsed range",
        extra={"extra_data": {"range": text, "min": plot_range.min, "max": plot_range.max}},
    )
    return plot_range


def parse_step(text: str | None) -> ExactNumber | None:
    """
    Parse a ``step-x``/``step-y`` override; None when absent.

    Raises:
        InvalidValue: The step is not a positive exact number
    """
    if text is None or not text.strip():
        return None

    step = parse_exact(text)
    if not isinstance(step, ExactNumber) or not step.greater_than(0):
        raise InvalidValue(f"Step must be a positive number, got {text!r}", text)
    return step
