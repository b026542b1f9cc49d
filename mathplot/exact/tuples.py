"""
ExactTuple: an ordered, fixed-length sequence of ExactNumber.

Used for points and ranges, e.g. "(0, 2pi)". Tuples support construction,
approximation and measurement only; there is no tuple arithmetic.
"""

from __future__ import annotations

import re
from typing import Any, Iterator, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import InvalidValue
from .number import ExactNumber
from .value import ExactValue, TextMeasurer

_TUPLE_PATTERN = re.compile(r"^\([^(),]+(,[^(),]+)*\)$")

MIN_TUPLE_LENGTH = 2


class ExactTuple(BaseModel, ExactValue):
    """
    Tuple of exact numbers.

    Examples:
        >>> ExactTuple("(1/2, pi, 3pi)")
        >>> ExactTuple([ExactNumber(0), ExactNumber("2pi")])
    """

    model_config = ConfigDict(frozen=True)

    elements: tuple[ExactNumber, ...] = Field(description="The tuple elements, in order")

    def __init__(self, value: str | Sequence[ExactNumber]):
        """
        Create an ExactTuple.

        Args:
            value: A string "(a, b, ...)" of ExactNumber tokens, or a sequence
                of ExactNumber

        Raises:
            InvalidValue: Malformed tuple string, non-ExactNumber element, or
                fewer than two elements
        """
        if isinstance(value, str):
            compact = re.sub(r"\s", "", value)
            if not _TUPLE_PATTERN.match(compact):
                raise InvalidValue(f"Invalid tuple: {value!r}", value)
            elements = tuple(ExactNumber(token) for token in compact[1:-1].split(","))
        else:
            elements = tuple(value)
            for element in elements:
                if not isinstance(element, ExactNumber):
                    raise InvalidValue(
                        f"Tuple elements must be exact numbers, got {element!r}", repr(element)
                    )

        if len(elements) < MIN_TUPLE_LENGTH:
            raise InvalidValue(
                f"A tuple needs at least {MIN_TUPLE_LENGTH} elements, got {len(elements)}",
                repr(value),
            )

        super().__init__(elements=elements)

    @property
    def approx(self) -> list[float]:
        """Approximations of every element, in order."""
        return [element.approx for element in self.elements]

    @property
    def length(self) -> int:
        return len(self.elements)

    def equals(self, other: Any) -> bool:
        if not isinstance(other, ExactTuple) or len(self) != len(other):
            return False
        return all(mine.equals(theirs) for mine, theirs in zip(self, other))

    def to_string(self) -> str:
        return "(" + ", ".join(element.to_string() for element in self.elements) + ")"

    def to_tex(self) -> str:
        return "\\left(" + ", ".join(element.to_tex() for element in self.elements) + "\\right)"

    def draw_width(self, measurer: TextMeasurer) -> float:
        from .drawing import tuple_width

        return tuple_width(self, measurer)

    def draw_height(self) -> float:
        from .drawing import tuple_height

        return tuple_height(self)

    @property
    def has_fractions(self) -> bool:
        """True if any element is drawn with a fraction bar."""
        return any(element.is_fraction for element in self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[ExactNumber]:  # type: ignore[override]
        return iter(self.elements)

    def __getitem__(self, index: int) -> ExactNumber:
        return self.elements[index]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ExactTuple):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.elements)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ExactTuple({self.to_string()!r})"
