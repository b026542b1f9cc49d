"""
Base ExactValue class for exact numbers and tuples.

An exact value is immutable and always offers two views:
- ``approx``: a float (or list of floats) for layout math
- a drawable view (labels plus width/height measured through a TextMeasurer)
  used to render labels such as "π/2" instead of "1.5707..."
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TextMeasurer(Protocol):
    """
    Text measurement capability supplied by the rendering layer.

    A canvas-backed implementation sets its font to ``font_size`` pixels and
    returns the rendered width of ``text``.
    """

    def measure_text(self, text: str, font_size: float) -> float:
        ...


class ExactValue(ABC):
    """
    Base class for all exact value objects.

    Note: Concrete subclasses should inherit from both BaseModel and ExactValue,
    e.g., `class ExactNumber(BaseModel, ExactValue):`. ExactValue itself is
    abstract and does not inherit from BaseModel to avoid MRO conflicts.
    """

    @property
    @abstractmethod
    def approx(self) -> Any:
        """Floating-point approximation of the value."""

    @abstractmethod
    def to_string(self) -> str:
        """Convert to a token the value's constructor accepts."""

    @abstractmethod
    def to_tex(self) -> str:
        """Convert to LaTeX representation."""

    @abstractmethod
    def draw_width(self, measurer: TextMeasurer) -> float:
        """Width of the drawn label, in canvas pixels."""

    @abstractmethod
    def draw_height(self) -> float:
        """Height of the drawn label, in canvas pixels."""

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_string()!r})"
