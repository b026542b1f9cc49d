"""
Label measurement for exact values.

Exact values are drawn as stacked fractions: the numerator label on top, a
fraction bar, then the denominator label, with a drawn minus sign to the left
of negative values. Tuples add parentheses and commas sized to the tallest
element. Only measurement lives here; the rendering layer does the drawing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.config import settings
from .value import TextMeasurer

if TYPE_CHECKING:
    from .number import ExactNumber
    from .tuples import ExactTuple

# minus sign is drawn as a line, not a glyph
DRAW_MINUS_WIDTH = 5
DRAW_MINUS_SEPARATION = 3
DRAW_TUPLE_PADDING = 5


def minus_padding(value: ExactNumber) -> float:
    """Horizontal space reserved for the minus sign of a negative value."""
    return DRAW_MINUS_WIDTH + DRAW_MINUS_SEPARATION if value.is_negative else 0


def number_width(value: ExactNumber, measurer: TextMeasurer) -> float:
    font_size = settings.FONT_SIZE
    numerator_width = measurer.measure_text(value.numerator_label, font_size)
    if not value.is_fraction:
        return numerator_width + minus_padding(value)

    denominator_width = measurer.measure_text(value.denominator_label, font_size)
    return max(numerator_width, denominator_width) + minus_padding(value)


def number_height(value: ExactNumber) -> float:
    if value.is_fraction:
        return settings.FONT_SIZE * 2
    return settings.FONT_SIZE


def tuple_width(value: ExactTuple, measurer: TextMeasurer) -> float:
    # parentheses and commas scale with the tallest element
    outer_font_size = tuple_height(value)
    outer_chars = "()" + "," * (len(value) - 1)
    outer_width = measurer.measure_text(outer_chars, outer_font_size)

    element_widths = sum(element.draw_width(measurer) for element in value)
    padding = DRAW_TUPLE_PADDING * len(value)

    return outer_width + padding + element_widths


def tuple_height(value: ExactTuple) -> float:
    return max(element.draw_height() for element in value)
