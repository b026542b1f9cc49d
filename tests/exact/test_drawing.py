"""Tests for label measurement of exact values."""

from mathplot.core.config import settings
from mathplot.exact import ExactNumber, ExactTuple, TextMeasurer
from mathplot.exact.drawing import (
    DRAW_MINUS_SEPARATION,
    DRAW_MINUS_WIDTH,
    DRAW_TUPLE_PADDING,
    minus_padding,
)


def char_width(font_size):
    return font_size * 0.5


class TestNumberMeasurement:
    """Test ExactNumber label sizes."""

    def test_measurer_satisfies_protocol(self, measurer):
        """Test the fake measurer is a TextMeasurer."""
        assert isinstance(measurer, TextMeasurer)

    def test_whole_number(self, measurer):
        """Test a single-line label."""
        n = ExactNumber(2)
        assert n.draw_width(measurer) == char_width(settings.FONT_SIZE)
        assert n.draw_height() == settings.FONT_SIZE
        assert measurer.calls == [("2", settings.FONT_SIZE)]

    def test_negative_number_reserves_minus(self, measurer):
        """Test negative values add the drawn minus sign."""
        n = ExactNumber(-2)
        assert minus_padding(n) == DRAW_MINUS_WIDTH + DRAW_MINUS_SEPARATION
        assert n.draw_width(measurer) == (
            char_width(settings.FONT_SIZE) + DRAW_MINUS_WIDTH + DRAW_MINUS_SEPARATION
        )

    def test_fraction_uses_wider_line(self, measurer):
        """Test a fraction is as wide as its wider line and two lines tall."""
        n = ExactNumber("3pi/4")
        assert n.draw_width(measurer) == 2 * char_width(settings.FONT_SIZE)
        assert n.draw_height() == 2 * settings.FONT_SIZE

    def test_positive_has_no_minus_padding(self):
        """Test nonnegative values reserve no space."""
        assert minus_padding(ExactNumber("pi")) == 0
        assert minus_padding(ExactNumber(0)) == 0


class TestTupleMeasurement:
    """Test ExactTuple label sizes."""

    def test_tuple_of_whole_numbers(self, measurer):
        """Test parentheses, commas, padding and elements add up."""
        t = ExactTuple("(1, pi)")
        font = settings.FONT_SIZE
        outer = 3 * char_width(font)  # "()" and one comma
        elements = 2 * char_width(font)
        assert t.draw_height() == font
        assert t.draw_width(measurer) == outer + 2 * DRAW_TUPLE_PADDING + elements

    def test_tuple_height_follows_tallest_element(self, measurer):
        """Test a fraction element makes the whole tuple taller."""
        t = ExactTuple("(1, pi/2)")
        assert t.draw_height() == 2 * settings.FONT_SIZE
        t.draw_width(measurer)
        assert ("(),", 2 * settings.FONT_SIZE) in measurer.calls
