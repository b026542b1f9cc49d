"""
Shared pytest fixtures for the exact-number, MathML and plot tests.

This module provides:
- A fake text measurer standing in for a canvas
- A factory for parsed MathML expressions
"""

import pytest

from mathplot.mathml import MathML, MathMLParser


class FakeMeasurer:
    """Measures every character as half the font size wide."""

    def __init__(self):
        self.calls: list[tuple[str, float]] = []

    def measure_text(self, text: str, font_size: float) -> float:
        self.calls.append((text, font_size))
        return len(text) * font_size * 0.5


@pytest.fixture
def measurer():
    """A TextMeasurer with predictable widths."""
    return FakeMeasurer()


@pytest.fixture
def parser():
    """A reusable MathML parser."""
    return MathMLParser()


@pytest.fixture
def mathml(parser):
    """Factory for MathML expressions sharing one parser."""
    def _factory(markup: str) -> MathML:
        return MathML(markup, parser=parser)
    return _factory
