"""
Boundary between plot markup and the exact/MathML core.
"""

from .attributes import (
    AttributeKind,
    PlotRange,
    parse_exact,
    parse_list,
    parse_number,
    parse_range,
    parse_step,
    sniff,
)
from .axis import axis_ticks, base_unit, labels_are_fractions, step_size

__all__ = [
    "AttributeKind",
    "PlotRange",
    "sniff",
    "parse_exact",
    "parse_number",
    "parse_list",
    "parse_range",
    "parse_step",
    "base_unit",
    "step_size",
    "axis_ticks",
    "labels_are_fractions",
]
