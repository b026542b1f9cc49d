"""
Exact numbers for axis arithmetic.

ExactNumber represents (a/b) * symbol^c with symbol one of none, pi or e;
ExactTuple is an ordered sequence of them.
"""

from .number import ExactNumber, Symbol, coerce, float_to_fraction, gcd, reduce_fraction
from .tuples import ExactTuple
from .value import ExactValue, TextMeasurer

__all__ = [
    "ExactValue",
    "TextMeasurer",
    "ExactNumber",
    "ExactTuple",
    "Symbol",
    "coerce",
    "gcd",
    "reduce_fraction",
    "float_to_fraction",
]
