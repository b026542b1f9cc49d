"""
Axis tick placement.

Tick spacing is an ExactNumber so that ticks at k * step are exact multiples
and their labels read "π/2", "π", "3π/2" rather than drifting floats.
"""

from __future__ import annotations

import math

from ..core.config import settings
from ..core.errors import InvalidValue
from ..core.logging import get_logger
from ..exact.number import ExactNumber

logger = get_logger(__name__)


def base_unit(pi_units: bool = False) -> ExactNumber:
    """The unit steps are built from: π on a pi-unit axis, 1 otherwise."""
    return ExactNumber("pi") if pi_units else ExactNumber(1)


def step_size(
    unit_size: float,
    pi_units: bool = False,
    min_step_size: float | None = None,
) -> ExactNumber:
    """
    Smallest step of the form ``unit * n`` or ``unit / n`` spanning at least
    ``min_step_size`` pixels.

    Args:
        unit_size: Pixels per graph unit along the axis
        pi_units: Build steps from π instead of 1
        min_step_size: Minimum pixels between ticks (default ``settings.MIN_STEP_SIZE``)

    Raises:
        InvalidValue: ``unit_size`` or ``min_step_size`` is not positive
    """
    if min_step_size is None:
        min_step_size = settings.MIN_STEP_SIZE
    if not unit_size > 0 or not math.isfinite(unit_size):
        raise InvalidValue(f"Unit size must be a positive number, got {unit_size!r}", unit_size)
    if not min_step_size > 0:
        raise InvalidValue(
            f"Minimum step size must be positive, got {min_step_size!r}", min_step_size
        )

    unit = base_unit(pi_units)

    def pixels(step: ExactNumber) -> float:
        return unit_size * step.approx

    if pixels(unit) >= min_step_size:
        # shrink while the next division still fits
        n = 1
        while pixels(unit.divide(n + 1)) >= min_step_size:
            n += 1
        step = unit.divide(n)
    else:
        n = 2
        while pixels(unit.multiply(n)) < min_step_size:
            n += 1
        step = unit.multiply(n)

    logger.debug(
        "Step size chosen",
        extra={"extra_data": {
            "unit_size": unit_size,
            "pi_units": pi_units,
            "step": step.to_string(),
        }},
    )
    return step


def axis_ticks(step: ExactNumber, low: float, high: float) -> list[ExactNumber]:
    """
    Exact tick values ``step * k`` lying in ``[low, high]``, in increasing order.

    Raises:
        InvalidValue: ``step`` is not positive, or a bound is not finite
    """
    if not step.greater_than(0):
        raise InvalidValue(f"Step must be positive, got {step.to_string()}", step.to_string())
    if not (math.isfinite(low) and math.isfinite(high)):
        raise InvalidValue(f"Tick bounds must be finite, got [{low}, {high}]")
    if high < low:
        return []

    ticks = []
    # the float quotient can land one multiple off in either direction
    k = math.ceil(low / step.approx)
    while not step.multiply(k - 1).less_than(low):
        k -= 1
    tick = step.multiply(k)
    while tick.less_than(low):
        k += 1
        tick = step.multiply(k)
    while not tick.greater_than(high):
        ticks.append(tick)
        k += 1
        tick = step.multiply(k)
    return ticks


def labels_are_fractions(step: ExactNumber) -> bool:
    """
    True if some tick label at a multiple of ``step`` is drawn as a fraction.

    Every multiple k * step is whole (in units of its symbol) exactly when
    the step's denominator is 1.
    """
    return step.denominator != 1
