"""
Axis Tick Generation
====================

Evenly spaced, numerically clean tick values for an axis.

Two strategies:
    - generate_ticks(): exactly interval_count + 1 ticks spanning
      [min, max], used for the per-frame axis interval setting
    - generate_nice_ticks(): ticks on a 1/2/5 x 10^k step grid,
      used when no interval count is configured

Formulas:
    step = (max - min) / interval_count
    tick_i = round_significant(min + i * step)
"""

import logging
import math
from typing import Final, List

from framedump.geometry.numeric import DEFAULT_SIGNIFICANT_DIGITS, round_significant


logger = logging.getLogger(__name__)


# Upper bound on ticks emitted by the nice-step generator
MAX_NICE_TICKS: Final[int] = 1000


def _repair_span(min_value: float, max_value: float) -> float:
    if not max_value > min_value:
        logger.debug(f"Degenerate tick span [{min_value}, {max_value}], using min + 1")
        return max(min_value + 1.0, math.nextafter(min_value, math.inf))
    return max_value


def generate_ticks(
    min_value: float,
    max_value: float,
    interval_count: int,
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> List[float]:
    """
    Generate interval_count + 1 evenly spaced ticks over [min, max].

    Args:
        min_value: Axis minimum
        max_value: Axis maximum (max <= min is treated as min + 1)
        interval_count: Number of intervals between ticks
        significant_digits: Digits kept when rounding each tick

    Returns:
        Strictly increasing tick values; [min, max] when interval_count <= 1

    Example:
        >>> generate_ticks(0.0, 1.0, 10)[3]
        0.3
    """
    max_value = _repair_span(min_value, max_value)

    if interval_count <= 1:
        return [min_value, max_value]

    span = max_value - min_value
    ticks: List[float] = []

    for i in range(interval_count + 1):
        if i == interval_count:
            raw = max_value
        else:
            raw = min_value + span * i / interval_count
        value = round_significant(raw, significant_digits)
        # Neither rounding nor float spacing may collapse neighbouring ticks
        if ticks and value <= ticks[-1]:
            value = raw if raw > ticks[-1] else math.nextafter(ticks[-1], math.inf)
        ticks.append(value)

    return ticks


def nice_step(span: float, target_count: int) -> float:
    """
    Choose a 1, 2, 5 or 10 multiple of a power of ten near span / target_count.

    Examples:
        >>> nice_step(5000.0, 5)
        1000.0
        >>> nice_step(20.0, 5)
        5.0
    """
    raw_step = span / max(target_count, 1)
    magnitude = 10 ** math.floor(math.log10(raw_step))
    normalized = raw_step / magnitude

    if normalized < 1.5:
        factor = 1
    elif normalized < 3:
        factor = 2
    elif normalized < 7:
        factor = 5
    else:
        factor = 10

    return float(factor * magnitude)


def generate_nice_ticks(
    min_value: float,
    max_value: float,
    target_count: int = 5,
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> List[float]:
    """
    Generate ticks on a "nice" step grid covering [min, max].

    The first tick is min rounded down to a multiple of the step.
    Ticks continue while they do not exceed max.

    Args:
        min_value: Axis minimum
        max_value: Axis maximum (max <= min is treated as min + 1)
        target_count: Approximate number of intervals wanted
        significant_digits: Digits kept when rounding each tick

    Returns:
        At least two increasing tick values
    """
    max_value = _repair_span(min_value, max_value)
    span = max_value - min_value
    if not math.isfinite(span) or span <= 0:
        return [min_value, max_value]

    step = nice_step(span, target_count)
    start = math.floor(min_value / step) * step

    # Tolerate noise when the last tick lands exactly on max
    limit = max_value + step * 1e-9
    ticks: List[float] = []
    i = 0
    while len(ticks) < MAX_NICE_TICKS:
        value = start + i * step
        if value > limit:
            break
        ticks.append(round_significant(value, significant_digits))
        i += 1

    if len(ticks) < 2:
        ticks.append(round_significant(start + step, significant_digits))

    return ticks


def format_tick(value: float) -> str:
    """
    Format a tick label.

    Values within 0.001 of an integer print as integers, others with
    one decimal place.

    Examples:
        >>> format_tick(2500.0000001)
        '2500'
        >>> format_tick(12.345)
        '12.3'
    """
    nearest = round(value)
    if abs(value - nearest) < 0.001:
        return str(int(nearest))
    return f"{value:.1f}"
