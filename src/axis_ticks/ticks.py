"""Nicely rounded tick values spanning an interval.

Use `ticks` for the tick positions themselves, `tick_step` for the spacing
between them and `nice` to widen an interval so that it starts and ends on a
tick.
"""

from __future__ import annotations

import logging
import operator

import numpy as np
from numpy.typing import NDArray

from axis_ticks.increment import as_increment, real_dtype, tick_increment

logger = logging.getLogger(__name__)

NICE_MAX_ITERATIONS = 10


def ticks(start: float, stop: float, count: int) -> NDArray[np.floating]:
    """Generate approximately `count + 1` nicely rounded values from start to stop.

    The values are the multiples of a nice increment (1, 2, 5 or 10 times a
    power of ten) inside the interval, ordered from start to stop. Floating
    point inputs keep their dtype.

    Args:
        start: First end of the interval.
        stop: Second end of the interval; may be smaller than start.
        count: Approximate number of ticks.

    Returns:
        An array of tick values, descending if stop < start. The array is
        empty if no ticks exist, e.g. for NaN or infinite endpoints or a zero
        count.
    """
    dtype = real_dtype(start, stop)
    start, stop = dtype.type(start), dtype.type(stop)
    count = operator.index(count)

    if start == stop and count > 0:
        return np.array([start], dtype=dtype)

    reverse = stop < start
    if reverse:
        start, stop = stop, start

    increment = as_increment(tick_increment(start, stop, count))
    if increment is None:
        logger.debug("No tick increment for [%s, %s] with count %d", start, stop, count)
        return np.empty(0, dtype=dtype)

    with np.errstate(all="ignore"):
        first, last = increment.indices(start, stop)
        length = np.ceil(last - first + 1)
    # guard the integer conversion against overflowed indices
    if not np.isfinite(length) or length < 0:
        logger.debug("Invalid tick count %s for [%s, %s]", length, start, stop)
        return np.empty(0, dtype=dtype)

    values = increment.value(first + np.arange(int(length), dtype=dtype))
    if reverse:
        values = values[::-1].copy()
    return values


def tick_step(start: float, stop: float, count: int) -> np.floating:
    """Return the spacing between the ticks generated by `ticks`.

    Args:
        start: First end of the interval.
        stop: Second end of the interval.
        count: Approximate number of ticks.

    Returns:
        The tick spacing, negative if stop < start. A zero or non-finite
        increment is returned as is.
    """
    real = real_dtype(start, stop).type
    start, stop = real(start), real(stop)
    reverse = stop < start
    if reverse:
        step = tick_increment(stop, start, count)
    else:
        step = tick_increment(start, stop, count)
    if (increment := as_increment(step)) is not None:
        step = increment.spacing
    return -step if reverse else step


def nice(start: float, stop: float, count: int) -> tuple[np.floating, np.floating]:
    """Extend the interval [start, stop] to the nearest enclosing ticks.

    Widening the interval may change the tick increment, so the rounding is
    repeated until the increment is stable.

    Args:
        start: First end of the interval.
        stop: Second end of the interval.
        count: Approximate number of ticks.

    Returns:
        A tuple of the new ends in the order of the arguments. The interval is
        returned unchanged if it has no valid tick increment.
    """
    real = real_dtype(start, stop).type
    start, stop = real(start), real(stop)
    reverse = stop < start
    if reverse:
        start, stop = stop, start

    previous = None
    for _ in range(NICE_MAX_ITERATIONS):
        step = tick_increment(start, stop, count)
        increment = as_increment(step)
        if increment is None or step == previous:
            break
        with np.errstate(all="ignore"):
            first, last = increment.outer_indices(start, stop)
            start, stop = increment.value(first), increment.value(last)
        previous = step

    return (stop, start) if reverse else (start, stop)
