"""Tick increments at nice intervals (1, 2, 5, 10, etc.).

The increment of a tick sequence is one of the nice mantissas 1, 2, 5 or 10
times a power of ten. Increments of at least one are returned as a positive
step. Increments below one are returned as a negative number whose magnitude
is the reciprocal of the step, so that ticks can be computed by dividing
integers by an integral scale instead of multiplying by a fraction that has
no exact binary representation.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike


def real_dtype(*values: ArrayLike) -> np.dtype:
    """Return the floating point dtype in which ticks for `values` are computed.

    Floating point inputs keep their precision. Integer and boolean inputs are
    computed in double precision.

    Args:
        values: The numbers taking part in the computation.

    Returns:
        A numpy floating point dtype.
    """
    dtype = np.result_type(*values)
    if not np.issubdtype(dtype, np.floating):
        return np.dtype(np.float64)
    return dtype


def tick_increment(start: float, stop: float, count: int) -> np.floating:
    """Return the signed tick increment for the interval [start, stop].

    The raw step `(stop - start) / count` is rounded on a logarithmic scale to
    the nearest nice mantissa: the thresholds between 1, 2, 5 and 10 are the
    geometric means sqrt(2), sqrt(10) and sqrt(50).

    The caller is responsible for passing `start <= stop`. No validation takes
    place: a zero count, NaN or infinite endpoints result in a zero or
    non-finite increment.

    Args:
        start: Lower bound of the interval.
        stop: Upper bound of the interval.
        count: Approximate number of ticks.

    Returns:
        A positive step for increments of at least one, or minus the
        reciprocal of the step for smaller increments.
    """
    real = real_dtype(start, stop).type
    ten = real(10)
    with np.errstate(all="ignore"):
        step = (real(stop) - real(start)) / real(operator.index(count))
        power = np.floor(np.log10(step))
        error = step / ten**power

        if error >= np.sqrt(real(50)):
            mantissa = real(10)
        elif error >= np.sqrt(real(10)):
            mantissa = real(5)
        elif error >= np.sqrt(real(2)):
            mantissa = real(2)
        else:
            mantissa = real(1)

        if power >= 0:
            return mantissa * ten**power
        return -(ten**-power) / mantissa


@dataclass(frozen=True)
class DirectStep:
    """Ticks at the integer multiples of `step`."""

    step: np.floating

    @property
    def signed(self) -> np.floating:
        return self.step

    @property
    def spacing(self) -> np.floating:
        return self.step

    def indices(
        self, start: np.floating, stop: np.floating
    ) -> tuple[np.floating, np.floating]:
        """Return the indices of the first and last multiple in [start, stop]."""
        return np.ceil(start / self.step), np.floor(stop / self.step)

    def outer_indices(
        self, start: np.floating, stop: np.floating
    ) -> tuple[np.floating, np.floating]:
        """Return the indices of the nearest multiples enclosing [start, stop]."""
        return np.floor(start / self.step), np.ceil(stop / self.step)

    def value(self, index):
        return index * self.step


@dataclass(frozen=True)
class InvertedScale:
    """Ticks at the integers divided by `scale`.

    The ticks are the multiples of `1 / scale`. Rounding to the interval is
    always outward, so the first and last tick may lie just outside of it.
    """

    scale: np.floating

    @property
    def signed(self) -> np.floating:
        return -self.scale

    @property
    def spacing(self) -> np.floating:
        return np.reciprocal(self.scale)

    def indices(
        self, start: np.floating, stop: np.floating
    ) -> tuple[np.floating, np.floating]:
        return np.floor(start * self.scale), np.ceil(stop * self.scale)

    def outer_indices(
        self, start: np.floating, stop: np.floating
    ) -> tuple[np.floating, np.floating]:
        return self.indices(start, stop)

    def value(self, index):
        return index / self.scale


Increment = DirectStep | InvertedScale


def as_increment(step: np.floating) -> Increment | None:
    """Convert a signed increment as returned by `tick_increment`.

    Args:
        step: A signed tick increment.

    Returns:
        A DirectStep for positive increments, an InvertedScale for negative
        increments, or None if the increment is zero or not finite.
    """
    if step == 0 or not np.isfinite(step):
        return None
    if step > 0:
        return DirectStep(step)
    return InvertedScale(-step)
