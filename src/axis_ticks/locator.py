"""Tick locators.

This module provides classes that choose tick positions and axis limits.
Different locators can implement different tick placement strategies, while
callers only depend on the TickLocator interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import NDArray

from axis_ticks.ticks import nice, ticks

DEFAULT_TICK_COUNT = 10


class TickLocator(ABC):
    """Abstract base class for tick locators.

    Tick locators are responsible for generating tick positions for an axis
    range and, optionally, for adjusting the range itself.
    """

    @abstractmethod
    def get_ticks(self, min_: float, max_: float) -> NDArray[np.floating]:
        """Generate tick positions.

        Args:
            min_: Minimum value of the axis range.
            max_: Maximum value of the axis range.

        Returns:
            An array of tick positions.
        """
        pass

    def get_limits(self, min_: float, max_: float) -> tuple[float, float]:
        """Return the axis limits to use for a data range.

        The default implementation keeps the data range.

        Args:
            min_: Minimum value of the data range.
            max_: Maximum value of the data range.

        Returns:
            A tuple of the minimum and maximum axis limits.
        """
        return min_, max_

    def get_limits_and_ticks(
        self, min_: float, max_: float
    ) -> tuple[tuple[float, float], NDArray[np.floating]]:
        """Return the axis limits for a data range and the ticks inside them.

        This is a convenience method that calls get_limits() followed by
        get_ticks() on the resulting limits.

        Args:
            min_: Minimum value of the data range.
            max_: Maximum value of the data range.

        Returns:
            A tuple containing:
                - A tuple of the minimum and maximum axis limits
                - An array of tick positions
        """
        limits = self.get_limits(min_, max_)
        return limits, self.get_ticks(*limits)


class NiceTickLocator(TickLocator):
    """Locator for numeric axes with nice intervals (1, 2, 5, 10, etc.).

    Ticks are placed at multiples of 1, 2, 5 or 10 times a power of ten, which
    are visually pleasing and easy to read.
    """

    def __init__(
        self, count: int = DEFAULT_TICK_COUNT, nice_limits: bool = False
    ) -> None:
        """Initialise the locator.

        Args:
            count: Approximate number of ticks. Defaults to 10.
            nice_limits: Whether get_limits() extends the range to the nearest
                enclosing ticks. Defaults to False.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self.count = count
        self.nice_limits = nice_limits

    def get_ticks(self, min_: float, max_: float) -> NDArray[np.floating]:
        return ticks(min_, max_, self.count)

    def get_limits(self, min_: float, max_: float) -> tuple[float, float]:
        if not self.nice_limits:
            return super().get_limits(min_, max_)
        return nice(min_, max_, self.count)
