from axis_ticks.increment import (
    DirectStep,
    Increment,
    InvertedScale,
    as_increment,
    tick_increment,
)
from axis_ticks.locator import NiceTickLocator, TickLocator
from axis_ticks.ticks import nice, tick_step, ticks

__all__ = [
    "DirectStep",
    "Increment",
    "InvertedScale",
    "NiceTickLocator",
    "TickLocator",
    "as_increment",
    "nice",
    "tick_increment",
    "tick_step",
    "ticks",
]
