"""Formatting utilities for Xfer Time."""

import math


def format_duration(seconds: float) -> str:
    """Format an elapsed transfer time into a short human-readable string.

    Under a minute the seconds are rounded up. Between one minute and one
    hour the seconds are rounded up too, a remainder of 60 rolls over into
    the next minute and remainders under 10 are dropped. From one hour on
    only whole hours and minutes are shown.
    """
    if seconds < 1:
        return "<1 second"
    if seconds < 60:
        return f"{math.ceil(seconds)}s"
    if seconds < 3600:
        m = math.floor(seconds / 60)
        s = math.ceil(seconds % 60)
        if s == 60:
            return f"{m + 1}m"
        if s < 10:
            return f"{m}m"
        return f"{m}m {s}s"
    h = math.floor(seconds / 3600)
    m = math.floor((seconds % 3600) / 60)
    return f"{h}h {m}m"


def format_quantity(value: float, unit: str) -> str:
    """Format a value with its unit, e.g. 0.056 Mbps."""
    return f"{value:g} {unit}"
