"""Number formatting shared by analysis text and reports."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)
