"""Degree-based trigonometry helpers wrapping the radian primitives in math."""

import math


def sin(angle: float) -> float:
    """Sine of an angle given in degrees."""
    return math.sin(angle / 180 * math.pi)


def cos(angle: float) -> float:
    """Cosine of an angle given in degrees."""
    return math.cos(angle / 180 * math.pi)


def asin(ratio: float) -> float:
    """Arcsine of a ratio, in degrees."""
    return math.asin(ratio) * 180 / math.pi


def acos(ratio: float) -> float:
    """Arccosine of a ratio, in degrees.

    ``ratio`` must lie in [-1, 1]; math.acos raises ValueError otherwise.
    Out-of-domain handling is the caller's policy (see solar.hour_angle).
    """
    return math.acos(ratio) * 180 / math.pi
