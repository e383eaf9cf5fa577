"""Shaping curves that map a clamped input value onto an animation weight."""

from __future__ import annotations

from enum import Enum


class InterpolationType(Enum):
    """The curve applied to a value once it has been clamped."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"


def interpolate(
    kind: InterpolationType, minimum: float, maximum: float, value: float
) -> float:
    """Clamp ``value`` to ``[minimum, maximum]`` and apply the curve ``kind``.

    The lower bound is applied first and the upper bound second, so when
    ``minimum`` exceeds ``maximum`` the result is clamped to ``maximum``.
    """
    if value < minimum:
        value = minimum
    if value > maximum:
        value = maximum

    if kind is InterpolationType.LINEAR:
        return float(value)
    if kind is InterpolationType.QUADRATIC:
        return float(value * value)
    if kind is InterpolationType.CUBIC:
        return float(value * value * value)
    raise ValueError(f"unknown interpolation type: {kind!r}")