"""
Domain rescaling for produced functions.

A rescaled function maps ``[0, scale_to]`` onto the natural parameter range
of the samples: ``[0, n]`` for a periodic signal (the wrap back to index 0
belongs to the period) and ``[0, n - 1]`` otherwise.
"""

import math
import sys
from typing import Callable, TypeVar

from ..errors import InvalidConfiguration
from ..types.clip_types import ClipMode

R = TypeVar("R")


def base_scale(length: int, clip: ClipMode) -> int:
    """Natural parameter extent of an ``length``-sample sequence."""
    if clip == ClipMode.PERIODIC:
        return length
    return length - 1


def scale_factor(length: int, clip: ClipMode, scale_to: float) -> float:
    if scale_to <= 0:
        raise ValueError(f"scale_to must be positive, got {scale_to}")
    return base_scale(length, clip) / scale_to


class ScaledFunction:
    """
    Evaluate ``function(t * base / scale_to)``.

    A rescaled parameter that overflows saturates to the largest finite
    float of the same sign, so every finite ``t`` reaches ``function``
    as a finite value.
    """

    def __init__(self, function: Callable[[float], R], base: float, scale_to: float):
        if scale_to <= 0:
            raise ValueError(f"scale_to must be positive, got {scale_to}")
        self.function = function
        self.base = base
        self.scale_to = scale_to

    @property
    def factor(self) -> float:
        return self.base / self.scale_to

    def rescale(self, t: float) -> float:
        scaled = t * self.base / self.scale_to
        if math.isfinite(scaled):
            return scaled
        # t * base alone may overflow
        scaled = t * self.factor
        if math.isfinite(scaled):
            return scaled
        return math.copysign(sys.float_info.max, scaled)

    def __call__(self, t: float) -> R:
        return self.function(self.rescale(t))

    def __repr__(self) -> str:
        return f"ScaledFunction(base={self.base}, scale_to={self.scale_to})"


def wrap_scaled(
    function: Callable[[float], R],
    length: int,
    clip: ClipMode,
    scale_to: float,
) -> Callable[[float], R]:
    """
    Rescale ``function`` to the domain ``[0, scale_to]``; identity scalings are elided.

    Raises:
        InvalidConfiguration: If ``scale_to`` is so small that the scale
            factor is not a finite number.
    """
    if not math.isfinite(scale_factor(length, clip, scale_to)):
        raise InvalidConfiguration("scale_to", scale_to, f"too small to rescale {length} samples")
    base = base_scale(length, clip)
    if base == scale_to:
        return function
    return ScaledFunction(function, base, scale_to)
