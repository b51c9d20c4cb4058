"""
Scalar interpolators over a one-dimensional sample sequence.

Each interpolator owns a read-only snapshot of its samples and the
out-of-range reader of its clip mode, both resolved once at construction.
``value_at`` is defined for every finite parameter.
"""

import math
from abc import ABC, abstractmethod
from typing import Dict, Type

import numpy as np

from ..config import InterpolationConfig
from ..errors import InsufficientSamples
from ..types.array_types import SampleArray
from ..types.method_types import Method
from ..utils.num_utils import round_half_up
from ..utils.options import coerce_enum
from .clipping import resolve_clipper

METHOD_NEAREST = Method.NEAREST
METHOD_LINEAR = Method.LINEAR
METHOD_CUBIC = Method.CUBIC


class Interpolator(ABC):
    """Base class for all interpolators."""

    method: Method

    def __init__(self, values, config: InterpolationConfig):
        values = np.array(values, dtype=np.float64)
        if values.ndim != 1:
            raise ValueError(f"values must be 1D, got shape {values.shape}")
        if len(values) < 2:
            raise InsufficientSamples(len(values))
        values.flags.writeable = False

        self.config = config
        self._values: SampleArray = values
        self._length = len(values)
        self._read_out_of_range = resolve_clipper(config.clip)

    @property
    def values(self) -> SampleArray:
        return self._values

    def __len__(self) -> int:
        return self._length

    def sample(self, index: int) -> float:
        """Read sample ``index``, applying the clip mode when out of range."""
        if 0 <= index < self._length:
            return float(self._values[index])
        return self._read_out_of_range(self._values, index)

    @abstractmethod
    def value_at(self, t: float) -> float:
        """Interpolated value at parameter ``t``."""
        pass

    def __call__(self, t: float) -> float:
        return self.value_at(t)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(length={self._length}, clip={self.config.clip.value!r})"


class NearestInterpolator(Interpolator):
    """Piecewise-constant interpolation; ties round up."""

    method = Method.NEAREST

    def value_at(self, t: float) -> float:
        return self.sample(round_half_up(t))


class LinearInterpolator(Interpolator):
    method = Method.LINEAR

    def value_at(self, t: float) -> float:
        k = math.floor(t)
        frac = t - k
        if frac == 0:
            return self.sample(k)
        return (1 - frac) * self.sample(k) + frac * self.sample(k + 1)


class CubicInterpolator(Interpolator):
    """
    Cubic Hermite spline with Catmull-Rom tangents scaled by ``1 - tension``.

    Tangents read their neighbours through the clip mode, so the curve stays
    consistent with the boundary policy (reflected slopes under MIRROR,
    wrapped slopes under PERIODIC).
    """

    method = Method.CUBIC

    def __init__(self, values, config: InterpolationConfig):
        super().__init__(values, config)
        self._tangent_factor = config.tangent_factor

    def tangent(self, index: int) -> float:
        return self._tangent_factor * (self.sample(index + 1) - self.sample(index - 1)) / 2

    def value_at(self, t: float) -> float:
        k = math.floor(t)
        frac = t - k
        frac2 = frac * frac
        frac3 = frac * frac2

        p0 = self.sample(k)
        p1 = self.sample(k + 1)
        m0 = self.tangent(k)
        m1 = self.tangent(k + 1)

        return (
            (2 * frac3 - 3 * frac2 + 1) * p0
            + (frac3 - 2 * frac2 + frac) * m0
            + (-2 * frac3 + 3 * frac2) * p1
            + (frac3 - frac2) * m1
        )


interpolator_classes: Dict[Method, Type[Interpolator]] = {
    Method.NEAREST: NearestInterpolator,
    Method.LINEAR: LinearInterpolator,
    Method.CUBIC: CubicInterpolator,
}


def make_interpolator(values, config: InterpolationConfig) -> Interpolator:
    """Build the interpolator selected by ``config.method``."""
    method = coerce_enum(Method, "method", config.method)
    return interpolator_classes[method](values, config)
