"""The callable returned by ``create_interpolant``."""

from __future__ import annotations

import math
from typing import Callable, Iterable, Optional, Sequence, Union

import numpy as np

from .config import InterpolationConfig
from .core.interpolators import Interpolator
from .core.scaling import base_scale, wrap_scaled
from .types.array_types import SampleArray
from .types.method_types import Method

Value = Union[float, SampleArray]


def _as_parameter(t) -> float:
    t = float(t)
    if not math.isfinite(t):
        raise ValueError(f"t must be finite, got {t}")
    return t


class Interpolant:
    """
    Continuous function over a sampled sequence.

    Calling the interpolant with a real ``t`` returns a float for scalar
    samples, or a new array of ``width`` floats for vector samples (one per
    component, in order). Without rescaling, integer ``t`` in ``[0, n - 1]``
    lands exactly on the samples.

    The interpolant holds no mutable state and may be shared freely.
    """

    def __init__(
        self,
        interpolators: Sequence[Interpolator],
        config: InterpolationConfig,
        width: Optional[int] = None,
    ):
        if not interpolators:
            raise ValueError("at least one interpolator is required")
        if width is None and len(interpolators) != 1:
            raise ValueError("scalar interpolants take exactly one interpolator")
        if width is not None and len(interpolators) != width:
            raise ValueError(f"expected {width} interpolators, got {len(interpolators)}")

        self._interpolators = tuple(interpolators)
        self._config = config
        self._width = width
        self._length = len(self._interpolators[0])

        evaluate: Callable[[float], Value]
        if width is None:
            evaluate = self._interpolators[0].value_at
        else:
            evaluate = self._evaluate_components
        if config.scaled:
            evaluate = wrap_scaled(evaluate, self._length, config.clip, config.scale_to)
        self._evaluate = evaluate

    def _evaluate_components(self, t: float) -> SampleArray:
        return np.array([interpolator.value_at(t) for interpolator in self._interpolators], dtype=np.float64)

    @property
    def config(self) -> InterpolationConfig:
        return self._config

    @property
    def length(self) -> int:
        """Number of samples."""
        return self._length

    @property
    def width(self) -> Optional[int]:
        """Vector width, or None for scalar samples."""
        return self._width

    @property
    def is_vector(self) -> bool:
        return self._width is not None

    @property
    def interpolators(self) -> tuple:
        return self._interpolators

    @property
    def domain(self) -> float:
        """Parameter extent covering the samples once (one period when periodic)."""
        if self._config.scaled:
            return self._config.scale_to
        return base_scale(self._length, self._config.clip)

    def __call__(self, t: float) -> Value:
        return self._evaluate(_as_parameter(t))

    def sample(self, ts: Union[float, Iterable[float]]) -> SampleArray:
        """
        Evaluate at many parameters. A single parameter is treated as one.

        Returns:
            An array of shape (m,) for scalar samples or (m, width) for
            vector samples, where m is the number of parameters.
        """
        if not isinstance(ts, np.ndarray) and np.ndim(ts) == 0 and hasattr(ts, "__iter__"):
            ts = list(ts)
        ts = np.ravel(np.asarray(ts, dtype=np.float64))
        shape = (len(ts),) if self._width is None else (len(ts), self._width)
        out = np.empty(shape, dtype=np.float64)
        for i, t in enumerate(ts):
            out[i] = self(t)
        return out

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        cfg = self._config
        parts = [
            f"method={cfg.method.value!r}",
            f"clip={cfg.clip.value!r}",
            f"length={self._length}",
        ]
        if self._width is not None:
            parts.append(f"width={self._width}")
        if cfg.method is Method.CUBIC:
            parts.append(f"cubic_tension={cfg.cubic_tension}")
        if cfg.scaled:
            parts.append(f"scale_to={cfg.scale_to}")
        return f"Interpolant({', '.join(parts)})"
