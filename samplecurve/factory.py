"""
Interpolant factory.

``create_interpolant`` is the single entry point: it validates the samples,
normalizes the configuration, builds one interpolator for scalar samples or
one per component for vector samples, and applies domain rescaling when
``scale_to`` is set.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .config import InterpolationConfig, normalize_config
from .core.columns import split_columns
from .core.interpolators import make_interpolator
from .interpolant import Interpolant
from .samples import snapshot_samples
from .types.array_types import ScalarSamples, VectorSamples


def create_interpolant(
    samples: Union[ScalarSamples, VectorSamples],
    config: Optional[Union[InterpolationConfig, Mapping[str, Any]]] = None,
    **options: Any,
) -> Interpolant:
    """
    Build a continuous function over ``samples``.

    Args:
        samples: Sequence of real numbers, or of equal-width numeric vectors
            (a 2D array works too). At least two samples are required.
        config: Optional ``InterpolationConfig`` or mapping of options.
        **options: Options overriding ``config``:
            method: "nearest", "linear" or "cubic" (default "cubic").
            cubic_tension: Cubic tangent damping, clamped to [0, 1]
                (default 0, alias ``cubicTension``).
            clip: "clamp", "zero", "periodic" or "mirror" (default "clamp").
            scale_to: Rescale the input domain to [0, scale_to]; 0 disables
                rescaling (default 0, aliases ``scaleTo`` and ``period``).

    Returns:
        An ``Interpolant`` mapping a real parameter to a float (scalar
        samples) or an array of floats (vector samples).

    Raises:
        InsufficientSamples: If fewer than two samples are given.
        UnsupportedElementType: If the samples are neither real numbers nor
            equal-width numeric vectors.
        InvalidConfiguration: If an option name or value is not recognized.

    Example:
        >>> curve = create_interpolant([0, 10, 0])
        >>> curve(1)
        10.0
        >>> track = create_interpolant([[1, 2], [3, 4], [5, 6]], method="nearest")
        >>> track(1).tolist()
        [3.0, 4.0]
    """
    values = snapshot_samples(samples)
    cfg = normalize_config(config, **options)

    if values.ndim == 1:
        return Interpolant([make_interpolator(values, cfg)], cfg)

    interpolators = [make_interpolator(column, cfg) for column in split_columns(values)]
    return Interpolant(interpolators, cfg, width=values.shape[1])
