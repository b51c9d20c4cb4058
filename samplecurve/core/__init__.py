"""
Core interpolation module.

Index clipping, the three interpolation algorithms, component extraction for
vector samples, and domain rescaling.
"""

from .clipping import (
    clip_index,
    clamp_index,
    periodic_index,
    mirror_index,
    resolve_clipper,
    as_clip_mode,
    CLIP_CLAMP,
    CLIP_ZERO,
    CLIP_PERIODIC,
    CLIP_MIRROR,
    ZERO_FILL,
)
from .interpolators import (
    Interpolator,
    NearestInterpolator,
    LinearInterpolator,
    CubicInterpolator,
    make_interpolator,
    interpolator_classes,
    METHOD_NEAREST,
    METHOD_LINEAR,
    METHOD_CUBIC,
)
from .columns import extract_column, split_columns
from .scaling import base_scale, scale_factor, ScaledFunction, wrap_scaled


__all__ = [
    # Clipping
    "clip_index",
    "clamp_index",
    "periodic_index",
    "mirror_index",
    "resolve_clipper",
    "as_clip_mode",
    "CLIP_CLAMP",
    "CLIP_ZERO",
    "CLIP_PERIODIC",
    "CLIP_MIRROR",
    "ZERO_FILL",

    # Interpolators
    "Interpolator",
    "NearestInterpolator",
    "LinearInterpolator",
    "CubicInterpolator",
    "make_interpolator",
    "interpolator_classes",
    "METHOD_NEAREST",
    "METHOD_LINEAR",
    "METHOD_CUBIC",

    # Vector samples
    "extract_column",
    "split_columns",

    # Domain rescaling
    "base_scale",
    "scale_factor",
    "ScaledFunction",
    "wrap_scaled",
]
