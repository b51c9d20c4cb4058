"""
Samplecurve - continuous functions over sampled sequences
=========================================================

Turn an ordered sequence of samples (numbers or fixed-width numeric vectors)
into a function of a real parameter, for keyframes, sensor traces or lookup
tables queried at arbitrary positions.

Quick Start
-----------
>>> from samplecurve import create_interpolant, CLIP_PERIODIC
>>>
>>> curve = create_interpolant([0, 10, 0])          # cubic, clamped
>>> curve(0.5) > 0
True
>>> loop = create_interpolant([1, 2, 3, 4], method="linear",
...                           clip=CLIP_PERIODIC, scale_to=1)
>>> loop(1.0)
1.0

Interpolation methods
---------------------
- nearest: value of the nearest sample (ties round up)
- linear: straight lines between neighbouring samples
- cubic: cubic Hermite spline with Catmull-Rom tangents and tension

Clip modes
----------
- clamp: repeat the endpoints
- zero: zero outside the samples
- periodic: wrap around
- mirror: reflect at both ends
"""

from .factory import create_interpolant
from .interpolant import Interpolant
from .config import InterpolationConfig, normalize_config, resolve_aliases, fill_defaults
from .errors import (
    InterpolationError,
    InvalidConfiguration,
    InsufficientSamples,
    UnsupportedElementType,
)
from .types import ClipMode, Method
from .core import (
    CLIP_CLAMP,
    CLIP_ZERO,
    CLIP_PERIODIC,
    CLIP_MIRROR,
    METHOD_NEAREST,
    METHOD_LINEAR,
    METHOD_CUBIC,
)

__version__ = "1.0.0"

__all__ = [
    # Entry point
    "create_interpolant",
    "Interpolant",

    # Configuration
    "InterpolationConfig",
    "normalize_config",
    "resolve_aliases",
    "fill_defaults",
    "ClipMode",
    "Method",

    # Named constants
    "CLIP_CLAMP",
    "CLIP_ZERO",
    "CLIP_PERIODIC",
    "CLIP_MIRROR",
    "METHOD_NEAREST",
    "METHOD_LINEAR",
    "METHOD_CUBIC",

    # Errors
    "InterpolationError",
    "InvalidConfiguration",
    "InsufficientSamples",
    "UnsupportedElementType",

    # Version
    "__version__",
]
