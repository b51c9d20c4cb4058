"""
Interpolant configuration.

Options are normalized in two phases:

1. ``resolve_aliases`` maps alias names (``period``, ``scaleTo``,
   ``cubicTension``) onto canonical field names. An alias only fills a field
   the caller left absent.
2. ``fill_defaults`` substitutes per-field defaults and validates the result
   into an immutable ``InterpolationConfig``.

An option is absent when its key is missing or its value is None. Any other
value, falsy ones included, is kept and validated.
"""

from __future__ import annotations

import dataclasses
import math
import warnings
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from boundednumbers import clamp01

from .errors import InvalidConfiguration
from .types.clip_types import ClipMode
from .types.method_types import Method
from .utils.default import fill_missing
from .utils.num_utils import is_real_number
from .utils.options import coerce_enum

# Consulted in order; the first alias present fills an absent field
OPTION_ALIASES: Dict[str, str] = {
    "scaleTo": "scale_to",
    "period": "scale_to",
    "cubicTension": "cubic_tension",
}


@dataclass(frozen=True)
class InterpolationConfig:
    """
    Immutable interpolant configuration.

    Attributes:
        method: Interpolation algorithm.
        cubic_tension: Tangent damping for cubic interpolation. Values are
            clamped to [0, 1] when tangents are computed.
        clip: Out-of-range index policy.
        scale_to: Length of the rescaled input domain; 0 disables rescaling.
    """
    method: Method = Method.CUBIC
    cubic_tension: float = 0.0
    clip: ClipMode = ClipMode.CLAMP
    scale_to: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "method", coerce_enum(Method, "method", self.method))
        object.__setattr__(self, "clip", coerce_enum(ClipMode, "clip", self.clip))

        if not is_real_number(self.cubic_tension) or math.isnan(self.cubic_tension):
            raise InvalidConfiguration("cubic_tension", self.cubic_tension, "expected a real number")
        if not is_real_number(self.scale_to) or not math.isfinite(self.scale_to):
            raise InvalidConfiguration("scale_to", self.scale_to, "expected a finite real number")
        if self.scale_to < 0:
            raise InvalidConfiguration("scale_to", self.scale_to, "must not be negative")

        if not 0.0 <= self.cubic_tension <= 1.0:
            warnings.warn(
                f"cubic_tension={self.cubic_tension} is outside [0, 1] "
                f"and will be clamped to {clamp01(self.cubic_tension)}",
                RuntimeWarning,
            )
        if self.method is not Method.CUBIC and self.cubic_tension != 0:
            warnings.warn(
                f"cubic_tension has no effect with method={self.method.value!r}",
                UserWarning,
            )

    @property
    def tangent_factor(self) -> float:
        """Multiplier applied to Catmull-Rom tangents."""
        return 1.0 - clamp01(self.cubic_tension)

    @property
    def scaled(self) -> bool:
        return bool(self.scale_to)

    def replace(self, **changes: Any) -> InterpolationConfig:
        """Return a validated copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def as_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


_DEFAULTS: Dict[str, Any] = {
    field.name: field.default for field in dataclasses.fields(InterpolationConfig)
}


def resolve_aliases(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Map alias option names onto canonical names without overriding them."""
    resolved = {key: value for key, value in options.items() if key not in OPTION_ALIASES}
    for alias, canonical in OPTION_ALIASES.items():
        if alias in options and resolved.get(canonical) is None:
            resolved[canonical] = options[alias]
    return resolved


def fill_defaults(options: Mapping[str, Any]) -> InterpolationConfig:
    """Substitute defaults for absent fields and validate the result."""
    for key in options:
        if key not in _DEFAULTS:
            raise InvalidConfiguration(key, options[key], "unknown option")
    return InterpolationConfig(**fill_missing(options, _DEFAULTS))


def normalize_config(
    config: Optional[Union[InterpolationConfig, Mapping[str, Any]]] = None,
    **options: Any,
) -> InterpolationConfig:
    """
    Build an ``InterpolationConfig`` from a config object, a mapping, keyword
    options, or a combination of these.

    Keyword options override entries of ``config`` with the same name.
    """
    if isinstance(config, InterpolationConfig) and not options:
        return config

    options = {key: value for key, value in options.items() if value is not None}
    if config is None:
        merged: Dict[str, Any] = {}
    elif isinstance(config, InterpolationConfig):
        merged = config.as_dict()
        options = resolve_aliases(options)
    elif isinstance(config, Mapping):
        merged = dict(config)
    else:
        raise InvalidConfiguration("config", config, "expected a mapping or InterpolationConfig")

    merged.update(options)
    return fill_defaults(resolve_aliases(merged))
