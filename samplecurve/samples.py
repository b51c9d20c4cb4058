"""
Sample sequence validation and snapshotting.

A sample sequence is either a sequence of real numbers or a sequence of
equal-width numeric vectors. The first element decides which; every other
element must agree with it.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Iterable

import numpy as np

from .errors import InsufficientSamples, UnsupportedElementType
from .types.array_types import SampleArray
from .utils.num_utils import is_real_number

MIN_SAMPLES = 2


class ElementKind(Enum):
    SCALAR = "scalar"
    VECTOR = "vector"


def is_vector_element(element: Any) -> bool:
    """Check if an element is an ordered sequence (strings and bytes excluded)."""
    if isinstance(element, np.ndarray):
        return element.ndim == 1
    if isinstance(element, (str, bytes, bytearray)):
        return False
    return isinstance(element, Sequence)


def element_kind(element: Any) -> ElementKind:
    """
    Classify a sample element.

    Raises:
        UnsupportedElementType: If the element is neither a real number nor
            an ordered sequence.
    """
    if is_real_number(element):
        return ElementKind.SCALAR
    if is_vector_element(element):
        return ElementKind.VECTOR
    raise UnsupportedElementType(element)


def _snapshot_array(samples: np.ndarray) -> SampleArray:
    if samples.dtype.kind not in "iuf":
        raise UnsupportedElementType(
            samples.flat[0] if samples.size else samples,
            f"array dtype {samples.dtype} is not real-valued",
        )
    if samples.ndim not in (1, 2):
        raise UnsupportedElementType(samples[0], f"expected a 1D or 2D array, got shape {samples.shape}")
    if samples.ndim == 2 and samples.shape[1] == 0:
        raise UnsupportedElementType(samples[0], "vector samples must not be empty")
    return np.array(samples, dtype=np.float64)


def _snapshot_scalars(samples: Sequence) -> SampleArray:
    for element in samples:
        if not is_real_number(element):
            raise UnsupportedElementType(element, "expected a real number like the first sample")
    return np.array(samples, dtype=np.float64)


def _snapshot_vectors(samples: Sequence) -> SampleArray:
    width = len(samples[0])
    if width == 0:
        raise UnsupportedElementType(samples[0], "vector samples must not be empty")
    for element in samples:
        if not is_vector_element(element):
            raise UnsupportedElementType(element, "expected a vector like the first sample")
        if len(element) != width:
            raise UnsupportedElementType(element, f"expected width {width}, got {len(element)}")
        for component in element:
            if not is_real_number(component):
                raise UnsupportedElementType(element, f"component {component!r} is not a real number")
    return np.array([list(element) for element in samples], dtype=np.float64)


def snapshot_samples(samples: Iterable) -> SampleArray:
    """
    Validate ``samples`` and return a private read-only float64 copy.

    Returns:
        An array of shape (n,) for scalar samples or (n, W) for vector samples.

    Raises:
        InsufficientSamples: If fewer than two samples are given.
        UnsupportedElementType: If the elements are not real numbers or
            equal-width numeric vectors.
    """
    if not isinstance(samples, (Sequence, np.ndarray)) or isinstance(samples, (str, bytes, bytearray)):
        samples = list(samples)

    count = len(samples)
    if count < MIN_SAMPLES:
        raise InsufficientSamples(count)

    if isinstance(samples, np.ndarray):
        snapshot = _snapshot_array(samples)
    elif element_kind(samples[0]) is ElementKind.SCALAR:
        snapshot = _snapshot_scalars(samples)
    else:
        snapshot = _snapshot_vectors(samples)

    snapshot.flags.writeable = False
    return snapshot
