"""Component extraction for vector-valued sample sequences."""

from typing import List

import numpy as np

from ..types.array_types import SampleArray


def extract_column(samples: np.ndarray, component: int) -> SampleArray:
    """
    Project one component across all samples.

    Args:
        samples: Array of shape (n, W).
        component: Component index in [0, W).

    Returns:
        A new 1D float array of length n.
    """
    samples = np.asarray(samples)
    if samples.ndim != 2:
        raise ValueError(f"samples must be 2D, got shape {samples.shape}")
    return np.array(samples[:, component], dtype=np.float64)


def split_columns(samples: np.ndarray) -> List[SampleArray]:
    """Split an (n, W) sample array into W independent columns, in order."""
    samples = np.asarray(samples)
    if samples.ndim != 2:
        raise ValueError(f"samples must be 2D, got shape {samples.shape}")
    return [extract_column(samples, c) for c in range(samples.shape[1])]
