"""
Index clipping policies for sample sequences.

A clipper decides what reading index ``i`` of an ``n``-element sequence means
when ``i`` falls outside ``[0, n - 1]``:

    CLAMP:    repeat the nearest endpoint
    ZERO:     read the fill value 0 (the signal is zero outside its support)
    PERIODIC: wrap around with period n
    MIRROR:   reflect at both ends with period 2 * (n - 1)

Sequences must hold at least two samples; MIRROR has no period otherwise.
"""

from typing import Callable, Optional

import numpy as np
from boundednumbers import clamp, cyclic_wrap

from ..types.clip_types import ClipMode
from ..utils.options import coerce_enum

CLIP_CLAMP = ClipMode.CLAMP
CLIP_ZERO = ClipMode.ZERO
CLIP_PERIODIC = ClipMode.PERIODIC
CLIP_MIRROR = ClipMode.MIRROR

ZERO_FILL = 0.0

OutOfRangeReader = Callable[[np.ndarray, int], float]


def as_clip_mode(clip) -> ClipMode:
    """Convert a clip mode name or member to ``ClipMode``."""
    return coerce_enum(ClipMode, "clip", clip)


def clamp_index(index: int, length: int) -> int:
    return clamp(index, 0, length - 1)


def periodic_index(index: int, length: int) -> int:
    return cyclic_wrap(index, 0, length - 1)


def mirror_index(index: int, length: int) -> int:
    """Reflect ``index`` back and forth between 0 and ``length - 1``."""
    period = 2 * (length - 1)
    folded = cyclic_wrap(index, 0, period - 1)
    if folded > length - 1:
        return period - folded
    return folded


index_clippers = {
    ClipMode.CLAMP: clamp_index,
    ClipMode.PERIODIC: periodic_index,
    ClipMode.MIRROR: mirror_index,
}


def clip_index(index: int, length: int, clip: ClipMode) -> Optional[int]:
    """
    Map an arbitrary integer index onto ``[0, length - 1]``.

    Args:
        index: Requested index, possibly out of range.
        length: Sequence length (at least 2).
        clip: Clip mode.

    Returns:
        The remapped index, or None when ``clip`` is ZERO and ``index`` is out
        of range (the caller reads the zero fill instead).
    """
    clip = as_clip_mode(clip)
    if 0 <= index < length:
        return index
    if clip is ClipMode.ZERO:
        return None
    return index_clippers[clip](index, length)


def _index_reader(clip: ClipMode) -> OutOfRangeReader:
    to_index = index_clippers[clip]

    def read(values: np.ndarray, index: int) -> float:
        return float(values[to_index(index, len(values))])

    return read


def _zero_reader(values: np.ndarray, index: int) -> float:
    return ZERO_FILL


def resolve_clipper(clip) -> OutOfRangeReader:
    """
    Resolve the out-of-range reader for a clip mode.

    The returned function takes the backing values and an out-of-range index
    and returns the sample value that index stands for.

    Raises:
        InvalidConfiguration: If ``clip`` is not a recognized clip mode.
    """
    return clip_readers[as_clip_mode(clip)]


clip_readers = {
    ClipMode.CLAMP: _index_reader(ClipMode.CLAMP),
    ClipMode.ZERO: _zero_reader,
    ClipMode.PERIODIC: _index_reader(ClipMode.PERIODIC),
    ClipMode.MIRROR: _index_reader(ClipMode.MIRROR),
}
