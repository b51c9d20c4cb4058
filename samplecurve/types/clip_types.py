from enum import Enum


class ClipMode(str, Enum):
    """Out-of-range index policies for a sample sequence."""
    CLAMP = "clamp"
    ZERO = "zero"
    PERIODIC = "periodic"
    MIRROR = "mirror"
