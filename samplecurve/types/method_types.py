from enum import Enum


class Method(str, Enum):
    """Interpolation algorithms."""
    NEAREST = "nearest"
    LINEAR = "linear"
    CUBIC = "cubic"
