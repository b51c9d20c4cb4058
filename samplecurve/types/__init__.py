from .array_types import SampleArray, ScalarSamples, VectorSamples
from .clip_types import ClipMode
from .method_types import Method

__all__ = [
    "SampleArray",
    "ScalarSamples",
    "VectorSamples",
    "ClipMode",
    "Method",
]
