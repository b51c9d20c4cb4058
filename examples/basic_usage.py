"""Basic samplecurve usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from samplecurve import (
    create_interpolant,
    ClipMode,
    Method,
    CLIP_MIRROR,
    CLIP_PERIODIC,
    METHOD_LINEAR,
    METHOD_NEAREST,
)


def demonstrate_methods() -> None:
    keyframes = [0.0, 10.0, 4.0, 8.0]

    # Same keyframes through the three methods.
    for method in (METHOD_NEAREST, METHOD_LINEAR, "cubic"):
        curve = create_interpolant(keyframes, method=method)
        print(f"{Method(method).value:>8}:", np.round(curve.sample(np.linspace(0, 3, 7)), 3))

    # Tension flattens the cubic tangents.
    taut = create_interpolant(keyframes, cubic_tension=0.8)
    print("   taut:", np.round(taut.sample(np.linspace(0, 3, 7)), 3))


def demonstrate_clipping() -> None:
    samples = [1.0, 2.0, 3.0, 4.0]
    ts = np.arange(-3, 8)
    for clip in ("clamp", "zero", CLIP_PERIODIC, CLIP_MIRROR):
        curve = create_interpolant(samples, method=METHOD_NEAREST, clip=clip)
        print(f"{ClipMode(clip).value:>8}:", curve.sample(ts))


def demonstrate_vectors_and_scaling() -> None:
    # A closed 2D path traversed once per second.
    square = [(0, 0), (1, 0), (1, 1), (0, 1)]
    path = create_interpolant(square, method=METHOD_LINEAR, clip=CLIP_PERIODIC, period=1.0)
    for t in (0.0, 0.125, 0.5, 0.875, 1.0):
        print(f"path({t}) =", path(t))


if __name__ == "__main__":
    demonstrate_methods()
    demonstrate_clipping()
    demonstrate_vectors_and_scaling()
