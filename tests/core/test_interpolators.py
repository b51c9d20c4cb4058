"""
Tests for the nearest, linear and cubic interpolators.
"""

import math

import numpy as np
import pytest

from samplecurve.config import InterpolationConfig
from samplecurve.core.interpolators import (
    Interpolator,
    NearestInterpolator,
    LinearInterpolator,
    CubicInterpolator,
    make_interpolator,
    interpolator_classes,
)
from samplecurve.errors import InsufficientSamples, InvalidConfiguration
from samplecurve.types.clip_types import ClipMode
from samplecurve.types.method_types import Method


def build(method, values, clip="clamp", **kwargs):
    return make_interpolator(values, InterpolationConfig(method=method, clip=clip, **kwargs))


# =============================================================================
# Construction
# =============================================================================
class TestConstruction:
    def test_dispatch_table(self):
        assert interpolator_classes[Method.NEAREST] is NearestInterpolator
        assert interpolator_classes[Method.LINEAR] is LinearInterpolator
        assert interpolator_classes[Method.CUBIC] is CubicInterpolator

    @pytest.mark.parametrize("method", list(Method))
    def test_make_interpolator_selects_class(self, method):
        interp = build(method, [1.0, 2.0])
        assert isinstance(interp, Interpolator)
        assert interp.method is method

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            Interpolator([1.0, 2.0], InterpolationConfig())

    def test_requires_two_samples(self):
        with pytest.raises(InsufficientSamples):
            build("linear", [1.0])

    def test_rejects_2d_values(self):
        with pytest.raises(ValueError):
            build("linear", [[1.0, 2.0], [3.0, 4.0]])

    def test_invalid_clip_rejected_at_construction(self):
        with pytest.raises(InvalidConfiguration):
            build("linear", [1.0, 2.0], clip="wrap")

    def test_owns_private_copy(self):
        values = np.array([1.0, 2.0, 3.0])
        interp = build("linear", values)
        values[0] = 100.0
        assert interp.value_at(0) == 1.0
        assert not interp.values.flags.writeable

    def test_len_and_repr(self):
        interp = build("nearest", [1, 2, 3], clip="mirror")
        assert len(interp) == 3
        assert repr(interp) == "NearestInterpolator(length=3, clip='mirror')"

    def test_callable(self):
        interp = build("linear", [0.0, 2.0])
        assert interp(0.5) == interp.value_at(0.5) == 1.0


# =============================================================================
# Shared properties
# =============================================================================
@pytest.mark.parametrize("method", list(Method))
@pytest.mark.parametrize("clip", list(ClipMode))
def test_passes_through_samples(method, clip, bumpy):
    interp = build(method, bumpy, clip=clip)
    for i, expected in enumerate(bumpy):
        assert interp.value_at(i) == expected
        assert interp.value_at(float(i)) == expected


@pytest.mark.parametrize("method", list(Method))
@pytest.mark.parametrize("clip", list(ClipMode))
def test_total_over_finite_parameters(method, clip, bumpy):
    interp = build(method, bumpy, clip=clip)
    for t in (-1e308, -1e6, -17.3, -0.5, 0.0, 0.25, 2.999, 5.5, 6.0, 123.456, 1e6, 1e308):
        assert math.isfinite(interp.value_at(t))


# =============================================================================
# Nearest
# =============================================================================
class TestNearest:
    def test_rounds_half_up(self):
        interp = build("nearest", [10.0, 20.0, 30.0])
        assert interp.value_at(0.49) == 10.0
        assert interp.value_at(0.49999999999999994) == 10.0
        assert interp.value_at(0.5) == 20.0
        assert interp.value_at(1.5) == 30.0
        assert interp.value_at(-0.5) == 10.0
        assert interp.value_at(2.4999999999999996) == 30.0

    def test_clamp(self):
        interp = build("nearest", [10.0, 20.0, 30.0])
        assert interp.value_at(-7.0) == 10.0
        assert interp.value_at(9.0) == 30.0

    def test_zero_outside_support(self):
        interp = build("nearest", [1.0, 2.0, 3.0, 4.0], clip="zero")
        assert interp.value_at(-0.6) == 0.0
        assert interp.value_at(3.5) == 0.0
        assert interp.value_at(3.4) == 4.0
        assert interp.value_at(-0.5) == 1.0

    def test_periodic(self):
        samples = [1.0, 2.0, 3.0, 4.0]
        interp = build("nearest", samples, clip="periodic")
        for t in (-2.25, -0.5, 0.0, 0.75, 1.5, 3.25):
            assert interp.value_at(t) == interp.value_at(t + len(samples))

    def test_mirror_first_reflection(self):
        samples = [1.0, 2.0, 3.0, 4.0]
        n = len(samples)
        interp = build("nearest", samples, clip="mirror")
        assert interp.value_at(n) == interp.value_at(n - 2) == 3.0
        assert interp.value_at(-1) == interp.value_at(1) == 2.0
        assert interp.value_at(2 * (n - 1)) == 1.0


# =============================================================================
# Linear
# =============================================================================
class TestLinear:
    def test_midpoints_are_means(self, bumpy):
        interp = build("linear", bumpy)
        for k in range(len(bumpy) - 1):
            assert interp.value_at(k + 0.5) == (bumpy[k] + bumpy[k + 1]) / 2

    def test_affine_between_samples(self, ramp):
        interp = build("linear", ramp)
        assert interp.value_at(2.25) == 2.25
        assert interp.value_at(0.75) == 0.75

    def test_clamp(self, bumpy):
        interp = build("linear", bumpy)
        n = len(bumpy)
        for t in (-0.25, -1.0, -50.5):
            assert interp.value_at(t) == interp.value_at(0)
        for t in (n - 1, n - 0.5, n + 20.75):
            assert interp.value_at(t) == interp.value_at(n - 1)

    def test_zero_fades_out(self):
        interp = build("linear", [1.0, 2.0, 3.0, 4.0], clip="zero")
        assert interp.value_at(3.5) == 2.0
        assert interp.value_at(-0.5) == 0.5
        assert interp.value_at(5.0) == 0.0

    def test_periodic_wraps_last_to_first(self):
        samples = [1.0, 2.0, 3.0, 4.0]
        interp = build("linear", samples, clip="periodic")
        assert interp.value_at(3.5) == 2.5
        for t in (-3.75, -0.5, 0.25, 1.5, 3.5):
            assert interp.value_at(t) == interp.value_at(t + len(samples))

    def test_mirror(self):
        interp = build("linear", [1.0, 2.0, 3.0, 4.0], clip="mirror")
        assert interp.value_at(3.5) == 3.5
        assert interp.value_at(-0.5) == 1.5


# =============================================================================
# Cubic
# =============================================================================
class TestCubic:
    def test_catmull_rom_value(self):
        interp = build("cubic", [0.0, 10.0, 0.0])
        # p0=0, p1=10, m0=5, m1=0 at frac=0.5
        assert interp.value_at(0.5) == 5.625
        assert interp.value_at(1.5) == 5.625

    def test_tangents(self):
        interp = build("cubic", [0.0, 10.0, 0.0])
        assert interp.tangent(0) == 5.0
        assert interp.tangent(1) == 0.0
        assert interp.tangent(2) == -5.0

    def test_tension_damps_tangents(self):
        half = build("cubic", [0.0, 10.0, 0.0], cubic_tension=0.5)
        full = build("cubic", [0.0, 10.0, 0.0], cubic_tension=1.0)
        assert half.tangent(0) == 2.5
        assert half.value_at(0.5) == 5.3125
        assert full.tangent(0) == 0.0
        assert full.value_at(0.5) == 5.0

    def test_tension_is_clamped(self):
        with pytest.warns(RuntimeWarning):
            over = build("cubic", [0.0, 10.0, 0.0], cubic_tension=3.0)
        with pytest.warns(RuntimeWarning):
            under = build("cubic", [0.0, 10.0, 0.0], cubic_tension=-2.0)
        assert over.value_at(0.5) == build("cubic", [0.0, 10.0, 0.0], cubic_tension=1.0).value_at(0.5)
        assert under.value_at(0.5) == build("cubic", [0.0, 10.0, 0.0]).value_at(0.5)

    def test_reproduces_lines_in_the_interior(self, ramp):
        interp = build("cubic", ramp)
        for t in (1.25, 1.5, 2.75):
            assert interp.value_at(t) == pytest.approx(t)

    def test_clamp_settles_one_step_outside(self, bumpy):
        interp = build("cubic", bumpy)
        n = len(bumpy)
        for t in (-1.0, -1.5, -40.0):
            assert interp.value_at(t) == bumpy[0]
        for t in (n, n + 0.5, n + 40.0):
            assert interp.value_at(t) == bumpy[-1]

    def test_zero(self):
        interp = build("cubic", [1.0, 2.0, 3.0], clip="zero")
        assert interp.value_at(-2.0) == 0.0
        assert interp.value_at(5.5) == 0.0
        # tangent at 0 reads the zero fill on the left
        assert interp.tangent(0) == 1.0

    def test_periodic(self, bumpy):
        interp = build("cubic", bumpy, clip="periodic")
        n = len(bumpy)
        for t in (-2.3, 0.4, 3.7, 5.5):
            assert interp.value_at(t + n) == pytest.approx(interp.value_at(t))

    def test_mirror_is_symmetric_about_the_ends(self, bumpy):
        interp = build("cubic", bumpy, clip="mirror")
        last = len(bumpy) - 1
        for d in (0.25, 0.5, 1.75):
            assert interp.value_at(-d) == pytest.approx(interp.value_at(d))
            assert interp.value_at(last + d) == pytest.approx(interp.value_at(last - d))

    def test_mirror_has_flat_slope_at_ends(self):
        interp = build("cubic", [0.0, 10.0, 0.0, 5.0], clip="mirror")
        assert interp.tangent(0) == 0.0
        assert interp.tangent(3) == 0.0
