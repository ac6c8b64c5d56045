"""Tests for the WGCCRE 2015 and 2009 report models.

Known values at J2000.0 are rebuilt here with ``math`` so the periodic
terms are checked independently of :mod:`wgccrejax.angles`.
"""

import math

import jax
import jax.numpy as jnp
import pytest

from wgccrejax.reports import Orientation, report_2009, report_2015
from wgccrejax.reports._time import time_arguments

_R2D = 180.0 / math.pi
_DAYS = 365250.0


def _sd(angle):
    return math.sin(math.radians(angle)) * _R2D


def _cd(angle):
    return math.cos(math.radians(angle)) * _R2D


_ALL_MODELS = {
    "sol": report_2015.sol,
    "mercury": report_2015.mercury,
    "venus": report_2015.venus,
    "mars": report_2015.mars,
    "jupiter": report_2015.jupiter,
    "saturn": report_2015.saturn,
    "uranus": report_2015.uranus,
    "neptune": report_2015.neptune,
    "earth": report_2009.earth,
    "moon": report_2009.moon,
}


def _assert_orientation(result, ra, dec, w, atol=1e-9):
    assert float(result.ra) == pytest.approx(ra, abs=atol)
    assert float(result.dec) == pytest.approx(dec, abs=atol)
    assert float(result.w) == pytest.approx(w, abs=atol)


# ===========================================================================
# Values at J2000.0
# ===========================================================================


class TestJ2000Values:
    def test_sol(self):
        _assert_orientation(report_2015.sol(0.0), 286.13, 63.87, 84.176)

    def test_venus(self):
        _assert_orientation(report_2015.venus(0.0), 272.76, 67.16, 160.20)

    def test_saturn(self):
        _assert_orientation(report_2015.saturn(0.0), 40.589, 83.537, 38.90)

    def test_uranus(self):
        _assert_orientation(report_2015.uranus(0.0), 257.311, -15.175, 203.81)

    def test_earth(self):
        _assert_orientation(report_2009.earth(0.0), 0.00, 90.00, 190.147)

    def test_mercury(self):
        w = (
            329.5988
            + 0.01067257 * _sd(174.7910857)
            - 0.00112309 * _sd(349.5821714)
            - 0.00011040 * _sd(164.3732571)
            - 0.00002539 * _sd(339.1643429)
            - 0.00000571 * _sd(153.9554286)
        )
        _assert_orientation(report_2015.mercury(0.0), 281.0103, 61.4155, w)

    def test_mars(self):
        ra = (
            317.269202
            + 0.000068 * _sd(198.991226)
            + 0.000238 * _sd(226.292679)
            + 0.000052 * _sd(249.663391)
            + 0.000009 * _sd(266.183510)
            + 0.419057 * _sd(79.398797)
        )
        dec = (
            54.432516
            + 0.000051 * _cd(122.433576)
            + 0.000141 * _cd(43.058401)
            + 0.000031 * _cd(57.663379)
            + 0.000005 * _cd(79.476401)
            + 1.591274 * _cd(166.325722)
        )
        w = (
            176.049863
            + 0.000145 * _sd(129.071773)
            + 0.000157 * _sd(36.352167)
            + 0.000040 * _sd(56.668646)
            + 0.000001 * _sd(67.364003)
            + 0.000001 * _sd(104.792680)
            + 0.584542 * _sd(95.391654)
        )
        _assert_orientation(report_2015.mars(0.0), ra, dec, w)

    def test_jupiter(self):
        ra = (
            268.056595
            + 0.000117 * _sd(99.360714)
            + 0.000938 * _sd(175.895369)
            + 0.001432 * _sd(300.323162)
            + 0.000030 * _sd(114.012305)
            + 0.002150 * _sd(49.511251)
        )
        dec = (
            64.495303
            + 0.000050 * _cd(99.360714)
            + 0.000404 * _cd(175.895369)
            + 0.000617 * _cd(300.323162)
            - 0.000013 * _cd(114.012305)
            + 0.000926 * _cd(49.511251)
        )
        _assert_orientation(report_2015.jupiter(0.0), ra, dec, 284.95)

    def test_neptune(self):
        ra = 299.36 + 0.70 * _sd(357.85)
        dec = 43.46 - 0.51 * _cd(357.85)
        w = 249.978 - 0.48 * _sd(357.85)
        _assert_orientation(report_2015.neptune(0.0), ra, dec, w)

    def test_moon(self):
        ra = (
            269.9949
            - 3.8787 * _sd(125.045) - 0.1204 * _sd(250.089)
            + 0.0700 * _sd(260.008) - 0.0172 * _sd(176.625)
            + 0.0072 * _sd(311.589) - 0.0052 * _sd(15.134)
            + 0.0043 * _sd(25.053)
        )
        dec = (
            66.5392
            + 1.5419 * _cd(125.045) + 0.0239 * _cd(250.089)
            - 0.0278 * _cd(260.008) + 0.0068 * _cd(176.625)
            - 0.0029 * _cd(311.589) + 0.0009 * _cd(134.963)
            + 0.0008 * _cd(15.134) - 0.0009 * _cd(25.053)
        )
        w = (
            38.3213
            + 3.5610 * _sd(125.045) + 0.1208 * _sd(250.089)
            - 0.0642 * _sd(260.008) + 0.0158 * _sd(176.625)
            + 0.0252 * _sd(357.529) - 0.0066 * _sd(311.589)
            - 0.0047 * _sd(134.963) - 0.0046 * _sd(276.617)
            + 0.0028 * _sd(34.226) + 0.0052 * _sd(15.134)
            + 0.0040 * _sd(119.743) + 0.0019 * _sd(239.961)
            - 0.0044 * _sd(25.053)
        )
        _assert_orientation(report_2009.moon(0.0), ra, dec, w)


# ===========================================================================
# Secular and rotation rates
# ===========================================================================


class TestRates:
    @pytest.mark.parametrize(
        "model, rate",
        [
            (report_2015.sol, 14.1844000),
            (report_2015.venus, -1.4813688),
            (report_2015.jupiter, 870.5360000),
            (report_2015.saturn, 810.7939024),
            (report_2015.uranus, -501.1600928),
            (report_2009.earth, 360.9856235),
        ],
    )
    def test_linear_meridian_rate(self, model, rate):
        t0, dt = 0.1, 0.01
        dw = float(model(t0 + dt).w) - float(model(t0).w)
        assert dw == pytest.approx(rate * dt * _DAYS, rel=1e-9)

    def test_saturn_pole_drift(self):
        result = report_2015.saturn(1.0)
        _assert_orientation(result, 40.589 - 0.036, 83.537 - 0.004, 38.90 + 810.7939024 * _DAYS, atol=1e-6)

    def test_earth_pole_drift(self):
        result = report_2009.earth(-1.0)
        assert float(result.ra) == pytest.approx(0.641, abs=1e-12)
        assert float(result.dec) == pytest.approx(90.557, abs=1e-12)

    def test_moon_meridian_away_from_epoch(self):
        """The Moon's W carries a -1.4e-12 d^2 drift on top of its linear rate."""
        t = 0.5
        d = t * _DAYS
        w = (
            38.3213 + 13.17635815 * d - 1.4e-12 * d * d
            + 3.5610 * _sd(125.045 - 0.0529921 * d) + 0.1208 * _sd(250.089 - 0.1059842 * d)
            - 0.0642 * _sd(260.008 + 13.0120009 * d) + 0.0158 * _sd(176.625 + 13.3407154 * d)
            + 0.0252 * _sd(357.529 + 0.9856003 * d) - 0.0066 * _sd(311.589 + 26.4057084 * d)
            - 0.0047 * _sd(134.963 + 13.0649930 * d) - 0.0046 * _sd(276.617 + 0.3287146 * d)
            + 0.0028 * _sd(34.226 + 1.7484877 * d) + 0.0052 * _sd(15.134 - 0.1589763 * d)
            + 0.0040 * _sd(119.743 + 0.0036096 * d) + 0.0019 * _sd(239.961 + 0.1643573 * d)
            - 0.0044 * _sd(25.053 + 12.9590088 * d)
        )
        assert float(report_2009.moon(t).w) == pytest.approx(w, abs=1e-6)

    def test_constant_pole_keeps_shape(self):
        t = jnp.linspace(-1.0, 1.0, 7)
        for model in (report_2015.sol, report_2015.venus, report_2015.uranus):
            result = model(t)
            assert result.ra.shape == (7,)
            assert result.dec.shape == (7,)
            assert jnp.all(result.ra == result.ra[0])


# ===========================================================================
# Model properties shared by every body
# ===========================================================================


class TestModelProperties:
    @pytest.mark.parametrize("name", sorted(_ALL_MODELS))
    def test_returns_orientation(self, name):
        result = _ALL_MODELS[name](0.25)
        assert isinstance(result, Orientation)
        assert all(jnp.isfinite(x) for x in result)

    @pytest.mark.parametrize("name", sorted(_ALL_MODELS))
    def test_deterministic(self, name):
        model = _ALL_MODELS[name]
        a = model(0.1234)
        b = model(0.1234)
        for x, y in zip(a, b):
            assert jnp.array_equal(x, y)

    @pytest.mark.parametrize("name", sorted(_ALL_MODELS))
    def test_jit_matches_eager(self, name):
        model = _ALL_MODELS[name]
        eager = model(0.05)
        jitted = jax.jit(model)(0.05)
        for x, y in zip(eager, jitted):
            assert jnp.allclose(x, y, rtol=1e-12, atol=1e-9)

    @pytest.mark.parametrize("name", sorted(_ALL_MODELS))
    def test_vmap_matches_loop(self, name):
        model = _ALL_MODELS[name]
        t = jnp.array([-0.3, 0.0, 0.2])
        batched = jax.vmap(model)(t)
        for i in range(3):
            single = model(t[i])
            for x, y in zip(batched, single):
                assert jnp.allclose(x[i], y, rtol=1e-12, atol=1e-9)

    @pytest.mark.parametrize("name", sorted(_ALL_MODELS))
    def test_nan_time_propagates_to_meridian(self, name):
        result = _ALL_MODELS[name](jnp.nan)
        assert jnp.isnan(result.w)

    def test_dtype_follows_config(self):
        result = report_2015.mars(0.0)
        assert result.ra.dtype == jnp.float64
        assert result.w.dtype == jnp.float64


# ===========================================================================
# Shared time arguments
# ===========================================================================


class TestTimeArguments:
    def test_day_count(self):
        T, d = time_arguments(0.25)
        assert float(T) == 0.25
        assert float(d) == pytest.approx(0.25 * _DAYS, abs=1e-9)
        assert T.dtype == jnp.float64
        assert d.dtype == jnp.float64

    def test_keeps_shape(self):
        T, d = time_arguments(jnp.array([[-1.0, 0.0], [0.5, 1.0]]))
        assert T.shape == (2, 2)
        assert jnp.allclose(d, T * _DAYS)

    def test_both_reports_share_day_count(self):
        """Earth and Sol W differ from their epoch values by rate * d for the same d."""
        t = 0.3
        _, d = time_arguments(t)
        assert float(report_2009.earth(t).w) == pytest.approx(190.147 + 360.9856235 * float(d), rel=1e-12)
        assert float(report_2015.sol(t).w) == pytest.approx(84.176 + 14.1844000 * float(d), rel=1e-12)
