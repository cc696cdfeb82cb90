"""
Tests for rz_zeta: the eta-series zeta approximation, vector scans and the Euler balance.
"""

import math

import numpy as np
import pytest

from rz_complex import Complex
from rz_zeros import KNOWN_ZEROS
from rz_zeta import (
    clamp_magnitude,
    critical_line_scan,
    euler_balance,
    rotation_trace,
    zeta,
    zeta_array,
    zeta_eta,
    zeta_landscape,
)

ZETA_2 = math.pi ** 2 / 6
ZETA_4 = math.pi ** 4 / 90


class TestZetaReal:
    """Real arguments sigma > 1 against closed forms."""

    def test_zeta_2(self):
        z = zeta(Complex(2.0, 0.0), 500)
        assert z.re == pytest.approx(ZETA_2, abs=1e-3)
        assert z.im == pytest.approx(0.0, abs=1e-12)

    def test_zeta_4(self):
        assert zeta(Complex(4.0, 0.0), 500).re == pytest.approx(ZETA_4, abs=1e-6)

    def test_more_terms_get_closer(self):
        err = [abs(zeta(Complex(2.0, 0.0), n).re - ZETA_2) for n in (10, 100, 1000)]
        assert err[0] > err[1] > err[2]

    def test_eta_2(self):
        # eta(2) = pi^2 / 12
        assert zeta_eta(Complex(2.0, 0.0), 2000).re == pytest.approx(math.pi ** 2 / 12, abs=1e-6)


class TestZetaEdges:
    """Pole and degenerate parameters never raise."""

    def test_pole_returns_sentinel(self):
        z = zeta(Complex(1.0, 0.0), 100)
        assert math.isinf(z.re) and math.isinf(z.im)

    def test_zero_iterations(self):
        assert zeta(Complex(2.0, 0.0), 0) == Complex(0.0, 0.0)

    def test_negative_iterations(self):
        assert zeta(Complex(3.0, 1.0), -5) == Complex(0.0, 0.0)

    def test_near_pole_is_large(self):
        assert abs(zeta(Complex(1.0001, 0.0), 200)) > 100


class TestCriticalLine:
    """Behaviour on sigma = 1/2."""

    def test_first_zero_is_small(self):
        z = zeta(Complex(0.5, KNOWN_ZEROS[0]), 2000)
        assert abs(z) < 0.05

    def test_scan_matches_scalar(self):
        data = critical_line_scan(10.0, 30.0, iterations=120, steps=20)
        for i in (0, 7, 20):
            z = zeta(Complex(0.5, data["t"][i]), 120)
            assert data["re"][i] == pytest.approx(z.re, rel=1e-9, abs=1e-12)
            assert data["im"][i] == pytest.approx(z.im, rel=1e-9, abs=1e-12)
            assert data["magnitude"][i] == pytest.approx(abs(z), rel=1e-9, abs=1e-12)

    def test_scan_grid(self):
        data = critical_line_scan(0.0, 30.0, steps=400)
        assert len(data["t"]) == 401
        assert data["t"][0] == 0.0
        assert data["t"][-1] == pytest.approx(30.0)

    def test_scan_minimum_sits_on_a_known_zero(self):
        data = critical_line_scan(10.0, 30.0, iterations=1000, steps=400)
        t_min = data["t"][np.argmin(data["magnitude"])]
        assert min(abs(t_min - g) for g in KNOWN_ZEROS[:4]) < 0.1

    def test_empty_scan(self):
        assert critical_line_scan(0.0, 10.0, steps=0)["t"].size == 0


class TestArraysAndLandscape:
    """Vectorized evaluation and display clamping."""

    def test_array_pole(self):
        re, im = zeta_array(1.0, 0.0, 50)
        assert np.isinf(re) and np.isinf(im)

    def test_clamp(self):
        out = clamp_magnitude([1.0, 50.0, np.inf, np.nan], 10.0)
        assert out.tolist() == [1.0, 10.0, 10.0, 10.0]

    def test_landscape_shape_and_ceiling(self):
        data = zeta_landscape(0.0, 30.0, iterations=40, sigma_steps=12, t_steps=8)
        assert data["magnitude"].shape == (9, 13)
        assert data["phase"].shape == (9, 13)
        assert np.all(np.isfinite(data["magnitude"]))
        assert data["magnitude"].max() <= 10.0

    def test_landscape_phase_range(self):
        data = zeta_landscape(5.0, 20.0, iterations=40, sigma_steps=6, t_steps=6)
        assert np.all(np.abs(data["phase"]) <= math.pi)


class TestEulerBalance:
    """Sum over integers against the product over primes."""

    def test_both_sides_approach_zeta_2(self):
        r = euler_balance(2.0, 500)
        assert r["sum"] == pytest.approx(ZETA_2, abs=3e-3)
        assert r["product"] == pytest.approx(ZETA_2, abs=1e-2)
        assert r["benchmark"] == pytest.approx(ZETA_2)

    def test_first_terms(self):
        r = euler_balance(2.0, 100)
        assert [n for n, _ in r["sum_terms"]] == [1, 2, 3, 4, 5]
        assert [p for p, _ in r["product_terms"]] == [2, 3, 5, 7, 11]
        assert r["product_terms"][0][1] == pytest.approx(4.0 / 3.0)

    def test_benchmark_only_for_two(self):
        assert euler_balance(3.0, 50)["benchmark"] is None

    def test_status(self):
        assert euler_balance(1.1, 10)["status"] == "out of sync"

    @pytest.mark.parametrize("s", [0.0, -1.5])
    def test_non_positive_s_rejected(self, s):
        with pytest.raises(ValueError):
            euler_balance(s, 20)


class TestRotationTrace:
    """n^s drawn as a rotating vector."""

    def test_no_rotation_at_t_zero(self):
        r = rotation_trace(2.0, 1.0, 0.0)
        assert r["point"] == pytest.approx((2.0, 0.0))

    def test_trace_ends_at_point(self):
        r = rotation_trace(3.0, 0.5, 4.0, steps=50)
        assert len(r["x"]) == 51
        assert (r["x"][-1], r["y"][-1]) == pytest.approx(r["point"])
        assert r["magnitude"] == pytest.approx(math.sqrt(3.0))
        assert np.hypot(r["x"], r["y"]) == pytest.approx(np.full(51, math.sqrt(3.0)))
