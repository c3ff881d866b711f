"""
Tests for the Lanczos gamma and beta functions.

Validates:
    - Integer factorials and half-integer values
    - Agreement with scipy.special across the df/2 domain
    - Reflection formula for z < 0.5
    - Poles return Inf/NaN instead of raising
"""

import math

import numpy as np
import pytest
from scipy import special as sp_special

from ralanova.special import LANCZOS_COEFFICIENTS, LANCZOS_G, beta, gamma


class TestGammaKnownValues:

    def test_gamma_5_is_factorial(self):
        assert gamma(5) == pytest.approx(24.0, rel=1e-6)

    def test_gamma_half_is_sqrt_pi(self):
        assert gamma(0.5) == pytest.approx(math.sqrt(math.pi), rel=1e-6)

    def test_gamma_one(self):
        assert gamma(1) == pytest.approx(1.0, rel=1e-12)

    @pytest.mark.parametrize("n", range(1, 15))
    def test_factorials(self, n):
        assert gamma(n) == pytest.approx(math.factorial(n - 1), rel=1e-10)

    def test_returns_python_float(self):
        assert type(gamma(2.5)) is float


class TestGammaAgainstScipy:
    """Half-integer arguments are what df/2 produces."""

    def test_half_integers(self):
        z = np.arange(0.5, 40.0, 0.5)
        ours = np.array([gamma(v) for v in z])
        np.testing.assert_allclose(ours, sp_special.gamma(z), rtol=1e-9)

    def test_non_grid_values(self):
        z = np.array([0.7, 1.3, 2.9, 7.25, 12.1])
        ours = np.array([gamma(v) for v in z])
        np.testing.assert_allclose(ours, sp_special.gamma(z), rtol=1e-9)


class TestGammaReflection:

    def test_negative_half(self):
        assert gamma(-0.5) == pytest.approx(-2.0 * math.sqrt(math.pi), rel=1e-9)

    def test_small_positive(self):
        assert gamma(0.25) == pytest.approx(sp_special.gamma(0.25), rel=1e-9)

    def test_negative_non_integer(self):
        assert gamma(-1.5) == pytest.approx(sp_special.gamma(-1.5), rel=1e-9)


class TestGammaNeverRaises:

    def test_pole_at_zero(self):
        assert math.isinf(gamma(0.0))

    def test_nan_propagates(self):
        assert math.isnan(gamma(float('nan')))

    def test_large_argument_overflows_to_inf(self):
        assert math.isinf(gamma(500.0))


class TestConstants:

    def test_lanczos_table(self):
        assert LANCZOS_G == 7
        assert len(LANCZOS_COEFFICIENTS) == 8
        assert LANCZOS_COEFFICIENTS[0] == 676.5203681218851
        assert LANCZOS_COEFFICIENTS[-1] == 1.5056327351493116e-7


class TestBeta:

    def test_beta_one_one(self):
        assert beta(1, 1) == pytest.approx(1.0, rel=1e-12)

    def test_beta_two_three(self):
        assert beta(2, 3) == pytest.approx(1.0 / 12.0, rel=1e-10)

    def test_symmetric(self):
        assert beta(2.5, 4.0) == pytest.approx(beta(4.0, 2.5), rel=1e-14)

    @pytest.mark.parametrize("a,b", [(0.5, 0.5), (1.0, 4.5), (2.5, 10.0), (7.0, 0.5)])
    def test_against_scipy(self, a, b):
        assert beta(a, b) == pytest.approx(sp_special.beta(a, b), rel=1e-9)
