"""
Tests for the one-way sum-of-squares decomposition.

Validates:
    - SS partition, df and F on hand-computed tables
    - F agrees with scipy.stats.f_oneway
    - Degenerate tables (constant, single treatment, empty) give NaN
    - Ragged tables: over-long tails enter SS_total and leave F undefined
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from ralanova.anova import calculate_f_value, decompose_table
from ralanova.anova._crd import build_anova_table, is_ragged


class TestTwoByTwo:

    def test_dimensions(self, two_by_two):
        dec = decompose_table(two_by_two)
        assert dec.n_treatments == 2
        assert dec.n_replications == 2
        assert dec.n_obs == 4

    def test_means(self, two_by_two):
        dec = decompose_table(two_by_two)
        assert dec.grand_mean == 2.5
        assert dec.means == (2.0, 3.0)

    def test_sums_of_squares(self, two_by_two):
        dec = decompose_table(two_by_two)
        assert dec.total_ss == pytest.approx(5.0)
        assert dec.treatment_ss == pytest.approx(1.0)
        assert dec.error_ss == pytest.approx(4.0)

    def test_degrees_of_freedom(self, two_by_two):
        dec = decompose_table(two_by_two)
        assert dec.df1 == 1
        assert dec.df2 == 2

    def test_f_value(self, two_by_two):
        assert calculate_f_value(two_by_two) == pytest.approx(0.5)


class TestThreeByFour:

    def test_f_value(self, three_by_four):
        # (50.1667 / 2) / (6.75 / 9)
        assert calculate_f_value(three_by_four) == pytest.approx(33.444444444, rel=1e-9)

    def test_matches_scipy_f_oneway(self, three_by_four):
        columns = np.array(three_by_four, dtype=float).T
        expected = sp_stats.f_oneway(*columns).statistic
        np.testing.assert_allclose(calculate_f_value(three_by_four), expected, rtol=1e-10)

    def test_ss_partition(self, three_by_four):
        dec = decompose_table(three_by_four)
        np.testing.assert_allclose(dec.treatment_ss + dec.error_ss, dec.total_ss, rtol=1e-12)

    def test_degrees_of_freedom(self, three_by_four):
        dec = decompose_table(three_by_four)
        assert (dec.df1, dec.df2) == (2, 9)

    def test_random_tables_match_scipy(self, rng):
        for _ in range(5):
            table = rng.normal(50.0, 10.0, size=(6, 4))
            expected = sp_stats.f_oneway(*table.T).statistic
            np.testing.assert_allclose(calculate_f_value(table), expected, rtol=1e-9)


class TestDegenerate:

    def test_constant_table(self, constant_table):
        dec = decompose_table(constant_table)
        assert dec.means == (5.0, 5.0, 5.0)
        assert dec.treatment_ss == 0.0
        assert dec.error_ss == 0.0
        # 0 / 0
        assert math.isnan(dec.f_value)

    def test_single_treatment(self):
        dec = decompose_table([[1], [2], [4]])
        assert dec.df1 == 0
        # division by df1 = 0: NaN or Inf depending on rounding of the means
        assert not math.isfinite(dec.f_value)

    def test_zero_error_gives_infinite_f(self):
        # treatments differ, replications identical
        dec = decompose_table([[1, 2], [1, 2]])
        assert dec.error_ss == pytest.approx(0.0, abs=1e-12)
        assert math.isinf(dec.f_value) or abs(dec.f_value) > 1e12

    def test_empty_table(self):
        dec = decompose_table([])
        assert dec.n_treatments == 0
        assert dec.means == ()
        assert math.isnan(dec.f_value)
        assert math.isnan(calculate_f_value([]))

    def test_error_ss_not_clamped(self):
        dec = decompose_table([[0.1, 0.7], [0.1, 0.7], [0.1, 0.7]])
        assert dec.error_ss == dec.total_ss - dec.treatment_ss


class TestRagged:

    def test_detection(self):
        assert is_ragged([[1, 2], [3]])
        assert not is_ragged([[1, 2], [3, 4]])

    def test_over_long_tail_poisons_f(self):
        dec = decompose_table([[1, 2], [3, 4, 9]])
        assert dec.n_treatments == 2
        assert dec.n_obs == 5
        assert dec.means[:2] == (2.0, 3.0)
        assert math.isnan(dec.means[2])
        # the tail still enters the grand mean and total SS
        assert dec.grand_mean == pytest.approx(19.0 / 5.0)
        assert dec.total_ss == pytest.approx(38.8)
        assert math.isnan(dec.treatment_ss)
        assert math.isnan(dec.f_value)

    def test_short_row_does_not_raise(self):
        dec = decompose_table([[1, 2, 3], [4]])
        assert dec.n_treatments == 3
        assert dec.means == pytest.approx((2.5, 1.0, 1.5))


class TestAnovaTable:

    def test_rows(self, three_by_four):
        dec = decompose_table(three_by_four)
        rows = build_anova_table(dec, 0.03)
        assert [r.term for r in rows] == ['Treatment', 'Error', 'Total']
        assert [r.df for r in rows] == [2, 9, 11]
        assert rows[0].f_value == dec.f_value
        assert rows[0].p_value == 0.03
        assert rows[1].f_value is None
        assert rows[2].mean_sq is None

    def test_f_is_ms_ratio(self, three_by_four):
        rows = build_anova_table(decompose_table(three_by_four), 0.03)
        np.testing.assert_allclose(rows[0].f_value, rows[0].mean_sq / rows[1].mean_sq, rtol=1e-12)
