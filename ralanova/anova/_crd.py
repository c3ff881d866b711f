"""
One-way sum-of-squares decomposition for a Completely Randomized Design.

For T treatments and R replications:

    SS_total     = sum over all observations of (y - grand_mean)^2
    SS_treatment = sum_t R * (mean_t - grand_mean)^2
    SS_error     = SS_total - SS_treatment
    df1 = T - 1,  df2 = T*R - T
    F = (SS_treatment / df1) / (SS_error / df2)

Divisions follow IEEE semantics (numpy float64 under errstate), so T = 1
or R = 0 produce NaN/Inf instead of raising.
"""

from typing import Any

import numpy as np

from ralanova.anova._common import AnovaTableRow, CRDDecomposition
from ralanova.descriptive._moments import (
    as_observations,
    flatten_table,
    mean,
    sum_of_squares,
    treatment_means,
)


def decompose_table(table: Any) -> CRDDecomposition:
    """
    Decompose the variation of one replication table.

    The number of treatments is the length of the first replication. Every
    observation, including the tail of an over-long replication, enters the
    total sum of squares and the grand mean. Such a tail also leaves a NaN
    slot in the means, so the treatment sum of squares and F are NaN.

    Args:
        table: Sequence of replications, each a sequence of observations

    Returns:
        CRDDecomposition with sums of squares, degrees of freedom and F
    """
    n_replications = len(table)
    n_treatments = len(as_observations(table[0])) if n_replications else 0

    observations = flatten_table(table)
    means = treatment_means(table, n_treatments)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        total_ss = np.float64(sum_of_squares(observations))
        grand_mean = np.float64(mean(observations))

        treatment_ss = np.float64(0.0)
        for m in means:
            treatment_ss += n_replications * (m - grand_mean) ** 2

        error_ss = total_ss - treatment_ss

        df1 = n_treatments - 1
        df2 = n_treatments * n_replications - n_treatments

        f_value = (treatment_ss / np.float64(df1)) / (error_ss / np.float64(df2))

    return CRDDecomposition(
        n_treatments=n_treatments,
        n_replications=n_replications,
        n_obs=int(observations.size),
        grand_mean=float(grand_mean),
        means=means,
        total_ss=float(total_ss),
        treatment_ss=float(treatment_ss),
        error_ss=float(error_ss),
        df1=df1,
        df2=df2,
        f_value=float(f_value),
    )


def calculate_f_value(table: Any) -> float:
    """F statistic of one table; NaN for an empty table."""
    return decompose_table(table).f_value


def is_ragged(table: Any) -> bool:
    """True if any replication differs in length from the first one."""
    lengths = {len(as_observations(row)) for row in table}
    return len(lengths) > 1


def build_anova_table(
    dec: CRDDecomposition,
    p_value: float,
) -> tuple[AnovaTableRow, ...]:
    """Treatment / Error / Total rows for a decomposition."""
    with np.errstate(divide='ignore', invalid='ignore'):
        ms_treatment = float(np.float64(dec.treatment_ss) / np.float64(dec.df1))
        ms_error = float(np.float64(dec.error_ss) / np.float64(dec.df2))

    return (
        AnovaTableRow(
            term='Treatment',
            df=dec.df1,
            sum_sq=dec.treatment_ss,
            mean_sq=ms_treatment,
            f_value=dec.f_value,
            p_value=p_value,
        ),
        AnovaTableRow(
            term='Error',
            df=dec.df2,
            sum_sq=dec.error_ss,
            mean_sq=ms_error,
            f_value=None,
            p_value=None,
        ),
        AnovaTableRow(
            term='Total',
            df=dec.n_obs - 1,
            sum_sq=dec.total_ss,
            mean_sq=None,
            f_value=None,
            p_value=None,
        ),
    )
