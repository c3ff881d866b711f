"""
Closed-form approximations for the F distribution.

p-value: fixed 100-term power series for the regularized incomplete beta
function evaluated at x = df2 / (df2 + df1 * F). There is no convergence
check; for extreme F or df the series may diverge and the result is returned
as is.

Critical value: Wilson-Hilferty style normal approximation to the inverse F
distribution. w = sqrt(z / (1 - z)) is only real while 4 alpha (1 - alpha)
exceeds 1/e, i.e. for alpha roughly in (0.107, 0.893). At the conventional
levels 0.05 and 0.01 the formula therefore yields NaN, which is why the
textbook constants below are reported alongside it.
"""

import numpy as np

from ralanova.special._gamma import beta

P_VALUE_SERIES_TERMS = 100

# Reference values shown next to the approximation in the result table
TEXTBOOK_F_CRITICAL_05 = 3.10
TEXTBOOK_F_CRITICAL_01 = 5.14


def calculate_p_value(f_value: float | None, df1: float, df2: float) -> float:
    """
    Approximate upper-tail p-value for an F statistic.

    Args:
        f_value: Observed F statistic
        df1: Numerator (between-treatment) degrees of freedom
        df2: Denominator (error) degrees of freedom

    Returns:
        Approximate p-value, or NaN when f_value is None, NaN, zero or
        negative
    """
    if f_value is None or np.isnan(f_value) or f_value <= 0:
        return float('nan')

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        f = np.float64(f_value)
        x = np.float64(df2) / (df2 + df1 * f)
        a = np.float64(df2) / 2
        b = np.float64(df1) / 2

        term = np.float64(1.0)
        total = np.float64(1.0)
        for i in range(P_VALUE_SERIES_TERMS):
            term *= (a + i) * (1 - x) / (b + i + 1)
            total += term

        beta_ab = beta(a, b)
        return float(np.power(x, a) * np.power(1 - x, b) * total / (a * beta_ab))


def calculate_f_critical(alpha: float, df1: float, df2: float) -> float:
    """
    Approximate critical F value at significance level alpha.

    Args:
        alpha: Significance level, strictly between 0 and 1
        df1: Numerator degrees of freedom
        df2: Denominator degrees of freedom

    Returns:
        Approximate F quantile at 1 - alpha, or NaN if alpha is outside (0, 1)
    """
    if not 0 < alpha < 1:
        return float('nan')

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        a = np.float64(alpha)
        z = -np.log(4 * a * (1 - a))
        w = np.sqrt(z / (1 - z))
        d1 = np.float64(df1)
        d2 = np.float64(df2)
        numerator = w * (1 - 1 / (9 * d2)) - (1 - 1 / (9 * d1))
        denominator = np.sqrt(1 / (9 * d1) + w * w / (9 * d2))
        return float(np.power(numerator / denominator, 2))
