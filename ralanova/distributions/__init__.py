"""
F distribution approximations.

Public API:
    calculate_p_value(f, df1, df2)         - Series approximation of P(F' > f)
    calculate_f_critical(alpha, df1, df2)  - Normal approximation of the F quantile
"""

from ralanova.distributions._f import (
    P_VALUE_SERIES_TERMS,
    TEXTBOOK_F_CRITICAL_01,
    TEXTBOOK_F_CRITICAL_05,
    calculate_f_critical,
    calculate_p_value,
)

__all__ = [
    "calculate_p_value",
    "calculate_f_critical",
    "P_VALUE_SERIES_TERMS",
    "TEXTBOOK_F_CRITICAL_05",
    "TEXTBOOK_F_CRITICAL_01",
]
