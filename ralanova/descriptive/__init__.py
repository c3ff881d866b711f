"""
Descriptive statistics module.

Public API:
    sum_of_squares(x)         - Corrected sum of squares
    mean(x)                   - Arithmetic mean
    treatment_means(table)    - Per-treatment means of a replication table
    as_observations(row)      - Read one replication as float64
    flatten_table(table)      - All observations of a table
"""

from ralanova.descriptive._moments import (
    as_observations,
    flatten_table,
    mean,
    sum_of_squares,
    treatment_means,
)

__all__ = [
    "sum_of_squares",
    "mean",
    "treatment_means",
    "as_observations",
    "flatten_table",
]
