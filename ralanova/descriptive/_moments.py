"""
Basic aggregations over numeric series and replication tables.

None of these functions raise on degenerate input. Empty series give NaN,
unreadable observations are read as NaN and propagate through the sums.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from ralanova.core.validation import is_sequence


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        return float('inf') if value > 0 else float('-inf')
    except (TypeError, ValueError):
        return float('nan')


def _running_sum(arr: NDArray[np.float64]) -> np.float64:
    # left to right, one addition per element
    if arr.size == 0:
        return np.float64(0.0)
    return np.cumsum(arr)[-1]


def as_observations(row: Any) -> NDArray[np.float64]:
    """
    Read one replication as a float64 vector.

    A replication that is not a sequence holds no observations and comes
    back empty. Entries that cannot be read as numbers become NaN.
    """
    if not is_sequence(row):
        return np.empty(0, dtype=np.float64)
    if isinstance(row, np.ndarray) and np.issubdtype(row.dtype, np.number):
        return row.astype(np.float64).ravel()
    return np.array([_to_float(v) for v in row], dtype=np.float64)


def flatten_table(table: Any) -> NDArray[np.float64]:
    """All observations of a table, replication by replication."""
    rows = [as_observations(row) for row in table]
    if not rows:
        return np.empty(0, dtype=np.float64)
    return np.concatenate(rows)


def mean(values: Any) -> float:
    """Arithmetic mean; NaN for an empty series."""
    arr = as_observations(values)
    if arr.size == 0:
        return float('nan')
    with np.errstate(invalid='ignore', over='ignore'):
        return float(_running_sum(arr) / arr.size)


def sum_of_squares(values: Any) -> float:
    """
    Sum of squared deviations from the mean, sum((x - mean(x))^2).

    Both sums are accumulated left to right in input order.

    Args:
        values: Ordered sequence of reals

    Returns:
        The corrected sum of squares, or NaN when values is empty
    """
    arr = as_observations(values)
    if arr.size == 0:
        return float('nan')
    with np.errstate(invalid='ignore', over='ignore'):
        center = _running_sum(arr) / arr.size
        return float(_running_sum((arr - center) ** 2))


def treatment_means(
    table: Any,
    n_treatments: int | None = None,
) -> tuple[float, ...]:
    """
    Per-treatment means of a replication table.

    mean[t] is accumulated as a running sum of value / R over the R
    replications. A short replication contributes nothing to its missing
    trailing treatments. A value beyond n_treatments lands in a slot that
    has no treatment behind it; such slots are appended to the result as
    NaN, so the treatment sum of squares and F built on them are NaN too.

    Args:
        table: Sequence of replications
        n_treatments: Number of treatments; defaults to the length of the
            first replication

    Returns:
        Tuple of n_treatments floats, followed by one NaN per extra slot
        reached by an over-long replication
    """
    n_replications = len(table)
    if n_treatments is None:
        n_treatments = len(as_observations(table[0])) if n_replications else 0

    rows = [as_observations(row) for row in table]
    width = max([n_treatments] + [values.size for values in rows])

    means = np.zeros(width, dtype=np.float64)
    means[n_treatments:] = np.nan
    with np.errstate(invalid='ignore', over='ignore'):
        for values in rows:
            means[:values.size] += values / n_replications
    return tuple(float(m) for m in means)
