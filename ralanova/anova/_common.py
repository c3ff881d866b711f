"""
Common data types for CRD (RAL) analysis of variance.

Contains the frozen payloads that go inside Result[P] envelopes.
Each payload is a pure data container — no methods, no computation.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AnovaTableRow:
    """One row of a one-way ANOVA table (Treatment, Error or Total)."""
    term: str
    df: int
    sum_sq: float
    mean_sq: float | None    # None for Total row
    f_value: float | None    # None for Error and Total rows
    p_value: float | None    # None for Error and Total rows


@dataclass(frozen=True)
class CRDDecomposition:
    """
    Sum-of-squares decomposition of one replication table.

    error_ss is total_ss - treatment_ss without clamping, so it can come out
    slightly negative from rounding when the treatments explain everything.
    """
    n_treatments: int
    n_replications: int
    n_obs: int
    grand_mean: float
    means: tuple[float, ...]
    total_ss: float
    treatment_ss: float
    error_ss: float
    df1: int
    df2: int
    f_value: float


@dataclass(frozen=True)
class TableResult:
    """
    Analysis of one table.

    None marks an explicitly absent statistic (the table could not be read);
    NaN marks a statistic that was computed but is undefined.
    """
    labels: tuple[str, ...] = ()
    means: tuple[float, ...] = ()
    f_value: float | None = None
    p_value: float | None = None
    f_critical_05: float | None = None
    f_critical_01: float | None = None
    df1: int | None = None
    df2: int | None = None
    table: tuple[AnovaTableRow, ...] = field(default_factory=tuple)
    grand_mean: float | None = None
    n_treatments: int = 0
    n_replications: int = 0


@dataclass(frozen=True)
class RALParams:
    """Parameter payload for a multi-table CRD analysis."""
    tables: tuple[TableResult, ...]
    n_tables: int
