"""
One-way Analysis of Variance for Completely Randomized Designs (RAL).

Public API:
    calculate_ral(data) -> list[TableResult]     # per-table orchestrator
    anova_crd(data) -> CRDSolution               # timed, with warnings/export
    calculate_f_value(table) -> float            # F statistic of one table
    decompose_table(table) -> CRDDecomposition   # SS / df / F of one table
    RALConfig, Dataset                           # input model
"""

from ralanova.anova._common import (
    AnovaTableRow,
    CRDDecomposition,
    RALParams,
    TableResult,
)
from ralanova.anova._crd import calculate_f_value, decompose_table
from ralanova.anova.design import Dataset, RALConfig
from ralanova.anova.solution import CRDSolution
from ralanova.anova.solvers import anova_crd, calculate_ral

__all__ = [
    "calculate_ral",
    "anova_crd",
    "calculate_f_value",
    "decompose_table",
    "RALConfig",
    "Dataset",
    "CRDSolution",
    "TableResult",
    "AnovaTableRow",
    "CRDDecomposition",
    "RALParams",
]
