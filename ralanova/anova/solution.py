"""
User-facing CRD solution type.

Wraps a Result[RALParams] and provides per-table access, a formatted
summary, and tab-separated / JSON export of inputs and results.
"""

import json
from dataclasses import dataclass
from typing import Any, Iterator

from ralanova.core.result import Result
from ralanova.anova._common import RALParams, TableResult
from ralanova.anova._export import (
    format_input_tsv,
    format_results_tsv,
    format_statistic,
    is_defined,
    result_to_dict,
)
from ralanova.distributions._f import TEXTBOOK_F_CRITICAL_01, TEXTBOOK_F_CRITICAL_05


@dataclass
class CRDSolution:
    """
    User-facing result for a multi-table CRD (RAL) analysis.

    Produced by anova_crd(). Indexing returns the TableResult of the
    corresponding input table.
    """
    _result: Result[RALParams]

    @property
    def tables(self) -> tuple[TableResult, ...]:
        return self._result.params.tables

    @property
    def n_tables(self) -> int:
        return self._result.params.n_tables

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __len__(self) -> int:
        return self.n_tables

    def __getitem__(self, index: int) -> TableResult:
        return self.tables[index]

    def __iter__(self) -> Iterator[TableResult]:
        return iter(self.tables)

    def is_significant(self, index: int, alpha: float = 0.05) -> bool | None:
        """
        Whether table `index` rejects equal treatment means at level alpha.

        Decided on the approximate p-value. None if the p-value is absent
        or NaN.
        """
        p = self.tables[index].p_value
        if not is_defined(p):
            return None
        return bool(p < alpha)

    def summary(self) -> str:
        """Text report: means, ANOVA table and critical values per table."""
        lines = [
            "Completely Randomized Design (RAL) - One-way ANOVA",
            "=" * 72,
            f"Tables: {self.n_tables}",
        ]

        for i, res in enumerate(self.tables, start=1):
            lines.append("")
            if res.df1 is None:
                lines.append(f"Table {i}: no data")
                continue

            lines.append(
                f"Table {i}: {res.n_treatments} treatments x "
                f"{res.n_replications} replications"
            )
            lines.append("-" * 72)
            lines.append(
                f"{'Source':<12} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} "
                f"{'F value':>10} {'Pr(>F)':>10}"
            )
            for row in res.table:
                line = f"{row.term:<12} {row.df:>6} {format_statistic(row.sum_sq):>14}"
                if row.mean_sq is not None:
                    line += f" {format_statistic(row.mean_sq):>14}"
                if row.f_value is not None:
                    line += (
                        f" {format_statistic(row.f_value):>10}"
                        f" {format_statistic(row.p_value):>10}"
                    )
                lines.append(line)
            lines.append("-" * 72)

            means = "  ".join(
                f"{label} = {format_statistic(m)}"
                for label, m in zip(res.labels, res.means)
            )
            lines.append(f"Treatment means: {means}")
            lines.append(f"Grand mean: {format_statistic(res.grand_mean)}")
            lines.append(
                f"F-critical (alpha=0.05): {format_statistic(res.f_critical_05)} "
                f"[textbook {TEXTBOOK_F_CRITICAL_05:.2f}]"
            )
            lines.append(
                f"F-critical (alpha=0.01): {format_statistic(res.f_critical_01)} "
                f"[textbook {TEXTBOOK_F_CRITICAL_01:.2f}]"
            )

            decision = self.is_significant(i - 1, 0.05)
            if decision is None:
                lines.append("Decision: N/A")
            elif decision:
                lines.append("Decision: treatment means differ (p < 0.05)")
            else:
                lines.append("Decision: no significant difference (p >= 0.05)")

        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  {w}")

        return "\n".join(lines)

    def to_tsv(self) -> str:
        """Results as tab-separated Metric/Value blocks, one per table."""
        return format_results_tsv(self.tables)

    def input_tsv(self) -> str:
        """The analyzed tables as tab-separated text."""
        return format_input_tsv(self.info.get('_data'))

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe structure; undefined statistics are None."""
        return {
            'design_type': self.info.get('design_type'),
            'n_tables': self.n_tables,
            'tables': [result_to_dict(r) for r in self.tables],
            'warnings': list(self.warnings),
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, allow_nan=False, ensure_ascii=False)

    def __repr__(self) -> str:
        return (
            f"CRDSolution(n_tables={self.n_tables}, "
            f"warnings={len(self.warnings)})"
        )
