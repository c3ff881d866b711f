"""
Plain-text and structured export of CRD inputs and results.

Tab-separated layouts paste directly into spreadsheets:

    Replication/Treatment   T1  T2  T3
    R1                      12  15  9
    ...

    Metric      Value
    F-value     4.2871
    P-value     N/A
    ...
"""

import math
from typing import Any, Iterable

from ralanova.anova._common import AnovaTableRow, TableResult
from ralanova.core.validation import is_sequence
from ralanova.descriptive._moments import as_observations
from ralanova.distributions._f import TEXTBOOK_F_CRITICAL_01, TEXTBOOK_F_CRITICAL_05

NOT_AVAILABLE = 'N/A'


def is_defined(value: float | None) -> bool:
    return value is not None and not math.isnan(value)


def format_statistic(value: float | None, digits: int = 4) -> str:
    """Fixed-point text with `digits` decimals, 'N/A' for None or NaN."""
    if not is_defined(value):
        return NOT_AVAILABLE
    return f"{value:.{digits}f}"


def format_observation(value: float) -> str:
    """Shortest text for an observation: 12 rather than 12.0."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def json_number(value: float | None) -> float | None:
    """None for values JSON cannot represent (None, NaN, +/-Inf)."""
    if value is None or not math.isfinite(value):
        return None
    return float(value)


def format_input_tsv(data: Any) -> str:
    """
    Input tables as tab-separated blocks, separated by a blank line.

    The header row names treatments T1..Tn, where n is the longest
    replication of the table. Tables that are not sequences give a bare
    header.
    """
    blocks = []
    for table in (data if is_sequence(data) else ()):
        rows = [as_observations(r) for r in table] if is_sequence(table) else []
        width = max((r.size for r in rows), default=0)
        lines = ["\t".join(["Replication/Treatment"] + [f"T{j + 1}" for j in range(width)])]
        for i, row in enumerate(rows):
            lines.append("\t".join([f"R{i + 1}"] + [format_observation(v) for v in row]))
        blocks.append("\n".join(lines) + "\n")
    return "\n".join(blocks)


def format_result_tsv(result: TableResult, index: int) -> str:
    """Metric/Value block for one table, 1-based index in the title line."""
    lines = [f"Table {index}", "Metric\tValue"]
    for label, m in zip(result.labels, result.means):
        lines.append(f"Mean {label}\t{format_statistic(m)}")
    lines.extend([
        f"F-value\t{format_statistic(result.f_value)}",
        f"P-value\t{format_statistic(result.p_value)}",
        f"Significance Level (α = 0.05)\t{TEXTBOOK_F_CRITICAL_05:.2f}",
        f"Significance Level (α = 0.01)\t{TEXTBOOK_F_CRITICAL_01:.2f}",
        f"F-critical approx. (α = 0.05)\t{format_statistic(result.f_critical_05)}",
        f"F-critical approx. (α = 0.01)\t{format_statistic(result.f_critical_01)}",
    ])
    return "\n".join(lines) + "\n"


def format_results_tsv(results: Iterable[TableResult]) -> str:
    return "\n".join(
        format_result_tsv(r, i + 1) for i, r in enumerate(results)
    )


def _row_to_dict(row: AnovaTableRow) -> dict[str, Any]:
    return {
        'term': row.term,
        'df': row.df,
        'sum_sq': json_number(row.sum_sq),
        'mean_sq': json_number(row.mean_sq),
        'f_value': json_number(row.f_value),
        'p_value': json_number(row.p_value),
    }


def result_to_dict(result: TableResult) -> dict[str, Any]:
    """JSON-safe mapping of one TableResult; NaN/Inf/None become None."""
    return {
        'labels': list(result.labels),
        'means': [json_number(m) for m in result.means],
        'f_value': json_number(result.f_value),
        'p_value': json_number(result.p_value),
        'f_critical_05': json_number(result.f_critical_05),
        'f_critical_01': json_number(result.f_critical_01),
        'df1': result.df1,
        'df2': result.df2,
        'grand_mean': json_number(result.grand_mean),
        'n_treatments': result.n_treatments,
        'n_replications': result.n_replications,
        'anova_table': [_row_to_dict(row) for row in result.table],
    }
