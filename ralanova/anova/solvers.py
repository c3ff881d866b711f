"""
CRD (RAL) solver dispatch.

Public API:
    calculate_ral(data) -> list[TableResult]   # pure per-table orchestrator
    anova_crd(data) -> CRDSolution             # timed, with warnings and export
"""

import math
import time
import warnings
from collections.abc import Mapping
from typing import Any

from ralanova.core.result import Result
from ralanova.core.validation import is_sequence
from ralanova.anova._common import RALParams, TableResult
from ralanova.anova._crd import build_anova_table, decompose_table, is_ragged
from ralanova.anova.design import Dataset, RALConfig
from ralanova.anova.solution import CRDSolution
from ralanova.distributions._f import calculate_f_critical, calculate_p_value

ALPHA_05 = 0.05
ALPHA_01 = 0.01


def _analyze_table(table: Any) -> TableResult:
    if not is_sequence(table) or len(table) == 0:
        return TableResult()

    dec = decompose_table(table)
    df1, df2 = dec.df1, dec.df2
    p_value = calculate_p_value(dec.f_value, df1, df2)

    return TableResult(
        labels=tuple(f"T{i + 1}" for i in range(dec.n_treatments)),
        means=dec.means,
        f_value=dec.f_value,
        p_value=p_value,
        f_critical_05=calculate_f_critical(ALPHA_05, df1, df2),
        f_critical_01=calculate_f_critical(ALPHA_01, df1, df2),
        df1=df1,
        df2=df2,
        table=build_anova_table(dec, p_value),
        grand_mean=dec.grand_mean,
        n_treatments=dec.n_treatments,
        n_replications=dec.n_replications,
    )


def calculate_ral(data: Any) -> list[TableResult]:
    """
    One-way ANOVA for each table of a Completely Randomized Design.

    Tables are analyzed independently and results come back in input order.
    Nothing here raises: a dataset that is not a sequence gives [], a table
    that is not a sequence (or has no replications) gives a TableResult with
    empty labels/means and None statistics, and degenerate tables give NaN.

    Args:
        data: Sequence of tables; each table is a sequence of replications,
            each replication a sequence of observations (one per treatment)

    Returns:
        List of TableResult, result[i] for data[i]

    Examples:
        >>> results = calculate_ral([[[1, 2], [3, 4]]])
        >>> results[0].means
        (2.0, 3.0)
        >>> results[0].df1, results[0].df2
        (1, 2)
    """
    if not is_sequence(data):
        return []
    return [_analyze_table(table) for table in data]


def _resolve_input(data: Any) -> tuple[Any, RALConfig | None]:
    """Raw dataset plus the config it came from, if any."""
    if isinstance(data, RALConfig):
        config = data
        data = config.data
    elif isinstance(data, Mapping):
        config = RALConfig.from_mapping(data)
        data = config.data
    else:
        config = None
    if isinstance(data, Dataset):
        data = data.to_list()
    return data, config


def _collect_warnings(
    data: Any,
    results: list[TableResult],
    config: RALConfig | None,
) -> list[str]:
    warn_list = []
    if not is_sequence(data):
        warn_list.append("data is not a sequence of tables; nothing analyzed")
        return warn_list

    if config is not None and len(results) != config.tables:
        warn_list.append(
            f"config declares {config.tables} tables, data has {len(results)}"
        )

    for i, (table, res) in enumerate(zip(data, results), start=1):
        if res.df1 is None:
            warn_list.append(f"Table {i}: no readable replications; statistics are absent")
            continue
        if is_ragged(table):
            warn_list.append(
                f"Table {i}: replications differ in length; "
                f"using {res.n_treatments} treatments from the first replication"
            )
        if config is not None and (
            res.n_treatments != config.treatments
            or res.n_replications != config.replications
        ):
            warn_list.append(
                f"Table {i}: expected {config.replications}x{config.treatments}, "
                f"got {res.n_replications}x{res.n_treatments}"
            )
        error_row = res.table[1]
        if error_row.sum_sq < 0:
            warn_list.append(
                f"Table {i}: error sum of squares is negative "
                f"({error_row.sum_sq:.3e}) from rounding; not clamped"
            )
        if not math.isfinite(res.f_value):
            warn_list.append(f"Table {i}: F statistic is undefined ({res.f_value})")
    return warn_list


def anova_crd(data: Any) -> CRDSolution:
    """
    One-way ANOVA for a Completely Randomized Design (RAL), all tables.

    Runs calculate_ral() and wraps the results with timing, metadata and
    non-fatal warnings (ragged tables, negative error SS, undefined F).
    Warnings are also emitted as RuntimeWarning.

    Args:
        data: Raw sequence of tables, a Dataset, a RALConfig, or a mapping
            with 'treatments', 'replications', 'tables' and 'data'

    Returns:
        CRDSolution with per-table results, summary and export helpers

    Raises:
        ValidationError: If a config (or mapping) has invalid counts

    Examples:
        >>> sol = anova_crd({'treatments': 3, 'replications': 4, 'tables': 1,
        ...                  'data': [[[10, 12, 15], [11, 13, 16],
        ...                            [9, 12, 14], [10, 14, 15]]]})
        >>> print(sol.summary())
        >>> sol[0].f_value
    """
    t0 = time.perf_counter()

    raw, config = _resolve_input(data)
    results = calculate_ral(raw)

    elapsed = time.perf_counter() - t0

    warn_list = _collect_warnings(raw, results, config)
    for msg in warn_list:
        warnings.warn(msg, RuntimeWarning, stacklevel=2)

    params = RALParams(
        tables=tuple(results),
        n_tables=len(results),
    )

    result = Result(
        params=params,
        info={
            'design_type': 'crd',
            'n_tables': len(results),
            'alpha_levels': (ALPHA_05, ALPHA_01),
            '_data': raw,
        },
        timing={'total_seconds': elapsed},
        backend_name='cpu',
        warnings=tuple(warn_list),
    )

    return CRDSolution(_result=result)
