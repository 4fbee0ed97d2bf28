# filename: cyto_profile/modules/differential/computation.py
"""
Differential comparison computations for volcano-style analyses.

For every requested group pair this module computes per-variable fold-change and
Welch t-test significance, flags variables that pass both thresholds, ranks them
and labels the top entries. Rendering is left to the caller, which receives the
reference-line thresholds alongside each table.
"""

import logging
from itertools import combinations
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from cyto_profile.core import config as core_config
from cyto_profile.core.data_models import ComparisonResult
from cyto_profile.core.utils import format_pair_key, select_measurement_columns
from .statistics import log2_fold_change, neg_log10, two_sample_test

logger = logging.getLogger(__name__)

STAT_COLUMNS = [
    'variable', 'n_1', 'n_2', 'mean_1', 'mean_2', 'var_1', 'var_2',
    'fold_change', 'log2_fc', 'p_value', 'neg_log10_p',
]

VOLCANO_COLUMNS = [
    'variable', 'log2_fc', 'neg_log10_p', 'significant', 'label',
    'mean_1', 'mean_2', 'fold_change', 'p_value',
]


def as_observation_table(data) -> pd.DataFrame:
    """Accept a DataFrame, a list of records or a column mapping as a DataFrame."""
    if isinstance(data, pd.DataFrame):
        return data
    return pd.DataFrame(data)


def resolve_group_pairs(data: pd.DataFrame, group_col: str,
                        cond1: Any = None, cond2: Any = None) -> List[Tuple[Any, Any]]:
    """
    Determine the group pairs to compare.

    Args:
        data: Observation table.
        group_col: Name of the grouping column.
        cond1, cond2: Optional explicit pair. Used only when both are given.

    Returns:
        List of (cond1, cond2) tuples in processing order: the explicit pair, or
        every 2-combination of the group levels in first-encountered order.

    Raises:
        ValueError: If `group_col` is missing, the explicit pair repeats a label,
            or fewer than two group levels exist without an explicit pair.
    """
    if group_col not in data.columns:
        raise ValueError(
            f"Group column '{group_col}' not found in data. "
            f"Available columns: {data.columns.tolist()}"
        )

    if cond1 is not None and cond2 is not None:
        if cond1 == cond2:
            raise ValueError(f"Cannot compare group '{cond1}' with itself; cond1 and cond2 must differ.")
        return [(cond1, cond2)]

    levels = pd.unique(data[group_col].dropna())
    if len(levels) < 2:
        raise ValueError(
            f"Insufficient groups in column '{group_col}': found {len(levels)} "
            f"distinct level(s) {list(levels)}, need at least 2."
        )
    pairs = list(combinations(levels, 2))
    logger.debug(f"Enumerated {len(pairs)} group pairs from levels {list(levels)}.")
    return pairs


def compute_pair_statistics(data: pd.DataFrame, group_col: str, cond1: Any, cond2: Any,
                            columns: Sequence[str]) -> pd.DataFrame:
    """
    Per-variable summary statistics for one group pair.

    Rows with group == cond1 form subset 1 and rows with group == cond2 form
    subset 2. Means and variances ignore missing values. Degenerate subsets
    produce NaN/inf values rather than errors.

    Returns:
        DataFrame with one row per column in `columns` (same order) and the
        columns listed in STAT_COLUMNS. fold_change = mean_2 / mean_1.
    """
    subset_1 = data.loc[data[group_col] == cond1, list(columns)]
    subset_2 = data.loc[data[group_col] == cond2, list(columns)]
    if len(subset_1) == 0 or len(subset_2) == 0:
        logger.warning(
            f"Group pair {format_pair_key(cond1, cond2)} has {len(subset_1)} and {len(subset_2)} "
            f"matching rows; statistics for this pair will be undefined."
        )

    records = []
    for col in columns:
        # Nullable Int64/Float64 columns become plain float64 with NaN for missing
        values_1 = pd.to_numeric(subset_1[col], errors='coerce').astype('float64')
        values_2 = pd.to_numeric(subset_2[col], errors='coerce').astype('float64')
        records.append({
            'variable': col,
            'n_1': int(values_1.count()),
            'n_2': int(values_2.count()),
            'mean_1': values_1.mean(),
            'mean_2': values_2.mean(),
            'var_1': values_1.var(),
            'var_2': values_2.var(),
            'p_value': two_sample_test(values_1, values_2),
        })

    stats_df = pd.DataFrame(records, columns=[
        'variable', 'n_1', 'n_2', 'mean_1', 'mean_2', 'var_1', 'var_2', 'p_value',
    ])
    for col in ('mean_1', 'mean_2', 'var_1', 'var_2', 'p_value'):
        stats_df[col] = stats_df[col].astype(float)

    with np.errstate(divide='ignore', invalid='ignore'):
        stats_df['fold_change'] = stats_df['mean_2'] / stats_df['mean_1']
    stats_df['log2_fc'] = log2_fold_change(stats_df['mean_1'], stats_df['mean_2'])
    stats_df['neg_log10_p'] = neg_log10(stats_df['p_value'])

    n_undefined = int((~np.isfinite(stats_df['log2_fc']) | stats_df['p_value'].isna()).sum())
    if n_undefined:
        logger.warning(
            f"{n_undefined} of {len(stats_df)} variables have undefined fold-change or p-value "
            f"for {format_pair_key(cond1, cond2)}."
        )
    return stats_df[STAT_COLUMNS].copy()


def rank_and_label(table: pd.DataFrame, sort_cols: Sequence[str], top_labels: int) -> pd.DataFrame:
    """
    Sort descending on each of `sort_cols` (stable, missing keys last) and label the top rows.

    The first `top_labels` rows receive label = variable name; all other rows get "".
    """
    ranked = table.sort_values(
        by=list(sort_cols), ascending=False, kind='mergesort', na_position='last'
    ).reset_index(drop=True)
    ranked['label'] = np.where(ranked.index < top_labels, ranked['variable'].astype(str), "")
    return ranked


def validate_top_labels(top_labels) -> None:
    if isinstance(top_labels, bool) or not isinstance(top_labels, (int, np.integer)) or top_labels < 0:
        raise ValueError(f"top_labels must be a non-negative integer, got {top_labels!r}.")


def log_table(table: pd.DataFrame) -> None:
    """Default verbose hook: write the table to the module logger."""
    logger.info(f"Comparison table for the last group pair:\n{table.to_string(index=False)}")


def emit_last_table(table: Optional[pd.DataFrame],
                    table_hook: Optional[Callable[[pd.DataFrame], None]] = None) -> None:
    """Pass the last computed table, without its label column, to the verbose hook."""
    if table is None:
        return
    hook = table_hook if table_hook is not None else log_table
    hook(table.drop(columns=['label']))


def compare_groups(data, group_col: str, cond1: Any = None, cond2: Any = None,
                   fold_change_thresh: Optional[float] = None,
                   p_value_thresh: Optional[float] = None,
                   top_labels: Optional[int] = None,
                   verbose: bool = False,
                   measurement_cols: Optional[Sequence[str]] = None,
                   table_hook: Optional[Callable[[pd.DataFrame], None]] = None
                   ) -> Dict[str, ComparisonResult]:
    """
    Compare measurement variables between group pairs for volcano-style screening.

    For each pair, fold-change is the ratio of the cond2 mean to the cond1 mean
    (missing values ignored) and the p-value comes from Welch's two-sample t-test.
    A variable is significant when |log2 FC| >= log2(fold_change_thresh) AND
    -log10(p) >= -log10(p_value_thresh). Rows are ordered by significance, then
    by -log10(p), both descending; the first `top_labels` rows are labeled.

    Args:
        data (pd.DataFrame | list[dict] | dict): Observation table.
        group_col (str): Name of the grouping column.
        cond1, cond2 (optional): Explicit group pair. If either is omitted, all
            2-combinations of the group levels are compared.
        fold_change_thresh (float, optional): Ratio threshold (> 0). Defaults to
            config.DEFAULT_FOLD_CHANGE_THRESH.
        p_value_thresh (float, optional): p-value threshold in (0, 1). Defaults to
            config.DEFAULT_P_VALUE_THRESH.
        top_labels (int, optional): Rows per pair that receive a label. Defaults to
            config.DEFAULT_TOP_LABELS.
        verbose (bool): If True, pass the last pair's table (without labels) to
            `table_hook` once all pairs are computed.
        measurement_cols (list[str], optional): Explicit measurement columns.
            If None, numeric columns other than `group_col` are used.
        table_hook (callable, optional): Receives the verbose table. Defaults to
            logging it at INFO level.

    Returns:
        Dict[str, ComparisonResult]: Keyed by "<cond1> vs <cond2>" in processing order.

    Raises:
        ValueError: On configuration errors (missing group column, insufficient
            groups, invalid thresholds, unknown measurement columns).
    """
    if fold_change_thresh is None:
        fold_change_thresh = core_config.DEFAULT_FOLD_CHANGE_THRESH
    if p_value_thresh is None:
        p_value_thresh = core_config.DEFAULT_P_VALUE_THRESH
    if top_labels is None:
        top_labels = core_config.DEFAULT_TOP_LABELS

    if not fold_change_thresh > 0:
        raise ValueError(f"fold_change_thresh must be positive, got {fold_change_thresh!r}.")
    if not 0 < p_value_thresh < 1:
        raise ValueError(f"p_value_thresh must lie in (0, 1), got {p_value_thresh!r}.")
    validate_top_labels(top_labels)

    frame = as_observation_table(data)
    pairs = resolve_group_pairs(frame, group_col, cond1, cond2)
    columns = select_measurement_columns(frame, group_col, measurement_cols)
    if not columns:
        logger.warning(f"No numeric measurement columns found besides '{group_col}'.")

    fc_line = float(np.log2(fold_change_thresh))
    p_line = float(-np.log10(p_value_thresh))
    parameters = {
        'fold_change_thresh': fold_change_thresh,
        'p_value_thresh': p_value_thresh,
        'top_labels': int(top_labels),
    }

    logger.info(f"Running volcano comparison for {len(pairs)} group pair(s) over {len(columns)} variables.")
    results = {}
    last_table = None
    for pair_cond1, pair_cond2 in pairs:
        key = format_pair_key(pair_cond1, pair_cond2)
        stats_df = compute_pair_statistics(frame, group_col, pair_cond1, pair_cond2, columns)
        stats_df['significant'] = (
            (stats_df['log2_fc'].abs() >= fc_line) & (stats_df['neg_log10_p'] >= p_line)
        )
        table = rank_and_label(stats_df, ['significant', 'neg_log10_p'], top_labels)[VOLCANO_COLUMNS]

        logger.info(f"{key}: {int(table['significant'].sum())} of {len(table)} variables significant.")
        results[key] = ComparisonResult(
            cond1=pair_cond1,
            cond2=pair_cond2,
            table=table,
            x_thresholds=(-fc_line, fc_line),
            y_threshold=p_line,
            kind="volcano",
            parameters=dict(parameters),
        )
        last_table = table

    if verbose:
        emit_last_table(last_table, table_hook)
    return results
