# filename: cyto_profile/modules/differential/dual_flashlight.py
"""
Dual-flashlight comparisons: SSMD effect size against log2 fold-change.

Shares pair resolution, per-pair statistics and ranking with the volcano
computation; only the significance rule and ranking key differ.
"""

import logging
from typing import Any, Callable, Dict, Optional, Sequence

import pandas as pd

from cyto_profile.core import config as core_config
from cyto_profile.core.data_models import ComparisonResult
from cyto_profile.core.utils import format_pair_key, select_measurement_columns
from .computation import (
    as_observation_table, compute_pair_statistics, emit_last_table,
    rank_and_label, resolve_group_pairs, validate_top_labels,
)
from .statistics import calculate_ssmd, interpret_ssmd

logger = logging.getLogger(__name__)

DUAL_FLASHLIGHT_COLUMNS = [
    'variable', 'log2_fc', 'ssmd', 'ssmd_category', 'significant', 'label',
    'mean_1', 'mean_2', 'var_1', 'var_2',
]


def compute_dual_flashlight(data, group_col: str, cond1: Any = None, cond2: Any = None,
                            ssmd_thresh: Optional[float] = None,
                            log2fc_thresh: Optional[float] = None,
                            top_labels: Optional[int] = None,
                            verbose: bool = False,
                            measurement_cols: Optional[Sequence[str]] = None,
                            table_hook: Optional[Callable[[pd.DataFrame], None]] = None
                            ) -> Dict[str, ComparisonResult]:
    """
    Compute dual-flashlight tables (SSMD vs. log2 fold-change) for group pairs.

    SSMD = (mean_2 - mean_1) / sqrt(var_1 + var_2). A variable is significant when
    |SSMD| >= ssmd_thresh AND |log2 FC| >= log2fc_thresh. Rows are ordered by
    significance, then |SSMD|, both descending; the first `top_labels` rows are labeled.

    Pair resolution, configuration errors and the verbose hook behave exactly as
    in `compare_groups`.

    Returns:
        Dict[str, ComparisonResult]: Keyed by "<cond1> vs <cond2>"; x_thresholds
        hold (-log2fc_thresh, log2fc_thresh) and y_threshold is None.
    """
    if ssmd_thresh is None:
        ssmd_thresh = core_config.DUAL_FLASH_SSMD_THRESH
    if log2fc_thresh is None:
        log2fc_thresh = core_config.DUAL_FLASH_LOG2FC_THRESH
    if top_labels is None:
        top_labels = core_config.DUAL_FLASH_TOP_LABELS

    if pd.isna(ssmd_thresh):
        raise ValueError(f"ssmd_thresh must be a number, got {ssmd_thresh!r}.")
    if not log2fc_thresh >= 0:
        raise ValueError(f"log2fc_thresh must be non-negative, got {log2fc_thresh!r}.")
    validate_top_labels(top_labels)

    frame = as_observation_table(data)
    pairs = resolve_group_pairs(frame, group_col, cond1, cond2)
    columns = select_measurement_columns(frame, group_col, measurement_cols)

    parameters = {
        'ssmd_thresh': ssmd_thresh,
        'log2fc_thresh': log2fc_thresh,
        'top_labels': int(top_labels),
    }

    logger.info(f"Running dual-flashlight comparison for {len(pairs)} group pair(s) over {len(columns)} variables.")
    results = {}
    last_table = None
    for pair_cond1, pair_cond2 in pairs:
        key = format_pair_key(pair_cond1, pair_cond2)
        stats_df = compute_pair_statistics(frame, group_col, pair_cond1, pair_cond2, columns)

        stats_df['ssmd'] = calculate_ssmd(
            stats_df['mean_1'], stats_df['mean_2'], stats_df['var_1'], stats_df['var_2']
        )
        stats_df['ssmd_category'] = stats_df['ssmd'].map(interpret_ssmd)
        stats_df['significant'] = (
            (stats_df['ssmd'].abs() >= ssmd_thresh) & (stats_df['log2_fc'].abs() >= log2fc_thresh)
        )
        stats_df['abs_ssmd'] = stats_df['ssmd'].abs()

        table = rank_and_label(stats_df, ['significant', 'abs_ssmd'], top_labels)[DUAL_FLASHLIGHT_COLUMNS]

        logger.info(f"{key}: {int(table['significant'].sum())} of {len(table)} variables pass both SSMD and fold-change thresholds.")
        results[key] = ComparisonResult(
            cond1=pair_cond1,
            cond2=pair_cond2,
            table=table,
            x_thresholds=(-float(log2fc_thresh), float(log2fc_thresh)),
            y_threshold=None,
            kind="dual_flashlight",
            parameters=dict(parameters),
        )
        last_table = table

    if verbose:
        emit_last_table(last_table, table_hook)
    return results
