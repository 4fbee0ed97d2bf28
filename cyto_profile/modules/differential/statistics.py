# filename: cyto_profile/modules/differential/statistics.py
"""
Statistical primitives for group comparisons.

These functions operate on plain sequences of measurement values for two groups
and never raise on degenerate input: undefined results are returned as NaN so a
single degenerate analyte cannot abort a whole comparison.
"""

import logging
from typing import Sequence

import numpy as np
from scipy import stats

from cyto_profile.core import config as core_config

logger = logging.getLogger(__name__)


def _drop_missing(values: Sequence[float]) -> np.ndarray:
    """Convert to a float array with missing values removed."""
    arr = np.asarray(values, dtype=float)
    return arr[~np.isnan(arr)]


def two_sample_test(sample_a: Sequence[float], sample_b: Sequence[float]) -> float:
    """
    Calculate the p-value for the difference between two groups using Welch's t-test.

    Missing values are dropped before testing. NaN is returned instead of raising
    when either group has fewer than TTEST_MIN_SAMPLES values, when the data are
    essentially constant, or when the test itself fails.

    Args:
        sample_a: Values from the first group
        sample_b: Values from the second group

    Returns:
        Two-sided p-value (float), or NaN if the test is undefined
    """
    try:
        a = _drop_missing(sample_a)
        b = _drop_missing(sample_b)
    except (TypeError, ValueError) as e:
        logger.warning(f"Two-sample test skipped, non-numeric input: {e}")
        return np.nan

    min_n = core_config.TTEST_MIN_SAMPLES
    if len(a) < min_n or len(b) < min_n:
        logger.debug(f"Two-sample test skipped: group sizes {len(a)} and {len(b)} below {min_n}.")
        return np.nan

    # Same guard as a classical t-test: a vanishing standard error means constant data
    stderr = np.sqrt(np.var(a, ddof=1) / len(a) + np.var(b, ddof=1) / len(b))
    if stderr < 10 * np.finfo(float).eps * max(abs(np.mean(a)), abs(np.mean(b))):
        logger.debug("Two-sample test skipped: data are essentially constant.")
        return np.nan

    try:
        with np.errstate(divide='ignore', invalid='ignore'):
            result = stats.ttest_ind(a, b, equal_var=False)
    except (ValueError, TypeError, FloatingPointError) as e:
        logger.warning(f"Welch's t-test failed: {e}. Recording NaN.")
        return np.nan

    p_value = float(result.pvalue)
    return p_value if np.isfinite(p_value) else np.nan


def calculate_ssmd(mean_1, mean_2, var_1, var_2):
    """
    Strictly standardized mean difference of group 2 relative to group 1.

    SSMD = (mean_2 - mean_1) / sqrt(var_1 + var_2), using sample variances.
    Works element-wise on arrays/Series; a zero or missing spread yields NaN.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        spread = np.sqrt(np.add(var_1, var_2))
        spread = np.where(spread > 0, spread, np.nan)
        return np.subtract(mean_2, mean_1) / spread


def interpret_ssmd(ssmd: float) -> str:
    """
    Convert an SSMD value to its effect-size category.

    Args:
        ssmd: Strictly standardized mean difference

    Returns:
        "Strong Effect", "Moderate Effect", "Weak Effect", or "Undetermined" for NaN
    """
    if ssmd is None or np.isnan(ssmd):
        return "Undetermined"
    magnitude = abs(ssmd)
    if magnitude >= core_config.SSMD_STRONG_EFFECT:
        return "Strong Effect"
    elif magnitude >= core_config.SSMD_MODERATE_EFFECT:
        return "Moderate Effect"
    else:
        return "Weak Effect"


def log2_fold_change(mean_a, mean_b):
    """log2(mean_b / mean_a); zero, negative or missing means yield inf/NaN."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.log2(np.divide(mean_b, mean_a))


def neg_log10(p_values):
    """-log10 transform of p-values; NaN stays NaN and p == 0 becomes inf."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return -np.log10(p_values)
