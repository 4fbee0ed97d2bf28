# config.py
"""
Configuration settings for the CytoProfile analysis engines.
"""

# --- Global Version ---
Analysis_version = "1.0.0"
# ---------------------

# --- Volcano (fold-change vs. p-value) Parameters ---
# Ratio threshold; significance requires |log2 FC| >= log2(DEFAULT_FOLD_CHANGE_THRESH)
DEFAULT_FOLD_CHANGE_THRESH: float = 2.0
# Raw p-value threshold; significance requires p <= DEFAULT_P_VALUE_THRESH
DEFAULT_P_VALUE_THRESH: float = 0.05
# Number of top-ranked variables per group pair that receive a text label
DEFAULT_TOP_LABELS: int = 10

# --- Two-sample Test Parameters ---
#: Minimum number of non-missing values required in each group for Welch's t-test
TTEST_MIN_SAMPLES: int = 2

# --- Dual-Flashlight (SSMD vs. fold-change) Parameters ---
#: |SSMD| threshold for significance
DUAL_FLASH_SSMD_THRESH: float = 1.0
#: |log2 FC| threshold for significance (already on the log2 scale)
DUAL_FLASH_LOG2FC_THRESH: float = 1.0
#: Number of top-ranked variables per group pair that receive a text label
DUAL_FLASH_TOP_LABELS: int = 15

# --- SSMD Effect Categories ---
#: |SSMD| at or above this is a "Strong Effect"
SSMD_STRONG_EFFECT: float = 1.0
#: |SSMD| at or above this (and below strong) is a "Moderate Effect"
SSMD_MODERATE_EFFECT: float = 0.5
