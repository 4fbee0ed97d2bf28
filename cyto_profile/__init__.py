"""
CytoProfile

An exploratory-data-analysis and biomarker-screening toolkit for
cytokine and immune-assay panels.

The package computes per-analyte group comparisons for hypothesis generation:
1. Fold-change and Welch t-test significance (volcano tables)
2. SSMD effect sizes against fold-change (dual-flashlight tables)
3. Ranked, labeled result tables that a plotting layer can render directly

Call `setup_analysis_logger` once at the start of a run to send the
package log to the console and, optionally, to a per-run log file.
"""

from .core import __version__
from .core.logging import setup_analysis_logger
from .core.data_models import ComparisonResult
from .modules.differential import compare_groups, compute_dual_flashlight

__all__ = ['__version__', 'ComparisonResult', 'compare_groups', 'compute_dual_flashlight',
           'setup_analysis_logger']
