"""
Core data models for CytoProfile comparison engines.

This module defines the result structure handed from the comparison engines
to any downstream consumer (chart renderer, report writer):
- ComparisonResult: one ranked, labeled result table for a single group pair,
  together with the reference-line thresholds a renderer draws.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from .utils import clean_json_data, format_pair_key


@dataclass
class ComparisonResult:
    """
    Ranked comparison table for one group pair.
    """
    cond1: Any  # First group label (denominator of the fold-change)
    cond2: Any  # Second group label (numerator of the fold-change)
    table: pd.DataFrame  # One row per measurement variable, ranked and labeled
    x_thresholds: Tuple[float, float] = (float('nan'), float('nan'))  # Vertical reference lines (low, high)
    y_threshold: Optional[float] = None  # Horizontal reference line, if the chart has one
    kind: str = "volcano"  # "volcano" or "dual_flashlight"
    parameters: Dict[str, Any] = field(default_factory=dict)  # Thresholds used to build the table

    @property
    def key(self) -> str:
        return format_pair_key(self.cond1, self.cond2)

    def significant_variables(self) -> List[str]:
        """Variables flagged significant, in ranked order."""
        return self.table.loc[self.table['significant'], 'variable'].tolist()

    def labeled_variables(self) -> List[str]:
        """Variables that received a non-empty label, in ranked order."""
        return self.table.loc[self.table['label'] != "", 'label'].tolist()

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe representation (NaN/inf become None)."""
        return clean_json_data({
            'key': self.key,
            'kind': self.kind,
            'cond1': self.cond1,
            'cond2': self.cond2,
            'x_thresholds': list(self.x_thresholds),
            'y_threshold': self.y_threshold,
            'parameters': self.parameters,
            'rows': self.table,
        })
