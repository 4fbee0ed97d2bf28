# filename: cyto_profile/modules/differential/__init__.py
"""
Differential Comparison Module Entry Point.

Exposes the group-pair comparison engines (volcano and dual-flashlight) and the
statistical primitives they are built on.
"""

from .computation import compare_groups, compute_pair_statistics, rank_and_label, resolve_group_pairs
from .dual_flashlight import compute_dual_flashlight
from .statistics import calculate_ssmd, interpret_ssmd, two_sample_test

__all__ = [
    'compare_groups',
    'compute_dual_flashlight',
    'compute_pair_statistics',
    'rank_and_label',
    'resolve_group_pairs',
    'two_sample_test',
    'calculate_ssmd',
    'interpret_ssmd',
]
