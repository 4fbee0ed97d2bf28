# utils.py
"""
Utility functions for CytoProfile.
"""

import math
from datetime import datetime

import numpy as np
import pandas as pd


def format_pair_key(cond1, cond2):
    """Display key for a group pair, e.g. 'T2D vs ND'."""
    return f"{cond1} vs {cond2}"


def select_measurement_columns(data, group_col, measurement_cols=None):
    """
    Determine which columns of an observation table are measurements.

    Parameters:
    -----------
    data : pandas.DataFrame
        Observation table.
    group_col : str
        Name of the grouping column; never treated as a measurement.
    measurement_cols : list of str, optional
        Explicit list of measurement columns. If None, every numeric
        (non-boolean) column other than `group_col` is used.

    Returns:
    --------
    list of str
        Measurement column names in table order (or the given order).
    """
    if measurement_cols is not None:
        measurement_cols = list(measurement_cols)
        missing = [col for col in measurement_cols if col not in data.columns]
        if missing:
            raise ValueError(f"Measurement columns not found in data: {missing}")
        if group_col in measurement_cols:
            raise ValueError(f"Group column '{group_col}' cannot also be a measurement column.")
        return measurement_cols

    return [
        col for col in data.columns
        if col != group_col
        and pd.api.types.is_numeric_dtype(data[col])
        and not pd.api.types.is_bool_dtype(data[col])
    ]


def clean_json_data(data):
    """Recursively cleans data structure for JSON serialization.
       Converts NaN/Infinity to None, numpy and pandas types to Python types.
    """
    if isinstance(data, pd.DataFrame):
        return [clean_json_data(record) for record in data.to_dict(orient='records')]
    elif isinstance(data, pd.Series):
        return clean_json_data(data.to_dict())
    elif isinstance(data, dict):
        return {k: clean_json_data(v) for k, v in data.items()}
    elif isinstance(data, (list, tuple)):
        return [clean_json_data(item) for item in data]
    # --- Numpy type handling ---
    elif isinstance(data, np.bool_):
        return bool(data)
    elif isinstance(data, np.integer):
        return int(data)
    elif isinstance(data, np.floating):
        if np.isnan(data) or np.isinf(data):
            return None  # Represent as JSON null
        return float(data)
    elif isinstance(data, np.ndarray):
        return [clean_json_data(item) for item in data.tolist()]
    # --- Standard Python float handling ---
    elif isinstance(data, float):
        if math.isnan(data) or math.isinf(data):
            return None
        return data
    elif isinstance(data, datetime):
        return data.isoformat()

    # Return data unchanged if already serializable or unknown type
    return data
