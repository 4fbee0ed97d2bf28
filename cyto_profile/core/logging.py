# filename: cyto_profile/core/logging.py
"""
Functions for setting up logging for CytoProfile analyses.
"""

import logging
import os
import sys
from datetime import datetime

# Define standard log format
LOG_FORMAT = '%(asctime)s - %(levelname)s - [%(name)s:%(funcName)s] - %(message)s'


def setup_analysis_logger(log_dir=None, run_name="cyto_profile", log_level=logging.INFO):
    """
    Configures the root logger for an analysis session.

    Removes any existing handlers from the root logger and installs a console
    handler. When a valid log directory is given, a FileHandler pointing to
    '<log_dir>/<run_name>_analysis.log' is added as well.

    Args:
        log_dir (str, optional): Directory where the log file will be saved.
            If None, only console logging is configured.
        run_name (str): Name of the analysis run (used for the log filename).
        log_level (int): The logging level (e.g., logging.INFO, logging.DEBUG).

    Returns:
        str | None: The path to the analysis log file created, or None when
        logging is console-only or the directory/run name is invalid.
    """
    if log_dir is not None and not os.path.isdir(log_dir):
        print(f"ERROR: Invalid log directory provided for logger setup: {log_dir}", file=sys.stderr)
        return None
    if not run_name:
        print("ERROR: Invalid run_name provided for logger setup.", file=sys.stderr)
        return None

    root_logger = logging.getLogger()

    # Remove existing handlers so repeated calls don't duplicate output
    if root_logger.hasHandlers():
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    log_file_path = None
    if log_dir is not None:
        log_file_path = os.path.join(log_dir, f"{run_name}_analysis.log")
        try:
            file_handler = logging.FileHandler(log_file_path, mode='w')
        except OSError as e:
            print(f"ERROR: Failed to create log file handler at {log_file_path}: {e}", file=sys.stderr)
            return None
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(log_level)

    root_logger.info(f"Logger configured. Level: {logging.getLevelName(log_level)}")
    if log_file_path:
        root_logger.info(f"Logging to Console and File: {log_file_path}")
    else:
        root_logger.info("Logging to Console only")
    root_logger.info(f"Python version: {sys.version}")
    root_logger.info(f"Analysis session started at: {datetime.now().isoformat()}")

    return log_file_path
