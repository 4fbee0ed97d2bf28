"""
Core functionality for CytoProfile: configuration, logging, data models and utilities.
"""

__version__ = "1.0.0"
