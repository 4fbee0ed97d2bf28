"""
Analysis modules for CytoProfile.
"""
