"""
Adaptive traffic signal simulator.
"""
__version__ = "0.1.0"
