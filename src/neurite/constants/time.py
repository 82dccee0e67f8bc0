"""
Time Constants - Unit conversions used by the propagation delay.
"""

SECONDS_PER_MS = 1.0 / 1000.0
"""Seconds per millisecond (0.001 s/ms)."""
