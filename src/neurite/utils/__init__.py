"""Utility Functions.

General utility functions for the Neurite package.
"""

from neurite.utils.core_utils import clamp, euclidean_distance, round_half_away_from_zero
from neurite.utils.numerical_validation import is_finite_state, non_finite_fields
from neurite.utils.signal_delay import AsyncioSignalDelay, RecordingSignalDelay, SignalDelay

__all__ = [
    "clamp",
    "euclidean_distance",
    "round_half_away_from_zero",
    "is_finite_state",
    "non_finite_fields",
    "AsyncioSignalDelay",
    "RecordingSignalDelay",
    "SignalDelay",
]
