"""Unit types for the neuron's scalar state.

Uses Python's NewType for zero-runtime-cost type checking with mypy/pyright.

Example usage:
    from neurite.units import Milliseconds, Signal

    def detect() -> Signal: ...
"""

from typing import NewType

# =============================================================================
# ELECTRICAL UNITS
# =============================================================================

Signal = NewType("Signal", float)
"""Signal passed between neurons (input to transmit, output of detect).

Positive = excitatory, negative = inhibitory, 0.0 = no signal.
Firing neurons emit in [1.0, 30.0] or [-20.0, -1.0].
"""

# =============================================================================
# TIME UNITS
# =============================================================================

Milliseconds = NewType("Milliseconds", int)
"""Propagation delay in whole milliseconds."""

__all__ = ["Signal", "Milliseconds"]
