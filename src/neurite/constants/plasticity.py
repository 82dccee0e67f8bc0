"""
Plasticity Constants - Plasticity rate, LTP/LTD and synaptic strength.

Synaptic weight and synaptic strength threshold share the LTD/LTP bounds,
so both live in [MIN_LTD, MAX_LTP] = [-1.0, 1.0].
"""

# =============================================================================
# SYNAPTIC WEIGHT
# =============================================================================

DEFAULT_SYNAPTIC_WEIGHT = 1.0
"""Initial synaptic weight of a freshly constructed neuron."""

DEFAULT_SYNAPTIC_STRENGTH_THRESHOLD = 0.0
"""Initial synaptic strength threshold used by pruning."""

SYNAPTIC_STRENGTH_THRESHOLD_BOOST_FACTOR = 0.01
"""Per-call shift of the strength threshold against the normalized input."""

# =============================================================================
# PLASTICITY RATE
# =============================================================================

DEFAULT_PLASTICITY_RATE = 1.0
"""Initial plasticity rate."""

MAX_PLASTICITY_RATE = 1.0
"""Cap on the plasticity rate."""

PLASTICITY_RATE_DECREASE_FACTOR = 0.96
"""Multiplicative decay of the plasticity rate on sub-threshold calls."""

PLASTICITY_RATE_BOOST_FACTOR = 0.01
"""Plasticity rate gain per unit firing rate on supra-threshold calls."""

# =============================================================================
# LONG-TERM POTENTIATION / DEPRESSION
# =============================================================================

MAX_LTP = 1.0
"""Cap on long-term potentiation (also the upper weight bound)."""

LTP_BOOST_FACTOR = 0.01
"""LTP gain per unit of normalized positive input."""

LTP_DECREASE_FACTOR = 0.96
"""Multiplicative decay of LTP when input is not positive."""

MIN_LTD = -1.0
"""Floor on long-term depression (also the lower weight bound)."""

LTD_BOOST_FACTOR = 0.01
"""LTD gain per unit of normalized negative input."""

LTD_DECREASE_FACTOR = 0.96
"""Multiplicative decay of LTD when input is not negative."""
