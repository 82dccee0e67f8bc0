"""
Centralized Constants for Neurite.

Single import point for the neuron cell parameters, organized by category.

Usage:
======
    # Import from specific category
    from neurite.constants.neuron import RESTING_POTENTIAL
    from neurite.constants.plasticity import LTP_BOOST_FACTOR

    # Or import entire category
    from neurite.constants import neuron, plasticity

Categories:
===========
- neuron: Membrane, threshold, refractory, firing and output signal constants
- plasticity: Plasticity rate, LTP/LTD and synaptic strength constants
- time: Time unit conversions (ms/s)

All values are process-wide and immutable by convention. Neurons never copy
them into per-instance state.
"""

from __future__ import annotations

from . import neuron, plasticity, time
from .neuron import *
from .plasticity import *
from .time import *

__all__ = [
    # Submodules
    "neuron",
    "plasticity",
    "time",
]
