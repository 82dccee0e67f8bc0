"""
Neuron Components.

Single spiking neuron with refractory dynamics, plasticity and pruning,
plus its classification enums and state snapshot.
"""

from __future__ import annotations

from neurite.components.neurons.neuron import Neuron
from neurite.components.neurons.neuron_state import SCALAR_FIELDS, NeuronState
from neurite.components.neurons.neuron_types import NeuronType, NeurotransmitterType

__all__ = [
    "Neuron",
    "NeuronState",
    "NeuronType",
    "NeurotransmitterType",
    "SCALAR_FIELDS",
]
