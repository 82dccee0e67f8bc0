"""Neural components."""

from neurite.components.neurons import Neuron, NeuronState, NeuronType, NeurotransmitterType

__all__ = ["Neuron", "NeuronState", "NeuronType", "NeurotransmitterType"]
