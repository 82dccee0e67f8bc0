"""
Neurite I/O Module - Neuron checkpoints.

Example:
    from neurite.io import NeuronCheckpoint

    NeuronCheckpoint.save(neurons, "checkpoint.pt", metadata={"trial": 1})
    neurons = NeuronCheckpoint.load("checkpoint.pt")
    info = NeuronCheckpoint.info("checkpoint.pt")
"""

from neurite.io.checkpoint import NeuronCheckpoint

__all__ = ["NeuronCheckpoint"]
