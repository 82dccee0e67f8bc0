"""
NEURITE - A single spiking neuron unit with plasticity and synaptic pruning.

Quick Start:
============

    import asyncio
    from neurite import Neuron, NeuronType, NeurotransmitterType

    sensory = Neuron(0, 0, 0, 1, 1, 1, NeuronType.SENSORY, NeurotransmitterType.EXCITATORY)
    motor = Neuron(1, 2, 3, 2, 3, 4, NeuronType.MOTOR, NeurotransmitterType.EXCITATORY)
    sensory.establish_axonal_connection(motor)

    async def step():
        await sensory.transmit(20.0)
        await motor.transmit(sensory.detect(), source=sensory)
        return motor.detect()

    asyncio.run(step())

Internal Development:
====================

Internal code should use explicit imports for clarity:

    from neurite.components.neurons.neuron import Neuron
    from neurite.constants.neuron import RESTING_POTENTIAL
"""

__version__ = "0.1.0"

from neurite.components.neurons import Neuron, NeuronState, NeuronType, NeurotransmitterType
from neurite.errors import CheckpointError, InvalidArgumentError, NeuriteError
from neurite.global_config import GlobalConfig
from neurite.io import NeuronCheckpoint
from neurite.utils.signal_delay import AsyncioSignalDelay, RecordingSignalDelay, SignalDelay

__all__ = [
    "__version__",
    "Neuron",
    "NeuronState",
    "NeuronType",
    "NeurotransmitterType",
    "NeuriteError",
    "InvalidArgumentError",
    "CheckpointError",
    "GlobalConfig",
    "NeuronCheckpoint",
    "AsyncioSignalDelay",
    "RecordingSignalDelay",
    "SignalDelay",
]
