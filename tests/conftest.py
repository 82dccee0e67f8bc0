"""Shared test fixtures and configuration."""

import asyncio

import pytest

from neurite import Neuron, NeuronType, NeurotransmitterType, RecordingSignalDelay


@pytest.fixture
def recording_delay():
    """Delay capability that records requested durations without waiting."""
    return RecordingSignalDelay()


@pytest.fixture
def make_neuron(recording_delay):
    """Factory for neurons wired to the shared recording delay.

    Defaults to a contact neuron with an excitatory neurotransmitter whose
    axon terminal sits one unit away from the soma along every axis.
    """

    def _make(
        x=1,
        y=2,
        z=3,
        neuron_type=NeuronType.CONTACT,
        neurotransmitter_type=NeurotransmitterType.EXCITATORY,
        axon=None,
    ):
        ax, ay, az = axon if axon is not None else (x + 1, y + 1, z + 1)
        return Neuron(
            x, y, z, ax, ay, az, neuron_type, neurotransmitter_type,
            signal_delay=recording_delay,
        )

    return _make


@pytest.fixture
def neuron_pair(make_neuron):
    """Two distinct excitatory neurons at (1, 2, 3) and (4, 5, 6)."""
    return make_neuron(1, 2, 3), make_neuron(4, 5, 6)


@pytest.fixture
def run():
    """Run a coroutine to completion on a fresh event loop."""

    def _run(coro):
        return asyncio.run(coro)

    return _run
