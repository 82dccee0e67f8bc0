"""
Property-based tests using Hypothesis.

These tests verify that the neuron maintains its clamp invariants across
randomly generated input sequences.
"""

import asyncio
import math

import pytest
from hypothesis import given, settings, strategies as st

from neurite import Neuron, RecordingSignalDelay
from neurite.constants.neuron import (
    MAX_EXCITATORY_SIGNAL,
    MAX_INHIBITORY_SIGNAL,
    MAX_MEMBRANE_POTENTIAL,
    MAX_THRESHOLD_POTENTIAL,
    MIN_EXCITATORY_SIGNAL,
    MIN_INHIBITORY_SIGNAL,
    MIN_MEMBRANE_POTENTIAL,
    MIN_THRESHOLD_POTENTIAL,
)

signals = st.floats(min_value=-100.0, max_value=100.0, allow_nan=False, allow_infinity=False)


def assert_invariants(neuron: Neuron) -> None:
    """Assert every clamp invariant of the neuron state."""
    assert MIN_THRESHOLD_POTENTIAL <= neuron.threshold_potential <= MAX_THRESHOLD_POTENTIAL
    assert MIN_MEMBRANE_POTENTIAL <= neuron.membrane_potential <= MAX_MEMBRANE_POTENTIAL
    assert 0.0 <= neuron.firing_rate <= 1.0
    assert neuron.plasticity_rate <= 1.0
    assert 0.0 <= neuron.relative_refractory_period <= 1.0
    assert 0.0 <= neuron.absolute_refractory_period <= 1.0
    assert -1.0 <= neuron.synaptic_strength_threshold <= 1.0
    assert -1.0 <= neuron.synaptic_weight <= 1.0
    assert 0.0 <= neuron.ltp <= 1.0
    assert -1.0 <= neuron.ltd <= 0.0


async def _drive(neuron, inputs, detect_each_step, outputs):
    for value in inputs:
        await neuron.transmit(value)
        assert_invariants(neuron)
        if detect_each_step:
            fr = neuron.firing_rate
            output = neuron.detect()
            outputs.append((fr, output))
            assert_invariants(neuron)


@pytest.mark.unit
class TestNeuronProperties:
    """Property-based tests for Neuron."""

    @given(
        inputs=st.lists(signals, min_size=1, max_size=60),
        detect_each_step=st.booleans(),
        neurotransmitter_type=st.sampled_from([0, 1]),
    )
    @settings(max_examples=100, deadline=None)
    def test_invariants_hold_after_every_call(self, inputs, detect_each_step, neurotransmitter_type):
        neuron = Neuron(1, 2, 3, 2, 3, 4, 0, neurotransmitter_type, signal_delay=RecordingSignalDelay())
        outputs = []

        asyncio.run(_drive(neuron, inputs, detect_each_step, outputs))

        for fr, output in outputs:
            if output == 0.0 or fr == 0.0:
                continue
            if neurotransmitter_type == 1:
                assert MIN_EXCITATORY_SIGNAL <= output <= MAX_EXCITATORY_SIGNAL
            else:
                assert MIN_INHIBITORY_SIGNAL <= output <= MAX_INHIBITORY_SIGNAL

    @given(
        ap=st.floats(min_value=-1e6, max_value=1e6, allow_nan=False),
        fr=st.floats(min_value=1e-6, max_value=1.0, allow_nan=False),
        neurotransmitter_type=st.sampled_from([0, 1]),
    )
    @settings(max_examples=200, deadline=None)
    def test_output_in_range_for_nonzero_firing_rate(self, ap, fr, neurotransmitter_type):
        neuron = Neuron(0, 0, 0, 0, 0, 0, 1, neurotransmitter_type)
        neuron.accumulated_potential = ap
        neuron.firing_rate = fr
        neuron.membrane_potential = MAX_MEMBRANE_POTENTIAL

        output = neuron.detect()

        assert math.isfinite(output)
        if neurotransmitter_type == 1:
            assert MIN_EXCITATORY_SIGNAL <= output <= MAX_EXCITATORY_SIGNAL
        else:
            assert MIN_INHIBITORY_SIGNAL <= output <= MAX_INHIBITORY_SIGNAL
        assert neuron.accumulated_potential == 0.0

    @given(inputs=st.lists(signals, min_size=1, max_size=30))
    @settings(max_examples=50, deadline=None)
    def test_quiescent_detect_is_pure(self, inputs):
        neuron = Neuron(0, 0, 0, 0, 0, 0, 0, 1, signal_delay=RecordingSignalDelay())

        async def drive():
            for value in inputs:
                await neuron.transmit(value)
                if not neuron.is_firing_eligible:
                    before = neuron.get_state()
                    assert neuron.detect() == 0.0
                    assert neuron.get_state() == before

        asyncio.run(drive())
