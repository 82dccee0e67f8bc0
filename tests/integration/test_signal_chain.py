"""
Integration tests for signals travelling between neurons.

Neurons are driven through transmit/detect cycles, each one's output feeding
the next one's input, with a recording delay standing in for real time.
"""

import pytest

from neurite import NeuronCheckpoint, NeuronType, NeurotransmitterType

MAX_CYCLES = 10_000


@pytest.mark.integration
class TestSignalChain:
    """Multi-neuron transmit/detect scenarios."""

    def test_signal_accumulation_and_firing(self, make_neuron, recording_delay, run):
        """A driven excitatory neuron eventually makes its target fire."""
        neuron0 = make_neuron(0, 0, 0, NeuronType.SENSORY, NeurotransmitterType.INHIBITORY)
        neuron1 = make_neuron(1, 1, 1, NeuronType.SENSORY, NeurotransmitterType.EXCITATORY)
        neuron2 = make_neuron(1, 2, 3, NeuronType.MOTOR, NeurotransmitterType.EXCITATORY)

        run(neuron0.transmit(20.0))
        output = neuron0.detect()
        assert output < 0.0

        run(neuron2.transmit(output, source=neuron0))
        assert neuron2.detect() == 0.0

        async def drive():
            for cycle in range(MAX_CYCLES):
                await neuron1.transmit(20.0)
                await neuron2.transmit(neuron1.detect(), source=neuron1)
                result = neuron2.detect()
                if result > 0.0:
                    return cycle, result
            return None

        outcome = run(drive())

        assert outcome is not None, f"neuron2 never fired within {MAX_CYCLES} cycles"
        cycle, result = outcome
        assert 1.0 <= result <= 30.0
        assert neuron2.accumulated_potential == 0.0
        # One delay per sourced transmit: the initial one plus one per cycle
        assert len(recording_delay.requested) == cycle + 2
        assert set(recording_delay.requested[1:]) == {2}

    def test_repeated_strong_input_fires_first_cycle(self, make_neuron, run):
        neuron = make_neuron(neurotransmitter_type=NeurotransmitterType.EXCITATORY)

        run(neuron.transmit(20.0))

        assert neuron.is_firing_eligible
        assert neuron.detect() > 0.0

    def test_pruning_after_activity(self, make_neuron, run):
        """Depressed neurons lose outgoing edges to stronger partners."""
        weak = make_neuron(0, 0, 0)
        strong = make_neuron(2, 0, 0)
        weak.establish_axonal_connection(strong)

        async def drive():
            for _ in range(20):
                await weak.transmit(-20.0)
                await strong.transmit(5.0)

        run(drive())
        assert weak.synaptic_weight <= weak.synaptic_strength_threshold
        assert weak.synaptic_weight < strong.synaptic_weight

        weak.prune_axonal_connection(strong)

        assert weak.axonal_connections == set()
        assert strong.dendritic_connections == set()

    def test_chain_resumes_from_checkpoint(self, make_neuron, recording_delay, run, tmp_path):
        """Restored neurons continue exactly like the originals."""
        source = make_neuron(0, 0, 0)
        target = make_neuron(3, 4, 0)
        source.establish_axonal_connection(target)

        async def step(a, b):
            await a.transmit(20.0)
            await b.transmit(a.detect(), source=a)
            return b.detect()

        run(step(source, target))
        path = tmp_path / "chain.pt"
        NeuronCheckpoint.save([source, target], path)
        restored_source, restored_target = NeuronCheckpoint.load(path, signal_delay=recording_delay)

        for _ in range(25):
            expected = run(step(source, target))
            actual = run(step(restored_source, restored_target))
            assert actual == expected

        assert restored_target.get_state() == target.get_state()
