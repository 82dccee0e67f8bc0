"""Tests for neuron state snapshots, cloning and diagnostics."""

import math

import pytest

from neurite import CheckpointError, InvalidArgumentError, Neuron, NeuronState
from neurite.components.neurons.neuron_state import SCALAR_FIELDS


@pytest.fixture
def active_neuron(make_neuron, run):
    """Neuron that has fired once and holds connections on both sides."""
    neuron = make_neuron(1, 2, 3)
    partner = make_neuron(4, 5, 6)
    upstream = make_neuron(0, 0, 0)
    neuron.establish_axonal_connection(partner)
    neuron.establish_dendritic_connection(upstream)
    run(neuron.transmit(20.0))
    run(neuron.transmit(-3.0))
    return neuron


@pytest.mark.unit
class TestNeuronState:
    """Test suite for get_state/load_state."""

    def test_snapshot_captures_every_attribute(self, active_neuron):
        state = active_neuron.get_state()

        for name in SCALAR_FIELDS:
            assert getattr(state, name) == getattr(active_neuron, name)
        assert (state.x, state.y, state.z) == (1, 2, 3)
        assert (state.ax, state.ay, state.az) == (2, 3, 4)
        assert state.neuron_type == 0
        assert state.neurotransmitter_type == 1
        assert state.axonal_connections == {(4, 5, 6)}
        assert state.dendritic_connections == {(0, 0, 0)}

    def test_snapshot_is_detached(self, active_neuron):
        state = active_neuron.get_state()

        state.axonal_connections.add((9, 9, 9))
        state.synaptic_weight = -0.25

        assert (9, 9, 9) not in active_neuron.axonal_connections
        assert active_neuron.synaptic_weight != -0.25

    def test_load_state_restores_exactly(self, active_neuron, make_neuron):
        state = active_neuron.get_state()
        target = make_neuron(7, 7, 7)

        target.load_state(state)

        assert target.get_state() == state
        assert target.coordinate == (1, 2, 3)

    def test_load_state_rejects_invalid_codes(self, make_neuron):
        neuron = make_neuron()
        state = neuron.get_state()
        state.neuron_type = 5

        with pytest.raises(InvalidArgumentError):
            neuron.load_state(state)
        # Failed load leaves the neuron untouched
        assert neuron.neuron_type == 0

    def test_from_state_builds_equal_neuron(self, active_neuron, recording_delay):
        restored = Neuron.from_state(active_neuron.get_state(), signal_delay=recording_delay)

        assert restored.get_state() == active_neuron.get_state()
        assert restored.signal_delay is recording_delay

    def test_dict_round_trip(self, active_neuron):
        state = active_neuron.get_state()

        data = state.to_dict()

        assert data["axonal_connections"] == [[4, 5, 6]]
        assert data["dendritic_connections"] == [[0, 0, 0]]
        assert NeuronState.from_dict(data) == state

    def test_dict_round_trip_keeps_non_finite_values(self, make_neuron):
        state = make_neuron().get_state()
        state.accumulated_potential = float("nan")
        state.firing_rate = float("inf")

        restored = NeuronState.from_dict(state.to_dict())

        assert math.isnan(restored.accumulated_potential)
        assert restored.firing_rate == float("inf")

    def test_dict_connections_are_sorted(self, make_neuron):
        neuron = make_neuron(5, 5, 5)
        for xyz in [(3, 0, 0), (1, 9, 9), (2, 0, 0)]:
            neuron.establish_axonal_connection(make_neuron(*xyz))

        data = neuron.get_state().to_dict()

        assert data["axonal_connections"] == [[1, 9, 9], [2, 0, 0], [3, 0, 0]]

    def test_from_dict_rejects_missing_fields(self, make_neuron):
        data = make_neuron().get_state().to_dict()
        del data["ltp"]

        with pytest.raises(CheckpointError, match="ltp"):
            NeuronState.from_dict(data)

    def test_from_dict_rejects_malformed_coordinate(self, make_neuron):
        data = make_neuron().get_state().to_dict()
        data["axonal_connections"] = [[1, 2]]

        with pytest.raises(CheckpointError, match="3 components"):
            NeuronState.from_dict(data)


@pytest.mark.unit
class TestClone:
    """Test suite for Neuron.clone."""

    def test_clone_equal_state(self, active_neuron):
        copy = active_neuron.clone()

        assert copy is not active_neuron
        assert copy.get_state() == active_neuron.get_state()
        assert copy.signal_delay is active_neuron.signal_delay

    def test_clone_is_independent(self, active_neuron, run):
        copy = active_neuron.clone()

        copy.axonal_connections.clear()
        copy.firing_rate = 0.9

        assert active_neuron.axonal_connections == {(4, 5, 6)}
        assert active_neuron.firing_rate != 0.9

    def test_clone_can_connect_to_original(self, active_neuron):
        """Clones share a coordinate but are distinct neurons."""
        copy = active_neuron.clone()

        copy.establish_axonal_connection(active_neuron)

        assert (1, 2, 3) in active_neuron.dendritic_connections


@pytest.mark.unit
class TestDiagnostics:
    """Test suite for Neuron.get_diagnostics."""

    def test_diagnostics_contents(self, active_neuron):
        diagnostics = active_neuron.get_diagnostics()

        assert diagnostics["coordinate"] == (1, 2, 3)
        assert diagnostics["neuron_type"] == "contact"
        assert diagnostics["neurotransmitter_type"] == "excitatory"
        assert diagnostics["n_axonal_connections"] == 1
        assert diagnostics["n_dendritic_connections"] == 1
        assert diagnostics["refractory"] is True
        for name in SCALAR_FIELDS:
            assert diagnostics[name] == getattr(active_neuron, name)

    def test_fresh_neuron_diagnostics(self, make_neuron):
        diagnostics = make_neuron().get_diagnostics()

        assert diagnostics["firing_eligible"] is False
        assert diagnostics["refractory"] is False
        assert diagnostics["membrane_potential"] == -70.0
        assert diagnostics["non_finite_fields"] == []

    def test_diagnostics_flag_non_finite_fields(self, make_neuron):
        neuron = make_neuron()
        neuron.firing_rate = float("nan")
        neuron.accumulated_potential = float("inf")

        diagnostics = neuron.get_diagnostics()

        assert diagnostics["non_finite_fields"] == ["accumulated_potential", "firing_rate"]
