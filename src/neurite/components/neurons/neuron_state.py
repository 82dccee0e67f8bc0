"""
Neuron State Dataclass.

Snapshot of every attribute of a :class:`~neurite.components.neurons.neuron.Neuron`:
geometry, classification, electrophysiology, plasticity, refractory state,
regulatory factors and both connection sets.

Snapshots are detached from the neuron they came from (connection sets are
copied), and ``to_dict``/``from_dict`` convert to plain Python containers
without losing precision, so non-finite floats and exact bit patterns
survive a round trip.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Iterable

from neurite.constants.neuron import (
    BASE_RELATIVE_REFRACTORY_PERIOD,
    DEFAULT_NEUROTRANSMITTER_CONCENTRATION,
    MIN_THRESHOLD_POTENTIAL,
    RESTING_POTENTIAL,
)
from neurite.constants.plasticity import (
    DEFAULT_PLASTICITY_RATE,
    DEFAULT_SYNAPTIC_STRENGTH_THRESHOLD,
    DEFAULT_SYNAPTIC_WEIGHT,
)
from neurite.errors import CheckpointError
from neurite.typing import ConnectionSet, Coordinate, CoordinateList, StateDict

SCALAR_FIELDS = (
    "accumulated_potential",
    "threshold_potential",
    "membrane_potential",
    "firing_rate",
    "synaptic_weight",
    "synaptic_strength_threshold",
    "plasticity_rate",
    "absolute_refractory_period",
    "relative_refractory_period",
    "neurotransmitter_concentration",
    "ltp",
    "ltd",
)
"""Names of the float-valued dynamic attributes, in declaration order."""


def _coordinates_to_lists(connections: Iterable[Coordinate]) -> CoordinateList:
    return [list(c) for c in sorted(connections)]


def _lists_to_coordinates(items: Iterable[Iterable[int]]) -> ConnectionSet:
    result = set()
    for item in items:
        coordinate = tuple(int(v) for v in item)
        if len(coordinate) != 3:
            raise CheckpointError(f"Connection coordinate must have 3 components, got {item!r}")
        result.add(coordinate)
    return result


@dataclass
class NeuronState:
    """Complete state of a single neuron.

    Attributes:
        x, y, z: Soma coordinate
        ax, ay, az: Axon terminal coordinate
        neuron_type: 0 = Contact, 1 = Sensory, 2 = Motor
        neurotransmitter_type: 0 = Inhibitory, 1 = Excitatory
        accumulated_potential: Potential built up from inputs since last firing
        threshold_potential: Current firing threshold (mV)
        membrane_potential: Current membrane potential (mV)
        firing_rate: Recent firing activity
        synaptic_weight: Strength used by pruning decisions
        synaptic_strength_threshold: Weight below which pruning may terminate edges
        plasticity_rate: Scale applied to LTP + LTD
        absolute_refractory_period: Input is dropped while positive
        relative_refractory_period: Gain on accumulated input
        neurotransmitter_concentration: Multiplier on accumulated input
        ltp: Long-term potentiation accumulator
        ltd: Long-term depression accumulator
        axonal_connections: Soma coordinates this neuron's axon reaches
        dendritic_connections: Soma coordinates whose axons reach this neuron
    """

    x: int
    y: int
    z: int
    ax: int
    ay: int
    az: int
    neuron_type: int
    neurotransmitter_type: int

    accumulated_potential: float = 0.0
    threshold_potential: float = MIN_THRESHOLD_POTENTIAL
    membrane_potential: float = RESTING_POTENTIAL
    firing_rate: float = 0.0

    synaptic_weight: float = DEFAULT_SYNAPTIC_WEIGHT
    synaptic_strength_threshold: float = DEFAULT_SYNAPTIC_STRENGTH_THRESHOLD
    plasticity_rate: float = DEFAULT_PLASTICITY_RATE

    absolute_refractory_period: float = 0.0
    relative_refractory_period: float = BASE_RELATIVE_REFRACTORY_PERIOD

    neurotransmitter_concentration: float = DEFAULT_NEUROTRANSMITTER_CONCENTRATION

    ltp: float = 0.0
    ltd: float = 0.0

    axonal_connections: ConnectionSet = field(default_factory=set)
    dendritic_connections: ConnectionSet = field(default_factory=set)

    def to_dict(self) -> StateDict:
        """Convert to plain containers (connection sets become sorted lists)."""
        data = asdict(self)
        data["neuron_type"] = int(self.neuron_type)
        data["neurotransmitter_type"] = int(self.neurotransmitter_type)
        data["axonal_connections"] = _coordinates_to_lists(self.axonal_connections)
        data["dendritic_connections"] = _coordinates_to_lists(self.dendritic_connections)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NeuronState":
        """Rebuild a state from :meth:`to_dict` output.

        Raises:
            CheckpointError: If fields are missing or unknown
        """
        names = {f.name for f in fields(cls)}
        missing = names - set(data)
        unknown = set(data) - names
        if missing or unknown:
            raise CheckpointError(
                f"Malformed neuron state: missing={sorted(missing)}, unknown={sorted(unknown)}"
            )

        kwargs = dict(data)
        for name in ("x", "y", "z", "ax", "ay", "az", "neuron_type", "neurotransmitter_type"):
            kwargs[name] = int(kwargs[name])
        for name in SCALAR_FIELDS:
            kwargs[name] = float(kwargs[name])
        kwargs["axonal_connections"] = _lists_to_coordinates(data["axonal_connections"])
        kwargs["dendritic_connections"] = _lists_to_coordinates(data["dendritic_connections"])
        return cls(**kwargs)


__all__ = ["NeuronState", "SCALAR_FIELDS"]
