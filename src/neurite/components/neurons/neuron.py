"""Spiking Neuron with Refractory Dynamics, Plasticity and Synaptic Pruning.

This module implements a single biologically-inspired spiking neuron as a
discrete-event approximation: every incoming signal advances the whole state
by one step, and every step uses hand-tuned per-call factors from
:mod:`neurite.constants`.

**Transmission Pipeline** (one call to ``transmit``):
=====================================================
1. Propagation delay: wait ``round(distance)`` ms when a source is given
2. Absolute refractory gate: drain ``arp`` and drop the input while ``arp > 0``
3. Accumulated potential: ``ap += gain * input * nc * rrp``
4. Membrane potential: ``mp = clamp(V_rest + ap)``
5. Threshold potential: ``tp = min(tp_min + 0.01*max(ap, 0) + 0.02*fr, tp_max)``
6. Refractory recovery; full reset (``arp = 1``, ``rrp = 0``) when ``mp >= tp``
7. Firing rate: boost when ``mp >= tp``, decay otherwise
8. Plasticity rate: boost when ``mp >= tp``, decay otherwise
9. LTP from positive input, 10. LTD from negative input
11. Synaptic strength threshold shifts against the input
12. Synaptic weight: ``sw += (ltp + ltd) * pr``

Each step reads state written by the previous one, so the order is fixed.

**Spike Generation**:
When ``mp >= tp``, ``detect`` fires: the accumulated potential is scaled by
``FIRING_RATE_BOOST_FACTOR / fr``, signed by the neurotransmitter type,
clamped into the excitatory or inhibitory signal range, and ``ap`` is reset
to zero.

**Connections**:
Connections are sets of neighbor soma coordinates. A neuron never owns its
neighbors; every edge is written on both sides by a paired call, holding
both neurons' locks for the duration of the update.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple, Union

import numpy as np

from neurite.components.neurons.neuron_state import SCALAR_FIELDS, NeuronState
from neurite.components.neurons.neuron_types import NeuronType, NeurotransmitterType
from neurite.constants.neuron import (
    ABSOLUTE_REFRACTORY_PERIOD_DECREASE_FACTOR,
    ACCUMULATED_POTENTIAL_CRITICAL_VALUE,
    ACCUMULATED_POTENTIAL_SLIGHT_INTENSITY,
    ACCUMULATED_POTENTIAL_STIMULUS_INTENSITY,
    BASE_ABSOLUTE_REFRACTORY_PERIOD,
    BASE_RELATIVE_REFRACTORY_PERIOD,
    DEFAULT_NEUROTRANSMITTER_CONCENTRATION,
    FIRING_RATE_BOOST_FACTOR,
    FIRING_RATE_DECREASE_FACTOR,
    MAX_EXCITATORY_SIGNAL,
    MAX_FIRING_RATE,
    MAX_INHIBITORY_SIGNAL,
    MAX_MEMBRANE_POTENTIAL,
    MAX_THRESHOLD_POTENTIAL,
    MIN_EXCITATORY_SIGNAL,
    MIN_INHIBITORY_SIGNAL,
    MIN_MEMBRANE_POTENTIAL,
    MIN_THRESHOLD_POTENTIAL,
    RELATIVE_REFRACTORY_PERIOD_RECOVERY_FACTOR,
    RESTING_POTENTIAL,
    THRESHOLD_POTENTIAL_BOOST_FACTOR_FOR_ACCUMULATED_POTENTIAL,
    THRESHOLD_POTENTIAL_BOOST_FACTOR_FOR_FIRING_RATE,
)
from neurite.constants.plasticity import (
    DEFAULT_PLASTICITY_RATE,
    DEFAULT_SYNAPTIC_STRENGTH_THRESHOLD,
    DEFAULT_SYNAPTIC_WEIGHT,
    LTD_BOOST_FACTOR,
    LTD_DECREASE_FACTOR,
    LTP_BOOST_FACTOR,
    LTP_DECREASE_FACTOR,
    MAX_LTP,
    MAX_PLASTICITY_RATE,
    MIN_LTD,
    PLASTICITY_RATE_BOOST_FACTOR,
    PLASTICITY_RATE_DECREASE_FACTOR,
    SYNAPTIC_STRENGTH_THRESHOLD_BOOST_FACTOR,
)
from neurite.errors import (
    InvalidArgumentError,
    validate_coordinate,
    validate_neuron_type,
    validate_neurotransmitter_type,
)
from neurite.global_config import GlobalConfig
from neurite.typing import ConnectionSet, Coordinate, DiagnosticsDict
from neurite.units import Milliseconds, Signal
from neurite.utils.core_utils import clamp, euclidean_distance, round_half_away_from_zero
from neurite.utils.numerical_validation import non_finite_fields
from neurite.utils.signal_delay import AsyncioSignalDelay, SignalDelay

logger = logging.getLogger(__name__)


class Neuron:
    """Single spiking neuron with plasticity and coordinate-keyed connections.

    Args:
        x, y, z: Soma coordinate (non-negative integers). Identifies the
            neuron in other neurons' connection sets.
        ax, ay, az: Axon terminal coordinate. Stored only; distances use
            the soma.
        neuron_type: 0 = Contact, 1 = Sensory, 2 = Motor
        neurotransmitter_type: 0 = Inhibitory, 1 = Excitatory
        signal_delay: Awaitable callable used to wait out propagation delays.
            Defaults to :class:`AsyncioSignalDelay`.

    Raises:
        InvalidArgumentError: If a classification code is out of range or a
            coordinate is not a non-negative integer.

    Example:
        >>> sensory = Neuron(0, 0, 0, 1, 1, 1, NeuronType.SENSORY, NeurotransmitterType.EXCITATORY)
        >>> motor = Neuron(3, 4, 0, 4, 5, 1, NeuronType.MOTOR, NeurotransmitterType.EXCITATORY)
        >>> sensory.establish_axonal_connection(motor)
        >>> await sensory.transmit(20.0)
        >>> await motor.transmit(sensory.detect(), source=sensory)
    """

    def __init__(
        self,
        x: int,
        y: int,
        z: int,
        ax: int,
        ay: int,
        az: int,
        neuron_type: Union[int, NeuronType],
        neurotransmitter_type: Union[int, NeurotransmitterType],
        *,
        signal_delay: Optional[SignalDelay] = None,
    ):
        nt = validate_neuron_type(neuron_type)
        nrt = validate_neurotransmitter_type(neurotransmitter_type)

        # ---- Geometry ----
        self.x = validate_coordinate(x, "x")
        self.y = validate_coordinate(y, "y")
        self.z = validate_coordinate(z, "z")
        self.ax = validate_coordinate(ax, "ax")
        self.ay = validate_coordinate(ay, "ay")
        self.az = validate_coordinate(az, "az")

        # ---- Classification ----
        self.neuron_type = NeuronType(nt)
        self.neurotransmitter_type = NeurotransmitterType(nrt)

        # ---- Electrophysiology ----
        self.accumulated_potential = 0.0
        self.threshold_potential = MIN_THRESHOLD_POTENTIAL
        self.membrane_potential = RESTING_POTENTIAL
        self.firing_rate = 0.0

        # ---- Synaptic plasticity ----
        self.synaptic_weight = DEFAULT_SYNAPTIC_WEIGHT
        self.synaptic_strength_threshold = DEFAULT_SYNAPTIC_STRENGTH_THRESHOLD
        self.plasticity_rate = DEFAULT_PLASTICITY_RATE

        # ---- Refractory periods ----
        self.absolute_refractory_period = 0.0
        self.relative_refractory_period = BASE_RELATIVE_REFRACTORY_PERIOD

        # ---- Regulatory factors ----
        self.neurotransmitter_concentration = DEFAULT_NEUROTRANSMITTER_CONCENTRATION

        # ---- Long-term adjustment ----
        self.ltp = 0.0
        self.ltd = 0.0

        # ---- Topology ----
        self.axonal_connections: ConnectionSet = set()
        self.dendritic_connections: ConnectionSet = set()

        self.signal_delay: SignalDelay = signal_delay or AsyncioSignalDelay()
        self._lock = threading.RLock()

    # =========================================================================
    # GEOMETRY
    # =========================================================================

    @property
    def coordinate(self) -> Coordinate:
        """Soma coordinate, the key under which neighbors record this neuron."""
        return (self.x, self.y, self.z)

    @property
    def axon_coordinate(self) -> Coordinate:
        return (self.ax, self.ay, self.az)

    def distance_to(self, other: "Neuron") -> float:
        """Euclidean distance between the two somata."""
        return euclidean_distance(self.coordinate, other.coordinate)

    def propagation_delay_ms(self, other: "Neuron") -> Milliseconds:
        """Delay before a signal from ``other`` is delivered to this neuron."""
        distance = self.distance_to(other) * GlobalConfig.DELAY_MS_PER_DISTANCE_UNIT
        return Milliseconds(round_half_away_from_zero(distance))

    # =========================================================================
    # STATE QUERIES
    # =========================================================================

    @property
    def is_firing_eligible(self) -> bool:
        """True when the membrane potential has reached the threshold."""
        return self.membrane_potential >= self.threshold_potential

    @property
    def is_refractory(self) -> bool:
        """True while the absolute refractory period drops incoming signals."""
        return self.absolute_refractory_period > 0.0

    # =========================================================================
    # CONNECTION PROTOCOL
    # =========================================================================

    @contextmanager
    def _paired(self, other: "Neuron") -> Iterator[None]:
        """Hold both neurons' locks, acquired in a global order."""
        if other is self:
            raise InvalidArgumentError(
                f"Neuron at {self.coordinate} cannot form a connection with itself"
            )
        first, second = sorted((self, other), key=_lock_order)
        with first._lock, second._lock:
            yield

    def establish_axonal_connection(self, neuron: "Neuron") -> None:
        """Connect this neuron's axon to ``neuron``'s dendrite."""
        with self._paired(neuron):
            self.axonal_connections.add(neuron.coordinate)
            neuron.dendritic_connections.add(self.coordinate)

    def establish_dendritic_connection(self, neuron: "Neuron") -> None:
        """Connect ``neuron``'s axon to this neuron's dendrite."""
        with self._paired(neuron):
            self.dendritic_connections.add(neuron.coordinate)
            neuron.axonal_connections.add(self.coordinate)

    def terminate_axonal_connection(self, neuron: "Neuron") -> None:
        """Remove the edge from this neuron's axon to ``neuron``'s dendrite."""
        with self._paired(neuron):
            self.axonal_connections.discard(neuron.coordinate)
            neuron.dendritic_connections.discard(self.coordinate)

    def terminate_dendritic_connection(self, neuron: "Neuron") -> None:
        """Remove the edge from ``neuron``'s axon to this neuron's dendrite."""
        with self._paired(neuron):
            self.dendritic_connections.discard(neuron.coordinate)
            neuron.axonal_connections.discard(self.coordinate)

    # =========================================================================
    # PRUNING
    # =========================================================================

    def prune_axonal_connection(self, neuron: "Neuron") -> None:
        """Keep, remove or (re-)create the axonal edge to ``neuron``.

        - ``sw <= sst`` and ``sw < other.sw``: terminate
        - otherwise ``sw >= other.sw``: establish
        - otherwise: unchanged
        """
        with self._paired(neuron):
            if (
                self.synaptic_weight <= self.synaptic_strength_threshold
                and self.synaptic_weight < neuron.synaptic_weight
            ):
                logger.debug("Pruning axon %s -> %s", self.coordinate, neuron.coordinate)
                self.terminate_axonal_connection(neuron)
            elif self.synaptic_weight >= neuron.synaptic_weight:
                self.establish_axonal_connection(neuron)

    def prune_dendritic_connection(self, neuron: "Neuron") -> None:
        """Keep, remove or (re-)create the dendritic edge from ``neuron``.

        - ``sw <= sst`` and ``other.sw < sw``: terminate
        - otherwise ``other.sw >= sw``: establish
        - otherwise: unchanged
        """
        with self._paired(neuron):
            if (
                self.synaptic_weight <= self.synaptic_strength_threshold
                and neuron.synaptic_weight < self.synaptic_weight
            ):
                logger.debug("Pruning dendrite %s <- %s", self.coordinate, neuron.coordinate)
                self.terminate_dendritic_connection(neuron)
            elif neuron.synaptic_weight >= self.synaptic_weight:
                self.establish_dendritic_connection(neuron)

    # =========================================================================
    # DETECTION AND FIRING
    # =========================================================================

    def detect(self) -> Signal:
        """Fire if the membrane potential has reached the threshold.

        Returns:
            The emitted signal, or exactly 0.0 (with no state change) when
            the neuron is quiescent.
        """
        with self._lock:
            if self.membrane_potential >= self.threshold_potential:
                return self._fire()
            return Signal(0.0)

    def _fire(self) -> Signal:
        """Emit a signal and reset the accumulated potential.

        The division by firing rate is left unguarded: with ``fr == 0`` the
        IEEE-754 result (inf, or NaN when ``ap == 0``) flows into the clamp.
        """
        if self.firing_rate == 0.0:
            logger.warning(
                "Neuron %s firing with zero firing rate (ap=%s); output is not finite-scaled",
                self.coordinate,
                self.accumulated_potential,
            )

        with np.errstate(divide="ignore", invalid="ignore"):
            scale = np.float64(FIRING_RATE_BOOST_FACTOR) / np.float64(self.firing_rate)
            ap = np.float64(self.accumulated_potential)
            if self.neurotransmitter_type == NeurotransmitterType.EXCITATORY:
                output = float(np.clip(ap * scale, MIN_EXCITATORY_SIGNAL, MAX_EXCITATORY_SIGNAL))
            elif self.neurotransmitter_type == NeurotransmitterType.INHIBITORY:
                output = float(np.clip(-ap * scale, MIN_INHIBITORY_SIGNAL, MAX_INHIBITORY_SIGNAL))
            else:
                output = 0.0

        self.accumulated_potential = 0.0
        logger.debug("Neuron %s fired %s", self.coordinate, output)
        return Signal(output)

    # =========================================================================
    # TRANSMISSION
    # =========================================================================

    async def transmit(self, signal: float, source: Optional["Neuron"] = None) -> None:
        """Apply one incoming signal and advance all dynamic state.

        Args:
            signal: Input signal value
            source: Neuron the signal comes from. When given, delivery waits
                for the propagation delay before any state is touched.
        """
        if source is not None:
            await self.signal_delay(self.propagation_delay_ms(source))

        with self._lock:
            if self._drain_absolute_refractory_period():
                logger.debug("Neuron %s refractory, dropped signal %s", self.coordinate, signal)
                return

            self._update_accumulated_potential(signal)
            self._update_membrane_potential()
            self._update_threshold_potential()
            self._update_refractory_periods()
            self._update_firing_rate()
            self._update_plasticity_rate()
            self._update_ltp(signal)
            self._update_ltd(signal)
            self._update_synaptic_strength_threshold(signal)
            self._update_synaptic_weight()

    def _drain_absolute_refractory_period(self) -> bool:
        if self.absolute_refractory_period > 0.0:
            self.absolute_refractory_period -= (
                ABSOLUTE_REFRACTORY_PERIOD_DECREASE_FACTOR * self.firing_rate
            )
            self.absolute_refractory_period = clamp(
                self.absolute_refractory_period, 0.0, BASE_ABSOLUTE_REFRACTORY_PERIOD
            )
            return True
        return False

    def _update_accumulated_potential(self, signal: float) -> None:
        # Strong inputs get ten times the gain of slight ones
        if abs(signal) >= ACCUMULATED_POTENTIAL_CRITICAL_VALUE:
            gain = ACCUMULATED_POTENTIAL_STIMULUS_INTENSITY
        else:
            gain = ACCUMULATED_POTENTIAL_SLIGHT_INTENSITY
        self.accumulated_potential += (
            gain * signal * self.neurotransmitter_concentration * self.relative_refractory_period
        )

    def _update_membrane_potential(self) -> None:
        self.membrane_potential = clamp(
            RESTING_POTENTIAL + self.accumulated_potential,
            MIN_MEMBRANE_POTENTIAL,
            MAX_MEMBRANE_POTENTIAL,
        )

    def _update_threshold_potential(self) -> None:
        tp = MIN_THRESHOLD_POTENTIAL
        if self.accumulated_potential > 0.0:
            tp += THRESHOLD_POTENTIAL_BOOST_FACTOR_FOR_ACCUMULATED_POTENTIAL * self.accumulated_potential
        tp += THRESHOLD_POTENTIAL_BOOST_FACTOR_FOR_FIRING_RATE * self.firing_rate
        self.threshold_potential = min(tp, MAX_THRESHOLD_POTENTIAL)

    def _update_refractory_periods(self) -> None:
        if self.relative_refractory_period < BASE_RELATIVE_REFRACTORY_PERIOD:
            self.relative_refractory_period += (
                RELATIVE_REFRACTORY_PERIOD_RECOVERY_FACTOR * self.firing_rate
            )
            self.relative_refractory_period = min(
                self.relative_refractory_period, BASE_RELATIVE_REFRACTORY_PERIOD
            )
        # About to fire: full absolute period, no relative recovery
        if self.membrane_potential >= self.threshold_potential:
            self.absolute_refractory_period = BASE_ABSOLUTE_REFRACTORY_PERIOD
            self.relative_refractory_period = 0.0

    def _update_firing_rate(self) -> None:
        if self.membrane_potential >= self.threshold_potential:
            self.firing_rate += FIRING_RATE_BOOST_FACTOR * (
                self.accumulated_potential / ACCUMULATED_POTENTIAL_CRITICAL_VALUE
            )
        else:
            self.firing_rate *= FIRING_RATE_DECREASE_FACTOR
        self.firing_rate = min(self.firing_rate, MAX_FIRING_RATE)

    def _update_plasticity_rate(self) -> None:
        if self.membrane_potential >= self.threshold_potential:
            self.plasticity_rate += PLASTICITY_RATE_BOOST_FACTOR * self.firing_rate
        else:
            self.plasticity_rate *= PLASTICITY_RATE_DECREASE_FACTOR
        self.plasticity_rate = min(self.plasticity_rate, MAX_PLASTICITY_RATE)

    def _update_ltp(self, signal: float) -> None:
        if signal > 0.0:
            self.ltp += LTP_BOOST_FACTOR * (signal / ACCUMULATED_POTENTIAL_CRITICAL_VALUE)
        else:
            self.ltp *= LTP_DECREASE_FACTOR
        self.ltp = min(self.ltp, MAX_LTP)

    def _update_ltd(self, signal: float) -> None:
        if signal < 0.0:
            self.ltd += LTD_BOOST_FACTOR * (signal / ACCUMULATED_POTENTIAL_CRITICAL_VALUE)
        else:
            self.ltd *= LTD_DECREASE_FACTOR
        self.ltd = max(self.ltd, MIN_LTD)

    def _update_synaptic_strength_threshold(self, signal: float) -> None:
        self.synaptic_strength_threshold -= SYNAPTIC_STRENGTH_THRESHOLD_BOOST_FACTOR * (
            signal / ACCUMULATED_POTENTIAL_CRITICAL_VALUE
        )
        self.synaptic_strength_threshold = clamp(self.synaptic_strength_threshold, MIN_LTD, MAX_LTP)

    def _update_synaptic_weight(self) -> None:
        self.synaptic_weight += (self.ltp + self.ltd) * self.plasticity_rate
        self.synaptic_weight = clamp(self.synaptic_weight, MIN_LTD, MAX_LTP)

    # =========================================================================
    # STATE MANAGEMENT
    # =========================================================================

    def get_state(self) -> NeuronState:
        """Snapshot every attribute; the snapshot shares no mutable data."""
        with self._lock:
            return NeuronState(
                x=self.x,
                y=self.y,
                z=self.z,
                ax=self.ax,
                ay=self.ay,
                az=self.az,
                neuron_type=int(self.neuron_type),
                neurotransmitter_type=int(self.neurotransmitter_type),
                axonal_connections=set(self.axonal_connections),
                dendritic_connections=set(self.dendritic_connections),
                **{name: getattr(self, name) for name in SCALAR_FIELDS},
            )

    def load_state(self, state: NeuronState) -> None:
        """Overwrite every attribute from ``state``.

        Raises:
            InvalidArgumentError: If the state carries invalid codes or coordinates
        """
        nt = validate_neuron_type(state.neuron_type)
        nrt = validate_neurotransmitter_type(state.neurotransmitter_type)
        geometry = {
            name: validate_coordinate(getattr(state, name), name)
            for name in ("x", "y", "z", "ax", "ay", "az")
        }

        with self._lock:
            for name, value in geometry.items():
                setattr(self, name, value)
            self.neuron_type = NeuronType(nt)
            self.neurotransmitter_type = NeurotransmitterType(nrt)
            for name in SCALAR_FIELDS:
                setattr(self, name, float(getattr(state, name)))
            self.axonal_connections = set(state.axonal_connections)
            self.dendritic_connections = set(state.dendritic_connections)

    @classmethod
    def from_state(
        cls, state: NeuronState, signal_delay: Optional[SignalDelay] = None
    ) -> "Neuron":
        """Construct a neuron and restore ``state`` into it."""
        neuron = cls(
            state.x,
            state.y,
            state.z,
            state.ax,
            state.ay,
            state.az,
            state.neuron_type,
            state.neurotransmitter_type,
            signal_delay=signal_delay,
        )
        neuron.load_state(state)
        return neuron

    def clone(self) -> "Neuron":
        """Independent copy with equal state, sharing the delay capability."""
        return type(self).from_state(self.get_state(), signal_delay=self.signal_delay)

    def get_diagnostics(self) -> DiagnosticsDict:
        """Return current scalar state and connection counts."""
        with self._lock:
            diagnostics: DiagnosticsDict = {
                "coordinate": self.coordinate,
                "neuron_type": self.neuron_type.name.lower(),
                "neurotransmitter_type": self.neurotransmitter_type.name.lower(),
            }
            diagnostics.update({name: getattr(self, name) for name in SCALAR_FIELDS})
            diagnostics["firing_eligible"] = self.is_firing_eligible
            diagnostics["refractory"] = self.is_refractory
            diagnostics["n_axonal_connections"] = len(self.axonal_connections)
            diagnostics["n_dendritic_connections"] = len(self.dendritic_connections)
            diagnostics["non_finite_fields"] = non_finite_fields(diagnostics, SCALAR_FIELDS)
        return diagnostics

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(coordinate={self.coordinate}, "
            f"type={self.neuron_type.name}, "
            f"neurotransmitter={self.neurotransmitter_type.name}, "
            f"mp={self.membrane_potential:.3f}, tp={self.threshold_potential:.3f}, "
            f"fr={self.firing_rate:.4f}, sw={self.synaptic_weight:.4f})"
        )


def _lock_order(neuron: Neuron) -> Tuple[Coordinate, int]:
    return (neuron.coordinate, id(neuron))


__all__ = ["Neuron"]
