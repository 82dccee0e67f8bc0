"""
Neuron Constants - Membrane potentials, thresholds, refractory periods, output signals.

These are hand-tuned values for a discrete-event approximation of a spiking
cell: each call to ``transmit`` advances the state by one step, so the factors
below are per-call multipliers rather than time constants.

Membrane and Threshold Potentials (mV):
---------------------------------------
- RESTING_POTENTIAL (-70mV): Membrane potential with no accumulated input
- Threshold window [-55mV, -50mV]: Rises with accumulated potential and firing rate
- Membrane window [-90mV, -20mV]: Hard physiological bounds on the membrane

Refractory Periods (normalized, 1.0 = fully engaged / fully recovered):
-----------------------------------------------------------------------
- Absolute: Set to 1.0 on firing, drained by firing rate; input is dropped while > 0
- Relative: Set to 0.0 on firing, recovers with firing rate; scales accumulation

Output Signals:
---------------
- Excitatory cells emit in [1.0, 30.0]
- Inhibitory cells emit in [-20.0, -1.0]
"""

# =============================================================================
# REFRACTORY PERIODS
# =============================================================================

BASE_ABSOLUTE_REFRACTORY_PERIOD = 1.0
"""Absolute refractory period imposed when the neuron crosses threshold."""

ABSOLUTE_REFRACTORY_PERIOD_DECREASE_FACTOR = 0.99
"""Drain of the absolute refractory period per dropped input, scaled by firing rate."""

BASE_RELATIVE_REFRACTORY_PERIOD = 1.0
"""Fully recovered relative refractory level (no attenuation of input)."""

RELATIVE_REFRACTORY_PERIOD_RECOVERY_FACTOR = 0.165
"""Recovery of the relative refractory level per call, scaled by firing rate."""

# =============================================================================
# MEMBRANE AND ACCUMULATED POTENTIAL
# =============================================================================

RESTING_POTENTIAL = -70.0
"""Resting membrane potential (mV)."""

ACCUMULATED_POTENTIAL_CRITICAL_VALUE = 10.0
"""Input magnitude at or above which the stimulus gain applies.

Also used as the normalizer for input- and potential-driven updates.
"""

ACCUMULATED_POTENTIAL_STIMULUS_INTENSITY = 0.8
"""Gain for strong inputs (|input| >= critical value)."""

ACCUMULATED_POTENTIAL_SLIGHT_INTENSITY = 0.08
"""Gain for weak inputs (|input| < critical value)."""

MIN_MEMBRANE_POTENTIAL = -90.0
"""Lower bound of membrane potential (mV)."""

MAX_MEMBRANE_POTENTIAL = -20.0
"""Upper bound of membrane potential (mV)."""

# =============================================================================
# THRESHOLD POTENTIAL
# =============================================================================

MIN_THRESHOLD_POTENTIAL = -55.0
"""Base (and minimum) threshold potential (mV)."""

MAX_THRESHOLD_POTENTIAL = -50.0
"""Cap on the threshold potential (mV)."""

THRESHOLD_POTENTIAL_BOOST_FACTOR_FOR_ACCUMULATED_POTENTIAL = 0.01
"""Threshold raise per unit of positive accumulated potential."""

THRESHOLD_POTENTIAL_BOOST_FACTOR_FOR_FIRING_RATE = 0.02
"""Threshold raise per unit of firing rate."""

# =============================================================================
# OUTPUT SIGNALS
# =============================================================================

MIN_EXCITATORY_SIGNAL = 1.0
"""Smallest signal an excitatory neuron emits when firing."""

MAX_EXCITATORY_SIGNAL = 30.0
"""Largest signal an excitatory neuron emits when firing."""

MIN_INHIBITORY_SIGNAL = -20.0
"""Most negative signal an inhibitory neuron emits when firing."""

MAX_INHIBITORY_SIGNAL = -1.0
"""Least negative signal an inhibitory neuron emits when firing."""

# =============================================================================
# FIRING RATE
# =============================================================================

MAX_FIRING_RATE = 1.0
"""Cap on the firing rate."""

FIRING_RATE_DECREASE_FACTOR = 0.92
"""Multiplicative decay of the firing rate on sub-threshold calls."""

FIRING_RATE_BOOST_FACTOR = 0.01
"""Firing rate gain on supra-threshold calls (also the output scale in fire)."""

# =============================================================================
# REGULATORY FACTORS
# =============================================================================

DEFAULT_NEUROTRANSMITTER_CONCENTRATION = 1.0
"""Initial neurotransmitter concentration (multiplier on accumulated input)."""
