"""Global configuration constants for Neurite."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GlobalConfig:
    """Global configuration constants for Neurite.

    Process-wide knobs that are not cell parameters. Neuron cell parameters
    live in :mod:`neurite.constants`.
    """

    DELAY_MS_PER_DISTANCE_UNIT: float = 1.0
    """Propagation delay (ms) per unit of soma-to-soma distance."""

    CHECKPOINT_FORMAT_VERSION: int = 1
    """Version tag written into neuron checkpoints."""
