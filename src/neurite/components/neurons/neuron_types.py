"""Neuron classification codes.

Both enums are ``IntEnum`` so the integer codes used at construction time
(and in checkpoints) compare equal to the members.
"""

from __future__ import annotations

from enum import IntEnum


class NeuronType(IntEnum):
    """Functional role of a neuron."""

    CONTACT = 0
    SENSORY = 1
    MOTOR = 2


class NeurotransmitterType(IntEnum):
    """Polarity of the signal a neuron emits when it fires."""

    INHIBITORY = 0
    EXCITATORY = 1


__all__ = ["NeuronType", "NeurotransmitterType"]
