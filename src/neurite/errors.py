"""
Custom exception classes and validation utilities for Neurite.

This module provides:
1. Hierarchical exception classes for different error categories
2. Validation utilities for neuron classification codes and coordinates
3. Consistent error message formatting

Exception Hierarchy:
====================
NeuriteError (base) - Base exception for all Neurite-specific errors
├── InvalidArgumentError - Malformed construction arguments or aliased neurons
└── CheckpointError - Errors in saving/loading neuron state

Invalid arguments are programmer errors: they abort construction, so no
partially-built neuron is ever observable.
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Exception Hierarchy
# =============================================================================


class NeuriteError(Exception):
    """Base exception for all Neurite-specific errors.

    All custom exceptions in Neurite inherit from this class, enabling
    code to catch Neurite errors specifically.
    """


class InvalidArgumentError(NeuriteError, ValueError):
    """Invalid argument passed to a neuron operation.

    Raised when a neuron type or neurotransmitter type code is outside its
    enumerated range, when a coordinate is not a non-negative integer, or
    when a neuron is asked to connect to itself.

    Example:
        raise InvalidArgumentError("neuron_type must be 0, 1, or 2, got 3")
    """


class CheckpointError(NeuriteError):
    """Error in checkpoint save/load operations.

    Raised when checkpoint format is invalid, version incompatible, or
    deserialization fails.

    Example:
        raise CheckpointError("Checkpoint version 2 not compatible with 1")
    """


# =============================================================================
# Validation Utilities
# =============================================================================


def validate_neuron_type(code: Any) -> int:
    """Validate a neuron type code (0 = Contact, 1 = Sensory, 2 = Motor).

    Returns:
        The code as a plain int.

    Raises:
        InvalidArgumentError: If the code is not 0, 1, or 2
    """
    if isinstance(code, bool) or not isinstance(code, int) or code not in (0, 1, 2):
        raise InvalidArgumentError(f"neuron_type must be 0, 1, or 2, got {code!r}")
    return int(code)


def validate_neurotransmitter_type(code: Any) -> int:
    """Validate a neurotransmitter type code (0 = Inhibitory, 1 = Excitatory).

    Returns:
        The code as a plain int.

    Raises:
        InvalidArgumentError: If the code is not 0 or 1
    """
    if isinstance(code, bool) or not isinstance(code, int) or code not in (0, 1):
        raise InvalidArgumentError(f"neurotransmitter_type must be 0 or 1, got {code!r}")
    return int(code)


def validate_coordinate(value: Any, name: str) -> int:
    """Validate that a coordinate component is a non-negative integer.

    Raises:
        InvalidArgumentError: If value is not an int or is negative
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")
    return int(value)


__all__ = [
    "NeuriteError",
    "InvalidArgumentError",
    "CheckpointError",
    "validate_neuron_type",
    "validate_neurotransmitter_type",
    "validate_coordinate",
]
