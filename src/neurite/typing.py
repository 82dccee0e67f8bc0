"""
Type Aliases for Neurite

Type aliases used throughout the Neurite codebase for clearer type hints.

Example:
    from neurite.typing import Coordinate, ConnectionSet
"""

from typing import Any, Dict, List, Set, Tuple

# ============================================================================
# Topology
# ============================================================================

Coordinate = Tuple[int, int, int]
"""Integer 3D coordinate (x, y, z) of a soma or axon terminal.

Soma coordinates identify neurons in connection sets.
"""

ConnectionSet = Set[Coordinate]
"""Set of neighbor soma coordinates (axonal or dendritic connections)."""

# ============================================================================
# State Management
# ============================================================================

StateDict = Dict[str, Any]
"""Plain-container state mapping (floats, ints, lists) for serialization."""

DiagnosticsDict = Dict[str, Any]
"""Diagnostic metrics keyed by name."""

CoordinateList = List[List[int]]
"""Connection set flattened to sorted [x, y, z] lists for persistence."""

__all__ = [
    "Coordinate",
    "ConnectionSet",
    "StateDict",
    "DiagnosticsDict",
    "CoordinateList",
]
