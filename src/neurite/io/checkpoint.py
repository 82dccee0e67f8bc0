"""
Neuron Checkpoint API - Save and restore neuron states with torch.

Provides simple API for checkpoint persistence:
    NeuronCheckpoint.save(neurons, path, metadata)
    NeuronCheckpoint.load(path, signal_delay)
    NeuronCheckpoint.info(path)

Layout of the payload written with ``torch.save``:
    format_version: int
    metadata: dict of plain values (timestamp, versions, user metadata)
    scalar_fields: names of the float columns
    scalars: float64 tensor [n_neurons, n_scalar_fields]
    identity: per-neuron [x, y, z, ax, ay, az, nt, nrt] int lists
    axonal_connections / dendritic_connections: per-neuron sorted [x, y, z] lists
    checksum: SHA-256 over the scalar bytes, identity and connection lists

float64 tensors keep every scalar bit-exact, NaN and infinities included.
Identity stays as Python ints so coordinates of any size round-trip.
"""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import torch

from neurite.components.neurons.neuron import Neuron
from neurite.components.neurons.neuron_state import SCALAR_FIELDS, NeuronState
from neurite.errors import CheckpointError, InvalidArgumentError
from neurite.global_config import GlobalConfig
from neurite.utils.signal_delay import SignalDelay

logger = logging.getLogger(__name__)

IDENTITY_FIELDS = ("x", "y", "z", "ax", "ay", "az", "neuron_type", "neurotransmitter_type")

_REQUIRED_KEYS = (
    "format_version",
    "metadata",
    "scalar_fields",
    "scalars",
    "identity",
    "axonal_connections",
    "dendritic_connections",
    "checksum",
)

_SYSTEM_METADATA_KEYS = ("timestamp", "neurite_version", "pytorch_version", "n_neurons")


def _checksum(
    scalars: torch.Tensor,
    identity: List[List[int]],
    axonal: List[Any],
    dendritic: List[Any],
) -> str:
    hasher = hashlib.sha256()
    hasher.update(scalars.contiguous().numpy().tobytes())
    hasher.update(json.dumps([identity, axonal, dendritic]).encode("utf-8"))
    return hasher.hexdigest()


def _read_payload(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Checkpoint not found: {path}")

    try:
        payload = torch.load(path, map_location="cpu", weights_only=True)
    except Exception as e:
        raise CheckpointError(f"Failed to read checkpoint {path}: {e}") from e

    if not isinstance(payload, dict):
        raise CheckpointError(f"Checkpoint {path} does not contain a neuron payload")
    missing = [key for key in _REQUIRED_KEYS if key not in payload]
    if missing:
        raise CheckpointError(f"Checkpoint {path} is missing keys: {missing}")

    version = payload["format_version"]
    if version != GlobalConfig.CHECKPOINT_FORMAT_VERSION:
        raise CheckpointError(
            f"Checkpoint version {version} not compatible with "
            f"{GlobalConfig.CHECKPOINT_FORMAT_VERSION}"
        )
    if list(payload["scalar_fields"]) != list(SCALAR_FIELDS):
        raise CheckpointError(
            f"Checkpoint scalar fields {payload['scalar_fields']} do not match {list(SCALAR_FIELDS)}"
        )
    return payload


class NeuronCheckpoint:
    """High-level API for neuron checkpoint persistence."""

    @staticmethod
    def save(
        neurons: Sequence[Neuron],
        path: Union[str, Path],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Save neuron states to a checkpoint file.

        Args:
            neurons: Neurons to persist, in order
            path: Path to save checkpoint
            metadata: Optional metadata dict (plain values only)

        Returns:
            Summary dict with file info

        Raises:
            InvalidArgumentError: If metadata uses a key the checkpoint
                records itself (timestamp, versions, n_neurons)

        Example:
            >>> NeuronCheckpoint.save([sensory, motor], "chain.pt", {"trial": 3})
        """
        from neurite import __version__

        metadata = dict(metadata or {})
        reserved = sorted(set(metadata) & set(_SYSTEM_METADATA_KEYS))
        if reserved:
            raise InvalidArgumentError(f"metadata keys {reserved} are reserved for checkpoint info")

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        states = [neuron.get_state().to_dict() for neuron in neurons]

        scalars = torch.tensor(
            [[state[name] for name in SCALAR_FIELDS] for state in states],
            dtype=torch.float64,
        ).reshape(len(states), len(SCALAR_FIELDS))
        identity = [[state[name] for name in IDENTITY_FIELDS] for state in states]
        axonal = [state["axonal_connections"] for state in states]
        dendritic = [state["dendritic_connections"] for state in states]

        metadata.update({
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "neurite_version": __version__,
            "pytorch_version": str(torch.__version__),
            "n_neurons": len(states),
        })

        checksum = _checksum(scalars, identity, axonal, dendritic)
        torch.save(
            {
                "format_version": GlobalConfig.CHECKPOINT_FORMAT_VERSION,
                "metadata": metadata,
                "scalar_fields": list(SCALAR_FIELDS),
                "scalars": scalars,
                "identity": identity,
                "axonal_connections": axonal,
                "dendritic_connections": dendritic,
                "checksum": checksum,
            },
            path,
        )

        file_size = path.stat().st_size
        logger.info("Saved %d neurons to %s (%d bytes)", len(states), path, file_size)

        return {
            "path": str(path),
            "file_size": file_size,
            "n_neurons": len(states),
            "checksum": checksum,
        }

    @staticmethod
    def load_states(path: Union[str, Path]) -> List[NeuronState]:
        """Load neuron state snapshots without constructing neurons.

        Raises:
            FileNotFoundError: If the file does not exist
            CheckpointError: If the payload is malformed, corrupted or from
                an incompatible format version
        """
        payload = _read_payload(path)
        scalars = payload["scalars"]
        identity = payload["identity"]
        axonal = payload["axonal_connections"]
        dendritic = payload["dendritic_connections"]

        n_neurons = len(identity)
        if scalars.shape != (n_neurons, len(SCALAR_FIELDS)) or len(axonal) != n_neurons or len(
            dendritic
        ) != n_neurons:
            raise CheckpointError(f"Checkpoint {path} has inconsistent neuron counts")
        if _checksum(scalars, identity, axonal, dendritic) != payload["checksum"]:
            raise CheckpointError(f"Checkpoint {path} failed checksum validation")

        states = []
        for row_scalars, row_identity, row_axonal, row_dendritic in zip(
            scalars.tolist(), identity, axonal, dendritic
        ):
            data: Dict[str, Any] = dict(zip(IDENTITY_FIELDS, row_identity))
            data.update(zip(SCALAR_FIELDS, row_scalars))
            data["axonal_connections"] = row_axonal
            data["dendritic_connections"] = row_dendritic
            states.append(NeuronState.from_dict(data))
        return states

    @staticmethod
    def load(
        path: Union[str, Path],
        signal_delay: Optional[SignalDelay] = None,
    ) -> List[Neuron]:
        """Load neurons from a checkpoint file.

        Args:
            path: Path to checkpoint file
            signal_delay: Delay capability handed to every restored neuron

        Returns:
            Neurons in the order they were saved
        """
        neurons = [
            Neuron.from_state(state, signal_delay=signal_delay)
            for state in NeuronCheckpoint.load_states(path)
        ]
        logger.info("Loaded %d neurons from %s", len(neurons), path)
        return neurons

    @staticmethod
    def info(path: Union[str, Path]) -> Dict[str, Any]:
        """Return checkpoint metadata without restoring neurons."""
        payload = _read_payload(path)
        return {
            "format_version": payload["format_version"],
            "metadata": dict(payload["metadata"]),
            "n_neurons": len(payload["identity"]),
            "checksum": payload["checksum"],
        }
