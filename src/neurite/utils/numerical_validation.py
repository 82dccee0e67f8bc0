"""Utility functions for numerical validation."""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping


def non_finite_fields(values: Mapping[str, Any], names: Iterable[str]) -> list[str]:
    """Return the names whose values are NaN or infinite.

    Args:
        values: Mapping of attribute name to value
        names: Names to check; non-float values are skipped

    Returns:
        Offending names in the order given
    """
    bad = []
    for name in names:
        value = values[name]
        if isinstance(value, float) and not math.isfinite(value):
            bad.append(name)
    return bad


def is_finite_state(values: Mapping[str, Any], names: Iterable[str]) -> bool:
    """Check that every named float in ``values`` is finite."""
    return not non_finite_fields(values, names)


__all__ = ["non_finite_fields", "is_finite_state"]
