"""
Signal Delay - Injectable propagation delay for inter-neuron signals.

A neuron receiving a signal from a source neuron waits for a delay derived
from the soma-to-soma distance before processing it. The waiting itself is
a capability handed to the neuron, so simulations can run in real time
(:class:`AsyncioSignalDelay`) while tests advance without wall-clock waits
(:class:`RecordingSignalDelay`).

Any awaitable callable taking whole milliseconds satisfies
:class:`SignalDelay`:

    async def my_delay(delay_ms: int) -> None:
        await scheduler.wait(delay_ms)

    neuron = Neuron(0, 0, 0, 1, 1, 1, 0, 1, signal_delay=my_delay)
"""

from __future__ import annotations

import asyncio
from typing import List, Protocol, runtime_checkable

from neurite.constants.time import SECONDS_PER_MS


@runtime_checkable
class SignalDelay(Protocol):
    """Protocol for propagation-delay capabilities.

    Called with a non-negative delay in milliseconds; completes once the
    signal may be delivered. There is no cancellation or timeout.
    """

    async def __call__(self, delay_ms: int) -> None:
        ...


class AsyncioSignalDelay:
    """Delay that suspends the running coroutine via ``asyncio.sleep``."""

    async def __call__(self, delay_ms: int) -> None:
        await asyncio.sleep(delay_ms * SECONDS_PER_MS)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RecordingSignalDelay:
    """Delay that records requested durations and returns immediately.

    Attributes:
        requested: Delays (ms) in the order they were requested
    """

    def __init__(self) -> None:
        self.requested: List[int] = []

    async def __call__(self, delay_ms: int) -> None:
        self.requested.append(delay_ms)

    @property
    def total_ms(self) -> int:
        """Sum of all requested delays."""
        return sum(self.requested)

    def clear(self) -> None:
        self.requested.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(requested={self.requested!r})"


__all__ = ["SignalDelay", "AsyncioSignalDelay", "RecordingSignalDelay"]
