# src/logship/contracts/config/protocols.py
"""Runtime protocols consumed by the host's delivery runtime.

The host's queue and retry collaborators accept these protocols rather than
the concrete dataclasses. The single-writer rule reaches the queue runtime
as the value of RuntimeQueueProtocol.concurrency; this package never holds a
lock of its own.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RuntimeQueueProtocol(Protocol):
    """What the batching/queueing runtime expects from queue configuration."""

    @property
    def enabled(self) -> bool:
        """Whether records are queued before delivery."""
        ...

    @property
    def concurrency(self) -> int:
        """Number of consumers draining the queue (always 1)."""
        ...

    @property
    def capacity(self) -> int:
        """Maximum number of batches held in the queue."""
        ...


@runtime_checkable
class RuntimeRetryProtocol(Protocol):
    """What the host's retry runtime expects from retry configuration."""

    @property
    def enabled(self) -> bool:
        """Whether failed appends are retried."""
        ...

    @property
    def initial_interval(self) -> float:
        """Delay before the first retry, in seconds."""
        ...

    @property
    def max_interval(self) -> float:
        """Upper bound on the delay between retries, in seconds."""
        ...

    @property
    def max_elapsed_time(self) -> float:
        """Total time budget for retrying one batch, in seconds."""
        ...
