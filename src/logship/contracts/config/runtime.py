# src/logship/contracts/config/runtime.py
"""Runtime configuration dataclasses.

These dataclasses implement the Runtime*Protocol interfaces and are built
from validated Settings objects via from_settings() factories.

Design Principles:
1. Frozen (immutable) - runtime config never changes after derivation
2. Slots - prevents attribute typos
3. Protocol compliance - implements Runtime*Protocol for structural typing
4. Factory methods - from_settings(), default()

Field Origins:
- Settings fields: Come from user YAML configuration via Pydantic models
- Internal fields: Hardcoded, documented in INTERNAL_DEFAULTS
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from logship.contracts.config.defaults import INTERNAL_DEFAULTS

# Settings classes are imported for type checking only so the contracts
# package never imports logship.core at module level.
if TYPE_CHECKING:
    from logship.core.config import ExporterSettings, RetrySettings


@dataclass(frozen=True, slots=True)
class RuntimeQueueConfig:
    """Enforced delivery-queue parameters.

    Implements RuntimeQueueProtocol for structural typing verification.

    Field Origins:
        - enabled: INTERNAL - always True (see INTERNAL_DEFAULTS["queue"]["enabled"])
        - concurrency: INTERNAL - always 1 (see INTERNAL_DEFAULTS["queue"]["concurrency"])
        - capacity: ExporterSettings.sending_queue.queue_size (renamed)

    Why concurrency is internal:
        The log service chains writes with sequence tokens. A second
        concurrent writer would send a stale token and be rejected, or
        interleave events out of order. Only the queue size is user-settable.
    """

    enabled: bool
    concurrency: int
    capacity: int

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.concurrency != INTERNAL_DEFAULTS["queue"]["concurrency"]:
            raise ValueError(f"concurrency must be exactly 1 (one in-flight append per stream), got {self.concurrency}")
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")

    @classmethod
    def default(cls) -> "RuntimeQueueConfig":
        """Factory for the default queue configuration (capacity 1000)."""
        from logship.core.config import QueueSettings

        return cls(
            enabled=bool(INTERNAL_DEFAULTS["queue"]["enabled"]),
            concurrency=int(INTERNAL_DEFAULTS["queue"]["concurrency"]),
            capacity=QueueSettings().queue_size,
        )

    @classmethod
    def from_settings(cls, settings: "ExporterSettings") -> "RuntimeQueueConfig":
        """Derive the enforced queue parameters from validated settings.

        Field Mapping:
            settings.sending_queue.queue_size -> capacity (renamed)
            enabled <- INTERNAL_DEFAULTS["queue"]["enabled"] (hardcoded)
            concurrency <- INTERNAL_DEFAULTS["queue"]["concurrency"] (hardcoded)

        The settings must already have passed validate_settings(); behavior
        on unvalidated settings is not defined.

        Args:
            settings: Validated exporter settings

        Returns:
            RuntimeQueueConfig with concurrency pinned to 1
        """
        return cls(
            enabled=bool(INTERNAL_DEFAULTS["queue"]["enabled"]),
            concurrency=int(INTERNAL_DEFAULTS["queue"]["concurrency"]),
            capacity=settings.sending_queue.queue_size,
        )


def derive_queue_config(settings: "ExporterSettings") -> RuntimeQueueConfig:
    """Function form of RuntimeQueueConfig.from_settings()."""
    return RuntimeQueueConfig.from_settings(settings)


@dataclass(frozen=True, slots=True)
class RuntimeRetryConfig:
    """Retry parameters handed to the host's retry runtime.

    Implements RuntimeRetryProtocol. This package never retries; the values
    are passed through unchanged.

    Field Origins (all from RetrySettings):
        - enabled: RetrySettings.enabled (direct)
        - initial_interval: RetrySettings.initial_interval_seconds (renamed)
        - max_interval: RetrySettings.max_interval_seconds (renamed)
        - max_elapsed_time: RetrySettings.max_elapsed_time_seconds (renamed)
    """

    enabled: bool
    initial_interval: float  # seconds
    max_interval: float  # seconds
    max_elapsed_time: float  # seconds

    @classmethod
    def default(cls) -> "RuntimeRetryConfig":
        """Factory for default retry configuration."""
        from logship.core.config import RetrySettings

        return cls.from_settings(RetrySettings())

    @classmethod
    def from_settings(cls, settings: "RetrySettings") -> "RuntimeRetryConfig":
        """Factory from RetrySettings config model.

        Args:
            settings: Validated Pydantic settings model

        Returns:
            RuntimeRetryConfig with mapped values
        """
        return cls(
            enabled=settings.enabled,
            initial_interval=settings.initial_interval_seconds,
            max_interval=settings.max_interval_seconds,
            max_elapsed_time=settings.max_elapsed_time_seconds,
        )


@dataclass(frozen=True, slots=True)
class RuntimeExporterConfig:
    """Everything the host needs to start delivering to one log stream.

    Field Origins:
        - log_group_name, log_stream_name, endpoint, log_retention, raw_log:
          ExporterSettings (direct)
        - tags: ExporterSettings.tags (read-only copy)
        - queue: RuntimeQueueConfig.from_settings(settings)
        - retry: RuntimeRetryConfig.from_settings(settings.retry_on_failure)
    """

    log_group_name: str
    log_stream_name: str
    endpoint: str
    log_retention: int
    # Not hashed: mappingproxy is unhashable
    tags: Mapping[str, str] = field(hash=False)
    raw_log: bool
    queue: RuntimeQueueConfig
    retry: RuntimeRetryConfig

    @classmethod
    def from_settings(cls, settings: "ExporterSettings") -> "RuntimeExporterConfig":
        """Build the runtime bundle from validated settings."""
        return cls(
            log_group_name=settings.log_group_name,
            log_stream_name=settings.log_stream_name,
            endpoint=settings.endpoint,
            log_retention=settings.log_retention,
            tags=MappingProxyType(dict(settings.tags)),
            raw_log=settings.raw_log,
            queue=RuntimeQueueConfig.from_settings(settings),
            retry=RuntimeRetryConfig.from_settings(settings.retry_on_failure),
        )
