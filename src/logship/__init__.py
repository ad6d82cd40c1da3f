"""
logship: configuration validation for a log-stream exporter.

Validates exporter settings before startup and derives the delivery-queue
parameters that keep a single writer per log stream.
"""

from logship.contracts import (
    ConfigValidationError,
    InvalidQueueCapacityError,
    InvalidRetentionError,
    InvalidTagsError,
    MissingFieldError,
    TagViolation,
)
from logship.contracts.config import (
    RuntimeExporterConfig,
    RuntimeQueueConfig,
    RuntimeRetryConfig,
    derive_queue_config,
)
from logship.core.config import (
    ExporterSettings,
    QueueSettings,
    RetrySettings,
    load_settings,
    resolve_config,
)
from logship.core.validation import (
    VALID_RETENTION_DAYS,
    collect_violations,
    validate_settings,
)

__version__ = "0.1.0"

__all__ = [
    "VALID_RETENTION_DAYS",
    "ConfigValidationError",
    "ExporterSettings",
    "InvalidQueueCapacityError",
    "InvalidRetentionError",
    "InvalidTagsError",
    "MissingFieldError",
    "QueueSettings",
    "RetrySettings",
    "RuntimeExporterConfig",
    "RuntimeQueueConfig",
    "RuntimeRetryConfig",
    "TagViolation",
    "collect_violations",
    "derive_queue_config",
    "load_settings",
    "resolve_config",
    "validate_settings",
]
