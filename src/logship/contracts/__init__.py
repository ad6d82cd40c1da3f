"""Shared contracts: reason codes, validation errors, runtime config.

Settings models (ExporterSettings, QueueSettings, RetrySettings) are NOT
here. Import them from logship.core.config.
"""

from logship.contracts.enums import TagViolation
from logship.contracts.errors import (
    ConfigValidationError,
    InvalidQueueCapacityError,
    InvalidRetentionError,
    InvalidTagsError,
    MissingFieldError,
)

__all__ = [
    "ConfigValidationError",
    "InvalidQueueCapacityError",
    "InvalidRetentionError",
    "InvalidTagsError",
    "MissingFieldError",
    "TagViolation",
]
