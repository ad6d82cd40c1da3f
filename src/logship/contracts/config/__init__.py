# src/logship/contracts/config/__init__.py
"""Configuration contracts subpackage.

This subpackage contains:
- Runtime protocols (protocols.py) - what the host's runtime expects
- Runtime config dataclasses (runtime.py) - concrete implementations
- Default registry (defaults.py) - INTERNAL_DEFAULTS

NOTE: Settings classes (ExporterSettings, RetrySettings, etc.) are NOT here.
      Import them from logship.core.config.

Import patterns:
    from logship.core.config import ExporterSettings
    from logship.contracts.config import RuntimeQueueConfig, RuntimeQueueProtocol
"""

from logship.contracts.config.defaults import INTERNAL_DEFAULTS
from logship.contracts.config.protocols import RuntimeQueueProtocol, RuntimeRetryProtocol
from logship.contracts.config.runtime import (
    RuntimeExporterConfig,
    RuntimeQueueConfig,
    RuntimeRetryConfig,
    derive_queue_config,
)

__all__ = [
    "INTERNAL_DEFAULTS",
    "RuntimeExporterConfig",
    "RuntimeQueueConfig",
    "RuntimeQueueProtocol",
    "RuntimeRetryConfig",
    "RuntimeRetryProtocol",
    "derive_queue_config",
]
