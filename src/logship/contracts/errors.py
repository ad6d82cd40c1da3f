# src/logship/contracts/errors.py
"""Configuration validation exceptions.

These are raised at configuration load time, before the exporter allocates
any network resource. None of them are transient: validating the same
settings again raises the same error.
"""

from logship.contracts.enums import TagViolation


class ConfigValidationError(Exception):
    """Base class for exporter settings that cannot be serviced.

    Attributes:
        field: Settings field (dotted path for nested fields) that failed
        message: Human-readable error description
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(message)


class MissingFieldError(ConfigValidationError):
    """A required identifier is empty."""

    def __init__(self, field: str) -> None:
        super().__init__(field, f"'{field}' must be set")


class InvalidQueueCapacityError(ConfigValidationError):
    """Requested sending queue size is below 1."""

    def __init__(self, queue_size: int) -> None:
        self.queue_size = queue_size
        super().__init__(
            "sending_queue.queue_size",
            f"'sending_queue.queue_size' must be 1 or greater, got {queue_size}",
        )


class InvalidRetentionError(ConfigValidationError):
    """Retention is not one of the values the log service accepts."""

    def __init__(self, retention: int, allowed: tuple[int, ...]) -> None:
        self.retention = retention
        choices = ", ".join(str(days) for days in allowed)
        super().__init__(
            "log_retention",
            f"invalid value {retention} for retention policy. Please make sure to use the following values: {choices} (0 means never expire)",
        )


class InvalidTagsError(ConfigValidationError):
    """Tag map breaks a count, length, or character rule.

    Attributes:
        reason: Which tag rule was violated
        key: Offending tag key, or None when the whole map is rejected
    """

    def __init__(self, reason: TagViolation, message: str, *, key: str | None = None) -> None:
        self.reason = reason
        self.key = key
        super().__init__("tags", message)
