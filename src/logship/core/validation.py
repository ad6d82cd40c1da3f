# src/logship/core/validation.py
"""Startup validation for exporter settings.

Rejects settings the log service cannot serve, before any network resource
is allocated. Rules are checked in a fixed priority order:

    log_group_name -> log_stream_name -> sending_queue.queue_size
    -> log_retention -> tags

validate_settings() raises the first violation only; fix it and validate
again to see the next one. collect_violations() returns all of them, in
the same order, for tooling that wants the full picture.

Everything here is a pure function of the settings: no I/O, no logging.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Final

from logship.contracts.enums import TagViolation
from logship.contracts.errors import (
    ConfigValidationError,
    InvalidQueueCapacityError,
    InvalidRetentionError,
    InvalidTagsError,
    MissingFieldError,
)

if TYPE_CHECKING:
    from logship.core.config import ExporterSettings

# Retention values (days) accepted by the log service. 0 means never expire.
VALID_RETENTION_DAYS: Final[frozenset[int]] = frozenset(
    {0, 1, 3, 5, 7, 14, 30, 60, 90, 120, 150, 180, 365, 400, 545, 731, 1827, 2192, 2557, 2922, 3288, 3653}
)

MAX_TAGS: Final = 50
TAG_KEY_LENGTH: Final = (1, 128)
TAG_VALUE_LENGTH: Final = (1, 256)

# Unicode letters, separators and numbers plus _ . : / = + - @.
# \w covers letters, numbers and "_"; the Z* separators are listed explicitly
# because \s would also admit control characters such as \t and \n.
_SEPARATORS = r"\u0020\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000"
_TAG_CHARS = rf"[\w{_SEPARATORS}.:/=+\-@]"

TAG_KEY_PATTERN: Final = re.compile(rf"{_TAG_CHARS}+")
TAG_VALUE_PATTERN: Final = re.compile(rf"{_TAG_CHARS}*")


def _encoded_length(text: str) -> int:
    """Length as the service client measures it (UTF-8 bytes)."""
    return len(text.encode("utf-8"))


def _check_log_group_name(settings: ExporterSettings) -> ConfigValidationError | None:
    if not settings.log_group_name:
        return MissingFieldError("log_group_name")
    return None


def _check_log_stream_name(settings: ExporterSettings) -> ConfigValidationError | None:
    if not settings.log_stream_name:
        return MissingFieldError("log_stream_name")
    return None


def _check_queue_size(settings: ExporterSettings) -> ConfigValidationError | None:
    queue_size = settings.sending_queue.queue_size
    if queue_size < 1:
        return InvalidQueueCapacityError(queue_size)
    return None


def _check_retention(settings: ExporterSettings) -> ConfigValidationError | None:
    if settings.log_retention not in VALID_RETENTION_DAYS:
        return InvalidRetentionError(settings.log_retention, tuple(sorted(VALID_RETENTION_DAYS)))
    return None


def check_tags(tags: Mapping[str, str]) -> InvalidTagsError | None:
    """Check a tag map against the service's tag rules.

    Each entry is checked independently, so the first failing entry in
    iteration order is reported. Per entry the order is: key length,
    value length, key pattern, value pattern.

    Empty values never reach the value pattern (which would accept them):
    the length check rejects them first.

    Args:
        tags: Tag key/value pairs

    Returns:
        The violation, or None if the map is acceptable
    """
    if len(tags) > MAX_TAGS:
        return InvalidTagsError(
            TagViolation.TOO_MANY_TAGS,
            f"invalid amount of items ({len(tags)}). Please input at most {MAX_TAGS} tags.",
        )

    key_min, key_max = TAG_KEY_LENGTH
    value_min, value_max = TAG_VALUE_LENGTH
    for key, value in tags.items():
        if not key_min <= _encoded_length(key) <= key_max:
            return InvalidTagsError(
                TagViolation.KEY_LENGTH,
                f"key - {key} has an invalid length. Please use keys with a length of {key_min} to {key_max} characters",
                key=key,
            )
        if not value_min <= _encoded_length(value) <= value_max:
            return InvalidTagsError(
                TagViolation.VALUE_LENGTH,
                f"value - {value} has an invalid length. Please use values with a length of {value_min} to {value_max} characters",
                key=key,
            )
        if TAG_KEY_PATTERN.fullmatch(key) is None:
            return InvalidTagsError(
                TagViolation.KEY_PATTERN,
                f"key - {key} does not follow the pattern: letters, separators, numbers and _.:/=+-@",
                key=key,
            )
        if TAG_VALUE_PATTERN.fullmatch(value) is None:
            return InvalidTagsError(
                TagViolation.VALUE_PATTERN,
                f"value - {value} does not follow the pattern: letters, separators, numbers and _.:/=+-@",
                key=key,
            )
    return None


def _check_tags(settings: ExporterSettings) -> ConfigValidationError | None:
    return check_tags(settings.tags)


# Priority order matters: validate_settings reports the first hit.
_CHECKS: Final[tuple[Callable[[ExporterSettings], ConfigValidationError | None], ...]] = (
    _check_log_group_name,
    _check_log_stream_name,
    _check_queue_size,
    _check_retention,
    _check_tags,
)


def collect_violations(settings: ExporterSettings) -> list[ConfigValidationError]:
    """Return every rule the settings violate, in priority order.

    At most one error per rule; the tag rule reports its first failing entry.
    An empty list means the settings are valid.
    """
    violations: list[ConfigValidationError] = []
    for check in _CHECKS:
        error = check(settings)
        if error is not None:
            violations.append(error)
    return violations


def validate_settings(settings: ExporterSettings) -> None:
    """Validate settings before the exporter starts.

    Stops at the first violated rule.

    Raises:
        MissingFieldError: log_group_name or log_stream_name is empty
        InvalidQueueCapacityError: sending_queue.queue_size < 1
        InvalidRetentionError: log_retention is not an accepted value
        InvalidTagsError: tag count, length, or characters are invalid
    """
    for check in _CHECKS:
        error = check(settings)
        if error is not None:
            raise error
