"""Reason codes used across the settings/runtime boundary."""

from enum import StrEnum


class TagViolation(StrEnum):
    """Which tag rule a tag map broke.

    Carried on InvalidTagsError so callers can branch on the rule
    without parsing the message.
    """

    TOO_MANY_TAGS = "too_many_tags"
    KEY_LENGTH = "key_length"
    VALUE_LENGTH = "value_length"
    KEY_PATTERN = "key_pattern"
    VALUE_PATTERN = "value_pattern"
