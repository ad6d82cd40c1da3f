# src/logship/core/config.py
"""
Configuration schema and loading for the log-stream exporter.

Uses Pydantic for type coercion, PyYAML for the settings file and Dynaconf
for LOGSHIP_* environment overrides.
Settings are frozen (immutable) after construction.

Pydantic only checks shapes and types here. The rules the log service
imposes (required identifiers, queue size, retention values, tag limits)
are checked by logship.core.validation so that the first violation is
reported in a fixed order.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from logship.core.logging import get_logger
from logship.core.validation import validate_settings

logger = get_logger(__name__)


class QueueSettings(BaseModel):
    """Sending queue configuration.

    Only the queue size is user-settable. The number of consumers is fixed
    at one because each append needs the sequence token returned by the
    previous append (see RuntimeQueueConfig).

    Example YAML:
        sending_queue:
          queue_size: 5000
    """

    model_config = {"frozen": True}

    queue_size: int = Field(default=1000, description="Maximum number of batches held before delivery")


class RetrySettings(BaseModel):
    """Retry behavior handed to the host's retry runtime."""

    model_config = {"frozen": True}

    enabled: bool = Field(default=True, description="Retry failed appends")
    initial_interval_seconds: float = Field(default=5.0, gt=0, description="Delay before the first retry")
    max_interval_seconds: float = Field(default=30.0, gt=0, description="Upper bound on retry delay")
    max_elapsed_time_seconds: float = Field(default=300.0, ge=0, description="Total retry budget per batch (0 = unbounded)")


class ExporterSettings(BaseModel):
    """Top-level exporter configuration.

    Session fields (region, role_arn, ...) sit at the top level rather than
    under a nested key, matching how existing collector configs are written.

    Example YAML:
        log_group_name: /app/production
        log_stream_name: web-01
        log_retention: 30
        tags:
          team: platform
        sending_queue:
          queue_size: 500
    """

    model_config = {"frozen": True}

    # Destination
    log_group_name: str = Field(default="", description="Log group containing the destination stream")
    log_stream_name: str = Field(default="", description="Destination log stream within the group")
    endpoint: str = Field(default="", description="Service endpoint override, e.g. logs.us-east-1.amazonaws.com")
    log_retention: int = Field(default=0, description="Retention policy in days for the log group (0 = never expire)")
    tags: dict[str, str] = Field(default_factory=dict, description="Tags applied to the log group")
    raw_log: bool = Field(default=False, description="Export the raw log body instead of the structured wrapper")

    # Delivery
    sending_queue: QueueSettings = Field(default_factory=QueueSettings, description="Sending queue configuration")
    retry_on_failure: RetrySettings = Field(default_factory=RetrySettings, description="Retry configuration")

    # Session
    region: str = Field(default="", description="Service region")
    role_arn: str = Field(default="", description="Role to assume for appends")
    max_retries: int = Field(default=2, ge=0, description="Client-level retries for a single request")
    no_verify_ssl: bool = Field(default=False, description="Disable TLS certificate verification")
    proxy_address: str = Field(default="", description="HTTPS proxy URL")
    local_mode: bool = Field(default=False, description="Running outside the cloud provider")
    request_timeout_seconds: int = Field(default=30, gt=0, description="Per-request timeout")
    resource_arn: str = Field(default="", description="Resource ARN reported by the client")


# Regex pattern for ${VAR} or ${VAR:-default} syntax
_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")


def _expand_env_vars(config: dict[str, Any]) -> dict[str, Any]:
    """Substitute ${VAR} and ${VAR:-default} references in settings values.

    Applies to every string value in the file, so log group and stream
    names, endpoints and tag values can all be templated per deployment,
    e.g. ``log_group_name: /app/${APP_ENV}``. Keys, including tag keys,
    are never expanded.

    An unset variable with no default is left as written. The validator
    then sees the literal text, and a "$" or brace in a tag value fails the
    tag pattern with the offending key named.
    """

    def _substitute(match: re.Match[str]) -> str:
        name, default = match.group(1), match.group(2)
        env_value = os.environ.get(name)
        if env_value is not None:
            return env_value
        return default if default is not None else match.group(0)

    def _expand(value: Any) -> Any:
        if isinstance(value, str):
            return _ENV_VAR_PATTERN.sub(_substitute, value)
        if isinstance(value, dict):
            return {key: _expand(item) for key, item in value.items()}
        if isinstance(value, list):
            return [_expand(item) for item in value]
        return value

    return _expand(config)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base, recursing into nested sections. Returns a new dict."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_settings_file(config_path: Path) -> dict[str, Any]:
    """Read the YAML settings file as plain data.

    yaml.safe_load keeps string values exactly as written, so "@" in tag
    keys and values (which the tag rules allow) is never interpreted.

    Raises:
        yaml.YAMLError: If the file is not valid YAML
        ValueError: If the top level is not a mapping
    """
    with config_path.open(encoding="utf-8") as f:
        loaded = yaml.safe_load(f)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {config_path} must be a YAML mapping, got {type(loaded).__name__}")
    return loaded


# Dynaconf bookkeeping keys that show up in as_dict()
_DYNACONF_INTERNAL_KEYS = frozenset({"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"})


def _read_env_overrides() -> dict[str, Any]:
    """Collect LOGSHIP_* environment overrides through Dynaconf.

    Dynaconf parses env values (LOGSHIP_SENDING_QUEUE__QUEUE_SIZE=10 becomes
    the integer 10). Setting names are lower-cased to match the schema; tag
    keys keep their case.
    """
    from dynaconf import Dynaconf

    env_settings = Dynaconf(envvar_prefix="LOGSHIP", environments=False, load_dotenv=False)

    overrides: dict[str, Any] = {}
    for key, value in env_settings.as_dict().items():
        if key in _DYNACONF_INTERNAL_KEYS:
            continue
        name = key.lower()
        if isinstance(value, dict) and name != "tags":
            value = {str(k).lower(): v for k, v in value.items()}
        overrides[name] = value
    return overrides


def load_settings(config_path: Path) -> ExporterSettings:
    """Load and validate settings from a YAML file with environment overrides.

    Precedence:
    1. Environment variables (LOGSHIP_*) - highest priority
    2. Config file
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: LOGSHIP_SENDING_QUEUE__QUEUE_SIZE for nested keys.

    The file is read with yaml.safe_load and only the environment goes
    through Dynaconf, so file values reach the validator unchanged.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        ExporterSettings that passed validate_settings()

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If the file is not valid YAML
        ValueError: If the file's top level is not a mapping
        pydantic.ValidationError: If a value has the wrong type
        ConfigValidationError: First rule the settings violate
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    raw_config = _deep_merge(_read_settings_file(config_path), _read_env_overrides())
    raw_config = _expand_env_vars(raw_config)

    settings = ExporterSettings(**raw_config)
    validate_settings(settings)

    logger.debug(
        "Exporter settings loaded",
        config_path=str(config_path),
        log_group_name=settings.log_group_name,
        log_stream_name=settings.log_stream_name,
        queue_size=settings.sending_queue.queue_size,
        tag_count=len(settings.tags),
    )
    return settings


# Fields that may carry credentials or account identifiers
_REDACTED_FIELDS = ("role_arn", "proxy_address")


def resolve_config(settings: ExporterSettings) -> dict[str, Any]:
    """Convert settings to a JSON-safe dict for display to operators.

    Includes defaults. Non-empty credential-bearing fields are replaced
    with "***".
    """
    config_dict = settings.model_dump(mode="json")
    for field_name in _REDACTED_FIELDS:
        if config_dict[field_name]:
            config_dict[field_name] = "***"
    return config_dict
