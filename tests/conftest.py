# tests/conftest.py
"""Shared test fixtures.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from logship.core.config import ExporterSettings, QueueSettings


@pytest.fixture
def make_settings() -> Callable[..., ExporterSettings]:
    """Factory for ExporterSettings that pass validation unless overridden.

    Usage:
        settings = make_settings(log_retention=2)
        settings = make_settings(queue_size=0)  # shorthand for sending_queue
    """

    def _make(**overrides: Any) -> ExporterSettings:
        fields: dict[str, Any] = {
            "log_group_name": "g",
            "log_stream_name": "s",
            "log_retention": 0,
            "tags": {},
        }
        if "queue_size" in overrides:
            fields["sending_queue"] = QueueSettings(queue_size=overrides.pop("queue_size"))
        fields.update(overrides)
        return ExporterSettings(**fields)

    return _make


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write YAML text to a settings file and return its path."""

    def _write(text: str, name: str = "settings.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))
