"""Tests for RuntimeQueueConfig.

These verify:
1. Protocol compliance (structural typing)
2. Concurrency is pinned to one writer regardless of settings
3. Capacity is passed through from sending_queue.queue_size
4. Derivation is deterministic and side-effect free
"""

import dataclasses

import pytest

from logship.contracts.config import (
    INTERNAL_DEFAULTS,
    RuntimeQueueConfig,
    RuntimeQueueProtocol,
    derive_queue_config,
)


class TestRuntimeQueueProtocolCompliance:
    def test_implements_protocol(self) -> None:
        """RuntimeQueueConfig must implement RuntimeQueueProtocol."""
        config = RuntimeQueueConfig.default()

        assert isinstance(config, RuntimeQueueProtocol), (
            "RuntimeQueueConfig does not implement RuntimeQueueProtocol. "
            "Check that all protocol properties are present with correct types."
        )

    def test_protocol_fields_have_correct_types(self) -> None:
        config = RuntimeQueueConfig.default()

        assert isinstance(config.enabled, bool)
        assert isinstance(config.concurrency, int)
        assert isinstance(config.capacity, int)


class TestFromSettings:
    def test_end_to_end_example(self, make_settings) -> None:
        """Queue size 5 derives enabled, single-writer, capacity 5."""
        settings = make_settings(queue_size=5)

        config = RuntimeQueueConfig.from_settings(settings)

        assert config == RuntimeQueueConfig(enabled=True, concurrency=1, capacity=5)

    @pytest.mark.parametrize("queue_size", [1, 10, 10000])
    def test_concurrency_always_one(self, make_settings, queue_size: int) -> None:
        """Concurrency never follows the requested queue size."""
        config = RuntimeQueueConfig.from_settings(make_settings(queue_size=queue_size))

        assert config.concurrency == 1
        assert config.capacity == queue_size
        assert config.enabled is True

    def test_idempotent(self, make_settings) -> None:
        """Deriving twice from the same settings yields equal configs."""
        settings = make_settings(queue_size=42)

        first = RuntimeQueueConfig.from_settings(settings)
        second = RuntimeQueueConfig.from_settings(settings)

        assert first == second
        assert first is not second

    def test_does_not_mutate_settings(self, make_settings) -> None:
        settings = make_settings(queue_size=7)
        before = settings.model_dump()

        RuntimeQueueConfig.from_settings(settings)

        assert settings.model_dump() == before

    def test_function_form_matches_factory(self, make_settings) -> None:
        settings = make_settings(queue_size=3)
        assert derive_queue_config(settings) == RuntimeQueueConfig.from_settings(settings)

    def test_internal_defaults_are_source(self) -> None:
        """enabled/concurrency come from INTERNAL_DEFAULTS, not Settings."""
        assert INTERNAL_DEFAULTS["queue"]["concurrency"] == 1
        assert INTERNAL_DEFAULTS["queue"]["enabled"] is True


class TestInvariants:
    def test_rejects_concurrent_writers(self) -> None:
        with pytest.raises(ValueError, match="concurrency must be exactly 1"):
            RuntimeQueueConfig(enabled=True, concurrency=2, capacity=10)

    def test_rejects_zero_concurrency(self) -> None:
        with pytest.raises(ValueError, match="concurrency must be exactly 1"):
            RuntimeQueueConfig(enabled=True, concurrency=0, capacity=10)

    def test_rejects_empty_capacity(self) -> None:
        with pytest.raises(ValueError, match="capacity must be >= 1"):
            RuntimeQueueConfig(enabled=True, concurrency=1, capacity=0)

    def test_frozen(self) -> None:
        config = RuntimeQueueConfig.default()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.concurrency = 4  # type: ignore[misc]

    def test_default_capacity_matches_settings_default(self) -> None:
        from logship.core.config import QueueSettings

        assert RuntimeQueueConfig.default().capacity == QueueSettings().queue_size == 1000
