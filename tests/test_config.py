"""Tests for simulator configuration.

The configuration fixes every limit when a simulator is built and
rejects limits that could never admit a process.
"""

import dataclasses

import pytest

from py_vmsim.config import (
    DEFAULT_MAX_PROCESS_SIZE,
    DEFAULT_MAX_PROCESSES,
    DEFAULT_POOL_CAPACITY,
    SimulatorConfig,
)


class TestDefaults:
    """Verify the classroom defaults."""

    def test_default_values(self) -> None:
        """Defaults should match the documented constants."""
        config = SimulatorConfig()
        assert config.pool_capacity == DEFAULT_POOL_CAPACITY
        assert config.max_processes == DEFAULT_MAX_PROCESSES
        assert config.min_process_size == 1
        assert config.max_process_size == DEFAULT_MAX_PROCESS_SIZE

    def test_config_is_frozen(self) -> None:
        """Limits cannot change after construction."""
        config = SimulatorConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.pool_capacity = 5  # type: ignore[misc]


class TestValidation:
    """Verify rejected configurations."""

    @pytest.mark.parametrize(
        "field",
        ["pool_capacity", "max_processes", "min_process_size", "max_name_length"],
    )
    def test_non_positive_limit_raises(self, field: str) -> None:
        """Every limit must be at least 1."""
        with pytest.raises(ValueError, match=field):
            SimulatorConfig(**{field: 0})

    def test_empty_size_range_raises(self) -> None:
        """max_process_size below min_process_size admits nothing."""
        with pytest.raises(ValueError, match="below"):
            SimulatorConfig(min_process_size=5, max_process_size=4)


class TestAcceptsSize:
    """Verify the size bounds check."""

    def test_bounds_are_inclusive(self) -> None:
        """Both ends of the range are accepted."""
        config = SimulatorConfig(min_process_size=2, max_process_size=4)
        assert config.accepts_size(2)
        assert config.accepts_size(4)
        assert not config.accepts_size(1)
        assert not config.accepts_size(5)
