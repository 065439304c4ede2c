"""Tests for the simulator event log.

The logger records structured entries for every command the simulator
handles, and lets callers filter them by level, source, and process.
"""

from py_vmsim.logging import LogEntry, Logger, LogLevel


class TestLogLevel:
    """Verify log level ordering."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR


class TestLogEntry:
    """Verify log entry structure."""

    def test_entry_has_fields(self) -> None:
        """A log entry should store level, message, source, and pid."""
        entry = LogEntry(level=LogLevel.INFO, message="loaded", source="memory", pid=3)
        assert entry.level is LogLevel.INFO
        assert entry.message == "loaded"
        assert entry.source == "memory"
        expected_pid = 3
        assert entry.pid == expected_pid

    def test_pid_defaults_to_none(self) -> None:
        """Pool-wide events have no pid."""
        entry = LogEntry(level=LogLevel.INFO, message="reset", source="simulator")
        assert entry.pid is None

    def test_str_without_pid(self) -> None:
        """Entries without a pid format as ``[LEVEL] source: message``."""
        entry = LogEntry(level=LogLevel.INFO, message="reset", source="simulator")
        assert str(entry) == "[INFO] simulator: reset"

    def test_str_with_pid(self) -> None:
        """Entries with a pid include it."""
        entry = LogEntry(level=LogLevel.WARNING, message="fault", source="process", pid=1)
        assert str(entry) == "[WARNING] process (pid 1): fault"


class TestLogger:
    """Verify the logger."""

    def test_log_stores_entries(self) -> None:
        """Logged entries should be retrievable."""
        logger = Logger()
        logger.log(LogLevel.INFO, "registered", source="process")
        assert len(logger) == 1
        assert logger.entries[0].message == "registered"

    def test_entries_are_ordered(self) -> None:
        """Entries should be in chronological order."""
        logger = Logger()
        logger.log(LogLevel.INFO, "first", source="test")
        logger.log(LogLevel.INFO, "second", source="test")
        assert [e.message for e in logger.entries] == ["first", "second"]

    def test_entries_is_a_copy(self) -> None:
        """Mutating the returned list must not change the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="test")
        logger.entries.clear()
        assert len(logger) == 1

    def test_filter_by_level(self) -> None:
        """Filtering should return only entries at or above the level."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "hit", source="process")
        logger.log(LogLevel.INFO, "loaded", source="memory")
        logger.log(LogLevel.WARNING, "fault", source="process")
        result = logger.filter(min_level=LogLevel.WARNING)
        assert [e.message for e in result] == ["fault"]

    def test_filter_by_source(self) -> None:
        """Filtering by source should return matching entries."""
        logger = Logger()
        logger.log(LogLevel.INFO, "loaded", source="memory")
        logger.log(LogLevel.INFO, "registered", source="process")
        result = logger.filter(source="memory")
        assert [e.message for e in result] == ["loaded"]

    def test_filter_by_pid(self) -> None:
        """Filtering by pid should return entries about that process."""
        logger = Logger()
        logger.log(LogLevel.INFO, "a", source="process", pid=0)
        logger.log(LogLevel.INFO, "b", source="process", pid=1)
        result = logger.filter(pid=1)
        assert [e.message for e in result] == ["b"]

    def test_filter_without_criteria_returns_all(self) -> None:
        """No criteria means every entry."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "a", source="x")
        logger.log(LogLevel.ERROR, "b", source="y")
        expected = 2
        assert len(logger.filter()) == expected

    def test_clear(self) -> None:
        """Clearing should remove all entries."""
        logger = Logger()
        logger.log(LogLevel.INFO, "test", source="test")
        logger.clear()
        assert logger.entries == []
