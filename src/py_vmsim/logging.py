"""Simulator event log.

Every command the simulator accepts leaves a trace here: registrations,
loads, page hits and faults, rejected requests, and resets.  The log is
the simulator's equivalent of a kernel ring buffer (``dmesg``), kept in
memory for the lifetime of one run.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single structured record (level, message, source, pid).
- **Logger** — an append-only log with filtering and clearing.

Entries are frozen dataclasses because a log record, once written,
describes something that already happened.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries.

    Page hits are DEBUG, state changes are INFO, faults and rejected
    commands are WARNING.
    """

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The component that generated the event (e.g. "memory").
        pid: The process the event concerns, or None for pool-wide events.

    """

    level: LogLevel
    message: str
    source: str
    pid: int | None = None

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message`` with an optional pid tag."""
        if self.pid is None:
            return f"[{self.level.name}] {self.source}: {self.message}"
        return f"[{self.level.name}] {self.source} (pid {self.pid}): {self.message}"


class Logger:
    """Append-only log buffer with filtering."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        pid: int | None = None,
    ) -> None:
        """Append a new entry to the log.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Component that generated the event.
            pid: Process associated with the event, if any.

        """
        self._entries.append(LogEntry(level=level, message=message, source=source, pid=pid))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
        pid: int | None = None,
    ) -> list[LogEntry]:
        """Return entries matching every given criterion.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.
            pid: If set, only return entries about this process.

        Returns:
            A new list of matching entries.

        """
        result = list(self._entries)
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        if pid is not None:
            result = [e for e in result if e.pid == pid]
        return result

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)
