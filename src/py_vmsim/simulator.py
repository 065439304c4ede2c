"""The simulator — one memory pool and one process table, driven together.

``MemoryState`` is the whole simulated machine.  It owns the pool, the
process table, the configuration, and the event log, and it is the only
object a caller (a CLI, a notebook, the web API) needs to hold::

    state = MemoryState(SimulatorConfig(pool_capacity=10))
    p0 = state.register_process("P0", 4)
    state.load_process(p0)
    state.access_page(p0, 2)        # PageAccess(outcome=HIT, frame=1)

Every command either succeeds completely or raises a ``SimulatorError``
subclass with the pool and table exactly as they were.  Each outcome is
written to the log, rejected commands included.

The simulator is single-threaded.  Callers that share one instance
across threads must serialise every command behind one lock, because a
load checks the pool's watermark and then moves it.
"""

from py_vmsim.config import SimulatorConfig
from py_vmsim.errors import SimulatorError
from py_vmsim.logging import Logger, LogLevel
from py_vmsim.memory.pool import MemoryPool
from py_vmsim.process.table import (
    LoadConfirmation,
    LoadReport,
    PageAccess,
    ProcessDescriptor,
    ProcessTable,
)


class MemoryState:
    """The memory pool and process table of one simulated machine."""

    def __init__(self, config: SimulatorConfig | None = None) -> None:
        """Create an empty machine.

        Args:
            config: Limits for the pool and table.  Defaults apply if None.

        """
        self._config = config if config is not None else SimulatorConfig()
        self._pool = MemoryPool(capacity=self._config.pool_capacity)
        self._table = ProcessTable(self._config)
        self._logger = Logger()

    @property
    def config(self) -> SimulatorConfig:
        """Return the machine's configuration."""
        return self._config

    @property
    def logger(self) -> Logger:
        """Return the event log."""
        return self._logger

    @property
    def pool(self) -> MemoryPool:
        """Return the physical memory pool."""
        return self._pool

    @property
    def table(self) -> ProcessTable:
        """Return the process table."""
        return self._table

    @property
    def used_frames(self) -> int:
        """Return the pool's watermark."""
        return self._pool.used_frames

    @property
    def free_frames(self) -> int:
        """Return the number of frames still available."""
        return self._pool.free_frames

    def register_process(self, name: str | None, size: int) -> int:
        """Register a process without touching memory.

        Args:
            name: Unique process name, or None for the first free ``"P{n}"``.
            size: Number of pages the process needs.

        Returns:
            The new process id.

        Raises:
            RegistrationError: If the name, size, or table capacity is rejected.

        """
        try:
            pid = self._table.register(name, size)
        except SimulatorError as e:
            self._logger.log(LogLevel.WARNING, f"Registration rejected: {e}", source="process")
            raise
        process = self._table.get(pid)
        self._logger.log(
            LogLevel.INFO,
            f"Registered {process.name} ({process.size} pages)",
            source="process",
            pid=pid,
        )
        return pid

    def find_process(self, name: str) -> int:
        """Return the id of the process called *name*.

        Raises:
            UnknownProcessError: If no process has this name.

        """
        return self._table.find(name)

    def process(self, pid: int) -> ProcessDescriptor:
        """Return the descriptor of process *pid*.

        Raises:
            UnknownProcessError: If no process has this id.

        """
        return self._table.get(pid)

    def load_process(self, pid: int, *, confirm: LoadConfirmation | None = None) -> LoadReport:
        """Load every page of process *pid* into the pool.

        Args:
            pid: The process to load.
            confirm: Optional callback approving the proposed placement.

        Returns:
            The ``(page, frame)`` assignments.

        Raises:
            LoadError: If the process is unknown, already loaded, does not
                fit, or the load was declined.

        """
        try:
            report = self._table.load(pid, self._pool, confirm=confirm)
        except SimulatorError as e:
            self._logger.log(LogLevel.WARNING, f"Load rejected: {e}", source="memory", pid=pid)
            raise
        first, last = report.frames[0], report.frames[-1]
        self._logger.log(
            LogLevel.INFO,
            f"Loaded {report.name} into frames {first}-{last} "
            f"({self._pool.used_frames}/{self._pool.capacity} used)",
            source="memory",
            pid=pid,
        )
        return report

    def access_page(self, pid: int, page_number: int) -> PageAccess:
        """Resolve a page of a loaded process to a hit or a fault.

        Raises:
            AccessError: If the process is unknown or not loaded.

        """
        try:
            result = self._table.access_page(pid, page_number)
        except SimulatorError as e:
            self._logger.log(LogLevel.WARNING, f"Access rejected: {e}", source="process", pid=pid)
            raise
        self._log_access(result)
        return result

    def access_label(self, pid: int, label: str) -> PageAccess:
        """Resolve a page named by its slot label, e.g. ``"P0_page3"``.

        A label that names no page of this process is a fault.

        Raises:
            AccessError: If the process is unknown or not loaded.

        """
        try:
            result = self._table.access_label(pid, label)
        except SimulatorError as e:
            self._logger.log(LogLevel.WARNING, f"Access rejected: {e}", source="process", pid=pid)
            raise
        self._log_access(result)
        return result

    def _log_access(self, result: PageAccess) -> None:
        """Log a hit at DEBUG and a fault at WARNING."""
        if result.is_hit:
            self._logger.log(
                LogLevel.DEBUG,
                f"Page {result.page} hit at frame {result.frame}",
                source="process",
                pid=result.pid,
            )
        else:
            self._logger.log(
                LogLevel.WARNING,
                f"Page fault on page {result.page}",
                source="process",
                pid=result.pid,
            )

    def memory_snapshot(self) -> list[tuple[int, str]]:
        """Return ``(frame, label)`` for every occupied frame, in frame order."""
        return self._pool.snapshot()

    def process_list(self) -> list[tuple[str, bool, int]]:
        """Return ``(name, is_loaded, size)`` for every process, in registration order."""
        return self._table.list()

    def reset(self) -> None:
        """Free the whole pool and forget every process.

        The log is kept; it records the reset itself.
        """
        self._pool.reset()
        self._table.clear()
        self._logger.log(LogLevel.INFO, "Memory and process table reset", source="simulator")
