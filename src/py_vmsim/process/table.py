"""Process table — registered processes and their page tables.

The table is an ordered list of process descriptors.  Position in the
list is the process id, so ids are stable and listings come out in
registration order.

Each process follows a one-way state machine::

    (unregistered) → REGISTERED → LOADED

``register`` creates the descriptor with an empty page table.  ``load``
asks the memory pool for a contiguous block, writes page n → frame into
the page table, and flips the process to LOADED.  Nothing moves a
process backwards; the whole table is cleared at once by ``clear``.

``access_page`` is the MMU's question: is this page in memory?  With no
eviction, every page in ``1..size`` of a loaded process is a **hit**.
A page number outside that range is a **fault**, the point where a real
system would fetch from secondary storage.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from py_vmsim.config import SimulatorConfig
from py_vmsim.errors import AccessError, LoadError, RegistrationError
from py_vmsim.memory.pool import parse_page_label
from py_vmsim.process.page_table import PageTable

if TYPE_CHECKING:
    from py_vmsim.memory.pool import MemoryPool


class DuplicateNameError(RegistrationError):
    """Raise when a process name is already registered."""


class InvalidSizeError(RegistrationError):
    """Raise when a process size is not an integer within the configured bounds."""


class InvalidNameError(RegistrationError):
    """Raise when a process name is empty or too long."""


class CapacityExceededError(RegistrationError):
    """Raise when the table already holds the maximum number of processes."""


class UnknownProcessError(LoadError, AccessError):
    """Raise when a process id or name is not registered."""


class AlreadyLoadedError(LoadError):
    """Raise when loading a process that is already in memory."""


class LoadCancelledError(LoadError):
    """Raise when the caller declines a proposed load."""


class ProcessNotLoadedError(AccessError):
    """Raise when accessing a page of a process that was never loaded."""


class AccessOutcome(StrEnum):
    """Result of a page access."""

    HIT = "hit"
    FAULT = "fault"


@dataclass(frozen=True)
class PageAccess:
    """The answer to "where is page N of process P?".

    Attributes:
        pid: The process that was asked about.
        page: The requested page number.
        outcome: HIT if the page is mapped, FAULT otherwise.
        frame: The frame holding the page, or None on a fault.

    """

    pid: int
    page: int
    outcome: AccessOutcome
    frame: int | None = None

    @property
    def is_hit(self) -> bool:
        """Return True if the page was found in memory."""
        return self.outcome is AccessOutcome.HIT


@dataclass(frozen=True)
class LoadReport:
    """Page placements produced by loading one process.

    Attributes:
        pid: The loaded process.
        name: The loaded process's name.
        assignments: ``(page, frame)`` pairs in page order.

    """

    pid: int
    name: str
    assignments: tuple[tuple[int, int], ...]

    @property
    def frames(self) -> list[int]:
        """Return the assigned frames in page order."""
        return [frame for _, frame in self.assignments]


# Called with the proposed placement before any frame is written.
LoadConfirmation = Callable[[LoadReport], bool]


class ProcessDescriptor:
    """Everything the simulator knows about one process.

    Name and size are fixed at registration.  The page table and the
    loaded flag change exactly once, when the process is loaded.
    """

    def __init__(self, *, pid: int, name: str, size: int) -> None:
        """Create a registered, unloaded process.

        Args:
            pid: Position of the process in the table.
            name: Unique process name.
            size: Number of pages the process needs.

        """
        self._pid = pid
        self._name = name
        self._size = size
        self._page_table = PageTable()
        self._is_loaded = False

    @property
    def pid(self) -> int:
        """Return the process id."""
        return self._pid

    @property
    def name(self) -> str:
        """Return the process name."""
        return self._name

    @property
    def size(self) -> int:
        """Return the number of pages."""
        return self._size

    @property
    def page_table(self) -> PageTable:
        """Return the process's page table."""
        return self._page_table

    @property
    def is_loaded(self) -> bool:
        """Return True once the process's pages are in memory."""
        return self._is_loaded

    def install(self, frames: list[int]) -> LoadReport:
        """Map page n to ``frames[n - 1]`` and mark the process loaded.

        Raises:
            AlreadyLoadedError: If the process is already loaded.
            ValueError: If the number of frames does not match the size.

        """
        if self._is_loaded:
            msg = f"Process {self._name} is already loaded"
            raise AlreadyLoadedError(msg)
        if len(frames) != self._size:
            msg = f"Process {self._name} needs {self._size} frames, got {len(frames)}"
            raise ValueError(msg)
        for page, frame in enumerate(frames, start=1):
            self._page_table.map(page=page, frame=frame)
        self._is_loaded = True
        return _report(self, frames)

    def __repr__(self) -> str:
        """Return a short debugging representation."""
        state = "loaded" if self._is_loaded else "registered"
        return f"ProcessDescriptor(pid={self._pid}, name={self._name!r}, size={self._size}, {state})"


def _report(process: ProcessDescriptor, frames: list[int]) -> LoadReport:
    """Pair page numbers with frames for *process*."""
    return LoadReport(
        pid=process.pid,
        name=process.name,
        assignments=tuple(enumerate(frames, start=1)),
    )


class ProcessTable:
    """Ordered collection of process descriptors."""

    def __init__(self, config: SimulatorConfig | None = None) -> None:
        """Create an empty table governed by *config*'s limits."""
        self._config = config if config is not None else SimulatorConfig()
        self._processes: list[ProcessDescriptor] = []
        self._by_name: dict[str, int] = {}

    @property
    def config(self) -> SimulatorConfig:
        """Return the limits this table enforces."""
        return self._config

    def register(self, name: str | None, size: int) -> int:
        """Append a new unloaded process and return its id.

        Args:
            name: Unique process name.  None picks the first free
                ``"P{n}"`` with n counting up from the new pid.
            size: Number of pages the process needs.

        Returns:
            The new process id.

        Raises:
            InvalidNameError: If the name is empty or too long.
            DuplicateNameError: If the name is already taken.
            InvalidSizeError: If the size is not an integer within the
                configured bounds.
            CapacityExceededError: If the table is full.

        """
        pid = len(self._processes)
        if name is None:
            name = self._free_default_name(pid)
        if not name or len(name) > self._config.max_name_length:
            msg = f"Process name must be 1-{self._config.max_name_length} characters, got {name!r}"
            raise InvalidNameError(msg)
        if name in self._by_name:
            msg = f"Process {name} is already registered"
            raise DuplicateNameError(msg)
        if not isinstance(size, int) or isinstance(size, bool):
            msg = f"Invalid size {size!r} for {name}: must be an integer"
            raise InvalidSizeError(msg)
        if not self._config.accepts_size(size):
            msg = (
                f"Invalid size {size} for {name}: must be between "
                f"{self._config.min_process_size} and {self._config.max_process_size}"
            )
            raise InvalidSizeError(msg)
        if pid >= self._config.max_processes:
            msg = f"Cannot register more than {self._config.max_processes} processes"
            raise CapacityExceededError(msg)

        self._processes.append(ProcessDescriptor(pid=pid, name=name, size=size))
        self._by_name[name] = pid
        return pid

    def _free_default_name(self, start: int) -> str:
        """Return the first ``P{n}`` not yet registered, with n >= *start*."""
        n = start
        while f"P{n}" in self._by_name:
            n += 1
        return f"P{n}"

    def get(self, pid: int) -> ProcessDescriptor:
        """Return the descriptor for *pid*.

        Raises:
            UnknownProcessError: If no process has this id.

        """
        if not 0 <= pid < len(self._processes):
            msg = f"Process {pid} not found"
            raise UnknownProcessError(msg)
        return self._processes[pid]

    def find(self, name: str) -> int:
        """Return the id of the process called *name*.

        Raises:
            UnknownProcessError: If no process has this name.

        """
        pid = self._by_name.get(name)
        if pid is None:
            msg = f"Process {name} not found"
            raise UnknownProcessError(msg)
        return pid

    def load(
        self,
        pid: int,
        memory: MemoryPool,
        *,
        confirm: LoadConfirmation | None = None,
    ) -> LoadReport:
        """Place every page of a process into *memory*.

        The placement is computed first.  If *confirm* is given it sees
        that proposal and may decline; only then are frames claimed.

        Args:
            pid: The process to load.
            memory: The pool to allocate from.
            confirm: Optional callback approving the proposed placement.

        Returns:
            The ``(page, frame)`` assignments.

        Raises:
            UnknownProcessError: If no process has this id.
            AlreadyLoadedError: If the process is already loaded.
            InsufficientMemoryError: If the pool cannot fit the process.
            LoadCancelledError: If *confirm* returned False.

        """
        process = self.get(pid)
        if process.is_loaded:
            msg = f"Process {process.name} is already loaded"
            raise AlreadyLoadedError(msg)

        proposed = memory.next_block(process.size)
        if confirm is not None and not confirm(_report(process, proposed)):
            msg = f"Loading {process.name} was cancelled"
            raise LoadCancelledError(msg)

        frames = memory.allocate_contiguous_block(process.name, process.size)
        return process.install(frames)

    def access_page(self, pid: int, page_number: int) -> PageAccess:
        """Resolve page *page_number* of process *pid*.

        Raises:
            UnknownProcessError: If no process has this id.
            ProcessNotLoadedError: If the process has not been loaded.

        """
        process = self.get(pid)
        if not process.is_loaded:
            msg = f"Process {process.name} is not loaded"
            raise ProcessNotLoadedError(msg)
        frame = process.page_table.lookup(page_number)
        if frame is None:
            return PageAccess(pid=pid, page=page_number, outcome=AccessOutcome.FAULT)
        return PageAccess(pid=pid, page=page_number, outcome=AccessOutcome.HIT, frame=frame)

    def access_label(self, pid: int, label: str) -> PageAccess:
        """Resolve a page given by its slot label, e.g. ``"P0_page3"``.

        A label that does not name a page of this process is a fault
        reported as page 0, which is never mapped.

        Raises:
            UnknownProcessError: If no process has this id.
            ProcessNotLoadedError: If the process has not been loaded.

        """
        page = parse_page_label(self.get(pid).name, label)
        return self.access_page(pid, 0 if page is None else page)

    def list(self) -> list[tuple[str, bool, int]]:
        """Return ``(name, is_loaded, size)`` for every process, in registration order."""
        return [(p.name, p.is_loaded, p.size) for p in self._processes]

    def processes(self) -> list[ProcessDescriptor]:
        """Return all descriptors in registration order."""
        return list(self._processes)

    def clear(self) -> None:
        """Remove every process."""
        self._processes.clear()
        self._by_name.clear()

    def __len__(self) -> int:
        """Return the number of registered processes."""
        return len(self._processes)
