"""Simulator configuration.

All limits are fixed when a simulator is constructed.  The defaults
reproduce the classic classroom setup: a 200-frame pool shared by at
most 25 processes.
"""

from dataclasses import dataclass

DEFAULT_POOL_CAPACITY = 200
DEFAULT_MAX_PROCESSES = 25
DEFAULT_MIN_PROCESS_SIZE = 1
DEFAULT_MAX_PROCESS_SIZE = 500_000
DEFAULT_MAX_NAME_LENGTH = 32


@dataclass(frozen=True)
class SimulatorConfig:
    """Immutable limits for one simulator instance.

    Attributes:
        pool_capacity: Total number of physical frames.
        max_processes: Maximum number of registered processes.
        min_process_size: Smallest page count accepted at registration.
        max_process_size: Largest page count accepted at registration.
        max_name_length: Longest process name accepted at registration.

    """

    pool_capacity: int = DEFAULT_POOL_CAPACITY
    max_processes: int = DEFAULT_MAX_PROCESSES
    min_process_size: int = DEFAULT_MIN_PROCESS_SIZE
    max_process_size: int = DEFAULT_MAX_PROCESS_SIZE
    max_name_length: int = DEFAULT_MAX_NAME_LENGTH

    def __post_init__(self) -> None:
        """Reject limits that could never admit a process.

        Raises:
            ValueError: If any limit is non-positive or the size range is empty.

        """
        if self.pool_capacity < 1:
            msg = f"pool_capacity must be positive, got {self.pool_capacity}"
            raise ValueError(msg)
        if self.max_processes < 1:
            msg = f"max_processes must be positive, got {self.max_processes}"
            raise ValueError(msg)
        if self.min_process_size < 1:
            msg = f"min_process_size must be positive, got {self.min_process_size}"
            raise ValueError(msg)
        if self.max_process_size < self.min_process_size:
            msg = (
                f"max_process_size ({self.max_process_size}) is below "
                f"min_process_size ({self.min_process_size})"
            )
            raise ValueError(msg)
        if self.max_name_length < 1:
            msg = f"max_name_length must be positive, got {self.max_name_length}"
            raise ValueError(msg)

    def accepts_size(self, size: int) -> bool:
        """Return True if *size* lies within the registration bounds."""
        return self.min_process_size <= size <= self.max_process_size
