"""Exception hierarchy shared by the memory and process subsystems.

Each failing command raises exactly one of these.  A failed command
never leaves the pool or the process table half-updated, so callers can
report the error and carry on with the same simulator.

Hierarchy::

    SimulatorError
    ├── RegistrationError   (register_process)
    ├── LoadError           (load_process)
    └── AccessError         (access_page)

Concrete errors live next to the code that raises them:
``py_vmsim.memory.pool`` and ``py_vmsim.process.table``.
"""


class SimulatorError(Exception):
    """Base class for every error the simulator raises."""


class RegistrationError(SimulatorError):
    """Raise when a process cannot be registered."""


class LoadError(SimulatorError):
    """Raise when a process cannot be loaded into memory."""


class AccessError(SimulatorError):
    """Raise when a page access cannot be resolved at all."""
