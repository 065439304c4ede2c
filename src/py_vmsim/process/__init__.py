"""Process subsystem — process descriptors, page tables, and page access.

Re-exports public symbols so callers can write::

    from py_vmsim.process import ProcessTable, PageTable
"""

from py_vmsim.process.page_table import PageTable
from py_vmsim.process.table import (
    AccessOutcome,
    AlreadyLoadedError,
    CapacityExceededError,
    DuplicateNameError,
    InvalidNameError,
    InvalidSizeError,
    LoadCancelledError,
    LoadConfirmation,
    LoadReport,
    PageAccess,
    ProcessDescriptor,
    ProcessNotLoadedError,
    ProcessTable,
    UnknownProcessError,
)

__all__ = [
    "AccessOutcome",
    "AlreadyLoadedError",
    "CapacityExceededError",
    "DuplicateNameError",
    "InvalidNameError",
    "InvalidSizeError",
    "LoadCancelledError",
    "LoadConfirmation",
    "LoadReport",
    "PageAccess",
    "PageTable",
    "ProcessDescriptor",
    "ProcessNotLoadedError",
    "ProcessTable",
    "UnknownProcessError",
]
