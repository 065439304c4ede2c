"""Memory subsystem — the physical frame pool.

Re-exports public symbols so callers can write::

    from py_vmsim.memory import MemoryPool
"""

from py_vmsim.memory.pool import (
    FrameSlot,
    InsufficientMemoryError,
    MemoryPool,
    page_label,
    parse_page_label,
)

__all__ = [
    "FrameSlot",
    "InsufficientMemoryError",
    "MemoryPool",
    "page_label",
    "parse_page_label",
]
