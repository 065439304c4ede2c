"""Plain-text views of the simulator state.

These functions turn the structured query results into the two tables
a classroom front end shows: the occupied frames of memory, and the
registered processes with their status.  They only read state.
"""

from py_vmsim.memory.pool import page_label
from py_vmsim.simulator import MemoryState

_RULE = "+-------+------------------------+"
_PROCESS_RULE = "+---------+---------+------------+"


def format_memory(state: MemoryState) -> str:
    """Render every occupied frame as an ``Index | Content`` table."""
    lines = [
        _RULE,
        "| Index | Content                |",
        _RULE,
    ]
    lines.extend(f"| {index:>5} | {label:<22} |" for index, label in state.memory_snapshot())
    lines.append(_RULE)
    lines.append(f"{state.used_frames}/{state.config.pool_capacity} frames used")
    return "\n".join(lines)


def format_processes(state: MemoryState) -> str:
    """Render the process list with LOADED / WAITING status."""
    processes = state.process_list()
    if not processes:
        return "No processes."
    lines = [
        _PROCESS_RULE,
        "| Program | Status  | Size       |",
        _PROCESS_RULE,
    ]
    for name, is_loaded, size in processes:
        status = "LOADED" if is_loaded else "WAITING"
        lines.append(f"| {name:<7} | {status:<7} | {size:<10} |")
    lines.append(_PROCESS_RULE)
    return "\n".join(lines)


def format_load(state: MemoryState, pid: int) -> str:
    """Render the page → frame placement of a loaded process."""
    process = state.process(pid)
    if not process.is_loaded:
        return f"{process.name} is not loaded."
    lines = [f"Pages loaded for {process.name}:"]
    lines.extend(
        f"  +- {page_label(process.name, page)} -> frame {frame}"
        for page, frame in process.page_table.mappings().items()
    )
    return "\n".join(lines)
