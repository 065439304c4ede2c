"""Per-process page table.

A page table maps a process's page numbers (starting at 1) to the
physical frames that hold them.  Entries are written once, when the
process is loaded, and never change afterwards: there is no eviction,
so a page that made it into memory stays at the same frame until the
whole simulator is reset.

Lookups are direct dictionary reads.  A missing entry is not an error
at this level; ``lookup`` returns None and the caller decides that it
is a fault.
"""


class PageTable:
    """Map page numbers to physical frame numbers, write-once."""

    def __init__(self) -> None:
        """Create an empty page table."""
        self._entries: dict[int, int] = {}

    def map(self, *, page: int, frame: int) -> None:
        """Record that *page* lives in *frame*.

        Raises:
            ValueError: If the page is already mapped.

        """
        if page in self._entries:
            msg = f"Page {page} is already mapped to frame {self._entries[page]}"
            raise ValueError(msg)
        self._entries[page] = frame

    def lookup(self, page: int) -> int | None:
        """Return the frame holding *page*, or None if it is not mapped."""
        return self._entries.get(page)

    def mappings(self) -> dict[int, int]:
        """Return a copy of all page → frame mappings, in page order."""
        return dict(sorted(self._entries.items()))

    def __contains__(self, page: object) -> bool:
        """Return True if *page* is mapped."""
        return page in self._entries

    def __len__(self) -> int:
        """Return the number of mapped pages."""
        return len(self._entries)
