"""Memory pool — the fixed array of physical frames.

Physical memory is a row of **frames**, each either free or holding one
page of one process.  The pool is the single source of truth for "what
is where": every other structure (page tables included) only records
frame indices that the pool handed out.

Allocation is **watermark** based.  The pool remembers how many frames
have been used so far (``used_frames``) and every new block starts
right there::

    index:  0   1   2   3   4   5   6   7   8   9
           [A1][A2][A3][B1][B2][ - ][ - ][ - ][ - ][ - ]
                            ^ used_frames = 5

Frames are never returned individually, so the watermark only moves
forward until ``reset()``.  Known limitation: if frames could ever be
released, the gaps they leave behind would not be reused.  A first-fit
or best-fit free-list allocator is a different allocator with different
placement results, not a drop-in fix.

Each slot is a ``FrameSlot`` value rather than a magic "free" string,
so a free frame can never be confused with a label.
"""

from dataclasses import dataclass

from py_vmsim.errors import LoadError


class InsufficientMemoryError(LoadError):
    """Raise when a block does not fit above the watermark."""


def page_label(owner_name: str, page: int) -> str:
    """Return the slot label for page *page* of process *owner_name*."""
    return f"{owner_name}_page{page}"


def parse_page_label(owner_name: str, label: str) -> int | None:
    """Return the page number in *label* if it names a page of *owner_name*."""
    prefix = f"{owner_name}_page"
    digits = label.removeprefix(prefix)
    if digits == label or not digits.isdecimal():
        return None
    return int(digits)


@dataclass(frozen=True)
class FrameSlot:
    """One physical frame: free when ``label`` is None, occupied otherwise."""

    label: str | None = None

    @property
    def is_free(self) -> bool:
        """Return True if no page occupies this frame."""
        return self.label is None


FREE = FrameSlot()


class MemoryPool:
    """A fixed-capacity row of frame slots with a forward-only watermark."""

    def __init__(self, *, capacity: int) -> None:
        """Create a pool with every frame free.

        Args:
            capacity: Total number of physical frames.

        """
        self._capacity = 0
        self._slots: list[FrameSlot] = []
        self._used_frames = 0
        self.initialize(capacity)

    @property
    def capacity(self) -> int:
        """Return the total number of frames."""
        return self._capacity

    @property
    def used_frames(self) -> int:
        """Return the watermark: how many frames have been handed out."""
        return self._used_frames

    @property
    def free_frames(self) -> int:
        """Return the number of frames still available above the watermark."""
        return self._capacity - self._used_frames

    def initialize(self, capacity: int) -> None:
        """Resize the pool to *capacity* frames and mark all of them free.

        Safe to call repeatedly; every call starts from a clean pool.

        Args:
            capacity: Total number of physical frames.

        Raises:
            ValueError: If capacity is negative.

        """
        if capacity < 0:
            msg = f"Pool capacity must not be negative, got {capacity}"
            raise ValueError(msg)
        self._capacity = capacity
        self._slots = [FREE] * capacity
        self._used_frames = 0

    def reset(self) -> None:
        """Free every frame and move the watermark back to zero."""
        self.initialize(self._capacity)

    def slot(self, index: int) -> FrameSlot:
        """Return the slot at *index*.

        Raises:
            IndexError: If index is outside the pool.

        """
        if not 0 <= index < self._capacity:
            msg = f"Frame {index} is outside the pool (capacity {self._capacity})"
            raise IndexError(msg)
        return self._slots[index]

    def fits(self, page_count: int) -> bool:
        """Return True if *page_count* frames fit above the watermark."""
        return self._used_frames + page_count <= self._capacity

    def next_block(self, page_count: int) -> list[int]:
        """Return the frames a block of *page_count* pages would occupy.

        Nothing is written; this is how a caller previews a load.

        Raises:
            ValueError: If page_count is less than 1.
            InsufficientMemoryError: If the block does not fit.

        """
        if page_count < 1:
            msg = f"A block needs at least 1 page, got {page_count}"
            raise ValueError(msg)
        if not self.fits(page_count):
            msg = (
                f"Cannot allocate {page_count} frames: "
                f"{self._used_frames} of {self._capacity} already used"
            )
            raise InsufficientMemoryError(msg)
        return list(range(self._used_frames, self._used_frames + page_count))

    def allocate_contiguous_block(self, owner_name: str, page_count: int) -> list[int]:
        """Claim *page_count* consecutive frames starting at the watermark.

        Frame ``used_frames + n - 1`` receives the label
        ``"{owner_name}_page{n}"`` for n = 1..page_count.

        Args:
            owner_name: Name of the process receiving the frames.
            page_count: Number of pages to place.

        Returns:
            The claimed frame indices, in page order.

        Raises:
            ValueError: If page_count is less than 1.
            InsufficientMemoryError: If the block would pass the pool's
                capacity.  The pool is left untouched.

        """
        frames = self.next_block(page_count)
        for page, frame in enumerate(frames, start=1):
            self._slots[frame] = FrameSlot(label=page_label(owner_name, page))
        self._used_frames += page_count
        return frames

    def snapshot(self) -> list[tuple[int, str]]:
        """Return ``(index, label)`` for every occupied frame, in index order."""
        return [
            (index, slot.label) for index, slot in enumerate(self._slots) if slot.label is not None
        ]
