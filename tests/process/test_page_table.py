"""Tests for the per-process page table.

Pages are numbered from 1.  Each mapping is written once and then only
read; a missing page is reported as None so the caller can call it a
fault.
"""

import pytest

from py_vmsim.process.page_table import PageTable


class TestPageTable:
    """Verify page → frame mapping."""

    def test_map_and_lookup(self) -> None:
        """A mapped page should resolve to its frame."""
        pt = PageTable()
        pt.map(page=1, frame=42)
        expected_frame = 42
        assert pt.lookup(1) == expected_frame

    def test_lookup_unmapped_returns_none(self) -> None:
        """An unmapped page has no frame."""
        pt = PageTable()
        assert pt.lookup(5) is None

    def test_remapping_raises(self) -> None:
        """Entries are write-once."""
        pt = PageTable()
        pt.map(page=1, frame=3)
        with pytest.raises(ValueError, match="already mapped"):
            pt.map(page=1, frame=4)
        original_frame = 3
        assert pt.lookup(1) == original_frame

    def test_contains(self) -> None:
        """Membership should reflect mapped pages."""
        pt = PageTable()
        pt.map(page=2, frame=0)
        assert 2 in pt
        assert 1 not in pt

    def test_len(self) -> None:
        """Len should return the number of mapped pages."""
        pt = PageTable()
        assert len(pt) == 0
        pt.map(page=1, frame=0)
        pt.map(page=2, frame=1)
        expected = 2
        assert len(pt) == expected

    def test_mappings_sorted_by_page(self) -> None:
        """Mappings should come back in page order."""
        pt = PageTable()
        pt.map(page=2, frame=11)
        pt.map(page=1, frame=10)
        assert list(pt.mappings().items()) == [(1, 10), (2, 11)]

    def test_mappings_is_a_copy(self) -> None:
        """Editing the returned dict must not touch the table."""
        pt = PageTable()
        pt.map(page=1, frame=0)
        m = pt.mappings()
        m[1] = 99
        assert pt.lookup(1) == 0
