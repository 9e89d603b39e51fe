"""List operations over (items, cursor) pairs (pure functions, no I/O)."""

from typing import List


def list_up(items: List[str], cursor: int) -> int:
    """Return the cursor moved one row up; stays at 0 and on an empty list."""
    if items and cursor > 0:
        return cursor - 1
    return cursor


def list_down(items: List[str], cursor: int) -> int:
    """Return the cursor moved one row down; stays on the last row."""
    if cursor + 1 < len(items):
        return cursor + 1
    return cursor


def list_transfer(dst: List[str], src: List[str], src_curr: int) -> int:
    """Move src[src_curr] to the end of dst.

    Returns the new source cursor. When the removed item was the last one the
    cursor is clamped onto the new last item (0 once src is empty). Nothing
    happens if src_curr does not point at an item.
    """
    if src_curr < len(src):
        dst.append(src.pop(src_curr))
        if src_curr >= len(src):
            src_curr = max(len(src) - 1, 0)
    return src_curr
