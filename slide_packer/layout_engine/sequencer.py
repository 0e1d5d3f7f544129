"""Global Sequencer

Merges the render groups of every column into one reading-order sequence:
top-to-bottom, and left-to-right for groups that start at essentially the same
height (side-by-side columns).
"""
from functools import cmp_to_key
from typing import Iterable, List

from ..config import ROW_TOLERANCE_PX
from ..measurement import RenderGroup


def reading_order_key(row_tolerance_px: float = ROW_TOLERANCE_PX):
    """
    Build the sort key comparing two groups in reading order.

    Groups whose y differ by less than row_tolerance_px compare by x; all others
    compare by y. Groups with identical (y, x) compare equal, so a stable sort
    keeps their incoming order.
    """
    def compare(a: RenderGroup, b: RenderGroup) -> int:
        if abs(a.y - b.y) < row_tolerance_px:
            delta = a.x - b.x
        else:
            delta = a.y - b.y
        return (delta > 0) - (delta < 0)

    return cmp_to_key(compare)


def sequence_groups(
    groups: Iterable[RenderGroup],
    row_tolerance_px: float = ROW_TOLERANCE_PX,
) -> List[RenderGroup]:
    """
    Sort groups into reading order.

    Args:
        groups: Groups from all columns, in column order
        row_tolerance_px: Vertical distance (exclusive) under which groups share a row

    Returns:
        New list in reading order
    """
    return sorted(groups, key=reading_order_key(row_tolerance_px))
