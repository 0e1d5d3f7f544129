"""Paragraph Grouper

Within one column bucket, merges contiguous text measurements of similar width
into logical blocks and isolates every non-text element as its own group.

Width is the proxy for "same logical text block": a full-width heading run and a
half-column body paragraph get very different widths from the renderer, so a
sharp width change marks a structural break even when the vertical gap is small.
"""
import logging
from typing import List, Sequence

from ..config import MIN_GROUP_HEIGHT_PX, WIDTH_DELTA_PX
from ..measurement import ElementMeasurement, RenderGroup

logger = logging.getLogger(__name__)


def group_paragraphs(
    elements: Sequence[ElementMeasurement],
    width_delta_px: float = WIDTH_DELTA_PX,
    min_height_px: float = MIN_GROUP_HEIGHT_PX,
) -> List[RenderGroup]:
    """
    Split one column's elements into render groups.

    Algorithm:
    1. Stable-sort the elements by y
    2. A non-text element closes the open group and becomes a singleton group
    3. A text element extends the open group only when its width differs from
       the group's most recent member by less than width_delta_px; otherwise the
       open group is closed and a new one starts with this element
    4. Flush the open group at the end

    Args:
        elements: Members of one column bucket
        width_delta_px: Width difference (exclusive) tolerated inside a block
        min_height_px: Floor for a group's spanned height

    Returns:
        Render groups in vertical order
    """
    groups: List[RenderGroup] = []
    current: List[ElementMeasurement] = []

    def flush():
        if current:
            groups.append(RenderGroup.from_elements(current, min_height_px))
            current.clear()

    for m in sorted(elements, key=lambda e: e.y):
        if not m.is_text:
            flush()
            groups.append(RenderGroup.from_elements([m], min_height_px))
            continue

        if current and abs(m.width - current[-1].width) >= width_delta_px:
            flush()
        current.append(m)

    flush()
    return groups
