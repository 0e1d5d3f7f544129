"""Column Bucketer

Groups raw measurements into vertical columns by horizontal proximity.

Multi-column slides give each visual column a roughly constant left edge, so an
element joins the first column whose anchor is within the proximity threshold.
A bucket's anchor is the x of the element that opened it; buckets keep the
order in which they were opened and are never re-sorted.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from ..config import COLUMN_PROXIMITY_PX
from ..measurement import ElementMeasurement

logger = logging.getLogger(__name__)


@dataclass
class ColumnBucket:
    """One visual column: the anchor x and its members in report order."""

    anchor_x: float
    elements: List[ElementMeasurement] = field(default_factory=list)


def drop_structural(measurements: Iterable[ElementMeasurement]) -> List[ElementMeasurement]:
    """Remove nesting-only elements (columns, column groups, bullet lists)."""
    return [m for m in measurements if m is not None and not m.is_structural]


def bucket_columns(
    measurements: Iterable[ElementMeasurement],
    proximity_px: float = COLUMN_PROXIMITY_PX,
) -> List[ColumnBucket]:
    """
    Assign each measurement to a column bucket.

    Args:
        measurements: Measurements in report order, structural types already removed
        proximity_px: Maximum (exclusive) distance between an element's x and a bucket anchor

    Returns:
        Buckets in the order they were opened

    Examples:
        Elements at x=100 and x=140 share a bucket (delta 40 < 50);
        elements at x=100 and x=160 do not (delta 60 >= 50).
    """
    buckets: List[ColumnBucket] = []

    for m in measurements:
        bucket = next((b for b in buckets if abs(b.anchor_x - m.x) < proximity_px), None)
        if bucket is not None:
            bucket.elements.append(m)
        else:
            buckets.append(ColumnBucket(anchor_x=m.x, elements=[m]))

    logger.debug("Bucketed measurements into %d column(s)", len(buckets))
    return buckets
