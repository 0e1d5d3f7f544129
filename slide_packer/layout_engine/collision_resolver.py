"""Collision Resolver

Places render groups one at a time on the target canvas, pushing a group down
whenever its estimated footprint intersects an already placed footprint.

Each group moves pending -> placed exactly once; nothing is ever rejected. The
set of placed rectangles is an explicit accumulator threaded through
place_group, so resolving a sequence is a left fold over the groups in reading
order and the outcome is fully determined by that order.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from ..measurement import PlacedRect, RenderGroup
from ..packing_options import PackingOptions
from . import coordinate_utils

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedGroup:
    """A placed group.

    Attributes:
        group: The render group
        rect: Final footprint in canvas units (height includes the safety multiplier)
        web_height: Measured height in canvas units, without the multiplier
        attempts: Push-down iterations used
        unresolved: True if the attempt bound ran out with a collision outstanding
    """

    group: RenderGroup
    rect: PlacedRect
    web_height: float
    attempts: int = 0
    unresolved: bool = False


def initial_rect(group: RenderGroup, options: PackingOptions) -> PlacedRect:
    """
    Convert a group's pixel anchor and extent to a candidate canvas rectangle.

    The height is the converted measured height times the safety multiplier,
    since target renderers typically set each line taller than the measuring
    surface did.
    """
    x, y, w, h_web = coordinate_utils.convert_rect_to_units(
        (group.x, group.y, group.w, group.h_web), options.canvas, options.source
    )
    return PlacedRect(x=x, y=y, w=w, h=h_web * options.height_safety_multiplier)


def place_group(
    placed: Tuple[PlacedRect, ...],
    group: RenderGroup,
    options: PackingOptions,
) -> Tuple[Tuple[PlacedRect, ...], ResolvedGroup]:
    """
    Place one group against the rectangles placed so far.

    While the candidate intersects a placed rectangle (and fewer than
    max_push_attempts passes have moved it), y moves to just below each
    colliding rectangle that reaches lower, then every placed rectangle is
    checked again.

    Args:
        placed: Rectangles already registered, in placement order
        group: Group to place
        options: Packing options (scales, multiplier, attempt bound, gap)

    Returns:
        Tuple of (placed rectangles including the new one, resolved group)
    """
    candidate = initial_rect(group, options)
    x, y, w, h = candidate.x, candidate.y, candidate.w, candidate.h

    attempts = 0
    overlap_found = True
    while overlap_found and attempts < options.max_push_attempts:
        overlap_found = False
        for rect in placed:
            if PlacedRect(x, y, w, h).intersects(rect):
                new_y = rect.y + rect.h + options.push_gap_units
                if new_y > y:
                    y = new_y
                    overlap_found = True
        if overlap_found:
            attempts += 1

    final = PlacedRect(x=x, y=y, w=w, h=h)
    unresolved = any(final.intersects(rect) for rect in placed)
    if unresolved:
        logger.warning(
            "Collision unresolved after %d attempts for group at (%.2f, %.2f) '%s'; placing best-effort",
            attempts, x, y, group.first.text[:40],
        )

    resolved = ResolvedGroup(
        group=group,
        rect=final,
        attempts=attempts,
        unresolved=unresolved,
        web_height=coordinate_utils.px_to_units_y(group.h_web, options.canvas, options.source),
    )
    return placed + (final,), resolved


def resolve_collisions(groups: Iterable[RenderGroup], options: PackingOptions) -> List[ResolvedGroup]:
    """
    Place every group in the given (reading) order.

    Args:
        groups: Groups from the Global Sequencer
        options: Packing options

    Returns:
        Resolved groups in the same order as the input
    """
    placed: Tuple[PlacedRect, ...] = ()
    resolved: List[ResolvedGroup] = []
    for group in groups:
        placed, result = place_group(placed, group, options)
        resolved.append(result)

    pushed = sum(1 for r in resolved if r.attempts)
    logger.debug("Placed %d group(s), %d pushed down", len(resolved), pushed)
    return resolved
