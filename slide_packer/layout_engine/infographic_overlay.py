"""Infographic Text Overlay Packer

Infographic slides are exported as a flattened background picture with the text
lifted off into editable boxes. Text nodes arrive positioned as fractions of the
render container; this module pads them for wider target fonts, converts their
styles, and pushes vertically overlapping neighbours apart.

Unlike the slide packer, positions stay relative (0..1 of the container), so
the serializer can express them as percentages of any slide size.
"""
import logging
import re
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional

from ..config import (
    DENSE_CHART_FALLBACK_TEMPLATE,
    DENSE_CHART_MAX_ITEMS,
    OVERLAY_COLLISION_PASSES,
    OVERLAY_DEFAULT_FONT_PX,
    OVERLAY_FONT_SCALE,
    OVERLAY_HEIGHT_BUFFER,
    OVERLAY_MIN_FONT_PT,
    OVERLAY_MIN_HORIZONTAL_OVERLAP,
    OVERLAY_PUSH_BUFFER,
    OVERLAY_WIDTH_BUFFER,
)
from ..measurement import OverlayTextNode
from .style_mapper import rgb_to_hex

logger = logging.getLogger(__name__)

_TEMPLATE = re.compile(r"^infographic\s+(\S+)")
_LABEL_ITEM = re.compile(r"- label")
_LABEL_PERCENT = re.compile(r"(\n\s*-\s*label\s+.*?)(\s*[(（]\d+[%％][)）])")
_CIRCULAR_MARKERS = ("chart-pie", "chart-donut", "rose")


@dataclass(frozen=True)
class OverlayPlacement:
    """An editable text box over the infographic picture, in container fractions."""

    text: str
    x: float
    y: float
    w: float
    h: float
    font_size: float
    font_face: str
    color: str
    align: str = "left"
    valign: str = "middle"

    kind = "overlay_text"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "text": self.text,
            "x": f"{self.x * 100}%",
            "y": f"{self.y * 100}%",
            "w": f"{self.w * 100}%",
            "h": f"{self.h * 100}%",
            "font_size": self.font_size,
            "font_face": self.font_face,
            "color": self.color.lstrip("#"),
            "align": self.align,
            "valign": self.valign,
        }


def _parse_float_px(value: str, default: float) -> float:
    match = re.match(r"\s*(\d+(?:\.\d+)?)", value or "")
    if not match:
        return default
    size = float(match.group(1))
    return size or default


def _overlay_alignment(node: OverlayTextNode) -> str:
    align = "left"
    if node.text_anchor == "middle":
        align = "center"
    if node.text_anchor == "end":
        align = "right"
    if node.is_foreign:
        if node.text_align == "center":
            align = "center"
        if node.text_align == "right":
            align = "right"
    return align


def _primary_font(font_family: str) -> str:
    first = (font_family or "").split(",")[0].strip().strip("'\"")
    return first or "Arial"


def build_overlay_placement(node: OverlayTextNode) -> Optional[OverlayPlacement]:
    """
    Pad and style one text node.

    The box grows 15% wider and 5% taller around its center, so wider target
    fonts do not wrap. Nodes with no text or a zero-size box are skipped.

    Returns:
        OverlayPlacement, or None for skipped nodes
    """
    text = node.text.strip()
    if not text or node.w == 0 or node.h == 0:
        return None

    new_w = node.w * OVERLAY_WIDTH_BUFFER
    new_h = node.h * OVERLAY_HEIGHT_BUFFER
    font_px = _parse_float_px(node.font_size, OVERLAY_DEFAULT_FONT_PX)

    return OverlayPlacement(
        text=text,
        x=node.x - (new_w - node.w) / 2,
        y=node.y - (new_h - node.h) / 2,
        w=new_w,
        h=new_h,
        font_size=max(OVERLAY_MIN_FONT_PT, font_px * OVERLAY_FONT_SCALE),
        font_face=_primary_font(node.font_family),
        color=rgb_to_hex(node.color or "#000000"),
        align=_overlay_alignment(node),
    )


def resolve_overlay_collisions(
    placements: Iterable[OverlayPlacement],
    passes: int = OVERLAY_COLLISION_PASSES,
) -> List[OverlayPlacement]:
    """
    Push overlapping overlay boxes apart, top-down.

    Each pass sorts by y, then for every pair (upper, lower) that overlaps
    horizontally by more than 20% of the narrower box, a lower box starting
    above the upper box's bottom moves down by the overlap plus a 1% buffer.
    Several passes let shifts cascade.

    Returns:
        New list sorted by y after the last pass
    """
    nodes = list(placements)
    for _ in range(passes):
        nodes.sort(key=lambda n: n.y)
        for i in range(len(nodes)):
            for j in range(i + 1, len(nodes)):
                top, bottom = nodes[i], nodes[j]

                overlap_x = max(0.0, min(top.x + top.w, bottom.x + bottom.w) - max(top.x, bottom.x))
                if overlap_x <= min(top.w, bottom.w) * OVERLAY_MIN_HORIZONTAL_OVERLAP:
                    continue

                bottom_of_top = top.y + top.h
                if bottom.y < bottom_of_top:
                    shift = bottom_of_top - bottom.y + OVERLAY_PUSH_BUFFER
                    nodes[j] = replace(bottom, y=bottom.y + shift)
    return nodes


def pack_infographic_overlay(nodes: Iterable[OverlayTextNode]) -> List[OverlayPlacement]:
    """Build and de-overlap the editable text boxes for one infographic slide."""
    placements = [p for p in (build_overlay_placement(n) for n in nodes) if p is not None]
    logger.debug("Extracted %d overlay text node(s)", len(placements))
    return resolve_overlay_collisions(placements)


def downgrade_dense_chart(dsl: str, max_items: int = DENSE_CHART_MAX_ITEMS) -> str:
    """
    Replace a crowded circular chart with a plain bar chart.

    Pie, donut and rose templates with more than max_items labels do not leave
    room for their text once exported, so the template is switched to
    chart-bar-plain-text and "(30%)" style suffixes are dropped from labels.

    Args:
        dsl: Infographic description starting with "infographic <template>"

    Returns:
        The description, rewritten if it was a dense circular chart
    """
    match = _TEMPLATE.match(dsl or "")
    if not match:
        return dsl

    template = match.group(1)
    if not any(marker in template for marker in _CIRCULAR_MARKERS):
        return dsl

    count = len(_LABEL_ITEM.findall(dsl))
    if count <= max_items:
        return dsl

    logger.warning("Auto-switching dense chart (%d items) to %s", count, DENSE_CHART_FALLBACK_TEMPLATE)
    dsl = dsl.replace(f"infographic {template}", f"infographic {DENSE_CHART_FALLBACK_TEMPLATE}", 1)
    return _LABEL_PERCENT.sub(r"\1", dsl)
