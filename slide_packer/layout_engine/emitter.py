"""Placement Emitter

Turns resolved, styled groups into placement commands for a document serializer.

- A single non-bullet element becomes one BoxPlacement sized to its measured
  height (headings are vertically centered in it)
- A multi-element group, or a bullet item, becomes one MultiRunPlacement whose
  runs keep member order, sized to the full estimated footprint
- A non-text element without text becomes an image box

Commands come out in the order received, which is reading order.
"""
from typing import Iterable, List

from ..measurement import ThemeColors
from ..packing_options import PackingOptions
from . import style_mapper
from .collision_resolver import ResolvedGroup
from .placement import BoxPlacement, MultiRunPlacement, PlacementCommand


def emit_group(resolved: ResolvedGroup, theme: ThemeColors, options: PackingOptions) -> PlacementCommand:
    """Build the placement command for one resolved group."""
    group, rect = resolved.group, resolved.rect
    first = group.first

    if group.is_single and not first.is_bullet_item:
        has_text = bool(first.text.strip())
        style = style_mapper.style_for_element(first, theme, options) if (first.is_text or has_text) else None
        return BoxPlacement(
            x=rect.x,
            y=rect.y,
            w=rect.w,
            h=resolved.web_height,
            text=first.text,
            style=style,
            element_type=first.type,
            source_index=first.index,
        )

    runs = tuple(style_mapper.run_for_element(m, theme, options) for m in group.elements)
    return MultiRunPlacement(
        x=rect.x,
        y=rect.y,
        w=rect.w,
        h=rect.h,
        runs=runs,
        align=style_mapper.map_alignment(first.styles.text_align),
        valign="top",
        wrap=True,
    )


def emit_placements(
    resolved_groups: Iterable[ResolvedGroup],
    theme: ThemeColors,
    options: PackingOptions,
) -> List[PlacementCommand]:
    """Emit one command per resolved group, preserving order."""
    return [emit_group(resolved, theme, options) for resolved in resolved_groups]
