"""Slide Packer

Orchestrates the packing stages for one slide:
- column_bucketer: measurements -> column buckets
- paragraph_grouper: bucket -> render groups
- sequencer: all groups -> reading order
- collision_resolver: reading order -> placed rectangles
- style_mapper / emitter: placed groups -> placement commands
- slide_decorations: background and root image
- infographic_overlay: editable text boxes over an infographic picture

Each stage is a pure function over its predecessor's output, so one SlidePacker
can pack any number of slides, from any number of threads.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..measurement import ElementMeasurement, PlacedRect, RenderGroup, SlideInput, ThemeColors
from ..packing_options import PackingOptions
from .collision_resolver import ResolvedGroup, resolve_collisions
from .column_bucketer import bucket_columns, drop_structural
from .emitter import emit_placements
from .infographic_overlay import OverlayPlacement, pack_infographic_overlay
from .paragraph_grouper import group_paragraphs
from .placement import BackgroundPlacement, PlacementCommand, RootImagePlacement, SlideCommand
from .sequencer import sequence_groups
from .slide_decorations import background_command, root_image_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackedSlide:
    """Packing output for one slide.

    Attributes:
        slide_index: Position of the slide in its deck
        placements: Content placement commands in reading order
        resolved: Resolved groups, parallel to placements
        background: Background fill command
        root_image: Root image command, if the slide has one
        overlays: Editable infographic text boxes, in container fractions
    """

    slide_index: int
    placements: Tuple[PlacementCommand, ...]
    resolved: Tuple[ResolvedGroup, ...]
    background: Optional[BackgroundPlacement] = None
    root_image: Optional[RootImagePlacement] = None
    overlays: Tuple[OverlayPlacement, ...] = ()

    @property
    def commands(self) -> List[SlideCommand]:
        """Everything to draw, back to front: background, root image, content, overlays."""
        commands: List[SlideCommand] = []
        if self.background is not None:
            commands.append(self.background)
        if self.root_image is not None:
            commands.append(self.root_image)
        commands.extend(self.placements)
        commands.extend(self.overlays)
        return commands

    @property
    def placed_rects(self) -> List[PlacedRect]:
        return [r.rect for r in self.resolved]

    @property
    def unresolved_count(self) -> int:
        return sum(1 for r in self.resolved if r.unresolved)

    def to_dict(self) -> dict:
        return {
            "slide_index": self.slide_index,
            "commands": [c.to_dict() for c in self.commands],
        }


class SlidePacker:
    """Converts measurement lists into placement commands.

    Attributes:
        options: Heuristic thresholds and coordinate spaces
        theme: Theme colors used for fallbacks and backgrounds
    """

    def __init__(self, options: PackingOptions = None, theme: ThemeColors = None):
        """
        Initialize slide packer.

        Args:
            options: Packing options; defaults match a 1920x1080 render packed onto a 10x5.625in slide
            theme: Theme colors; defaults are used when omitted
        """
        self.options = options or PackingOptions()
        self.theme = theme or ThemeColors()

    def group(self, measurements: Iterable[ElementMeasurement]) -> List[RenderGroup]:
        """
        Reconstruct render groups from flat measurements, in reading order.

        Args:
            measurements: Measurements in report order (structural types allowed)

        Returns:
            Render groups sorted by the Global Sequencer
        """
        content = drop_structural(measurements)
        buckets = bucket_columns(content, self.options.column_proximity_px)

        groups: List[RenderGroup] = []
        for bucket in buckets:
            groups.extend(
                group_paragraphs(bucket.elements, self.options.width_delta_px, self.options.min_group_height_px)
            )

        return sequence_groups(groups, self.options.row_tolerance_px)

    def resolve(self, measurements: Iterable[ElementMeasurement]) -> List[ResolvedGroup]:
        """Group measurements and place the groups on the canvas."""
        return resolve_collisions(self.group(measurements), self.options)

    def pack(self, measurements: Iterable[ElementMeasurement]) -> List[PlacementCommand]:
        """
        Pack one slide's measurements into placement commands.

        Args:
            measurements: Measurements in report order; may be empty

        Returns:
            Placement commands in reading order (empty for empty input)
        """
        resolved = self.resolve(measurements)
        return emit_placements(resolved, self.theme, self.options)

    def pack_slide(self, slide: SlideInput, slide_index: int = 0) -> PackedSlide:
        """
        Pack a slide together with its decorations and infographic overlay text.

        Args:
            slide: Parsed slide input
            slide_index: Position of the slide in the deck

        Returns:
            PackedSlide
        """
        resolved = self.resolve(slide.measurements)
        placements = emit_placements(resolved, self.theme, self.options)

        packed = PackedSlide(
            slide_index=slide_index,
            placements=tuple(placements),
            resolved=tuple(resolved),
            background=background_command(slide.bg_color, self.theme),
            root_image=root_image_command(slide.root_image_url, slide.layout_type, self.options.canvas),
            overlays=tuple(pack_infographic_overlay(slide.overlay_nodes)),
        )

        if packed.unresolved_count:
            logger.warning(
                "Slide %d: %d group(s) placed with residual overlap",
                slide_index + 1, packed.unresolved_count,
            )
        logger.debug(
            "Slide %d: %d measurement(s) -> %d placement(s)",
            slide_index + 1, len(slide.measurements), len(placements),
        )
        return packed


def pack_measurements(
    measurements: Iterable[ElementMeasurement],
    theme: ThemeColors = None,
    options: PackingOptions = None,
) -> List[PlacementCommand]:
    """
    Pack one slide's measurements with a temporary SlidePacker.

    Args:
        measurements: Measurements in report order
        theme: Optional theme colors
        options: Optional packing options

    Returns:
        Placement commands in reading order
    """
    return SlidePacker(options=options, theme=theme).pack(measurements)
