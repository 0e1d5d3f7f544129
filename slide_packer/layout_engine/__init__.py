"""Layout Engine Package

This package reconstructs a slide's layout from flat element measurements and
emits placement commands for a document serializer:

Core Classes:
- SlidePacker: Main orchestrator class (from packer.py)
- PackedSlide: Packing output for one slide

Stages (pure functions, leaves first):
- bucket_columns: Column Bucketer
- group_paragraphs: Paragraph Grouper
- sequence_groups: Global Sequencer
- resolve_collisions / place_group: Collision Resolver
- style_mapper: Style & Unit Mapper
- emit_placements: Placement Emitter

Helper Functions:
- pack_measurements: Pack one slide with default or given options
- pack_infographic_overlay: Pack editable text boxes over an infographic picture

Utilities:
- coordinate_utils: Coordinate conversion functions
"""

from .packer import SlidePacker, PackedSlide, pack_measurements
from .column_bucketer import ColumnBucket, bucket_columns, drop_structural
from .paragraph_grouper import group_paragraphs
from .sequencer import sequence_groups
from .collision_resolver import ResolvedGroup, place_group, resolve_collisions
from .emitter import emit_placements
from .placement import (
    BackgroundPlacement,
    BoxPlacement,
    MultiRunPlacement,
    RootImagePlacement,
    TextRun,
    TextStyle,
)
from .slide_decorations import background_command, root_image_command
from .infographic_overlay import (
    OverlayPlacement,
    OverlayTextNode,
    downgrade_dense_chart,
    pack_infographic_overlay,
)
from . import coordinate_utils, style_mapper

__all__ = [
    # Orchestrator
    'SlidePacker',
    'PackedSlide',
    'pack_measurements',

    # Stages
    'ColumnBucket',
    'bucket_columns',
    'drop_structural',
    'group_paragraphs',
    'sequence_groups',
    'ResolvedGroup',
    'place_group',
    'resolve_collisions',
    'emit_placements',

    # Placement commands
    'BackgroundPlacement',
    'BoxPlacement',
    'MultiRunPlacement',
    'RootImagePlacement',
    'TextRun',
    'TextStyle',
    'background_command',
    'root_image_command',

    # Infographic overlay
    'OverlayPlacement',
    'OverlayTextNode',
    'downgrade_dense_chart',
    'pack_infographic_overlay',

    # Utilities modules
    'coordinate_utils',
    'style_mapper',
]
