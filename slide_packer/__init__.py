"""slide-packer

Reconstructs slide layouts from rendered element measurements and packs them
into placement commands for fixed-canvas presentation documents.

Main entry points:
- SlidePacker / pack_measurements: Pack one slide
- pack_deck / DeckPackingPipeline: Pack a whole deck and write outputs
- load_deck / load_measurements: Read the measuring host's JSON
- render_preview_pdf: Draw packed slides into a PDF
"""

from .exceptions import (
    SlidePackerError,
    ValidationError,
    InvalidFileError,
    FileSizeLimitExceededError,
    InvalidConfigurationError,
    MeasurementParsingError,
    RenderingError,
    PreviewRenderingError,
    PipelineError,
    PipelineStepError,
)
from .measurement import (
    CanvasSize,
    DeckInput,
    ElementMeasurement,
    ElementStyles,
    OverlayTextNode,
    PlacedRect,
    RenderGroup,
    SlideInput,
    SourceSize,
    ThemeColors,
)
from .packing_options import PackingOptions
from .packing_result import PackingResult
from .layout_engine import PackedSlide, SlidePacker, pack_measurements
from .pipeline import DeckPackingPipeline, pack_deck
from .preview import render_preview_pdf
from .utils import load_deck, load_measurements, write_placements_json

__version__ = "0.1.0"

__all__ = [
    # Packing
    'SlidePacker',
    'PackedSlide',
    'pack_measurements',
    'pack_deck',
    'DeckPackingPipeline',
    'PackingOptions',
    'PackingResult',

    # Data model
    'CanvasSize',
    'DeckInput',
    'ElementMeasurement',
    'ElementStyles',
    'OverlayTextNode',
    'PlacedRect',
    'RenderGroup',
    'SlideInput',
    'SourceSize',
    'ThemeColors',

    # I/O
    'load_deck',
    'load_measurements',
    'write_placements_json',
    'render_preview_pdf',

    # Exceptions
    'SlidePackerError',
    'ValidationError',
    'InvalidFileError',
    'FileSizeLimitExceededError',
    'InvalidConfigurationError',
    'MeasurementParsingError',
    'RenderingError',
    'PreviewRenderingError',
    'PipelineError',
    'PipelineStepError',
]
