"""Packing Options Dataclass

Tunable heuristics for the slide packer.
"""
import os
from dataclasses import dataclass, field, fields
from typing import Dict, Mapping, Optional

from .config import (
    COLUMN_PROXIMITY_PX,
    DEFAULT_MAX_WORKERS,
    ENV_PREFIX,
    FONT_SCALE,
    HEIGHT_SAFETY_MULTIPLIER,
    MAX_PUSH_ATTEMPTS,
    MIN_GROUP_HEIGHT_PX,
    PARAGRAPH_SPACING_PT,
    DEFAULT_FONT_SIZE_PX,
    PUSH_GAP_UNITS,
    ROW_TOLERANCE_PX,
    WIDTH_DELTA_PX,
)
from .exceptions import InvalidConfigurationError
from .measurement import CanvasSize, SourceSize


@dataclass
class PackingOptions:
    """Configuration options for the slide packer.

    The thresholds were calibrated for one render-surface / target-renderer pair
    and can be retuned per target without touching the algorithms.

    Attributes:
        # Coordinate Spaces
        canvas: Target canvas size in inches
        source: Source render surface in pixels

        # Grouping
        column_proximity_px: Left edges closer than this fall in the same column
        width_delta_px: Width change at or above this starts a new text block
        min_group_height_px: Floor for a group's spanned pixel height
        row_tolerance_px: Groups starting closer than this are ordered left-to-right

        # Collision Resolution
        height_safety_multiplier: Scale applied to the converted height to estimate occupied space
        max_push_attempts: Bound on push-down iterations per group
        push_gap_units: Padding left below a colliding rectangle (canvas units)

        # Styling
        font_scale: Pixel font size -> point size factor
        default_font_size_px: Used when a font size string cannot be parsed
        paragraph_spacing_pt: Space after each paragraph in multi-run blocks

        # Deck Packing
        max_workers: Thread pool size for packing independent slides
    """

    # Coordinate Spaces
    canvas: CanvasSize = field(default_factory=CanvasSize)
    source: SourceSize = field(default_factory=SourceSize)

    # Grouping
    column_proximity_px: float = COLUMN_PROXIMITY_PX
    width_delta_px: float = WIDTH_DELTA_PX
    min_group_height_px: float = MIN_GROUP_HEIGHT_PX
    row_tolerance_px: float = ROW_TOLERANCE_PX

    # Collision Resolution
    height_safety_multiplier: float = HEIGHT_SAFETY_MULTIPLIER
    max_push_attempts: int = MAX_PUSH_ATTEMPTS
    push_gap_units: float = PUSH_GAP_UNITS

    # Styling
    font_scale: float = FONT_SCALE
    default_font_size_px: int = DEFAULT_FONT_SIZE_PX
    paragraph_spacing_pt: float = PARAGRAPH_SPACING_PT

    # Deck Packing
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self):
        """Validate configuration options after initialization."""
        if self.canvas.width_units <= 0 or self.canvas.height_units <= 0:
            raise InvalidConfigurationError(
                f"canvas must have positive size, got {self.canvas.width_units}x{self.canvas.height_units}"
            )
        if self.source.width_px <= 0 or self.source.height_px <= 0:
            raise InvalidConfigurationError(
                f"source must have positive size, got {self.source.width_px}x{self.source.height_px}"
            )

        for name in ("column_proximity_px", "width_delta_px", "row_tolerance_px", "min_group_height_px", "push_gap_units"):
            if getattr(self, name) < 0:
                raise InvalidConfigurationError(f"{name} must be >= 0, got {getattr(self, name)}")

        if self.height_safety_multiplier < 1.0:
            raise InvalidConfigurationError(
                f"height_safety_multiplier must be >= 1.0, got {self.height_safety_multiplier}"
            )
        if self.max_push_attempts < 0:
            raise InvalidConfigurationError(
                f"max_push_attempts must be >= 0, got {self.max_push_attempts}"
            )
        if self.font_scale <= 0:
            raise InvalidConfigurationError(f"font_scale must be > 0, got {self.font_scale}")
        if self.default_font_size_px <= 0:
            raise InvalidConfigurationError(
                f"default_font_size_px must be > 0, got {self.default_font_size_px}"
            )
        if self.max_workers < 1:
            raise InvalidConfigurationError(f"max_workers must be >= 1, got {self.max_workers}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "PackingOptions":
        """
        Build options from SLIDE_PACKER_* environment variables.

        Each scalar field maps to the upper-cased field name, e.g.
        SLIDE_PACKER_WIDTH_DELTA_PX=120. Keyword overrides win over the environment.

        Args:
            environ: Mapping to read instead of os.environ
            **overrides: Explicit field values

        Returns:
            PackingOptions

        Raises:
            InvalidConfigurationError: If a variable cannot be converted
        """
        environ = os.environ if environ is None else environ
        values: Dict[str, object] = {}

        for f in fields(cls):
            if f.name in ("canvas", "source"):
                continue
            raw = environ.get(f"{ENV_PREFIX}{f.name.upper()}")
            if raw is None or raw == "":
                continue
            caster = int if f.name in ("max_push_attempts", "default_font_size_px", "max_workers") else float
            try:
                values[f.name] = caster(raw)
            except ValueError:
                raise InvalidConfigurationError(
                    f"{ENV_PREFIX}{f.name.upper()} must be a number, got {raw!r}"
                )

        values.update(overrides)
        return cls(**values)
