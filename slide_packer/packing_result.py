"""Packing Result Dataclass

Result outputs from the deck packing pipeline.
"""
from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from .layout_engine.infographic_overlay import OverlayPlacement
from .layout_engine.packer import PackedSlide

PLACEMENT_COLUMNS = ["Slide", "Order", "Kind", "Type", "X", "Y", "W", "H", "Font Size", "Bold", "Color", "Text"]


@dataclass
class PackingResult:
    """Result from the deck packing pipeline.

    Attributes:
        status: Processing status ("completed", "failed")
        status_message: Human-readable status message

        # Output
        slides: Packed slides in deck order
        preview_pdf_path: Path to the preview PDF (None if not rendered)
        placements_json_path: Path to the placement JSON export (None if not written)

        # Error Handling
        error: Error message if packing failed (None otherwise)
    """

    # Status
    status: str  # "completed", "failed"
    status_message: str

    # Output
    slides: List[PackedSlide] = field(default_factory=list)
    preview_pdf_path: Optional[str] = None
    placements_json_path: Optional[str] = None

    # Error Handling
    error: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """True if packing completed successfully."""
        return self.status == "completed"

    @property
    def is_failed(self) -> bool:
        """True if packing failed with an error."""
        return self.status == "failed"

    @property
    def placement_count(self) -> int:
        return sum(len(s.placements) for s in self.slides)

    @property
    def unresolved_count(self) -> int:
        return sum(s.unresolved_count for s in self.slides)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per content placement, in deck and reading order.

        Background and root image commands are not listed. Infographic overlay
        boxes follow the slide's placements with positions as container fractions.
        """
        rows = []
        for slide in self.slides:
            for order, command in enumerate(slide.placements + slide.overlays, start=1):
                style = getattr(command, "style", None)
                runs = getattr(command, "runs", ())
                if style is not None:
                    font_size, bold, color = style.font_size, style.bold, style.color
                elif runs:
                    font_size, bold, color = runs[0].font_size, runs[0].bold, runs[0].color
                elif isinstance(command, OverlayPlacement):
                    font_size, bold, color = command.font_size, False, command.color
                else:
                    font_size, bold, color = None, False, ""

                rows.append([
                    slide.slide_index + 1,
                    order,
                    command.kind,
                    getattr(command, "element_type", "text_block" if runs else ""),
                    round(command.x, 3),
                    round(command.y, 3),
                    round(command.w, 3),
                    round(command.h, 3),
                    font_size,
                    bold,
                    color,
                    command.text,
                ])

        return pd.DataFrame(rows, columns=PLACEMENT_COLUMNS)

    def to_gradio_outputs(self) -> tuple:
        """Convert to Gradio UI outputs format.

        Returns:
            Tuple of (placements_table, preview_pdf, placements_json, status)
        """
        if self.is_failed:
            return (
                pd.DataFrame(columns=PLACEMENT_COLUMNS),
                None,
                None,
                self.status_message,
            )

        return (
            self.to_dataframe(),
            self.preview_pdf_path,
            self.placements_json_path,
            self.status_message,
        )
