"""Slide Packer - Main Application

Gradio application for packing measured slide layouts into placement commands.
"""
import sys
import os

# Add current directory to path for imports (for HuggingFace Spaces)
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import gradio as gr
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from slide_packer.config import (
    COLUMN_PROXIMITY_PX,
    DEFAULT_THEME_COLORS,
    HEIGHT_SAFETY_MULTIPLIER,
    MAX_FILE_SIZE_MB,
    MAX_PUSH_ATTEMPTS,
    ROW_TOLERANCE_PX,
    WIDTH_DELTA_PX,
)
from slide_packer.exceptions import InvalidConfigurationError, ValidationError
from slide_packer.logging_config import get_logger, setup_logging
from slide_packer.measurement import DeckInput, ThemeColors
from slide_packer.packing_options import PackingOptions
from slide_packer.pipeline import DeckPackingPipeline
from slide_packer.utils import load_deck

setup_logging()
logger = get_logger(__name__)


def pack_file(
    json_file,
    column_proximity_px: float,
    width_delta_px: float,
    row_tolerance_px: float,
    height_safety_multiplier: float,
    max_push_attempts: int,
    accent_color: str,
    render_preview: bool,
    progress=gr.Progress()
) -> tuple:
    """
    Pack an uploaded measurement file.

    Args:
        json_file: Uploaded measurement/deck JSON file path
        column_proximity_px: Column bucketing threshold in pixels
        width_delta_px: Width change that splits a paragraph group
        row_tolerance_px: Vertical tolerance for same-row ordering
        height_safety_multiplier: Height estimate applied to text blocks
        max_push_attempts: Collision resolution pass limit
        accent_color: Heading color override (hex, empty to keep the deck theme)
        render_preview: If True, write a preview PDF
        progress: Gradio progress tracker

    Returns:
        Tuple of (placements table, preview PDF path, placements JSON path, status)
    """
    if json_file is None:
        raise gr.Error("Please upload a measurement JSON file")

    try:
        options = PackingOptions.from_env(
            column_proximity_px=column_proximity_px,
            width_delta_px=width_delta_px,
            row_tolerance_px=row_tolerance_px,
            height_safety_multiplier=height_safety_multiplier,
            max_push_attempts=int(max_push_attempts),
        )
        deck = load_deck(json_file)
    except (InvalidConfigurationError, ValidationError) as e:
        raise gr.Error(str(e))

    if accent_color and accent_color.strip():
        theme = ThemeColors.from_dict({**deck.theme.to_dict(), "accent": accent_color})
        deck = DeckInput(slides=deck.slides, theme=theme, title=deck.title or os.path.basename(json_file))
    elif not deck.title:
        deck = DeckInput(slides=deck.slides, theme=deck.theme, title=os.path.basename(json_file))

    pipeline = DeckPackingPipeline(
        options=options,
        progress_callback=lambda p, d: progress(p, desc=d),
        render_preview=render_preview,
    )
    result = pipeline.process(deck)

    if result.is_failed:
        logger.error("Packing failed for %s: %s", json_file, result.error)
        raise gr.Error(result.status_message)

    logger.info(result.status_message)
    return result.to_gradio_outputs()


# Create Gradio interface
with gr.Blocks(title="Slide Packer") as app:
    gr.Markdown("# 🧩 Slide Packer")

    gr.Markdown("""
    Rebuilds slide layouts from rendered element measurements and packs them onto a 10 × 5.625 in canvas.
    """)

    with gr.Row():
        with gr.Column():
            gr.Markdown("## Setup")
            gr.Markdown("### Grouping")

            column_proximity_px = gr.Slider(
                minimum=10,
                maximum=200,
                value=COLUMN_PROXIMITY_PX,
                step=5,
                label="Column proximity (px)",
                info="Elements whose left edges are closer than this share a column"
            )

            width_delta_px = gr.Slider(
                minimum=20,
                maximum=400,
                value=WIDTH_DELTA_PX,
                step=10,
                label="Width split (px)",
                info="A width change of at least this much starts a new paragraph"
            )

            row_tolerance_px = gr.Slider(
                minimum=0,
                maximum=50,
                value=ROW_TOLERANCE_PX,
                step=1,
                label="Row tolerance (px)",
                info="Groups whose tops differ by less than this are ordered left to right"
            )

            gr.Markdown("---")
            gr.Markdown("### Collision Resolution")

            height_safety_multiplier = gr.Slider(
                minimum=1.0,
                maximum=3.0,
                value=HEIGHT_SAFETY_MULTIPLIER,
                step=0.1,
                label="Height safety multiplier",
                info="Text rendered in the target document is estimated this much taller"
            )

            max_push_attempts = gr.Slider(
                minimum=0,
                maximum=50,
                value=MAX_PUSH_ATTEMPTS,
                step=1,
                label="Max push attempts"
            )

            gr.Markdown("---")
            gr.Markdown("### ⚙️ Additional Settings")

            accent_color = gr.Textbox(
                label="Heading accent color",
                placeholder=DEFAULT_THEME_COLORS["accent"],
                info="Hex color; leave empty to use the deck theme"
            )

            render_preview = gr.Checkbox(
                label="Render preview PDF",
                value=True
            )

        with gr.Column():
            gr.Markdown("## Workflow")
            gr.Markdown(f"**Tips:** Maximum file size: {MAX_FILE_SIZE_MB} MB")

            json_input = gr.File(
                label="Upload Measurement JSON",
                file_types=[".json"],
                type="filepath"
            )

            pack_btn = gr.Button(
                "🧩 Pack the deck",
                variant="primary",
                size="lg"
            )

            main_status = gr.Textbox(
                label="Status",
                interactive=False
            )

            placements_table = gr.DataFrame(
                label="Placements",
                wrap=True,
                interactive=False
            )

            preview_file = gr.File(
                label="📥 Download Preview PDF",
                type="filepath"
            )

            json_output = gr.File(
                label="📥 Download Placements JSON",
                type="filepath"
            )

    pack_btn.click(
        fn=pack_file,
        inputs=[json_input, column_proximity_px, width_delta_px, row_tolerance_px,
                height_safety_multiplier, max_push_attempts, accent_color, render_preview],
        outputs=[
            placements_table,  # One row per placement
            preview_file,      # Preview PDF
            json_output,       # Placement commands
            main_status,       # Status message
        ]
    )


if __name__ == "__main__":
    app.launch(ssr_mode=False)
