"""Deck Packing Pipeline

Main orchestration logic for packing a whole deck: load measurements, pack every
slide, write the placement JSON and the preview PDF.
"""
import logging
import os
import tempfile
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, List, Optional, Union

from .config import MAX_FILE_SIZE_MB, PROGRESS_STEPS
from .exceptions import PipelineStepError, SlidePackerError
from .layout_engine.packer import PackedSlide, SlidePacker
from .measurement import DeckInput
from .packing_options import PackingOptions
from .packing_result import PackingResult
from .preview import render_preview_pdf
from .utils import (
    check_file_size_limit,
    clean_filename,
    format_file_size,
    load_deck,
    validate_json_path,
    write_placements_json,
)

logger = logging.getLogger(__name__)


def pack_deck(deck: DeckInput, options: PackingOptions = None, max_workers: int = None) -> List[PackedSlide]:
    """
    Pack every slide of a deck, preserving slide order.

    Slides are independent, so with max_workers > 1 they are packed in a thread
    pool; the result order always matches the input order.

    Args:
        deck: Parsed deck
        options: Packing options (defaults used when omitted)
        max_workers: Thread count; defaults to options.max_workers

    Returns:
        Packed slides in deck order
    """
    options = options or PackingOptions()
    packer = SlidePacker(options=options, theme=deck.theme)
    workers = max_workers or options.max_workers

    jobs = list(enumerate(deck.slides))
    if workers <= 1 or len(jobs) <= 1:
        return [packer.pack_slide(slide, index) for index, slide in jobs]

    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda job: packer.pack_slide(job[1], job[0]), jobs))


class DeckPackingPipeline:
    """Deck packing pipeline orchestrator.

    This class orchestrates the complete packing workflow:
    1. Validation - file exists, has .json extension, and is within size limit
    2. Loading - parse the measuring host's deck document
    3. Packing - pack each slide into placement commands
    4. Output - write placement JSON and the preview PDF

    Attributes:
        options: Packing options
        progress_callback: Optional callback for progress updates (progress, desc)
    """

    def __init__(
        self,
        options: PackingOptions = None,
        progress_callback: Optional[Callable[[float, str], None]] = None,
        render_preview: bool = True,
    ):
        """Initialize pipeline with packing options and optional progress callback.

        Args:
            options: Packing options (defaults used when omitted)
            progress_callback: Optional function(progress: float, desc: str) for progress updates
            render_preview: If False, skip the preview PDF
        """
        self.options = options or PackingOptions()
        self.progress = progress_callback or (lambda p, d: None)
        self.render_preview = render_preview

    def process(self, source: Union[str, DeckInput], output_dir: str = None) -> PackingResult:
        """Execute complete packing pipeline.

        Args:
            source: Path to a measurement JSON file, or an already parsed deck
            output_dir: Where outputs are written (system temp dir by default)

        Returns:
            PackingResult with outputs and status

        Raises:
            Does not raise - all errors are captured in PackingResult.error
        """
        try:
            # Step 1: Validation and loading
            if isinstance(source, DeckInput):
                deck = source
                base_name = clean_filename(deck.title or "deck")
            else:
                self.progress(PROGRESS_STEPS["VALIDATE"], "Validating measurement file...")
                self._validate_file(source)
                logger.info("Packing %s (%s)", source, format_file_size(os.path.getsize(source)))

                self.progress(PROGRESS_STEPS["LOAD"], "Loading measurements...")
                deck = self._run_step("load", lambda: load_deck(source))
                base_name = clean_filename(source)

            if not deck.slides:
                return PackingResult(
                    status="failed",
                    status_message="Packing failed: deck has no slides",
                    error="deck has no slides",
                )

            # Step 2: Packing
            self.progress(PROGRESS_STEPS["PACK"], f"Packing {len(deck.slides)} slide(s)...")
            slides = self._run_step("pack", lambda: pack_deck(deck, self.options))

            # Step 3: Outputs
            output_dir = output_dir or tempfile.gettempdir()
            os.makedirs(output_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

            json_path = os.path.join(output_dir, f"{base_name}_placements_{timestamp}.json")
            self._run_step("export", lambda: write_placements_json(json_path, slides, deck.title))

            pdf_path = None
            if self.render_preview:
                self.progress(PROGRESS_STEPS["PREVIEW"], "Rendering preview PDF...")
                pdf_path = os.path.join(output_dir, f"{base_name}_preview_{timestamp}.pdf")
                self._run_step("preview", lambda: render_preview_pdf(pdf_path, slides, self.options.canvas))

            self.progress(PROGRESS_STEPS["COMPLETE"], "Complete!")

            placement_count = sum(len(s.placements) for s in slides)
            message = f"✅ Packed {len(slides)} slide(s) into {placement_count} placement(s)"
            overlay_count = sum(len(s.overlays) for s in slides)
            if overlay_count:
                message += f" and {overlay_count} overlay text box(es)"
            unresolved = sum(s.unresolved_count for s in slides)
            if unresolved:
                message += f" ({unresolved} with residual overlap)"

            return PackingResult(
                status="completed",
                status_message=message,
                slides=slides,
                preview_pdf_path=pdf_path,
                placements_json_path=json_path,
            )

        except SlidePackerError as e:
            logger.error("Deck packing failed: %s", e)
            return PackingResult(
                status="failed",
                status_message=f"Packing failed: {str(e)}",
                error=str(e),
            )

    def _validate_file(self, json_path: str) -> float:
        """Validate measurement file exists, has correct extension, and is within size limit.

        Raises:
            InvalidFileError: If file doesn't exist or has wrong extension
            FileSizeLimitExceededError: If file exceeds size limit
        """
        validate_json_path(json_path)
        return check_file_size_limit(json_path, max_mb=MAX_FILE_SIZE_MB)

    def _run_step(self, step_name: str, step: Callable):
        """Run one pipeline step, wrapping unexpected failures in PipelineStepError."""
        try:
            return step()
        except SlidePackerError:
            raise
        except Exception as e:
            raise PipelineStepError(step_name, e) from e
