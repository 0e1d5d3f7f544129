"""Preview Renderer Module

Writes packed slides into a PDF, one page per slide, with every placement
command drawn at its exact canvas position. Used to review packing results
without a presentation application; the page size equals the canvas size.
"""
import logging
import os
from typing import Iterable

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.pdfgen import canvas as pdfcanvas
from reportlab.platypus import Paragraph

from ..exceptions import PreviewRenderingError
from ..layout_engine import coordinate_utils
from ..layout_engine.infographic_overlay import OverlayPlacement
from ..layout_engine.packer import PackedSlide
from ..layout_engine.placement import (
    BackgroundPlacement,
    BoxPlacement,
    MultiRunPlacement,
    RootImagePlacement,
)
from ..measurement import CanvasSize
from .font_manager import FontManager

logger = logging.getLogger(__name__)

_ALIGNMENTS = {
    "left": TA_LEFT,
    "center": TA_CENTER,
    "right": TA_RIGHT,
    "justify": TA_JUSTIFY,
}

LEADING_RATIO = 1.2
PLACEHOLDER_COLOR = colors.HexColor("#D1D5DB")


def _clean(text: str) -> str:
    """Escape text for ReportLab paragraph markup."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _hex(color: str) -> colors.Color:
    try:
        return colors.HexColor("#" + color.lstrip("#"))
    except ValueError:
        return colors.black


class PreviewRenderer:
    """Draws placement commands onto PDF pages.

    Attributes:
        output_path: Where the PDF is written
        canvas_size: Target canvas, in inches
        font_manager: Registered fonts
    """

    def __init__(self, output_path: str, canvas_size: CanvasSize = None, font_manager: FontManager = None):
        """
        Initialize preview renderer.

        Args:
            output_path: Where to save the PDF
            canvas_size: Slide canvas in inches (default 10 x 5.625)
            font_manager: Optional pre-configured font manager
        """
        self.output_path = output_path
        self.canvas_size = canvas_size or CanvasSize()
        self.font_manager = font_manager or FontManager()
        self.styles = getSampleStyleSheet()
        self._canvas = None

    @property
    def page_size(self):
        return (
            coordinate_utils.units_to_points(self.canvas_size.width_units),
            coordinate_utils.units_to_points(self.canvas_size.height_units),
        )

    def _to_points(self, x: float, y: float, w: float, h: float):
        return coordinate_utils.convert_rect_to_points(x, y, w, h, self.canvas_size.height_units)

    def _paragraph_style(self, font_size: float, bold: bool, color: str, align: str, **kwargs) -> ParagraphStyle:
        return ParagraphStyle(
            'Preview',
            parent=self.styles['Normal'],
            fontName=self.font_manager.get_font_name(bold=bold),
            fontSize=font_size,
            leading=font_size * LEADING_RATIO,
            textColor=_hex(color),
            alignment=_ALIGNMENTS.get(align, TA_LEFT),
            **kwargs,
        )

    def render(self, slides: Iterable[PackedSlide]) -> str:
        """
        Render packed slides, one page each.

        Args:
            slides: Packed slides in deck order

        Returns:
            Path to the written PDF

        Raises:
            PreviewRenderingError: If the PDF cannot be written
        """
        self._canvas = pdfcanvas.Canvas(self.output_path, pagesize=self.page_size)
        page_count = 0
        for slide in slides:
            self._canvas.setPageSize(self.page_size)
            for command in slide.commands:
                self._draw_command(command)
            self._canvas.showPage()
            page_count += 1

        return self._save(page_count)

    def _save(self, page_count: int) -> str:
        try:
            self._canvas.save()
        except OSError as e:
            raise PreviewRenderingError(self.output_path, str(e))
        finally:
            self._canvas = None

        logger.info("Preview written to %s (%d page(s))", self.output_path, page_count)
        return self.output_path

    def _draw_command(self, command):
        if isinstance(command, BackgroundPlacement):
            self._draw_background(command)
        elif isinstance(command, RootImagePlacement):
            self._draw_root_image(command)
        elif isinstance(command, MultiRunPlacement):
            self._draw_text_block(command)
        elif isinstance(command, BoxPlacement):
            self._draw_box(command)
        elif isinstance(command, OverlayPlacement):
            self._draw_overlay(command)
        else:
            logger.warning("Skipping unknown placement command %r", command)

    def _draw_background(self, command: BackgroundPlacement):
        width, height = self.page_size
        self._canvas.setFillColor(_hex(command.color))
        self._canvas.rect(0, 0, width, height, stroke=0, fill=1)

    def _draw_placeholder(self, x: float, y: float, w: float, h: float, label: str = ""):
        px, py, pw, ph = self._to_points(x, y, w, h)
        self._canvas.setStrokeColor(PLACEHOLDER_COLOR)
        self._canvas.setDash(4, 2)
        self._canvas.rect(px, py, pw, ph, stroke=1, fill=0)
        self._canvas.setDash()
        if label:
            self._canvas.setFillColor(colors.grey)
            self._canvas.setFont(self.font_manager.get_font_name(), 7)
            self._canvas.drawString(px + 2, py + 2, label[:60])

    def _draw_root_image(self, command: RootImagePlacement):
        """Draw a local image file; remote or missing images get a placeholder."""
        px, py, pw, ph = self._to_points(command.x, command.y, command.w, command.h)
        if os.path.exists(command.url):
            try:
                self._canvas.drawImage(
                    command.url, px, py, pw, ph,
                    preserveAspectRatio=command.sizing != "cover",
                    mask='auto',
                )
                return
            except Exception as e:
                logger.warning("Failed to add root image %s: %s", command.url, e)
        self._draw_placeholder(command.x, command.y, command.w, command.h, command.url)

    def _draw_box(self, command: BoxPlacement):
        if command.style is None:
            self._draw_placeholder(command.x, command.y, command.w, command.h, command.element_type)
            return

        style = command.style
        paragraph_style = self._paragraph_style(style.font_size, style.bold, style.color, style.align)
        self._draw_text(command.text, command.x, command.y, command.w, command.h, paragraph_style, style.valign)

    def _draw_overlay(self, overlay: OverlayPlacement):
        """Scale a container-fraction overlay box to the canvas and draw its text."""
        width_units, height_units = self.canvas_size.width_units, self.canvas_size.height_units
        self._draw_text(
            overlay.text,
            overlay.x * width_units,
            overlay.y * height_units,
            overlay.w * width_units,
            overlay.h * height_units,
            self._paragraph_style(overlay.font_size, False, overlay.color, overlay.align),
            valign=overlay.valign,
        )

    def _draw_text(self, text: str, x: float, y: float, w: float, h: float, style: ParagraphStyle, valign: str = "top"):
        """Draw one paragraph inside a canvas-unit box, top- or middle-aligned."""
        px, py, pw, ph = self._to_points(x, y, w, h)
        para = Paragraph(_clean(text), style)
        _, para_height = para.wrap(pw, ph)

        top = py + ph
        if valign == "middle":
            top = py + ph - max(0, (ph - para_height) / 2)
        para.drawOn(self._canvas, px, top - para_height)

    def _draw_text_block(self, command: MultiRunPlacement):
        """Stack the block's runs from the top of the box; overflow runs past the bottom."""
        px, py, pw, ph = self._to_points(command.x, command.y, command.w, command.h)
        top = py + ph

        for run in command.runs:
            indent = {"leftIndent": run.font_size, "bulletIndent": 0} if run.is_bullet_item else {}
            style = self._paragraph_style(run.font_size, run.bold, run.color, command.align, **indent)
            para = Paragraph(_clean(run.text), style, bulletText="•" if run.is_bullet_item else None)
            _, para_height = para.wrap(pw, ph)
            para.drawOn(self._canvas, px, top - para_height)
            top -= para_height + run.para_space_after


def render_preview_pdf(output_path: str, slides: Iterable[PackedSlide], canvas_size: CanvasSize = None) -> str:
    """
    Render packed slides to a PDF preview.

    Args:
        output_path: Path for the PDF
        slides: Packed slides in deck order
        canvas_size: Slide canvas in inches

    Returns:
        Path to the written PDF
    """
    renderer = PreviewRenderer(output_path, canvas_size=canvas_size)
    return renderer.render(slides)
