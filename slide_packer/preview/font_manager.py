"""Font Manager Module

Handles font registration for preview rendering and the fallback chain from the
slide's font face to whatever the system provides.
"""
import logging
import os

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

logger = logging.getLogger(__name__)

_FONTS_DIR = os.path.join(os.path.dirname(__file__), '..', '..', 'fonts')


class FontManager:
    """Registers a regular and a bold TrueType font with ReportLab.

    Fallback chain: bundled Inter -> system Inter -> DejaVu Sans -> Liberation Sans
    -> Arial -> Helvetica (built in, always available).

    Attributes:
        font_name: Name of the registered regular font (e.g. 'Inter' or 'Helvetica')
        font_name_bold: Name of the registered bold font (e.g. 'Inter-Bold' or 'Helvetica-Bold')
    """

    REGULAR_FONT_PATHS = [
        os.path.join(_FONTS_DIR, 'Inter-Regular.ttf'),
        '/usr/share/fonts/truetype/inter/Inter-Regular.ttf',
        '/usr/share/fonts/opentype/inter/Inter-Regular.ttf',
        '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',
        '/usr/share/fonts/dejavu/DejaVuSans.ttf',
        '/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf',
        '/System/Library/Fonts/Supplemental/Arial.ttf',  # macOS
        'C:\\Windows\\Fonts\\arial.ttf',  # Windows
    ]

    BOLD_FONT_PATHS = [
        os.path.join(_FONTS_DIR, 'Inter-Bold.ttf'),
        '/usr/share/fonts/truetype/inter/Inter-Bold.ttf',
        '/usr/share/fonts/opentype/inter/Inter-Bold.ttf',
        '/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf',
        '/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf',
        '/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf',
        '/System/Library/Fonts/Supplemental/Arial Bold.ttf',
        'C:\\Windows\\Fonts\\arialbd.ttf',
    ]

    def __init__(self):
        """Initialize FontManager and register the first available fonts."""
        self.font_name = 'Helvetica'
        self.font_name_bold = 'Helvetica-Bold'
        self._setup_fonts()

    def _register_first(self, registered_name: str, paths) -> bool:
        for font_path in paths:
            if not os.path.exists(font_path):
                continue
            try:
                pdfmetrics.registerFont(TTFont(registered_name, font_path))
                logger.debug("Registered font %s from %s", registered_name, font_path)
                return True
            except Exception as e:
                logger.debug("Failed to register font %s: %s", font_path, e)
        return False

    def _setup_fonts(self):
        """
        Register the regular and bold preview fonts.

        If no regular TrueType font is found, the built-in Helvetica pair is kept.
        If only the regular font is found, it is also used for bold text.
        """
        if not self._register_first('PreviewSans', self.REGULAR_FONT_PATHS):
            logger.warning("No TrueType font found, using Helvetica for preview rendering")
            return
        self.font_name = 'PreviewSans'

        if self._register_first('PreviewSans-Bold', self.BOLD_FONT_PATHS):
            self.font_name_bold = 'PreviewSans-Bold'
        else:
            logger.warning("Bold font not found, using regular font for bold text")
            self.font_name_bold = self.font_name

    def get_font_name(self, bold: bool = False) -> str:
        """
        Get the registered font name.

        Args:
            bold: If True, return the bold variant; otherwise return regular font

        Returns:
            Font name string suitable for use with ReportLab
        """
        return self.font_name_bold if bold else self.font_name
