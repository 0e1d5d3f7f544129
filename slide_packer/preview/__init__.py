"""Preview Package

Draws placement commands into a PDF for review:
- PreviewRenderer: Page-per-slide canvas renderer
- FontManager: Font registration and fallback chain
- render_preview_pdf: One-call helper
"""

from .font_manager import FontManager
from .preview_renderer import PreviewRenderer, render_preview_pdf

__all__ = [
    'FontManager',
    'PreviewRenderer',
    'render_preview_pdf',
]
