"""Slide Decorations

Background fill and root image placement, emitted ahead of the packed content
so that content draws on top of them.
"""
from typing import Optional

from ..config import (
    ROOT_IMAGE_RIGHT_OFFSET,
    ROOT_IMAGE_SPLIT_WIDTH,
    ROOT_IMAGE_VERTICAL_HEIGHT,
)
from ..measurement import CanvasSize, ThemeColors
from .placement import BackgroundPlacement, RootImagePlacement


def background_command(bg_color: Optional[str], theme: ThemeColors) -> BackgroundPlacement:
    """Use the slide's own background color if set, else the theme background."""
    if bg_color and bg_color.strip():
        return BackgroundPlacement(color=bg_color.strip().lstrip("#"))
    return BackgroundPlacement(color=theme.background)


def root_image_command(
    url: Optional[str],
    layout_type: Optional[str],
    canvas: CanvasSize,
) -> Optional[RootImagePlacement]:
    """
    Position a slide's root image according to its layout type.

    Layout types:
    - left: left 45% of the slide, full height
    - right: right 45% of the slide, full height
    - vertical: full width, top 40% of the slide
    - background: full slide with cover sizing
    - anything else: full slide

    Args:
        url: Image location; no command is produced without one
        layout_type: Slide layout type; no command is produced without one
        canvas: Target canvas size

    Returns:
        RootImagePlacement or None
    """
    if not url or not layout_type:
        return None

    width, height = canvas.width_units, canvas.height_units

    if layout_type == "left":
        return RootImagePlacement(url=url, x=0, y=0, w=width * ROOT_IMAGE_SPLIT_WIDTH, h=height)
    if layout_type == "right":
        return RootImagePlacement(
            url=url,
            x=width * ROOT_IMAGE_RIGHT_OFFSET,
            y=0,
            w=width * ROOT_IMAGE_SPLIT_WIDTH,
            h=height,
        )
    if layout_type == "vertical":
        return RootImagePlacement(url=url, x=0, y=0, w=width, h=height * ROOT_IMAGE_VERTICAL_HEIGHT)
    if layout_type == "background":
        return RootImagePlacement(url=url, x=0, y=0, w=width, h=height, sizing="cover")

    return RootImagePlacement(url=url, x=0, y=0, w=width, h=height)
