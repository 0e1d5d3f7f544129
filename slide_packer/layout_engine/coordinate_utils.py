"""Coordinate Conversion Utilities

This module provides pure utility functions for converting between the
coordinate systems involved in packing a slide:

- Source coordinates: Pixels on the render surface, origin at top-left
- Canvas coordinates: Physical units (inches) on the target slide, origin at top-left
- ReportLab coordinates: Points with origin at bottom-left (preview only)

Horizontal and vertical axes are scaled independently, because the render
surface and the canvas need not share an aspect ratio.

All functions are pure (no side effects) and can be tested in isolation.
"""

from typing import Tuple

from reportlab.lib.units import inch

from ..measurement import CanvasSize, SourceSize


def px_to_units_x(px: float, canvas: CanvasSize, source: SourceSize) -> float:
    """
    Convert a horizontal pixel measurement to canvas units.

    Examples:
        >>> px_to_units_x(1920, CanvasSize(10, 5.625), SourceSize(1920, 1080))
        10.0
    """
    return (px / source.width_px) * canvas.width_units


def px_to_units_y(px: float, canvas: CanvasSize, source: SourceSize) -> float:
    """
    Convert a vertical pixel measurement to canvas units.

    Examples:
        >>> px_to_units_y(540, CanvasSize(10, 5.625), SourceSize(1920, 1080))
        2.8125
    """
    return (px / source.height_px) * canvas.height_units


def units_to_px_x(units: float, canvas: CanvasSize, source: SourceSize) -> float:
    """Inverse of px_to_units_x."""
    return (units / canvas.width_units) * source.width_px


def units_to_px_y(units: float, canvas: CanvasSize, source: SourceSize) -> float:
    """Inverse of px_to_units_y."""
    return (units / canvas.height_units) * source.height_px


def convert_rect_to_units(
    rect: Tuple[float, float, float, float],
    canvas: CanvasSize,
    source: SourceSize,
) -> Tuple[float, float, float, float]:
    """
    Convert a pixel rectangle to canvas units.

    Args:
        rect: (x, y, width, height) in source pixels
        canvas: Target canvas size
        source: Source render size

    Returns:
        Tuple of (x, y, width, height) in canvas units

    Examples:
        >>> convert_rect_to_units((0, 0, 960, 540), CanvasSize(10, 5.625), SourceSize(1920, 1080))
        (0.0, 0.0, 5.0, 2.8125)
    """
    x, y, w, h = rect
    return (
        px_to_units_x(x, canvas, source),
        px_to_units_y(y, canvas, source),
        px_to_units_x(w, canvas, source),
        px_to_units_y(h, canvas, source),
    )


def convert_rect_to_px(
    rect: Tuple[float, float, float, float],
    canvas: CanvasSize,
    source: SourceSize,
) -> Tuple[float, float, float, float]:
    """
    Convert a canvas-unit rectangle back to source pixels.

    This is the inverse of convert_rect_to_units:
    convert_rect_to_px(convert_rect_to_units(r, c, s), c, s) == r
    within floating-point tolerance.
    """
    x, y, w, h = rect
    return (
        units_to_px_x(x, canvas, source),
        units_to_px_y(y, canvas, source),
        units_to_px_x(w, canvas, source),
        units_to_px_y(h, canvas, source),
    )


def units_to_points(units: float) -> float:
    """
    Convert canvas units (inches) to points.

    Examples:
        >>> units_to_points(1)
        72.0
    """
    return units * inch


def flip_y_coordinate(y: float, page_height: float) -> float:
    """
    Flip Y coordinate between top-left and bottom-left origin systems.

    Args:
        y: Y coordinate in source system
        page_height: Height of the page (in same units as y)

    Returns:
        Y coordinate in flipped system

    Notes:
        This function is its own inverse:
        flip_y_coordinate(flip_y_coordinate(y, h), h) == y
    """
    return page_height - y


def convert_rect_to_points(
    x: float,
    y: float,
    w: float,
    h: float,
    page_height_units: float,
) -> Tuple[float, float, float, float]:
    """
    Convert a canvas rectangle (inches, top-left origin) to ReportLab coordinates.

    Args:
        x, y, w, h: Rectangle in canvas units, (x, y) is the top-left corner
        page_height_units: Canvas height in units

    Returns:
        Tuple of (x, y, width, height) in points where (x, y) is the bottom-left corner
    """
    page_height_pt = units_to_points(page_height_units)
    bottom_pt = units_to_points(y + h)
    return (
        units_to_points(x),
        flip_y_coordinate(bottom_pt, page_height_pt),
        units_to_points(w),
        units_to_points(h),
    )
