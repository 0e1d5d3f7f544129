"""Style & Unit Mapper

Converts computed style strings reported by the render surface into target
style attributes. Every parser recovers locally: a value that cannot be parsed
yields a documented default and is never propagated as an error.

- Font size: leading integer of "32px" scaled by font_scale (default 24px)
- Weight: "bold" or numeric weight >= 600
- Color: "rgb(r, g, b)" -> "rrggbb", falling back to the theme text color
- Alignment: CSS text-align mapped onto left/center/right/justify
"""
import math
import re
from typing import Optional

from ..config import DEFAULT_FONT_SIZE_PX, FONT_SCALE
from ..measurement import ElementMeasurement, ThemeColors
from ..packing_options import PackingOptions
from .placement import TextRun, TextStyle

_LEADING_INT = re.compile(r"(\d+)")
_RGB = re.compile(r"rgb\((\d+),\s*(\d+),\s*(\d+)\)")
_HEX = re.compile(r"^#?([0-9a-fA-F]{6})$")
_ANY_INTS = re.compile(r"\d+")

_ALIGNMENTS = {
    "left": "left",
    "start": "left",
    "center": "center",
    "right": "right",
    "end": "right",
    "justify": "justify",
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def parse_font_size_px(value: str, default: int = DEFAULT_FONT_SIZE_PX) -> int:
    """
    Parse the first integer out of a CSS font size.

    Examples:
        >>> parse_font_size_px("32px")
        32
        >>> parse_font_size_px("inherit")
        24
    """
    match = _LEADING_INT.search(value or "")
    if not match:
        return default
    size = int(match.group(1))
    return size if size > 0 else default


def font_size_to_pt(size_px: float, font_scale: float = FONT_SCALE) -> int:
    """
    Approximate a target point size from a pixel font size.

    Examples:
        >>> font_size_to_pt(64)
        35
    """
    return round_half_up(size_px * font_scale)


def is_bold(font_weight: str) -> bool:
    """
    True for "bold" or a numeric weight of 600 or more.

    Examples:
        >>> is_bold("700")
        True
        >>> is_bold("normal")
        False
    """
    weight = (font_weight or "").strip()
    if weight == "bold":
        return True
    match = re.match(r"\d+", weight)
    return bool(match) and int(match.group(0)) >= 600


def parse_rgb_color(value: str) -> Optional[str]:
    """
    Convert "rgb(r, g, b)" or "#rrggbb" into a two-hex-digit-per-channel string.

    Returns:
        Lower-case "rrggbb", or None if the value cannot be parsed

    Examples:
        >>> parse_rgb_color("rgb(12, 34, 56)")
        '0c2238'
        >>> parse_rgb_color("transparent") is None
        True
    """
    value = (value or "").strip()
    match = _RGB.search(value)
    if match:
        return "".join(f"{min(int(channel), 255):02x}" for channel in match.groups())
    match = _HEX.match(value)
    if match:
        return match.group(1).lower()
    return None


def rgb_to_hex(color: str, default: str = "#000000") -> str:
    """
    Normalize any rgb()/rgba()/hex color string to "#rrggbb".

    Looser than parse_rgb_color: the first three integers found are used as
    channels, so "rgba(1, 2, 3, 0.5)" works too.
    """
    if not color:
        return default
    color = color.strip()
    if color.startswith("#"):
        return color
    channels = _ANY_INTS.findall(color)
    if len(channels) < 3:
        return default
    return "#" + "".join(f"{min(int(c), 255):02x}" for c in channels[:3])


def map_alignment(text_align: str) -> str:
    """Map a CSS text-align value to a target alignment, defaulting to left."""
    return _ALIGNMENTS.get((text_align or "").strip().lower(), "left")


def resolve_color(measurement: ElementMeasurement, theme: ThemeColors) -> str:
    """
    Pick the text color for an element.

    Headings always take the theme accent color. Other elements use their
    measured rgb color, or the theme text color when it cannot be parsed.
    """
    if measurement.is_heading:
        return theme.accent
    return parse_rgb_color(measurement.styles.color) or theme.text


def element_font_size(measurement: ElementMeasurement, options: PackingOptions) -> int:
    """Target point size for an element."""
    size_px = parse_font_size_px(measurement.styles.font_size, options.default_font_size_px)
    return font_size_to_pt(size_px, options.font_scale)


def style_for_element(
    measurement: ElementMeasurement,
    theme: ThemeColors,
    options: PackingOptions,
) -> TextStyle:
    """
    Build the style of a single-element text box.

    Headings render bold and vertically centered; everything else renders
    top-aligned with wrapping enabled.
    """
    font_size = element_font_size(measurement, options)
    align = map_alignment(measurement.styles.text_align)
    color = resolve_color(measurement, theme)

    if measurement.is_heading:
        return TextStyle(font_size=font_size, bold=True, color=color, align=align, valign="middle", wrap=True)

    return TextStyle(
        font_size=font_size,
        bold=is_bold(measurement.styles.font_weight),
        color=color,
        align=align,
        valign="top",
        wrap=True,
    )


def run_for_element(
    measurement: ElementMeasurement,
    theme: ThemeColors,
    options: PackingOptions,
) -> TextRun:
    """Build one paragraph run of a multi-run text block."""
    return TextRun(
        text=measurement.text,
        font_size=element_font_size(measurement, options),
        bold=measurement.is_heading or is_bold(measurement.styles.font_weight),
        color=resolve_color(measurement, theme),
        is_bullet_item=measurement.is_bullet_item,
        para_space_after=options.paragraph_spacing_pt,
    )
