"""Measurement Model

Passive value types shared by every packing stage:

- ElementStyles / ElementMeasurement: one measured element from the render surface
- RenderGroup: a run of measurements forming one paragraph or standalone element
- PlacedRect: a resolved footprint in target canvas units
- ThemeColors: caller-supplied palette with per-field defaults
- CanvasSize / SourceSize: the two coordinate spaces being reconciled
- OverlayTextNode: one text node measured inside an infographic container
- SlideInput / DeckInput: parsed host output for one slide or a whole deck

All types are frozen dataclasses; a stage never mutates what it receives.
"""
import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Sequence, Tuple

from .config import (
    BODY_TEXT_TYPES,
    BULLET_ITEM_TYPE,
    DEFAULT_THEME_COLORS,
    HEADING_TYPES,
    MIN_GROUP_HEIGHT_PX,
    RENDER_HEIGHT_PX,
    RENDER_WIDTH_PX,
    SLIDE_HEIGHT_INCHES,
    SLIDE_WIDTH_INCHES,
    STRUCTURAL_TYPES,
    TEXT_TYPES,
)
from .exceptions import MeasurementParsingError


@dataclass(frozen=True)
class ElementStyles:
    """Computed style strings exactly as the render surface reported them."""

    font_size: str = ""
    font_weight: str = ""
    color: str = ""
    text_align: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ElementStyles":
        """Build from the host's camelCase style dict. Missing keys become empty strings."""
        if not isinstance(data, dict):
            data = {}
        return cls(
            font_size=str(data.get("fontSize", data.get("fontSizePx", "")) or ""),
            font_weight=str(data.get("fontWeight", "") or ""),
            color=str(data.get("color", "") or ""),
            text_align=str(data.get("textAlign", "") or ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "fontSize": self.font_size,
            "fontWeight": self.font_weight,
            "color": self.color,
            "textAlign": self.text_align,
        }


@dataclass(frozen=True)
class ElementMeasurement:
    """One measured visual element, pixel geometry relative to the slide's top-left."""

    index: int
    type: str
    x: float
    y: float
    width: float
    height: float
    text: str = ""
    styles: ElementStyles = field(default_factory=ElementStyles)

    def __post_init__(self):
        if not self.width >= 0:
            raise MeasurementParsingError("width", f"must be >= 0, got {self.width}")
        if not self.height >= 0:
            raise MeasurementParsingError("height", f"must be >= 0, got {self.height}")

    @property
    def is_structural(self) -> bool:
        """True for nesting-only elements (columns, bullet lists) that are never placed."""
        return self.type in STRUCTURAL_TYPES

    @property
    def is_text(self) -> bool:
        return self.type in TEXT_TYPES

    @property
    def is_heading(self) -> bool:
        return self.type in HEADING_TYPES

    @property
    def is_body_text(self) -> bool:
        return self.type in BODY_TEXT_TYPES

    @property
    def is_bullet_item(self) -> bool:
        return self.type == BULLET_ITEM_TYPE

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_index: int = 0) -> "ElementMeasurement":
        """
        Parse one record produced by the measuring host.

        Expected shape:
            {"index": 0, "type": "h1", "x": 100, "y": 50, "width": 800, "height": 90,
             "text": "Q1 Report",
             "styles": {"fontSize": "64px", "fontWeight": "700",
                        "color": "rgb(17, 24, 39)", "textAlign": "left"}}

        Args:
            data: Measurement dict
            default_index: Index used when the record carries none

        Returns:
            ElementMeasurement

        Raises:
            MeasurementParsingError: If the record is not a dict, or geometry is
                missing, non-numeric, non-finite or negative
        """
        if not isinstance(data, dict):
            raise MeasurementParsingError("measurement", f"expected an object, got {type(data).__name__}")

        geometry = {}
        for key in ("x", "y", "width", "height"):
            if key not in data:
                raise MeasurementParsingError(key, "missing")
            try:
                geometry[key] = float(data[key])
            except (TypeError, ValueError):
                raise MeasurementParsingError(key, f"not a number: {data[key]!r}")
            if not math.isfinite(geometry[key]):
                raise MeasurementParsingError(key, f"not a finite number: {data[key]!r}")

        try:
            index = int(data.get("index", default_index))
        except (TypeError, ValueError):
            raise MeasurementParsingError("index", f"not an integer: {data.get('index')!r}")

        return cls(
            index=index,
            type=str(data.get("type") or "other"),
            text=str(data.get("text") or ""),
            styles=ElementStyles.from_dict(data.get("styles")),
            **geometry,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "text": self.text,
            "styles": self.styles.to_dict(),
        }


@dataclass(frozen=True)
class RenderGroup:
    """An ordered run of measurements judged to be one visual paragraph or one standalone element.

    Attributes:
        elements: Members in vertical order within their column
        x, y: Top-left of the first member (pixels)
        w: Widest body-text member, or widest member when there is no body text (pixels)
        h_web: Pixel height spanned from the first member's top to the last member's bottom
    """

    elements: Tuple[ElementMeasurement, ...]
    x: float
    y: float
    w: float
    h_web: float

    @classmethod
    def from_elements(
        cls,
        elements: Sequence[ElementMeasurement],
        min_height_px: float = MIN_GROUP_HEIGHT_PX,
    ) -> "RenderGroup":
        """
        Compute the group's bounding box from its ordered members.

        Args:
            elements: Non-empty ordered members
            min_height_px: Floor applied to the spanned height

        Returns:
            RenderGroup

        Raises:
            ValueError: If elements is empty
        """
        if not elements:
            raise ValueError("RenderGroup requires at least one element")

        first = elements[0]
        last = elements[-1]

        body = [m for m in elements if m.is_body_text]
        reference = body or list(elements)
        width = max(m.width for m in reference)

        h_web = (last.y + last.height) - first.y

        return cls(
            elements=tuple(elements),
            x=first.x,
            y=first.y,
            w=width,
            h_web=max(h_web, min_height_px),
        )

    @property
    def first(self) -> ElementMeasurement:
        return self.elements[0]

    @property
    def is_single(self) -> bool:
        return len(self.elements) == 1

    @property
    def is_text(self) -> bool:
        """True when the group is a text block (text and non-text never share a group)."""
        return self.first.is_text


@dataclass(frozen=True)
class PlacedRect:
    """Resolved footprint of one group in target canvas units."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def intersects(self, other: "PlacedRect") -> bool:
        """Strict axis-aligned overlap test. Rectangles sharing an edge do not intersect."""
        x_overlap = self.x < other.x + other.w and self.x + self.w > other.x
        y_overlap = self.y < other.y + other.h and self.y + self.h > other.y
        return x_overlap and y_overlap

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}


@dataclass(frozen=True)
class ThemeColors:
    """Seven named theme colors as hex triplets without a leading '#'."""

    primary: str = DEFAULT_THEME_COLORS["primary"]
    secondary: str = DEFAULT_THEME_COLORS["secondary"]
    accent: str = DEFAULT_THEME_COLORS["accent"]
    background: str = DEFAULT_THEME_COLORS["background"]
    text: str = DEFAULT_THEME_COLORS["text"]
    heading: str = DEFAULT_THEME_COLORS["heading"]
    muted: str = DEFAULT_THEME_COLORS["muted"]

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ThemeColors":
        """
        Build a theme from a partial dict; absent or empty fields keep their defaults.

        Raises:
            MeasurementParsingError: If data is present but not an object
        """
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise MeasurementParsingError("theme", f"expected an object, got {type(data).__name__}")
        values = {}
        for f in fields(cls):
            value = data.get(f.name)
            if value:
                values[f.name] = str(value).strip().lstrip("#")
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class CanvasSize:
    """Target canvas in physical units (inches)."""

    width_units: float = SLIDE_WIDTH_INCHES
    height_units: float = SLIDE_HEIGHT_INCHES


@dataclass(frozen=True)
class SourceSize:
    """Source render surface in pixels."""

    width_px: float = RENDER_WIDTH_PX
    height_px: float = RENDER_HEIGHT_PX


@dataclass(frozen=True)
class OverlayTextNode:
    """A text node measured inside an infographic container.

    Attributes:
        text: Text content
        x, y, w, h: Box as fractions of the container size
        font_size: Computed CSS font size string (e.g. "14px")
        color: Computed color (text fill for SVG text, CSS color for HTML)
        font_family: Computed font family list
        text_anchor: SVG text-anchor attribute ("start", "middle", "end")
        text_align: CSS text-align (used for HTML content inside foreignObject)
        is_foreign: True for HTML content embedded through foreignObject
    """

    text: str
    x: float
    y: float
    w: float
    h: float
    font_size: str = ""
    color: str = ""
    font_family: str = ""
    text_anchor: str = ""
    text_align: str = ""
    is_foreign: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OverlayTextNode":
        """
        Parse a text node record.

        Accepts fractional boxes ("x", "y", "w", "h") or pixel boxes ("left",
        "top", "width", "height") together with "containerWidth" and
        "containerHeight".

        Raises:
            MeasurementParsingError: If the record is not a dict, neither form is
                present, or values are not finite numbers
        """
        if not isinstance(data, dict):
            raise MeasurementParsingError("textNode", f"expected an object, got {type(data).__name__}")

        try:
            if "containerWidth" in data:
                cw = float(data["containerWidth"])
                ch = float(data["containerHeight"])
                if not (cw > 0 and ch > 0):
                    raise MeasurementParsingError("containerWidth", "container must have positive size")
                box = (
                    float(data["left"]) / cw,
                    float(data["top"]) / ch,
                    float(data["width"]) / cw,
                    float(data["height"]) / ch,
                )
            else:
                box = (float(data["x"]), float(data["y"]), float(data["w"]), float(data["h"]))
        except KeyError as e:
            raise MeasurementParsingError(str(e.args[0]), "missing")
        except (TypeError, ValueError) as e:
            raise MeasurementParsingError("box", str(e))

        if not all(math.isfinite(v) for v in box):
            raise MeasurementParsingError("box", f"not finite: {box!r}")

        x, y, w, h = box
        return cls(
            text=str(data.get("text") or ""),
            x=x,
            y=y,
            w=w,
            h=h,
            font_size=str(data.get("fontSize") or ""),
            color=str(data.get("color") or ""),
            font_family=str(data.get("fontFamily") or ""),
            text_anchor=str(data.get("textAnchor") or ""),
            text_align=str(data.get("textAlign") or ""),
            is_foreign=bool(data.get("isForeign", False)),
        )


@dataclass(frozen=True)
class SlideInput:
    """Everything the packer receives for one slide.

    Attributes:
        measurements: Measurements in the order the host reported them
        bg_color: Slide background color, if the slide overrides the theme
        root_image_url: Location of the slide's root image, if any
        layout_type: Root image layout ("left", "right", "vertical", "background")
        overlay_nodes: Infographic text nodes to lift into editable overlay boxes
    """

    measurements: Tuple[ElementMeasurement, ...] = ()
    bg_color: Optional[str] = None
    root_image_url: Optional[str] = None
    layout_type: Optional[str] = None
    overlay_nodes: Tuple[OverlayTextNode, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "SlideInput":
        """
        Parse one slide. A bare list is taken as the slide's measurement list.

        Raises:
            MeasurementParsingError: If the slide or one of its measurements is malformed
        """
        if isinstance(data, list):
            data = {"measurements": data}
        if not isinstance(data, dict):
            raise MeasurementParsingError("slide", f"expected an object or list, got {type(data).__name__}")

        raw = data.get("measurements") or []
        if not isinstance(raw, list):
            raise MeasurementParsingError("measurements", "expected a list")

        text_nodes = data.get("textNodes") or []
        if not isinstance(text_nodes, list):
            raise MeasurementParsingError("textNodes", "expected a list")

        root_image = data.get("rootImage") or {}
        return cls(
            measurements=tuple(
                ElementMeasurement.from_dict(m, default_index=i) for i, m in enumerate(raw) if m is not None
            ),
            bg_color=data.get("bgColor"),
            root_image_url=root_image.get("url") if isinstance(root_image, dict) else None,
            layout_type=data.get("layoutType"),
            overlay_nodes=tuple(OverlayTextNode.from_dict(n) for n in text_nodes),
        )


@dataclass(frozen=True)
class DeckInput:
    """A deck: ordered slides sharing one theme."""

    slides: Tuple[SlideInput, ...] = ()
    theme: ThemeColors = field(default_factory=ThemeColors)
    title: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "DeckInput":
        """
        Parse a deck document.

        Accepted shapes:
        - {"theme": {...}, "title": "...", "slides": [slide, ...]}
        - a single slide object with "measurements"
        - a bare measurement list (one slide)

        Raises:
            MeasurementParsingError: If the document has none of these shapes
        """
        if isinstance(data, list):
            return cls(slides=(SlideInput.from_dict(data),))
        if not isinstance(data, dict):
            raise MeasurementParsingError("deck", f"expected an object or list, got {type(data).__name__}")

        theme = ThemeColors.from_dict(data.get("theme"))
        if "slides" in data:
            slides = data["slides"]
            if not isinstance(slides, list):
                raise MeasurementParsingError("slides", "expected a list")
            parsed = tuple(SlideInput.from_dict(s) for s in slides)
        elif "measurements" in data:
            parsed = (SlideInput.from_dict(data),)
        else:
            raise MeasurementParsingError("slides", "missing (expected 'slides' or 'measurements')")

        return cls(slides=parsed, theme=theme, title=str(data.get("title") or ""))
