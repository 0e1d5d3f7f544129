"""Placement Commands

Value types handed to a document serializer. Every command is positioned in
canvas units (inches, top-left origin) and converts to a plain dict with a
"kind" discriminator, so serializers need not import this package.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from ..config import DEFAULT_FONT_FACE


@dataclass(frozen=True)
class TextStyle:
    """Target style attributes for a single text box."""

    font_size: int
    bold: bool
    color: str
    align: str = "left"
    valign: str = "top"
    wrap: bool = True
    font_face: str = DEFAULT_FONT_FACE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "font_size": self.font_size,
            "bold": self.bold,
            "color": self.color,
            "align": self.align,
            "valign": self.valign,
            "wrap": self.wrap,
            "font_face": self.font_face,
        }


@dataclass(frozen=True)
class BoxPlacement:
    """A single styled text box, or an image box when style is None."""

    x: float
    y: float
    w: float
    h: float
    text: str = ""
    style: Optional[TextStyle] = None
    element_type: str = "text"
    source_index: int = 0

    @property
    def kind(self) -> str:
        return "text_box" if self.style is not None else "image_box"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "text": self.text,
            "element_type": self.element_type,
            "source_index": self.source_index,
            "style": self.style.to_dict() if self.style is not None else None,
        }


@dataclass(frozen=True)
class TextRun:
    """One paragraph of a multi-run text block."""

    text: str
    font_size: int
    bold: bool
    color: str
    is_bullet_item: bool = False
    para_space_after: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "font_size": self.font_size,
            "bold": self.bold,
            "color": self.color,
            "is_bullet_item": self.is_bullet_item,
            "para_space_after": self.para_space_after,
        }


@dataclass(frozen=True)
class MultiRunPlacement:
    """A text block whose runs each start a new paragraph, in member order."""

    x: float
    y: float
    w: float
    h: float
    runs: Tuple[TextRun, ...]
    align: str = "left"
    valign: str = "top"
    wrap: bool = True
    font_face: str = DEFAULT_FONT_FACE

    kind = "text_block"

    @property
    def text(self) -> str:
        return "\n".join(run.text for run in self.runs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "align": self.align,
            "valign": self.valign,
            "wrap": self.wrap,
            "font_face": self.font_face,
            "runs": [run.to_dict() for run in self.runs],
        }


@dataclass(frozen=True)
class BackgroundPlacement:
    """Solid slide background."""

    color: str

    kind = "background"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "color": self.color}


@dataclass(frozen=True)
class RootImagePlacement:
    """The slide's root image, positioned by layout type.

    sizing is "cover" for full-bleed background images, None otherwise.
    """

    url: str
    x: float
    y: float
    w: float
    h: float
    sizing: Optional[str] = None

    kind = "root_image"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "url": self.url,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "sizing": self.sizing,
        }


PlacementCommand = Union[BoxPlacement, MultiRunPlacement]
SlideCommand = Union[BackgroundPlacement, RootImagePlacement, BoxPlacement, MultiRunPlacement]
