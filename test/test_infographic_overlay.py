import pytest

from slide_packer.exceptions import MeasurementParsingError
from slide_packer.layout_engine.infographic_overlay import (
    OverlayTextNode,
    build_overlay_placement,
    downgrade_dense_chart,
    pack_infographic_overlay,
    resolve_overlay_collisions,
)


def _node(text="Label", x=0.1, y=0.1, w=0.2, h=0.1, **kwargs):
    return OverlayTextNode(text=text, x=x, y=y, w=w, h=h, **kwargs)


def test_box_is_padded_around_center():
    placement = build_overlay_placement(_node())

    assert placement.w == pytest.approx(0.23)
    assert placement.h == pytest.approx(0.105)
    assert placement.x == pytest.approx(0.085)
    assert placement.y == pytest.approx(0.0975)


def test_font_size_is_scaled_with_minimum():
    assert build_overlay_placement(_node(font_size="20px")).font_size == pytest.approx(13.0)
    assert build_overlay_placement(_node(font_size="4px")).font_size == 6
    assert build_overlay_placement(_node()).font_size == pytest.approx(12 * 0.65)


def test_alignment_and_color():
    svg_text = build_overlay_placement(_node(text_anchor="middle", color="rgb(255, 0, 0)"))
    assert svg_text.align == "center"
    assert svg_text.color == "#ff0000"

    html_text = build_overlay_placement(_node(is_foreign=True, text_align="right"))
    assert html_text.align == "right"
    assert html_text.color == "#000000"


def test_font_face_is_first_family():
    placement = build_overlay_placement(_node(font_family="'Noto Sans', Arial, sans-serif"))
    assert placement.font_face == "Noto Sans"


def test_empty_or_degenerate_nodes_are_skipped():
    assert build_overlay_placement(_node(text="  ")) is None
    assert build_overlay_placement(_node(w=0)) is None


def test_overlapping_nodes_are_pushed_down():
    upper = build_overlay_placement(_node(text="upper", y=0.10))
    lower = build_overlay_placement(_node(text="lower", y=0.15))

    resolved = resolve_overlay_collisions([lower, upper])

    assert [p.text for p in resolved] == ["upper", "lower"]
    assert resolved[1].y == pytest.approx(resolved[0].y + resolved[0].h + 0.01)


def test_small_horizontal_overlap_is_ignored():
    left = build_overlay_placement(_node(text="left", x=0.1, y=0.10))
    right = build_overlay_placement(_node(text="right", x=0.29, y=0.12))

    resolved = resolve_overlay_collisions([left, right])

    assert resolved[1].y == right.y


def test_pack_overlay_from_pixel_records():
    nodes = [
        OverlayTextNode.from_dict({
            "text": "Revenue", "left": 100, "top": 50, "width": 200, "height": 40,
            "containerWidth": 1000, "containerHeight": 500, "fontSize": "16px",
        }),
        OverlayTextNode.from_dict({"text": "", "x": 0.5, "y": 0.5, "w": 0.1, "h": 0.1}),
    ]

    placements = pack_infographic_overlay(nodes)

    assert len(placements) == 1
    exported = placements[0].to_dict()
    assert exported["kind"] == "overlay_text"
    assert exported["w"].endswith("%")
    assert exported["color"] == "000000"


def test_overlay_record_without_box_rejected():
    with pytest.raises(MeasurementParsingError):
        OverlayTextNode.from_dict({"text": "no box"})


def _chart(template, count):
    items = "".join(f"\n    - label Item {i} (10%)\n      value 10" for i in range(count))
    return f"infographic {template}\ndata\n  items{items}"


def test_dense_pie_chart_is_downgraded():
    result = downgrade_dense_chart(_chart("chart-pie-plain-text", 9))

    assert result.startswith("infographic chart-bar-plain-text")
    assert "(10%)" not in result
    assert "- label Item 8" in result


def test_small_pie_chart_is_kept():
    dsl = _chart("chart-pie-plain-text", 8)
    assert downgrade_dense_chart(dsl) == dsl


def test_non_circular_chart_is_kept():
    dsl = _chart("list-row-simple", 12)
    assert downgrade_dense_chart(dsl) == dsl
