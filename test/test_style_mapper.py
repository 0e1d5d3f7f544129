import pytest

from slide_packer.layout_engine import style_mapper
from slide_packer.measurement import ThemeColors


@pytest.mark.parametrize("value, expected", [
    ("32px", 32),
    ("18.5px", 18),
    ("", 24),
    ("inherit", 24),
    ("0px", 24),
])
def test_parse_font_size_px(value, expected):
    assert style_mapper.parse_font_size_px(value) == expected


def test_font_size_rounds_half_up():
    assert style_mapper.font_size_to_pt(24) == 13
    assert style_mapper.font_size_to_pt(30) == 17
    assert style_mapper.font_size_to_pt(10, font_scale=0.25) == 3


@pytest.mark.parametrize("weight, expected", [
    ("bold", True),
    ("600", True),
    ("700", True),
    ("500", False),
    ("normal", False),
    ("", False),
])
def test_is_bold(weight, expected):
    assert style_mapper.is_bold(weight) is expected


@pytest.mark.parametrize("value, expected", [
    ("rgb(255, 0, 128)", "ff0080"),
    ("rgb(17,24,39)", "111827"),
    ("#3B82F6", "3b82f6"),
    ("transparent", None),
    ("", None),
])
def test_parse_rgb_color(value, expected):
    assert style_mapper.parse_rgb_color(value) == expected


def test_rgb_to_hex():
    assert style_mapper.rgb_to_hex("rgba(1, 2, 3, 0.5)") == "#010203"
    assert style_mapper.rgb_to_hex("#abcdef") == "#abcdef"
    assert style_mapper.rgb_to_hex("") == "#000000"
    assert style_mapper.rgb_to_hex("red") == "#000000"


@pytest.mark.parametrize("value, expected", [
    ("center", "center"),
    ("start", "left"),
    ("end", "right"),
    ("justify", "justify"),
    ("", "left"),
    ("-webkit-auto", "left"),
])
def test_map_alignment(value, expected):
    assert style_mapper.map_alignment(value) == expected


def test_heading_style_uses_accent(make_measurement, options):
    theme = ThemeColors(accent="FF5500")
    heading = make_measurement(type="h2", font_size="48px", font_weight="400", color="rgb(0, 0, 0)")

    style = style_mapper.style_for_element(heading, theme, options)

    assert style.bold
    assert style.color == "FF5500"
    assert style.valign == "middle"
    assert style.font_size == 26


def test_body_style_falls_back_to_theme_text(make_measurement, options):
    theme = ThemeColors(text="222222")
    body = make_measurement(type="p", font_weight="400", color="currentColor", text_align="center")

    style = style_mapper.style_for_element(body, theme, options)

    assert not style.bold
    assert style.color == "222222"
    assert style.align == "center"
    assert style.valign == "top"
    assert style.wrap


def test_run_for_bullet_item(make_measurement, options):
    item = make_measurement(type="bullet-item", font_size="28px", color="rgb(1, 2, 3)")

    run = style_mapper.run_for_element(item, ThemeColors(), options)

    assert run.is_bullet_item
    assert run.font_size == 15
    assert run.color == "010203"
    assert run.para_space_after == 6
