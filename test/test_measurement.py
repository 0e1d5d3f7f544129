import pytest

from slide_packer.exceptions import InvalidConfigurationError, MeasurementParsingError
from slide_packer.measurement import DeckInput, ElementMeasurement, SlideInput, ThemeColors
from slide_packer.packing_options import PackingOptions


def test_measurement_from_host_record():
    m = ElementMeasurement.from_dict({
        "index": 4,
        "type": "h1",
        "x": "100",
        "y": 50,
        "width": 800,
        "height": 90,
        "text": "Q1 Report",
        "styles": {"fontSize": "64px", "fontWeight": "700", "color": "rgb(17, 24, 39)", "textAlign": "left"},
    })

    assert m.index == 4
    assert m.x == 100.0
    assert m.is_heading and m.is_text
    assert m.styles.font_size == "64px"
    assert m.bottom == 140


def test_measurement_defaults():
    m = ElementMeasurement.from_dict({"x": 0, "y": 0, "width": 10, "height": 10}, default_index=7)

    assert m.index == 7
    assert m.type == "other"
    assert m.text == ""
    assert m.styles.color == ""
    assert not m.is_text


@pytest.mark.parametrize("record, field", [
    ({"y": 0, "width": 10, "height": 10}, "x"),
    ({"x": "left", "y": 0, "width": 10, "height": 10}, "x"),
    ({"x": 0, "y": 0, "width": -1, "height": 10}, "width"),
    ({"x": 0, "y": 10, "width": "nan", "height": 10}, "width"),
    ({"x": 0, "y": 10, "width": 10, "height": "nan"}, "height"),
    ({"x": "nan", "y": 10, "width": 10, "height": 10}, "x"),
    ({"x": 0, "y": "inf", "width": 10, "height": 10}, "y"),
    ({"x": 0, "y": 0, "width": "-inf", "height": 10}, "width"),
    ({"x": 0, "y": 0, "width": 1, "height": 1, "index": "first"}, "index"),
])
def test_malformed_measurements(record, field):
    with pytest.raises(MeasurementParsingError) as excinfo:
        ElementMeasurement.from_dict(record)
    assert excinfo.value.field == field


def test_measurement_must_be_object():
    with pytest.raises(MeasurementParsingError):
        ElementMeasurement.from_dict(["x", 0])


def test_constructed_measurement_rejects_nan_extent():
    with pytest.raises(MeasurementParsingError) as excinfo:
        ElementMeasurement(index=0, type="p", x=0, y=0, width=float("nan"), height=10)
    assert excinfo.value.field == "width"


def test_slide_from_bare_list():
    slide = SlideInput.from_dict([{"x": 0, "y": 0, "width": 10, "height": 10}])

    assert len(slide.measurements) == 1
    assert slide.bg_color is None


def test_deck_document(deck_document):
    deck = DeckInput.from_dict(deck_document)

    assert deck.title == "Quarterly Review"
    assert deck.theme.accent == "FF5500"
    assert deck.theme.background == "FFFFFF"
    assert len(deck.slides) == 2
    assert deck.slides[0].bg_color == "#F8FAFC"
    assert deck.slides[1].root_image_url == "https://example.com/cover.png"
    assert deck.slides[1].layout_type == "left"


def test_slide_text_nodes():
    slide = SlideInput.from_dict({
        "measurements": [],
        "textNodes": [
            {"text": "North", "x": 0.1, "y": 0.2, "w": 0.3, "h": 0.05, "textAnchor": "middle"},
            {"text": "South", "left": 480, "top": 540, "width": 192, "height": 54,
             "containerWidth": 1920, "containerHeight": 1080},
        ],
    })

    north, south = slide.overlay_nodes
    assert north.text_anchor == "middle"
    assert (south.x, south.y, south.w, south.h) == pytest.approx((0.25, 0.5, 0.1, 0.05))


@pytest.mark.parametrize("text_nodes, field", [
    ("North", "textNodes"),
    (["North"], "textNode"),
    ([{"text": "North", "x": "nan", "y": 0.2, "w": 0.3, "h": 0.05}], "box"),
])
def test_malformed_text_nodes(text_nodes, field):
    with pytest.raises(MeasurementParsingError) as excinfo:
        SlideInput.from_dict({"measurements": [], "textNodes": text_nodes})
    assert excinfo.value.field == field


def test_deck_from_single_slide_object():
    deck = DeckInput.from_dict({"measurements": [], "bgColor": "000000"})
    assert len(deck.slides) == 1


def test_deck_without_slides_rejected():
    with pytest.raises(MeasurementParsingError):
        DeckInput.from_dict({"theme": {}})


@pytest.mark.parametrize("theme", ["dark", ["#000000"], 3])
def test_theme_must_be_object(theme):
    with pytest.raises(MeasurementParsingError) as excinfo:
        DeckInput.from_dict({"theme": theme, "slides": [[]]})
    assert excinfo.value.field == "theme"


def test_theme_defaults():
    theme = ThemeColors()

    assert theme.to_dict() == {
        "primary": "3B82F6",
        "secondary": "1F2937",
        "accent": "60A5FA",
        "background": "FFFFFF",
        "text": "1F2937",
        "heading": "111827",
        "muted": "6B7280",
    }


def test_partial_theme_keeps_other_defaults():
    theme = ThemeColors.from_dict({"accent": "#ff0000", "text": ""})

    assert theme.accent == "ff0000"
    assert theme.text == "1F2937"


@pytest.mark.parametrize("overrides", [
    {"height_safety_multiplier": 0.9},
    {"column_proximity_px": -1},
    {"max_push_attempts": -1},
    {"font_scale": 0},
    {"max_workers": 0},
])
def test_invalid_options(overrides):
    with pytest.raises(InvalidConfigurationError):
        PackingOptions(**overrides)


def test_options_from_env():
    options = PackingOptions.from_env(
        {"SLIDE_PACKER_WIDTH_DELTA_PX": "120", "SLIDE_PACKER_MAX_PUSH_ATTEMPTS": "4"},
        row_tolerance_px=15,
    )

    assert options.width_delta_px == 120.0
    assert options.max_push_attempts == 4
    assert options.row_tolerance_px == 15


def test_options_from_process_environment(monkeypatch):
    monkeypatch.setenv("SLIDE_PACKER_HEIGHT_SAFETY_MULTIPLIER", "2.0")

    assert PackingOptions.from_env().height_safety_multiplier == 2.0


def test_options_override_wins_over_env():
    options = PackingOptions.from_env({"SLIDE_PACKER_WIDTH_DELTA_PX": "120"}, width_delta_px=80)
    assert options.width_delta_px == 80


def test_options_from_env_rejects_garbage():
    with pytest.raises(InvalidConfigurationError):
        PackingOptions.from_env({"SLIDE_PACKER_MAX_WORKERS": "many"})
