import pytest

from slide_packer.measurement import ElementMeasurement, ElementStyles
from slide_packer.packing_options import PackingOptions


def _measurement(type="p", x=100, y=100, width=800, height=40, text="", index=0,
                 font_size="24px", font_weight="400", color="rgb(31, 41, 55)", text_align="left"):
    return ElementMeasurement(
        index=index,
        type=type,
        x=x,
        y=y,
        width=width,
        height=height,
        text=text or f"{type} at {y}",
        styles=ElementStyles(font_size=font_size, font_weight=font_weight, color=color, text_align=text_align),
    )


@pytest.fixture
def make_measurement():
    return _measurement


@pytest.fixture
def options():
    return PackingOptions()


@pytest.fixture
def q1_report():
    """A heading followed by three body paragraphs in one column, 30px apart."""
    return [
        _measurement("h1", x=100, y=50, width=800, height=90, text="Q1 Report", index=0,
                     font_size="64px", font_weight="700", color="rgb(17, 24, 39)"),
        _measurement("p", x=100, y=170, width=640, height=60, text="Revenue grew 12% quarter over quarter.", index=1),
        _measurement("p", x=100, y=260, width=780, height=60, text="Operating costs held flat.", index=2),
        _measurement("p", x=100, y=350, width=640, height=60, text="Headcount reached 240.", index=3),
    ]


@pytest.fixture
def deck_document(q1_report):
    return {
        "title": "Quarterly Review",
        "theme": {"accent": "#FF5500"},
        "slides": [
            {
                "measurements": [m.to_dict() for m in q1_report],
                "bgColor": "#F8FAFC",
            },
            {
                "measurements": [
                    {"index": 0, "type": "column", "x": 0, "y": 0, "width": 1920, "height": 1080},
                    {"index": 1, "type": "h2", "x": 1100, "y": 80, "width": 700, "height": 70,
                     "text": "Highlights", "styles": {"fontSize": "48px", "fontWeight": "600"}},
                    {"index": 2, "type": "bullet-item", "x": 1100, "y": 180, "width": 700, "height": 40,
                     "text": "New region launched", "styles": {"fontSize": "28px"}},
                    {"index": 3, "type": "bullet-item", "x": 1100, "y": 230, "width": 700, "height": 40,
                     "text": "Churn down 3 points", "styles": {"fontSize": "28px"}},
                ],
                "rootImage": {"url": "https://example.com/cover.png"},
                "layoutType": "left",
            },
        ],
    }
