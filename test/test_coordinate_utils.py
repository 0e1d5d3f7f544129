import pytest

from slide_packer.layout_engine import coordinate_utils
from slide_packer.measurement import CanvasSize, SourceSize

CANVAS = CanvasSize()
SOURCE = SourceSize()


def test_full_surface_maps_to_full_canvas():
    assert coordinate_utils.px_to_units_x(1920, CANVAS, SOURCE) == pytest.approx(10.0)
    assert coordinate_utils.px_to_units_y(1080, CANVAS, SOURCE) == pytest.approx(5.625)


def test_axes_scale_independently():
    canvas = CanvasSize(10, 10)
    units = coordinate_utils.convert_rect_to_units((1920, 1080, 960, 540), canvas, SOURCE)
    assert units == pytest.approx((10, 10, 5, 5))


@pytest.mark.parametrize("rect", [
    (0, 0, 1920, 1080),
    (100, 50, 800, 90),
    (1337.5, 421.25, 3.0, 0.5),
])
def test_round_trip(rect):
    units = coordinate_utils.convert_rect_to_units(rect, CANVAS, SOURCE)
    back = coordinate_utils.convert_rect_to_px(units, CANVAS, SOURCE)
    assert back == pytest.approx(rect)


def test_rect_to_points_flips_origin():
    x, y, w, h = coordinate_utils.convert_rect_to_points(1, 0.5, 2, 1, page_height_units=5.625)

    assert x == pytest.approx(72)
    assert w == pytest.approx(144)
    assert h == pytest.approx(72)
    # bottom edge sits 1.5in below the top of a 5.625in page
    assert y == pytest.approx((5.625 - 1.5) * 72)


def test_flip_is_its_own_inverse():
    assert coordinate_utils.flip_y_coordinate(coordinate_utils.flip_y_coordinate(30, 405), 405) == 30
