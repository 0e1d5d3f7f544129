import pytest

from slide_packer.layout_engine.paragraph_grouper import group_paragraphs
from slide_packer.measurement import RenderGroup


def test_width_change_splits_groups(make_measurement):
    elements = [
        make_measurement(y=0, width=800, index=1),
        make_measurement(y=50, width=780, index=2),
        make_measurement(y=100, width=500, index=3),
        make_measurement(y=150, width=520, index=4),
        make_measurement(y=200, width=540, index=5),
    ]

    groups = group_paragraphs(elements)

    assert [[m.index for m in g.elements] for g in groups] == [[1, 2], [3, 4, 5]]


def test_width_delta_is_measured_against_previous_member(make_measurement):
    # 800 -> 720 -> 640: each step is 80, so the run never splits
    elements = [
        make_measurement(y=0, width=800),
        make_measurement(y=50, width=720),
        make_measurement(y=100, width=640),
    ]
    assert len(group_paragraphs(elements)) == 1


def test_width_delta_equal_to_threshold_splits(make_measurement):
    elements = [make_measurement(y=0, width=800), make_measurement(y=50, width=700)]
    assert len(group_paragraphs(elements)) == 2


def test_non_text_element_is_singleton_and_breaks_run(make_measurement):
    elements = [
        make_measurement(y=0, index=1),
        make_measurement(type="img", y=50, index=2),
        make_measurement(y=100, index=3),
    ]

    groups = group_paragraphs(elements)

    assert [[m.index for m in g.elements] for g in groups] == [[1], [2], [3]]


def test_elements_are_sorted_by_y(make_measurement):
    elements = [make_measurement(y=300, index=2), make_measurement(y=10, index=1)]

    groups = group_paragraphs(elements)

    assert [m.index for m in groups[0].elements] == [1, 2]


def test_group_geometry(make_measurement):
    heading = make_measurement(type="h2", x=100, y=100, width=700, height=50)
    body = make_measurement(type="p", x=110, y=160, width=640, height=80)

    group = RenderGroup.from_elements([heading, body])

    assert group.x == 100
    assert group.y == 100
    # headings do not contribute to the width when body text is present
    assert group.w == 640
    assert group.h_web == 140


def test_group_width_falls_back_to_all_members(make_measurement):
    group = RenderGroup.from_elements([
        make_measurement(type="h1", width=900),
        make_measurement(type="h2", y=200, width=600),
    ])
    assert group.w == 900


def test_zero_height_group_gets_floor(make_measurement):
    group = RenderGroup.from_elements([make_measurement(height=0)])
    assert group.h_web == 20


def test_empty_group_rejected():
    with pytest.raises(ValueError):
        RenderGroup.from_elements([])


def test_every_measurement_lands_in_exactly_one_group(make_measurement):
    elements = [make_measurement(y=i * 40, width=300 + (i % 3) * 150, index=i) for i in range(12)]
    elements.append(make_measurement(type="img", y=90, index=99))

    groups = group_paragraphs(elements)

    indices = sorted(m.index for g in groups for m in g.elements)
    assert indices == sorted(m.index for m in elements)
