import random

import pytest

from slide_packer.layout_engine.collision_resolver import initial_rect, place_group, resolve_collisions
from slide_packer.layout_engine.packer import SlidePacker
from slide_packer.measurement import CanvasSize, PlacedRect, RenderGroup, SourceSize
from slide_packer.packing_options import PackingOptions


def test_initial_rect_applies_scale_and_multiplier(make_measurement, options):
    group = RenderGroup.from_elements([make_measurement(x=192, y=108, width=960, height=108)])

    rect = initial_rect(group, options)

    assert rect.x == pytest.approx(1.0)
    assert rect.y == pytest.approx(0.5625)
    assert rect.w == pytest.approx(5.0)
    assert rect.h == pytest.approx(0.5625 * 1.6)


def test_initial_rect_follows_configured_canvas_and_source(make_measurement):
    options = PackingOptions(canvas=CanvasSize(13.333, 7.5), source=SourceSize(1280, 720))
    group = RenderGroup.from_elements([make_measurement(x=640, y=360, width=320, height=72)])

    placed, resolved = place_group((), group, options)

    assert resolved.rect.x == pytest.approx(13.333 / 2)
    assert resolved.rect.y == pytest.approx(3.75)
    assert resolved.rect.w == pytest.approx(13.333 / 4)
    assert resolved.web_height == pytest.approx(0.75)
    assert resolved.rect.h == pytest.approx(0.75 * 1.6)


def test_colliding_group_is_pushed_below(make_measurement, options):
    # Same pixel y, widths 400 apart so they form two groups in one column
    first = RenderGroup.from_elements([make_measurement(x=100, y=100, width=800, height=100)])
    second = RenderGroup.from_elements([make_measurement(x=100, y=100, width=400, height=50)])

    resolved = resolve_collisions([first, second], options)

    a, b = resolved[0].rect, resolved[1].rect
    assert b.y == pytest.approx(a.y + a.h + 0.1)
    assert resolved[1].attempts == 1
    assert not a.intersects(b)


def test_first_group_is_never_moved(make_measurement, options):
    group = RenderGroup.from_elements([make_measurement(y=300)])

    placed, resolved = place_group((), group, options)

    assert resolved.rect == initial_rect(group, options)
    assert resolved.attempts == 0
    assert placed == (resolved.rect,)


def test_place_group_does_not_mutate_accumulator(make_measurement, options):
    existing = (PlacedRect(0, 0, 10, 1),)
    group = RenderGroup.from_elements([make_measurement(y=10)])

    placed, _ = place_group(existing, group, options)

    assert existing == (PlacedRect(0, 0, 10, 1),)
    assert len(placed) == 2


def test_side_by_side_groups_do_not_move(make_measurement, options):
    left = RenderGroup.from_elements([make_measurement(x=100, y=100, width=700)])
    right = RenderGroup.from_elements([make_measurement(x=1000, y=100, width=700)])

    resolved = resolve_collisions([left, right], options)

    assert resolved[1].rect.y == resolved[0].rect.y


def test_touching_edges_do_not_collide():
    assert not PlacedRect(0, 0, 1, 1).intersects(PlacedRect(0, 1, 1, 1))
    assert not PlacedRect(0, 0, 1, 1).intersects(PlacedRect(1, 0, 1, 1))
    assert PlacedRect(0, 0, 1, 1).intersects(PlacedRect(0.5, 0.5, 1, 1))


def test_exhausted_attempt_bound_places_best_effort(make_measurement, caplog):
    options = PackingOptions(max_push_attempts=0)
    first = RenderGroup.from_elements([make_measurement(y=100, width=800)])
    second = RenderGroup.from_elements([make_measurement(y=100, width=400)])

    with caplog.at_level("WARNING"):
        resolved = resolve_collisions([first, second], options)

    assert resolved[1].unresolved
    assert resolved[1].rect.y == resolved[0].rect.y
    assert "unresolved" in caplog.text


def test_cascading_pushes(make_measurement, options):
    groups = [
        RenderGroup.from_elements([make_measurement(y=100, width=800 - i * 150, height=60)])
        for i in range(4)
    ]

    resolved = resolve_collisions(groups, options)

    for upper, lower in zip(resolved, resolved[1:]):
        assert lower.rect.y == pytest.approx(upper.rect.bottom + 0.1)


def test_no_resolved_group_overlaps_an_earlier_one(make_measurement):
    rng = random.Random(7)
    measurements = [
        make_measurement(
            type=rng.choice(["h2", "p", "p", "bullet-item", "img"]),
            x=rng.choice([80, 100, 700, 1200]),
            y=rng.randint(0, 900),
            width=rng.randint(200, 900),
            height=rng.randint(20, 120),
            index=i,
        )
        for i in range(25)
    ]

    resolved = SlidePacker().resolve(measurements)

    for j, later in enumerate(resolved):
        if later.unresolved:
            continue
        for earlier in resolved[:j]:
            assert not later.rect.intersects(earlier.rect)
