import math

import pytest

from rallybump.layout import ChartLayout, DEFAULT_LAYOUT
from rallybump.models import Competitor, Result, Stage
from rallybump.scales import (
    LinearScale,
    OrdinalScale,
    build_scales,
    category_palette,
    stage_extent,
)


def test_linear_scale_maps_domain_ends_onto_range_ends():
    scale = LinearScale((0, 3), (50, 770))
    assert scale(0) == 50
    assert scale(3) == 770
    assert scale(1.5) == pytest.approx(410)


def test_linear_scale_extrapolates_outside_domain():
    scale = LinearScale((0, 10), (0, 100))
    assert scale(20) == pytest.approx(200)


def test_linear_scale_zero_width_domain_uses_range_midpoint():
    scale = LinearScale((5, 5), (50, 770))
    assert scale.degenerate
    for value in (0, 5, 100):
        assert scale(value) == 410


def test_stage_extent_ignores_caller_order():
    stages = [Stage("SS3", 12.5), Stage("SS1", 0), Stage("SS2", 30.2)]
    assert stage_extent(stages) == (0, 30.2)


def test_stage_extent_empty():
    assert stage_extent([]) == (0.0, 0.0)


def test_horizontal_scale_is_monotonic(stages, competitors):
    scales = build_scales(stages, competitors)
    ordered = sorted(stages, key=lambda s: s.distance)
    xs = [scales.x(s.distance) for s in ordered]
    assert all(a < b for a, b in zip(xs, xs[1:]))
    assert xs[0] == DEFAULT_LAYOUT.margin_left
    assert xs[-1] == DEFAULT_LAYOUT.width - DEFAULT_LAYOUT.margin_right


def test_rank_one_is_at_the_top(stages, competitors):
    scales = build_scales(stages, competitors)
    assert scales.y(1) == DEFAULT_LAYOUT.margin_top
    assert scales.y(3) == DEFAULT_LAYOUT.height - DEFAULT_LAYOUT.margin_bottom
    assert scales.y(1) < scales.y(2) < scales.y(3)


def test_single_competitor_and_single_stage_give_finite_coordinates():
    stage = Stage("SS1", 4.2)
    competitor = Competitor("Solo", [Result(stage, 1)])
    scales = build_scales([stage], [competitor])
    x, y = scales.x(stage.distance), scales.y(1)
    assert math.isfinite(x) and math.isfinite(y)
    assert x == sum(DEFAULT_LAYOUT.x_range) / 2
    assert y == sum(DEFAULT_LAYOUT.y_range) / 2


def test_repeated_stage_distances_give_finite_coordinates():
    stages = [Stage("SS1", 7), Stage("SS2", 7)]
    scales = build_scales(stages, [])
    assert all(math.isfinite(scales.x(s.distance)) for s in stages)


def test_scales_follow_layout():
    layout = ChartLayout(width=400, height=300, margin_left=10, margin_right=10)
    scales = build_scales([Stage("A", 0), Stage("B", 1)], [], layout)
    assert scales.x(0) == 10
    assert scales.x(1) == 390


def test_category_palette_is_the_standard_ten():
    palette = category_palette()
    assert len(palette) == 10
    assert palette[0] == "#1f77b4"
    assert palette[1] == "#ff7f0e"


def test_colours_assigned_in_first_seen_order(competitors, stages):
    scales = build_scales(stages, competitors)
    palette = category_palette()
    assert [scales.color(c.name) for c in competitors] == palette[:3]


def test_colours_are_stable_across_builds(stages, competitors):
    first = build_scales(stages, competitors)
    second = build_scales(stages, competitors)
    for c in competitors:
        assert first.color(c.name) == second.color(c.name)


def test_colours_are_distinct_within_palette_size():
    names = [f"Driver {i}" for i in range(10)]
    scale = OrdinalScale(names, category_palette())
    assert len({scale(n) for n in names}) == 10


def test_colours_repeat_cyclically_past_palette_size():
    names = [f"Driver {i}" for i in range(12)]
    scale = OrdinalScale(names, category_palette())
    assert scale("Driver 10") == scale("Driver 0")
    assert scale("Driver 11") == scale("Driver 1")


def test_unknown_name_extends_domain():
    scale = OrdinalScale(["A", "B"], ["red", "green", "blue"])
    assert scale("C") == "blue"
    assert scale.domain == ["A", "B", "C"]
    assert scale("C") == "blue"


def test_empty_palette_rejected():
    with pytest.raises(ValueError):
        OrdinalScale(["A"], [])
