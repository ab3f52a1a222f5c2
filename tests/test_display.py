import math

import pytest

from powerindex.analysis import banzhaf
from powerindex.display import (
    COLORS,
    Segment,
    coalition_segments,
    color_for,
    format_model,
    ipb_label,
    render_text,
    star_points,
    summary,
)


def test_color_for_cycles_every_six():
    assert color_for(0) == color_for(6)
    assert color_for(5) == color_for(11)
    assert color_for(2) == COLORS[2]


def test_color_for_second_entry_from_palette():
    assert color_for(1) == (0.89, 0.29, 0.30)


def test_format_model():
    assert format_model(51, [50, 30, 20]) == "Modelo: (51; 50, 30, 20)"


def test_format_model_ends_with_last_weight():
    text = format_model(7, [4, 3, 2, 1])
    assert text.startswith("Modelo: (7;")
    assert text.endswith(" 1)")
    assert text.count(",") == 3


def test_segments_are_contiguous_and_proportional():
    result = banzhaf([5, 4, 3, 2], 8)
    total_votes = sum(result.weights)
    width = 400.0
    for coalition in result.coalitions:
        segments = coalition_segments(coalition, total_votes, width)
        assert [s.voter for s in segments] == list(coalition.members())
        assert segments[0].x == 0.0
        for prev, nxt in zip(segments, segments[1:]):
            assert math.isclose(prev.x + prev.width, nxt.x)
        covered = sum(s.width for s in segments)
        assert math.isclose(covered, width * coalition.total() / total_votes)


def test_segments_carry_critical_flags_and_colors():
    result = banzhaf([5, 4, 3, 2], 8)
    for coalition in result.coalitions:
        for seg in coalition_segments(coalition, sum(result.weights), 100):
            assert seg.critical == coalition.critical[seg.voter]
            assert seg.color == color_for(seg.voter)
            assert seg.votes == result.weights[seg.voter]


def test_segments_reject_non_positive_total():
    result = banzhaf([3, 2, 2], 5)
    with pytest.raises(ValueError):
        coalition_segments(result.coalitions[0], 0, 100)


def test_pixel_width_never_below_one():
    seg = Segment(0, 0.0, 0.2, 1, False, color_for(0))
    assert seg.pixel_width == 1
    wide = Segment(0, 0.0, 80.7, 1, False, color_for(0))
    assert wide.pixel_width == 80


def test_star_points_radii():
    points = star_points(10.0, 20.0, 5.0)
    assert len(points) == 10
    assert math.isclose(points[0][0], 10.0, abs_tol=1e-9)
    assert math.isclose(points[0][1], 15.0)
    for k, (x, y) in enumerate(points):
        radius = math.hypot(x - 10.0, y - 20.0)
        expected = 5.0 if k % 2 == 0 else 5.0 * 0.4
        assert math.isclose(radius, expected)


def test_segment_star_is_centred_on_slice():
    seg = Segment(1, 10.0, 40.0, 3, True, color_for(1))
    points = seg.star(20.0)
    cx = sum(x for x, _ in points) / len(points)
    cy = sum(y for _, y in points) / len(points)
    assert math.isclose(cx, 30.0)
    assert math.isclose(cy, 10.0)


def test_ipb_label_wide_slice():
    assert ipb_label(0.5, 2, 4, 51) == "0.5000\n(2/4)"


def test_ipb_label_narrow_slice_is_empty():
    assert ipb_label(0.5, 2, 4, 50) == ""


def test_summary_worked_example():
    result = banzhaf([3, 2, 2], 5)
    assert summary(result) == "Coaliciones encontradas: 3 | Total votos críticos: 5"


def test_render_text_structure():
    result = banzhaf([3, 2, 2], 5)
    lines = render_text(result).splitlines()
    assert lines[0] == format_model(5, result.weights)
    assert lines[-1] == summary(result)
    assert len(lines) == 1 + result.solution_count() + len(result.weights) + 1


def test_render_text_empty_when_quota_unreachable():
    result = banzhaf([1, 1, 1], 10)
    lines = render_text(result).splitlines()
    assert lines[-1] == summary(result)
    assert len(lines) == 1 + len(result.weights) + 1