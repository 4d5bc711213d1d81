import math

import pytest

from reachguard.geometry import HyperRectangle
from reachguard.markers import (
    BLUE,
    BRIGHT_BLUE,
    BRIGHT_GREEN,
    GREEN,
    MARKER_HEIGHT,
    PARAM_MARKER_Z,
    RED,
    box_marker,
    display_increment,
    param_markers,
    reachset_markers,
    topic_color,
)
from reachguard.monitors import CAR_HALF_LENGTH, CAR_HALF_WIDTH


def _states(n):
    return [
        HyperRectangle.from_bounds([(i, i + 1.0), (2.0 * i, 2.0 * i + 0.5), (1.0, 1.0), (0.0, 0.0)])
        for i in range(n)
    ]


def test_topic_colors_from_source():
    assert topic_color(0) == (0.0, 0.0, 0.8)
    assert topic_color(1) == (0.0, 0.8, 0.0)
    assert topic_color(7) == (0.8, 0.0, 0.0)
    assert (BLUE, GREEN, RED) == (topic_color(0), topic_color(1), topic_color(-1))


def test_display_increment_invariant_and_errors():
    assert math.isclose(display_increment(250, 25.0) * 25.0, 250)
    assert display_increment(0, 5.0) == 0
    with pytest.raises(ValueError):
        display_increment(10, 0)
    with pytest.raises(ValueError):
        display_increment(10, -1)


def test_box_marker_bloated_keeps_centre_and_grows_scale():
    rect = HyperRectangle.from_bounds([(1.0, 3.0), (-2.0, 4.0)])
    marker = box_marker(rect, 4, 0.5, (0.0, 0.0, 0.0, 1.0), BLUE, 0.1, True)
    assert marker.marker_id == 4
    assert math.isclose(marker.x, (rect.x.min + rect.x.max) / 2)
    assert math.isclose(marker.y, (rect.y.min + rect.y.max) / 2)
    assert math.isclose(marker.scale_x, rect.x.width() + 2 * CAR_HALF_LENGTH)
    assert math.isclose(marker.scale_y, rect.y.width() + 2 * CAR_HALF_WIDTH)
    assert marker.scale_z == MARKER_HEIGHT
    assert marker.frame_id == "/map"
    assert marker.alpha == 1.0


def test_box_marker_unbloated_matches_rect():
    rect = HyperRectangle.from_bounds([(1.0, 3.0), (-2.0, 4.0)])
    marker = box_marker(rect, 0, bloat=False)
    assert math.isclose(marker.scale_x, rect.x.width())
    assert math.isclose(marker.scale_y, rect.y.width())


def test_box_marker_rejects_bad_orientation():
    rect = HyperRectangle.from_bounds([(0.0, 1.0), (0.0, 1.0)])
    with pytest.raises(ValueError):
        box_marker(rect, 0, orientation=(0.0, 1.0))


def test_param_markers_every_box_but_last_when_step_is_one():
    states = _states(12)
    markers = param_markers(states, 12, 12.0, (0.0, 0.0, 0.0, 1.0), 1, 2000)
    assert [m.marker_id for m in markers] == list(range(11))
    assert all(m.color == GREEN for m in markers)
    assert all(m.z == PARAM_MARKER_Z for m in markers)


def test_param_markers_respects_max_rects():
    states = _states(30)
    markers = param_markers(states, 30, 30.0, (0.0, 0.0, 0.0, 1.0), 0, 5)
    assert [m.marker_id for m in markers] == list(range(4))


def test_param_markers_thinned_ids_increase_within_limit():
    states = _states(100)
    markers = param_markers(states, 100, 7.0, (0.0, 0.0, 0.3, 0.9), 2, 2000)
    ids = [m.marker_id for m in markers]
    assert ids[0] == 0
    assert ids == sorted(set(ids))
    assert ids[-1] < 99
    assert len(ids) < 99
    assert all(m.orientation == (0.0, 0.0, 0.3, 0.9) for m in markers)


def test_param_markers_small_increment_terminates():
    states = _states(6)
    markers = param_markers(states, 6, 100.0, (0.0, 0.0, 0.0, 1.0), 0, 2000)
    assert [m.marker_id for m in markers] == list(range(5))


def test_reachset_markers_alternate_colors_and_flat():
    states = _states(8)
    markers = reachset_markers(states, 8.0, (0.0, 0.0, 0.0, 1.0))
    assert [m.marker_id for m in markers] == list(range(8))
    assert [m.color for m in markers[:2]] == [BRIGHT_GREEN, BRIGHT_BLUE]
    assert all(m.z == 0.0 for m in markers)
    assert markers[2].color == BRIGHT_GREEN


def test_reachset_markers_empty_states():
    assert reachset_markers([], 10.0, (0.0, 0.0, 0.0, 1.0)) == []