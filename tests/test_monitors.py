import pytest

from reachguard.geometry import point_box
from reachguard.monitors import (
    CAR_HALF_LENGTH,
    ObstacleMonitor,
    StateRecorder,
    make_settings,
    should_stop,
)
from reachguard.safety import ObstacleSet


def test_should_stop_at_default_two_seconds():
    assert should_stop([0, 0, 0, 0], 1.99) is False
    assert should_stop([0, 0, 0, 0], 2.0) is True


def test_should_stop_with_custom_limit():
    assert should_stop([0, 0, 0, 0], 0.5, max_time=0.5) is True
    assert should_stop([0, 0, 0, 0], 0.4, max_time=0.5) is False


def test_make_settings_builds_point_box_and_step():
    start = [1.0, 2.0, 0.5, 0.1]
    recorder = StateRecorder(10)
    settings = make_settings(start, 2.0, 25, recorder.intermediate_state, recorder.final_state)
    assert settings.init == point_box(start)
    assert settings.reach_time == 2.0
    assert settings.max_runtime_ms == 25
    assert settings.initial_step_size * 10 == pytest.approx(settings.reach_time)
    assert settings.max_rect_width_before_error == 100
    assert settings.restarted_computation is None


def test_monitor_flags_obstacle_within_car_footprint():
    gap = CAR_HALF_LENGTH / 2
    obstacles = ObstacleSet([((gap, 1.0), (-1.0, 1.0))])
    monitor = ObstacleMonitor(obstacles)
    rect = point_box([0.0, 0.0, 0.0, 0.0])
    assert obstacles.is_safe(rect) is True
    assert monitor.intermediate_state(rect) is False
    assert monitor.final_state(rect) is False


def test_monitor_allows_far_obstacle_and_consults_wall():
    seen = []

    def wall(rect):
        seen.append(rect)
        return False

    monitor = ObstacleMonitor(ObstacleSet([((5.0, 6.0), (5.0, 6.0))]), wall)
    rect = point_box([0.0, 0.0, 0.0, 0.0])
    assert monitor.intermediate_state(rect) is False
    assert len(seen) == 1
    assert seen[0].x.width() == pytest.approx(2 * CAR_HALF_LENGTH)


def test_monitor_skips_wall_when_obstacle_hit():
    calls = []
    monitor = ObstacleMonitor(
        ObstacleSet([((-1.0, 1.0), (-1.0, 1.0))]), lambda r: calls.append(r) or True
    )
    assert monitor.intermediate_state(point_box([0.0, 0.0])) is False
    assert calls == []


def test_state_recorder_caps_storage_but_counts_all():
    recorder = StateRecorder(2)
    boxes = [point_box([i, i]) for i in range(5)]
    results = [recorder.intermediate_state(b) for b in boxes[:4]]
    results.append(recorder.final_state(boxes[4]))
    assert all(results)
    assert recorder.states == boxes[:2]
    assert recorder.total == 5


def test_state_recorder_restart_clears():
    recorder = StateRecorder(3)
    recorder.intermediate_state(point_box([1.0, 1.0]))
    recorder.restarted()
    assert recorder.states == []
    assert recorder.total == 0


def test_state_recorder_rejects_negative_capacity():
    with pytest.raises(ValueError):
        StateRecorder(-1)