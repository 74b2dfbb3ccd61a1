import math

from duckpond.background import (
    Snowflake,
    WinterBackground,
    spawn_winter_background,
    update_snowflakes,
)
from duckpond.components import Vec3


def _single(flake):
    return WinterBackground([flake])


def test_spawn_has_predefined_snowflakes():
    background = spawn_winter_background()
    assert len(background.snowflakes) == 39
    first = background.snowflakes[0]
    assert first.position == Vec3(-300.0, 300.0, -5.0)
    assert (first.size, first.speed, first.drift, first.time_offset) == (10.0, 50.0, 5.0, 0.0)
    assert background.color == (0.2, 0.4, 0.8)


def test_time_offsets_are_distinct():
    offsets = [f.time_offset for f in spawn_winter_background().snowflakes]
    assert len(set(offsets)) == len(offsets)


def test_flake_falls_by_speed_times_dt():
    flake = Snowflake(Vec3(0.0, 100.0, -5.0), 10.0, 50.0, 5.0, 0.0)
    update_snowflakes(_single(flake), 0.5, 0.0, 800.0, 600.0)
    assert math.isclose(flake.position.y, 100.0 - 50.0 * 0.5)
    assert math.isclose(flake.position.x, 0.0, abs_tol=1e-12)
    assert flake.position.z == -5.0


def test_drift_follows_sine():
    flake = Snowflake(Vec3(0.0, 0.0, -5.0), 10.0, 0.0, 4.0, 1.0)
    elapsed = 2.0
    update_snowflakes(_single(flake), 0.1, elapsed, 800.0, 600.0)
    assert math.isclose(flake.position.x, 4.0 * math.sin((elapsed + 1.0) * 1.5) * 0.1)


def test_rotation_accumulates():
    flake = Snowflake(Vec3(0.0, 0.0, -5.0), 10.0, 0.0, 0.0, 0.0)
    background = _single(flake)
    update_snowflakes(background, 1.0, 0.0, 800.0, 600.0)
    update_snowflakes(background, 1.0, 0.0, 800.0, 600.0)
    assert math.isclose(flake.rotation, 0.2)


def test_wraps_from_bottom_to_top():
    flake = Snowflake(Vec3(0.0, -400.0, -5.0), 10.0, 50.0, 0.0, 0.0)
    update_snowflakes(_single(flake), 0.1, 0.0, 800.0, 600.0)
    assert flake.position.y == 600.0 / 2.0 + 20.0


def test_wraps_sideways():
    left = Snowflake(Vec3(-500.0, 0.0, -5.0), 10.0, 0.0, 0.0, 0.0)
    right = Snowflake(Vec3(500.0, 0.0, -5.0), 10.0, 0.0, 0.0, 0.0)
    update_snowflakes(WinterBackground([left, right]), 0.1, 0.0, 800.0, 600.0)
    assert left.position.x == 800.0 / 2.0 + 20.0
    assert right.position.x == -800.0 / 2.0 - 20.0


def test_flakes_stay_inside_wrapped_bounds():
    background = spawn_winter_background()
    for step in range(200):
        update_snowflakes(background, 0.1, step * 0.1, 800.0, 600.0)
    for flake in background.snowflakes:
        assert -320.0 <= flake.position.y <= 320.0
        assert -420.0 <= flake.position.x <= 420.0