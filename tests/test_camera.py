import pytest

from duckpond.camera import (
    CAMERA_SMOOTHING,
    DISTANCE_MARGIN,
    HEIGHT_MARGIN,
    MIN_SPREAD,
    Camera,
    update_camera_position,
)
from duckpond.components import Vec3
from duckpond.player import spawn_player
from duckpond.world import CAMERA_START, World, spawn_enemies


def test_camera_starts_at_the_scene_start():
    camera = Camera()
    assert camera.translation == CAMERA_START
    assert camera.focus == Vec3.ZERO


def test_none_camera_is_ignored():
    world = World()
    spawn_player(world)
    assert update_camera_position(None, world, 1.0) is None
    assert world.players()[0].body.translation.y > 0.0


def test_empty_world_leaves_camera_alone():
    camera = Camera()
    update_camera_position(camera, World(), 1.0)
    assert camera.translation == CAMERA_START
    assert camera.focus == Vec3.ZERO


def test_fallen_ducks_are_not_followed():
    world = World()
    duck = spawn_player(world)
    duck.body.translation = Vec3(0.0, 0.0, 0.0)
    camera = Camera()
    update_camera_position(camera, world, 1.0)
    assert camera.translation == CAMERA_START


def test_focus_is_center_of_active_ducks():
    world = World()
    player = spawn_player(world)
    enemy = spawn_enemies(world)[0]
    player.body.translation = Vec3(-2.0, 7.0, 0.0)
    enemy.body.translation = Vec3(2.0, 7.0, 0.0)
    camera = Camera()
    update_camera_position(camera, world, 0.0)
    assert camera.focus == Vec3(0.0, 7.0, 0.0)
    assert camera.translation == CAMERA_START


def test_full_step_reaches_target():
    world = World()
    player = spawn_player(world)
    player.body.translation = Vec3(3.0, 7.0, -4.0)
    camera = Camera()
    update_camera_position(camera, world, 1.0 / CAMERA_SMOOTHING)
    assert camera.translation.x == pytest.approx(3.0)
    assert camera.translation.y == pytest.approx(MIN_SPREAD + HEIGHT_MARGIN)
    assert camera.translation.z == pytest.approx(-4.0 + MIN_SPREAD + DISTANCE_MARGIN)


def test_small_step_moves_closer_to_target():
    world = World()
    player = spawn_player(world)
    player.body.translation = Vec3(0.0, 7.0, 0.0)
    camera = Camera()
    target = Camera()
    update_camera_position(target, world, 1.0 / CAMERA_SMOOTHING)
    update_camera_position(camera, world, 1.0)
    before = CAMERA_START.distance(target.translation)
    after = camera.translation.distance(target.translation)
    assert 0.0 < after < before


def test_direction_is_unit_length():
    camera = Camera(translation=Vec3(0.0, 10.0, 10.0), focus=Vec3.ZERO)
    assert camera.direction.length() == pytest.approx(1.0)