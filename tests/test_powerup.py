import random

import pytest

from duckpond.components import ActivePowerUp, PowerUpType, Vec3
from duckpond.player import spawn_player
from duckpond.powerup import (
    COIN_HEIGHT,
    COIN_LIFETIME,
    GROW_FACTOR,
    POWERUP_SECONDS,
    SHRINK_FACTOR,
    CoinSpawner,
    PowerUpCoin,
    apply_powerup_effect,
    apply_powerup_effects,
    collect_powerup_coin,
    remove_expired_powerup_coins,
    spawn_random_powerup_coin,
)
from duckpond.world import CollisionEvent, World, spawn_enemies


def test_apply_powerup_effect_starts_grow():
    active = ActivePowerUp()
    apply_powerup_effect(active, PowerUpType.GROW)
    assert active.grow.power_type is PowerUpType.GROW
    assert active.grow.duration.duration == POWERUP_SECONDS
    assert active.shrink is None


def test_apply_powerup_effect_does_not_restart_running_one():
    active = ActivePowerUp()
    apply_powerup_effect(active, PowerUpType.SHRINK)
    first = active.shrink
    first.duration.tick(1.0)
    apply_powerup_effect(active, PowerUpType.SHRINK)
    assert active.shrink is first
    assert active.shrink.duration.elapsed == 1.0


def test_grow_scales_player_then_wears_off():
    world = World()
    duck = spawn_player(world)
    apply_powerup_effect(duck.active_powerup, PowerUpType.GROW)
    apply_powerup_effects(world, 1.0)
    assert duck.player.current_scale == duck.player.base_scale * GROW_FACTOR
    assert duck.body.scale == duck.player.current_scale
    apply_powerup_effects(world, POWERUP_SECONDS)
    assert duck.active_powerup.grow is None
    assert duck.body.scale == duck.player.base_scale


def test_shrink_scales_player_down():
    world = World()
    duck = spawn_player(world)
    apply_powerup_effect(duck.active_powerup, PowerUpType.SHRINK)
    apply_powerup_effects(world, 0.5)
    assert duck.body.scale == duck.player.base_scale * SHRINK_FACTOR


def test_first_tick_only_creates_timer():
    world = World()
    spawner = CoinSpawner()
    coin = spawn_random_powerup_coin(world, spawner, 0.0, random.Random(3))
    assert coin is None
    assert world.sensors == []
    assert 2.0 <= spawner.timer.duration <= 6.0


def test_coin_spawns_when_timer_runs_out():
    world = World()
    spawner = CoinSpawner()
    coin = spawn_random_powerup_coin(world, spawner, 10.0, random.Random(3))
    assert world.sensors == [coin]
    assert coin.position.y == COIN_HEIGHT
    assert -5.0 <= coin.position.x <= 5.0
    assert -5.0 <= coin.position.z <= 5.0
    assert 4.0 <= spawner.timer.duration <= 8.0
    assert spawner.timer.elapsed == 0.0


def test_no_more_than_two_coins():
    world = World()
    world.sensors.extend(
        PowerUpCoin(PowerUpType.GROW, Vec3(0.0, COIN_HEIGHT, 0.0)) for _ in range(2)
    )
    spawner = CoinSpawner()
    coin = spawn_random_powerup_coin(world, spawner, 10.0, random.Random(3))
    assert coin is None
    assert len(world.sensors) == 2


def test_player_collects_coin_and_gains_power():
    world = World()
    player = spawn_player(world)
    coin = PowerUpCoin(PowerUpType.SHRINK, Vec3(0.0, COIN_HEIGHT, 0.0))
    world.sensors.append(coin)
    collected = collect_powerup_coin(world, [CollisionEvent(player, coin)])
    assert collected == [coin]
    assert world.sensors == []
    assert player.active_powerup.shrink.power_type is PowerUpType.SHRINK


def test_enemy_removes_coin_without_effect():
    world = World()
    player = spawn_player(world)
    enemy = spawn_enemies(world, random.Random(0))[0]
    coin = PowerUpCoin(PowerUpType.GROW, Vec3(0.0, COIN_HEIGHT, 0.0))
    world.sensors.append(coin)
    collect_powerup_coin(world, [CollisionEvent(coin, enemy)])
    assert world.sensors == []
    assert player.active_powerup.grow is None


def test_ended_contacts_are_ignored():
    world = World()
    player = spawn_player(world)
    coin = PowerUpCoin(PowerUpType.GROW, Vec3(0.0, COIN_HEIGHT, 0.0))
    world.sensors.append(coin)
    collected = collect_powerup_coin(world, [CollisionEvent(player, coin, started=False)])
    assert collected == []
    assert world.sensors == [coin]


def test_contact_through_physics_step():
    world = World()
    player = spawn_player(world)
    coin = PowerUpCoin(PowerUpType.GROW, player.body.translation)
    world.sensors.append(coin)
    events = world.step_physics(0.0)
    collect_powerup_coin(world, events)
    assert world.sensors == []
    assert player.active_powerup.grow is not None
    assert player.active_powerup.grow.power_type is PowerUpType.GROW


def test_coins_expire_after_lifetime():
    world = World()
    old = PowerUpCoin(PowerUpType.GROW, Vec3(0.0, COIN_HEIGHT, 0.0))
    world.sensors.append(old)
    remove_expired_powerup_coins(world, COIN_LIFETIME - 1.0)
    assert world.sensors == [old]
    expired = remove_expired_powerup_coins(world, 1.0)
    assert expired == [old]
    assert world.sensors == []


def test_collect_without_player_raises():
    world = World()
    player = spawn_player(world)
    coin = PowerUpCoin(PowerUpType.GROW, Vec3(0.0, COIN_HEIGHT, 0.0))
    world.sensors.append(coin)
    second = spawn_player(world)
    with pytest.raises(LookupError):
        collect_powerup_coin(world, [CollisionEvent(player, coin), CollisionEvent(second, coin)])