"""Enemy ducks: chasing, patrolling, falling off and coming back."""

from __future__ import annotations

import random

from duckpond.components import PLATFORM_HEIGHT, Enemy, EnemyState, Vec3
from duckpond.world import Body, Duck, World

FALL_THRESHOLD = -5.0
RESPAWN_POSITION = Vec3(0.0, PLATFORM_HEIGHT + 2.0, 0.0)
FALL_ACCELERATION = 30.0

BASE_MOVEMENT_FORCE = 25.0
MAX_SPEED = 12.0
FRICTION = 0.97

CHASE_CHANCE = 0.95
GIVE_UP_CHANCE = 0.15


def handle_enemy_falls(world: World, dt: float) -> None:
    """Pull falling enemies down, mark those that dropped off and respawn them.

    Only enemies that keep a bear score take part; each fall costs one point.
    """
    for duck in world.enemies():
        enemy, score = duck.enemy, duck.bear_score
        if enemy is None or score is None:
            continue
        body = duck.body

        if body.translation.y < PLATFORM_HEIGHT and not enemy.is_fallen:
            body.linvel = body.linvel - Vec3(0.0, FALL_ACCELERATION * dt, 0.0)

        if body.translation.y < FALL_THRESHOLD and not enemy.is_fallen:
            enemy.is_fallen = True
            enemy.state = EnemyState.FALLEN
            enemy.respawn_timer.reset()
            score.value -= 1
            pos = body.translation
            body.translation = Vec3(pos.x, FALL_THRESHOLD, pos.z)
            body.linvel = Vec3.ZERO
            body.angvel = Vec3.ZERO

        if enemy.is_fallen and enemy.respawn_timer.tick(dt).finished:
            enemy.is_fallen = False
            enemy.state = EnemyState.PATROL
            body.translation = RESPAWN_POSITION
            body.linvel = Vec3.ZERO
            body.angvel = Vec3.ZERO


def _next_state(enemy: Enemy, rng: random.Random) -> EnemyState:
    if enemy.state is EnemyState.PATROL:
        if rng.random() < CHASE_CHANCE:
            return EnemyState.CHASE
        enemy.target_position = Enemy.random_platform_position(rng)
        return EnemyState.PATROL
    if enemy.state is EnemyState.CHASE:
        if rng.random() < GIVE_UP_CHANCE:
            enemy.target = None
            enemy.target_position = Enemy.random_platform_position(rng)
            return EnemyState.PATROL
        return EnemyState.CHASE
    return EnemyState.PATROL


def _steer(body: Body, target: Vec3, dt: float) -> None:
    direction = (target - body.translation).normalize()
    linvel = (body.linvel + direction * (BASE_MOVEMENT_FORCE * dt)) * FRICTION
    if linvel.length() > MAX_SPEED:
        linvel = linvel.normalize() * MAX_SPEED
    body.linvel = linvel


def _chase_target(enemy: Enemy, player: Duck, enemies: list[Duck]) -> Vec3 | None:
    target = enemy.target
    if target is None:
        enemy.target = player
        return player.body.translation
    for other in enemies:
        if other is target:
            return other.body.translation
    if target is player:
        return player.body.translation
    return None


def enemy_behavior(world: World, dt: float, rng: random.Random | None = None) -> None:
    """Switch enemy states on their timers and steer them toward their goals.

    Nothing happens unless there is exactly one player duck.
    """
    rng = rng or random.Random()
    players = [duck for duck in world.players() if duck.enemy is None]
    if len(players) != 1:
        return
    player = players[0]
    enemies = world.enemies()

    for duck in enemies:
        enemy = duck.enemy
        if enemy is None or duck.boost is None or enemy.is_fallen:
            continue

        enemy.state_timer.tick(dt)
        if enemy.state_timer.just_finished:
            enemy.state = _next_state(enemy, rng)

        if enemy.state is EnemyState.CHASE:
            target_pos = _chase_target(enemy, player, enemies)
            if target_pos is not None:
                _steer(duck.body, target_pos, dt)
        elif enemy.state is EnemyState.PATROL:
            if enemy.target_position is None:
                enemy.target_position = Enemy.random_platform_position(rng)
            _steer(duck.body, enemy.target_position, dt)