"""Player movement, pushes, falling and spawning."""

from __future__ import annotations

from collections.abc import Iterable

from duckpond.components import (
    PLATFORM_HEIGHT,
    ActivePowerUp,
    BearScore,
    EnergyBoost,
    Input,
    Player,
    Vec3,
)
from duckpond.states import GameState
from duckpond.world import BILL_COLOR, CollisionEvent, Duck, DuckParams, World, spawn_duck

FALL_THRESHOLD = -5.0
SPAWN_POSITION = Vec3(0.0, PLATFORM_HEIGHT + 2.0, 0.0)

BASE_MOVEMENT_FORCE = 25.0
MAX_SPEED = 8.0
BOOST_MAX_SPEED = 15.0
FRICTION = 0.9
PUSH_FORCE = 10.0
FALL_ACCELERATION = 30.0
PLAYER_COLOR = (0.2, 0.7, 0.2)
PLAYER_SPEED = 8.0


def player_movement(world: World, keys: Input, dt: float) -> None:
    """Steer players with W/A/S/D, or straight ahead while boosting."""
    for duck in world.players():
        boost = duck.boost
        if boost is None:
            continue
        body = duck.body
        if boost.is_boosting:
            direction = Vec3(0.0, 0.0, -1.0)
        else:
            x = (keys.pressed("d") - keys.pressed("a")) * 1.0
            z = (keys.pressed("s") - keys.pressed("w")) * 1.0
            direction = Vec3(x, 0.0, z)

        if direction != Vec3.ZERO:
            acceleration = BASE_MOVEMENT_FORCE * (5.0 if boost.is_boosting else 1.2)
            body.linvel = body.linvel + direction.normalize() * (acceleration * dt)
        else:
            body.linvel = body.linvel * 0.9

        max_speed = BOOST_MAX_SPEED * 1.2 if boost.is_boosting else MAX_SPEED
        if body.linvel.length() > max_speed:
            body.linvel = body.linvel.normalize() * max_speed


def _position_of(other: object) -> Vec3 | None:
    if isinstance(other, Duck):
        return None if other.player is not None else other.body.translation
    return getattr(other, "position", None)


def handle_collisions(world: World, events: Iterable[CollisionEvent]) -> None:
    """Knock a player away from whatever it has just started touching."""
    players = world.players()
    for event in events:
        if not event.started:
            continue
        if event.first in players:
            player, other = event.first, event.second
        elif event.second in players:
            player, other = event.second, event.first
        else:
            continue
        other_position = _position_of(other)
        if other_position is None:
            continue
        direction = (player.body.translation - other_position).normalize()
        player.body.linvel = player.body.linvel + direction * PUSH_FORCE


def check_fall(world: World, dt: float) -> GameState | None:
    """Pull falling players down and respawn those who fell off.

    Returns GAME_OVER once a player has no points left, otherwise None.
    """
    for duck in world.players():
        score = duck.bear_score
        if score is None:
            continue
        body = duck.body
        if body.translation.y < PLATFORM_HEIGHT:
            body.linvel = body.linvel - Vec3(0.0, FALL_ACCELERATION * dt, 0.0)
        if body.translation.y < FALL_THRESHOLD:
            score.value -= 1
            if score.value <= 0:
                return GameState.GAME_OVER
            body.translation = SPAWN_POSITION
            body.linvel = Vec3.ZERO
            body.angvel = Vec3.ZERO
    return None


def spawn_player(world: World) -> Duck:
    """Add the player's duck at the spawn point with its starting parts."""
    duck = spawn_duck(
        world,
        DuckParams(
            body_radius=0.5,
            head_radius=0.3,
            bill_length=0.4,
            body_offset=Vec3(0.0, 0.0, 0.0),
            head_offset=Vec3(0.0, 0.6, 0.0),
            bill_offset=Vec3(0.2, 0.0, 0.0),
            base_color=PLAYER_COLOR,
            bill_color=BILL_COLOR,
            position=SPAWN_POSITION,
            is_player=True,
        ),
    )
    duck.player = Player(PLAYER_SPEED)
    duck.bear_score = BearScore("Player")
    duck.boost = EnergyBoost()
    duck.active_powerup = ActivePowerUp()
    return duck