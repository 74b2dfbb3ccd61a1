"""Entities on the pond: duck bodies, the platform and a small physics step."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from itertools import combinations
from typing import Protocol

from duckpond.components import (
    PLATFORM_HEIGHT,
    ActivePowerUp,
    BearScore,
    DuckScore,
    Enemy,
    EnemyState,
    EnergyBoost,
    Player,
    Vec3,
)

RGB = tuple[float, float, float]

GROUP_1 = 0b01
GROUP_2 = 0b10

GRAVITY = Vec3(0.0, -9.81, 0.0)

PLATFORM_RADIUS = 15.0
PLATFORM_THICKNESS = 1.0
PLATFORM_CENTER_Y = PLATFORM_HEIGHT
PLATFORM_COLOR: RGB = (0.3, 0.5, 0.3)
RIM_RADIUS = PLATFORM_RADIUS + 0.1
RIM_CENTER_Y = 5.6
RIM_THICKNESS = 0.2
RIM_COLOR: RGB = (0.8, 0.6, 0.2)
PLATFORM_TOP = RIM_CENTER_Y + RIM_THICKNESS / 2.0
PLATFORM_BOTTOM = PLATFORM_CENTER_Y - PLATFORM_THICKNESS / 2.0

LIGHT_POSITION = Vec3(-15.0, 20.0, 15.0)
CAMERA_START = Vec3(-15.0, 20.0, 15.0)

ENEMY_SPAWN_POSITIONS: tuple[tuple[float, float], ...] = (
    (-8.0, -8.0),
    (-8.0, 8.0),
    (8.0, -8.0),
    (8.0, 8.0),
    (0.0, -8.0),
    (0.0, 8.0),
)
ENEMY_COLOR: RGB = (0.8, 0.2, 0.2)
BILL_COLOR: RGB = (0.8, 0.6, 0.0)


class Sensor(Protocol):
    """Anything ducks can touch without being pushed: it has a centre and a half size."""

    position: Vec3
    half_extent: float


@dataclass(frozen=True)
class DuckParams:
    """Shape, colours and spawn point of one duck."""

    body_radius: float
    head_radius: float
    bill_length: float
    body_offset: Vec3
    head_offset: Vec3
    bill_offset: Vec3
    base_color: RGB
    bill_color: RGB
    position: Vec3
    is_player: bool


@dataclass
class Body:
    """A dynamic rigid body with rotation locked about the X and Z axes."""

    translation: Vec3
    radius: float
    membership: int
    filter: int
    linvel: Vec3 = Vec3.ZERO
    angvel: Vec3 = Vec3.ZERO
    scale: Vec3 = Vec3.ONE
    linear_damping: float = 0.1
    angular_damping: float = 0.5


@dataclass(eq=False)
class Duck:
    """One duck entity: its body plus whichever game parts it carries."""

    params: DuckParams
    body: Body
    player: Player | None = None
    enemy: Enemy | None = None
    boost: EnergyBoost | None = None
    bear_score: BearScore | None = None
    duck_score: DuckScore | None = None
    active_powerup: ActivePowerUp | None = None


@dataclass(frozen=True)
class CollisionEvent:
    """Two things began (``started``) or stopped touching."""

    first: object
    second: object
    started: bool = True


def _dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def _groups_interact(a: Body, b: Body) -> bool:
    return bool(a.membership & b.filter) and bool(b.membership & a.filter)


def _reach(body: Body) -> float:
    return body.radius * body.scale.x


def _rest_on_platform(body: Body) -> None:
    pos = body.translation
    if math.hypot(pos.x, pos.z) > RIM_RADIUS:
        return
    radius = body.radius * body.scale.y
    if pos.y < PLATFORM_BOTTOM or pos.y - radius >= PLATFORM_TOP:
        return
    body.translation = Vec3(pos.x, PLATFORM_TOP + radius, pos.z)
    if body.linvel.y < 0.0:
        body.linvel = Vec3(body.linvel.x, 0.0, body.linvel.z)


def _separate(a: Body, b: Body) -> bool:
    """Push two overlapping bodies apart; report whether they overlapped."""
    delta = a.translation - b.translation
    distance = delta.length()
    reach = _reach(a) + _reach(b)
    if distance >= reach:
        return False
    normal = delta / distance if distance > 0.0 else Vec3(1.0, 0.0, 0.0)
    push = normal * ((reach - distance) / 2.0)
    a.translation = a.translation + push
    b.translation = b.translation - push
    approach = _dot(a.linvel - b.linvel, normal)
    if approach < 0.0:
        impulse = normal * approach
        a.linvel = a.linvel - impulse
        b.linvel = b.linvel + impulse
    return True


class World:
    """All ducks and sensors in play, with a simple physics step."""

    def __init__(self) -> None:
        self.ducks: list[Duck] = []
        self.sensors: list[Sensor] = []
        self._contacts: dict[tuple[int, int], tuple[object, object]] = {}

    def players(self) -> list[Duck]:
        return [duck for duck in self.ducks if duck.player is not None]

    def enemies(self) -> list[Duck]:
        return [duck for duck in self.ducks if duck.enemy is not None]

    def add(self, duck: Duck) -> Duck:
        self.ducks.append(duck)
        return duck

    def clear(self) -> None:
        """Remove every duck and sensor."""
        self.ducks.clear()
        self.sensors.clear()
        self._contacts.clear()

    def step_physics(self, dt: float) -> list[CollisionEvent]:
        """Advance all bodies by ``dt`` seconds and return contact changes."""
        if dt < 0:
            raise ValueError(f"cannot step physics by a negative time: {dt}")
        for duck in self.ducks:
            body = duck.body
            linvel = (body.linvel + GRAVITY * dt) * (1.0 / (1.0 + dt * body.linear_damping))
            spin = body.angvel.y / (1.0 + dt * body.angular_damping)
            body.linvel = linvel
            body.angvel = Vec3(0.0, spin, 0.0)
            body.translation = body.translation + linvel * dt
            _rest_on_platform(body)

        touching: dict[tuple[int, int], tuple[object, object]] = {}
        for a, b in combinations(self.ducks, 2):
            if _groups_interact(a.body, b.body) and _separate(a.body, b.body):
                touching[(id(a), id(b))] = (a, b)
        for duck in self.ducks:
            for sensor in self.sensors:
                gap = duck.body.translation.distance(sensor.position)
                if gap < _reach(duck.body) + sensor.half_extent:
                    touching[(id(duck), id(sensor))] = (duck, sensor)

        events = [
            CollisionEvent(*pair, started=True)
            for key, pair in touching.items()
            if key not in self._contacts
        ]
        events.extend(
            CollisionEvent(*pair, started=False)
            for key, pair in self._contacts.items()
            if key not in touching
        )
        self._contacts = touching
        return events


def spawn_duck(world: World, params: DuckParams) -> Duck:
    """Create a duck body from ``params`` and add it to ``world``."""
    if params.is_player:
        membership, filter_ = GROUP_1, GROUP_1 | GROUP_2
    else:
        membership, filter_ = GROUP_2, GROUP_1 | GROUP_2
    body = Body(
        translation=params.position + params.body_offset,
        radius=params.body_radius,
        membership=membership,
        filter=filter_,
    )
    return world.add(Duck(params=params, body=body))


def spawn_enemies(world: World, rng: random.Random | None = None) -> list[Duck]:
    """Spawn the six enemy ducks at their fixed starting points."""
    rng = rng or random.Random()
    spawned = []
    for number, (x, z) in enumerate(ENEMY_SPAWN_POSITIONS, start=1):
        enemy = Enemy(health=rng.uniform(75.0, 150.0), state=EnemyState.CHASE)
        duck = spawn_duck(
            world,
            DuckParams(
                body_radius=0.5,
                head_radius=0.4,
                bill_length=0.4,
                body_offset=Vec3(0.0, 0.0, 0.0),
                head_offset=Vec3(0.0, 0.7, 0.0),
                bill_offset=Vec3(0.2, 0.0, 0.0),
                base_color=ENEMY_COLOR,
                bill_color=BILL_COLOR,
                position=Vec3(x, PLATFORM_HEIGHT + 2.0, z),
                is_player=False,
            ),
        )
        duck.enemy = enemy
        duck.duck_score = DuckScore(f"Enemy {number}")
        duck.boost = EnergyBoost()
        spawned.append(duck)
    return spawned