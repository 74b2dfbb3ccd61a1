"""Power-up coins: spawning, collecting, expiry and the effects they grant."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass, field

from duckpond.components import ActivePowerUp, PowerUp, PowerUpType, Timer, TimerMode, Vec3
from duckpond.world import CollisionEvent, Duck, World

GROW_FACTOR = 1.5
SHRINK_FACTOR = 0.5
POWERUP_SECONDS = 6.0
COIN_LIFETIME = 10.0
COIN_HEIGHT = 6.0
COIN_HALF_EXTENT = 0.25
COIN_SPREAD = 5.0
MAX_COINS = 2
FIRST_SPAWN_DELAY = (2.0, 6.0)
SPAWN_DELAY = (4.0, 8.0)
COIN_COLORS = {
    PowerUpType.GROW: (1.0, 0.8, 0.0),
    PowerUpType.SHRINK: (0.0, 0.8, 1.0),
}


@dataclass(eq=False)
class PowerUpCoin:
    """A fixed sensor cube floating above the platform."""

    power_type: PowerUpType
    position: Vec3
    lifetime: Timer = field(default_factory=lambda: Timer(COIN_LIFETIME, TimerMode.ONCE))
    half_extent: float = COIN_HALF_EXTENT

    @property
    def color(self) -> tuple[float, float, float]:
        return COIN_COLORS[self.power_type]


@dataclass
class CoinSpawner:
    """The countdown until the next coin; created on first use."""

    timer: Timer | None = None


def _coins(world: World) -> list[PowerUpCoin]:
    return [sensor for sensor in world.sensors if isinstance(sensor, PowerUpCoin)]


def _update_effect(duck: Duck, active: ActivePowerUp, attr: str, factor: float, dt: float) -> None:
    powerup: PowerUp | None = getattr(active, attr)
    if powerup is None or duck.player is None:
        return
    player = duck.player
    if powerup.duration.tick(dt).finished:
        player.current_scale = player.base_scale
        setattr(active, attr, None)
    else:
        player.current_scale = player.base_scale * factor
    duck.body.scale = player.current_scale


def apply_powerup_effects(world: World, dt: float) -> None:
    """Scale players up or down while their power-ups last."""
    for duck in world.players():
        active = duck.active_powerup
        if active is None:
            continue
        _update_effect(duck, active, "grow", GROW_FACTOR, dt)
        _update_effect(duck, active, "shrink", SHRINK_FACTOR, dt)


def spawn_random_powerup_coin(
    world: World,
    spawner: CoinSpawner,
    dt: float,
    rng: random.Random | None = None,
) -> PowerUpCoin | None:
    """Drop a coin above the platform when the timer runs out and fewer than two exist."""
    rng = rng or random.Random()
    existing = len(_coins(world))
    if spawner.timer is None:
        spawner.timer = Timer(rng.uniform(*FIRST_SPAWN_DELAY), TimerMode.ONCE)

    if not spawner.timer.tick(dt).finished or existing >= MAX_COINS:
        return None

    power_type = PowerUpType.GROW if rng.random() < 0.5 else PowerUpType.SHRINK
    x = rng.uniform(-COIN_SPREAD, COIN_SPREAD)
    z = rng.uniform(-COIN_SPREAD, COIN_SPREAD)
    coin = PowerUpCoin(power_type, Vec3(x, COIN_HEIGHT, z))
    world.sensors.append(coin)
    spawner.timer = Timer(rng.uniform(*SPAWN_DELAY), TimerMode.ONCE)
    return coin


def apply_powerup_effect(active: ActivePowerUp, power_type: PowerUpType) -> None:
    """Start a power-up unless one of the same kind is already running."""
    if power_type is PowerUpType.GROW:
        if active.grow is None:
            active.grow = PowerUp(PowerUpType.GROW, POWERUP_SECONDS)
    elif active.shrink is None:
        active.shrink = PowerUp(PowerUpType.SHRINK, POWERUP_SECONDS)


def _is_powered_player(other: object) -> bool:
    return isinstance(other, Duck) and other.player is not None and other.active_powerup is not None


def collect_powerup_coin(world: World, events: Iterable[CollisionEvent]) -> list[PowerUpCoin]:
    """Remove coins touched by ducks; a player's touch grants the coin's power.

    Returns the coins that were collected.
    """
    coins = _coins(world)
    collected: list[PowerUpCoin] = []
    to_apply: PowerUpType | None = None

    for event in events:
        if not event.started:
            continue
        if any(coin is event.first for coin in coins):
            coin, other = event.first, event.second
        elif any(coin is event.second for coin in coins):
            coin, other = event.second, event.first
        else:
            continue
        is_enemy = isinstance(other, Duck) and other.enemy is not None
        if is_enemy or _is_powered_player(other):
            if not any(seen is coin for seen in collected):
                collected.append(coin)
            if _is_powered_player(other):
                to_apply = coin.power_type

    world.sensors[:] = [s for s in world.sensors if not any(s is c for c in collected)]

    if to_apply is not None:
        players = [duck for duck in world.players() if duck.active_powerup is not None]
        if len(players) != 1:
            raise LookupError(f"expected exactly one player with power-ups, found {len(players)}")
        apply_powerup_effect(players[0].active_powerup, to_apply)
    return collected


def remove_expired_powerup_coins(world: World, dt: float) -> list[PowerUpCoin]:
    """Age every coin and remove those whose lifetime is over."""
    expired = [coin for coin in _coins(world) if coin.lifetime.tick(dt).finished]
    world.sensors[:] = [s for s in world.sensors if not any(s is c for c in expired)]
    return expired