"""Energy boost handling for the player and the enemies."""

from __future__ import annotations

import random

from duckpond.components import EnergyBoost, Input
from duckpond.world import World

BOOST_THRESHOLD = 0.95
ENERGY_CONSUMPTION_RATE = 0.4
RECHARGE_RATE = 0.5
MIN_ENERGY_TO_BOOST = 0.1
AI_BOOST_CHANCE = 0.1
BOOST_KEY = "space"


def _update_energy(boost: EnergyBoost, dt: float) -> None:
    if boost.cooldown_timer.tick(dt).finished and boost.is_boosting:
        boost.is_boosting = False

    if boost.is_boosting:
        boost.energy = max(boost.energy - dt * ENERGY_CONSUMPTION_RATE, 0.0)
        if boost.energy <= 0.0:
            boost.is_boosting = False
            boost.cooldown_timer.reset()
            boost.recharge_timer.reset()
    elif boost.recharge_timer.tick(dt).finished:
        boost.energy = min(boost.energy + dt * RECHARGE_RATE, 1.0)


def apply_boost(boost: EnergyBoost) -> None:
    """Start boosting; energy is drained gradually afterwards."""
    boost.is_boosting = True
    boost.cooldown_timer.reset()


def handle_boost(world: World, keys: Input, dt: float) -> None:
    """Drain, recharge and trigger player boosts from the keyboard."""
    for duck in world.players():
        boost = duck.boost
        if boost is None:
            continue
        _update_energy(boost, dt)
        if (
            keys.just_pressed(BOOST_KEY)
            and boost.energy > MIN_ENERGY_TO_BOOST
            and not boost.is_boosting
        ):
            apply_boost(boost)
        if keys.just_released(BOOST_KEY) and boost.is_boosting:
            boost.is_boosting = False
            boost.cooldown_timer.reset()


def handle_ai_boost(world: World, dt: float, rng: random.Random | None = None) -> None:
    """Drain, recharge and randomly trigger enemy boosts."""
    rng = rng or random.Random()
    for duck in world.enemies():
        boost = duck.boost
        if boost is None:
            continue
        _update_energy(boost, dt)
        if (
            boost.energy > BOOST_THRESHOLD
            and not boost.is_boosting
            and rng.random() < AI_BOOST_CHANCE
        ):
            apply_boost(boost)


def boost_fill_percent(world: World) -> float | None:
    """Width of the boost bar in percent, if there is exactly one boosting player."""
    boosts = [duck.boost for duck in world.players() if duck.boost is not None]
    if len(boosts) != 1:
        return None
    return boosts[0].energy * 100.0