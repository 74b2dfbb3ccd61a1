"""The snowy background drawn behind the menus."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

from duckpond.components import Vec3

BACKGROUND_COLOR = (0.2, 0.4, 0.8)
BACKGROUND_SIZE = 1000.0
BACKGROUND_DEPTH = -10.0
SNOWFLAKE_DEPTH = -5.0
SNOWFLAKE_COLOR = (1.0, 1.0, 1.0, 0.7)
EDGE_MARGIN = 20.0
DRIFT_FREQUENCY = 1.5
SPIN_RATE = 0.1
FLAKE_SPACING = 50


@dataclass(frozen=True)
class _FlakeRow:
    """A row of flakes laid out left to right, one column per flake."""

    first_x: int
    heights: tuple[int, ...]
    sizes: tuple[int, ...]
    speeds: tuple[int, ...]
    drifts: tuple[int, ...]

    def flakes(self) -> Iterator[tuple[float, float, float, float, float]]:
        columns = zip(self.heights, self.sizes, self.speeds, self.drifts)
        for column, (y, size, speed, drift) in enumerate(columns):
            x = self.first_x + column * FLAKE_SPACING
            yield float(x), float(y), float(size), float(speed), float(drift)


_ROWS = (
    _FlakeRow(
        first_x=-300,
        heights=(300, 250, 350, 200, 280, 320, 270, 330, 290, 310, 260, 340, 280),
        sizes=(10, 8, 12, 7, 9, 11, 10, 8, 13, 7, 9, 11, 10),
        speeds=(50, 40, 60, 45, 55, 35, 50, 65, 40, 55, 45, 60, 50),
        drifts=(5, -3, 7, -4, 6, -8, 4, -5, 9, -3, 6, -7, 5),
    ),
    _FlakeRow(
        first_x=-320,
        heights=(200, 230, 180, 210, 190, 220, 170, 240, 200, 230, 190, 220, 170),
        sizes=(9, 11, 7, 10, 8, 12, 9, 11, 7, 10, 8, 12, 9),
        speeds=(55, 40, 60, 45, 50, 35, 55, 40, 60, 45, 50, 35, 55),
        drifts=(-4, 8, -3, 6, -7, 5, -4, 9, -3, 6, -7, 5, -4),
    ),
    _FlakeRow(
        first_x=-290,
        heights=(100, 130, 80, 110, 90, 120, 70, 140, 100, 130, 80, 110, 90),
        sizes=(11, 7, 10, 8, 12, 9, 11, 7, 10, 8, 12, 9, 11),
        speeds=(40, 60, 45, 50, 35, 55, 40, 60, 45, 50, 35, 55, 40),
        drifts=(8, -3, 6, -7, 5, -4, 9, -3, 6, -7, 5, -4, 8),
    ),
)


@dataclass
class Snowflake:
    """One falling flake, in screen coordinates centred on the window."""

    position: Vec3
    size: float
    speed: float
    drift: float
    time_offset: float
    rotation: float = 0.0


@dataclass
class WinterBackground:
    """A deep blue backdrop with snow falling over it."""

    snowflakes: list[Snowflake] = field(default_factory=list)
    color: tuple[float, float, float] = BACKGROUND_COLOR
    size: float = BACKGROUND_SIZE


def _all_flakes() -> Iterator[tuple[float, float, float, float, float]]:
    for row in _ROWS:
        yield from row.flakes()


def spawn_winter_background() -> WinterBackground:
    """The backdrop with its fixed set of snowflakes."""
    return WinterBackground(
        [
            Snowflake(Vec3(x, y, SNOWFLAKE_DEPTH), size, speed, drift, float(offset))
            for offset, (x, y, size, speed, drift) in enumerate(_all_flakes())
        ]
    )


def update_snowflakes(
    background: WinterBackground,
    dt: float,
    elapsed: float,
    width: float,
    height: float,
) -> None:
    """Let the snow fall and drift for ``dt`` seconds, wrapping at the window edges."""
    top = height / 2.0 + EDGE_MARGIN
    bottom = -height / 2.0 - EDGE_MARGIN
    right = width / 2.0 + EDGE_MARGIN
    left = -width / 2.0 - EDGE_MARGIN

    for flake in background.snowflakes:
        pos = flake.position
        y = pos.y - flake.speed * dt
        phase = (elapsed + flake.time_offset) * DRIFT_FREQUENCY
        x = pos.x + flake.drift * math.sin(phase) * dt
        flake.rotation += SPIN_RATE * dt

        if y < bottom:
            y = top
        if x < left:
            x = right
        elif x > right:
            x = left
        flake.position = Vec3(x, y, pos.z)