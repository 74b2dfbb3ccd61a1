"""Plain data used by the game: vectors, timers, input state and entity parts."""

from __future__ import annotations

import math
import random
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import ClassVar, Hashable

PLATFORM_HEIGHT = 5.0
WEAK_THRESHOLD = 30.0


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vec3]
    ONE: ClassVar[Vec3]
    Y: ClassVar[Vec3]

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; all components are NaN for a zero vector."""
        length = self.length()
        if length == 0.0:
            nan = float("nan")
            return Vec3(nan, nan, nan)
        return Vec3(self.x / length, self.y / length, self.z / length)

    def distance(self, other: Vec3) -> float:
        return (self - other).length()

    def lerp(self, other: Vec3, t: float) -> Vec3:
        return self + (other - self) * t

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec3:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec3:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Vec3(self.x / divisor, self.y / divisor, self.z / divisor)


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)


class TimerMode(Enum):
    ONCE = auto()
    REPEATING = auto()


@dataclass
class Timer:
    """A countdown measured in seconds, advanced explicitly with ``tick``."""

    duration: float
    mode: TimerMode = TimerMode.ONCE
    elapsed: float = field(default=0.0, init=False)
    finished: bool = field(default=False, init=False)
    times_finished_this_tick: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.duration < 0 or math.isnan(self.duration):
            raise ValueError(f"timer duration must be non-negative, got {self.duration}")

    @property
    def just_finished(self) -> bool:
        """True only for the tick on which the timer completed."""
        return self.times_finished_this_tick > 0

    def tick(self, delta: float) -> Timer:
        """Advance by ``delta`` seconds and return the timer itself."""
        if delta < 0:
            raise ValueError(f"cannot tick a timer by a negative amount: {delta}")
        if self.mode is TimerMode.ONCE and self.finished:
            self.times_finished_this_tick = 0
            return self
        self.elapsed += delta
        self.finished = self.elapsed >= self.duration
        if not self.finished:
            self.times_finished_this_tick = 0
        elif self.mode is TimerMode.REPEATING:
            if self.duration == 0:
                self.times_finished_this_tick = 1
                self.elapsed = 0.0
            else:
                self.times_finished_this_tick = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
        else:
            self.times_finished_this_tick = 1
            self.elapsed = self.duration
        return self

    def reset(self) -> None:
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0


class Input:
    """Held keys plus the keys pressed or released during the current frame.

    Keys are any hashable value; the game uses lower-case names such as
    ``"space"``, ``"escape"``, ``"w"``, ``"a"``, ``"s"`` and ``"d"``.
    """

    def __init__(self) -> None:
        self._held: set[Hashable] = set()
        self._just_pressed: set[Hashable] = set()
        self._just_released: set[Hashable] = set()

    def press(self, key: Hashable) -> None:
        if key not in self._held:
            self._held.add(key)
            self._just_pressed.add(key)

    def release(self, key: Hashable) -> None:
        if key in self._held:
            self._held.discard(key)
            self._just_released.add(key)

    def pressed(self, key: Hashable) -> bool:
        return key in self._held

    def just_pressed(self, key: Hashable) -> bool:
        return key in self._just_pressed

    def just_released(self, key: Hashable) -> bool:
        return key in self._just_released

    def clear_frame(self) -> None:
        """Forget this frame's presses and releases; held keys stay held."""
        self._just_pressed.clear()
        self._just_released.clear()


@dataclass
class EnergyBoost:
    energy: float = 1.0
    is_boosting: bool = False
    cooldown_timer: Timer = field(default_factory=lambda: Timer(1.0, TimerMode.ONCE))
    recharge_timer: Timer = field(default_factory=lambda: Timer(2.0, TimerMode.ONCE))


class EnemyState(Enum):
    PATROL = auto()
    CHASE = auto()
    FALLEN = auto()


@dataclass
class Enemy:
    state: EnemyState = EnemyState.PATROL
    target_position: Vec3 | None = None
    state_timer: Timer = field(default_factory=lambda: Timer(1.5, TimerMode.REPEATING))
    is_fallen: bool = False
    respawn_timer: Timer = field(default_factory=lambda: Timer(2.0, TimerMode.ONCE))
    health: float = 100.0
    target: object | None = None
    target_timer: Timer = field(default_factory=lambda: Timer(1.0, TimerMode.REPEATING))

    @staticmethod
    def random_platform_position(rng: random.Random | None = None) -> Vec3:
        """A random point hovering above the platform."""
        rng = rng or random.Random()
        x = rng.uniform(-8.0, 8.0)
        z = rng.uniform(-8.0, 8.0)
        return Vec3(x, PLATFORM_HEIGHT + 2.0, z)

    def is_weak(self) -> bool:
        return self.health <= WEAK_THRESHOLD


@dataclass
class Player:
    speed: float
    base_scale: Vec3 = Vec3.ONE
    current_scale: Vec3 | None = None

    def __post_init__(self) -> None:
        if self.current_scale is None:
            self.current_scale = self.base_scale


class PowerUpType(Enum):
    GROW = auto()
    SHRINK = auto()


@dataclass
class PowerUp:
    """An active power-up; ``seconds`` sets how long its one-shot timer runs."""

    power_type: PowerUpType
    seconds: InitVar[float]
    duration: Timer = field(init=False)

    def __post_init__(self, seconds: float) -> None:
        self.duration = Timer(seconds, TimerMode.ONCE)


@dataclass
class ActivePowerUp:
    grow: PowerUp | None = None
    shrink: PowerUp | None = None


@dataclass
class BearScore:
    name: str
    value: int = 3


@dataclass
class DuckScore:
    name: str
    value: int = 0


class MenuButtonAction(Enum):
    PLAY = auto()
    SETTINGS = auto()
    QUIT = auto()
    BACK = auto()
    SECRET = auto()
    TEST_WIN = auto()


class GameOverButtonAction(Enum):
    RESTART = auto()
    MAIN_MENU = auto()


class PauseButtonAction(Enum):
    RESUME = auto()
    MAIN_MENU = auto()
    QUIT = auto()


@dataclass
class GameSettings:
    paused: bool = False


@dataclass
class PauseState:
    transitioning_to_pause: bool = False
    was_paused: bool = False