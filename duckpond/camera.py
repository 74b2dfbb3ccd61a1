"""A camera that follows the ducks still on the platform."""

from __future__ import annotations

from dataclasses import dataclass

from duckpond.components import PLATFORM_HEIGHT, Vec3
from duckpond.world import CAMERA_START, World

PLATFORM_TOLERANCE = 2.0
CAMERA_SMOOTHING = 0.001
MIN_SPREAD = 10.0
HEIGHT_MARGIN = 10.0
DISTANCE_MARGIN = 15.0


@dataclass
class Camera:
    """Where the camera sits and the point it looks at."""

    translation: Vec3 = CAMERA_START
    focus: Vec3 = Vec3.ZERO

    @property
    def direction(self) -> Vec3:
        """Unit vector from the camera toward its focus."""
        return (self.focus - self.translation).normalize()


def update_camera_position(camera: Camera | None, world: World, dt: float) -> None:
    """Drift the camera toward a view over every duck still near the platform."""
    if camera is None:
        return
    positions = [
        duck.body.translation
        for duck in world.ducks
        if duck.player is not None or duck.enemy is not None
    ]
    active = [pos for pos in positions if pos.y >= PLATFORM_HEIGHT - PLATFORM_TOLERANCE]
    if not active:
        return

    total = Vec3.ZERO
    for pos in active:
        total = total + pos
    center = total / len(active)
    max_distance = max(pos.distance(center) for pos in active)

    spread = max(max_distance, MIN_SPREAD)
    target = Vec3(center.x, spread + HEIGHT_MARGIN, center.z + spread + DISTANCE_MARGIN)
    camera.translation = camera.translation.lerp(target, dt * CAMERA_SMOOTHING)
    camera.focus = center