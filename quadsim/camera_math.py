"""Angle helpers and the state of a wheel-controlled 2D camera."""

from __future__ import annotations

import math
from dataclasses import dataclass

from quadsim.geometry import Vec2

_FULL_TURN = 360.0


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest rotation in degrees from a0 to a1."""
    da = math.fmod(a1 - a0, _FULL_TURN)
    return math.fmod(2.0 * da, _FULL_TURN) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate from a0 towards a1 along the shortest way round."""
    return a0 + short_angle_dist(a0, a1) * t


def wrap_degrees(angle: float) -> float:
    """Bring an angle that is at most one turn out of range back into 0..360."""
    if angle >= _FULL_TURN:
        return angle - _FULL_TURN
    if angle < 0.0:
        return angle + _FULL_TURN
    return angle


@dataclass
class CameraState:
    """Target, zoom, rotation (degrees) and offset of a 2D camera."""

    target: Vec2 = Vec2(0.0, 0.0)
    zoom: float = 1.0
    rotation: float = 0.0
    smooth_rotation: float = 0.0
    offset: Vec2 = Vec2(0.0, 0.0)

    def apply_wheel(self, y: float, zoom_modifier: bool = False) -> None:
        """Mouse wheel: zoom while the modifier is held, otherwise rotate 10 degrees a notch."""
        if y == 0.0:
            return
        if zoom_modifier:
            self.zoom *= 1.1 ** y
        else:
            self.rotation = wrap_degrees(self.rotation + 10.0 * y)

    def smooth(self) -> float:
        """Move the displayed rotation a tenth of the way towards the target rotation."""
        self.smooth_rotation = angle_lerp(self.smooth_rotation, self.rotation, 0.1)
        return self.smooth_rotation