"""A first-person camera steered by mouse look and arrow-key movement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

MOVE_SPEED = 0.1
LOOK_SPEED = 0.1
PITCH_LIMIT = 1.5
INITIAL_YAW = 1.18


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; a zero vector raises ValueError."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / length

    def cross(self, other: Vec3) -> Vec3:
        """Right-handed cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


WORLD_UP = Vec3(0.0, 1.0, 0.0)


@dataclass
class FirstPersonCamera:
    """Camera position plus yaw and pitch in radians; the basis follows from them."""

    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    yaw: float = INITIAL_YAW
    pitch: float = 0.0

    @property
    def front(self) -> Vec3:
        """Unit vector the camera looks along."""
        return Vec3(
            math.cos(self.yaw) * math.cos(self.pitch),
            math.sin(self.pitch),
            math.sin(self.yaw) * math.cos(self.pitch),
        ).normalize()

    @property
    def right(self) -> Vec3:
        return self.front.cross(WORLD_UP).normalize()

    @property
    def up(self) -> Vec3:
        return self.right.cross(self.front).normalize()

    @property
    def target(self) -> Vec3:
        """Point one unit ahead of the camera."""
        return self.position + self.front

    def look(self, dx: float, dy: float, dt: float) -> None:
        """Turn by a mouse movement of (dx, dy) over a frame of dt seconds."""
        self.yaw += dx * dt * LOOK_SPEED
        self.pitch += dy * dt * -LOOK_SPEED
        self.pitch = min(max(self.pitch, -PITCH_LIMIT), PITCH_LIMIT)

    def move(self, forward: bool = False, back: bool = False,
             left: bool = False, right: bool = False) -> None:
        """Step along the view direction and its right vector for held keys."""
        front = self.front
        side = self.right
        if forward:
            self.position = self.position + front * MOVE_SPEED
        if back:
            self.position = self.position - front * MOVE_SPEED
        if left:
            self.position = self.position - side * MOVE_SPEED
        if right:
            self.position = self.position + side * MOVE_SPEED