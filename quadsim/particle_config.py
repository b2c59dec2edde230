"""Configuration types for particle emitters: curves, colours, shapes and atlases."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from itertools import pairwise
from typing import Any

from quadsim.geometry import Vec2


class Interpolation(Enum):
    """How the points between a curve's key points are produced."""

    LINEAR = "linear"
    BEZIER = "bezier"


@dataclass(frozen=True)
class BatchedCurve:
    """A curve sampled at even steps, ready for fast lookups."""

    points: tuple[float, ...]

    def get(self, t: float) -> float:
        """Value at t in 0..1, interpolated between neighbouring samples."""
        if not self.points:
            raise ValueError("cannot sample an empty curve")
        last = len(self.points) - 1
        t_scaled = t * len(self.points)
        previous_ix = min(max(int(t_scaled), 0), last)
        next_ix = min(previous_ix + 1, last)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """A piecewise curve given by (x, y) key points with x in 0..1."""

    points: list[tuple[float, float]] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        """Sample the curve every 1/resolution along x."""
        if self.interpolation is Interpolation.BEZIER:
            raise ValueError("bezier interpolation is not supported")
        step = 1.0 / self.resolution
        x = 0.0
        samples: list[float] = []
        for (start_x, start_y), (end_x, end_y) in pairwise(self.points):
            while x <= end_x:
                t = (x - start_x) / (end_x - start_x)
                samples.append(start_y + (end_y - start_y) * t)
                x += step
        return BatchedCurve(tuple(samples))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels in 0..1."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    def lerp(self, other: Color, t: float) -> Color:
        """Linear blend: self at t=0, other at t=1."""
        return Color(
            *(mine * (1.0 - t) + theirs * t for mine, theirs in zip(self, other))
        )


WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class ColorCurve:
    """Colour over a particle's life: start, mid-life and end."""

    start: Color = WHITE
    mid: Color = WHITE
    end: Color = WHITE

    def at(self, t: float) -> Color:
        """Colour at life fraction t in 0..1."""
        if t < 0.5:
            return self.start.lerp(self.mid, t * 2.0)
        return self.mid.lerp(self.end, (t - 0.5) * 2.0)


class EmissionShape(ABC):
    """Region inside which particles are spawned, relative to the emitter."""

    @abstractmethod
    def random_point(self, rng: random.Random) -> Vec2:
        """A random spawn offset inside the region."""


@dataclass(frozen=True)
class PointEmission(EmissionShape):
    """All particles spawn at the emitter position."""

    def random_point(self, rng: random.Random) -> Vec2:
        return Vec2(0.0, 0.0)


@dataclass(frozen=True)
class RectEmission(EmissionShape):
    """Particles spawn inside a rectangle centred on the emitter."""

    width: float
    height: float

    def random_point(self, rng: random.Random) -> Vec2:
        return Vec2(
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )


@dataclass(frozen=True)
class SphereEmission(EmissionShape):
    """Particles spawn uniformly inside a disc centred on the emitter."""

    radius: float

    def random_point(self, rng: random.Random) -> Vec2:
        ro = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
        phi = rng.uniform(0.0, math.pi * 2.0)
        return Vec2(ro * math.cos(phi), ro * math.sin(phi))


class ParticleShape(ABC):
    """Geometry of one particle: vertices of (x, y, z, u, v, r, g, b, a) and indices."""

    @abstractmethod
    def mesh(self) -> tuple[tuple[float, ...], tuple[int, ...]]:
        """Flat vertex data and triangle indices."""


_WHITE_RGBA = (1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class RectangleParticle(ParticleShape):
    """A unit square from -1 to 1."""

    def mesh(self) -> tuple[tuple[float, ...], tuple[int, ...]]:
        vertices = (
            -1.0, -1.0, 0.0, 0.0, 0.0, *_WHITE_RGBA,
            1.0, -1.0, 0.0, 1.0, 0.0, *_WHITE_RGBA,
            1.0, 1.0, 0.0, 1.0, 1.0, *_WHITE_RGBA,
            -1.0, 1.0, 0.0, 0.0, 1.0, *_WHITE_RGBA,
        )
        return vertices, (0, 1, 2, 0, 2, 3)


@dataclass(frozen=True)
class CircleParticle(ParticleShape):
    """A unit disc built as a triangle fan."""

    subdivisions: int

    def mesh(self) -> tuple[tuple[float, ...], tuple[int, ...]]:
        vertices: list[float] = [0.0, 0.0, 0.0, 0.0, 0.0, *_WHITE_RGBA]
        indices: list[int] = []
        for i in range(self.subdivisions + 1):
            angle = i / self.subdivisions * math.pi * 2.0
            rx, ry = math.cos(angle), math.sin(angle)
            vertices.extend((rx, ry, 0.0, rx, ry, *_WHITE_RGBA))
            if i != self.subdivisions:
                indices.extend((0, i + 1, i + 2))
        return tuple(vertices), tuple(indices)


@dataclass(frozen=True)
class MeshParticle(ParticleShape):
    """A user-supplied mesh."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]

    def mesh(self) -> tuple[tuple[float, ...], tuple[int, ...]]:
        return tuple(self.vertices), tuple(self.indices)


@dataclass(frozen=True)
class ParticleMaterial:
    """Custom vertex and fragment shader sources for particles."""

    vertex: str
    fragment: str


class BlendMode(Enum):
    """How overlapping particles are combined."""

    ALPHA = "alpha"
    ADDITIVE = "additive"


@dataclass(frozen=True)
class AtlasConfig:
    """Sprite-sheet layout: n columns, m rows and the frame range to animate."""

    n: int
    m: int
    start_index: int
    end_index: int

    @classmethod
    def from_range(cls, n: int, m: int, start: int | None = None,
                   end: int | None = None, inclusive: bool = False) -> AtlasConfig:
        """Build from a frame range; an open end runs to n * m."""
        start_index = 0 if start is None else start
        if end is None:
            end_index = n * m
        elif inclusive:
            end_index = end - 1
        else:
            end_index = end
        return cls(n, m, start_index, end_index)


@dataclass
class EmitterConfig:
    """All the knobs of a particle emitter."""

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=PointEmission)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = field(default_factory=RectangleParticle)
    emitting: bool = True
    initial_direction: Vec2 = Vec2(0.0, -1.0)
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Curve | None = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Vec2 = Vec2(0.0, 0.0)
    texture: Any = None
    atlas: AtlasConfig | None = None
    material: ParticleMaterial | None = None
    post_processing: bool = False