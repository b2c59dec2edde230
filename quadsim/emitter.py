"""Particle emitters: spawning, ageing and animating particles over time."""

from __future__ import annotations

import dataclasses
import math
import random
from dataclasses import dataclass, field

from quadsim.geometry import Vec2
from quadsim.particle_config import (
    BatchedCurve,
    BlendMode,
    Color,
    EmitterConfig,
)

MAX_PARTICLES = 10000
CACHE_DEFAULT_SIZE = 10


@dataclass
class Particle:
    """One live particle: what is drawn plus the state that drives it."""

    position: Vec2
    size: float
    color: Color
    velocity: Vec2
    lifetime: float
    initial_size: float
    index: float = 0.0
    uv: tuple[float, float, float, float] = (1.0, 1.0, 0.0, 0.0)
    life: float = 0.0
    lived: float = 0.0
    frame: int = 0

    @property
    def expired(self) -> bool:
        return self.lived > self.lifetime


def _rotate(vector: Vec2, angle: float) -> Vec2:
    cos, sin = math.cos(angle), math.sin(angle)
    return Vec2(vector.x * cos - vector.y * sin, vector.x * sin + vector.y * cos)


def _life_fraction(particle: Particle) -> float:
    if particle.lifetime == 0.0:
        return 1.0
    return particle.lived / particle.lifetime


class Emitter:
    """Spawns and simulates particles according to an EmitterConfig."""

    def __init__(self, config: EmitterConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.position = Vec2(0.0, 0.0)
        self.particles: list[Particle] = []
        self.particles_spawned = 0
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.blend_mode: BlendMode = config.blend_mode
        self.mesh = config.shape.mesh()
        self.mesh_dirty = False
        self.batched_size_curve: BatchedCurve | None = None
        self.rebuild_size_curve()

    def reset(self) -> None:
        """Drop all particles and restart the emission cycle."""
        self.particles.clear()
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.particles_spawned = 0

    def rebuild_size_curve(self) -> None:
        """Resample the size curve after the config's curve changed."""
        curve = self.config.size_curve
        self.batched_size_curve = curve.batch() if curve is not None else None

    def update_particle_mesh(self) -> None:
        """Rebuild the particle mesh from the config on the next update."""
        self.mesh_dirty = True

    def _random_velocity(self) -> Vec2:
        config = self.config
        spread = config.initial_direction_spread
        angle = self.rng.uniform(-spread / 2.0, spread / 2.0)
        speed = config.initial_velocity - config.initial_velocity * self.rng.uniform(
            0.0, config.initial_velocity_randomness
        )
        return _rotate(config.initial_direction, angle) * speed

    def _emit_particle(self, offset: Vec2) -> None:
        config = self.config
        offset = offset + config.emission_shape.random_point(self.rng)
        size = config.size - config.size * self.rng.uniform(0.0, config.size_randomness)
        position = offset if config.local_coords else self.position + offset
        index = float(self.particles_spawned)
        self.particles_spawned += 1
        velocity = self._random_velocity()
        lifetime = config.lifetime - config.lifetime * self.rng.uniform(
            0.0, config.lifetime_randomness
        )
        self.particles.append(
            Particle(
                position=position,
                size=size,
                color=config.colors_curve.start,
                velocity=velocity,
                lifetime=lifetime,
                initial_size=size,
                index=index,
            )
        )

    def emit(self, pos: Vec2, n: int) -> None:
        """Immediately emit n particles at pos, ignoring `emitting` and `amount`."""
        for _ in range(n):
            self._emit_particle(pos)
            self.particles_spawned += 1

    def _spawn_count(self) -> int:
        config = self.config
        if config.amount == 0:
            return 0
        gap = (config.lifetime / config.amount) * (1.0 - config.explosiveness)
        if gap < 0.001:
            return config.amount
        return int((self.time_passed - self.last_emit_time) / gap)

    def _animate(self, particle: Particle, dt: float) -> None:
        config = self.config
        particle.velocity = particle.velocity + particle.velocity * (config.linear_accel * dt)
        fraction = _life_fraction(particle)
        particle.color = config.colors_curve.at(fraction)
        particle.position = particle.position + particle.velocity * dt
        scale = 1.0 if self.batched_size_curve is None else self.batched_size_curve.get(fraction)
        particle.size = particle.initial_size * scale
        if particle.lifetime != 0.0:
            particle.life = particle.lived / particle.lifetime
        particle.lived += dt
        particle.velocity = particle.velocity + config.gravity * dt

        atlas = config.atlas
        if atlas is None:
            particle.uv = (0.0, 0.0, 1.0, 1.0)
            return
        if particle.lifetime != 0.0:
            span = atlas.end_index - atlas.start_index
            particle.frame = max(int(particle.lived / particle.lifetime * span), 0) + atlas.start_index
        x = particle.frame % atlas.n
        y = particle.frame // atlas.m
        particle.uv = (x / atlas.n, y / atlas.m, 1.0 / atlas.n, 1.0 / atlas.m)

    def update(self, position: Vec2, dt: float) -> None:
        """Advance the simulation by dt with the emitter placed at position."""
        config = self.config
        self.position = position

        if self.mesh_dirty:
            self.mesh = config.shape.mesh()
            self.mesh_dirty = False
        if config.blend_mode is not self.blend_mode:
            self.blend_mode = config.blend_mode

        if config.emitting:
            self.time_passed += dt
            for _ in range(self._spawn_count()):
                self.last_emit_time = self.time_passed
                if self.particles_spawned < config.amount and len(self.particles) < MAX_PARTICLES:
                    self._emit_particle(Vec2(0.0, 0.0))
                if len(self.particles) >= config.amount:
                    break

        if config.one_shot and self.time_passed > config.lifetime:
            self.time_passed = 0.0
            self.last_emit_time = 0.0
            config.emitting = False

        for particle in self.particles:
            self._animate(particle, dt)

        survivors = [
            p for p in self.particles
            if not (p.expired or p.lived > config.lifetime)
        ]
        self.particles_spawned -= len(self.particles) - len(survivors)
        self.particles = survivors


@dataclass
class _ActiveEmitter:
    emitter: Emitter
    position: Vec2


@dataclass
class EmittersCache:
    """Many short-lived emitters sharing one config, recycled when finished."""

    config: EmitterConfig
    rng: random.Random = field(default_factory=random.Random)
    cached: list[Emitter] = field(init=False)
    active: list[_ActiveEmitter] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        self.cached = [
            Emitter(dataclasses.replace(self.config, emitting=False), self.rng)
            for _ in range(CACHE_DEFAULT_SIZE)
        ]

    def spawn(self, pos: Vec2) -> Emitter:
        """Start an emitter at pos, reusing a cached one where possible."""
        if self.cached:
            emitter = self.cached.pop()
        else:
            emitter = Emitter(dataclasses.replace(self.config), self.rng)
        emitter.mesh_dirty = True
        emitter.config.emitting = True
        emitter.reset()
        self.active.append(_ActiveEmitter(emitter, pos))
        return emitter

    def update(self, dt: float) -> None:
        """Advance every active emitter; finished ones go back to the cache."""
        still_active = []
        for entry in self.active:
            entry.emitter.update(entry.position, dt)
            if entry.emitter.config.emitting:
                still_active.append(entry)
            else:
                self.cached.append(entry.emitter)
        self.active = still_active