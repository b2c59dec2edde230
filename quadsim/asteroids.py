"""Asteroids: a ship, its bullets and asteroids that split when shot."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from quadsim.geometry import Vec2

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0
ASTEROID_COUNT = 10
MAX_SPEED = 5.0
SHOT_COOLDOWN = 0.1
BULLET_LIFETIME = 1.5
BULLET_SPEED = 7.0
TURN_DEGREES = 5.0


def wrap_around(pos: Vec2, width: float, height: float) -> Vec2:
    """Move a point that left the screen to the opposite edge."""
    x, y = pos.x, pos.y
    if x > width:
        x = 0.0
    if x < 0.0:
        x = width
    if y > height:
        y = 0.0
    if y < 0.0:
        y = height
    return Vec2(x, y)


@dataclass
class Ship:
    """The player's ship; `rot` is in degrees, 0 pointing up."""

    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = Vec2(0.0, 0.0)


@dataclass
class Bullet:
    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    pos: Vec2
    vel: Vec2
    rot: float
    rot_speed: float
    size: float
    sides: int
    collided: bool = False


@dataclass
class AsteroidsGame:
    """Game state on a screen of the given size; `update` runs one frame."""

    width: float = 800.0
    height: float = 600.0
    rng: random.Random = field(default_factory=random.Random)
    time: float = 0.0
    ship: Ship = field(init=False)
    bullets: list[Bullet] = field(init=False, default_factory=list)
    asteroids: list[Asteroid] = field(init=False, default_factory=list)
    game_over: bool = field(init=False, default=False)
    last_shot: float = field(init=False)

    def __post_init__(self) -> None:
        self.last_shot = self.time
        self.restart()

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    @property
    def won(self) -> bool:
        """True once every asteroid has been destroyed."""
        return self.game_over and not self.asteroids

    def _spawn_ring(self) -> list[Asteroid]:
        radius = min(self.width, self.height) / 2.0
        size = min(self.width, self.height) / 10.0
        asteroids = []
        for _ in range(ASTEROID_COUNT):
            direction = Vec2(self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0))
            asteroids.append(
                Asteroid(
                    pos=self.center + direction.normalize() * radius,
                    vel=Vec2(self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0)),
                    rot=0.0,
                    rot_speed=self.rng.uniform(-2.0, 2.0),
                    size=size,
                    sides=6,
                )
            )
        return asteroids

    def restart(self) -> None:
        """Put the ship in the centre and surround it with fresh asteroids."""
        self.ship = Ship(pos=self.center)
        self.bullets = []
        self.asteroids = self._spawn_ring()
        self.game_over = False

    def _fragment(self, parent: Asteroid, direction: Vec2) -> Asteroid:
        return Asteroid(
            pos=parent.pos,
            vel=direction.normalize() * self.rng.uniform(1.0, 3.0),
            rot=self.rng.uniform(0.0, 360.0),
            rot_speed=self.rng.uniform(-2.0, 2.0),
            size=parent.size * 0.8,
            sides=parent.sides - 1,
        )

    def update(self, time: float, up: bool = False, left: bool = False,
               right: bool = False, shoot: bool = False) -> bool:
        """Run one frame at the given time with the given controls; returns game over."""
        if self.game_over:
            return True
        ship = self.ship
        rotation = math.radians(ship.rot)
        heading = Vec2(math.sin(rotation), -math.cos(rotation))

        acc = -ship.vel / 10.0
        if up:
            acc = heading / 3.0

        if shoot and time - self.last_shot > SHOT_COOLDOWN:
            self.bullets.append(
                Bullet(
                    pos=ship.pos + heading * SHIP_HEIGHT / 2.0,
                    vel=heading * BULLET_SPEED,
                    shot_at=time,
                )
            )
            self.last_shot = time
        if right:
            ship.rot += TURN_DEGREES
        elif left:
            ship.rot -= TURN_DEGREES

        ship.vel = ship.vel + acc
        if ship.vel.length() > MAX_SPEED:
            ship.vel = ship.vel.normalize() * MAX_SPEED
        ship.pos = wrap_around(ship.pos + ship.vel, self.width, self.height)

        for bullet in self.bullets:
            bullet.pos = bullet.pos + bullet.vel
        for asteroid in self.asteroids:
            asteroid.pos = wrap_around(asteroid.pos + asteroid.vel, self.width, self.height)
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > time]

        fragments: list[Asteroid] = []
        for asteroid in self.asteroids:
            if (asteroid.pos - ship.pos).length() < asteroid.size + SHIP_HEIGHT / 3.0:
                self.game_over = True
                break
            for bullet in self.bullets:
                if (asteroid.pos - bullet.pos).length() < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 4:
                        fragments.append(
                            self._fragment(asteroid, Vec2(bullet.vel.y, -bullet.vel.x))
                        )
                        fragments.append(
                            self._fragment(asteroid, Vec2(-bullet.vel.y, bullet.vel.x))
                        )
                    break

        self.bullets = [
            b for b in self.bullets
            if b.shot_at + BULLET_LIFETIME > time and not b.collided
        ]
        self.asteroids = [a for a in self.asteroids if not a.collided] + fragments

        if not self.asteroids:
            self.game_over = True
        return self.game_over

    def ship_vertices(self) -> tuple[Vec2, Vec2, Vec2]:
        """Nose and two rear corners of the ship's triangle."""
        rotation = math.radians(self.ship.rot)
        sin, cos = math.sin(rotation), math.cos(rotation)
        x, y = self.ship.pos.x, self.ship.pos.y
        half_h = SHIP_HEIGHT / 2.0
        half_b = SHIP_BASE / 2.0
        nose = Vec2(x + sin * half_h, y - cos * half_h)
        left = Vec2(x - cos * half_b - sin * half_h, y - sin * half_b + cos * half_h)
        right = Vec2(x + cos * half_b - sin * half_h, y + sin * half_b + cos * half_h)
        return nose, left, right