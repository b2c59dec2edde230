# quadsim

Game logic that runs without a window. Each simulation in the package is
plain Python state, and you step it forward yourself. Because nothing is
drawn, you can test it, script it, or connect it to any renderer.

## Modules

- `quadsim.geometry` provides `Vec2` (arithmetic, `length`, `normalize`) and
  `Rect` (`overlaps`, `contains`).
- `quadsim.platformer` provides pixel-exact platformer physics through
  `World`. A world holds:
  - static tile layers of `Tile` values (`EMPTY`, `SOLID`, `JUMP_THROUGH`,
    `COLLIDER`);
  - `Actor`s, moved with `move_h` and `move_v`;
  - moving `Solid`s, moved with `solid_move`. A solid carries the actors
    standing on it and pushes the ones in its way. An actor pushed into a
    wall is reported by `squished`.

  One-way jump-through tiles work with `descent` and `collide_check`.
- `quadsim.particle_config` holds the emitter settings:
  - `EmitterConfig`;
  - `Curve`, which `batch()` turns into a `BatchedCurve`;
  - `Color` and `ColorCurve`;
  - the emission shapes `PointEmission`, `RectEmission` and `SphereEmission`;
  - the particle meshes `RectangleParticle`, `CircleParticle` and
    `MeshParticle`;
  - `AtlasConfig` (with `AtlasConfig.from_range`), `BlendMode` and
    `ParticleMaterial`.

  Bezier curves raise `ValueError` when batched.
- `quadsim.emitter` provides `Emitter`, which spawns, ages, colours, sizes and
  animates `Particle`s. It also provides `EmittersCache`, which starts
  emitters with `spawn` and returns finished ones to a pool.
- `quadsim.life` provides Conway's Game of Life on a bounded grid: `LifeGrid`,
  `CellState` and `next_state`.
- `quadsim.snake` provides `SnakeGame` and `Direction`. The snake moves one
  square per `tick()`.
- `quadsim.arkanoid` provides `ArkanoidGame`, a paddle, ball and block wall in
  a 20×20 world.
- `quadsim.asteroids` provides `AsteroidsGame`, with `Ship`, `Bullet` and
  `Asteroid`, and the `wrap_around` helper. Asteroids split when shot.
- `quadsim.camera_math` provides `short_angle_dist`, `angle_lerp` and
  `wrap_degrees`. It also provides `CameraState`, which rotates or zooms in
  response to a mouse wheel and eases its displayed rotation.
- `quadsim.first_person` provides `Vec3` and `FirstPersonCamera`, which
  tracks yaw and pitch and offers `look` and `move`.
- `quadsim.inventory` provides `Loadout`, a set of labelled `Slot`s filled
  from an inventory by `Fit`, `Unfit` and `Refit` commands.
- `quadsim.uniforms` describes shader uniforms edited as text:
  - `Float1Uniform`, `Float2Uniform` and `Float3Uniform`, each of whose
    `value()` returns `None` while its text does not parse;
  - `ColorUniform`;
  - `new_uniform`, which creates a uniform by kind index.

## Installation

```
pip install .
```

## Example: platformer physics

```python
from quadsim.geometry import Vec2
from quadsim.platformer import Tile, World

world = World()
# A 4x3 layer of 8x8 tiles with a solid floor row.
tiles = [Tile.EMPTY] * 8 + [Tile.SOLID] * 4
world.add_static_tiled_layer(tiles, 8.0, 8.0, 4, 1)

player = world.add_actor(Vec2(0.0, 0.0), 8, 8)
world.move_v(player, 20.0)        # falls until it hits the floor
print(world.actor_pos(player))    # Vec2(x=0.0, y=8.0)
```

## Example: particles

```python
from quadsim.emitter import Emitter
from quadsim.geometry import Vec2
from quadsim.particle_config import EmitterConfig

emitter = Emitter(EmitterConfig(amount=10, lifetime=0.5))
for _ in range(60):
    emitter.update(Vec2(100.0, 100.0), 1 / 60)
print(len(emitter.particles))
```

## What it does not do

The package is logic only:

- It has no window and no drawing.
- It reads no keyboard or mouse input. Games take their controls as arguments
  to `update`, `steer` or `tick`.
- It plays no audio.
- It installs no command-line program.

Particle meshes, UV rectangles, colours and sizes are computed, but you must
render them yourself. Shader material sources and emitter `texture` values
are stored without being used.

## Running the tests

```
pip install .[test]
pytest
```