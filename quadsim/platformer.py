"""Pixel-precise platformer physics: actors, moving solids and tiled layers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from quadsim.geometry import Rect, Vec2


class Tile(Enum):
    """Contents of a collision cell."""

    EMPTY = "empty"
    SOLID = "solid"
    JUMP_THROUGH = "jump_through"
    COLLIDER = "collider"

    def combine(self, other: Tile) -> Tile:
        """Merge two cells: empty and jump-through survive only among themselves."""
        soft = {Tile.EMPTY, Tile.JUMP_THROUGH}
        if self is Tile.EMPTY and other is Tile.EMPTY:
            return Tile.EMPTY
        if self in soft and other in soft:
            return Tile.JUMP_THROUGH
        return Tile.SOLID


@dataclass(frozen=True)
class Actor:
    """Handle of an actor in a World."""

    index: int


@dataclass(frozen=True)
class Solid:
    """Handle of a moving solid in a World."""

    index: int


@dataclass
class _TiledLayer:
    static_colliders: list[Tile]
    tile_width: float
    tile_height: float
    width: int
    tag: int

    def cell(self, pos: Vec2) -> Tile | None:
        """Tile under pos, or None if pos is outside the layer."""
        # The row is computed from tile_width and the column from tile_height.
        y = int(pos.y / self.tile_width)
        x = int(pos.x / self.tile_height)
        ix = y * self.width + x
        if 0 <= ix < len(self.static_colliders):
            return self.static_colliders[ix]
        return None


@dataclass
class _Collider:
    pos: Vec2
    width: int
    height: int
    collidable: bool = True
    squished: bool = False
    x_remainder: float = 0.0
    y_remainder: float = 0.0
    squishers: set[Solid] = field(default_factory=set)
    descent: bool = False
    seen_wood: bool = False

    def rect(self) -> Rect:
        return Rect(self.pos.x, self.pos.y, float(self.width), float(self.height))


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class World:
    """Collision world holding static tiled layers, actors and moving solids."""

    def __init__(self) -> None:
        self._layers: list[_TiledLayer] = []
        self._solids: list[_Collider] = []
        self._actors: list[_Collider] = []

    def add_static_tiled_layer(self, static_colliders, tile_width, tile_height, width, tag):
        """Add a grid of tiles, laid out row by row, `width` tiles per row."""
        self._layers.append(
            _TiledLayer(list(static_colliders), tile_width, tile_height, width, tag)
        )

    def add_actor(self, pos: Vec2, width: int, height: int) -> Actor:
        actor = Actor(len(self._actors))
        inside_wood = self.collide_solids(pos, width, height) is Tile.JUMP_THROUGH
        self._actors.append(
            _Collider(pos=pos, width=width, height=height,
                      descent=inside_wood, seen_wood=inside_wood)
        )
        return actor

    def add_solid(self, pos: Vec2, width: int, height: int) -> Solid:
        solid = Solid(len(self._solids))
        self._solids.append(_Collider(pos=pos, width=width, height=height))
        return solid

    def set_actor_position(self, actor: Actor, pos: Vec2) -> None:
        collider = self._actors[actor.index]
        collider.x_remainder = 0.0
        collider.y_remainder = 0.0
        collider.pos = pos

    def descent(self, actor: Actor) -> None:
        """Let the actor drop through jump-through tiles."""
        self._actors[actor.index].descent = True

    def move_v(self, actor: Actor, dy: float) -> bool:
        """Move vertically pixel by pixel; False if blocked."""
        collider = self._actors[actor.index]
        collider.y_remainder += dy
        step = _round(collider.y_remainder)
        if step:
            collider.y_remainder -= step
            sign = 1 if step > 0 else -1
            while step:
                tile = self.collide_solids(
                    collider.pos + Vec2(0.0, float(sign)), collider.width, collider.height
                )
                if tile is Tile.JUMP_THROUGH and collider.descent:
                    collider.seen_wood = True
                if tile is Tile.JUMP_THROUGH and sign < 0:
                    collider.seen_wood = True
                    collider.descent = True
                if tile is Tile.EMPTY or (tile is Tile.JUMP_THROUGH and collider.descent):
                    collider.pos = Vec2(collider.pos.x, collider.pos.y + sign)
                    step -= sign
                else:
                    return False

        if self.collide_solids(collider.pos, collider.width, collider.height) is not Tile.JUMP_THROUGH:
            collider.seen_wood = False
            collider.descent = False
        return True

    def move_h(self, actor: Actor, dx: float) -> bool:
        """Move horizontally pixel by pixel; False if blocked."""
        collider = self._actors[actor.index]
        collider.x_remainder += dx
        step = _round(collider.x_remainder)
        if step:
            collider.x_remainder -= step
            sign = 1 if step > 0 else -1
            while step:
                tile = self.collide_solids(
                    collider.pos + Vec2(float(sign), 0.0), collider.width, collider.height
                )
                if tile is Tile.JUMP_THROUGH:
                    collider.descent = True
                    collider.seen_wood = True
                if tile in (Tile.EMPTY, Tile.JUMP_THROUGH):
                    collider.pos = Vec2(collider.pos.x + sign, collider.pos.y)
                    step -= sign
                else:
                    return False
        return True

    def solid_move(self, solid: Solid, dx: float, dy: float) -> None:
        """Move a solid, carrying riders and pushing (possibly squishing) actors."""
        collider = self._solids[solid.index]
        collider.x_remainder += dx
        collider.y_remainder += dy
        move_x = _round(collider.x_remainder)
        move_y = _round(collider.y_remainder)

        riding_rect = Rect(collider.pos.x, collider.pos.y - 1.0, float(collider.width), 1.0)
        pushing_rect = Rect(
            collider.pos.x + move_x,
            collider.pos.y,
            collider.width - 1.0,
            float(collider.height),
        )

        riding: list[Actor] = []
        pushing: list[Actor] = []
        for index, other in enumerate(self._actors):
            rider_rect = Rect(
                other.pos.x, other.pos.y + other.height - 1.0, float(other.width), 1.0
            )
            pushed = pushing_rect.overlaps(other.rect())
            if riding_rect.overlaps(rider_rect):
                riding.append(Actor(index))
            elif pushed and not other.squished:
                pushing.append(Actor(index))

            if not pushed:
                other.squishers.discard(solid)
                if not other.squishers:
                    other.squished = False

        collider.collidable = False
        for actor in riding:
            self.move_h(actor, float(move_x))
        for actor in pushing:
            if not self.move_h(actor, float(move_x)):
                victim = self._actors[actor.index]
                victim.squished = True
                victim.squishers.add(solid)
        collider.collidable = True

        if move_x:
            collider.x_remainder -= move_x
            collider.pos = Vec2(collider.pos.x + move_x, collider.pos.y)
        if move_y:
            collider.y_remainder -= move_y
            collider.pos = Vec2(collider.pos.x, collider.pos.y + move_y)

    def solid_at(self, pos: Vec2) -> bool:
        return self.tag_at(pos, 1)

    def tag_at(self, pos: Vec2, tag: int) -> bool:
        """True if the first non-empty tile at pos has this tag, or a solid covers pos."""
        for layer in self._layers:
            tile = layer.cell(pos)
            if tile is not None and tile is not Tile.EMPTY:
                return layer.tag == tag
        return any(s.collidable and s.rect().contains(pos) for s in self._solids)

    def collide_solids(self, pos: Vec2, width: int, height: int) -> Tile:
        """What a box at pos would hit among tag-1 tiles and moving solids."""
        tile = self.collide_tag(1, pos, width, height)
        if tile is not Tile.EMPTY:
            return tile
        box = Rect(pos.x, pos.y, float(width), float(height))
        if any(s.collidable and s.rect().overlaps(box) for s in self._solids):
            return Tile.COLLIDER
        return Tile.EMPTY

    def collide_tag(self, tag: int, pos: Vec2, width: int, height: int) -> Tile:
        """What a box at pos would hit among tiles of layers with this tag."""
        for layer in self._layers:

            def check(point: Vec2, layer: _TiledLayer = layer) -> Tile:
                tile = layer.cell(point)
                if tile is not None and layer.tag == tag and tile is not Tile.EMPTY:
                    return tile
                return Tile.EMPTY

            right = pos.x + width - 1.0
            bottom = pos.y + height - 1.0
            tile = (
                check(pos)
                .combine(check(Vec2(right, pos.y)))
                .combine(check(Vec2(right, bottom)))
                .combine(check(Vec2(pos.x, bottom)))
            )
            if tile is not Tile.EMPTY:
                return tile

            if width > int(layer.tile_width):
                x = pos.x + layer.tile_width
                while x < right:
                    tile = check(Vec2(x, pos.y)).combine(check(Vec2(x, bottom)))
                    if tile is not Tile.EMPTY:
                        return tile
                    x += layer.tile_width

            if height > int(layer.tile_height):
                y = pos.y + layer.tile_height
                while y < bottom:
                    tile = check(Vec2(pos.x, y)).combine(check(Vec2(right, y)))
                    if tile is not Tile.EMPTY:
                        return tile
                    y += layer.tile_height
        return Tile.EMPTY

    def squished(self, actor: Actor) -> bool:
        return self._actors[actor.index].squished

    def actor_pos(self, actor: Actor) -> Vec2:
        return self._actors[actor.index].pos

    def solid_pos(self, solid: Solid) -> Vec2:
        return self._solids[solid.index].pos

    def collide_check(self, actor: Actor, pos: Vec2) -> bool:
        """Would the actor be blocked at pos? Jump-through counts unless descending."""
        collider = self._actors[actor.index]
        tile = self.collide_solids(pos, collider.width, collider.height)
        if collider.descent:
            return tile in (Tile.SOLID, Tile.COLLIDER)
        return tile in (Tile.SOLID, Tile.COLLIDER, Tile.JUMP_THROUGH)