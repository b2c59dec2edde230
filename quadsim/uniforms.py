"""Editable shader uniforms whose values are typed in as text."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

UNIFORM_KINDS = ("Float1", "Float2", "Float3", "Color")


class UniformType(Enum):
    """Shader-side type of a uniform."""

    FLOAT1 = "float1"
    FLOAT2 = "float2"
    FLOAT3 = "float3"


def _parse(text: str) -> float | None:
    """Parse a float as typed; surrounding spaces or underscores make it invalid."""
    if text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _parse_all(*texts: str) -> tuple[float, ...] | None:
    values = tuple(_parse(text) for text in texts)
    if any(value is None for value in values):
        return None
    return values


class Uniform(ABC):
    """A uniform as the editor holds it."""

    @abstractmethod
    def uniform_type(self) -> UniformType:
        """The shader type this uniform is declared with."""

    @abstractmethod
    def value(self):
        """The value to send to the shader, or None while the text does not parse."""


@dataclass
class Float1Uniform(Uniform):
    x: str = "0"

    def uniform_type(self) -> UniformType:
        return UniformType.FLOAT1

    def value(self) -> float | None:
        return _parse(self.x)


@dataclass
class Float2Uniform(Uniform):
    x: str = "0"
    y: str = "0"

    def uniform_type(self) -> UniformType:
        return UniformType.FLOAT2

    def value(self) -> tuple[float, ...] | None:
        return _parse_all(self.x, self.y)


@dataclass
class Float3Uniform(Uniform):
    x: str = "0"
    y: str = "0"
    z: str = "0"

    def uniform_type(self) -> UniformType:
        return UniformType.FLOAT3

    def value(self) -> tuple[float, ...] | None:
        return _parse_all(self.x, self.y, self.z)


@dataclass
class ColorUniform(Uniform):
    """An RGB colour picked rather than typed."""

    color: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def uniform_type(self) -> UniformType:
        return UniformType.FLOAT3

    def value(self) -> tuple[float, float, float]:
        r, g, b = self.color
        if not all(math.isfinite(c) for c in (r, g, b)):
            raise ValueError(f"colour channels must be finite: {self.color!r}")
        return (float(r), float(g), float(b))


def new_uniform(kind_index: int) -> Uniform:
    """A fresh zeroed uniform of the kind at this index in UNIFORM_KINDS."""
    factories = (Float1Uniform, Float2Uniform, Float3Uniform, ColorUniform)
    if not 0 <= kind_index < len(factories):
        raise ValueError(f"unknown uniform kind index: {kind_index}")
    return factories[kind_index]()