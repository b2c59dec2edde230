import dataclasses
import math
import random

import pytest

from quadsim.geometry import Vec2
from quadsim.particle_config import (
    AtlasConfig,
    BatchedCurve,
    BlendMode,
    CircleParticle,
    Color,
    ColorCurve,
    Curve,
    EmitterConfig,
    Interpolation,
    MeshParticle,
    ParticleMaterial,
    PointEmission,
    RectangleParticle,
    RectEmission,
    SphereEmission,
)


def test_identity_curve_samples_follow_x():
    batched = Curve(points=[(0.0, 0.0), (1.0, 1.0)], resolution=4).batch()
    assert len(batched.points) == 5
    for i, value in enumerate(batched.points):
        assert value == pytest.approx(i / 4)


def test_constant_curve_is_constant():
    batched = Curve(points=[(0.0, 0.3), (1.0, 0.3)]).batch()
    assert batched.points
    assert all(v == pytest.approx(0.3) for v in batched.points)


def test_bezier_curve_rejected():
    curve = Curve(points=[(0.0, 0.0), (1.0, 1.0)], interpolation=Interpolation.BEZIER)
    with pytest.raises(ValueError):
        curve.batch()


def test_short_curve_batches_empty_and_cannot_be_sampled():
    batched = Curve(points=[(0.0, 1.0)]).batch()
    assert batched.points == ()
    with pytest.raises(ValueError):
        batched.get(0.5)


def test_batched_get_endpoints_and_monotone():
    batched = Curve(points=[(0.0, 0.0), (0.5, 1.0), (1.0, 2.0)]).batch()
    assert batched.get(0.0) == pytest.approx(batched.points[0])
    assert batched.get(1.0) == pytest.approx(batched.points[-1])
    values = [batched.get(t / 50) for t in range(51)]
    assert all(a <= b + 1e-9 for a, b in zip(values, values[1:]))


def test_batched_get_interpolates_between_samples():
    assert BatchedCurve((0.0, 2.0)).get(0.25) == pytest.approx(1.0)


def test_color_lerp_endpoints():
    red = Color(1.0, 0.0, 0.0, 1.0)
    blue = Color(0.0, 0.0, 1.0, 0.5)
    assert red.lerp(blue, 0.0) == red
    assert red.lerp(blue, 1.0) == blue
    mid = red.lerp(blue, 0.5)
    assert mid.r == pytest.approx((red.r + blue.r) / 2)
    assert mid.a == pytest.approx((red.a + blue.a) / 2)


def test_color_curve_at_keys():
    start = Color(1.0, 0.0, 0.0, 1.0)
    mid = Color(0.0, 1.0, 0.0, 1.0)
    end = Color(0.0, 0.0, 1.0, 0.0)
    curve = ColorCurve(start, mid, end)
    assert curve.at(0.0) == start
    assert curve.at(0.5) == mid
    assert curve.at(1.0) == end


def test_point_emission_is_origin():
    assert PointEmission().random_point(random.Random(1)) == Vec2(0.0, 0.0)


def test_rect_emission_within_bounds():
    rng = random.Random(7)
    shape = RectEmission(width=10.0, height=4.0)
    for _ in range(200):
        p = shape.random_point(rng)
        assert -5.0 <= p.x <= 5.0
        assert -2.0 <= p.y <= 2.0


def test_sphere_emission_within_radius():
    rng = random.Random(3)
    shape = SphereEmission(radius=6.0)
    for _ in range(200):
        assert shape.random_point(rng).length() <= 6.0 + 1e-9


def test_rectangle_mesh():
    vertices, indices = RectangleParticle().mesh()
    assert len(vertices) == 4 * 9
    assert indices == (0, 1, 2, 0, 2, 3)


@pytest.mark.parametrize("subdivisions", [3, 8, 20])
def test_circle_mesh_shape(subdivisions):
    vertices, indices = CircleParticle(subdivisions).mesh()
    vertex_count = len(vertices) // 9
    assert len(vertices) % 9 == 0
    assert vertex_count == subdivisions + 2
    assert len(indices) == 3 * subdivisions
    assert max(indices) < vertex_count
    for v in range(1, vertex_count):
        x, y = vertices[v * 9], vertices[v * 9 + 1]
        assert math.hypot(x, y) == pytest.approx(1.0)


def test_custom_mesh_returns_data():
    shape = MeshParticle(vertices=(0.0, 1.0, 2.0), indices=(0, 1, 2))
    assert shape.mesh() == ((0.0, 1.0, 2.0), (0, 1, 2))


def test_atlas_open_range_runs_to_end():
    atlas = AtlasConfig.from_range(4, 4, 8)
    assert (atlas.start_index, atlas.end_index) == (8, 16)


def test_atlas_half_open_range():
    atlas = AtlasConfig.from_range(4, 4, 0, 8)
    assert (atlas.start_index, atlas.end_index) == (0, 8)


def test_atlas_inclusive_end_and_unbounded_start():
    atlas = AtlasConfig.from_range(4, 4, end=8, inclusive=True)
    assert atlas.start_index == 0
    assert atlas.end_index == 8 - 1


def test_emitter_config_defaults_and_replace():
    config = EmitterConfig()
    assert config.emitting is True
    assert config.amount == 8
    assert config.blend_mode is BlendMode.ALPHA
    assert config.initial_direction == Vec2(0.0, -1.0)
    assert isinstance(config.shape, RectangleParticle)
    quiet = dataclasses.replace(config, emitting=False, material=ParticleMaterial("v", "f"))
    assert quiet.emitting is False
    assert quiet.material.fragment == "f"
    assert quiet.amount == config.amount
    assert config.emitting is True