import pytest

from quadsim.uniforms import (
    UNIFORM_KINDS,
    ColorUniform,
    Float1Uniform,
    Float2Uniform,
    Float3Uniform,
    UniformType,
    new_uniform,
)


@pytest.mark.parametrize(
    "index, cls, kind",
    [
        (0, Float1Uniform, UniformType.FLOAT1),
        (1, Float2Uniform, UniformType.FLOAT2),
        (2, Float3Uniform, UniformType.FLOAT3),
        (3, ColorUniform, UniformType.FLOAT3),
    ],
)
def test_new_uniform_kinds(index, cls, kind):
    uniform = new_uniform(index)
    assert type(uniform) is cls
    assert uniform.uniform_type() is kind


def test_kind_names_match_created_uniforms():
    assert UNIFORM_KINDS == ("Float1", "Float2", "Float3", "Color")
    for index, name in enumerate(UNIFORM_KINDS):
        assert type(new_uniform(index)).__name__ == f"{name}Uniform"


@pytest.mark.parametrize("index", [-1, 4])
def test_new_uniform_rejects_unknown_index(index):
    with pytest.raises(ValueError):
        new_uniform(index)


def test_fresh_uniforms_are_zero():
    assert new_uniform(0).value() == 0.0
    assert new_uniform(1).value() == (0.0, 0.0)
    assert new_uniform(2).value() == (0.0, 0.0, 0.0)
    assert new_uniform(3).value() == (0.0, 0.0, 0.0)


def test_float_values_parse_typed_text():
    assert Float1Uniform("2.5").value() == 2.5
    assert Float2Uniform("1", "-3").value() == (1.0, -3.0)
    assert Float3Uniform("0.5", "1e2", "7").value() == (0.5, 100.0, 7.0)


@pytest.mark.parametrize("text", ["", "abc", " 1", "1_0", "1.2.3"])
def test_invalid_text_gives_none(text):
    assert Float1Uniform(text).value() is None


def test_one_bad_component_invalidates_vector():
    assert Float2Uniform("1", "x").value() is None
    assert Float3Uniform("1", "2", "").value() is None


def test_color_value_passes_channels_through():
    assert ColorUniform((0.25, 0.5, 1.0)).value() == (0.25, 0.5, 1.0)


def test_color_rejects_non_finite():
    with pytest.raises(ValueError):
        ColorUniform((float("nan"), 0.0, 0.0)).value()