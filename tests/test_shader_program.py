import numpy as np
import pytest

from cubesim.shader_program import ShaderError, ShaderProgram, ShaderTrait


@pytest.fixture
def shader_files(tmp_path):
    vert = tmp_path / "a.vert"
    frag = tmp_path / "a.frag"
    geom = tmp_path / "a.geom"
    vert.write_text("void main() {}\n")
    frag.write_text("out vec4 c;\n")
    geom.write_text("layout(points) in;\n")
    return vert, frag, geom


def test_attach_reads_sources(shader_files):
    vert, frag, _ = shader_files
    program = ShaderProgram()
    program.attach_shaders(vert, frag)
    assert program.sources == {"vertex": "void main() {}\n", "fragment": "out vec4 c;\n"}


def test_attach_with_geometry(shader_files):
    program = ShaderProgram()
    program.attach_shaders(*shader_files)
    assert program.sources["geometry"] == "layout(points) in;\n"


def test_missing_file_raises(tmp_path, shader_files):
    vert, _, _ = shader_files
    program = ShaderProgram()
    with pytest.raises(ShaderError):
        program.attach_shaders(vert, tmp_path / "missing.frag")
    assert program.sources == {}


def test_ids_are_unique():
    a, b = ShaderProgram(), ShaderProgram()
    assert a.id < b.id


def test_use_switches_active():
    a, b = ShaderProgram(), ShaderProgram()
    a.use()
    assert a.is_active and not b.is_active
    b.use()
    assert b.is_active and not a.is_active


def test_traits():
    program = ShaderProgram()
    assert program.traits == ShaderTrait.NONE
    program.traits = ShaderTrait.LIGHT_RECEIVER
    assert program.traits & ShaderTrait.LIGHT_RECEIVER


def test_scalar_uniforms():
    program = ShaderProgram()
    program.uniform("flag", True)
    program.uniform("skybox", 0)
    program.uniform("material.shininess", 32.0)
    assert program.uniform_value("flag") == 1
    assert program.uniform_value("skybox") == 0
    assert program.uniform_value("material.shininess") == 32.0


def test_vector_and_components_agree():
    program = ShaderProgram()
    program.uniform("a", (1.0, 2.0, 3.0))
    program.uniform("b", 1.0, 2.0, 3.0)
    assert np.array_equal(program.uniform_value("a"), program.uniform_value("b"))


def test_matrix_uniform_round_trip():
    program = ShaderProgram()
    mat = np.arange(16, dtype=float).reshape(4, 4)
    program.uniform("model", mat)
    mat[0, 0] = 99.0
    assert program.uniform_value("model")[0, 0] == 0.0


@pytest.mark.parametrize("value", [(1.0,), np.zeros((2, 3)), np.zeros(5)])
def test_bad_shape_rejected(value):
    with pytest.raises(ValueError):
        ShaderProgram().uniform("x", value)


def test_too_many_values_rejected():
    with pytest.raises(TypeError):
        ShaderProgram().uniform("x", 1, 2, 3, 4, 5)


def test_unset_uniform_raises():
    with pytest.raises(KeyError):
        ShaderProgram().uniform_value("missing")