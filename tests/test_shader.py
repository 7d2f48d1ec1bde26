import pytest

from teapacket.shader import InputElement, Shader, vertex_format_name
from teapacket.shader_variable import ShaderVariableBaseType, ShaderVariableType
from teapacket.texture import Texture

FLOAT2 = ShaderVariableType(ShaderVariableBaseType.FLOAT, 2)
TEX1 = ShaderVariableType(ShaderVariableBaseType.TEXTURE, 1)


@pytest.mark.parametrize(
    "base, amount, expected",
    [
        (ShaderVariableBaseType.FLOAT, 1, "R32_FLOAT"),
        (ShaderVariableBaseType.FLOAT, 2, "R32G32_FLOAT"),
        (ShaderVariableBaseType.INT, 3, "R32G32B32_SINT"),
        (ShaderVariableBaseType.UINT, 4, "R32G32B32A32_UINT"),
        (ShaderVariableBaseType.TEXTURE, 2, "UNKNOWN"),
    ],
)
def test_vertex_format_name(base, amount, expected):
    assert vertex_format_name(ShaderVariableType(base, amount)) == expected


@pytest.mark.parametrize("amount", [0, 5])
def test_vertex_format_name_bad_amount(amount):
    with pytest.raises(ValueError):
        vertex_format_name(ShaderVariableType(ShaderVariableBaseType.FLOAT, amount))


def test_input_layout_offsets_follow_attributes():
    shader = Shader.create_shader("vs", "ps", [FLOAT2, FLOAT2])
    layout = shader.input_layout()
    assert [e.semantic_index for e in layout] == [0, 1]
    assert all(e.semantic_name == "TEXCOORD" and e.input_slot == 0 for e in layout)
    assert layout[0] == InputElement("TEXCOORD", 0, "R32G32_FLOAT", 0, 0)
    assert layout[1].aligned_byte_offset == 8


def test_create_shader_keeps_code_and_uniforms():
    shader = Shader.create_shader("vertex code", "pixel code", [FLOAT2], [TEX1])
    assert shader.vertex_shader_code == "vertex code"
    assert shader.fragment_shader_code == "pixel code"
    assert len(shader.uniforms) == 1
    assert shader.uniforms[0].type == TEX1
    assert shader.uniforms[0].value is None


def test_set_parameter_stores_value():
    shader = Shader.create_shader("vs", "ps", [FLOAT2], [TEX1])
    texture = Texture.create_texture(None, 2, 2)
    shader.set_parameter(0, texture)
    assert shader.uniforms[0].value is texture


@pytest.mark.parametrize("index", [1, -1])
def test_set_parameter_out_of_range(index):
    shader = Shader.create_shader("vs", "ps", [FLOAT2], [TEX1])
    with pytest.raises(IndexError):
        shader.set_parameter(index, 1.0)


def test_invalid_input_attribute_rejected():
    bad = ShaderVariableType(ShaderVariableBaseType.FLOAT, 7)
    with pytest.raises(ValueError):
        Shader.create_shader("vs", "ps", [bad])


def test_create_shader_from_files(tmp_path):
    (tmp_path / "shaders").mkdir()
    (tmp_path / "shaders" / "a.vert").write_bytes(b"float4 main() {}\0")
    (tmp_path / "shaders" / "a.frag").write_bytes(b"pixel body")
    shader = Shader.create_shader_from_files(
        "shaders/a.vert", "shaders/a.frag", [FLOAT2, FLOAT2], [TEX1], root=tmp_path
    )
    assert shader.vertex_shader_code == "float4 main() {}"
    assert shader.fragment_shader_code == "pixel body"
    assert len(shader.input_layout()) == 2


def test_create_shader_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Shader.create_shader_from_files("x.vert", "x.frag", [FLOAT2], root=tmp_path)