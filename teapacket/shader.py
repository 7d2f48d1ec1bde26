"""Shader programs: source code, vertex input layout and uniforms."""

from dataclasses import dataclass, field

from teapacket.assets import DEFAULT_ASSET_ROOT, read_text_asset
from teapacket.shader_variable import (
    ShaderVariable,
    ShaderVariableBaseType,
    ShaderVariableType,
    attribute_size,
)

_COMPONENTS = {1: "R32", 2: "R32G32", 3: "R32G32B32", 4: "R32G32B32A32"}
_SUFFIXES = {
    ShaderVariableBaseType.FLOAT: "FLOAT",
    ShaderVariableBaseType.INT: "SINT",
    ShaderVariableBaseType.UINT: "UINT",
}


def vertex_format_name(variable_type):
    """Return the vertex element format name for a shader variable type."""
    if variable_type.amount not in _COMPONENTS:
        raise ValueError(f"unsupported component count: {variable_type.amount}")
    if variable_type.type == ShaderVariableBaseType.TEXTURE:
        return "UNKNOWN"
    return f"{_COMPONENTS[variable_type.amount]}_{_SUFFIXES[variable_type.type]}"


@dataclass(frozen=True)
class InputElement:
    """One element of a vertex input layout."""

    semantic_name: str
    semantic_index: int
    format: str
    input_slot: int
    aligned_byte_offset: int


@dataclass
class Shader:
    """A vertex and fragment shader pair with its inputs and uniforms."""

    vertex_shader_code: str = ""
    fragment_shader_code: str = ""
    input_attributes: tuple = ()
    uniforms: list = field(default_factory=list)

    @classmethod
    def create_shader(cls, vertex_shader_code, fragment_shader_code, input_attributes, uniforms=()):
        """Create and initialize a shader."""
        shader = cls()
        shader.initialize(vertex_shader_code, fragment_shader_code, input_attributes, uniforms)
        return shader

    @classmethod
    def create_shader_from_files(cls, vertex_shader_path, fragment_shader_path,
                                 input_attributes, uniforms=(), root=DEFAULT_ASSET_ROOT):
        """Create a shader from vertex and fragment source assets."""
        return cls.create_shader(
            read_text_asset(vertex_shader_path, root),
            read_text_asset(fragment_shader_path, root),
            input_attributes,
            uniforms,
        )

    def initialize(self, vertex_shader_code, fragment_shader_code, input_attributes, uniforms=()):
        """Set the shader's code, inputs and (unset) uniforms."""
        attributes = tuple(input_attributes)
        for attribute in attributes:
            vertex_format_name(attribute)
        self.vertex_shader_code = vertex_shader_code
        self.fragment_shader_code = fragment_shader_code
        self.input_attributes = attributes
        self.uniforms = [
            ShaderVariable(type=ShaderVariableType(u.type, u.amount)) for u in uniforms
        ]

    def set_parameter(self, index, value):
        """Set the value of the uniform at ``index``."""
        if not 0 <= index < len(self.uniforms):
            raise IndexError(f"no uniform at index {index}")
        self.uniforms[index].value = value

    def input_layout(self):
        """Return the vertex input layout built from the input attributes."""
        layout = []
        offset = 0
        for index, attribute in enumerate(self.input_attributes):
            layout.append(InputElement(
                semantic_name="TEXCOORD",
                semantic_index=index,
                format=vertex_format_name(attribute),
                input_slot=0,
                aligned_byte_offset=offset,
            ))
            offset += attribute_size(attribute.type) * attribute.amount
        return layout