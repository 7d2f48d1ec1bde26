"""Descriptions of shader inputs and uniforms."""

import enum
from dataclasses import dataclass
from typing import Any


class ShaderVariableBaseType(enum.IntEnum):
    """Base element type of a shader variable."""

    FLOAT = 0
    INT = 1
    UINT = 2
    TEXTURE = 3


@dataclass(frozen=True)
class ShaderVariableType:
    """A base type and a component count; FLOAT with amount 4 is a vec4."""

    type: ShaderVariableBaseType = ShaderVariableBaseType.FLOAT
    amount: int = 0

    def __post_init__(self):
        object.__setattr__(self, "type", ShaderVariableBaseType(self.type))
        if not 0 <= self.amount <= 255:
            raise ValueError(f"amount must be in 0..255, got {self.amount}")


@dataclass
class ShaderVariable:
    """A shader variable's type together with its current value."""

    type: ShaderVariableType = ShaderVariableType()
    value: Any = None


_ATTRIBUTE_SIZES = {
    ShaderVariableBaseType.FLOAT: 4,
    ShaderVariableBaseType.INT: 4,
    ShaderVariableBaseType.UINT: 4,
    ShaderVariableBaseType.TEXTURE: 0,
}


def attribute_size(base_type):
    """Return the size in bytes of one component of ``base_type``."""
    try:
        return _ATTRIBUTE_SIZES[ShaderVariableBaseType(base_type)]
    except ValueError as exc:
        raise ValueError(f"unknown shader variable type: {base_type!r}") from exc