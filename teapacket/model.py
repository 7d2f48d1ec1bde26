"""Renderable geometry made of vertex bytes and triangle indices."""

import struct
from dataclasses import dataclass, field

from teapacket.shader_variable import attribute_size


def vertex_size(vertex_attributes):
    """Return the size in bytes of one vertex described by ``vertex_attributes``."""
    return sum(attribute_size(attr.type) * attr.amount for attr in vertex_attributes)


@dataclass
class Model:
    """Vertex data, 32-bit indices and the layout used to interpret them."""

    vertex_data: bytes = b""
    indices: tuple = ()
    vertex_attributes: tuple = ()
    vertex_size: int = 0
    index_data: bytes = field(default=b"", repr=False)

    @property
    def index_count(self):
        return len(self.indices)

    @classmethod
    def create_model(cls, vertex_data, indices, vertex_attributes):
        """Create and initialize a model."""
        model = cls()
        model.initialize(vertex_data, indices, vertex_attributes)
        return model

    def initialize(self, vertex_data, indices, vertex_attributes):
        """Fill the model with geometry."""
        indices = tuple(indices)
        try:
            index_data = struct.pack(f"<{len(indices)}I", *indices)
        except struct.error as exc:
            raise ValueError("indices must be unsigned 32-bit integers") from exc
        attributes = tuple(vertex_attributes)
        self.vertex_size = vertex_size(attributes)
        self.vertex_data = bytes(vertex_data)
        self.indices = indices
        self.vertex_attributes = attributes
        self.index_data = index_data

    def vertex_count(self):
        """Return the number of whole vertices held in the vertex data."""
        if self.vertex_size == 0:
            raise ValueError("model has no vertex layout")
        return len(self.vertex_data) // self.vertex_size