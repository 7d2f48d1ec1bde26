"""Textures and their pixel data."""

import enum
from dataclasses import dataclass, field


class TextureFilterType(enum.IntEnum):
    """Sampling filter of a texture."""

    POINT = 0
    LINEAR = 1


class TextureWrapType(enum.IntEnum):
    """Addressing mode outside the 0..1 range."""

    REPEAT = 0
    MIRROR = 1
    CLAMP = 2


class TextureFormat(enum.IntEnum):
    """Pixel layout of texture source data."""

    RGBA8 = 0
    RGB8 = 1


_CHANNEL_SIZES = {
    TextureFormat.RGBA8: (8, 8, 8, 8),
    TextureFormat.RGB8: (8, 8, 8),
}


def format_channel_sizes(texture_format):
    """Return the bit size of each channel of a texture format."""
    try:
        return _CHANNEL_SIZES[TextureFormat(texture_format)]
    except ValueError as exc:
        raise ValueError(f"unknown texture format: {texture_format!r}") from exc


def expand_rgb_to_rgba(data, width, height):
    """Expand tightly packed RGB pixels to RGBA with a zero alpha byte."""
    pixel_count = width * height
    data = bytes(data)
    if len(data) < pixel_count * 3:
        raise ValueError(
            f"expected {pixel_count * 3} bytes of RGB data, got {len(data)}"
        )
    out = bytearray(pixel_count * 4)
    for channel in range(3):
        out[channel::4] = data[channel:pixel_count * 3:3]
    return bytes(out)


@dataclass
class Texture:
    """A two-dimensional image stored as RGBA bytes once initialized."""

    width: int = 0
    height: int = 0
    filter_type: TextureFilterType = TextureFilterType.LINEAR
    wrap_type: TextureWrapType = TextureWrapType.REPEAT
    format: TextureFormat = TextureFormat.RGBA8
    initialized: bool = field(default=False, compare=False)
    _pixels: bytes = field(default=None, repr=False, compare=False)

    @classmethod
    def create_texture(
        cls,
        data,
        width,
        height,
        filter_type=TextureFilterType.LINEAR,
        wrap_type=TextureWrapType.REPEAT,
    ):
        """Create and initialize a texture from pixel data (or None)."""
        texture = cls(
            width=width,
            height=height,
            filter_type=TextureFilterType(filter_type),
            wrap_type=TextureWrapType(wrap_type),
        )
        texture.initialize(data)
        return texture

    def initialize(self, data):
        """Store pixel data in this texture's format; None leaves contents blank."""
        if data is None:
            self._pixels = None
        else:
            if len(format_channel_sizes(self.format)) == 3:
                data = expand_rgb_to_rgba(data, self.width, self.height)
            size = self.width * self.height * 4
            data = bytes(data)
            if len(data) < size:
                raise ValueError(f"expected {size} bytes of RGBA data, got {len(data)}")
            self._pixels = data[:size]
        self.initialized = True

    def rgba_data(self):
        """Return the stored pixels as RGBA bytes (zeros if never filled)."""
        if not self.initialized:
            raise RuntimeError("texture has not been initialized")
        if self._pixels is None:
            return bytes(self.width * self.height * 4)
        return self._pixels