"""Reading uncompressed true-colour TGA images into textures."""

from teapacket.assets import DEFAULT_ASSET_ROOT
from teapacket.errors import NotImplementedFeature
from teapacket.stream import AssetStream
from teapacket.texture import Texture, TextureFormat

_ALPHA_DEPTH_MASK = 0b00001111
_RIGHT_TO_LEFT = 0b00010000
_TOP_TO_BOTTOM = 0b00100000
_TRUE_COLOR_UNCOMPRESSED = 2


def _read_row(stream, size):
    row = stream.read_bytes(size)
    if len(row) < size:
        raise EOFError(f"TGA pixel data ends early: needed {size} bytes, got {len(row)}")
    return row


def _reverse_pixels(row, bytes_per_pixel):
    pixels = [row[i:i + bytes_per_pixel] for i in range(0, len(row), bytes_per_pixel)]
    return b"".join(reversed(pixels))


def read_tga(path, root=DEFAULT_ASSET_ROOT):
    """Read a TGA asset and return it as an initialized texture."""
    with AssetStream(path, root) as stream:
        id_length = stream.read_byte()
        if stream.read_byte() != 0:
            raise NotImplementedFeature("Colormapped TGA files not yet supported.")
        if stream.read_byte() != _TRUE_COLOR_UNCOMPRESSED:
            raise NotImplementedFeature(
                "Only uncompressed true-color TGA files are supported."
            )
        stream.skip(5)  # colour map specification
        stream.skip(4)  # image origin
        width = stream.read_uint16_le()
        height = stream.read_uint16_le()
        bits_per_pixel = stream.read_byte()
        descriptor = stream.read_byte()
        alpha_depth = descriptor & _ALPHA_DEPTH_MASK

        if bits_per_pixel == 24:
            texture_format = TextureFormat.RGB8
        elif bits_per_pixel == 32 and alpha_depth == bits_per_pixel // 4:
            texture_format = TextureFormat.RGBA8
        else:
            raise NotImplementedFeature("Can't comprehend TGA format.")

        stream.skip(id_length)

        bytes_per_pixel = bits_per_pixel // 8
        row_size = width * bytes_per_pixel
        rows = [_read_row(stream, row_size) for _ in range(height)]

    if descriptor & _RIGHT_TO_LEFT:
        rows = [_reverse_pixels(row, bytes_per_pixel) for row in rows]
    if not descriptor & _TOP_TO_BOTTOM:
        rows.reverse()

    pixels = bytearray(b"".join(rows))
    # Stored as BGR(A); swap blue and red into RGB(A).
    pixels[0::bytes_per_pixel], pixels[2::bytes_per_pixel] = (
        pixels[2::bytes_per_pixel],
        pixels[0::bytes_per_pixel],
    )

    texture = Texture(width=width, height=height, format=texture_format)
    texture.initialize(bytes(pixels))
    return texture