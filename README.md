# teapacket

Building blocks for a small game engine, all in plain Python with no
third-party dependencies.

## Modules

- `teapacket.vector`: `Vector`, a mutable fixed-size vector with
  component-wise `+`, `-`, `*`, `/` and `%`. The right-hand vector may be
  shorter than the left one. Integer division and modulo truncate toward
  zero. Components can be reached by index or by the aliases `x y z w`,
  `r g b a` and `u v`. `as_tuple()` returns the components, and
  `resized(size)` truncates the vector or pads it with zeros. `str()` gives
  `{1,2,3}`. `color3(r, g, b)` and `color4(r, g, b, a)` build colour
  vectors and check that each channel is in 0..255.
- `teapacket.endian`: `is_big_endian()`, `swap_endian16`, `swap_endian32`,
  `swap_endian64`, and `swap_endian(value, bits, signed)` for 16, 32 and
  64-bit integers.
- `teapacket.debug`: `print_value(value)` and `print_line(value)` write to
  standard output. Floats are written with six decimals, as in `1.500000`.
- `teapacket.errors`: `NotImplementedFeature` and `FunctionNotImplemented`,
  both subclasses of `NotImplementedError`.
- `teapacket.assets`: `asset_path`, `read_all_bytes_from_asset` and
  `read_text_asset` read files below an asset root, which defaults to
  `assets`. `read_text_asset` drops one trailing NUL byte and decodes the
  rest as UTF-8. A missing file raises `FileNotFoundError`.
- `teapacket.stream`: `AssetStream`, a context manager over an asset file.
  It has `read_bytes`, `read_byte`, `seek`, `tell`, `skip`,
  `read_int(size, signed, byteorder)` and the shortcuts `read_uint16_le`,
  `read_int32_be`, … through 64 bits. Reading past the end of the file in
  the integer readers raises `EOFError`.
- `teapacket.texture`: `Texture`, with the enums `TextureFilterType`,
  `TextureWrapType` and `TextureFormat`, and the functions
  `format_channel_sizes` and `expand_rgb_to_rgba`. Textures hold their
  pixels as RGBA bytes. RGB data is expanded with a zero alpha byte.
- `teapacket.tga`: `read_tga(path, root)` loads uncompressed true-colour
  TGA files (24 or 32 bits per pixel) into a `Texture`, honouring the
  image's row and column order. Colour-mapped or compressed files raise
  `NotImplementedFeature`.
- `teapacket.shader_variable`: `ShaderVariableBaseType`,
  `ShaderVariableType`, `ShaderVariable` and `attribute_size`.
- `teapacket.shader`: `Shader` keeps vertex and fragment source code, input
  attributes and uniforms. `create_shader_from_files` loads the source code
  from assets, and `input_layout()` returns `InputElement` entries with
  format names such as `R32G32_FLOAT`. Use `vertex_format_name` to get a
  single format name.
- `teapacket.model`: `Model` holds vertex bytes, 32-bit indices and their
  layout. `vertex_size(attributes)` gives the stride of one vertex.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from teapacket.vector import Vector, color4
from teapacket.stream import AssetStream
from teapacket.tga import read_tga
from teapacket.shader_variable import ShaderVariableBaseType, ShaderVariableType
from teapacket.model import Model

v = Vector(1, 2, 3) + Vector(4, 5, 6)
print(v)                       # {5,7,9}

with AssetStream("model.bin", root="assets") as stream:
    magic = stream.read_uint32_le()

texture = read_tga("test.tga", root="assets")
print(texture.width, texture.height, texture.format)

layout = [ShaderVariableType(ShaderVariableBaseType.FLOAT, 2)] * 2
model = Model.create_model(bytes(64), [0, 1, 3, 1, 2, 3], layout)
print(model.vertex_size, model.vertex_count())   # 16 4
```

## What it does not do

This package does not open windows, handle events, draw to the screen or
run a frame loop. Textures, shaders and models hold their data and layout
descriptions only. Nothing here compiles shaders or uploads data to a GPU.