"""Game engine building blocks: assets, binary streams, TGA images, vectors, textures, shaders and models."""

__version__ = "0.1.0"