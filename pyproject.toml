[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "teapacket"
version = "0.1.0"
description = "Game engine building blocks: asset reading, binary streams, TGA loading, vectors, textures, shaders and models."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "tga", "assets", "texture", "shader", "vector", "endianness"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["teapacket"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
