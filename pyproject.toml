[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "mygl"
version = "0.1.0"
description = "Render-state types, vector math, colour formats, bitmap decoding and small text utilities for an OpenGL-style renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["opengl", "rendering", "vector", "matrix", "bitmap", "texture", "json", "tokenizer"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["mygl*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
