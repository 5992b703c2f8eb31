[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ogl3d"
version = "0.1.0"
description = "Building blocks for small OpenGL 3D games: maths types, an entity system, GPU resources and a window"
requires-python = ">=3.10"
keywords = ["opengl", "game", "3d", "entity-system", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ogl3d"]

[tool.pytest.ini_options]
addopts = "-ra"
