"""Building blocks for small OpenGL 3D games: maths, entities, GPU resources and a window."""

__version__ = "0.1.0"
__all__ = [
    "prerequisites",
    "linalg",
    "entity",
    "vertex_array",
    "uniform_buffer",
    "shader_program",
    "window",
]