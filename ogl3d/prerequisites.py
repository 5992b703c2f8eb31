"""Shared descriptors, enumerations, errors and diagnostics for the engine."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from os import PathLike
from typing import Sequence, Union

PathType = Union[str, "PathLike[str]"]


class OGL3DError(RuntimeError):
    """Raised when the engine meets an unrecoverable condition."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"OGL3D Error: {message}")


@dataclass(frozen=True)
class VertexAttribute:
    """One vertex attribute, made of ``num_elements`` floats."""

    num_elements: int = 0


@dataclass(frozen=True)
class VertexBufferDesc:
    """Describes the contents and layout of a vertex buffer."""

    vertices_list: bytes | None = None
    vertex_size: int = 0
    list_size: int = 0
    attributes_list: Sequence[VertexAttribute] = field(default_factory=tuple)


@dataclass(frozen=True)
class IndexBufferDesc:
    """Describes the contents of an index buffer; ``list_size`` is in bytes."""

    indices_list: bytes | None = None
    list_size: int = 0


@dataclass(frozen=True)
class ShaderProgramDesc:
    """Paths of the vertex and fragment shader sources."""

    vertex_shader_file_path: PathType
    fragment_shader_file_path: PathType


@dataclass(frozen=True)
class UniformBufferDesc:
    """Size in bytes of a uniform buffer."""

    size: int = 0


class TriangleType(enum.IntEnum):
    TRIANGLE_LIST = 0
    TRIANGLE_STRIP = 1


class CullType(enum.IntEnum):
    BACK_FACE = 0
    FRONT_FACE = 1
    BOTH = 2


class WindingOrder(enum.IntEnum):
    CLOCKWISE = 0
    COUNTER_CLOCKWISE = 1


class ShaderType(enum.IntEnum):
    VERTEX_SHADER = 0
    FRAGMENT_SHADER = 1


def warning(message: object) -> None:
    """Write a warning line to standard error."""
    print(f"OGL3D Warning: {message}", file=sys.stderr)


def info(message: object) -> None:
    """Write an informational line to standard error."""
    print(f"OGL3D Info: {message}", file=sys.stderr)