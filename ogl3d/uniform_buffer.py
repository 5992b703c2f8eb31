"""Uniform buffers of a fixed size, refilled from bytes."""

from __future__ import annotations

from typing import Any

from .prerequisites import OGL3DError, UniformBufferDesc
from .vertex_array import GL_STATIC_DRAW, GL_UNIFORM_BUFFER, _PygletGL


class UniformBuffer:
    """A GPU uniform buffer of ``desc.size`` bytes."""

    def __init__(self, desc: UniformBufferDesc, *, gl: Any = None) -> None:
        self._gl = gl if gl is not None else _PygletGL()
        self._size = desc.size
        self._id = self._gl.gen_buffer()
        self._gl.bind_buffer(GL_UNIFORM_BUFFER, self._id)
        self._gl.buffer_data(GL_UNIFORM_BUFFER, self._size, None, GL_STATIC_DRAW)
        self._gl.bind_buffer(GL_UNIFORM_BUFFER, 0)

    @property
    def id(self) -> int:
        return self._id

    @property
    def size(self) -> int:
        return self._size

    def set_data(self, data: Any) -> None:
        """Replace the buffer contents with the first ``size`` bytes of ``data``."""
        if not self._id:
            raise OGL3DError("UniformBuffer | buffer has been released")
        payload = bytes(data)
        if len(payload) < self._size:
            raise ValueError(
                f"uniform data holds {len(payload)} bytes, {self._size} needed"
            )
        self._gl.bind_buffer(GL_UNIFORM_BUFFER, self._id)
        self._gl.buffer_sub_data(GL_UNIFORM_BUFFER, 0, payload[: self._size])
        self._gl.bind_buffer(GL_UNIFORM_BUFFER, 0)

    def release(self) -> None:
        """Delete the buffer; safe to call twice."""
        if self._id:
            self._gl.delete_buffer(self._id)
            self._id = 0

    def __enter__(self) -> UniformBuffer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()