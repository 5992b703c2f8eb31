"""Vertex array objects holding a vertex buffer and an optional index buffer."""

from __future__ import annotations

from typing import Any

from .prerequisites import IndexBufferDesc, OGL3DError, VertexBufferDesc

FLOAT_SIZE = 4

GL_FLOAT = 0x1406
GL_ARRAY_BUFFER = 0x8892
GL_ELEMENT_ARRAY_BUFFER = 0x8893
GL_UNIFORM_BUFFER = 0x8A11
GL_STATIC_DRAW = 0x88E4


class _PygletGL:
    """Buffer and vertex-array calls on the current OpenGL context."""

    def __init__(self) -> None:
        from pyglet import gl

        self._gl = gl

    def gen_vertex_array(self) -> int:
        handle = self._gl.GLuint()
        self._gl.glGenVertexArrays(1, handle)
        return handle.value

    def bind_vertex_array(self, vao_id: int) -> None:
        self._gl.glBindVertexArray(vao_id)

    def delete_vertex_array(self, vao_id: int) -> None:
        self._gl.glDeleteVertexArrays(1, self._gl.GLuint(vao_id))

    def gen_buffer(self) -> int:
        handle = self._gl.GLuint()
        self._gl.glGenBuffers(1, handle)
        return handle.value

    def bind_buffer(self, target: int, buffer_id: int) -> None:
        self._gl.glBindBuffer(target, buffer_id)

    def buffer_data(self, target: int, size: int, data: bytes | None, usage: int) -> None:
        self._gl.glBufferData(target, size, data, usage)

    def buffer_sub_data(self, target: int, offset: int, data: bytes) -> None:
        self._gl.glBufferSubData(target, offset, len(data), data)

    def delete_buffer(self, buffer_id: int) -> None:
        self._gl.glDeleteBuffers(1, self._gl.GLuint(buffer_id))

    def vertex_attrib_pointer(
        self,
        index: int,
        size: int,
        type_: int,
        normalized: bool,
        stride: int,
        offset: int,
    ) -> None:
        flag = self._gl.GL_TRUE if normalized else self._gl.GL_FALSE
        self._gl.glVertexAttribPointer(index, size, type_, flag, stride, offset)

    def enable_vertex_attrib_array(self, index: int) -> None:
        self._gl.glEnableVertexAttribArray(index)


def _payload(data: Any, size: int, what: str) -> bytes:
    payload = bytes(data)
    if len(payload) < size:
        raise OGL3DError(
            f"VertexArrayObject | {what} holds {len(payload)} bytes, {size} needed"
        )
    return payload[:size]


def _check_vertex_desc(desc: VertexBufferDesc) -> None:
    if not desc.list_size:
        raise OGL3DError("VertexArrayObject | list_size is NULL")
    if not desc.vertex_size:
        raise OGL3DError("VertexArrayObject | vertex_size is NULL")
    if desc.vertices_list is None:
        raise OGL3DError("VertexArrayObject | vertices_list is NULL")


def _check_index_desc(desc: IndexBufferDesc) -> None:
    if not desc.list_size:
        raise OGL3DError("VertexArrayObject | list_size is NULL")
    if desc.indices_list is None:
        raise OGL3DError("VertexArrayObject | indices_list is NULL")


class VertexArrayObject:
    """A vertex array with its vertex buffer, attribute layout and index buffer."""

    def __init__(
        self,
        vb_desc: VertexBufferDesc,
        ib_desc: IndexBufferDesc | None = None,
        *,
        gl: Any = None,
    ) -> None:
        _check_vertex_desc(vb_desc)
        vertex_bytes = _payload(
            vb_desc.vertices_list, vb_desc.vertex_size * vb_desc.list_size, "vertices_list"
        )
        index_bytes = None
        if ib_desc is not None:
            _check_index_desc(ib_desc)
            index_bytes = _payload(ib_desc.indices_list, ib_desc.list_size, "indices_list")

        self._gl = gl if gl is not None else _PygletGL()
        self._desc = vb_desc

        self._vao_id = self._gl.gen_vertex_array()
        self._gl.bind_vertex_array(self._vao_id)

        self._vbo_id = self._gl.gen_buffer()
        self._gl.bind_buffer(GL_ARRAY_BUFFER, self._vbo_id)
        self._gl.buffer_data(GL_ARRAY_BUFFER, len(vertex_bytes), vertex_bytes, GL_STATIC_DRAW)

        offset = 0
        for index, attribute in enumerate(vb_desc.attributes_list):
            self._gl.vertex_attrib_pointer(
                index, attribute.num_elements, GL_FLOAT, False, vb_desc.vertex_size, offset
            )
            self._gl.enable_vertex_attrib_array(index)
            # Each attribute starts right after the one before it.
            offset = attribute.num_elements * FLOAT_SIZE

        self._gl.bind_vertex_array(0)

        self._ebo_id = 0
        if index_bytes is not None:
            self._gl.bind_vertex_array(self._vao_id)
            self._ebo_id = self._gl.gen_buffer()
            self._gl.bind_buffer(GL_ELEMENT_ARRAY_BUFFER, self._ebo_id)
            self._gl.buffer_data(
                GL_ELEMENT_ARRAY_BUFFER, len(index_bytes), index_bytes, GL_STATIC_DRAW
            )
            self._gl.bind_vertex_array(0)

    @property
    def id(self) -> int:
        return self._vao_id

    @property
    def vertex_buffer_size(self) -> int:
        """Number of vertices in the vertex buffer."""
        return self._desc.list_size

    @property
    def vertex_size(self) -> int:
        """Size in bytes of one vertex."""
        return self._desc.vertex_size

    def release(self) -> None:
        """Delete the buffers and the vertex array; safe to call twice."""
        if self._ebo_id:
            self._gl.delete_buffer(self._ebo_id)
            self._ebo_id = 0
        if self._vbo_id:
            self._gl.delete_buffer(self._vbo_id)
            self._vbo_id = 0
        if self._vao_id:
            self._gl.delete_vertex_array(self._vao_id)
            self._vao_id = 0

    def __enter__(self) -> VertexArrayObject:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()