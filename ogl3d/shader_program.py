"""Shader programs built from a vertex and a fragment shader file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from .prerequisites import ShaderProgramDesc, ShaderType, info, warning


class ShaderBuildError(Exception):
    """Raised by a shader backend when compiling or linking fails; holds the log."""


class _PygletShaderBackend:
    """Compiles and links shaders on the current OpenGL context."""

    _KINDS = {ShaderType.VERTEX_SHADER: "vertex", ShaderType.FRAGMENT_SHADER: "fragment"}

    def __init__(self) -> None:
        from pyglet import gl
        from pyglet.graphics import shader

        self._gl = gl
        self._shader = shader
        self._shaders: dict[int, Any] = {}
        self._programs: dict[int, Any] = {}

    def compile_shader(self, source: str, shader_type: ShaderType) -> int:
        try:
            compiled = self._shader.Shader(source, self._KINDS[shader_type])
        except self._shader.ShaderException as exc:
            raise ShaderBuildError(str(exc)) from exc
        self._shaders[compiled.id] = compiled
        return compiled.id

    def link_program(self, shader_ids: Sequence[int]) -> int:
        try:
            program = self._shader.ShaderProgram(*(self._shaders[i] for i in shader_ids))
        except self._shader.ShaderException as exc:
            raise ShaderBuildError(str(exc)) from exc
        self._programs[program.id] = program
        return program.id

    def uniform_block_index(self, program_id: int, name: str) -> int | None:
        block = self._programs[program_id].uniform_blocks.get(name)
        return None if block is None else block.index

    def bind_uniform_block(self, program_id: int, index: int, slot: int) -> None:
        self._gl.glUniformBlockBinding(program_id, index, slot)

    def delete_shader(self, shader_id: int) -> None:
        shader = self._shaders.pop(shader_id, None)
        if shader is not None:
            shader.delete()

    def delete_program(self, program_id: int) -> None:
        program = self._programs.pop(program_id, None)
        if program is not None:
            program.delete()


class ShaderProgram:
    """A linked program; shaders that fail to load or compile are skipped with a warning."""

    def __init__(self, desc: ShaderProgramDesc, *, gl: Any = None) -> None:
        self._gl = gl if gl is not None else _PygletShaderBackend()
        self._attached: dict[ShaderType, int] = {}
        self._program_id = 0
        self._attach(desc.vertex_shader_file_path, ShaderType.VERTEX_SHADER)
        self._attach(desc.fragment_shader_file_path, ShaderType.FRAGMENT_SHADER)
        self._link()

    @property
    def id(self) -> int:
        return self._program_id

    def set_uniform_buffer_slot(self, name: str, slot: int) -> None:
        """Bind the uniform block ``name`` to binding point ``slot``."""
        if not self._program_id:
            warning(f"ShaderProgram | cannot bind {name}: program is not linked")
            return
        index = self._gl.uniform_block_index(self._program_id, name)
        if index is None:
            warning(f"ShaderProgram | uniform block {name} not found")
            return
        self._gl.bind_uniform_block(self._program_id, index, slot)

    def release(self) -> None:
        """Delete the shaders and the program; safe to call twice."""
        for shader_id in self._attached.values():
            self._gl.delete_shader(shader_id)
        self._attached.clear()
        if self._program_id:
            self._gl.delete_program(self._program_id)
            self._program_id = 0

    def __enter__(self) -> ShaderProgram:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def _attach(self, path: Any, shader_type: ShaderType) -> None:
        try:
            source = Path(path).read_text(encoding="utf-8")
        except OSError:
            warning(f"ShaderProgram | {path} not found")
            return
        try:
            shader_id = self._gl.compile_shader(source, shader_type)
        except ShaderBuildError as exc:
            warning(f"ShaderProgram | {path} compiled with errors:\n{exc}")
            return
        self._attached[shader_type] = shader_id
        info(f"ShaderProgram | {path} compiled successfully")

    def _link(self) -> None:
        try:
            self._program_id = self._gl.link_program(list(self._attached.values()))
        except ShaderBuildError as exc:
            warning(f"ShaderProgram | {exc}")