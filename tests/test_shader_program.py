import pytest

from ogl3d.prerequisites import ShaderProgramDesc, ShaderType
from ogl3d.shader_program import ShaderBuildError, ShaderProgram

VERT_SOURCE = "void main() { gl_Position = vec4(0.0); }\n"
FRAG_SOURCE = "out vec4 color; void main() { color = vec4(1.0); }\n"


class FakeBackend:
    def __init__(self, bad_sources=(), link_error=None, blocks=None):
        self.calls = []
        self._next = 1
        self.bad_sources = set(bad_sources)
        self.link_error = link_error
        self.blocks = blocks or {}

    def _new(self):
        value = self._next
        self._next += 1
        return value

    def compile_shader(self, source, shader_type):
        if source in self.bad_sources:
            raise ShaderBuildError("syntax error near main")
        shader_id = self._new()
        self.calls.append(("compile_shader", source, shader_type, shader_id))
        return shader_id

    def link_program(self, shader_ids):
        if self.link_error:
            raise ShaderBuildError(self.link_error)
        program_id = self._new()
        self.calls.append(("link_program", list(shader_ids), program_id))
        return program_id

    def uniform_block_index(self, program_id, name):
        return self.blocks.get(name)

    def bind_uniform_block(self, program_id, index, slot):
        self.calls.append(("bind_uniform_block", program_id, index, slot))

    def delete_shader(self, shader_id):
        self.calls.append(("delete_shader", shader_id))

    def delete_program(self, program_id):
        self.calls.append(("delete_program", program_id))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def desc(tmp_path):
    vert = tmp_path / "basic.vert"
    frag = tmp_path / "basic.frag"
    vert.write_text(VERT_SOURCE, encoding="utf-8")
    frag.write_text(FRAG_SOURCE, encoding="utf-8")
    return ShaderProgramDesc(vert, frag)


def test_compiles_and_links_both_shaders(desc, capsys):
    backend = FakeBackend()
    program = ShaderProgram(desc, gl=backend)
    compiled = backend.named("compile_shader")
    assert [(c[1], c[2]) for c in compiled] == [
        (VERT_SOURCE, ShaderType.VERTEX_SHADER),
        (FRAG_SOURCE, ShaderType.FRAGMENT_SHADER),
    ]
    link = backend.named("link_program")[0]
    assert link[1] == [c[3] for c in compiled]
    assert program.id == link[2]
    assert capsys.readouterr().err.count("compiled successfully") == 2


def test_missing_file_is_skipped(tmp_path, desc, capsys):
    backend = FakeBackend()
    missing = tmp_path / "missing.vert"
    ShaderProgram(ShaderProgramDesc(missing, desc.fragment_shader_file_path), gl=backend)
    err = capsys.readouterr().err
    assert f"OGL3D Warning: ShaderProgram | {missing} not found" in err
    compiled = backend.named("compile_shader")
    assert [c[2] for c in compiled] == [ShaderType.FRAGMENT_SHADER]
    assert backend.named("link_program")[0][1] == [compiled[0][3]]


def test_compile_error_is_reported(desc, capsys):
    backend = FakeBackend(bad_sources={FRAG_SOURCE})
    ShaderProgram(desc, gl=backend)
    err = capsys.readouterr().err
    assert "compiled with errors" in err
    assert "syntax error near main" in err
    assert [c[2] for c in backend.named("compile_shader")] == [ShaderType.VERTEX_SHADER]


def test_link_error_leaves_program_unlinked(desc, capsys):
    program = ShaderProgram(desc, gl=FakeBackend(link_error="link failed"))
    assert program.id == 0
    assert "OGL3D Warning: ShaderProgram | link failed" in capsys.readouterr().err


def test_uniform_block_binding(desc):
    backend = FakeBackend(blocks={"UniformData": 3})
    program = ShaderProgram(desc, gl=backend)
    program.set_uniform_buffer_slot("UniformData", 0)
    assert backend.named("bind_uniform_block") == [
        ("bind_uniform_block", program.id, 3, 0)
    ]


def test_unknown_uniform_block_warns(desc, capsys):
    backend = FakeBackend()
    program = ShaderProgram(desc, gl=backend)
    capsys.readouterr()
    program.set_uniform_buffer_slot("Missing", 1)
    assert backend.named("bind_uniform_block") == []
    assert "Missing" in capsys.readouterr().err


def test_release_deletes_shaders_and_program(desc):
    backend = FakeBackend()
    program = ShaderProgram(desc, gl=backend)
    program_id = program.id
    shader_ids = [c[3] for c in backend.named("compile_shader")]
    program.release()
    program.release()
    assert [c[1] for c in backend.named("delete_shader")] == shader_ids
    assert backend.named("delete_program") == [("delete_program", program_id)]
    assert program.id == 0


def test_context_manager_releases(desc):
    backend = FakeBackend()
    with ShaderProgram(desc, gl=backend) as program:
        program_id = program.id
    assert backend.named("delete_program") == [("delete_program", program_id)]