import pytest

from ogl3d.prerequisites import (
    CullType,
    IndexBufferDesc,
    OGL3DError,
    ShaderType,
    TriangleType,
    VertexAttribute,
    VertexBufferDesc,
    WindingOrder,
    info,
    warning,
)


def test_error_message_prefix():
    err = OGL3DError("listSize is NULL")
    assert str(err) == "OGL3D Error: listSize is NULL"
    assert err.message == "listSize is NULL"


def test_error_is_runtime_error():
    err = OGL3DError("boom")
    assert isinstance(err, RuntimeError)
    assert str(err) == "OGL3D Error: boom"
    assert err.message == "boom"


def test_warning_writes_to_stderr(capsys):
    warning("shader not found")
    captured = capsys.readouterr()
    assert captured.err == "OGL3D Warning: shader not found\n"
    assert captured.out == ""


def test_info_writes_to_stderr(capsys):
    info("compiled successfully")
    assert capsys.readouterr().err == "OGL3D Info: compiled successfully\n"


def test_enum_values_follow_declaration_order():
    assert TriangleType(0) is TriangleType.TRIANGLE_LIST
    assert TriangleType(1) is TriangleType.TRIANGLE_STRIP
    assert [c.value for c in CullType] == [0, 1, 2]
    assert WindingOrder(1) is WindingOrder.COUNTER_CLOCKWISE
    assert ShaderType.FRAGMENT_SHADER == 1


def test_vertex_buffer_desc_defaults_are_empty():
    desc = VertexBufferDesc()
    assert desc.vertices_list is None
    assert desc.vertex_size == 0
    assert desc.list_size == 0
    assert len(desc.attributes_list) == 0


def test_descriptors_hold_given_values():
    attrs = (VertexAttribute(3), VertexAttribute(2))
    desc = VertexBufferDesc(b"\x00" * 40, 20, 2, attrs)
    assert desc.attributes_list[1].num_elements == 2
    assert desc.vertex_size * desc.list_size == len(desc.vertices_list)
    ib = IndexBufferDesc(b"\x01\x02", 2)
    assert ib.list_size == len(ib.indices_list)