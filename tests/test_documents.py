from xml.parsers.expat import ExpatError

import pytest

from xscrt.documents import (
    BufferReader,
    BufferWriter,
    DocumentWriter,
    FileReader,
    FileWriter,
)

NS = "urn:example:settings"


def write_settings(entity, document):
    root = document.documentElement
    for key, value in sorted(entity.items()):
        child = document.createElementNS(NS, key)
        child.appendChild(document.createTextNode(value))
        root.appendChild(child)


def read_settings(document):
    result = {}
    for child in document.documentElement.childNodes:
        if child.nodeType == child.ELEMENT_NODE:
            result[child.localName] = "".join(
                node.data for node in child.childNodes if node.nodeType == node.TEXT_NODE
            )
    return result


SETTINGS = {"alpha": "one", "beta": "two"}


def test_file_round_trip(tmp_path):
    target = tmp_path / "settings.xml"
    writer = FileWriter(NS, "settings", write_settings)
    writer.write_entity(SETTINGS)
    assert writer.write(target) is True

    reader = FileReader(read_settings)
    document = reader.read(target)
    assert document.documentElement.localName == "settings"
    assert document.documentElement.namespaceURI == NS
    assert reader.entity() == SETTINGS


def test_buffer_round_trip():
    writer = BufferWriter(NS, "settings", write_settings)
    writer.write_entity(SETTINGS)
    data = writer.write(writer.buffer_size())
    assert len(data) == writer.buffer_size()

    reader = BufferReader(read_settings, "memory")
    reader.read(data)
    assert reader.system_id == "memory"
    assert reader.entity() == SETTINGS


def test_buffer_too_small_raises():
    writer = BufferWriter(NS, "settings", write_settings)
    writer.write_entity(SETTINGS)
    with pytest.raises(ValueError):
        writer.write(writer.buffer_size() - 1)


def test_buffer_is_empty_before_writing():
    writer = BufferWriter(NS, "settings", write_settings)
    assert writer.buffer_size() == 0
    assert writer.write(0) == b""


def test_buffer_accumulates_serializations():
    writer = BufferWriter(None, "settings", None)
    writer.write_entity(SETTINGS)
    first = writer.write()
    writer.write_entity(SETTINGS)
    assert writer.write() == first + first


def test_reader_without_document_gives_none():
    reader = BufferReader(read_settings)
    assert reader.document() is None
    assert reader.entity() is None


def test_reader_without_function_gives_none():
    reader = BufferReader(None)
    reader.read(b"<settings/>")
    assert reader.document().documentElement.tagName == "settings"
    assert reader.entity() is None


def test_malformed_buffer_raises():
    reader = BufferReader(read_settings)
    with pytest.raises(ExpatError):
        reader.read(b"<settings><alpha></settings>")


def test_missing_file_raises(tmp_path):
    reader = FileReader(read_settings)
    with pytest.raises(OSError):
        reader.read(tmp_path / "absent.xml")


def test_writer_without_function_leaves_document_empty():
    writer = DocumentWriter(NS, "settings", None)
    writer.write_entity(SETTINGS)
    root = writer.document().documentElement
    assert root.localName == "settings"
    assert [n for n in root.childNodes if n.nodeType == n.ELEMENT_NODE] == []


def test_prefixed_root_declares_namespace():
    writer = BufferWriter(NS, "cfg:settings", None)
    writer.write_entity({})
    reader = BufferReader(None)
    document = reader.read(writer.write())
    root = document.documentElement
    assert root.prefix == "cfg"
    assert root.namespaceURI == NS
    assert root.localName == "settings"


def test_string_buffer_is_accepted():
    reader = BufferReader(read_settings)
    reader.read("<settings><alpha>one</alpha></settings>")
    assert reader.entity() == {"alpha": "one"}