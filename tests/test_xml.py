from xml.dom import minidom

import pytest

from xscrt.xml import (
    Attribute,
    Element,
    NoPrefixError,
    fq_name,
    ns_name,
    ns_prefix,
    prefix,
    uq_name,
)

DOC = (
    '<r xmlns="urn:d" xmlns:p="urn:p">'
    '<p:c a="1">hi<x>there</x></p:c>'
    "</r>"
)


@pytest.fixture
def root():
    document = minidom.parseString(DOC)
    return Element(document.documentElement)


def _child(root):
    return Element(root.dom_element().getElementsByTagName("p:c")[0])


def test_prefix_and_unqualified_name():
    assert prefix("a:b") == "a"
    assert prefix("b") == ""
    assert uq_name("a:b") == "b"
    assert uq_name("b") == "b"


def test_parsed_element_name_and_namespace(root):
    assert root.name() == "r"
    assert root.namespace() == "urn:d"
    child = _child(root)
    assert child.name() == "c"
    assert child.namespace() == "urn:p"


def test_value_collects_nested_text(root):
    assert _child(root).value() == "hithere"


def test_attribute_lookup(root):
    child = _child(root)
    assert child["a"] == "1"
    assert child["missing"] == ""


def test_parent(root):
    child = _child(root)
    assert child.parent() == root
    assert root.parent() is None


def test_ns_name_and_fq_name(root):
    child = _child(root)
    assert ns_name(child, "p:foo") == "urn:p"
    assert ns_name(child, "foo") == "urn:d"
    assert fq_name(child, "p:foo") == "urn:p#foo"
    assert fq_name(child, "foo") == "urn:d#foo"


def test_fq_name_without_namespace():
    document = minidom.parseString("<plain><inner/></plain>")
    element = Element(document.documentElement)
    assert ns_name(element, "foo") == ""
    assert fq_name(element, "foo") == "foo"


def test_ns_prefix(root):
    assert ns_prefix("urn:p", root) == "p"
    assert ns_prefix("urn:d", root) == ""
    with pytest.raises(NoPrefixError):
        ns_prefix("urn:unbound", root)


def test_create_namespaced_element(root):
    child = Element.create("item", root, "urn:p")
    assert child.name() == "item"
    assert child.namespace() == "urn:p"
    assert child.dom_element().tagName == "p:item"
    assert child.parent() == root
    assert root.dom_element().lastChild is child.dom_element()


def test_create_default_namespace_element_has_no_prefix(root):
    child = Element.create("item", root, "urn:d")
    assert child.dom_element().tagName == "item"


def test_create_with_unbound_namespace_raises(root):
    with pytest.raises(NoPrefixError):
        Element.create("item", root, "urn:unbound")


def test_create_plain_element_and_set_value(root):
    child = Element.create("plain", root)
    assert child.name() == "plain"
    assert child.namespace() == ""
    child.set_value("abc")
    child.set_value("def")
    assert child.value() == "abcdef"


def test_create_attribute_and_change_value(root):
    attribute = Attribute.create("k", "v", root)
    assert attribute.name() == "k"
    assert attribute.value() == "v"
    assert root["k"] == "v"
    attribute.set_value("w")
    assert attribute.value() == "w"
    assert root["k"] == "w"


def test_create_namespaced_attribute(root):
    attribute = Attribute.create("k", "v", root, "urn:p")
    node = attribute.dom_attribute()
    assert node.name == "p:k"
    assert node.namespaceURI == "urn:p"
    assert root.dom_element().getAttributeNS("urn:p", "k") == "v"


def test_attribute_from_parsed_node(root):
    node = _child(root).dom_element().getAttributeNode("a")
    attribute = Attribute(node)
    assert attribute.name() == "a"
    assert attribute.value() == "1"
    assert attribute.dom_attribute() is node