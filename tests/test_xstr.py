import pytest

from xscrt.xstr import XStr


def test_append_joins_text():
    s = XStr("schema")
    s.append(".xsd")
    assert str(s) == "schema.xsd"
    assert len(s) == len("schema.xsd")


def test_append_none_keeps_text():
    s = XStr("abc")
    s.append(None)
    assert s == "abc"


def test_append_xstr():
    s = XStr("a")
    s.append(XStr("b"))
    assert s == XStr("ab")


def test_erase_removes_range():
    s = XStr("abcdef")
    s.erase(1, 3)
    assert s == "adef"


def test_erase_empty_range_keeps_text():
    s = XStr("abc")
    s.erase(2, 2)
    assert s == "abc"


@pytest.mark.parametrize("head, tail", [(2, 1), (-1, 2), (0, 4)])
def test_erase_out_of_range_raises(head, tail):
    s = XStr("abc")
    with pytest.raises(IndexError):
        s.erase(head, tail)
    assert s == "abc"


def test_getitem_and_iteration():
    s = XStr("xyz")
    assert s[0] == "x"
    assert s[-1] == "z"
    assert list(s) == ["x", "y", "z"]


def test_equality_with_str_and_xstr():
    assert XStr("same") == "same"
    assert XStr("same") == XStr("same")
    assert not (XStr("one") == XStr("two"))


def test_copy_is_independent():
    original = XStr("base")
    copy = XStr(original)
    copy.append("-more")
    assert original == "base"
    assert copy == "base-more"


def test_bytes_are_decoded():
    assert XStr("héllo".encode("utf-8")) == "héllo"


def test_release_empties_holder():
    s = XStr("content")
    assert s.release() == "content"
    assert len(s) == 0
    assert s == ""


def test_c_str_tracks_changes():
    s = XStr("ab")
    assert s.c_str() == "ab".encode("utf-8")
    s.append("c")
    assert s.c_str() == "abc".encode("utf-8")
    s.erase(0, 1)
    assert s.c_str() == "bc".encode("utf-8")


def test_default_is_empty():
    assert len(XStr()) == 0
    assert XStr(None) == ""