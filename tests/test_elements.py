import pytest

from xscrt.elements import (
    IdentityProvider,
    IdRegistrationError,
    Type,
)
from xscrt.schema_types import Boolean, Byte, Double, UnsignedByte


class NameIdentity(IdentityProvider):
    def __init__(self, name):
        self.name = name

    def key(self):
        return self.name


def test_container_defaults_to_self():
    node = Type()
    assert node.container() is node
    assert node.root() is node


def test_root_walks_up_containers():
    top, middle, leaf = Type(), Type(), Type()
    middle.set_container(top)
    leaf.set_container(middle)
    assert leaf.container() is middle
    assert leaf.root() is top


def test_register_propagates_to_containers():
    top, leaf = Type(), Type()
    leaf.set_container(top)
    ident = NameIdentity("a")
    target = Type()
    leaf.register_id(ident, target)
    assert leaf.lookup_id(NameIdentity("a")) is target
    assert top.lookup_id(NameIdentity("a")) is target


def test_duplicate_registration_raises():
    node = Type()
    node.register_id(NameIdentity("a"), Type())
    with pytest.raises(IdRegistrationError):
        node.register_id(NameIdentity("a"), Type())


def test_unregister_removes_everywhere():
    top, leaf = Type(), Type()
    leaf.set_container(top)
    ident = NameIdentity("a")
    leaf.register_id(ident, Type())
    leaf.unregister_id(ident)
    assert leaf.lookup_id(ident) is None
    assert top.lookup_id(ident) is None


def test_unregister_unknown_raises():
    node = Type()
    with pytest.raises(IdRegistrationError):
        node.unregister_id(NameIdentity("missing"))
    node.register_id(NameIdentity("a"), Type())
    with pytest.raises(IdRegistrationError):
        node.unregister_id(NameIdentity("b"))


def test_set_container_moves_registrations():
    old, new, leaf = Type(), Type(), Type()
    leaf.set_container(old)
    target = Type()
    leaf.register_id(NameIdentity("x"), target)
    leaf.set_container(new)
    assert old.lookup_id(NameIdentity("x")) is None
    assert new.lookup_id(NameIdentity("x")) is target
    assert leaf.lookup_id(NameIdentity("x")) is target


def test_registrations_carried_on_first_containment():
    top, leaf = Type(), Type()
    target = Type()
    leaf.register_id(NameIdentity("x"), target)
    leaf.set_container(top)
    assert top.lookup_id(NameIdentity("x")) is target


def test_identity_before_orders_by_key():
    assert IdentityProvider.before(NameIdentity("a"), NameIdentity("b"))
    assert not IdentityProvider.before(NameIdentity("b"), NameIdentity("a"))
    assert not IdentityProvider.before(NameIdentity("a"), NameIdentity("a"))


def test_idref_keeps_first_value():
    node = Type()
    first, second = Type(), Type()
    node.set_idref("ref", first)
    node.set_idref("ref", second)
    assert node.get_idref("ref") is first
    assert node.get_idref("other") is None


def test_signed_byte_wraps_like_a_char():
    assert Byte.from_text("200").value == -56
    assert Byte.from_text("-5").value == -5


def test_unsigned_byte_stays_in_range():
    for text in ("0", "255", "256", "-1", "1000"):
        value = UnsignedByte.from_text(text).value
        assert 0 <= value <= 255
    assert UnsignedByte.from_text("17").value == 17


def test_integer_reads_leading_number():
    assert Byte.from_text("  42xyz").value == 42


def test_unparseable_gives_default():
    assert Byte.from_text("abc") == Byte()
    assert Double.from_text("word") == Double()


def test_boolean_accepts_true_and_one_only():
    assert Boolean.from_text("true").value is True
    assert Boolean.from_text("1").value is True
    assert Boolean.from_text("false").value is False
    assert Boolean.from_text("TRUE").value is False
    assert Boolean.from_text(" 1").value is False


def test_boolean_text_form():
    assert str(Boolean(True)) == "1"
    assert str(Boolean.from_text(str(Boolean(False)))) == str(Boolean(False))


def test_float_parses_exponent():
    assert Double.from_text("2.5e1").value == 25.0


def test_float_round_trip():
    original = Double(1.5)
    assert Double.from_text(str(original)) == original


def test_fundamental_compares_with_raw_value():
    assert Byte(7) == 7
    assert Byte(7) == Byte(7)
    assert int(Byte(7)) == 7
    assert hash(Byte(7)) == hash(7)