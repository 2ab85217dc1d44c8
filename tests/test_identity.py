import pytest
from bson import ObjectId

from structure_websites.core.identity import parse_object_id, resolve_identity
from structure_websites.errors import InvalidIdentityError

HEX = "652f1c2b9d3e4a0011111111"


def test_missing_id_generates_new_identity():
    a = resolve_identity({"slug": "home"})
    b = resolve_identity({"slug": "home"})

    assert isinstance(a, ObjectId)
    assert a != b


@pytest.mark.parametrize("raw", ["", "   "])
def test_blank_string_generates_new_identity(raw):
    assert isinstance(resolve_identity({"_id": raw}), ObjectId)


def test_hex_string_is_trimmed_and_parsed():
    assert resolve_identity({"_id": f"  {HEX} "}) == ObjectId(HEX)


def test_extended_json_oid_is_accepted():
    assert resolve_identity({"_id": {"$oid": HEX}}) == ObjectId(HEX)


def test_native_object_id_is_used_unchanged():
    oid = ObjectId()

    assert resolve_identity({"_id": oid}) is oid


@pytest.mark.parametrize("raw", ["not-an-id", "652f", 42, ["x"], {"id": HEX}])
def test_malformed_identity_is_rejected(raw):
    with pytest.raises(InvalidIdentityError):
        resolve_identity({"_id": raw})


def test_parse_object_id():
    assert parse_object_id(HEX) == ObjectId(HEX)
    with pytest.raises(InvalidIdentityError):
        parse_object_id("zz")
