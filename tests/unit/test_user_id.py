"""
Unit tests for snapfind.utils.user_id
"""
from types import SimpleNamespace

import pytest

from snapfind.utils.user_id import is_valid_uuid, safe_user_id


class TestSafeUserId:
    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_returns_none(self, value):
        assert safe_user_id(value) is None

    def test_string_passes_through(self):
        assert safe_user_id("65f0c0ffee0000000000abcd") == "65f0c0ffee0000000000abcd"

    def test_mapping_keys_in_order(self):
        assert safe_user_id({"id": "a", "user_id": "b"}) == "a"
        assert safe_user_id({"user_id": "b"}) == "b"
        assert safe_user_id({"uid": "c"}) == "c"
        assert safe_user_id({"name": "x"}) is None

    def test_nested_mapping(self):
        assert safe_user_id({"id": {"uid": "deep"}}) == "deep"

    def test_number_is_stringified(self):
        assert safe_user_id(42) == "42"

    def test_object_attribute(self):
        assert safe_user_id(SimpleNamespace(id="obj-1")) == "obj-1"
        assert safe_user_id(SimpleNamespace(other="x")) is None


def test_is_valid_uuid():
    assert is_valid_uuid("123e4567-e89b-42d3-a456-426614174000")
    assert not is_valid_uuid("user-1")
    assert not is_valid_uuid(None)
