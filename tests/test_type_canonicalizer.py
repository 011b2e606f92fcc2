"""Tests for the type canonicalizer."""
import pytest

from schemadoc.introspection.type_canonicalizer import (
    CanonicalType,
    canonicalize,
    element_type,
    is_array_type,
)

INT_ALIASES = ["int", "int64", "int32", "uint64", "uint32", "integer"]

TOKENS = INT_ALIASES + [
    "object",
    "array_object",
    "time.Time",
    "bool",
    "string",
    "[]int64",
    "[]bool",
    "[]string",
    "[]uuid",
    "array",
    "uuid",
    "",
]


class TestCanonicalize:
    """Test token mapping."""

    @pytest.mark.parametrize("token", INT_ALIASES)
    def test_int_aliases(self, token):
        """All integer aliases map to the same canonical type."""
        assert canonicalize(token) == "int"

    def test_structured_types(self):
        """Test object and array-of-object markers."""
        assert canonicalize("object") == "obj"
        assert canonicalize("array_object") == "[]obj"

    def test_datetime_and_boolean(self):
        """Test time.Time and bool aliases."""
        assert canonicalize("time.Time") == "datetime"
        assert canonicalize("bool") == "boolean"

    def test_array_of_alias(self):
        """Test array markers composed with a mapped base type."""
        assert canonicalize("[]uint32") == "[]int"
        assert canonicalize("[]time.Time") == "[]datetime"
        assert canonicalize("[]bool") == "[]boolean"

    def test_pass_through(self):
        """Unknown tokens are returned unchanged."""
        assert canonicalize("uuid") == "uuid"
        assert canonicalize("[]string") == "[]string"
        assert canonicalize("[]uuid") == "[]uuid"
        assert canonicalize("Object") == "Object"  # case-sensitive
        assert canonicalize("") == ""

    def test_none_is_empty(self):
        """A missing token canonicalizes to an empty type."""
        assert canonicalize(None) == ""

    @pytest.mark.parametrize("token", TOKENS)
    def test_idempotent(self, token):
        """canonicalize(canonicalize(t)) == canonicalize(t)."""
        once = canonicalize(token)
        assert canonicalize(once) == once

    def test_returns_plain_strings(self):
        """Canonical values compare equal to the enum members."""
        assert canonicalize("integer") == CanonicalType.INT
        assert type(canonicalize("integer")) is str


class TestArrayHelpers:
    """Test array type helpers."""

    def test_is_array_type(self):
        assert is_array_type("[]int") is True
        assert is_array_type("[]obj") is True
        assert is_array_type("int") is False
        assert is_array_type("array") is False

    def test_element_type(self):
        assert element_type("[]int") == "int"
        assert element_type("[]") == ""
        assert element_type("string") == ""
