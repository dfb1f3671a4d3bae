"""Unit tests for CompoundOptionEntry."""

import pytest

from compound_config import CompoundOptionEntry, UnknownTypeError


class TestCompoundOptionEntry:
    """Tests for column descriptors."""

    def test_create_entry(self):
        """Test creating an entry with a Python class."""
        entry = CompoundOptionEntry(int, "key_", "keycode")
        assert entry.get_prefix() == "key_"
        assert entry.get_name() == "keycode"
        assert entry.value_type.type_id == "int"

    def test_name_defaults_to_empty(self):
        entry = CompoundOptionEntry("str", "cmd_")
        assert entry.name == ""

    def test_empty_prefix_rejected(self):
        with pytest.raises(ValueError):
            CompoundOptionEntry(int, "")

    def test_unknown_type_rejected(self):
        with pytest.raises(UnknownTypeError):
            CompoundOptionEntry("matrix", "m_")

    def test_validate(self):
        """Test validation against the declared type."""
        entry = CompoundOptionEntry(int, "key_")
        assert entry.validate("5")
        assert not entry.validate("not-an-int")

    def test_validate_never_raises(self):
        entry = CompoundOptionEntry("activator", "binding_")
        assert not entry.validate("<<<")
        assert not entry.validate(None)

    def test_clone_is_equal_but_distinct(self):
        """Test that clones keep prefix, name and validation."""
        entry = CompoundOptionEntry(float, "scale_", "scale")
        clone = entry.clone()
        assert clone is not entry
        assert clone == entry
        assert clone.validate("1.5")
        assert not clone.validate("big")

    def test_entries_immutable(self):
        entry = CompoundOptionEntry(int, "key_")
        with pytest.raises(AttributeError):
            entry.prefix = "other_"

    def test_equality_considers_type(self):
        assert CompoundOptionEntry(int, "a_") != CompoundOptionEntry(str, "a_")
        assert CompoundOptionEntry(int, "a_") == CompoundOptionEntry("int", "a_")
