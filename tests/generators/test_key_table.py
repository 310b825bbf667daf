"""Tests for key table"""

from localized_keys.core.conflict_record import ConflictRecord
from localized_keys.core.key_format import KeyFormat
from localized_keys.generators.key_table import KeyTable


class TestKeyTable:
    """Test suite for KeyTable"""

    def test_initial_state(self):
        """Test initial empty state"""
        table = KeyTable()
        assert table.size() == 0
        assert table.entries() == []
        assert table.keys() == []
        assert table.conflicts == []
        assert table.key_format is KeyFormat.UPPER_SNAKE_CASE

    def test_add_single_identifier(self):
        """Test adding a single case name"""
        table = KeyTable()
        assert table.add("loveYou") is None
        assert table.size() == 1
        assert table.key_for("loveYou") == "LOVE_YOU"
        assert table.identifier_for("LOVE_YOU") == "loveYou"

    def test_add_multiple_identifiers(self):
        """Test adding distinct case names keeps order"""
        table = KeyTable(KeyFormat.LOWER_SNAKE_CASE)
        table.add("hello")
        table.add("loveYou")
        table.add("ok")
        assert table.entries() == [("hello", "hello"), ("loveYou", "love_you"), ("ok", "ok")]
        assert table.keys() == ["hello", "love_you", "ok"]

    def test_add_colliding_identifier(self):
        """Test a collision is recorded and returned"""
        table = KeyTable()
        table.add("a")
        record = table.add("A")
        assert record == ConflictRecord(key="A", first="a", second="A")
        assert table.conflicts == [record]
        assert table.size() == 2
        assert table.keys() == ["A"]

    def test_first_owner_is_kept(self):
        """Test the first case name keeps owning the key"""
        table = KeyTable()
        table.add("a")
        table.add("A")
        record = table.add("`a`")
        assert table.identifier_for("A") == "a"
        assert record.first == "a"

    def test_lookups_for_unknown_values(self):
        """Test lookups for values not in the table"""
        table = KeyTable()
        table.add("ok")
        assert table.key_for("missing") is None
        assert table.identifier_for("MISSING") is None
        assert not table.contains_key("MISSING")
        assert table.contains_key("OK")

    def test_entries_are_copies(self):
        """Test returned lists do not expose internal state"""
        table = KeyTable()
        table.add("a")
        table.add("A")
        table.entries().clear()
        table.conflicts.clear()
        assert table.size() == 2
        assert len(table.conflicts) == 1

    def test_clear(self):
        """Test clearing the table"""
        table = KeyTable()
        table.add("a")
        table.add("A")
        table.clear()
        assert table.size() == 0
        assert table.keys() == []
        assert table.conflicts == []
