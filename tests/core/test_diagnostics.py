"""Tests for diagnostics"""

from localized_keys.core.conflict_record import ConflictRecord
from localized_keys.core.diagnostics import (
    DiagnosticSeverity, empty_key, invalid_identifier, key_conflict
)


class TestDiagnostics:
    """Test suite for diagnostic factories"""

    def test_key_conflict(self):
        """Test key conflict diagnostic"""
        diagnostic = key_conflict(ConflictRecord(key="A", first="a", second="A"))
        assert diagnostic.severity is DiagnosticSeverity.ERROR
        assert diagnostic.is_error
        assert diagnostic.diagnostic_id == "Localized.keyConflict"
        assert diagnostic.identifier == "A"
        assert diagnostic.format() == (
            "error: Cases 'a' and 'A' produce the same localization key 'A'"
        )

    def test_key_conflict_as_warning(self):
        """Test downgrading a conflict to a warning"""
        diagnostic = key_conflict(ConflictRecord(key="A", first="a", second="A"))
        warning = diagnostic.with_severity(DiagnosticSeverity.WARNING)
        assert not warning.is_error
        assert warning.message == diagnostic.message
        assert warning.format().startswith("warning: ")

    def test_empty_key(self):
        """Test empty key diagnostic"""
        diagnostic = empty_key("``")
        assert diagnostic.severity is DiagnosticSeverity.WARNING
        assert diagnostic.diagnostic_id == "Localized.emptyKey"
        assert "empty localization key" in diagnostic.message

    def test_invalid_identifier(self):
        """Test invalid identifier diagnostic"""
        diagnostic = invalid_identifier("x-y")
        assert diagnostic.diagnostic_id == "Localized.invalidIdentifier"
        assert diagnostic.format() == "warning: 'x-y' is not a valid case name"
