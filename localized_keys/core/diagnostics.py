"""Diagnostics for localized enums

User-facing messages for the problems found while generating keys.
Key conflicts are errors; empty keys and suspicious case names are
warnings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from localized_keys.core.conflict_record import ConflictRecord


class DiagnosticSeverity(Enum):
    """Severity level of a diagnostic"""
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """A problem found while generating localization keys

    Attributes:
        severity: WARNING or ERROR
        name: Short diagnostic name (e.g., "keyConflict")
        message: Human-readable description
        identifier: Case name the diagnostic is about (optional)
    """
    severity: DiagnosticSeverity
    name: str
    message: str
    identifier: Optional[str] = None

    @property
    def diagnostic_id(self) -> str:
        """Stable identifier, e.g. "Localized.keyConflict" """
        return f"Localized.{self.name}"

    @property
    def is_error(self) -> bool:
        return self.severity is DiagnosticSeverity.ERROR

    def with_severity(self, severity: DiagnosticSeverity) -> 'Diagnostic':
        """Copy of this diagnostic with another severity"""
        return Diagnostic(severity, self.name, self.message, self.identifier)

    def format(self) -> str:
        """Format diagnostic for display

        Returns:
            Formatted string, e.g. "error: Cases 'a' and 'A' ..."
        """
        return f"{self.severity.value}: {self.message}"


def key_conflict(record: ConflictRecord) -> Diagnostic:
    """Diagnostic for two cases sharing a localization key"""
    return Diagnostic(
        severity=DiagnosticSeverity.ERROR,
        name="keyConflict",
        message=(
            f"Cases '{record.first}' and '{record.second}' produce "
            f"the same localization key '{record.key}'"
        ),
        identifier=record.second,
    )


def empty_key(identifier: str) -> Diagnostic:
    """Diagnostic for a case name that produced an empty key"""
    return Diagnostic(
        severity=DiagnosticSeverity.WARNING,
        name="emptyKey",
        message=f"Case '{identifier}' produces an empty localization key",
        identifier=identifier,
    )


def invalid_identifier(identifier: str) -> Diagnostic:
    """Diagnostic for a string that is not a valid case name"""
    return Diagnostic(
        severity=DiagnosticSeverity.WARNING,
        name="invalidIdentifier",
        message=f"'{identifier}' is not a valid case name",
        identifier=identifier,
    )
