"""Key conflict detection for localized enums

Scans case names in declaration order and reports every case whose
localization key was already produced by an earlier case. Each report
pairs the later case with the first case that produced the key, so a
third colliding case is paired with the first one, not the second.

Conflicts are facts, not failures: nothing here raises on a collision.
Callers decide whether a conflict is an error or a warning.
"""

from typing import Iterable, List, Set

from localized_keys.core.conflict_record import ConflictRecord
from localized_keys.core.key_format import KeyFormat
from localized_keys.generators.key_table import KeyTable


class ConflictDetector:
    """Finds case names that share a localization key

    Usage Example:
        detector = ConflictDetector(KeyFormat.PASCAL_CASE)
        records = detector.detect(["duplicate", "Duplicate"])
        # [ConflictRecord(key='Duplicate', first='duplicate', second='Duplicate')]
    """

    def __init__(self, key_format: KeyFormat = KeyFormat.UPPER_SNAKE_CASE) -> None:
        """Initialize conflict detector

        Args:
            key_format: Format used to generate keys
        """
        self.key_format = key_format

    def build_table(self, identifiers: Iterable[str]) -> KeyTable:
        """Build a key table for the case names

        Args:
            identifiers: Case names in declaration order

        Returns:
            Populated KeyTable
        """
        table = KeyTable(self.key_format)
        for identifier in identifiers:
            table.add(identifier)
        return table

    def detect(self, identifiers: Iterable[str]) -> List[ConflictRecord]:
        """Detect key conflicts

        Args:
            identifiers: Case names in declaration order

        Returns:
            Conflict records ordered by the later colliding case
        """
        return self.build_table(identifiers).conflicts


def detect_conflicts(identifiers: Iterable[str],
                     key_format: KeyFormat = KeyFormat.UPPER_SNAKE_CASE) -> List[ConflictRecord]:
    """Detect case names that produce the same localization key"""
    return ConflictDetector(key_format).detect(identifiers)


def colliding_keys(records: Iterable[ConflictRecord]) -> Set[str]:
    """Get the keys that appear in at least one conflict"""
    return {record.key for record in records}
