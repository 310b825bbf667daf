"""Key table for localized enums

Keeps the localization key of every case name in declaration order,
along with the first case name that claimed each key. A case whose key
is already claimed is still recorded, and the collision is returned
as a ConflictRecord pairing it with the first owner.
"""

from typing import Dict, List, Optional, Tuple

from localized_keys.core.conflict_record import ConflictRecord
from localized_keys.core.key_format import KeyFormat
from localized_keys.generators.naming import LocalizationKeyScheme


class KeyTable:
    """Ordered case name to localization key table"""

    def __init__(self, key_format: KeyFormat = KeyFormat.UPPER_SNAKE_CASE) -> None:
        """Initialize empty key table

        Args:
            key_format: Format used for every key in the table
        """
        self.key_format = key_format
        self._entries: List[Tuple[str, str]] = []
        self._owners: Dict[str, str] = {}
        self._conflicts: List[ConflictRecord] = []

    def add(self, identifier: str) -> Optional[ConflictRecord]:
        """Add a case name to the table

        Args:
            identifier: Case name to add

        Returns:
            ConflictRecord if the key was already claimed, None otherwise
        """
        key = LocalizationKeyScheme.localized_key(identifier, self.key_format)
        self._entries.append((identifier, key))

        owner = self._owners.get(key)
        if owner is None:
            self._owners[key] = identifier
            return None

        record = ConflictRecord(key=key, first=owner, second=identifier)
        self._conflicts.append(record)
        return record

    def key_for(self, identifier: str) -> Optional[str]:
        """Get the key of a case name in the table

        Args:
            identifier: Case name to look up

        Returns:
            Key if the case name was added, None otherwise
        """
        for name, key in self._entries:
            if name == identifier:
                return key
        return None

    def identifier_for(self, key: str) -> Optional[str]:
        """Get the first case name that produced a key

        Args:
            key: Localization key

        Returns:
            First owning case name, None if no case produced the key
        """
        return self._owners.get(key)

    def contains_key(self, key: str) -> bool:
        """Check if any case name produced the key"""
        return key in self._owners

    def entries(self) -> List[Tuple[str, str]]:
        """Get all (case name, key) pairs in insertion order

        Returns:
            List of pairs, colliding cases included
        """
        return list(self._entries)

    def keys(self) -> List[str]:
        """Get distinct keys in first-seen order"""
        return list(self._owners)

    @property
    def conflicts(self) -> List[ConflictRecord]:
        """Conflicts found so far, in insertion order"""
        return list(self._conflicts)

    def size(self) -> int:
        """Get number of case names in the table"""
        return len(self._entries)

    def clear(self) -> None:
        """Clear the key table"""
        self._entries.clear()
        self._owners.clear()
        self._conflicts.clear()
