"""Localization keys for enum case names

Converts case names into localization keys in one of four formats
and detects case names that would share a key.
"""

from localized_keys.core.key_format import KeyFormat
from localized_keys.core.conflict_record import ConflictRecord
from localized_keys.generators.naming import LocalizationKeyScheme, convert, split_words
from localized_keys.generators.key_table import KeyTable
from localized_keys.analyzers.conflict_detector import (
    ConflictDetector, detect_conflicts, colliding_keys
)

__version__ = "0.1.0"

__all__ = [
    'KeyFormat',
    'ConflictRecord',
    'LocalizationKeyScheme',
    'convert',
    'split_words',
    'KeyTable',
    'ConflictDetector',
    'detect_conflicts',
    'colliding_keys',
]
