"""Analyzers for localized enums

Modules:
- ConflictDetector: Finds case names that share a localization key
"""

from localized_keys.analyzers.conflict_detector import (
    ConflictDetector, detect_conflicts, colliding_keys
)

__all__ = [
    'ConflictDetector',
    'detect_conflicts',
    'colliding_keys',
]
