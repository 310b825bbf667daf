"""Localization key formats

The key format decides how the words of an enum case name are cased
and joined when building the key looked up in the localizable files.
"""

from enum import Enum
from typing import Optional


class KeyFormat(Enum):
    """Key format used in the localization files"""
    LOWER_SNAKE_CASE = "lowerSnakeCase"
    UPPER_SNAKE_CASE = "upperSnakeCase"
    CAMEL_CASE = "camelCase"
    PASCAL_CASE = "pascalCase"

    @classmethod
    def default(cls) -> 'KeyFormat':
        """Format used when none is given"""
        return cls.UPPER_SNAKE_CASE

    @classmethod
    def from_name(cls, name: Optional[str]) -> 'KeyFormat':
        """Parse a key format from its spelling

        Accepts the member value ("camelCase") or the member name
        ("CAMEL_CASE"). A leading dot is ignored, so ".pascalCase" works too.

        Args:
            name: Format spelling, or None/empty for the default

        Returns:
            Matching KeyFormat

        Raises:
            ValueError: If the name matches no format
        """
        if not name:
            return cls.default()

        cleaned = name.strip().lstrip(".")
        for key_format in cls:
            if cleaned == key_format.value or cleaned == key_format.name:
                return key_format

        choices = ", ".join(f.value for f in cls)
        raise ValueError(f"Unknown key format '{name}' (expected one of: {choices})")

    @property
    def is_snake_case(self) -> bool:
        """Whether words are joined with underscores"""
        return self in (KeyFormat.LOWER_SNAKE_CASE, KeyFormat.UPPER_SNAKE_CASE)
