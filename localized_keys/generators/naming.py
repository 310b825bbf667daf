"""Localization key naming scheme

Turns enum case names into localization keys:
- Case names are split into lowercase words
- Words are re-cased and joined according to a KeyFormat
- Escaped keywords (`case`, `for`) lose their backticks first

Word boundaries are found with a single scan over character classes:
a boundary sits before every uppercase letter that follows a word
character (letter, digit or underscore). Underscores separate words
and are dropped. Digits stay with the word they follow.

Examples (upper snake case):
    noIRegretted -> NO_I_REGRETTED
    URl          -> U_RL
    URL          -> U_R_L
    c0cDdd4d     -> C0C_DDD4D
"""

from typing import List

from localized_keys.core.key_format import KeyFormat


class LocalizationKeyScheme:
    """Handles localization key generation for enum case names"""

    ESCAPE_DELIMITER = "`"
    WORD_SEPARATOR = "_"

    @staticmethod
    def strip_escaping(identifier: str) -> str:
        """Remove keyword escaping from both ends of an identifier

        Args:
            identifier: Raw case name (e.g., "`default`")

        Returns:
            Unescaped name (e.g., "default")
        """
        return identifier.strip(LocalizationKeyScheme.ESCAPE_DELIMITER)

    @staticmethod
    def is_uppercase(char: str) -> bool:
        """Check for an ASCII uppercase letter"""
        return "A" <= char <= "Z"

    @staticmethod
    def is_word_char(char: str) -> bool:
        """Check for a letter, digit or underscore"""
        return char.isalnum() or char == "_"

    @staticmethod
    def split_words(identifier: str) -> List[str]:
        """Split a case name into lowercase words

        Args:
            identifier: Case name, optionally escaped

        Returns:
            Lowercase words in order (empty list for a degenerate name)
        """
        text = LocalizationKeyScheme.strip_escaping(identifier)
        words: List[str] = []
        current: List[str] = []
        previous = ""

        def flush() -> None:
            if current:
                words.append("".join(current).lower())
                current.clear()

        for char in text:
            if char == LocalizationKeyScheme.WORD_SEPARATOR:
                flush()
            else:
                if (LocalizationKeyScheme.is_uppercase(char)
                        and previous
                        and LocalizationKeyScheme.is_word_char(previous)):
                    flush()
                current.append(char)
            previous = char

        flush()
        return words

    @staticmethod
    def capitalize_first(word: str) -> str:
        """Uppercase only the first character of a word"""
        return word[:1].upper() + word[1:]

    @staticmethod
    def join_words(words: List[str], key_format: KeyFormat) -> str:
        """Join lowercase words into a key

        Args:
            words: Lowercase words from split_words()
            key_format: Target key format

        Returns:
            Localization key
        """
        if not words:
            return ""

        if key_format is KeyFormat.UPPER_SNAKE_CASE:
            return LocalizationKeyScheme.WORD_SEPARATOR.join(word.upper() for word in words)
        if key_format is KeyFormat.LOWER_SNAKE_CASE:
            return LocalizationKeyScheme.WORD_SEPARATOR.join(words)
        if key_format is KeyFormat.CAMEL_CASE:
            rest = "".join(LocalizationKeyScheme.capitalize_first(word) for word in words[1:])
            return words[0] + rest
        if key_format is KeyFormat.PASCAL_CASE:
            return "".join(LocalizationKeyScheme.capitalize_first(word) for word in words)

        raise ValueError(f"Unsupported key format: {key_format!r}")

    @staticmethod
    def localized_key(identifier: str, key_format: KeyFormat = KeyFormat.UPPER_SNAKE_CASE) -> str:
        """Generate the localization key for a case name

        Args:
            identifier: Case name (e.g., "noIRegretted")
            key_format: Target key format

        Returns:
            Localization key (e.g., "NO_I_REGRETTED"), or "" for an empty name
        """
        words = LocalizationKeyScheme.split_words(identifier)
        return LocalizationKeyScheme.join_words(words, key_format)

    @staticmethod
    def is_valid_identifier(name: str) -> bool:
        """Check if a string is a valid case name

        Args:
            name: String to check, optionally escaped

        Returns:
            True if valid identifier
        """
        name = LocalizationKeyScheme.strip_escaping(name)
        if not name or name[0].isdigit():
            return False
        return all(c.isalnum() or c == "_" for c in name)


def convert(identifier: str, key_format: KeyFormat = KeyFormat.UPPER_SNAKE_CASE) -> str:
    """Convert a case name into a localization key"""
    return LocalizationKeyScheme.localized_key(identifier, key_format)


def split_words(identifier: str) -> List[str]:
    """Split a case name into lowercase words"""
    return LocalizationKeyScheme.split_words(identifier)
