"""Key conflict record"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConflictRecord:
    """Two case names that produce the same localization key

    Attributes:
        key: The shared localization key
        first: Case name that claimed the key first
        second: Later case name colliding with it
    """
    key: str
    first: str
    second: str

    def format(self) -> str:
        """Format conflict record for display

        Returns:
            Formatted string representation
        """
        return f"  Conflict: '{self.first}' vs '{self.second}' → {self.key}"
