"""Conversion logger for localization keys

Tracks generated keys, skipped case names and conflicts, and provides
summary statistics. By default only warnings are kept for display;
every conversion is still recorded for the statistics.
"""

from dataclasses import dataclass
from typing import Dict, List

from localized_keys.core.conflict_record import ConflictRecord
from localized_keys.core.key_format import KeyFormat


@dataclass
class ConversionRecord:
    """Record of a single case name conversion"""
    identifier: str
    key: str
    key_format: KeyFormat


@dataclass
class SkipRecord:
    """Record of a case name that produced no key"""
    identifier: str
    reason: str


class ConversionLogger:
    """Logs key conversions and provides summaries

    Usage Example:
        logger = ConversionLogger(verbose=True)
        logger.log_conversion("loveYou", "LOVE_YOU", KeyFormat.UPPER_SNAKE_CASE)
        logger.log_conflict(ConflictRecord("A", "a", "A"))
        print(logger.print_summary())
    """

    def __init__(self, verbose: bool = False) -> None:
        """Initialize conversion logger

        Args:
            verbose: If True, the summary lists every conversion
        """
        self.verbose = verbose
        self.conversions: List[ConversionRecord] = []
        self.skipped: List[SkipRecord] = []
        self.conflicts: List[ConflictRecord] = []
        self.warnings: List[str] = []

    def log_conversion(self, identifier: str, key: str, key_format: KeyFormat) -> None:
        """Log a generated key

        Args:
            identifier: Case name
            key: Generated key
            key_format: Format used
        """
        self.conversions.append(ConversionRecord(identifier, key, key_format))

    def log_skipped(self, identifier: str, reason: str) -> None:
        """Log a case name that produced no key

        Args:
            identifier: Case name
            reason: Why no key was produced
        """
        self.skipped.append(SkipRecord(identifier, reason))
        self.warnings.append(f"Skipped '{identifier}': {reason}")

    def log_conflict(self, record: ConflictRecord) -> None:
        """Log a key conflict

        Conflicts are always logged as warnings.

        Args:
            record: Conflict to log
        """
        self.conflicts.append(record)
        self.warnings.append(
            f"Key conflict for '{record.key}': '{record.first}' vs '{record.second}'"
        )

    def log_warning(self, message: str) -> None:
        """Log a warning message"""
        self.warnings.append(message)

    def get_summary(self) -> Dict:
        """Get summary statistics

        Returns:
            Dictionary with conversion statistics
        """
        conversions_by_format: Dict[KeyFormat, int] = {}
        for record in self.conversions:
            conversions_by_format[record.key_format] = conversions_by_format.get(record.key_format, 0) + 1

        return {
            "total_conversions": len(self.conversions),
            "conversions_by_format": conversions_by_format,
            "distinct_keys": len({record.key for record in self.conversions}),
            "total_skipped": len(self.skipped),
            "total_conflicts": len(self.conflicts),
            "total_warnings": len(self.warnings),
        }

    def print_summary(self) -> str:
        """Generate formatted summary string

        Returns:
            Formatted summary as string
        """
        summary = self.get_summary()
        lines = []

        lines.append("=== Localization Key Summary ===")
        lines.append(f"Total conversions: {summary['total_conversions']}")
        lines.append(f"Distinct keys: {summary['distinct_keys']}")
        lines.append("")

        if summary['conversions_by_format']:
            lines.append("Conversions by format:")
            for key_format, count in summary['conversions_by_format'].items():
                lines.append(f"  {key_format.value}: {count}")
            lines.append("")

        if self.verbose and self.conversions:
            lines.append("Conversions:")
            for record in self.conversions:
                lines.append(f"  {record.identifier} → {record.key}")
            lines.append("")

        lines.append(f"Skipped: {summary['total_skipped']}")
        lines.append(f"Conflicts: {summary['total_conflicts']}")

        if self.conflicts:
            for record in self.conflicts:
                lines.append(record.format())
            lines.append("")

        lines.append(f"Warnings: {summary['total_warnings']}")

        if self.warnings:
            lines.append("Warning details:")
            for warning in self.warnings:
                lines.append(f"  {warning}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all logs"""
        self.conversions.clear()
        self.skipped.clear()
        self.conflicts.clear()
        self.warnings.clear()
