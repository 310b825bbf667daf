"""Conversion context for localized enums

Maintains state while generating keys for one enum:
- Conversion options
- Key table
- Diagnostics
- Conversion logging
"""

from dataclasses import dataclass
from typing import Iterable, List

from localized_keys.core.conversion_logger import ConversionLogger
from localized_keys.core.diagnostics import (
    Diagnostic, DiagnosticSeverity, empty_key, invalid_identifier, key_conflict
)
from localized_keys.core.key_format import KeyFormat
from localized_keys.generators.key_table import KeyTable
from localized_keys.generators.naming import LocalizationKeyScheme


@dataclass
class ConversionOptions:
    """Options for one conversion run"""
    key_format: KeyFormat = KeyFormat.UPPER_SNAKE_CASE
    allow_conflicts: bool = False
    output_format: str = "text"
    verbose: bool = False


class ConversionContext:
    """Context for a key generation session"""

    def __init__(self, options: ConversionOptions) -> None:
        """Initialize conversion context

        Args:
            options: Conversion options
        """
        self.options = options
        self.key_table = KeyTable(options.key_format)
        self.logger = ConversionLogger(verbose=options.verbose)
        self.diagnostics: List[Diagnostic] = []

    @property
    def key_format(self) -> KeyFormat:
        return self.options.key_format

    def add_identifier(self, identifier: str) -> str:
        """Generate and record the key for one case name

        Args:
            identifier: Case name

        Returns:
            Generated key (may be empty)
        """
        if not LocalizationKeyScheme.is_valid_identifier(identifier):
            self._report(invalid_identifier(identifier))

        key = LocalizationKeyScheme.localized_key(identifier, self.key_format)
        record = self.key_table.add(identifier)

        if not key:
            self.logger.log_skipped(identifier, "empty localization key")
            self._report(empty_key(identifier))
        else:
            self.logger.log_conversion(identifier, key, self.key_format)

        if record is not None:
            self.logger.log_conflict(record)
            diagnostic = key_conflict(record)
            if self.options.allow_conflicts:
                diagnostic = diagnostic.with_severity(DiagnosticSeverity.WARNING)
            self._report(diagnostic)

        return key

    def add_identifiers(self, identifiers: Iterable[str]) -> None:
        """Generate keys for case names in declaration order"""
        for identifier in identifiers:
            self.add_identifier(identifier)

    def has_errors(self) -> bool:
        """Check if any error diagnostic was reported"""
        return any(diagnostic.is_error for diagnostic in self.diagnostics)

    def _report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
