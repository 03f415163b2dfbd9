"""
Validation and error types for table loading.

Parsing is permissive: malformed rows and missing headers do not stop a
load. They are collected on a ValidationResult so callers can log or
inspect them.
"""

from dataclasses import dataclass, field
from typing import List, Any, Optional


class LgaDeparturesError(Exception):
    """Base class for errors raised by this package."""


class TableLoadError(LgaDeparturesError):
    """Raised when a required table cannot be fetched or read."""

    def __init__(self, table: str, reason: str):
        super().__init__(f"Failed to load {table}: {reason}")
        self.table = table
        self.reason = reason


@dataclass
class ValidationError:
    """Represents a single problem found while parsing a table."""

    field: str
    message: str
    value: Any = None
    line: Optional[int] = None

    def __str__(self) -> str:
        where = f"line {self.line}: " if self.line is not None else ""
        if self.value is not None:
            return f"{where}{self.field}: {self.message} (value: {self.value})"
        return f"{where}{self.field}: {self.message}"


@dataclass
class ValidationResult:
    """Warnings collected while parsing a table."""

    table: str = ""
    warnings: List[ValidationError] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def add_warning(self, field: str, message: str, value: Any = None, line: Optional[int] = None) -> None:
        self.warnings.append(ValidationError(field, message, value, line))

    def extend(self, other: 'ValidationResult') -> None:
        self.warnings.extend(other.warnings)

    def get_messages(self) -> List[str]:
        return [str(warning) for warning in self.warnings]

    def __str__(self) -> str:
        if self.has_warnings:
            return f"{self.table or 'table'}: {len(self.warnings)} warnings"
        return f"{self.table or 'table'}: clean"
