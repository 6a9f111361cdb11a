"""Severity levels for validation errors."""

from enum import Enum


class ValidationSeverity(str, Enum):
    """How serious a single validation failure is."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
