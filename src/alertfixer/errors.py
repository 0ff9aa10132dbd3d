"""
Custom error types for the AlertFixer toolchain.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class AlertFixerError(Exception):
    """Base error with optional location metadata."""

    message: str
    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        location = ""
        if self.line is not None:
            location = f" (line {self.line}"
            if self.column is not None:
                location += f", column {self.column}"
            location += ")"
        return f"{self.message}{location}"


class PatternCompilationError(AlertFixerError):
    """A built-in structural pattern failed to compile. Fatal."""


class UnterminatedBlockError(AlertFixerError):
    """A tap block never reached its closing `}];` line."""


class ConfigError(AlertFixerError):
    """Invalid configuration value."""
