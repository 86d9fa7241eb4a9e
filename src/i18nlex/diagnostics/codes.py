"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing keys, packs, context)
        2000-2999: Template errors (placeholder/parameter contract)
        3000-3999: Configuration errors (invalid packs, codes, settings)
    """

    # Lookup errors (1000-1999)
    MESSAGE_NOT_FOUND = 1001
    CONTEXT_NOT_SET = 1002

    # Template errors (2000-2999)
    FUNCTION_EXPECTED = 2001
    FUNCTION_AS_VALUE = 2002

    # Configuration errors (3000-3999)
    INVALID_LANGUAGE = 3001
    INVALID_PACK = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context for a
    developer to locate the offending template or parameter.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        key: Message key being resolved when the error occurred
        param_name: Parameter name that caused the error (template errors)
        languages: Fallback chain at the time of the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    key: str | None = None
    param_name: str | None = None
    languages: tuple[str, ...] | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[FUNCTION_EXPECTED]: Expecting a function for param 'quote' in key 'k'
              = key: k
              = param: quote
              = help: Pass a callable for every {name(arg)} placeholder

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
