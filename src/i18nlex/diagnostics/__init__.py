"""Diagnostic system for I18nLex errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    I18nContextError,
    I18nError,
    I18nMissingError,
    I18nTemplateError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "I18nContextError",
    "I18nError",
    "I18nMissingError",
    "I18nTemplateError",
    "OutputFormat",
]
