"""Tests for diagnostics: codes, templates, formatting and exceptions.

Python 3.13+.
"""

import json

import pytest

from i18nlex.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    I18nContextError,
    I18nError,
    I18nMissingError,
    I18nTemplateError,
    OutputFormat,
)


class TestErrorTemplates:
    """Test the centralized message templates."""

    def test_message_not_found(self) -> None:
        """Carries key, chain and warning severity."""
        diag = ErrorTemplate.message_not_found("k", ("fr", "en"))
        assert diag.code is DiagnosticCode.MESSAGE_NOT_FOUND
        assert diag.message == "Message 'k' not found in languages (fr, en)"
        assert diag.languages == ("fr", "en")
        assert diag.severity == "warning"

    def test_function_expected(self) -> None:
        """Names the parameter and the key."""
        diag = ErrorTemplate.function_expected("quote", "func-big-thing")
        assert str(diag) == "Expecting a function for param 'quote' in key 'func-big-thing'"
        assert diag.param_name == "quote"

    def test_context_not_set(self) -> None:
        """Short, fixed message."""
        assert ErrorTemplate.context_not_set().message == "No context set."

    def test_invalid_language(self) -> None:
        """The rejected value is shown with repr."""
        assert ErrorTemplate.invalid_language(" en").message == "Invalid language code: ' en'"

    def test_invalid_pack(self) -> None:
        """The language and the detail are both shown."""
        diag = ErrorTemplate.invalid_pack("en", "bad")
        assert diag.code is DiagnosticCode.INVALID_PACK
        assert diag.message == "Invalid string pack for 'en': bad"


class TestDiagnosticFormatter:
    """Test output formats."""

    def test_rust_format(self) -> None:
        """Header plus key, param and help lines."""
        diag = ErrorTemplate.function_expected("quote", "k")
        lines = DiagnosticFormatter().format(diag).splitlines()
        assert lines[0] == "error[FUNCTION_EXPECTED]: Expecting a function for param 'quote' in key 'k'"
        assert "  = key: k" in lines
        assert "  = param: quote" in lines
        assert lines[-1].startswith("  = help: ")

    def test_rust_format_warning_with_languages(self) -> None:
        """Warnings say so; languages are listed."""
        output = DiagnosticFormatter().format(ErrorTemplate.message_not_found("k", ("en",)))
        assert output.startswith("warning[MESSAGE_NOT_FOUND]")
        assert "  = languages: en" in output

    def test_rust_format_empty_chain(self) -> None:
        """An empty chain is shown explicitly."""
        output = DiagnosticFormatter().format(ErrorTemplate.message_not_found("k", ()))
        assert "  = languages: <none>" in output

    def test_simple_format(self) -> None:
        """One line: code name and message."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(ErrorTemplate.context_not_set()) == "CONTEXT_NOT_SET: No context set."

    def test_json_format(self) -> None:
        """Machine-readable fields."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.message_not_found("k", ("en",))))
        assert data["code"] == "MESSAGE_NOT_FOUND"
        assert data["code_value"] == 1001
        assert data["key"] == "k"
        assert data["languages"] == ["en"]

    def test_sanitize_truncates(self) -> None:
        """Long messages are cut when sanitizing."""
        diag = Diagnostic(code=DiagnosticCode.INVALID_PACK, message="x" * 50)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        assert formatter.format(diag) == "INVALID_PACK: " + "x" * 10 + "..."

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diags = [ErrorTemplate.context_not_set(), ErrorTemplate.invalid_pack("en", "bad")]
        assert formatter.format_all(diags).count("\n\n") == 1


class TestExceptions:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize("cls", [I18nTemplateError, I18nContextError, I18nMissingError])
    def test_hierarchy(self, cls: type[I18nError]) -> None:
        """Every library error is an I18nError."""
        assert issubclass(cls, I18nError)

    def test_plain_message(self) -> None:
        """A string message has no diagnostic."""
        error = I18nError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        """A diagnostic is kept and formatted into the message."""
        diag = ErrorTemplate.context_not_set()
        error = I18nContextError(diag)
        assert error.diagnostic is diag
        assert str(error).startswith("error[CONTEXT_NOT_SET]: No context set.")

    def test_missing_error_fields(self) -> None:
        """The synthetic miss error carries key and chain."""
        error = I18nMissingError("gone", key="k", languages=("en",))
        assert (error.key, error.languages) == ("k", ("en",))
