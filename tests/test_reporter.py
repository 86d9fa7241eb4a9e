"""Tests for missing-asset and test-mode reporting.

Python 3.13+.
"""

import logging

import pytest

from i18nlex.diagnostics import DiagnosticCode, I18nMissingError
from i18nlex.runtime import (
    Content,
    MissingInfo,
    as_params,
    harness_tokens,
    missing_tokens,
    report_missing,
)


class TestMissingTokens:
    """Test the verbatim missing-asset literal."""

    def test_single_language(self) -> None:
        """One language in the brackets."""
        assert missing_tokens("k", ("xx",)) == ("[I18N-MISSING(xx):k]",)

    def test_chain_comma_joined(self) -> None:
        """The full chain is comma-joined without spaces."""
        assert missing_tokens("english-only", ("fr", "en")) == (
            "[I18N-MISSING(fr,en):english-only]",
        )

    def test_empty_chain(self) -> None:
        """An empty chain leaves the brackets empty."""
        assert missing_tokens("k", ()) == ("[I18N-MISSING():k]",)


class TestReportMissing:
    """Test logging and observer notification."""

    def test_observer_receives_missing_info(self) -> None:
        """on_missing gets key, chain and a synthetic error."""
        received: list[MissingInfo] = []
        tokens = report_missing("k", ("fr", "en"), received.append)

        assert tokens == ("[I18N-MISSING(fr,en):k]",)
        (info,) = received
        assert info.key == "k"
        assert info.langs == ("fr", "en")
        assert isinstance(info.error, I18nMissingError)
        assert info.error.key == "k"
        assert info.error.languages == ("fr", "en")
        assert info.error.diagnostic is not None
        assert info.error.diagnostic.code is DiagnosticCode.MESSAGE_NOT_FOUND

    def test_without_observer(self) -> None:
        """No observer is fine."""
        assert report_missing("k", ("en",)) == ("[I18N-MISSING(en):k]",)

    def test_warning_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Every miss is logged at warning level."""
        with caplog.at_level(logging.WARNING, logger="i18nlex.runtime.reporter"):
            report_missing("k", ("fr", "en"))
        assert "Message 'k' not found in languages (fr, en)" in caplog.text

    def test_observer_exceptions_propagate(self) -> None:
        """The observer is caller code; its errors are not swallowed."""

        def explode(info: MissingInfo) -> None:
            raise info.error

        with pytest.raises(I18nMissingError):
            report_missing("k", ("en",), explode)


class TestHarnessTokens:
    """Test the deterministic test-mode sequence."""

    def test_key_only(self) -> None:
        """Without function params only the key token is produced."""
        assert harness_tokens("big-thing", as_params({"x": 1})) == ("[TEST:big-thing]",)

    def test_function_params_invoked(self) -> None:
        """Each function param is applied to its own test literal."""
        tokens = harness_tokens(
            "func-big-thing", as_params({"quote": lambda t: f'"{t}"'})
        )
        assert tokens[0] == "[TEST:func-big-thing]"
        assert isinstance(tokens[1], Content)
        assert tokens[1].value == '"[TEST:func-big-thing--quote]"'

    def test_iteration_order_kept(self) -> None:
        """Function tokens follow parameter iteration order; literals are skipped."""
        params = as_params({"b": str.upper, "x": "literal", "a": str.lower})
        tokens = harness_tokens("k", params)
        assert [str(t) for t in tokens] == ["[TEST:k]", "[TEST:K--B]", "[test:k--a]"]
