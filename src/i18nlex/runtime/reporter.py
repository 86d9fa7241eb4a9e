"""Missing-key and test-mode reporting.

Both reports are terminal token sequences with verbatim literal formats:

    [I18N-MISSING(fr,en):english-only]
    [TEST:func-big-thing]  + one opaque token per function parameter

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from i18nlex.constants import CHAIN_JOINER, MISSING_FORMAT, TEST_FORMAT, TEST_PARAM_FORMAT
from i18nlex.diagnostics import ErrorTemplate, I18nMissingError
from i18nlex.runtime.value_types import Content, Function, Param, Token
from i18nlex.types import LanguageCode, MessageKey

__all__ = [
    "MissingInfo",
    "MissingObserver",
    "harness_tokens",
    "missing_tokens",
    "report_missing",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MissingInfo:
    """Immutable record of a failed resolution, passed to on_missing observers.

    Attributes:
        key: Message key that was not found
        langs: Effective fallback chain that was walked
        error: Synthetic error describing the miss (not raised)

    Example:
        >>> def log_missing(info: MissingInfo) -> None:
        ...     logger.error("missing %s in %s", info.key, info.langs)
        >>> i18n.context(on_missing=log_missing)
    """

    key: MessageKey
    langs: tuple[LanguageCode, ...]
    error: I18nMissingError


type MissingObserver = Callable[[MissingInfo], None]


def missing_tokens(key: MessageKey, chain: tuple[LanguageCode, ...]) -> tuple[Token, ...]:
    """Build the missing-asset token sequence.

    Args:
        key: Message key
        chain: Effective chain reported inside the brackets

    Returns:
        One-token sequence, e.g. ("[I18N-MISSING(xx):k]",)
    """
    return (MISSING_FORMAT.format(chain=CHAIN_JOINER.join(chain), key=key),)


def report_missing(
    key: MessageKey,
    chain: tuple[LanguageCode, ...],
    on_missing: MissingObserver | None = None,
) -> tuple[Token, ...]:
    """Log a miss, notify the observer, and return the missing-asset tokens.

    Args:
        key: Message key
        chain: Effective chain that was walked
        on_missing: Optional observer; exceptions it raises propagate

    Returns:
        Missing-asset token sequence
    """
    diagnostic = ErrorTemplate.message_not_found(key, chain)
    logger.warning("%s", diagnostic.message)

    if on_missing is not None:
        error = I18nMissingError(diagnostic, key=key, languages=chain)
        on_missing(MissingInfo(key=key, langs=chain, error=error))

    return missing_tokens(key, chain)


def harness_tokens(key: MessageKey, params: Mapping[str, Param]) -> tuple[Token, ...]:
    """Build the deterministic test-mode token sequence.

    Every function parameter is invoked with its own test literal so a test
    harness can still observe how the function output is wired in.

    Args:
        key: Message key
        params: Tagged parameters of the call, in iteration order

    Returns:
        ("[TEST:<key>]", Content(f("[TEST:<key>--<name>]")), ...)
    """
    tokens: list[Token] = [TEST_FORMAT.format(key=key)]
    for name, param in params.items():
        if isinstance(param, Function):
            tokens.append(Content(param(TEST_PARAM_FORMAT.format(key=key, name=name))))
    return tuple(tokens)
