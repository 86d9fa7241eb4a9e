"""Localization package: locale contexts, fallback chains and the I18n service.

Submodules:
    context      - LocaleContext (resolution policy and context packs)
    chain        - build_chain (effective fallback chain)
    orchestrator - I18n (message resolution service)
    local        - Scoped context via contextvars (i18ns, use_i18n_context)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from i18nlex.localization.chain import build_chain, expand_languages
from i18nlex.localization.context import LocaleContext, MissingInfo, merge_l10ns
from i18nlex.localization.local import (
    I18nScope,
    get_i18n,
    get_i18n_context,
    i18ns,
    reset_i18n_context,
    set_i18n_context,
    use_i18n_context,
)
from i18nlex.localization.orchestrator import I18n, TextFn

__all__ = [
    # Service
    "I18n",
    "TextFn",
    # Contexts
    "LocaleContext",
    "MissingInfo",
    "merge_l10ns",
    # Chains
    "build_chain",
    "expand_languages",
    # Scoped context
    "I18nScope",
    "get_i18n",
    "get_i18n_context",
    "i18ns",
    "reset_i18n_context",
    "set_i18n_context",
    "use_i18n_context",
]
