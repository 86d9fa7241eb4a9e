"""I18nLex - localization string resolution.

Resolves a message key plus a user's language preferences into localized,
parameterized text, or into a token sequence mixing text with opaque rich
content.

Public API:
    I18n - Resolution service (string packs, test mode, default languages)
    I18nConfig - Immutable service configuration
    LocaleContext - Per-call resolution policy and context packs
    Literal, Function, Content - Tagged parameter values
    i18ns, use_i18n_context - Scoped resolution via contextvars

Exceptions:
    I18nError - Base exception class
    I18nTemplateError - Function placeholder bound to a non-function
    I18nContextError - Scoped resolution with no context set
    I18nMissingError - Synthetic error handed to on_missing observers

Submodules:
    i18nlex.runtime - Store, key resolver, template engine, reporter
    i18nlex.localization - Contexts, chains, service, scoped context
    i18nlex.diagnostics - Diagnostic codes, templates and formatting
"""

from .config import I18nConfig
from .diagnostics import (
    I18nContextError,
    I18nError,
    I18nMissingError,
    I18nTemplateError,
)
from .localization import (
    I18n,
    LocaleContext,
    MissingInfo,
    build_chain,
    get_i18n_context,
    i18ns,
    reset_i18n_context,
    set_i18n_context,
    use_i18n_context,
)
from .runtime import Content, Function, Literal, Token, render_text

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nlex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Content",
    "Function",
    "I18n",
    "I18nConfig",
    "I18nContextError",
    "I18nError",
    "I18nMissingError",
    "I18nTemplateError",
    "Literal",
    "LocaleContext",
    "MissingInfo",
    "Token",
    "__version__",
    "build_chain",
    "get_i18n_context",
    "i18ns",
    "render_text",
    "reset_i18n_context",
    "set_i18n_context",
    "use_i18n_context",
]
