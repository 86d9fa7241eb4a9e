"""Shared constants for I18nLex.

Constants are grouped by domain:
- Language defaults: Fallback language and tag separator
- Cache limits: Memory bounds for caching subsystems
- Report formats: Observable literals emitted for missing keys and test mode

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Language defaults
    "DEFAULT_LANG",
    "LANG_SEPARATOR",
    # Cache limits
    "TEMPLATE_CACHE_SIZE",
    # Report formats
    "MISSING_FORMAT",
    "TEST_FORMAT",
    "TEST_PARAM_FORMAT",
    "CHAIN_JOINER",
]

# ============================================================================
# LANGUAGE DEFAULTS
# ============================================================================

# Language appended to every chain unless a context clears it.
DEFAULT_LANG: str = "en"

# BCP-47 subtag separator. The base language is the text before the first one.
LANG_SEPARATOR: str = "-"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum parsed templates kept by compile_template().
# A typical application has a few hundred distinct strings per language.
TEMPLATE_CACHE_SIZE: int = 1024

# ============================================================================
# REPORT FORMATS
# ============================================================================
#
# Consumers (tests, UI bindings) match on these literals verbatim.
# Use .format(...) with the named fields shown.

MISSING_FORMAT: str = "[I18N-MISSING({chain}):{key}]"
TEST_FORMAT: str = "[TEST:{key}]"
TEST_PARAM_FORMAT: str = "[TEST:{key}--{name}]"

# Separator used when the chain is rendered inside MISSING_FORMAT.
CHAIN_JOINER: str = ","
