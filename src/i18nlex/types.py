"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the package and by user code
when annotating I18n call sites. Kept dependency-free so both the runtime
and localization packages can import it.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "LanguageCode",
    "MessageKey",
    "RawTemplate",
    "StringPack",
]

type MessageKey = str
"""Symbolic message identifier (e.g., 'big-thing', 'common.dropdown.selectedFraction')."""

type LanguageCode = str
"""BCP-47 language code (e.g., 'en', 'fr-CA', 'zh-Hant-TW')."""

type RawTemplate = str
"""Message text with zero or more {name} / {name(argument)} placeholders."""

type StringPack = Mapping[MessageKey, RawTemplate]
"""Flat mapping of message key to raw template for one language."""
