"""Configuration for the I18n service.

Provides a single frozen dataclass that encapsulates the process-wide
switches of one I18n instance. Independent instances (per test, per tenant)
each carry their own configuration.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from i18nlex.constants import DEFAULT_LANG
from i18nlex.locale_utils import as_language_codes, require_language_code
from i18nlex.types import LanguageCode

__all__ = ["I18nConfig"]


@dataclass(frozen=True, slots=True)
class I18nConfig:
    """Immutable configuration for an I18n service.

    All fields have sensible defaults; ``I18nConfig()`` with no arguments
    produces a usable configuration.

    Attributes:
        default_lang: Language appended to every chain unless a context
            clears it (default: "en"). None disables the default.
        allow_fallback: Base-context fallback policy (default: False).
        test_mode: Start in test mode (default: False).
        default_languages: Base-context preference order. None (default)
            detects the platform's languages at service construction.

    Example:
        >>> config = I18nConfig(default_languages=["fr-CA"], allow_fallback=True)
        >>> config.default_languages
        ('fr-CA',)
        >>> i18n = I18n(config=config)
    """

    default_lang: LanguageCode | None = DEFAULT_LANG
    allow_fallback: bool = False
    test_mode: bool = False
    default_languages: tuple[LanguageCode, ...] | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate and normalize configuration values at construction time.

        Raises:
            ValueError: If default_lang or any default language is not a
                valid language code.
        """
        if self.default_lang is not None:
            require_language_code(self.default_lang)

        if self.default_languages is not None:
            languages = as_language_codes(self.default_languages)
            object.__setattr__(self, "default_languages", languages)

