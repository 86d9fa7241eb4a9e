"""Fallback chain construction.

Turns a locale context into the ordered, deduplicated list of language codes
tried during resolution:

    accept_langs=("en-CA", "fr-CA"), default_lang="en"
        -> ("en-CA", "fr-CA", "en", "fr")

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Set
from typing import TYPE_CHECKING

from i18nlex.locale_utils import base_language
from i18nlex.types import LanguageCode

if TYPE_CHECKING:
    from i18nlex.localization.context import LocaleContext

__all__ = ["build_chain", "expand_languages"]


def expand_languages(
    accept_langs: Iterable[LanguageCode],
    default_lang: LanguageCode | None = None,
    permit_langs: Set[LanguageCode] | None = None,
) -> tuple[LanguageCode, ...]:
    """Build the effective chain from its raw ingredients.

    Steps:
    1. Start from accept_langs.
    2. Append default_lang, if set.
    3. Append the base language of every code so far, in first-seen order.
    4. Drop codes outside permit_langs, if set.

    Duplicates are removed at every step, keeping the first occurrence.

    Args:
        accept_langs: Preference order, most preferred first
        default_lang: Language appended after the preferences
        permit_langs: Codes allowed in the result; None permits all

    Returns:
        Effective chain; empty when nothing is preferred or permitted

    Example:
        >>> expand_languages(["en-CA", "fr-CA"])
        ('en-CA', 'fr-CA', 'en', 'fr')
        >>> expand_languages(["pt-BR"], "en", permit_langs={"pt", "en"})
        ('en', 'pt')
    """
    # dict.fromkeys() removes duplicates while maintaining insertion order
    preferred = dict.fromkeys(accept_langs)
    if default_lang:
        preferred[default_lang] = None

    chain = dict.fromkeys([*preferred, *(base_language(code) for code in preferred)])

    if permit_langs is not None:
        return tuple(code for code in chain if code in permit_langs)
    return tuple(chain)


def build_chain(context: LocaleContext) -> tuple[LanguageCode, ...]:
    """Build the effective chain for a locale context.

    Args:
        context: Locale context supplying accept_langs, default_lang and permit_langs

    Returns:
        Effective chain (see expand_languages)
    """
    return expand_languages(context.accept_langs, context.default_lang, context.permit_langs)
