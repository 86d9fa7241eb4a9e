"""Language code utilities.

Centralizes language tag handling used throughout the codebase:
BCP-47 normalization, base-language extraction, validation, and detection of
the platform's preferred languages.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from collections.abc import Iterable

from babel.core import default_locale, parse_locale

from i18nlex.constants import DEFAULT_LANG, LANG_SEPARATOR
from i18nlex.diagnostics import ErrorTemplate

__all__ = [
    "as_language_codes",
    "base_language",
    "get_system_languages",
    "require_language_code",
    "to_bcp47",
]


def base_language(code: str) -> str:
    """Return the base language of a tag (text before the first separator).

    Args:
        code: Language tag (e.g., "fr-CA", "zh-Hant-TW", "en")

    Returns:
        Base language (e.g., "fr", "zh", "en")

    Example:
        >>> base_language("en-CA")
        'en'
        >>> base_language("en")
        'en'
    """
    return code.split(LANG_SEPARATOR, 1)[0]


def require_language_code(code: object) -> str:
    """Validate a language code at the API boundary.

    Args:
        code: Candidate language code

    Returns:
        The code unchanged

    Raises:
        ValueError: If code is not a non-blank string or has surrounding whitespace
    """
    if not isinstance(code, str) or not code or code.strip() != code:
        raise ValueError(str(ErrorTemplate.invalid_language(code)))
    return code


@functools.lru_cache(maxsize=128)
def to_bcp47(locale_code: str) -> str:
    """Convert a POSIX locale identifier to a BCP-47 language tag.

    Encoding and modifier suffixes are dropped. Already-hyphenated tags are
    accepted and re-canonicalized (language lower case, territory upper case).

    Args:
        locale_code: POSIX (e.g., "pt_BR.UTF-8") or BCP-47 (e.g., "pt-br") code

    Returns:
        BCP-47 tag (e.g., "pt-BR")

    Raises:
        ValueError: If Babel cannot parse the identifier

    Example:
        >>> to_bcp47("en_US.UTF-8")
        'en-US'
        >>> to_bcp47("zh_Hant_TW")
        'zh-Hant-TW'
    """
    parts = parse_locale(locale_code.replace(LANG_SEPARATOR, "_"))
    language, territory, script, variant = parts[:4]
    return LANG_SEPARATOR.join(p for p in (language, script, territory, variant) if p)


def get_system_languages() -> tuple[str, ...]:
    """Detect the platform's preferred languages, most preferred first.

    Detection order:
    1. LANGUAGE environment variable (colon-separated preference list)
    2. Babel's default_locale() over LC_MESSAGES, LC_ALL, LC_CTYPE and LANG

    The "C" and "POSIX" pseudo-locales are ignored. Unparseable entries are
    skipped.

    Returns:
        Tuple of BCP-47 tags. Returns (DEFAULT_LANG,) if nothing is detected.

    Example:
        With LANGUAGE set to "fr_CA:fr:en" in the environment,
        get_system_languages() returns ('fr-CA', 'fr', 'en').
    """
    candidates: list[str] = []

    language_list = os.environ.get("LANGUAGE", "")
    candidates.extend(item for item in language_list.split(":") if item)

    if not candidates:
        detected = default_locale("LC_MESSAGES")
        if detected:
            candidates.append(detected)

    languages: list[str] = []
    for candidate in candidates:
        if candidate.split(".")[0] in ("C", "POSIX") or candidate.endswith("_POSIX"):
            continue
        try:
            languages.append(to_bcp47(candidate))
        except ValueError:
            continue

    return tuple(dict.fromkeys(languages)) or (DEFAULT_LANG,)


def as_language_codes(codes: Iterable[str]) -> tuple[str, ...]:
    """Validate an iterable of language codes and freeze it as a tuple.

    Args:
        codes: Language codes in preference order

    Returns:
        Tuple of the codes, order and duplicates preserved

    Raises:
        ValueError: If codes is a bare string or holds an invalid code
    """
    if isinstance(codes, str):
        msg = f"Expected a sequence of language codes, got string {codes!r}"
        raise ValueError(msg)
    return tuple(require_language_code(code) for code in codes)
