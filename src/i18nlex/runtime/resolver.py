"""Key resolver: walks the fallback chain against string packs.

Distinguishes a language with no pack (always skipped) from a language whose
pack lacks the key (skipped only when fallback is allowed). The second case
lets an application pin strict per-language completeness: a pack that was
found is authoritative.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from i18nlex.enums import ResolutionStatus
from i18nlex.types import LanguageCode, MessageKey, RawTemplate

__all__ = ["KeyResolution", "PackSource", "resolve_key"]

type PackSource = Callable[[LanguageCode], Mapping[MessageKey, RawTemplate] | None]
"""Returns the pack for a language, or None when the language has no pack."""


@dataclass(frozen=True, slots=True)
class KeyResolution:
    """Outcome of one chain walk.

    Attributes:
        status: RESOLVED, TERMINAL_MISS or EXHAUSTED
        key: Message key that was looked up
        chain: Effective chain that was walked
        language: Language that supplied the key (RESOLVED) or whose pack
            lacked it (TERMINAL_MISS); None when EXHAUSTED
        template: Raw template when RESOLVED, otherwise None
    """

    status: ResolutionStatus
    key: MessageKey
    chain: tuple[LanguageCode, ...]
    language: LanguageCode | None = None
    template: RawTemplate | None = None

    @property
    def found(self) -> bool:
        """True if a template was resolved."""
        return self.status is ResolutionStatus.RESOLVED


def resolve_key(
    key: MessageKey,
    chain: Sequence[LanguageCode],
    packs: PackSource,
    *,
    allow_fallback: bool = False,
) -> KeyResolution:
    """Find the first language in the chain that supplies a key.

    Args:
        key: Message key
        chain: Effective fallback chain (see localization.chain.build_chain)
        packs: Pack lookup for a language code
        allow_fallback: Continue past a pack that lacks the key

    Returns:
        KeyResolution describing the hit or the kind of miss

    Example:
        >>> packs = {"fr": {}, "en": {"k": "K"}}
        >>> resolve_key("k", ("fr", "en"), packs.get).status
        <ResolutionStatus.TERMINAL_MISS: 'terminal_miss'>
        >>> resolve_key("k", ("fr", "en"), packs.get, allow_fallback=True).language
        'en'
    """
    walked = tuple(chain)

    for code in walked:
        pack = packs(code)
        if pack is None:
            continue
        if key in pack:
            return KeyResolution(
                ResolutionStatus.RESOLVED, key, walked, language=code, template=pack[key]
            )
        if not allow_fallback:
            return KeyResolution(ResolutionStatus.TERMINAL_MISS, key, walked, language=code)

    return KeyResolution(ResolutionStatus.EXHAUSTED, key, walked)
