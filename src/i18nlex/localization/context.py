"""Locale context: the per-call resolution policy and string-pack overlay.

A LocaleContext is immutable. Nested scopes derive a child from a parent:

    base = LocaleContext(accept_langs=("fr",), l10ns={"en": {"a": "A"}})
    child = base.derive(accept_langs=["en"], l10ns={"en": {"b": "B"}})
    # child.l10ns["en"] == {"a": "A", "b": "B"}

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from i18nlex.locale_utils import as_language_codes, require_language_code
from i18nlex.runtime.reporter import MissingInfo, MissingObserver
from i18nlex.runtime.store import validate_pack
from i18nlex.types import LanguageCode, MessageKey, RawTemplate, StringPack

__all__ = ["LocaleContext", "MissingInfo", "merge_l10ns"]

type L10ns = Mapping[LanguageCode, Mapping[MessageKey, RawTemplate]]

_EMPTY_L10NS: L10ns = MappingProxyType({})


def _freeze_l10ns(l10ns: Mapping[LanguageCode, StringPack]) -> L10ns:
    frozen: dict[LanguageCode, Mapping[MessageKey, RawTemplate]] = {}
    for code, pack in l10ns.items():
        require_language_code(code)
        frozen[code] = MappingProxyType(validate_pack(code, pack))
    return MappingProxyType(frozen)


def merge_l10ns(outer: L10ns, inner: Mapping[LanguageCode, StringPack]) -> L10ns:
    """Overlay inner packs onto outer packs with a shallow per-key merge.

    Inner keys win; keys absent from an inner pack still resolve from the
    outer pack of the same language. Languages only in outer are kept.

    Args:
        outer: Inherited packs
        inner: Packs supplied by the nested scope

    Returns:
        Read-only merged mapping
    """
    merged: dict[LanguageCode, StringPack] = dict(outer)
    for code, pack in inner.items():
        require_language_code(code)
        merged[code] = {**outer.get(code, {}), **validate_pack(code, pack)}
    return _freeze_l10ns(merged)


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Resolution policy and context-supplied string packs.

    Attributes:
        accept_langs: Preference order, most preferred first (e.g., ("fr-CA", "en"))
        permit_langs: Codes allowed in the chain; None permits all
        default_lang: Language appended after accept_langs; None for no default
        allow_fallback: When False, a pack that lacks the key ends the walk
        l10ns: Packs carried by the context, overlaid on the store per key
        on_missing: Observer called with MissingInfo when resolution fails

    Example:
        >>> ctx = LocaleContext(accept_langs=["fr"], default_lang="en")
        >>> ctx.derive(default_lang=None).default_lang is None
        True
    """

    accept_langs: tuple[LanguageCode, ...] = ()
    permit_langs: frozenset[LanguageCode] | None = None
    default_lang: LanguageCode | None = None
    allow_fallback: bool = False
    l10ns: L10ns = field(default=_EMPTY_L10NS)
    on_missing: MissingObserver | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Normalize sequences to immutable forms and validate codes.

        Raises:
            ValueError: If any language code or pack is invalid
        """
        object.__setattr__(self, "accept_langs", as_language_codes(self.accept_langs))
        if self.permit_langs is not None:
            object.__setattr__(
                self, "permit_langs", frozenset(as_language_codes(self.permit_langs))
            )
        if self.default_lang is not None:
            require_language_code(self.default_lang)
        if self.l10ns is None:
            object.__setattr__(self, "l10ns", _EMPTY_L10NS)
        elif self.l10ns is not _EMPTY_L10NS:
            object.__setattr__(self, "l10ns", _freeze_l10ns(self.l10ns))

    @property
    def chain(self) -> tuple[LanguageCode, ...]:
        """Effective fallback chain for this context."""
        from i18nlex.localization.chain import build_chain  # noqa: PLC0415 - circular

        return build_chain(self)

    def derive(self, *, inherit_l10ns: bool = True, **overrides: Any) -> LocaleContext:
        """Create a child context.

        Every named override replaces the inherited field; an explicit None
        clears it, ``l10ns=None`` included. Any other ``l10ns`` is overlaid
        on the inherited packs per key unless ``inherit_l10ns`` is False, in
        which case the child sees only the packs it names.

        Args:
            inherit_l10ns: Merge inherited packs into the child's packs
            **overrides: Field values for the child context

        Returns:
            New LocaleContext; self is never modified

        Raises:
            TypeError: If an override names an unknown field
            ValueError: If an override value is invalid
        """
        unknown = sorted(overrides.keys() - _FIELD_NAMES)
        if unknown:
            msg = f"Unknown LocaleContext field(s): {', '.join(unknown)}"
            raise TypeError(msg)

        if "l10ns" in overrides and overrides["l10ns"] is None:
            overrides["l10ns"] = _EMPTY_L10NS
            return dataclasses.replace(self, **overrides)

        packs: Mapping[LanguageCode, StringPack] = overrides.pop("l10ns", {})
        if inherit_l10ns:
            overrides["l10ns"] = merge_l10ns(self.l10ns, packs) if packs else self.l10ns
        else:
            overrides["l10ns"] = _freeze_l10ns(packs)

        return dataclasses.replace(self, **overrides)

    def with_languages(self, languages: Iterable[LanguageCode]) -> LocaleContext:
        """Shortcut for derive(accept_langs=languages)."""
        return self.derive(accept_langs=languages)


_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(LocaleContext))
