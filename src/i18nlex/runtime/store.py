"""String pack store.

Maps language code to a flat pack of message key -> raw template. Packs are
only ever merged: registering a pack for a known language overlays its keys
onto the existing pack, and nothing is ever deleted.

Thread Safety:
    add() holds a single lock for its read-merge-publish step and then swaps
    in a new read-only mapping of all packs. Readers take no lock: they read
    whichever mapping was last published, so they never observe a partial
    merge.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from i18nlex.diagnostics import ErrorTemplate
from i18nlex.locale_utils import require_language_code
from i18nlex.types import LanguageCode, MessageKey, RawTemplate, StringPack

__all__ = ["StringPackStore", "validate_pack"]

logger = logging.getLogger(__name__)


def validate_pack(code: LanguageCode, pack: StringPack) -> dict[MessageKey, RawTemplate]:
    """Validate a pack and return a private copy.

    Args:
        code: Language code the pack belongs to (used in error messages)
        pack: Mapping of message key to raw template

    Returns:
        Plain dict copy of the pack

    Raises:
        ValueError: If pack is not a mapping or holds non-string keys/templates
    """
    if not isinstance(pack, Mapping):
        detail = f"expected a mapping, got {type(pack).__name__}"
        raise ValueError(str(ErrorTemplate.invalid_pack(code, detail)))

    for key, template in pack.items():
        if not isinstance(key, str):
            detail = f"key {key!r} is not a string"
            raise ValueError(str(ErrorTemplate.invalid_pack(code, detail)))
        if not isinstance(template, str):
            detail = f"template for '{key}' is {type(template).__name__}, not str"
            raise ValueError(str(ErrorTemplate.invalid_pack(code, detail)))

    return dict(pack)


class StringPackStore:
    """Additive, merge-only registry of string packs.

    Example:
        >>> store = StringPackStore()
        >>> store.add("en", {"a": "1"})
        >>> store.add("en", {"a": "2", "b": "3"})
        >>> dict(store.get("en"))
        {'a': '2', 'b': '3'}
    """

    __slots__ = ("_lock", "_packs")

    def __init__(self, packs: Mapping[LanguageCode, StringPack] | None = None) -> None:
        """Initialize store, optionally seeding it with packs.

        Args:
            packs: Initial language -> pack mapping, merged via add()
        """
        self._lock: threading.Lock = threading.Lock()
        self._packs: Mapping[LanguageCode, Mapping[MessageKey, RawTemplate]] = (
            MappingProxyType({})
        )
        for code, pack in (packs or {}).items():
            self.add(code, pack)

    def add(self, code: LanguageCode, pack: StringPack) -> None:
        """Merge a pack into the store.

        Keys already present for the language are overwritten; keys absent
        from the new pack keep their existing templates.

        Args:
            code: Language code (e.g., "en", "fr-CA")
            pack: Mapping of message key to raw template

        Raises:
            ValueError: If code or pack is invalid
        """
        require_language_code(code)
        entries = validate_pack(code, pack)

        with self._lock:
            current = self._packs
            existing = current.get(code)
            merged = {**existing, **entries} if existing is not None else entries
            # Published mappings are never mutated after this assignment.
            self._packs = MappingProxyType({**current, code: MappingProxyType(merged)})

        logger.debug("Registered %d keys for language '%s'", len(entries), code)

    def get(self, code: LanguageCode) -> Mapping[MessageKey, RawTemplate] | None:
        """Get the read-only pack for a language, or None if none is registered."""
        return self._packs.get(code)

    def has_pack(self, code: LanguageCode) -> bool:
        """Check whether any pack is registered for a language."""
        return code in self._packs

    def snapshot(self) -> Mapping[LanguageCode, Mapping[MessageKey, RawTemplate]]:
        """Return an immutable point-in-time view of every registered pack."""
        return self._packs

    @property
    def languages(self) -> tuple[LanguageCode, ...]:
        """Registered language codes in registration order."""
        return tuple(self._packs)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.has_pack(code)

    def __iter__(self) -> Iterator[LanguageCode]:
        return iter(self.languages)

    def __len__(self) -> int:
        return len(self._packs)

    def __repr__(self) -> str:
        return f"StringPackStore(languages={self.languages!r})"

