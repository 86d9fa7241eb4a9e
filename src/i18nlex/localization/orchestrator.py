"""Message resolution service.

Composes the runtime pieces into one object that owns its own store, test
mode switch and default language preferences:

    I18n.resolve(key, params, context)
        -> build_chain(context)
        -> resolve_key(key, chain, store + context.l10ns)
        -> parameterize(...)            on a hit
        -> report_missing(...)          on a miss
        -> harness_tokens(...)          in test mode, instead of all of the above

Several I18n instances (per test, per tenant) coexist without sharing state;
there are no module-level switches.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import ChainMap
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from i18nlex.config import I18nConfig
from i18nlex.locale_utils import as_language_codes, get_system_languages
from i18nlex.localization.chain import build_chain
from i18nlex.localization.context import LocaleContext
from i18nlex.runtime.reporter import harness_tokens, report_missing
from i18nlex.runtime.resolver import KeyResolution, PackSource, resolve_key
from i18nlex.runtime.store import StringPackStore
from i18nlex.runtime.template import parameterize
from i18nlex.runtime.value_types import Params, Token, as_params, render_text
from i18nlex.types import LanguageCode, MessageKey, RawTemplate, StringPack

__all__ = ["I18n", "TextFn"]

logger = logging.getLogger(__name__)

type TextFn = Callable[..., str]
"""Bound text function: ``fn(key, params=None) -> str``."""


class I18n:
    """Resolve message keys against registered string packs.

    Example:
        >>> i18n = I18n({"en": {"greet": "Hello {name}"}})
        >>> i18n.resolve_text("greet", {"name": "Anna"}, i18n.context(accept_langs=["en"]))
        'Hello Anna'
        >>> i18n.resolve_text("nope", context=i18n.context(accept_langs=["xx"]))
        '[I18N-MISSING(xx,en):nope]'

    Attributes:
        config: Configuration the instance was created with
        test_mode: True while deterministic test tokens replace resolution
        default_languages: Preference order of the base context
    """

    __slots__ = ("_base_context", "_config", "_store", "_test_mode")

    def __init__(
        self,
        packs: Mapping[LanguageCode, StringPack] | None = None,
        *,
        config: I18nConfig | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            packs: Initial string packs keyed by language code
            config: Service configuration; ``I18nConfig()`` when omitted

        Raises:
            ValueError: If a pack or language code is invalid
        """
        self._config = config if config is not None else I18nConfig()
        self._store = StringPackStore(packs)
        self._test_mode = self._config.test_mode

        languages = self._config.default_languages
        if languages is None:
            languages = get_system_languages()
            logger.debug("Detected system languages: %s", ", ".join(languages))

        self._base_context = LocaleContext(
            accept_langs=languages,
            default_lang=self._config.default_lang,
            allow_fallback=self._config.allow_fallback,
        )

    @property
    def config(self) -> I18nConfig:
        """Configuration the instance was created with."""
        return self._config

    @property
    def store(self) -> StringPackStore:
        """Registered string packs."""
        return self._store

    @property
    def test_mode(self) -> bool:
        """True while resolution returns test tokens."""
        return self._test_mode

    @property
    def default_languages(self) -> tuple[LanguageCode, ...]:
        """Preference order used by contexts derived from the base context."""
        return self._base_context.accept_langs

    @property
    def base_context(self) -> LocaleContext:
        """Context used when a call supplies none."""
        return self._base_context

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"I18n(default_languages={list(self.default_languages)!r}, "
            f"packs={self._store.languages!r}, test_mode={self._test_mode})"
        )

    # ------------------------------------------------------------------
    # Switches
    # ------------------------------------------------------------------

    def set_test_mode(self, enabled: bool) -> None:
        """Switch deterministic test tokens on or off.

        Args:
            enabled: True to replace resolution with ``[TEST:<key>]`` tokens
        """
        self._test_mode = bool(enabled)
        logger.info("Test mode %s", "enabled" if self._test_mode else "disabled")

    def set_default_languages(self, codes: Iterable[LanguageCode]) -> None:
        """Replace the preference order of the base context.

        Contexts already derived keep the languages they were derived with.

        Args:
            codes: Language codes, most preferred first

        Raises:
            ValueError: If codes is a bare string or holds an invalid code
        """
        languages = as_language_codes(codes)
        self._base_context = self._base_context.derive(accept_langs=languages)
        logger.info("Default languages set to %s", ", ".join(languages) or "(none)")

    def register_pack(self, code: LanguageCode, pack: StringPack) -> None:
        """Merge a string pack into the store (per-key overlay).

        Args:
            code: Language code (e.g., "en", "fr-CA")
            pack: Mapping of message key to raw template

        Raises:
            ValueError: If the code or pack is invalid
        """
        self._store.add(code, pack)

    add_l10n = register_pack

    # ------------------------------------------------------------------
    # Contexts
    # ------------------------------------------------------------------

    def context(self, *, inherit_l10ns: bool = True, **overrides: Any) -> LocaleContext:
        """Derive a locale context from the base context.

        Args:
            inherit_l10ns: Merge base-context packs into the new context's packs
            **overrides: LocaleContext field values (explicit None clears a field)

        Returns:
            New LocaleContext

        Raises:
            TypeError: If an override names an unknown field
        """
        return self._base_context.derive(inherit_l10ns=inherit_l10ns, **overrides)

    def chain(self, context: LocaleContext | None = None) -> tuple[LanguageCode, ...]:
        """Return the effective fallback chain for a context.

        Args:
            context: Locale context; the base context when None
        """
        return build_chain(self._effective(context))

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(
        self,
        key: MessageKey,
        params: Params | None = None,
        context: LocaleContext | None = None,
    ) -> tuple[Token, ...]:
        """Resolve a key into a token sequence.

        Misses never raise: they return the missing-asset token and notify
        the context's on_missing observer.

        Args:
            key: Message key
            params: Parameter values; callables become functions, unknown
                objects become opaque content
            context: Locale context; the base context when None

        Returns:
            Token sequence (text, numbers and opaque Content)

        Raises:
            I18nTemplateError: If a ``{name(arg)}`` placeholder names a
                parameter that is not a function
        """
        tagged = as_params(params)
        if self._test_mode:
            return harness_tokens(key, tagged)

        effective = self._effective(context)
        resolution = self._lookup(key, effective)
        if resolution.template is None:
            return report_missing(key, resolution.chain, effective.on_missing)

        logger.debug("Resolved %r from %s", key, resolution.language)
        return parameterize(key, resolution.template, tagged)

    def resolve_text(
        self,
        key: MessageKey,
        params: Params | None = None,
        context: LocaleContext | None = None,
    ) -> str:
        """Resolve a key and join the tokens into one string.

        Opaque content is rendered with str().
        """
        return render_text(self.resolve(key, params, context))

    def has_message(self, key: MessageKey, context: LocaleContext | None = None) -> bool:
        """Check whether a key resolves under a context.

        Ignores test mode and never notifies on_missing.

        Args:
            key: Message key
            context: Locale context; the base context when None

        Returns:
            True if the chain walk finds a template
        """
        return self._lookup(key, self._effective(context)).found

    def bind(self, context: LocaleContext | None = None) -> TextFn:
        """Bind a context, returning ``fn(key, params=None) -> str``.

        Example:
            >>> t = i18n.bind(i18n.context(accept_langs=["fr"]))
            >>> t("greet", {"name": "Anna"})
            'Bonjour Anna'
        """
        effective = self._effective(context)

        def text(key: MessageKey, params: Params | None = None) -> str:
            return self.resolve_text(key, params, effective)

        return text

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _effective(self, context: LocaleContext | None) -> LocaleContext:
        return context if context is not None else self._base_context

    def _lookup(self, key: MessageKey, context: LocaleContext) -> KeyResolution:
        return resolve_key(
            key,
            build_chain(context),
            self._pack_source(context),
            allow_fallback=context.allow_fallback,
        )

    def _pack_source(self, context: LocaleContext) -> PackSource:
        """Overlay the context's packs on the store's packs, per key."""
        own_packs = context.l10ns
        if not own_packs:
            return self._store.get

        def source(code: LanguageCode) -> Mapping[MessageKey, RawTemplate] | None:
            own = own_packs.get(code)
            shared = self._store.get(code)
            if own is None or shared is None:
                return own if own is not None else shared
            return ChainMap(own, shared)  # type: ignore[arg-type]

        return source
