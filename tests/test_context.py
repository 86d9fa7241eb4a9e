"""Tests for LocaleContext construction and nested derivation.

Python 3.13+.
"""

from types import MappingProxyType

import pytest

from i18nlex.localization import LocaleContext, merge_l10ns


class TestLocaleContextConstruction:
    """Test normalization and validation."""

    def test_defaults(self) -> None:
        """An empty context has no languages and no packs."""
        ctx = LocaleContext()
        assert ctx.accept_langs == ()
        assert ctx.permit_langs is None
        assert ctx.default_lang is None
        assert ctx.allow_fallback is False
        assert dict(ctx.l10ns) == {}
        assert ctx.on_missing is None

    def test_sequences_normalized(self) -> None:
        """Lists become tuples, sets become frozensets."""
        ctx = LocaleContext(accept_langs=["fr-CA", "en"], permit_langs={"en"})  # type: ignore[arg-type]
        assert ctx.accept_langs == ("fr-CA", "en")
        assert ctx.permit_langs == frozenset({"en"})

    def test_packs_frozen_and_copied(self) -> None:
        """Context packs are private read-only copies."""
        source = {"en": {"a": "1"}}
        ctx = LocaleContext(l10ns=source)
        source["en"]["a"] = "changed"
        assert ctx.l10ns["en"]["a"] == "1"
        assert isinstance(ctx.l10ns, MappingProxyType)
        with pytest.raises(TypeError):
            ctx.l10ns["en"]["a"] = "x"  # type: ignore[index]

    def test_immutable(self) -> None:
        """Fields cannot be reassigned."""
        ctx = LocaleContext()
        with pytest.raises(AttributeError):
            ctx.default_lang = "en"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"accept_langs": ["en", ""]},
            {"permit_langs": [" en"]},
            {"default_lang": ""},
            {"l10ns": {"": {}}},
        ],
    )
    def test_invalid_codes_rejected(self, kwargs: dict[str, object]) -> None:
        """Blank or padded codes raise ValueError."""
        with pytest.raises(ValueError, match="Invalid language code"):
            LocaleContext(**kwargs)  # type: ignore[arg-type]

    def test_invalid_pack_rejected(self) -> None:
        """Context packs are validated like store packs."""
        with pytest.raises(ValueError, match="Invalid string pack for 'en'"):
            LocaleContext(l10ns={"en": {"a": 1}})  # type: ignore[dict-item]


class TestDerive:
    """Test child context derivation."""

    def test_override_replaces(self) -> None:
        """Named fields replace inherited ones."""
        parent = LocaleContext(accept_langs=("en",), default_lang="en")
        child = parent.derive(accept_langs=["fr"], allow_fallback=True)
        assert child.accept_langs == ("fr",)
        assert child.allow_fallback is True
        assert child.default_lang == "en"

    def test_parent_untouched(self) -> None:
        """derive() never mutates the parent."""
        parent = LocaleContext(accept_langs=("en",))
        parent.derive(accept_langs=["fr"])
        assert parent.accept_langs == ("en",)

    def test_explicit_none_clears(self) -> None:
        """None is a value, not 'inherit'."""
        parent = LocaleContext(default_lang="en", permit_langs=frozenset({"en"}))
        child = parent.derive(default_lang=None, permit_langs=None)
        assert child.default_lang is None
        assert child.permit_langs is None

    def test_explicit_none_clears_packs(self) -> None:
        """l10ns=None drops inherited packs like any other field."""
        parent = LocaleContext(l10ns={"en": {"a": "A"}})
        child = parent.derive(l10ns=None)
        assert dict(child.l10ns) == {}
        assert dict(parent.l10ns["en"]) == {"a": "A"}

    def test_unknown_field_rejected(self) -> None:
        """Typos in override names fail loudly."""
        with pytest.raises(TypeError, match="accept_lang"):
            LocaleContext().derive(accept_lang=["en"])

    def test_packs_merged_per_key(self) -> None:
        """Inner keys win; outer keys still resolve; other languages are kept."""
        parent = LocaleContext(l10ns={"en": {"a": "A", "b": "B"}, "fr": {"a": "Ah"}})
        child = parent.derive(l10ns={"en": {"b": "Bee", "c": "C"}})
        assert dict(child.l10ns["en"]) == {"a": "A", "b": "Bee", "c": "C"}
        assert dict(child.l10ns["fr"]) == {"a": "Ah"}

    def test_nested_derivation_accumulates(self) -> None:
        """Three levels of nesting merge outward-in."""
        root = LocaleContext(l10ns={"en": {"a": "1"}})
        middle = root.derive(l10ns={"en": {"b": "2"}})
        leaf = middle.derive(l10ns={"en": {"a": "3"}})
        assert dict(leaf.l10ns["en"]) == {"a": "3", "b": "2"}

    def test_inherit_l10ns_false(self) -> None:
        """Opting out keeps only the child's own packs."""
        parent = LocaleContext(l10ns={"en": {"a": "A"}, "fr": {"a": "Ah"}})
        child = parent.derive(inherit_l10ns=False, l10ns={"en": {"b": "B"}})
        assert dict(child.l10ns) == {"en": {"b": "B"}}

    def test_inherit_l10ns_false_without_packs(self) -> None:
        """Opting out with no packs leaves none."""
        parent = LocaleContext(l10ns={"en": {"a": "A"}})
        assert dict(parent.derive(inherit_l10ns=False).l10ns) == {}

    def test_packs_inherited_when_not_named(self) -> None:
        """Deriving other fields keeps the packs."""
        parent = LocaleContext(l10ns={"en": {"a": "A"}})
        assert parent.derive(accept_langs=["en"]).l10ns == parent.l10ns

    def test_on_missing_inherited(self) -> None:
        """Observers flow to children unless replaced."""

        def observer(_: object) -> None:
            return None

        parent = LocaleContext(on_missing=observer)
        assert parent.derive(accept_langs=["fr"]).on_missing is observer
        assert parent.derive(on_missing=None).on_missing is None

    def test_with_languages(self) -> None:
        """with_languages is a derive() shortcut."""
        assert LocaleContext().with_languages(["de"]).accept_langs == ("de",)


class TestMergeL10ns:
    """Test the pack overlay helper."""

    def test_merge(self) -> None:
        """Merging yields read-only per-language packs."""
        merged = merge_l10ns(MappingProxyType({"en": {"a": "1"}}), {"en": {"b": "2"}})
        assert dict(merged["en"]) == {"a": "1", "b": "2"}
        with pytest.raises(TypeError):
            merged["en"]["a"] = "x"  # type: ignore[index]

    @pytest.mark.parametrize("pack", [["x"], "text", None])
    def test_malformed_inner_pack_rejected(self, pack: object) -> None:
        """Inner packs are validated before they are merged."""
        parent = LocaleContext(l10ns={"en": {"a": "A"}})
        with pytest.raises(ValueError, match="Invalid string pack for 'en'"):
            parent.derive(l10ns={"en": pack})
