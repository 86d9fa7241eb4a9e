"""Locale fallback example.

Demonstrates how the effective chain is built and how allow_fallback decides
between strict per-language packs and cascading lookups.

Scenarios covered:
1. Region codes falling back to their base language
2. Strict packs (allow_fallback=False) versus cascading lookups
3. Observing misses with on_missing
4. Context packs layered over registered packs

Python 3.13+.
"""

from __future__ import annotations

import logging

from i18nlex import I18n, I18nConfig, MissingInfo

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("locale_fallback")


def build_service() -> I18n:
    return I18n(
        {
            "en": {"checkout": "Checkout", "cart": "Cart ({count})", "english-only": "Only English"},
            "lv": {"checkout": "Apmaksa", "cart": "Grozs ({count})"},
        },
        config=I18nConfig(default_languages=["lv-LV"]),
    )


def example_1_chain() -> None:
    """Example 1: Region codes expand to their base language."""
    print("=" * 60)
    print("Example 1: Effective chain")
    print("=" * 60)

    i18n = build_service()
    print(i18n.chain())
    # ('lv-LV', 'en', 'lv')
    print(i18n.chain(i18n.context(default_lang=None)))
    # ('lv-LV', 'lv')
    print(i18n.resolve_text("checkout", context=i18n.context(default_lang=None)))
    # Apmaksa


def example_2_strict_versus_cascading() -> None:
    """Example 2: A found pack is authoritative unless fallback is allowed."""
    print("\n" + "=" * 60)
    print("Example 2: allow_fallback")
    print("=" * 60)

    i18n = build_service()
    strict = i18n.context(accept_langs=["lv"])
    cascading = strict.derive(allow_fallback=True)
    print(i18n.resolve_text("english-only", context=strict))
    # [I18N-MISSING(lv,en):english-only]
    print(i18n.resolve_text("english-only", context=cascading))
    # Only English


def example_3_on_missing() -> None:
    """Example 3: Report misses to your own logging."""
    print("\n" + "=" * 60)
    print("Example 3: on_missing")
    print("=" * 60)

    def report(info: MissingInfo) -> None:
        logger.error("Missing '%s' (tried %s)", info.key, ", ".join(info.langs))

    i18n = build_service()
    ctx = i18n.context(accept_langs=["lv"], on_missing=report)
    print(i18n.resolve_text("promo-banner", context=ctx))


def example_4_context_packs() -> None:
    """Example 4: A feature ships its own strings without registering them globally."""
    print("\n" + "=" * 60)
    print("Example 4: Context packs")
    print("=" * 60)

    i18n = build_service()
    feature = i18n.context(accept_langs=["en"], l10ns={"en": {"checkout": "Pay now"}})
    print(i18n.resolve_text("checkout", context=feature))
    # Pay now
    print(i18n.resolve_text("cart", {"count": 3}, context=feature))
    # Cart (3)
    isolated = feature.derive(inherit_l10ns=False, l10ns={"en": {"cart": "Basket ({count})"}})
    print(i18n.resolve_text("cart", {"count": 3}, context=isolated))
    # Basket (3)


if __name__ == "__main__":
    example_1_chain()
    example_2_strict_versus_cascading()
    example_3_on_missing()
    example_4_context_packs()
