"""Thread and task safety example.

Demonstrates:
1. Registering packs while other threads resolve
2. Scoped contexts isolated per thread
3. Scoped contexts isolated per asyncio task

Python 3.13+.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor

from i18nlex import I18n, I18nConfig, i18ns, use_i18n_context

i18n = I18n(
    {"en": {"hello": "Hello {name}"}, "de": {"hello": "Hallo {name}"}},
    config=I18nConfig(default_languages=["en"]),
)


def example_1_concurrent_registration() -> None:
    """Example 1: Packs can be registered while resolution is running."""
    print("=" * 60)
    print("Example 1: Concurrent registration")
    print("=" * 60)

    def register(index: int) -> None:
        i18n.register_pack("en", {f"item-{index}": f"Item {index}"})

    def resolve(index: int) -> str:
        return i18n.resolve_text("hello", {"name": f"user {index}"})

    with ThreadPoolExecutor(max_workers=8) as executor:
        list(executor.map(register, range(100)))
        results = list(executor.map(resolve, range(100)))

    print(f"{len(results)} resolutions, {len(i18n.store.get('en') or {})} English keys")


def example_2_thread_scopes() -> None:
    """Example 2: Each worker thread resolves with its own scope."""
    print("\n" + "=" * 60)
    print("Example 2: Per-thread scopes")
    print("=" * 60)

    def handle_request(lang: str) -> str:
        with use_i18n_context(i18n, i18n.context(accept_langs=[lang])):
            return i18ns("hello", {"name": lang})

    with ThreadPoolExecutor(max_workers=4) as executor:
        for line in executor.map(handle_request, ["en", "de", "en", "de"]):
            print(line)


async def example_3_task_scopes() -> None:
    """Example 3: Interleaved asyncio tasks keep their own scope."""
    print("\n" + "=" * 60)
    print("Example 3: Per-task scopes")
    print("=" * 60)

    async def handle_request(lang: str, delay: float) -> str:
        with use_i18n_context(i18n, i18n.context(accept_langs=[lang])):
            await asyncio.sleep(delay)
            return i18ns("hello", {"name": lang})

    for line in await asyncio.gather(handle_request("de", 0.02), handle_request("en", 0.01)):
        print(line)


if __name__ == "__main__":
    example_1_concurrent_registration()
    example_2_thread_scopes()
    asyncio.run(example_3_task_scopes())
