"""Quickstart example for i18nlex.

Registers two string packs and resolves messages with plain, function and
rich-content parameters.

Python 3.13+.
"""

from i18nlex import Content, I18n, I18nConfig

i18n = I18n(
    {
        "en": {
            "hello": "Hello, World!",
            "greeting": "Hello, {name}!",
            "quoted": "The {quote(nice car)} is big",
            "fraction": "({numerator}/{denominator} selected)",
            "children": "This one has {children} inside",
        },
        "fr": {
            "hello": "Bonjour le monde !",
            "greeting": "Bonjour, {name} !",
        },
    },
    config=I18nConfig(default_languages=["en"]),
)

# Example 1: Simple message
print("=" * 50)
print("Example 1: Simple Message")
print("=" * 50)
print(i18n.resolve_text("hello"))
# Output: Hello, World!

# Example 2: Parameters
print("\n" + "=" * 50)
print("Example 2: Parameters")
print("=" * 50)
print(i18n.resolve_text("greeting", {"name": "Alice"}))
# Output: Hello, Alice!
print(i18n.resolve_text("fraction", {"numerator": 5}))
# Output: (5/ selected)

# Example 3: Function parameters receive the literal argument
print("\n" + "=" * 50)
print("Example 3: Function Parameters")
print("=" * 50)
print(i18n.resolve_text("quoted", {"quote": lambda text: f"“{text}”"}))
# Output: The “nice car” is big

# Example 4: Another language
print("\n" + "=" * 50)
print("Example 4: Locale Context")
print("=" * 50)
french = i18n.context(accept_langs=["fr-CA"])
print(i18n.chain(french))
# Output: ('fr-CA', 'en', 'fr')
print(i18n.resolve_text("greeting", {"name": "Alice"}, french.derive(default_lang=None)))
# Output: Bonjour, Alice !

# Example 5: Rich content stays opaque
print("\n" + "=" * 50)
print("Example 5: Rich Content Tokens")
print("=" * 50)
tokens = i18n.resolve("children", {"children": Content("<b>bold</b>")})
print(tokens)
# Output: ('This one has ', Content(value='<b>bold</b>'), ' inside')

# Example 6: Missing keys never raise
print("\n" + "=" * 50)
print("Example 6: Missing Keys")
print("=" * 50)
print(i18n.resolve_text("nope", context=french))
# Output: [I18N-MISSING(fr-CA,en,fr):nope]
