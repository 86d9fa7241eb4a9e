"""Enumerations for I18nLex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ParamKind(StrEnum):
    """Kind of a message parameter.

    StrEnum provides automatic string conversion: str(ParamKind.LITERAL) == "literal"
    """

    LITERAL = "literal"
    """Plain value rendered as text: str, number, bool or None"""

    FUNCTION = "function"
    """Unary callable invoked by a placeholder: { quote(nice car) }"""

    CONTENT = "content"
    """Opaque rich content spliced in unchanged"""


class ResolutionStatus(StrEnum):
    """Outcome of walking the fallback chain for one key.

    StrEnum provides automatic string conversion: str(ResolutionStatus.RESOLVED) == "resolved"
    """

    RESOLVED = "resolved"
    """A pack in the chain supplied the key"""

    TERMINAL_MISS = "terminal_miss"
    """A pack was found without the key and fallback is disallowed"""

    EXHAUSTED = "exhausted"
    """No language in the chain supplied the key"""


__all__ = [
    "ParamKind",
    "ResolutionStatus",
]
