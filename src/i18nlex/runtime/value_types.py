"""Core value types for message resolution.

Defines the fundamental types used throughout the resolution system:
    - Literal, Function, Content: Tagged union of message parameter values
    - Param: Union of the three parameter variants
    - Token: Atomic unit of a resolved message
    - as_param: Boundary classification of raw Python values

Callers may pass raw Python values as parameters; they are classified once
by as_param() when a call enters the engine. Past that point the template
engine and reporter dispatch on the variant, never on the raw value.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import ClassVar

from i18nlex.enums import ParamKind

__all__ = [
    "Content",
    "Function",
    "Literal",
    "Param",
    "ParamValue",
    "Params",
    "Token",
    "as_param",
    "as_params",
    "render_text",
]

type LiteralValue = str | int | float | bool | Decimal | None
"""Plain value rendered as text."""


@dataclass(frozen=True, slots=True)
class Literal:
    """Plain parameter value: string, number, bool or None.

    Attributes:
        value: The wrapped value
    """

    kind: ClassVar[ParamKind] = ParamKind.LITERAL
    value: LiteralValue


@dataclass(frozen=True, slots=True)
class Function:
    """Unary function parameter invoked by ``{name(argument)}`` placeholders.

    The function receives the literal argument text and returns a string,
    a number, or any rich content object.

    Attributes:
        func: The wrapped callable
    """

    kind: ClassVar[ParamKind] = ParamKind.FUNCTION
    func: Callable[[str], object]

    def __call__(self, argument: str) -> object:
        """Invoke the wrapped function with a literal argument."""
        return self.func(argument)


@dataclass(frozen=True, slots=True, eq=False)
class Content:
    """Opaque rich content passed through resolution unmodified.

    Never parsed for placeholders. Rendered with ``str()`` only when a caller
    explicitly joins tokens into text.

    Equality is identity of the wrapped object, so unhashable content
    (markup trees, widgets) is supported.

    Attributes:
        value: The wrapped content object
    """

    kind: ClassVar[ParamKind] = ParamKind.CONTENT
    value: object

    def __str__(self) -> str:
        """Return the wrapped object's text form."""
        return str(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return self.value is other.value

    def __hash__(self) -> int:
        return id(self.value)


type Param = Literal | Function | Content
"""Tagged parameter value."""

type ParamValue = Param | LiteralValue | Callable[[str], object] | object
"""Anything accepted as a parameter at the API boundary."""

type Params = Mapping[str, ParamValue]
"""Parameter mapping accepted by resolve() and friends."""

type Token = str | int | float | Decimal | Content
"""Atomic unit of a resolved message."""


def as_param(value: ParamValue) -> Param:
    """Classify a raw Python value into its parameter variant.

    Args:
        value: Raw value or an already-tagged variant

    Returns:
        Literal for None/str/int/float/bool/Decimal, Function for callables,
        the variant itself if already tagged, Content otherwise

    Example:
        >>> as_param("house")
        Literal(value='house')
        >>> as_param(str.upper).kind
        <ParamKind.FUNCTION: 'function'>
    """
    match value:
        case Literal() | Function() | Content():
            return value
        case None | str() | int() | float() | Decimal():
            return Literal(value)
        case _ if callable(value):
            return Function(value)
        case _:
            return Content(value)


def as_params(params: Params | None) -> Mapping[str, Param]:
    """Classify every value of a parameter mapping, preserving order.

    Args:
        params: Raw parameter mapping or None

    Returns:
        Read-only mapping of parameter name to tagged variant
    """
    if not params:
        return MappingProxyType({})
    return MappingProxyType({name: as_param(value) for name, value in params.items()})


def render_text(tokens: Iterable[Token]) -> str:
    """Concatenate resolved tokens into user-visible text.

    Args:
        tokens: Token sequence returned by resolution

    Returns:
        Joined text; opaque content is rendered with str()
    """
    return "".join(token if isinstance(token, str) else str(token) for token in tokens)
