"""Template engine: placeholder parsing and parameter substitution.

A raw template is scanned left to right for ``{...}`` spans:

    The {thing} is big            -> plain placeholder, value looked up by name
    The {quote(nice car)} is big  -> function placeholder, called with "nice car"

The call shape may sit anywhere inside the braces, so ``{ quote(x)}`` still calls
quote.

Text around placeholders becomes plain string tokens, including empty ones
between adjacent placeholders; a renderer that keys rich content by position
relies on them. Parsed templates are cached, substitution is not.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal

from i18nlex.constants import TEMPLATE_CACHE_SIZE
from i18nlex.diagnostics import ErrorTemplate, I18nTemplateError
from i18nlex.runtime.value_types import Content, Function, Literal, Param, Token

__all__ = [
    "FUNC_PARAM_PATTERN",
    "PARAMS_PATTERN",
    "Placeholder",
    "compile_template",
    "parameterize",
]

logger = logging.getLogger(__name__)

PARAMS_PATTERN = re.compile(r"\{([^}]+)}")
FUNC_PARAM_PATTERN = re.compile(r"(\w+)\(([\w\s]+)\)")


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Parsed ``{...}`` span of a template.

    Attributes:
        name: Parameter name referenced by the placeholder
        argument: Literal argument text for function placeholders, None for
            plain placeholders
    """

    name: str
    argument: str | None = None

    @property
    def is_call(self) -> bool:
        """True for ``{name(argument)}`` placeholders."""
        return self.argument is not None


type Segment = str | Placeholder


@functools.lru_cache(maxsize=TEMPLATE_CACHE_SIZE)
def compile_template(text: str) -> tuple[Segment, ...]:
    """Split a raw template into literal text and placeholders.

    The result always starts and ends with a literal segment and alternates
    literal/placeholder, so a template without placeholders yields ``(text,)``.

    Args:
        text: Raw template string

    Returns:
        Tuple of str and Placeholder segments

    Example:
        >>> compile_template("A {x} B")
        ('A ', Placeholder(name='x', argument=None), ' B')
        >>> compile_template("{a}{b}")[2]
        ''
    """
    segments: list[Segment] = []
    position = 0

    for match in PARAMS_PATTERN.finditer(text):
        segments.append(text[position : match.start()])
        inner = match.group(1)
        if call := FUNC_PARAM_PATTERN.search(inner):
            segments.append(Placeholder(call.group(1), call.group(2)))
        else:
            segments.append(Placeholder(inner))
        position = match.end()

    segments.append(text[position:])
    return tuple(segments)


def parameterize(key: str, text: str, params: Mapping[str, Param]) -> tuple[Token, ...]:
    """Expand a raw template against tagged parameters.

    Args:
        key: Message key, used in error messages
        text: Raw template string
        params: Parameter name -> tagged value (see value_types.as_params)

    Returns:
        Token sequence whose concatenation is the visible text

    Raises:
        I18nTemplateError: If a function placeholder names a non-function parameter
    """
    tokens: list[Token] = []

    for segment in compile_template(text):
        match segment:
            case str():
                tokens.append(segment)
            case Placeholder(name=name, argument=None):
                tokens.append(_render_value(key, name, params.get(name)))
            case Placeholder(name=name, argument=str() as argument):
                tokens.append(_call_function(key, name, argument, params.get(name)))

    return tuple(tokens)


def _render_value(key: str, name: str, param: Param | None) -> Token:
    match param:
        case None | Literal(value=None):
            return ""
        case Literal(value=bool() as flag):
            return str(flag)
        case Literal(value=int() | float() | Decimal() as number):
            return _format_number(number)
        case Literal(value=value):
            return str(value)
        case Content():
            return param
        case Function():
            logger.warning("%s", ErrorTemplate.function_as_value(name, key))
            return ""


def _call_function(key: str, name: str, argument: str, param: Param | None) -> Token:
    if not isinstance(param, Function):
        raise I18nTemplateError(ErrorTemplate.function_expected(name, key))

    result = param(argument)
    match result:
        case None:
            return ""
        case float() if not math.isfinite(result):
            return _format_number(result)
        case str() | int() | float() | Decimal() | Content():
            return result
        case _:
            return Content(result)


def _format_number(number: int | float | Decimal) -> str:
    """Render a number as text, spelling non-finite floats like numeric literals."""
    if isinstance(number, float):
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "Infinity" if number > 0 else "-Infinity"
    return str(number)
