"""Resolution runtime package.

Provides the string pack store, the key resolver, the template engine and
the missing/test reporter. Knows nothing about locale contexts; the
localization package composes these pieces.

Python 3.13+.
"""

from .reporter import MissingInfo, harness_tokens, missing_tokens, report_missing
from .resolver import KeyResolution, resolve_key
from .store import StringPackStore
from .template import Placeholder, compile_template, parameterize
from .value_types import (
    Content,
    Function,
    Literal,
    Param,
    Token,
    as_param,
    as_params,
    render_text,
)

__all__ = [
    "Content",
    "Function",
    "KeyResolution",
    "Literal",
    "MissingInfo",
    "Param",
    "Placeholder",
    "StringPackStore",
    "Token",
    "as_param",
    "as_params",
    "compile_template",
    "harness_tokens",
    "missing_tokens",
    "parameterize",
    "render_text",
    "report_missing",
    "resolve_key",
]
