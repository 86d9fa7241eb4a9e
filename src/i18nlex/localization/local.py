"""Scoped locale context.

Lets code deep in a call chain resolve messages without threading the
service and context through every signature:

    with use_i18n_context(i18n, i18n.context(accept_langs=["fr"])):
        i18ns("greet", {"name": "Anna"})

The current scope is held in a ContextVar, so every thread and every asyncio
task sees its own value. Tasks inherit the scope current at task creation;
setting a scope inside a task never leaks into its parent.

Python 3.13+.
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

from i18nlex.diagnostics import ErrorTemplate, I18nContextError

if TYPE_CHECKING:
    from i18nlex.localization.context import LocaleContext
    from i18nlex.localization.orchestrator import I18n
    from i18nlex.runtime.value_types import Params

__all__ = [
    "I18nScope",
    "get_i18n",
    "get_i18n_context",
    "i18ns",
    "reset_i18n_context",
    "set_i18n_context",
    "use_i18n_context",
]

type _Scope = tuple[I18n, LocaleContext]

_current_scope: ContextVar[_Scope | None] = ContextVar("i18nlex_scope", default=None)


def set_i18n_context(i18n: I18n, context: LocaleContext | None = None) -> Token[_Scope | None]:
    """Make a service and context current for the running thread or task.

    Args:
        i18n: Service used by i18ns()
        context: Locale context; the service's base context when None

    Returns:
        Token for reset_i18n_context()
    """
    scope = (i18n, context if context is not None else i18n.base_context)
    return _current_scope.set(scope)


def reset_i18n_context(token: Token[_Scope | None]) -> None:
    """Restore the scope that was current before set_i18n_context()."""
    _current_scope.reset(token)


def get_i18n_context() -> LocaleContext | None:
    """Return the current locale context, or None outside any scope."""
    scope = _current_scope.get()
    return scope[1] if scope is not None else None


def get_i18n() -> I18n | None:
    """Return the current service, or None outside any scope."""
    scope = _current_scope.get()
    return scope[0] if scope is not None else None


def i18ns(key: str, params: Params | None = None) -> str:
    """Resolve a key to text using the current scope.

    Args:
        key: Message key
        params: Parameter values

    Returns:
        Resolved text

    Raises:
        I18nContextError: If no scope is current
        I18nTemplateError: If a function placeholder names a non-function
    """
    scope = _current_scope.get()
    if scope is None:
        raise I18nContextError(ErrorTemplate.context_not_set())
    i18n, context = scope
    return i18n.resolve_text(key, params, context)


class I18nScope:
    """Context manager that sets a scope on entry and restores it on exit.

    Usage:
        with I18nScope(i18n, context) as ctx:
            i18ns("greet")
    """

    __slots__ = ("_context", "_i18n", "_token")

    def __init__(self, i18n: I18n, context: LocaleContext | None = None) -> None:
        self._i18n = i18n
        self._context = context
        self._token: Token[_Scope | None] | None = None

    def __enter__(self) -> LocaleContext:
        """Enter the scope, returning the context made current."""
        self._token = set_i18n_context(self._i18n, self._context)
        scope = _current_scope.get()
        assert scope is not None  # noqa: S101 - set above
        return scope[1]

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit the scope, restoring the previous one."""
        if self._token is not None:
            reset_i18n_context(self._token)
            self._token = None


def use_i18n_context(i18n: I18n, context: LocaleContext | None = None) -> I18nScope:
    """Scope a service and context to a ``with`` block.

    Example:
        >>> with use_i18n_context(i18n, i18n.context(accept_langs=["fr"])):
        ...     i18ns("greet")
        'Bonjour'
    """
    return I18nScope(i18n, context)
