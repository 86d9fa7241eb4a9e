"""I18nLex exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "I18nContextError",
    "I18nError",
    "I18nMissingError",
    "I18nTemplateError",
]


class I18nError(Exception):
    """Base exception for all I18nLex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class I18nTemplateError(I18nError):
    """Template and parameters disagree.

    Raised when a function-shaped placeholder such as ``{quote(nice car)}``
    names a parameter that is not a function. This is a programming mistake,
    not a missing translation, so it is never degraded to a fallback value.
    """


class I18nContextError(I18nError):
    """No locale context is available for scoped resolution.

    Raised by ``i18ns()`` when called outside any ``use_i18n_context()``
    block and before ``set_i18n_context()``.
    """


class I18nMissingError(I18nError):
    """Key could not be resolved from any language in the chain.

    Never raised by resolution. An instance is passed to the context's
    ``on_missing`` observer so callers can log or re-raise it.

    Attributes:
        key: Message key that was not found
        languages: Effective fallback chain that was walked
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        key: str = "",
        languages: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.key = key
        self.languages = languages
