"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def message_not_found(key: str, languages: tuple[str, ...]) -> Diagnostic:
        """Message key not supplied by any pack in the chain.

        Args:
            key: The message key that was not found
            languages: Effective fallback chain that was walked

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = f"Message '{key}' not found in languages ({', '.join(languages)})"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="Register a pack containing the key, or enable allow_fallback",
            key=key,
            languages=languages,
            severity="warning",
        )

    @staticmethod
    def context_not_set() -> Diagnostic:
        """Scoped resolution attempted before any context was established.

        Returns:
            Diagnostic for CONTEXT_NOT_SET
        """
        return Diagnostic(
            code=DiagnosticCode.CONTEXT_NOT_SET,
            message="No context set.",
            hint="Call set_i18n_context() or enter use_i18n_context() first",
        )

    @staticmethod
    def function_expected(param_name: str, key: str) -> Diagnostic:
        """Function-shaped placeholder names a parameter that is not callable.

        Args:
            param_name: Parameter named by the placeholder
            key: Message key whose template contains the placeholder

        Returns:
            Diagnostic for FUNCTION_EXPECTED
        """
        msg = f"Expecting a function for param '{param_name}' in key '{key}'"
        return Diagnostic(
            code=DiagnosticCode.FUNCTION_EXPECTED,
            message=msg,
            hint=f"Pass a callable for '{param_name}', e.g. {{'{param_name}': lambda arg: arg}}",
            key=key,
            param_name=param_name,
        )

    @staticmethod
    def function_as_value(param_name: str, key: str) -> Diagnostic:
        """Plain placeholder names a function parameter.

        Args:
            param_name: Parameter named by the placeholder
            key: Message key whose template contains the placeholder

        Returns:
            Diagnostic for FUNCTION_AS_VALUE
        """
        msg = f"Function param '{param_name}' used as a plain value in key '{key}'"
        return Diagnostic(
            code=DiagnosticCode.FUNCTION_AS_VALUE,
            message=msg,
            hint=f"Use '{{{param_name}(argument)}}' to invoke it",
            key=key,
            param_name=param_name,
            severity="warning",
        )

    @staticmethod
    def invalid_language(code: object) -> Diagnostic:
        """Language code is not a non-blank string without surrounding whitespace.

        Args:
            code: The rejected value

        Returns:
            Diagnostic for INVALID_LANGUAGE
        """
        msg = f"Invalid language code: {code!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE,
            message=msg,
            hint="Use a BCP-47 tag such as 'en' or 'fr-CA'",
        )

    @staticmethod
    def invalid_pack(code: str, detail: str) -> Diagnostic:
        """String pack is not a mapping of string keys to string templates.

        Args:
            code: Language code the pack was registered for
            detail: Description of the offending entry

        Returns:
            Diagnostic for INVALID_PACK
        """
        msg = f"Invalid string pack for '{code}': {detail}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PACK,
            message=msg,
            hint="Packs map message keys (str) to raw templates (str)",
        )
