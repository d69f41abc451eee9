"""Exceptions for the translation store.

Every error raised by the store derives from TranslationError, and also from
the builtin exception it is closest to, so callers can catch either.
"""

from typing import Any


class TranslationError(Exception):
    """Base exception for all translation store errors.

    Attributes:
        message: Human readable description.
        context: Structured details (locale, key, ...) for logging.

    Example:
        try:
            store.get_translation("en", "greeting")
        except TranslationError as e:
            logger.error("translation_error", error=str(e), **e.context)
    """

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        return self.message


class ParseError(TranslationError, ValueError):
    """Raised when a payload is not valid JSON/YAML or not JSON-like data."""

    pass


class InvalidPathError(TranslationError, ValueError):
    """Raised when a dotted key is empty or contains an empty segment.

    Example:
        >>> split("a..b")
        Traceback (most recent call last):
        ...
        InvalidPathError: Invalid translation key 'a..b': empty segment
    """

    pass


class LocaleNotFoundError(TranslationError, KeyError):
    """Raised when a locale has never been written to (or was deleted)."""

    pass


class KeyNotFoundError(TranslationError, KeyError):
    """Raised when a dotted key does not resolve inside a locale."""

    pass


class TranslationTypeError(TranslationError, TypeError):
    """Raised when a value has the wrong type for the operation.

    Covers bulk writes of non-object data, formatting a non-string value,
    and substituting an array or object into a template.
    """

    pass


class NetworkError(TranslationError):
    """Raised when fetching a translation payload fails."""

    pass
