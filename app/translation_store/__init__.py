"""translation-store: in-memory multi-locale translation store.

Example:
    from translation_store import TranslationService

    service = TranslationService()
    service.set_translations("en", {"welcome": "Hello {username}"})
    service.format_translation("en", "welcome", {"username": "Alice"})
"""

from translation_store.i18n import (
    InvalidPathError,
    KeyNotFoundError,
    LocaleNotFoundError,
    LocaleStore,
    NetworkError,
    ParseError,
    TranslationError,
    TranslationLoader,
    TranslationService,
    TranslationTree,
    TranslationTypeError,
    Value,
    ValueKind,
    create_translation_service,
    format_template,
)
from translation_store.providers import get_settings, get_translation_service

__all__ = [
    "Value",
    "ValueKind",
    "TranslationTree",
    "LocaleStore",
    "TranslationLoader",
    "TranslationService",
    "create_translation_service",
    "format_template",
    "get_settings",
    "get_translation_service",
    "TranslationError",
    "ParseError",
    "InvalidPathError",
    "LocaleNotFoundError",
    "KeyNotFoundError",
    "TranslationTypeError",
    "NetworkError",
]
