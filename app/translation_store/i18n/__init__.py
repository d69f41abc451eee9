"""i18n system - in-memory multi-locale translation store.

Holds a tree of localized values per locale, addressable by dotted keys, and
renders {placeholder} templates.

Main components:
- values: Value, ValueKind (JSON-like tagged variant)
- paths: dotted key splitting and tree walking
- tree: TranslationTree (one locale)
- store: LocaleStore (all locales)
- formatter: format_template for {name} placeholders
- loader: TranslationLoader and payload fetchers
- service: TranslationService host-facing facade
"""

from translation_store.i18n.exceptions import (
    InvalidPathError,
    KeyNotFoundError,
    LocaleNotFoundError,
    NetworkError,
    ParseError,
    TranslationError,
    TranslationTypeError,
)
from translation_store.i18n.factory import create_translation_service
from translation_store.i18n.formatter import format_template
from translation_store.i18n.loader import (
    FetchedPayload,
    FilePayloadFetcher,
    HttpPayloadFetcher,
    PayloadFetcher,
    TranslationLoader,
)
from translation_store.i18n.service import TranslationService
from translation_store.i18n.store import LocaleStore
from translation_store.i18n.tree import TranslationTree
from translation_store.i18n.values import Value, ValueKind

__all__ = [
    "Value",
    "ValueKind",
    "TranslationTree",
    "LocaleStore",
    "format_template",
    "FetchedPayload",
    "PayloadFetcher",
    "HttpPayloadFetcher",
    "FilePayloadFetcher",
    "TranslationLoader",
    "TranslationService",
    "create_translation_service",
    "TranslationError",
    "ParseError",
    "InvalidPathError",
    "LocaleNotFoundError",
    "KeyNotFoundError",
    "TranslationTypeError",
    "NetworkError",
]
