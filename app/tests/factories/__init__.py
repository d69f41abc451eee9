"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_locale_store,
    make_multi_locale_document,
    make_multi_locale_json,
    make_translation_payload,
)

__all__ = [
    "make_locale_store",
    "make_multi_locale_document",
    "make_multi_locale_json",
    "make_translation_payload",
]
