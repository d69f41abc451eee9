"""Shared fixtures for the translation store test suite."""

import pytest

from translation_store.i18n import LocaleStore, TranslationService
from tests.factories.i18n import make_locale_store, make_translation_payload


@pytest.fixture
def empty_store():
    """A fresh, empty LocaleStore."""
    return LocaleStore()


@pytest.fixture
def populated_store():
    """LocaleStore with an "en" locale built from make_translation_payload()."""
    return make_locale_store()


@pytest.fixture
def sample_translation_data():
    """Sample single-locale translation data."""
    return make_translation_payload()


@pytest.fixture
def service():
    """TranslationService over its own empty store."""
    return TranslationService()
