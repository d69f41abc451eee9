"""Tests for translation_store.i18n.service module."""

import json

import pytest

from translation_store.i18n import (
    LocaleNotFoundError,
    LocaleStore,
    ParseError,
    TranslationLoader,
    TranslationService,
)


@pytest.mark.unit
class TestTranslationService:
    """Tests for the host-facing TranslationService facade."""

    def test_default_construction(self):
        """A service owns a fresh store and a loader writing to it."""
        service = TranslationService()
        assert isinstance(service.store, LocaleStore)
        assert service.loader.store is service.store
        assert service.get_all_locales() == []

    def test_services_are_independent(self):
        """Separate services never share state."""
        first, second = TranslationService(), TranslationService()
        first.set_translations("en", {"a": "b"})
        assert not second.has_locale("en")

    def test_uses_injected_store(self, populated_store):
        """An injected store is used as is."""
        service = TranslationService(store=populated_store)
        assert service.get_translation("en", "welcome") == "Hello {username}"

    def test_rejects_loader_for_other_store(self):
        """A loader targeting another store is refused."""
        with pytest.raises(ValueError):
            TranslationService(
                store=LocaleStore(), loader=TranslationLoader(LocaleStore())
            )

    def test_full_surface(self, service):
        """Every host operation delegates to the store."""
        service.set_translations("en", json.dumps({"welcome": "Hello {username}"}))
        service.set_translations_from_object("en", {"test": {"data": "1111"}})
        service.update_translation("fr", "welcome", "Bonjour {username}")

        assert service.has_locale("en")
        assert service.get_all_locales() == ["en", "fr"]
        assert service.get_translation("en", "test.data") == "1111"
        assert service.has_translation("en", "test.data")
        assert service.has_key_in_translations("en", "test.data")
        assert service.format_translation("fr", "welcome", {"username": "Zoé"}) == (
            "Bonjour Zoé"
        )
        assert service.get_translations("en") == service.get_all_translations_for_locale(
            "en"
        )
        assert set(service.get_all_translations()) == {"en", "fr"}

        assert service.del_translation("en", "test.data") is True
        assert service.get_translation("en", "test") == {}
        assert service.del_translations("fr") is True

        service.clear_all_translations()
        assert service.get_all_locales() == []
        with pytest.raises(LocaleNotFoundError):
            service.get_translations("en")

    def test_set_translations_from_object_rejects_text(self, service):
        """The structured-object variant does not parse JSON text."""
        with pytest.raises(ParseError):
            service.set_translations_from_object("en", '{"a": 1}')
        assert not service.has_locale("en")

    @pytest.mark.asyncio
    async def test_load_translations_delegates(self, temp_translations_dir):
        """load_translations() goes through the loader into the store."""
        service = TranslationService()
        locales = await service.load_translations(
            str(temp_translations_dir / "i18n.json")
        )
        assert locales == ["en", "fr"]
        assert service.format_translation("en", "welcome", {"username": "Al"}) == (
            "Hello Al"
        )
