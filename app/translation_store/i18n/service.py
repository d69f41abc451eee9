"""Translation service for hosts and dependency injection.

Provides the full host-facing surface of the translation store as one class.
All work is delegated to a LocaleStore and a TranslationLoader.
"""

from typing import Any, Dict, List, Mapping, Optional

from translation_store.i18n.exceptions import ParseError
from translation_store.i18n.loader import TranslationLoader
from translation_store.i18n.store import LocaleStore


class TranslationService:
    """Class-based facade over a LocaleStore.

    Usage:
        service = TranslationService()
        service.set_translations("en", '{"welcome": "Hello {username}"}')
        service.format_translation("en", "welcome", {"username": "Alice"})
        # -> "Hello Alice"

        await service.load_translations("https://cdn.example.com/i18n.json")
    """

    def __init__(
        self,
        store: Optional[LocaleStore] = None,
        loader: Optional[TranslationLoader] = None,
    ):
        """Initialize translation service.

        Args:
            store: Optional LocaleStore. A new empty store when omitted.
            loader: Optional TranslationLoader; must target the same store.
                Defaults to a loader with default fetchers.
        """
        self._store = store if store is not None else LocaleStore()
        self._loader = loader or TranslationLoader(self._store)
        if self._loader.store is not self._store:
            raise ValueError("TranslationLoader must write to the service's store")

    @property
    def store(self) -> LocaleStore:
        return self._store

    @property
    def loader(self) -> TranslationLoader:
        return self._loader

    def set_translations(self, locale: str, payload: Any) -> None:
        """Bulk merge JSON text or a structured object into a locale."""
        self._store.set_translations(locale, payload)

    def set_translations_from_object(
        self, locale: str, translations: Mapping[str, Any]
    ) -> None:
        """Bulk merge an already-structured object into a locale.

        Raises:
            ParseError: If translations is text rather than structured data.
        """
        if isinstance(translations, (str, bytes, bytearray)):
            raise ParseError(
                "set_translations_from_object expects structured data, got text",
                locale=locale,
            )
        self._store.set_translations(locale, translations)

    def get_translations(self, locale: str) -> Dict[str, Any]:
        return self._store.get_translations(locale)

    def get_all_translations_for_locale(self, locale: str) -> Dict[str, Any]:
        return self._store.get_translations(locale)

    def del_translations(self, locale: str) -> bool:
        return self._store.del_translations(locale)

    def has_locale(self, locale: str) -> bool:
        return self._store.has_locale(locale)

    def get_all_locales(self) -> List[str]:
        return self._store.get_all_locales()

    def clear_all_translations(self) -> None:
        self._store.clear_all_translations()

    def get_translation(self, locale: str, key: str) -> Any:
        return self._store.get_translation(locale, key)

    def has_translation(self, locale: str, key: str) -> bool:
        return self._store.has_translation(locale, key)

    def has_key_in_translations(self, locale: str, key: str) -> bool:
        return self._store.has_translation(locale, key)

    def del_translation(self, locale: str, key: str) -> bool:
        return self._store.del_translation(locale, key)

    def update_translation(self, locale: str, key: str, value: Any) -> None:
        self._store.update_translation(locale, key, value)

    def format_translation(
        self,
        locale: str,
        key: str,
        args: Optional[Mapping[str, Any]] = None,
    ) -> str:
        return self._store.format_translation(locale, key, args)

    def get_all_translations(self) -> Dict[str, Dict[str, Any]]:
        return self._store.get_all_translations()

    async def load_translations(self, url: str) -> List[str]:
        """Fetch a multi-locale document and merge it into the store.

        Returns:
            Locales merged from the document.

        Raises:
            NetworkError: If the fetch failed.
            ParseError: If the body could not be parsed.
            TranslationTypeError: If the document is not a locale map.
        """
        return await self._loader.load_translations(url)
