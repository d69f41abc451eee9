"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for hosts that want one
process-wide translation store. Tests and embedders that need isolation
construct LocaleStore / TranslationService directly instead.
"""

from functools import lru_cache

from translation_store.configuration import Settings
from translation_store.i18n.factory import create_translation_service
from translation_store.i18n.service import TranslationService
from translation_store.logging import configure_logging


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_service() -> TranslationService:
    """
    Get the process-wide translation service.

    The store starts empty at first call and lives until the process exits;
    reset it with clear_all_translations(). The first call also configures
    logging from the cached settings.

    Returns:
        TranslationService: Cached service over the process-wide store.
    """
    settings = get_settings()
    configure_logging(settings=settings)
    return create_translation_service(settings=settings)
