"""Factory functions for creating i18n components.

Wires a TranslationService from application settings.
"""

from typing import Optional

import httpx
import structlog

from translation_store.configuration import Settings
from translation_store.configuration import settings as default_settings
from translation_store.i18n.loader import HttpPayloadFetcher, TranslationLoader
from translation_store.i18n.service import TranslationService
from translation_store.i18n.store import LocaleStore

logger = structlog.get_logger()


def create_translation_service(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> TranslationService:
    """Create a TranslationService with an empty store.

    Args:
        settings: Settings providing loader configuration (default: the
            module-level settings singleton).
        http_client: Optional shared httpx.AsyncClient for remote loads.

    Returns:
        TranslationService: Service over a new, empty LocaleStore.

    Usage:
        service = create_translation_service()
        await service.load_translations("https://cdn.example.com/i18n.json")
    """
    settings = settings or default_settings
    store = LocaleStore()
    http_fetcher = HttpPayloadFetcher(
        timeout=settings.loader.http_timeout_seconds,
        user_agent=settings.loader.http_user_agent,
        follow_redirects=settings.loader.follow_redirects,
        client=http_client,
    )
    loader = TranslationLoader(store, http_fetcher=http_fetcher)

    logger.info(
        "translation_service_created",
        http_timeout_seconds=settings.loader.http_timeout_seconds,
        shared_http_client=http_client is not None,
    )
    return TranslationService(store=store, loader=loader)
