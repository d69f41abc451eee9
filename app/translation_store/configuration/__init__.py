"""Translation store configuration module - public API.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    LoaderSettings: Payload fetching settings class (for testing)

Example:
    ```python
    from translation_store.providers import get_settings

    settings = get_settings()
    user_agent = settings.loader.http_user_agent
    ```
"""

from translation_store.configuration.loader import LoaderSettings
from translation_store.configuration.settings import Settings, settings

__all__ = ["Settings", "LoaderSettings", "settings"]
