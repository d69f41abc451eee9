"""Translation loader infrastructure settings."""

from pydantic import Field

from translation_store.configuration.base import InfrastructureSettings


class LoaderSettings(InfrastructureSettings):
    """Configuration for fetching remote translation payloads.

    Environment Variables:
        TRANSLATIONS_HTTP_TIMEOUT_SECONDS: Timeout applied to each fetch (default: 10s)
        TRANSLATIONS_HTTP_USER_AGENT: User-Agent header sent with each fetch
        TRANSLATIONS_FOLLOW_REDIRECTS: Follow HTTP redirects (default: True)

    The store itself imposes no timeout; the HTTP fetcher is the only place
    where one applies.

    Example:
        ```python
        from translation_store.providers import get_settings

        settings = get_settings()
        timeout = settings.loader.http_timeout_seconds
        ```
    """

    http_timeout_seconds: float = Field(
        default=10.0,
        alias="TRANSLATIONS_HTTP_TIMEOUT_SECONDS",
        description="Timeout for a single translation payload fetch (seconds)",
    )
    http_user_agent: str = Field(
        default="translation-store/1.0",
        alias="TRANSLATIONS_HTTP_USER_AGENT",
        description="User-Agent header sent when fetching payloads",
    )
    follow_redirects: bool = Field(
        default=True,
        alias="TRANSLATIONS_FOLLOW_REDIRECTS",
        description="Follow HTTP redirects when fetching payloads",
    )
