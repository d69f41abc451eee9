"""Asynchronous loading of translation payloads into a LocaleStore.

A loaded document is a multi-locale map: each top-level key is a locale
identifier and each value is that locale's translation object, bulk merged
into the store:

    {
        "en": {"welcome": "Hello {username}"},
        "fr": {"welcome": "Bonjour {username}"}
    }

Fetching is delegated to a PayloadFetcher. Nothing touches the store until
the fetch and parse have both succeeded; the merge itself is one synchronous
LocaleStore.apply() call, so readers never see a half-merged document.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

import httpx

from translation_store.i18n.exceptions import NetworkError, TranslationTypeError
from translation_store.i18n.payloads import PayloadFormat, decode_payload
from translation_store.i18n.store import LocaleStore
from translation_store.logging import get_module_logger

logger = get_module_logger()

HTTP_SCHEMES = frozenset({"http", "https"})


@dataclass(frozen=True)
class FetchedPayload:
    """Raw result of a fetch.

    Attributes:
        source: URL or path the payload came from.
        content: Undecoded body.
        content_type: Content-Type reported by the source, if any.
    """

    source: str
    content: bytes
    content_type: str = ""


class PayloadFetcher(ABC):
    """Abstract base for payload fetchers.

    Implementations retrieve raw bytes and report failures as NetworkError.
    Timeouts, if any, are the fetcher's responsibility.
    """

    @abstractmethod
    async def fetch(self, url: str) -> FetchedPayload:
        """Fetch a payload.

        Args:
            url: Location of the payload.

        Returns:
            FetchedPayload with the raw body.

        Raises:
            NetworkError: If the payload could not be retrieved.
        """
        pass


class HttpPayloadFetcher(PayloadFetcher):
    """Fetches payloads over HTTP(S) with httpx.

    Attributes:
        timeout: Timeout for each request in seconds.
        user_agent: User-Agent header value.
        follow_redirects: Whether redirects are followed.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = "translation-store/1.0",
        follow_redirects: bool = True,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the HTTP fetcher.

        Args:
            timeout: Timeout for each request in seconds.
            user_agent: User-Agent header value.
            follow_redirects: Whether redirects are followed.
            client: Optional shared AsyncClient. When omitted a client is
                opened per fetch.
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.follow_redirects = follow_redirects
        self._client = client

    async def fetch(self, url: str) -> FetchedPayload:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/json, application/yaml;q=0.9, */*;q=0.1",
        }
        try:
            if self._client is not None:
                response = await self._client.get(
                    url,
                    headers=headers,
                    timeout=self.timeout,
                    follow_redirects=self.follow_redirects,
                )
            else:
                async with httpx.AsyncClient(
                    timeout=self.timeout, follow_redirects=self.follow_redirects
                ) as client:
                    response = await client.get(url, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"Fetching {url} failed with HTTP {e.response.status_code}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"Fetching {url} failed: {e}", url=url) from e

        return FetchedPayload(
            source=url,
            content=response.content,
            content_type=response.headers.get("content-type", ""),
        )


class FilePayloadFetcher(PayloadFetcher):
    """Reads payloads from local files (plain paths or file:// URLs)."""

    @staticmethod
    def to_path(url: str) -> Path:
        parsed = urlparse(url)
        if parsed.scheme == "file":
            return Path(url2pathname(parsed.path))
        return Path(url)

    async def fetch(self, url: str) -> FetchedPayload:
        path = self.to_path(url)
        try:
            content = await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise NetworkError(f"Reading {path} failed: {e}", url=url) from e
        return FetchedPayload(source=str(path), content=content)


class TranslationLoader:
    """Fetches multi-locale documents and merges them into a store.

    Concurrent loads are not ordered relative to each other; callers that
    care about ordering await them one at a time.

    Attributes:
        store: LocaleStore receiving the translations.
        http_fetcher: Fetcher for http(s) URLs.
        file_fetcher: Fetcher for file:// URLs and plain paths.
    """

    def __init__(
        self,
        store: LocaleStore,
        http_fetcher: Optional[PayloadFetcher] = None,
        file_fetcher: Optional[PayloadFetcher] = None,
    ):
        self.store = store
        self.http_fetcher = http_fetcher or HttpPayloadFetcher()
        self.file_fetcher = file_fetcher or FilePayloadFetcher()

    def _fetcher_for(self, url: str) -> PayloadFetcher:
        scheme = urlparse(url).scheme.lower()
        if scheme in HTTP_SCHEMES:
            return self.http_fetcher
        # One-letter schemes are Windows drive letters
        if scheme in ("", "file") or len(scheme) == 1:
            return self.file_fetcher
        raise NetworkError(f"Unsupported URL scheme '{scheme}': {url}", url=url)

    async def load_translations(self, url: str) -> List[str]:
        """Fetch a multi-locale document and bulk merge every locale in it.

        Args:
            url: http(s) URL, file:// URL or local path.

        Returns:
            Locales merged from the document, in document order.

        Raises:
            NetworkError: If the fetch failed.
            ParseError: If the body is not valid JSON/YAML.
            TranslationTypeError: If the document, or any locale in it, is
                not an object.
        """
        log = logger.bind(url=url)
        try:
            fetched = await self._fetcher_for(url).fetch(url)
        except NetworkError as e:
            log.error("translation_load_failed", error=str(e))
            raise

        fmt = PayloadFormat.from_source(fetched.source, fetched.content_type)
        document = decode_payload(fetched.content, fmt)
        if not document.is_object:
            log.error("translation_document_invalid", kind=document.kind.value)
            raise TranslationTypeError(
                "Translation document must map locale ids to objects, "
                f"got {document.kind.value}",
                url=url,
                kind=document.kind.value,
            )

        # No await past this point: the merge is applied in one step
        self.store.apply(document.payload)
        locales = list(document.payload)
        log.info("translations_loaded", locales=locales, format=fmt.value)
        return locales
