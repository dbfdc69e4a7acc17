"""Wiktionary client — page fetch and full-text search fallback."""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from .article import Article, build_article, parse_document
from .config import SanabotSettings
from .selectors import DEFAULT_SELECTORS, SKIP_SECTIONS, Selectors

logger = logging.getLogger("sanabot.wiktionary")


class LookupState(enum.Enum):
    FOUND = "found"
    MISSING = "missing"


@dataclass(frozen=True)
class LookupResult:
    state: LookupState
    article: Optional[Article] = None


class WiktionaryClient:
    """Fetches entry pages and turns them into Articles.

    Usage:
        async with WiktionaryClient(settings) as wiki:
            result = await wiki.lookup("mainos")

    Network errors (httpx.HTTPError) propagate; a page without the language
    section is not an error but a MISSING result.
    """

    def __init__(
        self,
        settings: SanabotSettings,
        selectors: Selectors = DEFAULT_SELECTORS,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.origin = settings.wiki_origin.rstrip("/")
        self.selectors = selectors
        self.skip_sections = SKIP_SECTIONS
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=settings.request_timeout,
            headers={"User-Agent": settings.user_agent},
            follow_redirects=True,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()

    def page_url(self, query: str) -> str:
        return f"{self.origin}/wiki/{query}"

    def search_url(self, query: str) -> str:
        return (
            f"{self.origin}/wiki/Special:Search"
            f"?search={query}&fulltext=Full+text+search&ns0=1"
        )

    async def fetch_document(self, url: str) -> Optional[BeautifulSoup]:
        """GET and parse a page. A 404 yields None; other failures raise."""
        response = await self._client.get(url)
        if response.status_code == 404:
            logger.debug(f"404 for {url}")
            return None
        response.raise_for_status()
        return parse_document(response.text)

    async def search(self, query: str) -> Optional[str]:
        """Absolute URL of the first full-text search hit, if any."""
        document = await self.fetch_document(self.search_url(query))
        if document is None:
            return None
        hit = document.select_one(self.selectors.search_result)
        if hit is None or not hit.get("href"):
            logger.info(f"Full-text search found nothing for {query!r}")
            return None
        return f"{self.origin}{hit['href']}"

    async def load_article(self, query: str, link: str) -> Optional[Article]:
        document = await self.fetch_document(link)
        if document is None:
            return None
        return build_article(document, query, link, self.selectors, self.skip_sections)

    async def lookup(self, query: str) -> LookupResult:
        """Direct page first, then the first full-text search hit."""
        article = await self.load_article(query, self.page_url(query))
        if article is not None:
            return LookupResult(LookupState.FOUND, article)

        logger.info(f"No direct entry for {query!r}, trying full-text search")
        link = await self.search(query)
        if link is None:
            return LookupResult(LookupState.MISSING)

        article = await self.load_article(query, link)
        if article is None:
            logger.info(f"Search hit {link} has no language section either")
            return LookupResult(LookupState.MISSING)
        return LookupResult(LookupState.FOUND, article)
