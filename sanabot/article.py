"""Assemble the chat message for one Wiktionary page."""

import logging
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup, Tag

from .content import extract_content
from .inflection import extract_forms, format_noun_stem, format_verb_stem
from .selectors import DEFAULT_SELECTORS, SKIP_SECTIONS, Selectors

logger = logging.getLogger("sanabot.article")


@dataclass(frozen=True)
class Article:
    """A rendered entry ready for delivery."""

    query: str
    link: str
    text: str
    refs: tuple[str, ...]

    @property
    def message(self) -> str:
        """Full message: bold query title followed by the body."""
        return f"*{self.query}*\n{self.text}"


def not_found_message(query: str) -> str:
    return f"*{query}*\nNo article found"


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def find_anchor(document: BeautifulSoup, selectors: Selectors = DEFAULT_SELECTORS) -> Optional[Tag]:
    """Element whose following siblings hold the language section.

    The anchor selector matches the id-carrying node inside the language
    heading, so the walk starts from its parent.
    """
    marker = document.select_one(selectors.anchor)
    if marker is None:
        return None
    return marker.parent


def build_article(
    document: BeautifulSoup,
    query: str,
    link: str,
    selectors: Selectors = DEFAULT_SELECTORS,
    skip_sections: frozenset[str] = SKIP_SECTIONS,
) -> Optional[Article]:
    """Render the language section of ``document``.

    Returns:
        The Article, or None when the page has no section for the language
        (the caller may then try a search hit instead).
    """
    anchor = find_anchor(document, selectors)
    if anchor is None:
        logger.debug(f"No {selectors.anchor} section in {link}")
        return None

    extraction = extract_content(anchor, skip_sections)
    parts = [extraction.text]

    nouns, verbs = extract_forms(document, selectors)
    for block in (format_noun_stem(nouns), format_verb_stem(verbs)):
        if block is not None:
            parts.append(block + "\n")

    parts.append(link + "\n")
    return Article(query=query, link=link, text="".join(parts), refs=extraction.refs)
