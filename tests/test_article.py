"""Tests for article assembly."""

from conftest import MAINOS_PAGE, PUHUA_FORMS, page, soup
from sanabot.article import Article, build_article, find_anchor, not_found_message

LINK = "https://en.wiktionary.org/wiki/mainos"


class TestFindAnchor:
    def test_anchor_is_heading_around_language_id(self):
        """Test that the anchor is the heading wrapping the language id."""
        anchor = find_anchor(soup(MAINOS_PAGE))
        assert anchor.name == "h2"
        assert anchor.find(id="Finnish") is not None

    def test_missing_language(self):
        """Test that a page without a Finnish heading has no anchor."""
        assert find_anchor(soup("<h2><span id='Swedish'>Swedish</span></h2>")) is None


class TestBuildArticle:
    def test_full_article(self):
        """Test content, stem block and link line of a full entry."""
        article = build_article(soup(MAINOS_PAGE), "mainos", LINK)
        assert article.text == (
            "\n_Etymology_\n"
            "From mainostaa + _-os_.\n"
            "\n_Noun_\n"
            "mainos\n"
            "advertisement, commercial\n"
            "_Vartalot_\nmainokse - mainoksi p. mainosta m.p. mainoksia\n"
            f"{LINK}\n"
        )
        assert article.refs == ("-os", "advertisement", "mainostaa")
        assert article.link == LINK

    def test_message_has_bold_title(self):
        """Test that the message starts with the bold query."""
        article = build_article(soup(MAINOS_PAGE), "mainos", LINK)
        assert article.message.startswith("*mainos*\n\n_Etymology_\n")
        assert article.message.endswith(f"{LINK}\n")

    def test_noun_and_verb_blocks_in_order(self):
        """Test that the noun block comes before the verb block."""
        document = page(
            "<h3><span>Verb</span></h3><p>puhua</p>" + PUHUA_FORMS
            + "<table><tr><td>"
            "<span class='lang-fi par|s-form-of'>a</span>"
            "<span class='lang-fi par|p-form-of'>b</span>"
            "<span class='lang-fi all|s-form-of'>clle</span>"
            "<span class='lang-fi all|p-form-of'>dlle</span>"
            "</td></tr></table>"
        )
        article = build_article(document, "puhua", "L")
        assert article.text == (
            "\n_Verb_\npuhua\n"
            "_Vartalot_\nc - d p. a m.p. b\n"
            "_Vartalot_\npuhu - puhui\n"
            "L\n"
        )

    def test_missing_section_returns_none(self):
        """Test that no article is built without a Finnish section."""
        assert build_article(soup("<p>nothing</p>"), "x", "L") is None

    def test_empty_section_still_has_link(self):
        """Test that an empty section still yields the link line."""
        article = build_article(page(""), "x", "L")
        assert article == Article(query="x", link="L", text="L\n", refs=())


def test_not_found_message():
    """Test the reply for a word with no entry."""
    assert not_found_message("qwerty") == "*qwerty*\nNo article found"
