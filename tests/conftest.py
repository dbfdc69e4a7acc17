"""Pytest configuration and shared fixtures."""

import pytest
from bs4 import BeautifulSoup

from sanabot.config import SanabotSettings


def soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def page(body: str) -> BeautifulSoup:
    """Wrap a Finnish section body in a minimal entry page."""
    return soup(
        "<html><body><div class='mw-parser-output'>"
        "<h2><span class='mw-headline' id='Finnish'>Finnish</span>"
        "<span class='mw-editsection'>[edit]</span></h2>"
        f"{body}"
        "<h2><span class='mw-headline' id='Swedish'>Swedish</span></h2>"
        "<p>swedish text</p>"
        "</div></body></html>"
    )


MAINOS_PAGE = """<html><body><div class="mw-parser-output">
<h2><span class="mw-headline" id="English">English</span></h2>
<p>english text</p>
<h2><span class="mw-headline" id="Finnish">Finnish</span><span class="mw-editsection">[edit]</span></h2>
<div class="wikipedia-box">Wikipedia</div>
<h3><span class="mw-headline" id="Etymology">Etymology</span></h3>
<p>From <a href="/wiki/mainostaa" title="mainostaa">mainostaa</a> +
   <i class="Latn mention"><a href="/wiki/-os" title="-os">-os</a></i>.<sup>[1]</sup></p>
<h3><span class="mw-headline" id="Pronunciation">Pronunciation</span></h3>
<ul><li>IPA: /ˈmɑi̯nos/</li></ul>
<h3><span class="mw-headline" id="Noun">Noun</span></h3>
<p><strong class="Latn headword">mainos</strong></p>
<ol><li><a href="/wiki/advertisement" title="advertisement">advertisement</a>, <a href="/wiki/w:Commercial" title="w:Commercial">commercial</a></li></ol>
<h4><span class="mw-headline" id="Declension">Declension</span></h4>
<table class="inflection-table"><tr><td>
<span class="Latn form-of lang-fi par|s-form-of">mainosta</span>
<span class="Latn form-of lang-fi par|p-form-of">mainoksia</span>
<span class="Latn form-of lang-fi all|s-form-of">mainokselle</span>
<span class="Latn form-of lang-fi all|p-form-of">mainoksille</span>
</td></tr></table>
<h4><span class="mw-headline" id="Derived_terms">Derived terms</span></h4>
<ul><li><a href="/wiki/mainoskatko" title="mainoskatko">mainoskatko</a></li></ul>
<h2><span class="mw-headline" id="Swedish">Swedish</span></h2>
<p>swedish text</p>
</div></body></html>"""


PUHUA_FORMS = """
<table class="inflection-table"><tr><td>
<span class="form-of lang-fi 1|s|pres|indc-form-of">puhun</span>
<span class="form-of lang-fi 3|s|pres|indc-form-of">puhuu</span>
<span class="form-of lang-fi 1|s|past|indc-form-of">puhuin</span>
<span class="form-of lang-fi 3|s|past|indc-form-of">puhui</span>
</td></tr></table>
"""


@pytest.fixture
def settings():
    return SanabotSettings(
        telegram_bot_token="test-token",
        wiki_origin="https://wiki.test",
        _env_file=None,
    )
