"""Stem summaries derived from a few inflected forms.

The heuristics are specific to Finnish: noun stems come from the allative
(``-lle``), verb stems from the first person (``-n``). Irregular verbs are
flagged by printing the forms the regular rule would get wrong.
"""

from dataclasses import astuple, dataclass
from typing import Optional

from bs4 import BeautifulSoup

from .selectors import DEFAULT_SELECTORS, Selectors, paradigm_items

STEM_HEADER = "_Vartalot_"

_NOUN_SUFFIX = "lle"
_VERB_SUFFIX = "n"


@dataclass(frozen=True)
class NounForms:
    partitive_singular: Optional[str] = None
    partitive_plural: Optional[str] = None
    allative_singular: Optional[str] = None
    allative_plural: Optional[str] = None

    @property
    def complete(self) -> bool:
        return all(v is not None for v in astuple(self))


@dataclass(frozen=True)
class VerbForms:
    present_first: Optional[str] = None
    present_third: Optional[str] = None
    past_first: Optional[str] = None
    past_third: Optional[str] = None

    @property
    def complete(self) -> bool:
        return all(v is not None for v in astuple(self))


def _first_text(document: BeautifulSoup, selector: str) -> Optional[str]:
    match = document.select_one(selector)
    if match is None:
        return None
    return match.get_text()


def extract_forms(
    document: BeautifulSoup, selectors: Selectors = DEFAULT_SELECTORS
) -> tuple[NounForms, VerbForms]:
    """Look up the noun and verb paradigms anywhere in the page."""
    nouns = NounForms(**{
        name: _first_text(document, sel) for name, sel in paradigm_items(selectors.nouns)
    })
    verbs = VerbForms(**{
        name: _first_text(document, sel) for name, sel in paradigm_items(selectors.verbs)
    })
    return nouns, verbs


def _strip_suffix(word: str, suffix: str) -> str:
    if word.endswith(suffix):
        return word[: -len(suffix)]
    return word


def format_noun_stem(forms: NounForms) -> Optional[str]:
    """``_Vartalot_`` block for a noun, or None unless all four forms are known.

    e.g. mainos → "mainokse - mainoksi p. mainosta m.p. mainoksia"
    """
    if not forms.complete:
        return None

    stem = _strip_suffix(forms.allative_singular, _NOUN_SUFFIX)
    plural_stem = _strip_suffix(forms.allative_plural, _NOUN_SUFFIX)
    return (
        f"{STEM_HEADER}\n"
        f"{stem} - {plural_stem} p. {forms.partitive_singular} m.p. {forms.partitive_plural}"
    )


def format_verb_stem(forms: VerbForms) -> Optional[str]:
    """``_Vartalot_`` block for a verb, or None unless all four forms are known.

    The present stem is expected to lengthen its last vowel in the 3rd person
    (puhu → puhuu) and the past 3rd person to equal the past stem
    (puhui → puhui). Forms breaking either rule are appended as ``p3.`` and
    ``past3.``.
    """
    if not forms.complete:
        return None

    stem = _strip_suffix(forms.present_first, _VERB_SUFFIX)
    past_stem = _strip_suffix(forms.past_first, _VERB_SUFFIX)
    line = f"{stem} - {past_stem}"

    if stem and forms.present_third != stem + stem[-1]:
        line += f" p3. {forms.present_third}"
    if forms.past_third != past_stem:
        line += f" past3. {forms.past_third}"

    return f"{STEM_HEADER}\n{line}"
