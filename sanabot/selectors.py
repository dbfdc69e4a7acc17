"""Fixed lookup tables: which sections to drop and where the forms live.

Everything here is data. The order of fields in the paradigm dataclasses is
the paradigm order the stem heuristics rely on.
"""

from dataclasses import dataclass, fields


# Section headings (after "edit" stripping) that never make it into a message.
# "" also catches headings whose label could not be read.
SKIP_SECTIONS: frozenset[str] = frozenset({
    "Pronunciation",
    "",
    "Anagrams",
    "Conjugation",
    "Declension",
    "References",
    "Derived terms",
    "Related terms",
})

LANGUAGE_ANCHOR = "#Finnish"
LANGUAGE_CLASS = "lang-fi"
SEARCH_RESULT = ".mw-search-result-heading a"


def form_selector(form_class: str) -> str:
    """CSS selector for a Finnish form-of span.

    Wiktionary classes contain ``|`` (e.g. ``par|s-form-of``), so they are
    matched as whitespace-separated attribute tokens rather than escaped
    class selectors.
    """
    return f'.{LANGUAGE_CLASS}[class~="{form_class}"]'


@dataclass(frozen=True)
class NounSelectors:
    partitive_singular: str
    partitive_plural: str
    allative_singular: str
    allative_plural: str


@dataclass(frozen=True)
class VerbSelectors:
    present_first: str
    present_third: str
    past_first: str
    past_third: str


@dataclass(frozen=True)
class Selectors:
    anchor: str
    nouns: NounSelectors
    verbs: VerbSelectors
    search_result: str


def paradigm_items(paradigm) -> list[tuple[str, str]]:
    """(field name, value) pairs of a paradigm dataclass, in paradigm order."""
    return [(f.name, getattr(paradigm, f.name)) for f in fields(paradigm)]


def build_selectors() -> Selectors:
    """Build the selector set used for every lookup."""
    nouns = NounSelectors(*(
        form_selector(f"{case}|{number}-form-of")
        for case in ("par", "all")
        for number in ("s", "p")
    ))
    verbs = VerbSelectors(*(
        form_selector(f"{person}|s|{tense}|indc-form-of")
        for tense in ("pres", "past")
        for person in ("1", "3")
    ))
    return Selectors(
        anchor=LANGUAGE_ANCHOR,
        nouns=nouns,
        verbs=verbs,
        search_result=SEARCH_RESULT,
    )


DEFAULT_SELECTORS = build_selectors()
