"""Section walk and inline rendering of a Wiktionary language section.

Turns the siblings that follow a language heading into chat-ready text:

  - headings become ``_Label_`` lines, unwanted sections are dropped
  - ``<i>`` becomes ``_..._``, tables/footnotes/styles vanish
  - every run of whitespace collapses to a single space
  - link titles are collected as cross-references

The renderer never raises on odd markup; pieces it cannot read are omitted.
"""

import enum
from dataclasses import dataclass
from typing import Iterable, Optional

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

from .selectors import SKIP_SECTIONS


class TagCategory(enum.Enum):
    SKIP = "skip"
    LINK = "link"
    EMPHASIS = "emphasis"
    TRANSPARENT = "transparent"


_TAG_CATEGORIES = {
    "table": TagCategory.SKIP,
    "sup": TagCategory.SKIP,
    "style": TagCategory.SKIP,
    "a": TagCategory.LINK,
    "i": TagCategory.EMPHASIS,
}

_HEADING_LEVELS = {"h2": 2, "h3": 3, "h4": 4, "h5": 5}

# Blocks the walk never descends into, even inside a kept section
_SKIPPED_BLOCKS = frozenset({"div", "table", "style"})

# Interwiki (Wikipedia) and reconstructed-form links are not lookup targets
_IGNORED_TITLE_PREFIXES = ("w:", "Reconstruction:")

_EDIT_SUFFIX = "edit"
_EMPHASIS_MARK = "_"


def tag_category(tag_name: str) -> TagCategory:
    return _TAG_CATEGORIES.get(tag_name, TagCategory.TRANSPARENT)


@dataclass(frozen=True)
class Extraction:
    """Rendered section text plus the sorted cross-reference titles."""

    text: str
    refs: tuple[str, ...]


@dataclass(frozen=True)
class SectionState:
    """Walk state: ``label`` is None while skipping, else the kept heading."""

    label: Optional[str] = None

    @property
    def emitting(self) -> bool:
        return self.label is not None


SKIPPING = SectionState()


def next_section_state(label: str, skip_sections: frozenset[str] = SKIP_SECTIONS) -> SectionState:
    """Transition taken on every level 3-5 heading."""
    if label in skip_sections:
        return SKIPPING
    return SectionState(label)


class _TextBuffer:
    """Append-only text sink that remembers its last character."""

    def __init__(self):
        self._parts: list[str] = []
        self._last = ""

    def write(self, text: str):
        if text:
            self._parts.append(text)
            self._last = text[-1]

    def write_text_node(self, text: str):
        """Append source text: drop '*', fold whitespace, never double a space."""
        out = []
        last = self._last
        for ch in text:
            if ch == "*":
                continue
            if ch.isspace():
                ch = " "
                if last.isspace():
                    continue
            out.append(ch)
            last = ch
        self.write("".join(out))

    def getvalue(self) -> str:
        return "".join(self._parts)


def _is_text(node) -> bool:
    # Comments, CDATA, doctypes etc. subclass NavigableString too
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def _strip_edit(label: str) -> str:
    if label.endswith(_EDIT_SUFFIX):
        return label[: -len(_EDIT_SUFFIX)]
    return label


def _first_element_child(tag: Tag) -> Optional[Tag]:
    for child in tag.children:
        if isinstance(child, Tag):
            return child
    return None


def heading_of(node: Tag) -> Optional[tuple[int, str]]:
    """Return (level, label) when ``node`` is a level 2-5 heading.

    Recognises both the bare ``<hN><span>Label</span>…</hN>`` form, whose
    label is the text of the first element child, and the
    ``<div class="mw-heading mw-headingN"><hN>Label</hN>…</div>`` wrapper,
    whose label is the text of the inner ``hN``.
    """
    level = _HEADING_LEVELS.get(node.name)
    if level is not None:
        first = _first_element_child(node)
        label = first.get_text() if first is not None else ""
        return level, _strip_edit(label)

    if node.name == "div" and "mw-heading" in (node.get("class") or []):
        for child in node.children:
            if isinstance(child, Tag) and child.name in _HEADING_LEVELS:
                return _HEADING_LEVELS[child.name], _strip_edit(child.get_text())

    return None


def render_inline(element: Tag, buf: _TextBuffer, refs: set[str]):
    """Render the children of ``element`` into ``buf``, harvesting link titles."""
    for child in element.children:
        if _is_text(child):
            buf.write_text_node(str(child))
            continue
        if not isinstance(child, Tag):
            continue

        category = tag_category(child.name)
        if category is TagCategory.SKIP:
            continue
        if category is TagCategory.LINK:
            title = child.get("title")
            if title and not title.startswith(_IGNORED_TITLE_PREFIXES):
                refs.add(title)
            render_inline(child, buf, refs)
        elif category is TagCategory.EMPHASIS:
            buf.write(_EMPHASIS_MARK)
            render_inline(child, buf, refs)
            buf.write(_EMPHASIS_MARK)
        else:
            render_inline(child, buf, refs)


def walk_section(
    siblings: Iterable,
    buf: _TextBuffer,
    refs: set[str],
    skip_sections: frozenset[str] = SKIP_SECTIONS,
):
    """Render a sequence of sibling blocks until the next level-2 heading."""
    state = SKIPPING
    for node in siblings:
        if not isinstance(node, Tag):
            continue

        heading = heading_of(node)
        if heading is not None:
            level, label = heading
            if level == 2:
                break
            state = next_section_state(label, skip_sections)
            if state.emitting:
                buf.write(f"\n{_EMPHASIS_MARK}{label}{_EMPHASIS_MARK}\n")
            continue

        if not state.emitting or node.name in _SKIPPED_BLOCKS:
            continue
        render_inline(node, buf, refs)
        buf.write("\n")


def extract_content(anchor: Tag, skip_sections: frozenset[str] = SKIP_SECTIONS) -> Extraction:
    """Render everything after ``anchor`` up to the next language heading.

    Args:
        anchor: The language heading element (e.g. the ``h2`` holding
            ``#Finnish``); its following siblings are walked.
        skip_sections: Heading labels whose sections are dropped.

    Returns:
        Extraction with the rendered text and sorted reference titles.
    """
    buf = _TextBuffer()
    refs: set[str] = set()
    walk_section(anchor.next_siblings, buf, refs, skip_sections)
    return Extraction(text=buf.getvalue(), refs=tuple(sorted(refs)))
