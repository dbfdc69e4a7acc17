"""Article text to Telegram HTML, message splitting and reference buttons.

Articles use a tiny markdown subset:
  *query*   → <b>query</b>   (title line)
  _text_    → <i>text</i>    (emphasis and section headings)

Telegram's HTML mode is used instead of legacy Markdown so that stray
underscores or brackets in dictionary text cannot break the whole message.
"""

import html as _html
import re
from typing import Iterable, Optional

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

MAX_MESSAGE_LENGTH = 4096
MAX_CALLBACK_DATA_BYTES = 64

_BOLD_RE = re.compile(r'\*([^*\n]+?)\*')


def _escape(text: str) -> str:
    """Escape HTML special characters in plain text segments."""
    return _html.escape(text, quote=False)


def _italicize(line: str) -> str:
    """Turn paired ``_`` markers on one line into <i> tags.

    Markers are paired left to right, so ``_a_-stem`` and ``_foo_s`` both
    convert. An odd marker at the end stays a literal underscore, and the
    empty pair left by nested emphasis (``_a _b__``) is dropped.
    """
    parts = line.split("_")
    markers = len(parts) - 1
    if markers < 2:
        return line

    paired = markers - markers % 2
    out = [parts[0]]
    for i, part in enumerate(parts[1:]):
        if i < paired:
            out.append("<i>" if i % 2 == 0 else "</i>")
        else:
            out.append("_")
        out.append(part)
    return "".join(out).replace("<i></i>", "")


def to_telegram_html(text: str) -> str:
    """Convert article markup to Telegram-safe HTML."""
    if not text:
        return text
    text = _escape(text)
    text = _BOLD_RE.sub(r'<b>\1</b>', text)
    return "\n".join(_italicize(line) for line in text.split("\n"))


def split_message(text: str, max_length: int = MAX_MESSAGE_LENGTH) -> list[str]:
    """Split a long message into chunks respecting platform length limits.

    Tries to split at newlines first, then spaces, then hard-cuts.

    Args:
        text: Message text to split
        max_length: Maximum length per chunk (default: 4096 for Telegram)

    Returns:
        List of message chunks
    """
    if len(text) <= max_length:
        return [text]

    chunks = []
    remaining = text

    while remaining:
        if len(remaining) <= max_length:
            chunks.append(remaining)
            break

        split_at = remaining.rfind("\n", 0, max_length)
        if split_at <= 0:
            split_at = remaining.rfind(" ", 0, max_length)
        if split_at <= 0:
            split_at = max_length

        chunks.append(remaining[:split_at])
        remaining = remaining[split_at:].lstrip()

    return chunks


def reference_keyboard(
    refs: Iterable[str],
    row_size: int = 4,
    max_buttons: int = 48,
) -> Optional[InlineKeyboardMarkup]:
    """One button per reference title; pressing it looks the title up.

    Titles too long for Telegram's callback data are left out.

    Returns:
        The keyboard, or None when there is nothing to show.
    """
    buttons = [
        InlineKeyboardButton(title, callback_data=title)
        for title in refs
        if len(title.encode("utf-8")) <= MAX_CALLBACK_DATA_BYTES
    ][:max_buttons]
    if not buttons:
        return None

    rows = [buttons[i:i + row_size] for i in range(0, len(buttons), row_size)]
    return InlineKeyboardMarkup(rows)
