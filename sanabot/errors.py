"""Error classification for user-facing messages."""

import asyncio

import httpx


def classify_error(e: Exception) -> str:
    """Classify a lookup failure into a short message for the chat.

    Only the fetch side can fail; extraction degrades instead of raising.
    """
    # HTTP status errors from the wiki
    if isinstance(e, httpx.HTTPStatusError):
        code = e.response.status_code
        if code == 429:
            return "Wiktionary is rate limiting us. Please wait a moment and try again."
        if code in (401, 403):
            return "Wiktionary refused the request."
        if 500 <= code < 600:
            return "Wiktionary is having server issues. Please try again later."
        return f"Wiktionary returned HTTP {code}."

    # Timeouts before plain connect errors: ConnectTimeout is both
    if isinstance(e, (httpx.TimeoutException, asyncio.TimeoutError)):
        return "Request timed out. Please try again."
    if isinstance(e, httpx.ConnectError):
        return "Cannot reach Wiktionary. Please try again later."
    if isinstance(e, httpx.HTTPError):
        return "Network error while talking to Wiktionary."

    type_name = type(e).__name__
    return f"Something went wrong ({type_name}). Check logs for details."
