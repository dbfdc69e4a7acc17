"""sanabot configuration management."""

import logging

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional

logger = logging.getLogger("sanabot.config")


class SanabotSettings(BaseSettings):
    """Settings loaded from environment variables or .env file."""

    # Telegram
    telegram_bot_token: Optional[str] = Field(default=None, description="Telegram bot token")
    group_command: str = Field(default="/w", description="Lookup command prefix in group chats")

    # Wiktionary
    wiki_origin: str = Field(
        default="https://en.wiktionary.org",
        description="Scheme and host of the wiki, without trailing slash",
    )
    user_agent: str = Field(
        default="sanabot/0.3 (Telegram dictionary bot)",
        description="User-Agent sent to the wiki (Wikimedia rejects anonymous clients)",
    )
    request_timeout: float = Field(default=30.0, description="HTTP timeout in seconds")

    # Rate limiting
    ratelimit_max_requests: int = Field(default=4, description="Lookups allowed per window")
    ratelimit_window_seconds: int = Field(default=60, description="Sliding window length")

    # Reference buttons
    reference_row_size: int = Field(default=4, description="Buttons per keyboard row")
    max_reference_buttons: int = Field(default=48, description="Cap on reference buttons per message")

    # Logging
    log_file: str = Field(default="~/sanabot.log", description="Log file path")
    debug: bool = Field(default=False, description="Debug mode")

    model_config = {"env_prefix": "SANABOT_", "env_file": ".env", "extra": "ignore"}


def load_settings() -> SanabotSettings:
    """Load settings from environment."""
    settings = SanabotSettings()

    settings.wiki_origin = settings.wiki_origin.rstrip("/")
    if not settings.wiki_origin.startswith("https://"):
        logger.warning(
            f"Wiki origin {settings.wiki_origin!r} is not HTTPS; "
            "page fetches will travel unencrypted."
        )

    return settings
