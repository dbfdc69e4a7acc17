"""sanabot — Main entry point."""

import asyncio
import logging
import os

from .config import SanabotSettings, load_settings
from .wiktionary import WiktionaryClient
from .channels.telegram import TelegramChannel

_log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("sanabot")


def setup_logging(settings: SanabotSettings, debug: bool = False):
    """Log to stderr and to the configured log file."""
    logging.basicConfig(
        level=logging.DEBUG if (debug or settings.debug) else logging.INFO,
        format=_log_format,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(os.path.expanduser(settings.log_file), encoding="utf-8"),
        ],
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


async def run(settings: SanabotSettings | None = None):
    """Main run loop."""
    settings = settings or load_settings()

    if not settings.telegram_bot_token:
        logger.error("No Telegram bot token configured. Set SANABOT_TELEGRAM_BOT_TOKEN in the environment or .env.")
        return

    async with WiktionaryClient(settings) as wiki:
        telegram = TelegramChannel(settings, wiki)
        try:
            await telegram.start()
            logger.info("sanabot is running. Press Ctrl+C to stop.")
            await asyncio.Event().wait()
        except (KeyboardInterrupt, asyncio.CancelledError):
            pass
        except Exception as e:
            logger.critical(f"Fatal error: {type(e).__name__}: {e}", exc_info=True)
        finally:
            await telegram.stop()


def main():
    """Entry point."""
    settings = load_settings()
    setup_logging(settings)
    asyncio.run(run(settings))


if __name__ == "__main__":
    main()
