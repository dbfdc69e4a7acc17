"""Telegram channel adapter."""

import logging
from typing import Optional

from telegram import Bot, InlineKeyboardMarkup, Update
from telegram.error import BadRequest
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from ..article import Article, not_found_message
from ..config import SanabotSettings
from ..errors import classify_error
from ..formatting import reference_keyboard, split_message, to_telegram_html
from ..ratelimit import RateLimiter, get_rate_limiter
from ..wiktionary import LookupState, WiktionaryClient

logger = logging.getLogger("sanabot.telegram")

HELP_TEXT = (
    "Send me a Finnish word and I'll summarise its Wiktionary entry.\n"
    "In groups use {command} <word> (or /<word>).\n"
    "Tap a button under an entry to look up a related word."
)


def parse_query(text: str, is_group: bool, command: str = "/w") -> Optional[str]:
    """Turn an incoming message into a lookup query.

    Groups only react to ``/w word`` or ``/word``; private chats take any
    text, with leading slashes removed.

    Returns:
        The lower-cased query, or None if the message is not a lookup.
    """
    text = text.lower()
    if is_group:
        prefix = f"{command} "
        if text.startswith(prefix):
            query = text[len(prefix):]
        elif text.startswith("/"):
            query = text[1:]
        else:
            return None
    else:
        query = text.lstrip("/")
    query = query.strip()
    return query or None


class TelegramChannel:
    """Telegram bot adapter for sanabot."""

    def __init__(
        self,
        settings: SanabotSettings,
        wiki: WiktionaryClient,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        self.settings = settings
        self.wiki = wiki
        if rate_limiter is None:
            rate_limiter = get_rate_limiter()
            rate_limiter.update_limits(
                max_requests=settings.ratelimit_max_requests,
                window_seconds=settings.ratelimit_window_seconds,
            )
        self.rate_limiter = rate_limiter
        self.app: Optional[Application] = None

    async def start(self):
        """Start the Telegram bot (long polling)."""
        self.app = (
            Application.builder()
            .token(self.settings.telegram_bot_token)
            .build()
        )

        self.app.add_handler(CommandHandler("start", self._cmd_help))
        self.app.add_handler(CommandHandler("help", self._cmd_help))

        # Everything else that is text, commands included: /w word, /word
        self.app.add_handler(MessageHandler(filters.TEXT, self._handle_message))

        # Reference button presses
        self.app.add_handler(CallbackQueryHandler(self._handle_callback))

        self.app.add_error_handler(self._handle_error)

        logger.info("Starting Telegram bot...")
        await self.app.initialize()
        await self.app.start()
        await self.app.updater.start_polling(drop_pending_updates=True)

        from telegram import BotCommand
        await self.app.bot.set_my_commands([
            BotCommand("help", "How to look up words"),
            BotCommand(self.settings.group_command.lstrip("/"), "Look up a word"),
        ])
        logger.info("Telegram bot started.")

    async def stop(self):
        """Stop the Telegram bot."""
        if self.app:
            await self.app.updater.stop()
            await self.app.stop()
            await self.app.shutdown()
            logger.info("Telegram bot stopped.")

    # ── Handlers ─────────────────────────────────────────────

    async def _cmd_help(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /start and /help."""
        if update.effective_message:
            await update.effective_message.reply_text(
                HELP_TEXT.format(command=self.settings.group_command)
            )

    async def _handle_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle new and edited text messages."""
        message = update.effective_message
        chat = update.effective_chat
        if not message or not message.text or not chat:
            return

        is_group = chat.type in ("group", "supergroup")
        query = parse_query(message.text, is_group, self.settings.group_command)
        if query is None:
            logger.debug(f"Ignoring non-query message in {chat.id}: {message.text[:50]!r}")
            return

        user = update.effective_user
        user_id = str(user.id) if user else str(chat.id)
        logger.info(f"Query from {user_id} in {chat.type} {chat.id}: {query!r}")
        await self.handle_query(context.bot, chat.id, user_id, query)

    async def _handle_callback(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle reference button presses. The button data is the title."""
        callback = update.callback_query
        await callback.answer()

        query = (callback.data or "").strip()
        if not query:
            return

        # Answer in the presser's private chat, not in the group the button lives in
        user = callback.from_user
        logger.info(f"Reference lookup from {user.id}: {query!r}")
        await self.handle_query(context.bot, user.id, str(user.id), query)

    async def _handle_error(self, update: object, context: ContextTypes.DEFAULT_TYPE):
        """Handle errors."""
        logger.error(f"Telegram error: {context.error}", exc_info=context.error)

    # ── Lookup and delivery ──────────────────────────────────

    async def handle_query(self, bot: Bot, chat_id: int, user_id: str, query: str):
        """Rate-limit, look up, and deliver one query."""
        allowed, rate_msg = self.rate_limiter.check(user_id)
        if not allowed:
            await bot.send_message(chat_id=chat_id, text=f"⏱️ {rate_msg}")
            return

        try:
            await bot.send_chat_action(chat_id, "typing")
        except Exception:
            pass  # Best-effort

        try:
            result = await self.wiki.lookup(query)
        except Exception as e:
            logger.error(f"Lookup failed for {query!r}: {e}", exc_info=True)
            await bot.send_message(chat_id=chat_id, text=f"⚠️ {classify_error(e)}")
            return

        if result.state is LookupState.MISSING:
            await self.send_text(bot, chat_id, not_found_message(query))
            return
        await self.send_article(bot, chat_id, result.article)

    async def send_article(self, bot: Bot, chat_id: int, article: Article):
        """Send an article with its reference buttons."""
        markup = reference_keyboard(
            article.refs,
            row_size=self.settings.reference_row_size,
            max_buttons=self.settings.max_reference_buttons,
        )
        logger.debug(f"Sending {len(article.message)} chars, {len(article.refs)} refs to {chat_id}")
        return await self.send_text(bot, chat_id, article.message, reply_markup=markup)

    async def send_text(
        self,
        bot: Bot,
        chat_id: int,
        text: str,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ):
        """Send article markup as HTML, splitting if too long for Telegram.

        Chunks are cut on line boundaries before conversion, so emphasis
        never straddles two messages. The keyboard goes on the last chunk.
        Falls back to plain text if Telegram rejects the HTML.

        Returns:
            The last sent Message object.
        """
        chunks = split_message(text)
        last_msg = None
        for i, chunk in enumerate(chunks):
            markup = reply_markup if i == len(chunks) - 1 else None
            try:
                last_msg = await bot.send_message(
                    chat_id=chat_id,
                    text=to_telegram_html(chunk),
                    parse_mode="HTML",
                    reply_markup=markup,
                )
            except BadRequest as e:
                logger.warning(f"HTML rejected for chat {chat_id} ({e}), sending plain text")
                last_msg = await bot.send_message(
                    chat_id=chat_id,
                    text=chunk,
                    reply_markup=markup,
                )
        return last_msg
