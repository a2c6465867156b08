"""
Telegram message and command handlers.

Handlers are a thin layer over stackbot.services: pull the query out of
the message, parse, convert, reply. Parse failures get a reaction on the
original message instead of a text reply.
"""

from telegram import Message, Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from stackbot.config import get_settings
from stackbot.logging_config import bot_logger as logger
from stackbot.services import ParseError, convert, parse_quantity
from .dispatcher import extract_query


HELP_TEXT = """📦 Stack calculator

Send an item count ending in ?= and I reply with large crates (LC), crates (c), stacks (st) and loose items.

Examples:
• 35000?= → 10LC+6st+56
• 1234@32?= → 1c+11st+18 (stack size 32)

Without @ the stack size is {stack_size}.
1 LC = 54 stacks, 1 c = 27 stacks."""


async def handle_start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start and /help commands."""
    settings = get_settings()
    await update.effective_message.reply_text(
        HELP_TEXT.format(stack_size=settings.default_stack_size)
    )


async def mark_failed(message: Message, reaction: str) -> None:
    """React to a message that could not be parsed. Never raises."""
    try:
        await message.set_reaction(reaction)
    except TelegramError as e:
        logger.warning(f"Failed to set reaction on message {message.message_id}: {e}")


async def handle_text_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle a conversion request.

    "35000?=" is answered with "10LC+6st+56" as a reply to the message.
    """
    message = update.effective_message
    if message is None:
        return

    # Ignore other bots
    user = update.effective_user
    if user is not None and user.is_bot:
        return

    query = extract_query(message.text)
    if query is None:
        return

    settings = get_settings()

    try:
        parsed = parse_quantity(query, default_stack_size=settings.default_stack_size)
    except ParseError as e:
        logger.info(f"Rejected query {query!r} in chat {message.chat_id}: {e}")
        await mark_failed(message, settings.failure_reaction)
        return

    result = convert(parsed.item_count, parsed.stack_size)
    logger.debug(
        f"Chat {message.chat_id}: {parsed.item_count}@{parsed.stack_size} -> {result}"
    )

    # No parse_mode: the reply is plain text and cannot mention anyone
    await message.reply_text(result, do_quote=True)


async def handle_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log errors raised by handlers."""
    logger.error(f"Update {update} caused error: {context.error}", exc_info=context.error)
