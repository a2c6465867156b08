"""
Main Telegram bot handler.

Uses python-telegram-bot. Two delivery modes:
- webhook: Telegram posts updates to /telegram/webhook (TELEGRAM_WEBHOOK_URL set)
- polling: the application's updater pulls updates itself (no webhook URL)
"""

from telegram import Update
from telegram.ext import Application, CommandHandler, MessageHandler, filters

from stackbot.config import get_settings
from stackbot.logging_config import bot_logger as logger
from .dispatcher import TRIGGER_PATTERN
from .handlers import handle_start_command, handle_text_message, handle_error


# Global application instance (initialized once)
_application: Application | None = None
_polling = False


def get_bot_application() -> Application:
    """Get or create telegram bot application."""
    global _application

    if _application is None:
        settings = get_settings()

        _application = (
            Application.builder()
            .token(settings.telegram_bot_token)
            .build()
        )

        _application.add_handler(CommandHandler(["start", "help"], handle_start_command))

        # Conversion requests ("...?="); new messages only, edits are not answered again
        _application.add_handler(
            MessageHandler(
                filters.UpdateType.MESSAGES
                & filters.TEXT
                & ~filters.COMMAND
                & filters.Regex(TRIGGER_PATTERN),
                handle_text_message,
            )
        )

        _application.add_error_handler(handle_error)

        logger.info("Telegram bot application initialized")

    return _application


async def handle_telegram_update(update_data: dict) -> None:
    """
    Process incoming webhook update from Telegram.

    Called by the FastAPI webhook endpoint. Never raises.
    """
    try:
        app = get_bot_application()

        update = Update.de_json(update_data, app.bot)

        if update:
            await app.process_update(update)
        else:
            logger.warning("Received invalid update data")

    except Exception as e:
        logger.error(f"Failed to process update: {e}", exc_info=True)


async def initialize_bot() -> None:
    """
    Initialize bot application (call on startup).

    Registers the webhook if one is configured, otherwise starts polling.
    """
    global _polling

    settings = get_settings()
    app = get_bot_application()
    await app.initialize()

    if settings.telegram_webhook_url:
        await app.bot.set_webhook(
            url=settings.telegram_webhook_url,
            secret_token=settings.telegram_webhook_secret or None,
            allowed_updates=Update.ALL_TYPES,
        )
        logger.info(f"Webhook registered: {settings.telegram_webhook_url}")
    else:
        # A leftover webhook would block getUpdates
        await app.bot.delete_webhook()
        await app.start()
        await app.updater.start_polling(allowed_updates=Update.ALL_TYPES)
        _polling = True
        logger.info("Polling for updates")

    logger.info("Bot initialized successfully")


async def shutdown_bot() -> None:
    """
    Shutdown bot application (call on shutdown).
    """
    global _application, _polling

    if _application:
        if _polling:
            await _application.updater.stop()
            await _application.stop()
            _polling = False
        await _application.shutdown()
        _application = None
        logger.info("Bot shut down")
