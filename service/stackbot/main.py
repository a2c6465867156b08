import asyncio
from fastapi import FastAPI, Request, Header, HTTPException
from fastapi.responses import PlainTextResponse

from stackbot import __version__
from stackbot.config import get_settings
from stackbot.logging_config import bot_logger as logger, setup_logging
from stackbot.api.convert import router as convert_router
from stackbot.telegram_bot.bot import handle_telegram_update, initialize_bot, shutdown_bot

app = FastAPI(
    title="Stack Calculator Bot",
    description="Converts item counts into large crate / crate / stack breakdowns",
    version=__version__
)

# Keep references so webhook tasks are not garbage collected mid-run
_background_tasks: set[asyncio.Task] = set()


# Lifecycle events
@app.on_event("startup")
async def startup_event():
    """Initialize bot on startup."""
    setup_logging(get_settings().log_level)
    logger.info("Initializing Telegram bot...")
    await initialize_bot()
    logger.info("Bot ready")


@app.on_event("shutdown")
async def shutdown_event():
    """Shutdown bot on application shutdown."""
    logger.info("Shutting down Telegram bot...")
    await shutdown_bot()
    logger.info("Bot stopped")


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Liveness probe for the hosting platform."""
    return "Bot is healthy and connected to Telegram."


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    settings = get_settings()
    return {
        "status": "ok",
        "environment": settings.environment,
        "version": __version__
    }


# Telegram webhook endpoint
@app.post("/telegram/webhook")
async def telegram_webhook(
    request: Request,
    x_telegram_bot_api_secret_token: str = Header(None)
):
    """
    Webhook endpoint for Telegram updates.

    Telegram sends updates here when messages arrive.
    """
    settings = get_settings()

    # Verify secret token if configured
    if settings.telegram_webhook_secret:
        if x_telegram_bot_api_secret_token != settings.telegram_webhook_secret:
            raise HTTPException(status_code=403, detail="Invalid secret token")

    update_data = await request.json()

    # Handle update in background (fire-and-forget for fast 200 OK)
    task = asyncio.create_task(handle_telegram_update(update_data))
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)

    return {"ok": True}


app.include_router(convert_router)


def run() -> None:
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
