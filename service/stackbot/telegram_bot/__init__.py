"""
Telegram front end for the stack calculator.

- Receives updates (webhook via FastAPI, or long polling)
- Picks out "...?=" conversion requests
- Replies with the breakdown, or reacts to unparseable requests

Parsing and conversion live in stackbot.services.
"""

from .bot import handle_telegram_update, initialize_bot, shutdown_bot
from .dispatcher import extract_query

__all__ = [
    "handle_telegram_update",
    "initialize_bot",
    "shutdown_bot",
    "extract_query",
]
