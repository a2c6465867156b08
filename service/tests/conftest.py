import os

import pytest

# Settings requires a token; set it before anything builds Settings
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "123456:TEST-TOKEN")

from stackbot.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
