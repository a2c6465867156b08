"""
Message dispatcher - picks out conversion requests.

A request is any text ending in "?=", e.g. "35000?=" or "1234@32?=".
"""

import re

TRIGGER_SUFFIX = "?="

# Used as a telegram filter so non-trigger text never reaches the handler
TRIGGER_PATTERN = re.compile(r'\?=\s*$')


def extract_query(text: str | None) -> str | None:
    """
    Return the part of `text` before the trailing "?=".

    Returns None if the text is not a conversion request.
    """
    if not text:
        return None

    text = text.strip()
    if not text.endswith(TRIGGER_SUFFIX):
        return None

    return text[:-len(TRIGGER_SUFFIX)]
