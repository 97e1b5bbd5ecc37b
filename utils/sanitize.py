"""Text sanitization utilities for emoji names."""

import re

from unidecode import unidecode

from config import Config

# Anything Mattermost does not accept in an emoji name
_FORBIDDEN_CHARS = re.compile(r"[^a-z0-9\-_]+")


def sanitize_emoji_name(name: str) -> str:
    """
    Sanitize emoji name to meet Mattermost requirements.
    - Non-Latin characters transliterated to ASCII ("жду" -> "zhdu")
    - Lowercase only
    - Alphanumeric, underscores, and hyphens only
    - Max 64 characters

    The result may be empty. Mattermost rejects such names itself, so
    no fallback name is invented here.

    Args:
        name: The raw emoji name

    Returns:
        Sanitized emoji name safe for Mattermost
    """
    # Transliterate (characters without a mapping are dropped)
    name = unidecode(name)
    # Convert to lowercase
    name = name.lower()
    # Replace spaces with dashes
    name = name.replace(" ", "-")
    # Remove all forbidden characters
    name = _FORBIDDEN_CHARS.sub("", name)
    # Limit length
    return name[:Config.EMOJI_NAME_MAX_LENGTH]
