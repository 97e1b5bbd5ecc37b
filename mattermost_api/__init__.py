"""Mattermost REST API client used by the emoji importer."""

from .errors import (
    MattermostError,
    FetchError,
    IdentityError,
    UploadError,
    DuplicateEmojiError,
)
from .models import FetchedAsset, Principal
from .http import build_session, fetch_image
from .identity import resolve_identity
from .emoji_uploader import EmojiUploader, extension_for

__all__ = [
    "MattermostError",
    "FetchError",
    "IdentityError",
    "UploadError",
    "DuplicateEmojiError",
    "FetchedAsset",
    "Principal",
    "build_session",
    "fetch_image",
    "resolve_identity",
    "EmojiUploader",
    "extension_for",
]
