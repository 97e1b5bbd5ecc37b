"""Utility functions for the Mattermost emoji importer."""

from .sanitize import sanitize_emoji_name
from .manifest import ManifestError, load_manifest

__all__ = [
    "sanitize_emoji_name",
    "ManifestError",
    "load_manifest",
]
