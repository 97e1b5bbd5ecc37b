"""Errors raised while talking to Mattermost or the image host."""

from typing import Optional


class MattermostError(Exception):
    """Base error carrying the HTTP status (None for network failures)."""

    def __init__(self, detail: str, status_code: Optional[int] = None):
        self.detail = detail
        self.status_code = status_code
        super().__init__(str(self))

    def __str__(self):
        if self.status_code is None:
            return self.detail
        if self.detail:
            return f"status {self.status_code}: {self.detail}"
        return f"HTTP {self.status_code}"


class FetchError(MattermostError):
    """The source image could not be downloaded."""


class IdentityError(MattermostError):
    """The token could not be resolved to a user."""


class UploadError(MattermostError):
    """Mattermost did not create the emoji."""


class DuplicateEmojiError(UploadError):
    """
    Mattermost answered 400.

    The server uses the same status for a name that already exists and
    for a name it considers invalid, so the two cannot be told apart.
    """
