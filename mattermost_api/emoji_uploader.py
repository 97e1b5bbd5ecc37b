"""Creation of custom emojis through the Mattermost REST API."""

import json
import logging
from typing import Optional

import requests
from ddtrace import tracer

from config import Config
from .errors import DuplicateEmojiError, UploadError
from .http import auth_headers
from .models import FetchedAsset, Principal

logger = logging.getLogger(__name__)


def extension_for(media_type: Optional[str]) -> str:
    """Pick the filename extension Mattermost uses to detect the image format."""
    return Config.IMAGE_EXTENSIONS.get(media_type, Config.DEFAULT_IMAGE_EXTENSION)


class EmojiUploader:
    """
    Create custom emojis on a Mattermost server.

    Note: the token owner must be allowed to create custom emojis
    (System Console > Integrations > Custom Emoji must be enabled).
    """

    SUCCESS_STATUSES = (200, 201)  # Mattermost may answer either
    DUPLICATE_STATUS = 400

    def __init__(
        self,
        session: requests.Session,
        server_url: str,
        token: str,
        principal: Principal,
        timeout: float = Config.REQUEST_TIMEOUT,
    ):
        self.session = session
        self.server_url = server_url
        self.token = token
        self.principal = principal
        self.timeout = timeout

    @tracer.wrap(service=Config.DD_SERVICE, resource="mattermost.create_emoji")
    def upload_emoji(self, name: str, asset: FetchedAsset) -> dict:
        """
        Upload an emoji to the Mattermost server.

        Args:
            name: Sanitized emoji name (without colons)
            asset: Downloaded image

        Returns:
            The created emoji as returned by the server ({} if the body is not JSON)

        Raises:
            DuplicateEmojiError: Server answered 400 (already exists or invalid name)
            UploadError: Any other failure
        """
        metadata = json.dumps({"name": name, "creator_id": self.principal.id})
        filename = f"{name}{extension_for(asset.media_type)}"

        try:
            response = self.session.post(
                f"{self.server_url}{Config.EMOJI_PATH}",
                headers=auth_headers(self.token),
                data={"emoji": metadata},
                files={"image": (filename, asset.content, "application/octet-stream")},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.debug(f"[UPLOAD] Network error for {name}: {e}")
            raise UploadError(str(e)) from e

        status = response.status_code
        if status in self.SUCCESS_STATUSES:
            logger.debug(f"[UPLOAD] Created emoji {name} ({status})")
            try:
                return response.json()
            except ValueError:
                return {}

        if status == self.DUPLICATE_STATUS:
            raise DuplicateEmojiError(response.text, status_code=status)

        logger.warning(f"[UPLOAD] Emoji {name} rejected with status {status}")
        raise UploadError(response.text, status_code=status)
