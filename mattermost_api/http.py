"""HTTP session setup and image download."""

import logging
from typing import Dict, Optional

import requests
from ddtrace import tracer

from config import Config
from .errors import FetchError
from .models import FetchedAsset

logger = logging.getLogger(__name__)


def build_session(user_agent: Optional[str] = None) -> requests.Session:
    """
    Create the session shared by every request of a run.

    Credentials are not stored on the session so that they are only sent
    to the Mattermost server and never to the image host.
    """
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent or Config.USER_AGENT})
    return session


def auth_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@tracer.wrap(service=Config.DD_SERVICE, resource="image.fetch")
def fetch_image(
    session: requests.Session,
    url: str,
    timeout: float = Config.REQUEST_TIMEOUT,
) -> FetchedAsset:
    """
    Download an image into memory.

    Args:
        session: Shared HTTP session
        url: Source image URL
        timeout: Request timeout in seconds

    Returns:
        FetchedAsset with the body and the Content-Type header as sent

    Raises:
        FetchError: On any status other than 200 or on a network failure
    """
    try:
        response = session.get(url, timeout=timeout)
    except requests.RequestException as e:
        logger.debug(f"[FETCH] Network error for {url}: {e}")
        raise FetchError(str(e)) from e

    if response.status_code != 200:
        logger.debug(f"[FETCH] {url} returned {response.status_code}")
        raise FetchError("", status_code=response.status_code)

    return FetchedAsset(
        content=response.content,
        media_type=response.headers.get("Content-Type"),
    )
