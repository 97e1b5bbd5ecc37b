"""Resolution of the user that owns the access token."""

import logging

import requests
from ddtrace import tracer

from config import Config
from .errors import IdentityError
from .http import auth_headers
from .models import Principal

logger = logging.getLogger(__name__)


@tracer.wrap(service=Config.DD_SERVICE, resource="mattermost.users_me")
def resolve_identity(
    session: requests.Session,
    server_url: str,
    token: str,
    timeout: float = Config.REQUEST_TIMEOUT,
) -> Principal:
    """
    Look up the user that owns the access token.

    Raises:
        IdentityError: If the request fails or the response has no user id
    """
    url = f"{server_url}{Config.USERS_ME_PATH}"
    try:
        response = session.get(url, headers=auth_headers(token), timeout=timeout)
    except requests.RequestException as e:
        raise IdentityError(str(e)) from e

    if response.status_code != 200:
        raise IdentityError(response.text, status_code=response.status_code)

    try:
        user = response.json()
    except ValueError as e:
        raise IdentityError(f"invalid JSON in response: {e}") from e

    user_id = user.get("id") if isinstance(user, dict) else None
    if not user_id:
        raise IdentityError("response does not contain a user id")

    logger.info(f"[IDENTITY] Authenticated as {user.get('username') or user_id}")
    return Principal(id=user_id, username=user.get("username"))
