import os

# Must be set before ddtrace is imported by the modules under test
os.environ.setdefault("DD_TRACE_ENABLED", "false")

from typing import Optional
from unittest.mock import MagicMock

import pytest

from mattermost_api import Principal


def make_response(
    status_code: int = 200,
    content: bytes = b"",
    text: str = "",
    headers: Optional[dict] = None,
    json_data=None,
) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.text = text
    response.headers = headers or {}
    if json_data is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock()


@pytest.fixture
def principal() -> Principal:
    return Principal(id="user123", username="importer")
