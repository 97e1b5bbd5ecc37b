"""Values passed between the HTTP helpers and the importer."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FetchedAsset:
    """Image bytes downloaded from the source URL."""

    content: bytes
    media_type: Optional[str] = None  # Content-Type header, verbatim


@dataclass(frozen=True)
class Principal:
    """The Mattermost user that emojis are created for."""

    id: str
    username: Optional[str] = None
