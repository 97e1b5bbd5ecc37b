import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration from environment variables."""

    # Mattermost Configuration (CLI flags take precedence)
    MATTERMOST_URL = os.getenv("MATTERMOST_URL")
    MATTERMOST_TOKEN = os.getenv("MATTERMOST_TOKEN")

    # Network Configuration
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))  # seconds
    UPLOAD_DELAY_MS = int(os.getenv("UPLOAD_DELAY_MS", "200"))  # pause between emojis
    USER_AGENT = "mattermost-emoji-importer/1.0"

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Datadog Configuration
    DD_SERVICE = os.getenv("DD_SERVICE", "mattermost-emoji-importer")
    DD_ENV = os.getenv("DD_ENV", "development")
    DD_VERSION = os.getenv("DD_VERSION", "1.0.0")

    # Mattermost API
    USERS_ME_PATH = "/api/v4/users/me"
    EMOJI_PATH = "/api/v4/emoji"

    # Emoji naming rules
    EMOJI_NAME_MAX_LENGTH = 64  # Mattermost limit
    ALIAS_PREFIX = "alias:"

    # File extension for the uploaded image, keyed by Content-Type
    IMAGE_EXTENSIONS = {
        "image/gif": ".gif",
        "image/jpeg": ".jpg",
    }
    DEFAULT_IMAGE_EXTENSION = ".png"


@dataclass(frozen=True)
class ImportSettings:
    """Settings for a single import run, built once at startup."""

    server_url: str
    token: str
    manifest_path: Path
    timeout: float = Config.REQUEST_TIMEOUT
    delay_seconds: float = Config.UPLOAD_DELAY_MS / 1000

    def __post_init__(self):
        # Endpoints are appended to the base URL
        object.__setattr__(self, "server_url", self.server_url.rstrip("/"))
