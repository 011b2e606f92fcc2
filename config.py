"""Application configuration."""
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _int_from_env(name: str, default: int) -> int:
    """Read a positive integer variable, falling back to the default when invalid."""
    raw = os.getenv(name)
    if raw is None:
        return default

    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default

    if value < 1:
        logger.warning(f"{name}={value} must be positive, using {default}")
        return default
    return value


@dataclass
class NotionApiConfig:
    """Notion API configuration."""

    base_url: str = "https://api.notion.com/v1"
    token: str = ""  # Read from NOTION_TOKEN or user input
    database_id: str = ""
    notion_version: str = "2022-06-28"
    timeout: int = 30

    @classmethod
    def from_env(cls) -> "NotionApiConfig":
        """Load config from environment variables."""
        return cls(
            base_url=os.getenv("NOTION_API_URL", "https://api.notion.com/v1"),
            token=os.getenv("NOTION_TOKEN", ""),
            database_id=os.getenv("NOTION_DATABASE_ID", ""),
            notion_version=os.getenv("NOTION_VERSION", "2022-06-28"),
        )

    @property
    def is_configured(self) -> bool:
        """Whether credentials needed to publish are present."""
        return bool(self.token and self.database_id)


@dataclass
class AppConfig:
    """Application configuration."""

    max_depth: int = 64
    page_title: str = "JSON Schema Documentation"
    output_dir: str = "./output"
    notion: NotionApiConfig = None

    def __post_init__(self):
        """Initialize defaults."""
        if self.notion is None:
            self.notion = NotionApiConfig.from_env()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load config from environment variables."""
        return cls(
            max_depth=_int_from_env("SCHEMADOC_MAX_DEPTH", 64),
            output_dir=os.getenv("SCHEMADOC_OUTPUT_DIR", "./output"),
            notion=NotionApiConfig.from_env(),
        )


# Global instance
app_config = AppConfig.from_env()
