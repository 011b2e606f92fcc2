"""Notion API client for publishing documentation pages."""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from config import NotionApiConfig

logger = logging.getLogger(__name__)

# Notion accepts at most this many children per create/append request
MAX_BLOCKS_PER_REQUEST = 100


@dataclass
class PublishResult:
    """Outcome of publishing one page."""

    success: bool
    page_id: Optional[str] = None
    error: Optional[str] = None


class NotionClient:
    """Client for the Notion pages and blocks API."""

    def __init__(self, config: NotionApiConfig):
        """Initialize client."""
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers.update({
            "Notion-Version": config.notion_version,
            "Content-Type": "application/json",
        })

        if config.token:
            self.session.headers.update({"Authorization": f"Bearer {config.token}"})

    def create_page(self, title: str, blocks: List[Dict[str, Any]]) -> PublishResult:
        """
        Create a page in the configured database

        The first MAX_BLOCKS_PER_REQUEST blocks are sent with the page, the rest
        are appended in batches.

        Args:
            title: Page title (the database "Name" property)
            blocks: Notion block dicts

        Returns:
            PublishResult with the new page id on success
        """
        if not self.config.is_configured:
            return PublishResult(success=False, error="Notion token and database id are required")

        first, rest = blocks[:MAX_BLOCKS_PER_REQUEST], blocks[MAX_BLOCKS_PER_REQUEST:]
        payload = {
            "parent": {"database_id": self.config.database_id},
            "properties": {
                "Name": {"title": [{"text": {"content": title}}]},
            },
            "children": first,
        }

        try:
            response = self.session.post(f"{self.base_url}/pages", json=payload, timeout=self.config.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Error creating Notion page '{title}': {e}")
            return PublishResult(success=False, error=str(e))

        page_id = data.get("id") if isinstance(data, dict) else None

        if not page_id:
            return PublishResult(success=False, error="Notion response did not include a page id")

        try:
            self.append_blocks(page_id, rest)
        except requests.exceptions.RequestException as e:
            logger.error(f"Error appending blocks to page {page_id}: {e}")
            return PublishResult(success=False, page_id=page_id, error=str(e))

        logger.info(f"Created Notion page {page_id} with {len(blocks)} blocks")
        return PublishResult(success=True, page_id=page_id)

    def append_blocks(self, block_id: str, blocks: List[Dict[str, Any]]) -> None:
        """Append blocks to a page or block in batches"""
        for start in range(0, len(blocks), MAX_BLOCKS_PER_REQUEST):
            batch = blocks[start:start + MAX_BLOCKS_PER_REQUEST]
            url = f"{self.base_url}/blocks/{block_id}/children"
            response = self.session.patch(url, json={"children": batch}, timeout=self.config.timeout)
            response.raise_for_status()
            logger.debug(f"Appended {len(batch)} blocks to {block_id}")
