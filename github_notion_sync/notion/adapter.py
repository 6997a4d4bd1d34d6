"""Notion page store adapter for the notion-client library."""

from typing import Any, Self

import structlog
from notion_client import AsyncClient

from github_notion_sync.utils.constants import NOTION_MAX_PAGE_SIZE
from github_notion_sync.utils.pagination import CursorPage, collect_pages
from github_notion_sync.utils.retry import retry_on_rate_limit

from .abc import PageStoreBase
from .client import get_notion_client

logger = structlog.get_logger(__name__)


class NotionClientAdapter(PageStoreBase):
    """Page store backed by the notion-client library, bound to a single database."""

    def __init__(self, client: AsyncClient, database_id: str) -> None:
        """Initialize the adapter with an already-initialized client."""
        self.client = client
        self.database_id = database_id

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(cls, database_id: str, notion_token: str, debug: bool = False) -> Self:
        """Create a new adapter for a Notion database."""
        logger.info("Creating client for Notion database", database_id=database_id)
        client = await get_notion_client(notion_token=notion_token, debug=debug)
        return cls(client, database_id)

    # Database queries
    @retry_on_rate_limit()
    async def query_pages(
        self,
        filter: dict[str, Any] | None = None,
        page_size: int | None = None,
        start_cursor: str | None = None,
    ) -> CursorPage[dict[str, Any], str]:
        """Query one page of database results."""
        params = self._omit_null_parameters(filter=filter, page_size=page_size, start_cursor=start_cursor)
        response: dict[str, Any] = await self.client.databases.query(database_id=self.database_id, **params)
        return CursorPage(response.get("results", []), response.get("next_cursor"))

    async def list_all_pages(self) -> list[dict[str, Any]]:
        """List every page in the database, following next_cursor until it is null."""

        async def fetch_page(cursor: str | None) -> CursorPage[dict[str, Any], str]:
            return await self.query_pages(page_size=NOTION_MAX_PAGE_SIZE, start_cursor=cursor)

        pages = await collect_pages(fetch_page)
        logger.info("Fetched pages from Notion database", database_id=self.database_id, page_count=len(pages))
        return pages

    async def query_by_number_property(self, property_name: str, value: int, page_size: int = 1) -> CursorPage[dict[str, Any], str]:
        """Query pages whose numeric property equals value."""
        return await self.query_pages(filter={"property": property_name, "number": {"equals": value}}, page_size=page_size)

    # Page CRUD
    @retry_on_rate_limit()
    async def create_page(self, properties: dict[str, Any], children: list[dict[str, Any]] | None = None) -> dict[str, Any]:
        """Create a page in the database."""
        params = self._omit_null_parameters(children=children)
        return await self.client.pages.create(parent={"database_id": self.database_id}, properties=properties, **params)

    @retry_on_rate_limit()
    async def update_page(self, page_id: str, properties: dict[str, Any]) -> dict[str, Any]:
        """Overwrite the given properties of a page. Properties not given are left untouched."""
        return await self.client.pages.update(page_id=page_id, properties=properties)

    # Block CRUD
    @retry_on_rate_limit()
    async def _fetch_block_children_page(self, page_id: str, cursor: str | None) -> CursorPage[dict[str, Any], str]:
        params = self._omit_null_parameters(start_cursor=cursor)
        response: dict[str, Any] = await self.client.blocks.children.list(block_id=page_id, page_size=NOTION_MAX_PAGE_SIZE, **params)
        return CursorPage(response.get("results", []), response.get("next_cursor"))

    async def list_block_children(self, page_id: str) -> list[dict[str, Any]]:
        """List every child block of a page, in order."""

        async def fetch_page(cursor: str | None) -> CursorPage[dict[str, Any], str]:
            return await self._fetch_block_children_page(page_id, cursor)

        return await collect_pages(fetch_page)

    @retry_on_rate_limit()
    async def update_block(self, block_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Replace a block's content with the type-specific content of the given block."""
        block_type = payload["type"]
        return await self.client.blocks.update(block_id=block_id, **{block_type: payload[block_type]})

    @retry_on_rate_limit()
    async def append_blocks(self, page_id: str, blocks: list[dict[str, Any]]) -> dict[str, Any]:
        """Append blocks after the last child of a page."""
        return await self.client.blocks.children.append(block_id=page_id, children=blocks)

    @retry_on_rate_limit()
    async def delete_block(self, block_id: str) -> dict[str, Any]:
        """Delete (archive) a block."""
        return await self.client.blocks.delete(block_id=block_id)
