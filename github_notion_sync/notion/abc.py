"""Base ABC for Notion page stores."""

from abc import ABC, abstractmethod
from typing import Any

from github_notion_sync.utils.pagination import CursorPage


class PageStoreBase(ABC):
    """Query and write access to one Notion database and the blocks of its pages."""

    # Database queries
    @abstractmethod
    async def query_pages(
        self,
        filter: dict[str, Any] | None = None,
        page_size: int | None = None,
        start_cursor: str | None = None,
    ) -> CursorPage[dict[str, Any], str]:
        """Query one page of database results."""
        pass

    @abstractmethod
    async def list_all_pages(self) -> list[dict[str, Any]]:
        """List every page in the database, following cursors to the end."""
        pass

    @abstractmethod
    async def query_by_number_property(self, property_name: str, value: int, page_size: int = 1) -> CursorPage[dict[str, Any], str]:
        """Query pages whose numeric property equals value."""
        pass

    # Page CRUD
    @abstractmethod
    async def create_page(self, properties: dict[str, Any], children: list[dict[str, Any]] | None = None) -> dict[str, Any]:
        """Create a page in the database."""
        pass

    @abstractmethod
    async def update_page(self, page_id: str, properties: dict[str, Any]) -> dict[str, Any]:
        """Overwrite the given properties of a page."""
        pass

    # Block CRUD
    @abstractmethod
    async def list_block_children(self, page_id: str) -> list[dict[str, Any]]:
        """List every child block of a page, in order."""
        pass

    @abstractmethod
    async def update_block(self, block_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Replace a block's content with the given block payload."""
        pass

    @abstractmethod
    async def append_blocks(self, page_id: str, blocks: list[dict[str, Any]]) -> dict[str, Any]:
        """Append blocks after the last child of a page."""
        pass

    @abstractmethod
    async def delete_block(self, block_id: str) -> dict[str, Any]:
        """Delete (archive) a block."""
        pass
