"""Sets up the authenticated notion-client client."""

import logging

from notion_client import AsyncClient


async def get_notion_client(notion_token: str, debug: bool = False) -> AsyncClient:
    """Returns a Notion client authenticated with an integration token."""
    if not notion_token:
        raise RuntimeError("Notion authentication requires notion_token in config.")
    return AsyncClient(auth=notion_token, log_level=logging.DEBUG if debug else logging.WARNING)
