"""Renders issue bodies into Notion blocks and reconciles a page's existing blocks against them."""

from typing import Any, Sequence

import structlog

from github_notion_sync.notion.abc import PageStoreBase
from github_notion_sync.synchronize.exceptions import BlockReconciliationError
from github_notion_sync.synchronize.models import BlockOperation
from github_notion_sync.synchronize.results import BlockReconciliationResult
from github_notion_sync.utils.tasks import gather_independent
from github_notion_sync.utils.text import split_text, strip_html_blocks

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def render_body_blocks(body: str | None) -> list[dict[str, Any]]:
    """Render an issue body as page content.

    The body becomes a single paragraph block with HTML element spans removed.
    """
    content = strip_html_blocks(body)
    rich_text = [{"type": "text", "text": {"content": segment}} for segment in split_text(content)]
    return [{"object": "block", "type": "paragraph", "paragraph": {"rich_text": rich_text}}]


async def reconcile_blocks(
    page_store: PageStoreBase,
    page_id: str,
    existing_blocks: Sequence[dict[str, Any]],
    desired_blocks: Sequence[dict[str, Any]],
) -> BlockReconciliationResult:
    """Make a page's blocks equal to desired_blocks, using position as block identity.

    Blocks present in both sequences are updated in place with the desired
    content. Extra desired blocks are appended after them; extra existing blocks
    are deleted. Updates are issued as one concurrent batch and must all settle
    before the trailing append or delete batch starts.

    Every operation in a batch runs even if a sibling fails. If anything failed,
    BlockReconciliationError is raised once both batches have settled; applied
    changes are kept, and reconciling again with the same blocks converges.
    """
    overlap = min(len(existing_blocks), len(desired_blocks))
    result = BlockReconciliationResult(page_id=page_id)
    failures: list[tuple[Any, BaseException]] = []

    logger.debug(
        "Reconciling page blocks",
        page_id=page_id,
        existing_block_count=len(existing_blocks),
        desired_block_count=len(desired_blocks),
    )

    updates = await gather_independent(
        [(BlockOperation.UPDATE, existing_blocks[index]["id"]) for index in range(overlap)],
        [page_store.update_block(existing_blocks[index]["id"], desired_blocks[index]) for index in range(overlap)],
        description="block update",
    )
    result.updated = len(updates.succeeded)
    failures.extend(updates.failed)

    if len(desired_blocks) > len(existing_blocks):
        new_blocks = list(desired_blocks[overlap:])
        try:
            await page_store.append_blocks(page_id, new_blocks)
        except Exception as exc:
            logger.error("Failed to append blocks", page_id=page_id, block_count=len(new_blocks), error=str(exc))
            failures.append(((BlockOperation.APPEND, page_id), exc))
        else:
            result.appended = len(new_blocks)
    elif len(desired_blocks) < len(existing_blocks):
        stale_block_ids = [block["id"] for block in existing_blocks[overlap:]]
        deletes = await gather_independent(
            [(BlockOperation.DELETE, block_id) for block_id in stale_block_ids],
            [page_store.delete_block(block_id) for block_id in stale_block_ids],
            description="block delete",
        )
        result.deleted = len(deletes.succeeded)
        failures.extend(deletes.failed)

    if failures:
        raise BlockReconciliationError(page_id, failures, result)

    logger.info(
        "Reconciled page blocks",
        page_id=page_id,
        updated=result.updated,
        appended=result.appended,
        deleted=result.deleted,
    )
    return result
