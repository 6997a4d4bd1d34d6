"""In-memory GitHub and Notion doubles shared by the unit tests."""

from typing import Any

from github_notion_sync.github.abc import IssueSourceBase
from github_notion_sync.notion.abc import PageStoreBase
from github_notion_sync.utils.pagination import CursorPage

# Every property a full page write sets.
PROPERTY_NAMES = (
    "Name",
    "Status",
    "Organization",
    "Repository",
    "Number",
    "Assignees",
    "Milestone",
    "Labels",
    "Author",
    "Created",
    "Updated",
    "ID",
    "Link",
    "Project",
    "Project Column",
)


def make_issue_payload(
    number: int = 42,
    issue_id: int = 9001,
    state: str | None = "open",
    body: str | None = "Something is broken",
    pull_request: bool = False,
    **overrides: Any,
) -> dict[str, Any]:
    """Build a GitHub issue as returned by the REST API and webhook payloads."""
    payload: dict[str, Any] = {
        "id": issue_id,
        "number": number,
        "title": f"Issue {number}",
        "state": state,
        "body": body,
        "labels": [{"name": "bug", "color": "d73a4a"}],
        "assignees": [{"login": "alice"}],
        "milestone": {"title": "v1.0"},
        "user": {"login": "bob"},
        "created_at": "2024-01-02T03:04:05Z",
        "updated_at": "2024-01-03T03:04:05Z",
        "html_url": f"https://github.com/acme/widgets/issues/{number}",
        "repository_url": "https://api.github.com/repos/acme/widgets",
    }
    if pull_request:
        payload["pull_request"] = {"url": f"https://api.github.com/repos/acme/widgets/pulls/{number}"}
    payload.update(overrides)
    return payload


class FakeIssueSource(IssueSourceBase):
    """In-memory issue source with a configurable project board."""

    def __init__(self, issues: list[Any] | None = None, projects: list[dict[str, Any]] | None = None) -> None:
        self.issues = issues or []
        self.projects = projects or []
        self.columns: dict[int, list[dict[str, Any]]] = {}
        self.cards: dict[int, list[dict[str, Any]]] = {}
        self.calls: list[tuple[str, Any]] = []

    async def list_issues(self, state: str = "all", **kwargs: Any) -> list[Any]:
        self.calls.append(("list_issues", state))
        return list(self.issues)

    async def get_issue(self, issue_number: int) -> Any:
        self.calls.append(("get_issue", issue_number))
        for issue in self.issues:
            if issue.number == issue_number:
                return issue
        raise LookupError(issue_number)

    async def list_projects(self) -> list[dict[str, Any]]:
        self.calls.append(("list_projects", None))
        return list(self.projects)

    async def list_columns(self, project_id: int) -> list[dict[str, Any]]:
        self.calls.append(("list_columns", project_id))
        return list(self.columns.get(project_id, []))

    async def list_cards(self, column_id: int) -> list[dict[str, Any]]:
        self.calls.append(("list_cards", column_id))
        return list(self.cards.get(column_id, []))


class FakePageStore(PageStoreBase):
    """In-memory Notion database that records every write."""

    def __init__(self, pages: list[dict[str, Any]] | None = None, blocks: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self.pages = pages or []
        self.blocks = blocks or {}
        self.created: list[dict[str, Any]] = []
        self.page_updates: list[tuple[str, dict[str, Any]]] = []
        self.block_updates: list[tuple[str, dict[str, Any]]] = []
        self.appended: list[tuple[str, list[dict[str, Any]]]] = []
        self.deleted: list[str] = []
        self.queries: list[tuple[str, int]] = []
        self._next_block_id = 0

    def _new_block_id(self) -> str:
        self._next_block_id += 1
        return f"new-block-{self._next_block_id}"

    async def query_pages(
        self,
        filter: dict[str, Any] | None = None,
        page_size: int | None = None,
        start_cursor: str | None = None,
    ) -> CursorPage[dict[str, Any], str]:
        return CursorPage(list(self.pages), None)

    async def list_all_pages(self) -> list[dict[str, Any]]:
        return list(self.pages)

    async def query_by_number_property(self, property_name: str, value: int, page_size: int = 1) -> CursorPage[dict[str, Any], str]:
        self.queries.append((property_name, value))
        matches = [page for page in self.pages if page.get("properties", {}).get(property_name, {}).get("number") == value]
        return CursorPage(matches[:page_size], None)

    async def create_page(self, properties: dict[str, Any], children: list[dict[str, Any]] | None = None) -> dict[str, Any]:
        page = {"id": f"page-{len(self.created) + 1}", "properties": properties, "children": children}
        self.created.append(page)
        return page

    async def update_page(self, page_id: str, properties: dict[str, Any]) -> dict[str, Any]:
        self.page_updates.append((page_id, properties))
        return {"id": page_id}

    async def list_block_children(self, page_id: str) -> list[dict[str, Any]]:
        return list(self.blocks.get(page_id, []))

    async def update_block(self, block_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        self.block_updates.append((block_id, payload))
        for children in self.blocks.values():
            for index, block in enumerate(children):
                if block["id"] == block_id:
                    children[index] = {**payload, "id": block_id}
        return {"id": block_id}

    async def append_blocks(self, page_id: str, blocks: list[dict[str, Any]]) -> dict[str, Any]:
        self.appended.append((page_id, blocks))
        new_blocks = [{**block, "id": self._new_block_id()} for block in blocks]
        self.blocks.setdefault(page_id, []).extend(new_blocks)
        return {"results": new_blocks}

    async def delete_block(self, block_id: str) -> dict[str, Any]:
        self.deleted.append(block_id)
        for page_id, children in self.blocks.items():
            self.blocks[page_id] = [block for block in children if block["id"] != block_id]
        return {"id": block_id, "archived": True}
