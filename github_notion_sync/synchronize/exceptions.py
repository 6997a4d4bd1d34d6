"""Contains exceptions raised while synchronizing GitHub issues into Notion."""

from typing import Any


class IssueStateUndefinedError(Exception):
    """Raised when an issue that is about to be written has no state."""

    def __init__(self, issue_number: int) -> None:
        """Initializes the exception with the number of the offending issue."""
        super().__init__(f"Issue state is not defined for issue #{issue_number}")
        self.issue_number = issue_number


class PullRequestReferenceError(Exception):
    """Raised when the issue a pull request belongs to cannot be determined."""

    def __init__(self, pull_request_number: int, issue_url: str | None) -> None:
        """Initializes the exception with the pull request and the reference that failed to parse."""
        super().__init__(f"Issue number not found in pull request #{pull_request_number} issue url: {issue_url!r}")
        self.pull_request_number = pull_request_number
        self.issue_url = issue_url


class BlockReconciliationError(Exception):
    """Raised when one or more block operations failed while reconciling a page body.

    Operations that succeeded are not rolled back; reconciling again converges.
    """

    def __init__(self, page_id: str, failures: list[tuple[Any, BaseException]], result: Any) -> None:
        """Initializes the exception with the failed operations and the partial result."""
        super().__init__(f"{len(failures)} block operation(s) failed while reconciling page {page_id}")
        self.page_id = page_id
        self.failures = failures
        self.result = result
