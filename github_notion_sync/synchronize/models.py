"""Enumerations shared by the synchronization modules."""

from enum import Enum


class IssueStatus(str, Enum):
    """Issue lifecycle states mirrored into the Notion Status property."""

    OPEN = "open"
    CLOSED = "closed"
    REVIEW = "review"


class EventOutcome(str, Enum):
    """Terminal outcome of handling a single inbound event."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    IGNORED = "ignored"


class BlockOperation(str, Enum):
    """Kinds of block operations issued while reconciling a page body."""

    UPDATE = "update"
    APPEND = "append"
    DELETE = "delete"
