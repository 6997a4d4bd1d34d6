"""Fan-out/fan-in helpers for batches of independent remote operations."""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Awaitable, Generic, Sequence, TypeVar

import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

T = TypeVar("T")
K = TypeVar("K")


@dataclass
class BatchResult(Generic[K, T]):
    """Outcome of a batch of independent operations, keyed by the caller's labels."""

    succeeded: list[tuple[K, T]] = field(default_factory=list)
    failed: list[tuple[K, BaseException]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Whether every operation in the batch succeeded."""
        return not self.failed


async def gather_independent(keys: Sequence[K], operations: Sequence[Awaitable[T]], description: str = "operation") -> BatchResult[K, T]:
    """Run every operation concurrently and wait for all of them to settle.

    A failing operation never cancels its siblings. Results are reported in the
    order the operations were given, paired with the corresponding key.
    """
    if len(keys) != len(operations):
        raise ValueError("Each operation must have exactly one key")

    batch: BatchResult[K, T] = BatchResult()
    if not operations:
        return batch

    outcomes: list[Any] = await asyncio.gather(*operations, return_exceptions=True)
    for key, outcome in zip(keys, outcomes):
        if isinstance(outcome, BaseException):
            logger.error(f"Batched {description} failed", key=key, error=str(outcome), error_type=type(outcome).__name__)
            batch.failed.append((key, outcome))
        else:
            batch.succeeded.append((key, outcome))
    return batch
