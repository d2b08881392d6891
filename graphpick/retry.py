"""Optimistic restart loop for scans over a graph that may change underneath."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, TypeVar

from .types import ConcurrentModificationError, PickBusyError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Messages CPython uses when a builtin container is resized mid-iteration.
_MUTATION_MARKERS = (
    "changed size during iteration",
    "mutated during iteration",
    "keys changed during iteration",
)


def is_concurrent_modification(exc: BaseException) -> bool:
    """Return ``True`` if ``exc`` reports a collection changing during iteration."""

    if isinstance(exc, ConcurrentModificationError):
        return True
    if type(exc) is RuntimeError:
        message = str(exc)
        return any(marker in message for marker in _MUTATION_MARKERS)
    return False


@contextmanager
def guard_lookups(graph: Any) -> Iterator[None]:
    """Turn a failed element lookup into a restart if ``graph`` changed meanwhile.

    A vertex or edge handed out by an enumeration can be removed before its
    position or endpoints are read. Graphs exposing ``modification_count``
    let that ``LookupError`` be told apart from a genuinely unknown element;
    for other graphs the error propagates unchanged.
    """

    before = getattr(graph, "modification_count", None)
    try:
        yield
    except LookupError as exc:
        if before is not None and getattr(graph, "modification_count", None) != before:
            raise ConcurrentModificationError(f"element vanished during scan: {exc}") from exc
        raise


def scan_until_consistent(
    operation: str,
    scan: Callable[[], T],
    max_retries: Optional[int],
) -> T:
    """Run ``scan`` until one attempt completes without observing a mutation.

    Each attempt starts from scratch; nothing computed by an interrupted
    attempt survives. ``max_retries`` bounds the number of restarts after the
    first attempt, ``None`` means unbounded. When the cap is exhausted a
    :class:`PickBusyError` is raised.
    """

    attempts = 0
    while True:
        attempts += 1
        try:
            return scan()
        except RuntimeError as exc:
            if not is_concurrent_modification(exc):
                raise
            if max_retries is not None and attempts > max_retries:
                logger.warning(
                    "%s: giving up after %d attempts, graph kept changing", operation, attempts
                )
                raise PickBusyError(operation, attempts) from exc
            logger.debug("%s: restarting scan after attempt %d (%s)", operation, attempts, exc)


__all__ = ["is_concurrent_modification", "guard_lookups", "scan_until_consistent"]
