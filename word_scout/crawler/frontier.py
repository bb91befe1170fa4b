"""
Breadth-first frontier of pending URLs together with the set of visited pages.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Set


class EmptyFrontier(Exception):
    """No unvisited URL is left in the frontier."""


class Frontier:
    """FIFO queue of URLs awaiting a visit, deduplicated against the visited set.

    Duplicates are tolerated in the queue and dropped when they reach its head,
    so a page may link to itself or to an already queued page freely.
    Taking a URL does not mark it visited; the caller does that with
    :meth:`mark_visited` right before fetching it.
    """

    def __init__(self) -> None:
        self._pending: Deque[str] = deque()
        self._visited: Set[str] = set()

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def visited(self) -> frozenset[str]:
        return frozenset(self._visited)

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    def is_visited(self, url: str) -> bool:
        return url in self._visited

    def mark_visited(self, url: str) -> None:
        self._visited.add(url)

    def enqueue_all(self, links: Iterable[str]) -> None:
        """Append links to the tail, keeping their order."""
        self._pending.extend(links)

    def next_unvisited(self) -> str:
        """Pop URLs from the head until one is not visited yet.

        Raises EmptyFrontier when the queue runs out first.
        """
        while self._pending:
            url = self._pending.popleft()
            if url not in self._visited:
                return url
        raise EmptyFrontier()
