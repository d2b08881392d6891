"""In-memory graph with insertion-ordered enumeration."""

from __future__ import annotations

import logging
from typing import Dict, Generic, Iterable, Iterator, List, Tuple

from .types import E, ConcurrentModificationError, V

logger = logging.getLogger(__name__)


class SimpleGraph(Generic[V, E]):
    """Undirected multigraph keyed by opaque vertex and edge identities.

    Vertices and edges enumerate in insertion order. Every structural change
    bumps a modification counter; an enumeration in progress raises
    :class:`ConcurrentModificationError` on its next step after such a change.
    """

    def __init__(self) -> None:
        self._incidence: Dict[V, List[E]] = {}
        self._endpoints: Dict[E, Tuple[V, V]] = {}
        self._mod_count = 0

    @property
    def modification_count(self) -> int:
        return self._mod_count

    def _touch(self) -> None:
        self._mod_count += 1

    def _guarded(self, items: Iterable, what: str) -> Iterator:
        expected = self._mod_count
        for item in list(items):
            if self._mod_count != expected:
                raise ConcurrentModificationError(f"{what} changed during iteration")
            yield item
        if self._mod_count != expected:
            raise ConcurrentModificationError(f"{what} changed during iteration")

    def vertices(self) -> Iterator[V]:
        return self._guarded(self._incidence, "vertex set")

    def edges(self) -> Iterator[E]:
        return self._guarded(self._endpoints, "edge set")

    def incident_vertices(self, edge: E) -> Tuple[V, V]:
        try:
            return self._endpoints[edge]
        except KeyError as exc:
            raise KeyError(f"unknown edge {edge!r}") from exc

    def incident_edges(self, vertex: V) -> List[E]:
        try:
            return list(self._incidence[vertex])
        except KeyError as exc:
            raise KeyError(f"unknown vertex {vertex!r}") from exc

    def contains_vertex(self, vertex: V) -> bool:
        return vertex in self._incidence

    def contains_edge(self, edge: E) -> bool:
        return edge in self._endpoints

    @property
    def vertex_count(self) -> int:
        return len(self._incidence)

    @property
    def edge_count(self) -> int:
        return len(self._endpoints)

    def add_vertex(self, vertex: V) -> bool:
        """Add ``vertex``; return ``False`` if it was already present."""

        if vertex in self._incidence:
            return False
        self._incidence[vertex] = []
        self._touch()
        return True

    def add_edge(self, edge: E, u: V, v: V) -> bool:
        """Connect ``u`` and ``v`` with ``edge``, adding missing endpoints.

        Returns ``False`` if ``edge`` already joins the same pair. Re-adding an
        edge with a different pair of endpoints is an error.
        """

        existing = self._endpoints.get(edge)
        if existing is not None:
            if {existing[0], existing[1]} == {u, v}:
                return False
            raise ValueError(
                f"edge {edge!r} already connects {existing[0]!r}-{existing[1]!r}, not {u!r}-{v!r}"
            )
        self.add_vertex(u)
        self.add_vertex(v)
        self._endpoints[edge] = (u, v)
        self._incidence[u].append(edge)
        if v != u:
            self._incidence[v].append(edge)
        self._touch()
        return True

    def remove_edge(self, edge: E) -> bool:
        endpoints = self._endpoints.pop(edge, None)
        if endpoints is None:
            return False
        u, v = endpoints
        self._incidence[u].remove(edge)
        if v != u:
            self._incidence[v].remove(edge)
        self._touch()
        return True

    def remove_vertex(self, vertex: V) -> bool:
        """Remove ``vertex`` together with every edge incident to it."""

        if vertex not in self._incidence:
            return False
        for edge in list(self._incidence[vertex]):
            self.remove_edge(edge)
        del self._incidence[vertex]
        self._touch()
        logger.debug("Removed vertex %r", vertex)
        return True

    def __repr__(self) -> str:
        return f"SimpleGraph(vertices={self.vertex_count}, edges={self.edge_count})"


__all__ = ["SimpleGraph"]
