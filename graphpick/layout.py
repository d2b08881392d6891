"""Concrete layouts: a mutable position map and an immutable snapshot."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Generic, Iterator, Mapping, Optional, Tuple, Union

from .config import UNSET, get_accessor_config
from .geometry import as_point
from .retry import guard_lookups, scan_until_consistent
from .types import E, Graph, Layout, Point, PointLike, V

logger = logging.getLogger(__name__)

DefaultPosition = Union[PointLike, Callable[[V], PointLike]]


class StaticLayout(Generic[V, E]):
    """Layout whose positions are assigned explicitly by the caller.

    ``default`` supplies a position for vertices that were never placed; it
    may be a fixed point or a callable taking the vertex. Without it, asking
    for an unplaced vertex raises ``KeyError``.
    """

    def __init__(
        self,
        graph: Graph[V, E],
        positions: Optional[Mapping[V, PointLike]] = None,
        default: Optional[DefaultPosition] = None,
    ):
        self._graph = graph
        self._positions: Dict[V, Point] = {}
        self._default = default
        for vertex, point in (positions or {}).items():
            self._positions[vertex] = as_point(point)

    @property
    def graph(self) -> Graph[V, E]:
        return self._graph

    def position(self, vertex: V) -> Point:
        try:
            return self._positions[vertex]
        except KeyError:
            if self._default is None:
                raise KeyError(f"no position assigned to vertex {vertex!r}") from None
        if callable(self._default):
            return as_point(self._default(vertex))
        return as_point(self._default)

    def set_position(self, vertex: V, x: float, y: float) -> None:
        self._positions[vertex] = (float(x), float(y))

    def snapshot(self, max_retries=UNSET) -> "LayoutSnapshot[V, E]":
        return LayoutSnapshot.capture(self, max_retries=max_retries)


class LayoutSnapshot(Generic[V, E]):
    """Frozen copy of a layout and the graph it positions.

    A snapshot is its own graph, so it satisfies both the layout and the
    graph protocol and can be handed to an accessor directly. Enumeration
    order is the order observed when the snapshot was captured.
    """

    __slots__ = ("_positions", "_endpoints")

    def __init__(self, positions: Mapping[V, PointLike], endpoints: Mapping[E, Tuple[V, V]]):
        frozen_positions = {v: as_point(p) for v, p in positions.items()}
        for edge, (u, v) in endpoints.items():
            if u not in frozen_positions or v not in frozen_positions:
                raise ValueError(f"edge {edge!r} references a vertex without a position")
        object.__setattr__(self, "_positions", frozen_positions)
        object.__setattr__(self, "_endpoints", dict(endpoints))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("LayoutSnapshot is immutable")

    @classmethod
    def capture(cls, layout: Layout[V, E], max_retries=UNSET) -> "LayoutSnapshot[V, E]":
        """Copy ``layout`` in one consistent pass, restarting if the graph changes.

        ``max_retries`` defaults to the process-wide accessor configuration.
        """

        if max_retries is UNSET:
            max_retries = get_accessor_config().max_retries

        def scan() -> "LayoutSnapshot[V, E]":
            graph = layout.graph
            endpoints: Dict[E, Tuple[V, V]] = {}
            with guard_lookups(graph):
                positions = {v: layout.position(v) for v in graph.vertices()}
                for edge in graph.edges():
                    u, v = incident_pair(graph, edge)
                    if u not in positions or v not in positions:
                        raise KeyError(f"edge {edge!r} joins a vertex missing from the vertex pass")
                    endpoints[edge] = (u, v)
            return cls(positions, endpoints)

        snapshot = scan_until_consistent("LayoutSnapshot.capture", scan, max_retries)
        logger.info(
            "Captured layout snapshot with %d vertices and %d edges",
            len(snapshot._positions),
            len(snapshot._endpoints),
        )
        return snapshot

    @property
    def graph(self) -> "LayoutSnapshot[V, E]":
        return self

    def position(self, vertex: V) -> Point:
        try:
            return self._positions[vertex]
        except KeyError:
            raise KeyError(f"vertex {vertex!r} is not part of the snapshot") from None

    def vertices(self) -> Iterator[V]:
        return iter(self._positions)

    def edges(self) -> Iterator[E]:
        return iter(self._endpoints)

    def incident_vertices(self, edge: E) -> Tuple[V, V]:
        return self._endpoints[edge]

    @property
    def vertex_count(self) -> int:
        return len(self._positions)

    @property
    def edge_count(self) -> int:
        return len(self._endpoints)

    def __repr__(self) -> str:
        return f"LayoutSnapshot(vertices={self.vertex_count}, edges={self.edge_count})"


def incident_pair(graph: Graph[V, E], edge: E) -> Tuple[V, V]:
    """Return the two endpoints of ``edge``; a single endpoint is a self-loop."""

    ends = tuple(graph.incident_vertices(edge))
    if len(ends) == 2:
        return ends[0], ends[1]
    if len(ends) == 1:
        return ends[0], ends[0]
    raise ValueError(f"edge {edge!r} has {len(ends)} incident vertices, expected 2")


__all__ = ["StaticLayout", "LayoutSnapshot", "incident_pair"]
