"""Adapters that expose third-party graph objects through the layout protocol."""

from __future__ import annotations

from typing import Hashable, Iterator, Mapping, MutableMapping, Tuple

import networkx as nx

from .geometry import as_point
from .types import Point, PointLike

NodeId = Hashable
EdgeKey = Tuple[Hashable, ...]


class NetworkXLayout:
    """Pick over a :mod:`networkx` graph positioned by a node->point mapping.

    Edges are the tuples networkx itself yields: ``(u, v)`` for simple graphs
    and ``(u, v, key)`` for multigraphs, so the edge returned by a pick can be
    fed straight back into ``graph.edges[...]``. ``positions`` is read live,
    so the output of ``nx.spring_layout`` or a dict updated by an animation
    loop both work.
    """

    def __init__(self, graph: nx.Graph, positions: Mapping[NodeId, PointLike]):
        self.nx_graph = graph
        self.positions = positions

    @classmethod
    def from_layout_function(cls, graph: nx.Graph, layout_fn=nx.spring_layout, **kwargs) -> "NetworkXLayout":
        """Position ``graph`` with one of networkx's layout functions."""

        return cls(graph, layout_fn(graph, **kwargs))

    @property
    def graph(self) -> "NetworkXLayout":
        return self

    def position(self, vertex: NodeId) -> Point:
        return as_point(self.positions[vertex])

    def set_position(self, vertex: NodeId, x: float, y: float) -> None:
        if not isinstance(self.positions, MutableMapping):
            raise TypeError("positions mapping is read-only")
        self.positions[vertex] = (float(x), float(y))

    def vertices(self) -> Iterator[NodeId]:
        return iter(self.nx_graph.nodes)

    def edges(self) -> Iterator[EdgeKey]:
        if self.nx_graph.is_multigraph():
            return iter(self.nx_graph.edges(keys=True))
        return iter(self.nx_graph.edges())

    def incident_vertices(self, edge: EdgeKey) -> Tuple[NodeId, NodeId]:
        return edge[0], edge[1]


__all__ = ["NetworkXLayout"]
