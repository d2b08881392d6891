"""Resolve plane coordinates and regions to graph elements."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Generic, Optional, Set

from .config import UNSET, AccessorConfig, get_accessor_config
from .geometry import as_point, segment_distance_sq, squared_distance
from .layout import incident_pair
from .logging_utils import apply_debug_logging
from .retry import guard_lookups, scan_until_consistent
from .types import E, Layout, Shape, V

logger = logging.getLogger(__name__)


class ElementAccessor(ABC, Generic[V, E]):
    """Picking contract: nearest vertex, nearest edge, vertices in a region.

    Implementations must return ``None`` (or an empty set) when nothing lies
    within the cutoff, never pick an edge whose endpoints coincide, and keep
    the first enumerated element among exact ties.
    """

    @abstractmethod
    def nearest_vertex(
        self, layout: Layout[V, E], x: float, y: float, max_distance: Optional[float] = None
    ) -> Optional[V]:
        ...

    @abstractmethod
    def vertices_in(self, layout: Layout[V, E], region: Shape) -> Set[V]:
        ...

    @abstractmethod
    def nearest_edge(
        self, layout: Layout[V, E], x: float, y: float, max_distance: Optional[float] = None
    ) -> Optional[E]:
        ...


class RadiusElementAccessor(ElementAccessor[V, E]):
    """Exhaustive-scan accessor bounded by a maximum pick distance.

    Every query visits all vertices (or edges) of the layout's graph, so cost
    is linear in graph size. Subclasses that keep a spatial index can override
    the query methods and keep the same results.

    The graph is never locked. If it changes shape while a scan is running,
    the scan is thrown away and started again, at most ``max_retries`` times
    before :class:`~graphpick.types.PickBusyError` is raised. Pass
    ``max_retries=None`` to retry without limit.
    """

    def __init__(
        self,
        max_distance: Optional[float] = None,
        *,
        max_retries=UNSET,
        config: Optional[AccessorConfig] = None,
    ):
        base = config if config is not None else get_accessor_config()
        resolved = AccessorConfig(
            max_distance=base.max_distance if max_distance is None else max_distance,
            max_retries=base.max_retries if max_retries is UNSET else max_retries,
        )
        self.max_distance = resolved.max_distance
        self.max_retries = resolved.max_retries

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(max_distance={self.max_distance!r}, "
            f"max_retries={self.max_retries!r})"
        )

    def _cutoff_sq(self, max_distance: Optional[float]) -> float:
        if max_distance is None:
            max_distance = self.max_distance
        max_distance = float(max_distance)
        if math.isnan(max_distance) or max_distance < 0:
            raise ValueError(f"max_distance must be a non-negative number, got {max_distance!r}")
        return max_distance * max_distance

    def nearest_vertex(
        self, layout: Layout[V, E], x: float, y: float, max_distance: Optional[float] = None
    ) -> Optional[V]:
        """Return the vertex closest to ``(x, y)`` within ``max_distance``.

        ``max_distance`` defaults to the accessor's configured cutoff. Returns
        ``None`` if no vertex is strictly closer than the cutoff.
        """

        cutoff_sq = self._cutoff_sq(max_distance)

        def scan() -> Optional[V]:
            best_sq = cutoff_sq
            closest: Optional[V] = None
            graph = layout.graph
            with guard_lookups(graph):
                for vertex in graph.vertices():
                    px, py = as_point(layout.position(vertex))
                    dist_sq = squared_distance(px, py, x, y)
                    if dist_sq < best_sq:
                        best_sq = dist_sq
                        closest = vertex
            return closest

        return scan_until_consistent("nearest_vertex", scan, self.max_retries)

    def vertices_in(self, layout: Layout[V, E], region: Shape) -> Set[V]:
        """Return every vertex whose position ``region`` contains."""

        def scan() -> Set[V]:
            picked: Set[V] = set()
            graph = layout.graph
            with guard_lookups(graph):
                for vertex in graph.vertices():
                    px, py = as_point(layout.position(vertex))
                    if region.contains(px, py):
                        picked.add(vertex)
            return picked

        return scan_until_consistent("vertices_in", scan, self.max_retries)

    def nearest_edge(
        self, layout: Layout[V, E], x: float, y: float, max_distance: Optional[float] = None
    ) -> Optional[E]:
        """Return the edge whose segment passes closest to ``(x, y)``.

        Distance is measured to the straight segment between the edge's
        endpoints. Edges whose endpoints sit on the same point are skipped.
        """

        cutoff_sq = self._cutoff_sq(max_distance)

        def scan() -> Optional[E]:
            best_sq = cutoff_sq
            closest: Optional[E] = None
            graph = layout.graph
            with guard_lookups(graph):
                for edge in graph.edges():
                    u, v = incident_pair(graph, edge)
                    x1, y1 = as_point(layout.position(u))
                    x2, y2 = as_point(layout.position(v))
                    dist_sq = segment_distance_sq(x, y, x1, y1, x2, y2)
                    if dist_sq is None:
                        continue
                    if dist_sq < best_sq:
                        best_sq = dist_sq
                        closest = edge
            return closest

        return scan_until_consistent("nearest_edge", scan, self.max_retries)


apply_debug_logging(globals(), logger=logger, skip={"ElementAccessor"})


__all__ = ["ElementAccessor", "RadiusElementAccessor"]
