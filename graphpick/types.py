from __future__ import annotations

from typing import Hashable, Iterable, Protocol, Sequence, Tuple, TypeVar, runtime_checkable

V = TypeVar("V", bound=Hashable)
E = TypeVar("E", bound=Hashable)

Point = Tuple[float, float]
PointLike = Sequence[float]


class ConcurrentModificationError(RuntimeError):
    """Raised when a graph changes structure while it is being enumerated."""


class PickBusyError(RuntimeError):
    """Raised when a scan kept observing concurrent mutation past the retry cap."""

    def __init__(self, operation: str, attempts: int):
        super().__init__(
            f"{operation} gave up after {attempts} attempts: graph kept changing during the scan"
        )
        self.operation = operation
        self.attempts = attempts


@runtime_checkable
class Graph(Protocol[V, E]):
    """Read side of a graph as consumed by the picking code."""

    def vertices(self) -> Iterable[V]:
        ...

    def edges(self) -> Iterable[E]:
        ...

    def incident_vertices(self, edge: E) -> Iterable[V]:
        ...


@runtime_checkable
class Layout(Protocol[V, E]):
    """Maps vertices of :attr:`graph` to plane coordinates."""

    @property
    def graph(self) -> Graph[V, E]:
        ...

    def position(self, vertex: V) -> PointLike:
        ...


@runtime_checkable
class Shape(Protocol):
    def contains(self, x: float, y: float) -> bool:
        ...


__all__ = [
    "V",
    "E",
    "Point",
    "PointLike",
    "ConcurrentModificationError",
    "PickBusyError",
    "Graph",
    "Layout",
    "Shape",
]
