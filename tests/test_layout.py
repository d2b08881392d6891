import pytest

from graphpick import LayoutSnapshot, RadiusElementAccessor, SimpleGraph, StaticLayout
from graphpick.layout import incident_pair


def _square():
    graph = SimpleGraph()
    graph.add_edge("top", "A", "B")
    graph.add_edge("right", "B", "C")
    layout = StaticLayout(
        graph,
        {"A": (0, 0), "B": (2, 0), "C": (2, 2)},
    )
    return graph, layout


def test_static_layout_positions_are_floats():
    _, layout = _square()
    assert layout.position("B") == (2.0, 0.0)
    layout.set_position("B", 3, 1)
    assert layout.position("B") == (3.0, 1.0)


def test_static_layout_missing_position():
    graph, layout = _square()
    graph.add_vertex("D")
    with pytest.raises(KeyError, match="no position"):
        layout.position("D")


@pytest.mark.parametrize("default, expected", [((9.0, 9.0), (9.0, 9.0)), (lambda v: (len(v), 0), (1.0, 0.0))])
def test_static_layout_default_position(default, expected):
    graph = SimpleGraph()
    graph.add_vertex("D")
    layout = StaticLayout(graph, default=default)
    assert layout.position("D") == expected


def test_snapshot_is_isolated_from_later_changes():
    graph, layout = _square()
    snapshot = layout.snapshot()
    graph.remove_vertex("C")
    layout.set_position("A", 100.0, 100.0)

    assert list(snapshot.vertices()) == ["A", "B", "C"]
    assert list(snapshot.edges()) == ["top", "right"]
    assert snapshot.position("A") == (0.0, 0.0)
    assert snapshot.graph is snapshot

    accessor = RadiusElementAccessor()
    assert accessor.nearest_vertex(snapshot, 2.0, 2.0) == "C"
    assert accessor.nearest_edge(snapshot, 2.1, 1.0) == "right"


def test_snapshot_is_immutable():
    _, layout = _square()
    snapshot = layout.snapshot()
    with pytest.raises(AttributeError):
        snapshot._positions = {}
    with pytest.raises(KeyError):
        snapshot.position("Z")


def test_snapshot_rejects_dangling_edges():
    with pytest.raises(ValueError, match="without a position"):
        LayoutSnapshot({"A": (0.0, 0.0)}, {"e": ("A", "B")})


def test_incident_pair_shapes():
    class _Incidence:
        def __init__(self, ends):
            self.ends = ends

        def incident_vertices(self, edge):
            return self.ends

    assert incident_pair(_Incidence(["u", "v"]), "e") == ("u", "v")
    assert incident_pair(_Incidence({"u"}), "e") == ("u", "u")
    with pytest.raises(ValueError, match="expected 2"):
        incident_pair(_Incidence(["u", "v", "w"]), "e")
