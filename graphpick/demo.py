import logging

from . import RadiusElementAccessor, Rectangle, SimpleGraph, StaticLayout

POSITIONS = {
    "A": (0.0, 0.0),
    "B": (10.0, 0.0),
    "C": (5.0, 5.0),
}


def run():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

    graph = SimpleGraph()
    graph.add_edge("A-B", "A", "B")
    graph.add_edge("B-C", "B", "C")
    graph.add_edge("C-A", "C", "A")
    layout = StaticLayout(graph, POSITIONS)
    accessor = RadiusElementAccessor(max_distance=4.0)

    for x, y in [(1.0, 1.0), (5.0, 3.0), (20.0, 20.0)]:
        vertex = accessor.nearest_vertex(layout, x, y)
        edge = accessor.nearest_edge(layout, x, y)
        print(f"({x}, {y}): vertex={vertex} edge={edge}")

    region = Rectangle.from_corners(-1.0, -1.0, 6.0, 6.0)
    print(f"Vertices in {region}: {sorted(accessor.vertices_in(layout, region))}")

    snapshot = layout.snapshot()
    graph.remove_vertex("C")
    print(f"Snapshot still sees C: {accessor.nearest_vertex(snapshot, 5.0, 5.0)}")


if __name__ == "__main__":
    run()
