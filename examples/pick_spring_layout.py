"""Example: pick elements of a networkx graph laid out with spring_layout."""

import networkx as nx

from graphpick import NetworkXLayout, Polygon, RadiusElementAccessor


def main() -> None:
    graph = nx.petersen_graph()
    layout = NetworkXLayout.from_layout_function(graph, nx.spring_layout, seed=7)
    accessor = RadiusElementAccessor(max_distance=0.25)

    for x, y in [(0.0, 0.0), (0.5, 0.5), (-0.8, 0.1)]:
        print(f"({x}, {y}) -> vertex {accessor.nearest_vertex(layout, x, y)}, "
              f"edge {accessor.nearest_edge(layout, x, y)}")

    lasso = Polygon([(-1.0, -1.0), (0.0, -1.0), (0.0, 1.0), (-1.0, 1.0)])
    print(f"Left half: {sorted(accessor.vertices_in(layout, lasso))}")


if __name__ == "__main__":
    main()
