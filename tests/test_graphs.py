import pytest

from labkit.graphs import (
    bfs_distances,
    bfs_order,
    dijkstra,
    find_source,
    follows_sequence,
    is_path,
    knight_graph,
    shortest_path,
)

TREE = [[1, 2], [3, 4], [5, 6], [], [], [], []]
DAG = [[1, 2], [3], [3, 4], [5], [5], []]
WEIGHTED = [
    [(1, 4), (2, 2)],
    [(3, 2), (2, 5)],
    [(3, 1), (4, 7)],
    [(4, 3), (5, 4)],
    [],
    [(4, 1)],
]


def test_bfs_order_visits_by_level():
    order = bfs_order(TREE, 0)
    assert sorted(order) == list(range(7))
    assert order[0] == 0
    assert set(order[1:3]) == {1, 2}
    assert set(order[3:]) == {3, 4, 5, 6}


def test_bfs_order_skips_unreachable():
    assert bfs_order(TREE, 1) == [1, 3, 4]


def test_knight_graph_is_symmetric_and_in_range():
    n = 5
    graph = knight_graph(n)
    assert len(graph) == n * n
    for u, neighbours in enumerate(graph):
        for v in neighbours:
            assert 0 <= v < n * n
            assert u in graph[v]


def test_knight_graph_center_has_all_moves():
    assert len(knight_graph(5)[12]) == 8


def test_knight_graph_negative_raises():
    with pytest.raises(ValueError):
        knight_graph(-1)


def test_bfs_distances_respect_edges():
    graph = knight_graph(5)
    distances = bfs_distances(graph, 24)
    assert distances[24] == 0
    assert all(d >= 0 for d in distances)
    for u, neighbours in enumerate(graph):
        for v in neighbours:
            assert distances[v] <= distances[u] + 1


def test_bfs_distances_unreachable_is_minus_one():
    distances = bfs_distances([[1], [], []], 0)
    assert distances == [0, 1, -1]


def test_dijkstra_relaxed_everywhere():
    distances, predecessors = dijkstra(WEIGHTED, 0)
    assert distances[0] == 0
    assert predecessors[0] is None
    for u, arcs in enumerate(WEIGHTED):
        for v, weight in arcs:
            assert distances[v] <= distances[u] + weight
    for v, parent in enumerate(predecessors):
        if parent is not None:
            weight = min(w for t, w in WEIGHTED[parent] if t == v)
            assert distances[v] == distances[parent] + weight


def test_dijkstra_known_distance():
    distances, _ = dijkstra(WEIGHTED, 0)
    assert distances[3] == 3


def test_dijkstra_unreachable():
    distances, predecessors = dijkstra([[(1, 1)], [], []], 0)
    assert distances[2] is None
    assert predecessors[2] is None


def test_dijkstra_bad_source():
    with pytest.raises(IndexError):
        dijkstra(WEIGHTED, 9)


def test_shortest_path_walks_real_arcs():
    _, predecessors = dijkstra(WEIGHTED, 0)
    for target in range(len(WEIGHTED)):
        path = shortest_path(predecessors, target)
        assert path[0] == 0
        assert path[-1] == target
        for u, v in zip(path, path[1:]):
            assert any(t == v for t, _ in WEIGHTED[u])


def test_find_source():
    assert find_source(DAG) == 0
    assert find_source([[1], [0]]) is None


def test_is_path_examples():
    assert is_path(DAG, [0, 1, 3, 5]) is True
    assert is_path(DAG, [2, 4, 5, 3]) is False
    assert is_path(DAG, [0, 2, 4]) is True
    assert is_path(DAG, [0]) is False


def test_follows_sequence_uses_first_vertex_neighbours():
    assert follows_sequence(DAG, [0, 1, 3, 5]) is False
    assert follows_sequence(DAG, [2, 4, 5, 3]) is False
    assert follows_sequence(DAG, [0, 2, 4]) is False
    assert follows_sequence(DAG, [0, 1, 2]) is True
    assert follows_sequence(DAG, [0]) is False


def test_follows_sequence_empty_raises():
    with pytest.raises(ValueError):
        follows_sequence(DAG, [])