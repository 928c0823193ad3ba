import math

import pytest
from hypothesis import given, strategies as st

from algobox.graphs import INF, dijkstra, floyd_warshall, format_matrix


def test_floyd_warshall_example():
    graph = [[0, 3, INF, 5], [2, 0, INF, 4], [INF, 1, 0, INF], [INF, INF, 2, 0]]
    assert floyd_warshall(graph) == [[0, 3, 7, 5], [2, 0, 6, 4], [3, 1, 0, 5], [5, 3, 2, 0]]


def test_floyd_warshall_leaves_input_untouched():
    graph = [[0, 3, INF], [INF, 0, 1], [INF, INF, 0]]
    snapshot = [row[:] for row in graph]
    floyd_warshall(graph)
    assert graph == snapshot


@st.composite
def matrices(draw):
    size = draw(st.integers(1, 5))
    rows = draw(
        st.lists(st.lists(st.integers(0, 30), min_size=size, max_size=size),
                 min_size=size, max_size=size)
    )
    for i in range(size):
        rows[i][i] = 0
    return rows


@given(matrices())
def test_floyd_warshall_triangle_inequality(graph):
    dist = floyd_warshall(graph)
    size = len(graph)
    for i in range(size):
        assert dist[i][i] == 0
        for j in range(size):
            assert dist[i][j] <= graph[i][j]
            for k in range(size):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_warshall_rejects_ragged_matrix():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


def test_format_matrix_marks_missing_edges():
    assert format_matrix([[0, INF]]) == "   0 INF\n"
    assert format_matrix([[0, math.inf]]) == format_matrix([[0, INF]])


@given(matrices())
def test_format_matrix_cell_widths(graph):
    lines = format_matrix(graph).splitlines()
    assert len(lines) == len(graph)
    assert all(len(line) == 4 * len(graph) for line in lines)


def test_dijkstra_takes_shorter_route():
    edges = [[1, 2, 4], [2, 3, 1], [1, 3, 7]]
    assert dijkstra(3, edges, 1, 3) == 5


def test_dijkstra_unreachable():
    assert dijkstra(3, [[0, 1, 2]], 0, 3) is None


def test_dijkstra_rejects_unknown_vertices():
    with pytest.raises(ValueError):
        dijkstra(2, [[0, 5, 1]], 0, 1)
    with pytest.raises(ValueError):
        dijkstra(2, [[0, 1, 1]], 0, 7)


@st.composite
def edge_graphs(draw):
    size = draw(st.integers(1, 5))
    vertex = st.integers(0, size - 1)
    edges = draw(st.lists(st.tuples(vertex, vertex, st.integers(0, 20)), max_size=8))
    return size, [list(edge) for edge in edges]


@given(edge_graphs())
def test_dijkstra_agrees_with_floyd_warshall(graph):
    size, edges = graph
    matrix = [[0 if i == j else math.inf for j in range(size)] for i in range(size)]
    for u, v, weight in edges:
        matrix[u][v] = min(matrix[u][v], weight)
        matrix[v][u] = min(matrix[v][u], weight)
    shortest = floyd_warshall(matrix)
    for source in range(size):
        for destination in range(size):
            expected = shortest[source][destination]
            found = dijkstra(size - 1, edges, source, destination)
            if expected == math.inf:
                assert found is None
            else:
                assert found == expected