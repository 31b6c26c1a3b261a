import pytest

from gridgraph.components import (
    count_components,
    count_provinces,
    has_cycle_bfs,
    has_cycle_dfs,
)


def test_no_edges_every_vertex_is_a_component():
    assert count_components(7, []) == 7


def test_pinned_component_count():
    assert count_components(6, [(0, 1), (1, 2), (3, 4)]) == 3


def test_joining_two_components_reduces_count_by_one():
    edges = [(0, 1), (2, 3), (4, 5)]
    before = count_components(6, edges)
    after = count_components(6, edges + [(1, 2)])
    assert after == before - 1


def test_redundant_edge_keeps_count():
    edges = [(0, 1), (1, 2), (3, 4)]
    assert count_components(5, edges + [(0, 2)]) == count_components(5, edges)


def test_out_of_range_vertex_rejected():
    with pytest.raises(ValueError):
        count_components(3, [(0, 3)])


def test_negative_vertex_rejected():
    with pytest.raises(ValueError):
        count_components(3, [(-1, 0)])


def test_provinces_identity_matrix():
    matrix = [[1 if i == j else 0 for j in range(4)] for i in range(4)]
    assert count_provinces(matrix) == len(matrix)


def test_provinces_agree_with_edge_list():
    matrix = [
        [1, 1, 0, 0, 0],
        [1, 1, 0, 0, 0],
        [0, 0, 1, 0, 1],
        [0, 0, 0, 1, 0],
        [0, 0, 1, 0, 1],
    ]
    assert count_provinces(matrix) == count_components(5, [(0, 1), (2, 4)])


def test_provinces_non_square_rejected():
    with pytest.raises(ValueError):
        count_provinces([[1, 0], [0]])


def test_triangle_has_cycle():
    edges = [(0, 1), (1, 2), (2, 0)]
    assert has_cycle_bfs(3, edges) is True
    assert has_cycle_dfs(3, edges) is True


def test_tree_has_no_cycle():
    edges = [(0, 1), (1, 2), (1, 3), (3, 4)]
    assert has_cycle_bfs(5, edges) is False
    assert has_cycle_dfs(5, edges) is False


def test_cycle_in_second_component():
    edges = [(0, 1), (2, 3), (3, 4), (4, 5), (5, 2)]
    assert has_cycle_bfs(6, edges) is True
    assert has_cycle_dfs(6, edges) is True


def test_self_loop_is_a_cycle():
    assert has_cycle_bfs(2, [(1, 1)]) is True
    assert has_cycle_dfs(2, [(1, 1)]) is True


def test_bfs_cycle_detection_rejects_bad_vertex():
    with pytest.raises(ValueError):
        has_cycle_bfs(2, [(0, 5)])


def test_dfs_cycle_detection_rejects_bad_vertex():
    with pytest.raises(ValueError):
        has_cycle_dfs(2, [(0, 5)])


def test_detectors_agree_on_long_path_and_ring():
    n = 5000
    path = [(i, i + 1) for i in range(n - 1)]
    assert not has_cycle_dfs(n, path)
    assert not has_cycle_bfs(n, path)
    ring = path + [(n - 1, 0)]
    assert has_cycle_dfs(n, ring)
    assert has_cycle_bfs(n, ring)