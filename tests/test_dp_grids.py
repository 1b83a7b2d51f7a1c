import pytest

from algobox.dp_grids import min_path_sum, unique_paths, unique_paths_with_obstacles


@pytest.mark.parametrize(
    "m, n, expected",
    [(3, 7, 28), (3, 2, 3), (7, 3, 28), (3, 3, 6), (1, 1, 1), (1, 5, 1)],
)
def test_unique_paths(m, n, expected):
    assert unique_paths(m, n) == expected


def test_unique_paths_is_symmetric():
    assert unique_paths(4, 9) == unique_paths(9, 4)


def test_unique_paths_rejects_empty_grid():
    with pytest.raises(ValueError):
        unique_paths(0, 3)


def test_unique_paths_with_obstacles_source_case():
    grid = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
    assert unique_paths_with_obstacles(grid) == 2


def test_unique_paths_with_obstacles_blocked_start():
    assert unique_paths_with_obstacles([[1, 0], [0, 0]]) == 0


def test_unique_paths_with_obstacles_blocked_single_row():
    assert unique_paths_with_obstacles([[0, 1, 0]]) == 0


def test_unique_paths_with_obstacles_blocked_column():
    assert unique_paths_with_obstacles([[0], [1], [0]]) == 0


def test_unique_paths_with_obstacles_empty():
    assert unique_paths_with_obstacles([]) == 0


def test_unique_paths_with_no_obstacles_matches_plain():
    grid = [[0] * 7 for _ in range(3)]
    assert unique_paths_with_obstacles(grid) == unique_paths(3, 7)


def test_min_path_sum_source_cases():
    assert min_path_sum([[1, 3, 1], [1, 5, 1], [4, 2, 1]]) == 7
    assert min_path_sum([[1, 2, 3], [4, 5, 6]]) == 12


def test_min_path_sum_leaves_grid_untouched():
    grid = [[1, 3, 1], [1, 5, 1], [4, 2, 1]]
    min_path_sum(grid)
    assert grid == [[1, 3, 1], [1, 5, 1], [4, 2, 1]]


def test_min_path_sum_single_cell():
    assert min_path_sum([[9]]) == 9


def test_min_path_sum_rejects_empty():
    with pytest.raises(ValueError):
        min_path_sum([])