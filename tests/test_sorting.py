import pytest

from algokit.algorithms.sorting import bead_sort, bubble_sort, bucket_sort, snail_sort


def test_bubble_sort_source_example():
    assert bubble_sort([5, 3, 8, 4, 6]) == [3, 4, 5, 6, 8]


def test_bubble_sort_does_not_modify_input():
    data = [5, 3, 8, 4, 6]
    bubble_sort(data)
    assert data == [5, 3, 8, 4, 6]


@pytest.mark.parametrize("data", [[], [1], [3, -1, 2, -1, 0], [9, 8, 7, 6, 5, 4]])
def test_bubble_sort_matches_sorted(data):
    assert bubble_sort(data) == sorted(data)


def test_bead_sort_source_example():
    data = [5, 4, 2, 1, 5, 7, 8]
    assert bead_sort(data) == sorted(data)


@pytest.mark.parametrize("data", [[], [0], [0, 0, 3], [10, 1, 10, 0, 4]])
def test_bead_sort_matches_sorted(data):
    assert bead_sort(data) == sorted(data)


def test_bead_sort_rejects_negative():
    with pytest.raises(ValueError):
        bead_sort([3, -1])


def test_bucket_sort_source_example():
    data = [0.871, 0.761, 0.651, 0.7192, 0.8888, 0.712]
    assert bucket_sort(data) == sorted(data)


def test_bucket_sort_empty():
    assert bucket_sort([]) == []


@pytest.mark.parametrize("bad", [[0.5, 1.0], [-0.1, 0.2]])
def test_bucket_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        bucket_sort(bad)


def test_snail_sort_three_by_three():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert snail_sort(matrix) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_snail_sort_five_by_five_visits_every_element_once():
    matrix = [[r * 5 + c + 1 for c in range(5)] for r in range(5)]
    result = snail_sort(matrix)
    assert sorted(result) == list(range(1, 26))
    assert result[:5] == matrix[0]
    assert result[5:9] == [row[4] for row in matrix[1:]]


def test_snail_sort_empty():
    assert snail_sort([]) == []
    assert snail_sort([[]]) == []


def test_snail_sort_rejects_non_square():
    with pytest.raises(ValueError):
        snail_sort([[1, 2, 3], [4, 5, 6]])