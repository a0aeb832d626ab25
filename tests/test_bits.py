import pytest

from algokit.algorithms.bits import (
    bit_count,
    count_bits_flip,
    count_set_bits,
    hamming_distance,
)


def test_count_set_bits_source_case():
    assert count_set_bits(4) == 1


def test_count_set_bits_negative_uses_64_bits():
    assert count_set_bits(-1) == 64


@pytest.mark.parametrize("n", [0, 1, 7, 255, 1023, 123456789])
def test_count_set_bits_agrees_with_bit_count(n):
    assert count_set_bits(n) == bit_count(n)


@pytest.mark.parametrize("a, b, expected", [(10, 20, 4), (11, 8, 2)])
def test_count_bits_flip_source_cases(a, b, expected):
    assert count_bits_flip(a, b) == expected


def test_count_bits_flip_same_is_zero():
    assert count_bits_flip(12345, 12345) == 0


def test_hamming_distance_source_case():
    assert hamming_distance(11, 2) == 2


def test_hamming_distance_is_symmetric():
    assert hamming_distance(11, 200) == hamming_distance(200, 11)


def test_hamming_distance_strings():
    assert hamming_distance("karolin", "kathrin") == 3


def test_hamming_distance_identical_strings():
    assert hamming_distance("bellshade", "bellshade") == 0


def test_hamming_distance_string_length_mismatch():
    with pytest.raises(ValueError):
        hamming_distance("abc", "ab")


def test_hamming_distance_mixed_types():
    with pytest.raises(TypeError):
        hamming_distance("abc", 3)


def test_bit_count_negative_raises():
    with pytest.raises(ValueError):
        bit_count(-5)