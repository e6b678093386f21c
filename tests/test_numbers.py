from functools import reduce
from itertools import accumulate
from operator import or_, xor

import pytest

from contestkit.numbers import (
    count_house_placements,
    count_triples,
    find_array,
    maximum_even_split,
    maximum_xor,
    min_bit_flips,
    sum_of_three,
    triangular_sum,
)


def test_count_triples_example():
    assert count_triples(5) == 2


@pytest.mark.parametrize("n", [1, 5, 10, 13, 25])
def test_count_triples_even_and_monotone(n):
    assert count_triples(n) % 2 == 0
    assert count_triples(n) <= count_triples(n + 1)


def test_count_triples_small():
    assert count_triples(4) == count_triples(1)


@pytest.mark.parametrize("num", [33, 0, -9, 300])
def test_sum_of_three_consecutive(num):
    result = sum_of_three(num)
    assert sum(result) == num
    assert result == sorted(result)
    assert result[2] - result[0] == 2


@pytest.mark.parametrize("num", [4, 10, -5])
def test_sum_of_three_impossible(num):
    assert sum_of_three(num) == []


@pytest.mark.parametrize("n", [2, 12, 28, 100, 2024])
def test_maximum_even_split_valid(n):
    parts = maximum_even_split(n)
    assert sum(parts) == n
    assert all(p > 0 and p % 2 == 0 for p in parts)
    assert len(set(parts)) == len(parts)
    assert parts == sorted(parts)


@pytest.mark.parametrize("n", [2, 12, 28, 100])
def test_maximum_even_split_is_maximal(n):
    k = len(maximum_even_split(n))
    smallest_with_one_more = sum(range(2, 2 * (k + 1) + 1, 2))
    assert smallest_with_one_more > n


def test_maximum_even_split_odd():
    assert maximum_even_split(7) == []


@pytest.mark.parametrize("a,b", [(10, 7), (3, 4), (0, 0), (255, 0)])
def test_min_bit_flips_properties(a, b):
    assert min_bit_flips(a, b) == min_bit_flips(b, a)
    assert min_bit_flips(a, a) == 0
    assert min_bit_flips(a, b) <= max(a, b).bit_length()


def test_min_bit_flips_all_ones():
    assert min_bit_flips(0, 2**12 - 1) == 12


def test_min_bit_flips_negative():
    with pytest.raises(ValueError):
        min_bit_flips(-1, 3)


def test_triangular_sum_example():
    assert triangular_sum([1, 2, 3, 4, 5]) == 8


def test_triangular_sum_short():
    assert triangular_sum([5]) == 5
    assert triangular_sum([7, 0]) == 7
    assert triangular_sum([0, 0, 0]) == 0


def test_triangular_sum_does_not_modify_input():
    nums = [9, 9, 9, 9]
    triangular_sum(nums)
    assert nums == [9, 9, 9, 9]


def test_triangular_sum_empty():
    with pytest.raises(ValueError):
        triangular_sum([])


@pytest.mark.parametrize("nums", [[3, 2, 4, 6], [1, 2, 3, 9, 2], [0], [16, 1]])
def test_maximum_xor_covers_all_bits(nums):
    result = maximum_xor(nums)
    assert all(result & x == x for x in nums)
    assert result == reduce(or_, nums)


@pytest.mark.parametrize("n", [1, 2, 3, 10, 50])
def test_count_house_placements_growth(n):
    assert count_house_placements(n) < count_house_placements(n + 1)


def test_count_house_placements_example():
    assert count_house_placements(2) == 9


def test_count_house_placements_modulo():
    assert 0 <= count_house_placements(10_000) < 1_000_000_007


@pytest.mark.parametrize("arr", [[5, 7, 2, 3, 2], [13], [0, 0, 1], [255, 1, 254]])
def test_find_array_round_trip(arr):
    pref = list(accumulate(arr, xor))
    assert find_array(pref) == arr


def test_find_array_empty():
    assert find_array([]) == []