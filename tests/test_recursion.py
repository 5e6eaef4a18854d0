import math

import pytest

from algokit.fibonacci import fib_iterative
from algokit.recursion import (
    count_up,
    digit_sum,
    fibo_one_based,
    is_palindrome,
    n_to_one,
    name_countdown,
    one_to_n,
    pattern_ascending,
    pattern_descending,
    pattern_mirror,
    recursive_factorial,
    reverse_in_place,
    sum_to_n,
)


def test_count_up_pinned():
    assert count_up(3) == [0, 1, 2]


@pytest.mark.parametrize("limit", [0, 1, 4, 9])
def test_count_up_positions(limit):
    result = count_up(limit)
    assert len(result) == limit
    assert all(value == index for index, value in enumerate(result))


def test_name_countdown():
    lines = name_countdown("Sayem", 3)
    assert len(lines) == 3
    assert lines[0] == "Sayem 3"
    assert lines[-1] == "Sayem 1"
    assert name_countdown("Sayem", 0) == []


@pytest.mark.parametrize("n", [0, 1, 5, 12])
def test_one_to_n_and_back(n):
    up = one_to_n(n)
    assert len(up) == n
    assert n_to_one(n) == up[::-1]
    if n:
        assert up[0] == 1
        assert up[-1] == n


@pytest.mark.parametrize("n", [1, 2, 4, 10])
def test_recursive_factorial_matches_math(n):
    assert recursive_factorial(n) == math.factorial(n)


def test_recursive_factorial_rejects_zero():
    with pytest.raises(ValueError):
        recursive_factorial(0)


@pytest.mark.parametrize("n", [1, 5, 30])
def test_sum_to_n_steps(n):
    assert sum_to_n(n) - sum_to_n(n - 1) == n


def test_sum_to_n_base_and_error():
    assert sum_to_n(0) == 0
    with pytest.raises(ValueError):
        sum_to_n(-1)


def test_digit_sum_pinned():
    assert digit_sum(786) == 21


@pytest.mark.parametrize("n", [0, 7, 786, 12345])
def test_digit_sum_properties(n):
    assert digit_sum(n * 10) == digit_sum(n)
    assert digit_sum(-n) == -digit_sum(n)


def test_is_palindrome():
    assert is_palindrome("lool") is True
    assert is_palindrome("abc") is False
    assert is_palindrome("") is True
    text = "sayem"
    assert is_palindrome(text + text[::-1]) is True


@pytest.mark.parametrize("values", [[], [1], [1, 2], [5, 4, 9, 2, 7]])
def test_reverse_in_place(values):
    original = list(values)
    work = list(values)
    assert reverse_in_place(work) is None
    assert work == original[::-1]
    reverse_in_place(work)
    assert work == original


@pytest.mark.parametrize("n", [1, 3, 8])
def test_pattern_ascending_and_descending(n):
    rows = pattern_ascending(n)
    assert len(rows) == n
    assert all(row == one_to_n(len(row)) for row in rows)
    assert [len(row) for row in rows] == one_to_n(n)
    assert pattern_descending(n) == rows[::-1]


@pytest.mark.parametrize("n", [1, 2, 4])
def test_pattern_mirror(n):
    rows = pattern_mirror(n)
    assert len(rows) == 2 * n - 1
    assert rows == rows[::-1]
    assert rows[0] == one_to_n(n)
    assert rows[n - 1] == [1]


def test_pattern_mirror_rejects_zero():
    with pytest.raises(ValueError):
        pattern_mirror(0)


@pytest.mark.parametrize("n", [1, 2, 5, 15])
def test_fibo_one_based_matches_fibonacci(n):
    assert fibo_one_based(n) == fib_iterative(n - 1)


def test_fibo_one_based_pinned_and_error():
    assert fibo_one_based(5) == 3
    with pytest.raises(ValueError):
        fibo_one_based(0)