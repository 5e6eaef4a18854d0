import pytest

from algokit.combinatorics import count_not_divisible, factorial, n_choose_r, n_permute_r


def _brute_not_divisible(n, divisors):
    return sum(1 for x in range(1, n + 1) if all(x % d for d in divisors))


@pytest.mark.parametrize(
    "n, divisors",
    [(100, [2, 3]), (50, [4, 6, 9]), (1000, [2, 3, 5, 7]), (30, [5]), (17, [4, 4])],
)
def test_count_not_divisible_matches_direct_count(n, divisors):
    assert count_not_divisible(n, divisors) == _brute_not_divisible(n, divisors)


def test_count_not_divisible_with_one_is_zero():
    assert count_not_divisible(100, [3, 1, 5]) == 0


def test_count_not_divisible_no_divisors():
    assert count_not_divisible(42, []) == 42


def test_count_not_divisible_zero_divisor_raises():
    with pytest.raises(ValueError):
        count_not_divisible(10, [0, 2])


@pytest.mark.parametrize("n", range(0, 15))
def test_choose_symmetry_and_edges(n):
    for r in range(n + 1):
        assert n_choose_r(n, r) == n_choose_r(n, n - r)
    assert n_choose_r(n, 0) == 1
    assert n_choose_r(n, n) == 1


@pytest.mark.parametrize("n", range(1, 15))
def test_choose_pascal_rule(n):
    for r in range(1, n):
        assert n_choose_r(n, r) == n_choose_r(n - 1, r - 1) + n_choose_r(n - 1, r)


def test_choose_row_sums_to_power_of_two():
    assert sum(n_choose_r(10, r) for r in range(11)) == 2**10


@pytest.mark.parametrize("r", [-1, 6])
def test_choose_invalid_raises(r):
    with pytest.raises(ValueError):
        n_choose_r(5, r)


def test_factorial_values():
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(5) == 120


@pytest.mark.parametrize("n", range(1, 20))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


@pytest.mark.parametrize("n, r", [(5, 2), (10, 3), (7, 7), (6, 0)])
def test_permutations_relate_to_combinations(n, r):
    assert n_permute_r(n, r) == n_choose_r(n, r) * factorial(r)


def test_permute_all_is_factorial():
    assert n_permute_r(8, 8) == factorial(8)