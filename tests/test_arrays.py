import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.arrays import (
    appear_once,
    max_profit,
    missing_number,
    move_zeroes,
    next_permutation,
    rearrange_by_sign,
    rearrange_by_sign_uneven,
    repeating_and_missing,
    single_number,
    trapped_rain_water,
)


@given(values=st.lists(st.integers(min_value=-5, max_value=5)))
def test_move_zeroes_invariants(values):
    result = move_zeroes(values)
    non_zero = [v for v in values if v != 0]
    assert result[: len(non_zero)] == non_zero
    assert all(v == 0 for v in result[len(non_zero):])
    assert len(result) == len(values)


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [1, 2, 2, 3], ["a", "b", "c"]])
def test_next_permutation_walks_all_permutations(values):
    ordered = sorted(set(itertools.permutations(values)))
    for current, following in zip(ordered, ordered[1:]):
        assert next_permutation(current) == list(following)
    assert next_permutation(ordered[-1]) == list(ordered[0])


def test_next_permutation_does_not_modify_input():
    values = [1, 3, 2]
    result = next_permutation(values)
    assert values == [1, 3, 2]
    assert sorted(result) == sorted(values)


@given(
    positives=st.lists(st.integers(min_value=0, max_value=50), max_size=10),
    data=st.data(),
)
def test_rearrange_by_sign(positives, data):
    negatives = data.draw(
        st.lists(
            st.integers(min_value=-50, max_value=-1),
            min_size=len(positives),
            max_size=len(positives),
        )
    )
    result = rearrange_by_sign(positives + negatives)
    assert result[0::2] == positives
    assert result[1::2] == negatives


def test_rearrange_by_sign_rejects_uneven():
    with pytest.raises(ValueError):
        rearrange_by_sign([1, 2, -3])


def test_rearrange_by_sign_uneven_example():
    assert rearrange_by_sign_uneven([1, 2, -4, -5]) == [1, -4, 2, -5]


@given(values=st.lists(st.integers(min_value=-20, max_value=20)))
def test_rearrange_by_sign_uneven_invariants(values):
    result = rearrange_by_sign_uneven(values)
    positives = [v for v in values if v > 0]
    others = [v for v in values if v <= 0]
    paired = min(len(positives), len(others))
    head = result[: 2 * paired]
    assert head[0::2] == positives[:paired]
    assert head[1::2] == others[:paired]
    assert result[2 * paired:] == positives[paired:] + others[paired:]


def test_trapped_rain_water_example():
    assert trapped_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


@given(values=st.lists(st.integers(min_value=0, max_value=100)))
def test_trapped_rain_water_monotonic_holds_nothing(values):
    assert trapped_rain_water(sorted(values)) == 0
    assert trapped_rain_water(sorted(values, reverse=True)) == 0


@given(height=st.integers(min_value=1, max_value=100))
def test_trapped_rain_water_single_valley(height):
    assert trapped_rain_water([height, 0, height]) == height


@given(values=st.lists(st.integers(min_value=0, max_value=1000), min_size=1))
def test_max_profit_bounds(values):
    result = max_profit(values)
    assert 0 <= result <= max(values) - min(values)


@given(values=st.lists(st.integers(min_value=0, max_value=1000), min_size=2, unique=True))
def test_max_profit_increasing(values):
    ordered = sorted(values)
    assert max_profit(ordered) == ordered[-1] - ordered[0]


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 4, 1]) == 0


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([])


@given(
    pairs=st.lists(st.integers(min_value=0, max_value=10_000), unique=True),
    lone=st.integers(min_value=10_001, max_value=20_000),
)
def test_single_number(pairs, lone):
    values = pairs + [lone] + pairs[::-1]
    assert single_number(values) == lone
    assert appear_once(values) == lone


def test_appear_once_example():
    assert appear_once([2, 2, 3, 3, 5, 8, 8]) == 5


def test_appear_once_raises_when_all_repeat():
    with pytest.raises(ValueError):
        appear_once([4, 4, 9, 9])


@given(data=st.data(), n=st.integers(min_value=0, max_value=60))
def test_missing_number(data, n):
    gone = data.draw(st.integers(min_value=0, max_value=n))
    values = data.draw(st.permutations([i for i in range(n + 1) if i != gone]))
    assert missing_number(values) == gone


def test_repeating_and_missing_example():
    assert repeating_and_missing([3, 1, 2, 5, 4, 6, 7, 5]) == (5, 8)


@given(data=st.data(), n=st.integers(min_value=2, max_value=50))
def test_repeating_and_missing_constructed(data, n):
    gone = data.draw(st.integers(min_value=1, max_value=n))
    twice = data.draw(st.integers(min_value=1, max_value=n).filter(lambda v: v != gone))
    values = [i for i in range(1, n + 1) if i != gone] + [twice]
    shuffled = data.draw(st.permutations(values))
    assert repeating_and_missing(shuffled) == (twice, gone)


@pytest.mark.parametrize("values", [[1, 2, 3], [0, 1], [1, 5, 2]])
def test_repeating_and_missing_invalid(values):
    with pytest.raises(ValueError):
        repeating_and_missing(values)