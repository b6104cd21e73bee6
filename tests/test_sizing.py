import math

import pytest

from salted_bf.sizing import (
    bit_space_size,
    fill_ratio,
    hash_function_count,
    predicted_false_positive_rate,
)


@pytest.mark.parametrize(
    "expected_items, rate, bits",
    [
        (100, 0.01, 959),
        (1000, 0.001, 14378),
        (10, 0.1, 48),
        (1, 0.5, 2),
    ],
)
def test_bit_space_size_golden(expected_items, rate, bits):
    assert bit_space_size(expected_items, rate) == bits


@pytest.mark.parametrize(
    "bits, max_items, k",
    [
        (959, 500, 2),
        (959, 100, 7),
        (14378, 5000, 2),
        (48, 50, 1),
    ],
)
def test_hash_function_count_golden(bits, max_items, k):
    assert hash_function_count(bits, max_items) == k


def test_hash_function_count_uses_max_items_not_bits():
    # Same bit count, smaller index space => more functions.
    assert hash_function_count(959, 100) > hash_function_count(959, 500)


def test_sizing_is_unguarded():
    assert bit_space_size(100, 1.0) == 0
    assert hash_function_count(0, 500) == 0
    with pytest.raises(ValueError):
        bit_space_size(100, 0.0)


def test_fill_ratio():
    assert fill_ratio(500, 2, 0) == 0.0
    assert fill_ratio(500, 2, 100) == pytest.approx(1 - math.exp(-200 / 500), rel=1e-2)


def test_predicted_rate_any_exceeds_all():
    fill = 0.33
    any_rate = predicted_false_positive_rate(fill, 2, "any")
    all_rate = predicted_false_positive_rate(fill, 2, "all")
    assert any_rate == pytest.approx(1 - 0.67 ** 2)
    assert all_rate == pytest.approx(0.33 ** 2)
    assert any_rate > all_rate


def test_predicted_rate_unknown_mode():
    with pytest.raises(ValueError):
        predicted_false_positive_rate(0.5, 2, "some")
