import pytest

from tectonical.hash import hash_in_range, random_hash


def test_random_hash_of_zero_is_the_constant_term():
    assert random_hash(0) == 47


@pytest.mark.parametrize("value", range(-500, 500))
def test_random_hash_stays_in_byte_range(value):
    assert 0 <= random_hash(value) <= 255


@pytest.mark.parametrize(
    "value, expected",
    [(-1, 123), (0, 47), (1, 171), (2, 238), (3, 248), (4, 201), (5, 97)],
)
def test_random_hash_pinned_values(value, expected):
    assert random_hash(value) == expected


def test_random_hash_is_deterministic():
    first = [random_hash(v) for v in range(50)]
    second = [random_hash(v) for v in range(50)]
    assert first == second
    assert first[:6] == [47, 171, 238, 248, 201, 97]


@pytest.mark.parametrize("value", [3, 1000, 123456, 9_999_999])
def test_random_hash_wraps_like_32_bit_integers(value):
    assert random_hash(value) == random_hash(value + 2**32)


def test_random_hash_handles_overflowing_inputs():
    results = {random_hash(v) for v in range(5_000_000, 5_000_200)}
    assert results <= set(range(-256, 256))
    assert len(results) > 1


@pytest.mark.parametrize("maximum", [1, 2, 4, 7, 100, 256, 1000, 5000])
def test_hash_in_range_respects_bounds(maximum):
    for value in range(0, 300):
        assert 0 <= hash_in_range(maximum, value) < maximum


def test_hash_in_range_of_one_is_always_zero():
    assert {hash_in_range(1, v) for v in range(200)} == {0}


def test_hash_in_range_is_deterministic():
    first = [hash_in_range(1000, v) for v in range(100)]
    second = [hash_in_range(1000, v) for v in range(100)]
    assert first == second


def test_hash_in_range_spreads_values():
    assert len({hash_in_range(1000, v) for v in range(300)}) > 50


@pytest.mark.parametrize("maximum", [0, -5])
def test_hash_in_range_rejects_non_positive_maximum(maximum):
    with pytest.raises(ValueError):
        hash_in_range(maximum, 10)