import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit import bits

naturals = st.integers(min_value=0, max_value=2**40)
positions = st.integers(min_value=0, max_value=40)


@given(naturals, positions)
def test_set_then_get(n, i):
    assert bits.get_ith_bit(bits.set_ith_bit(n, i), i) == 1


@given(naturals, positions)
def test_clear_then_get(n, i):
    assert bits.get_ith_bit(bits.clear_ith_bit(n, i), i) == 0


@given(naturals, positions, st.sampled_from([0, 1]))
def test_update_bit(n, i, v):
    result = bits.update_ith_bit(n, i, v)
    assert bits.get_ith_bit(result, i) == v
    assert bits.clear_ith_bit(result, i) == bits.clear_ith_bit(n, i)


def test_update_bit_rejects_bad_value():
    with pytest.raises(ValueError):
        bits.update_ith_bit(5, 1, 2)


@given(naturals, positions)
def test_toggle_twice_is_identity(n, i):
    once = bits.toggle_bit(n, i)
    assert bits.get_ith_bit(once, i) != bits.get_ith_bit(n, i)
    assert bits.toggle_bit(once, i) == n


@given(naturals, st.integers(min_value=0, max_value=20))
def test_clear_last_i_bits(n, i):
    result = bits.clear_last_i_bits(n, i)
    assert result % (1 << i) == 0
    assert result >> i == n >> i


@given(naturals, st.integers(min_value=0, max_value=15), st.integers(min_value=0, max_value=15))
def test_clear_bits_in_range(n, a, b):
    i, j = min(a, b), max(a, b)
    result = bits.clear_bits_in_range(n, i, j)
    for pos in range(j + 5):
        if i <= pos <= j:
            assert bits.get_ith_bit(result, pos) == 0
        else:
            assert bits.get_ith_bit(result, pos) == bits.get_ith_bit(n, pos)


@given(naturals, st.integers(min_value=0, max_value=10), st.integers(min_value=0, max_value=6), st.data())
def test_replace_bits(n, i, span, data):
    j = i + span
    m = data.draw(st.integers(min_value=0, max_value=(1 << (span + 1)) - 1))
    result = bits.replace_bits(n, i, j, m)
    assert (result >> i) & ((1 << (span + 1)) - 1) == m
    assert bits.clear_bits_in_range(result, i, j) == bits.clear_bits_in_range(n, i, j)


@given(naturals, st.integers(min_value=0, max_value=30))
def test_lsb_and_msb_split(n, pos):
    low = bits.clear_msb_till(n, pos)
    high = bits.clear_lsb_till(n, pos)
    assert low | high == n
    assert low & high == 0
    assert low < (1 << (pos + 1))


@given(st.integers(min_value=-1000, max_value=1000))
def test_is_odd(n):
    assert bits.is_odd(n) == (n % 2 == 1)


@given(st.integers(min_value=0, max_value=60))
def test_powers_of_two(k):
    assert bits.is_power_of_two(1 << k)
    if k >= 1:
        assert not bits.is_power_of_two((1 << k) + 1)
        assert not bits.is_power_of_two((1 << k) | 1 << (k - 1)) or k == 0


def test_zero_is_not_power_of_two():
    assert not bits.is_power_of_two(0)
    assert not bits.is_power_of_four(0)


@given(st.integers(min_value=0, max_value=30))
def test_powers_of_four(k):
    assert bits.is_power_of_four(4**k)
    assert not bits.is_power_of_four(2 * 4**k)


@given(naturals)
def test_bit_counts_agree(n):
    expected = bin(n).count("1")
    assert bits.count_set_bits(n) == expected
    assert bits.count_bits_kernighan(n) == expected


def test_bit_counts_reject_negative():
    with pytest.raises(ValueError):
        bits.count_set_bits(-1)
    with pytest.raises(ValueError):
        bits.count_bits_kernighan(-3)


@given(st.integers(min_value=-50, max_value=50), st.integers(min_value=0, max_value=30))
def test_fast_power(base, exp):
    assert bits.fast_power(base, exp) == base**exp


def test_fast_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        bits.fast_power(2, -1)


@given(st.integers(min_value=1, max_value=10**9), st.integers(min_value=0, max_value=10**6))
def test_power_mod_matches_builtin(x, y):
    mod = 10**9 + 7
    assert bits.power_mod(x, y, mod) == pow(x, y, mod)


def test_power_mod_multiple_of_modulus_is_zero():
    assert bits.power_mod(14, 0, 7) == 0


@given(naturals)
def test_binary_round_trip(n):
    encoded = bits.decimal_to_binary(n)
    assert set(str(encoded)) <= {"0", "1"}
    assert bits.binary_to_decimal(encoded) == n


def test_binary_to_decimal_pinned():
    assert bits.binary_to_decimal(10000000) == 128


def test_binary_to_decimal_rejects_negative():
    with pytest.raises(ValueError):
        bits.binary_to_decimal(-101)


def test_binary_string_default_width():
    assert bits.binary_string(6) == "00000000110"


@given(st.integers(min_value=1, max_value=32), st.data())
def test_binary_string_round_trip(width, data):
    n = data.draw(st.integers(min_value=0, max_value=(1 << width) - 1))
    text = bits.binary_string(n, width)
    assert len(text) == width
    assert int(text, 2) == n


@given(st.integers(min_value=1, max_value=2**50))
def test_largest_power_of_two(n):
    p = bits.largest_power_of_two(n)
    assert bits.is_power_of_two(p)
    assert p <= n < 2 * p


def test_largest_power_of_two_of_zero():
    assert bits.largest_power_of_two(0) == 0


@given(st.integers(min_value=1, max_value=2**50))
def test_lowest_set_bit(n):
    p = bits.lowest_set_bit(n)
    assert bits.is_power_of_two(p)
    assert n % p == 0
    assert (n // p) % 2 == 1


@given(st.lists(st.integers(), max_size=8, unique=True))
def test_all_subsets(items):
    subsets = bits.all_subsets(items)
    assert len(subsets) == 2 ** len(items)
    assert subsets[0] == []
    assert subsets[-1] == items
    assert len({tuple(s) for s in subsets}) == len(subsets)


@given(st.lists(st.integers(min_value=0, max_value=10**6)))
def test_sort_by_bits(values):
    result = bits.sort_by_bits(values)
    assert sorted(result) == sorted(values)
    for a, b in zip(result, result[1:]):
        ca, cb = bits.count_set_bits(a), bits.count_set_bits(b)
        assert ca > cb or (ca == cb and a <= b)


def test_hamming_distance_pinned():
    assert bits.hamming_distance(1, 4) == 2


@given(naturals, naturals)
def test_hamming_distance_properties(x, y):
    assert bits.hamming_distance(x, y) == bits.hamming_distance(y, x)
    assert bits.hamming_distance(x, x) == 0
    assert bits.hamming_distance(x, 0) == bits.count_set_bits(x)


@given(st.integers(), st.integers())
def test_xor_swap(a, b):
    assert bits.xor_swap(a, b) == (b, a)