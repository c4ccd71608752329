import pytest

from symscan.hashing import (
    ascii_sum,
    division_method,
    folding_method,
    midsquare_method,
)


def test_ascii_sum_of_single_letter():
    assert ascii_sum("a") == 97


def test_ascii_sum_empty_is_zero():
    assert ascii_sum("") == 0


def test_ascii_sum_ignores_order():
    assert ascii_sum("abc") == ascii_sum("cab")


def test_ascii_sum_is_additive():
    assert ascii_sum("foo" + "bar") == ascii_sum("foo") + ascii_sum("bar")


def test_division_of_string_matches_division_of_its_sum():
    for word in ["main", "count", "x_1", "identifier"]:
        assert division_method(word, 100) == division_method(ascii_sum(word), 100)


def test_division_of_small_int_key_is_key_itself():
    assert division_method(17, 20) == 17


def test_division_wraps_integer_keys():
    assert division_method(38, 20) == division_method(18, 20)


@pytest.mark.parametrize("method", [division_method, midsquare_method, folding_method])
@pytest.mark.parametrize("word", ["a", "zz", "symbol_table", "_tmp9", "x" * 40])
def test_hashes_fall_inside_table(method, word):
    for size in (1, 7, 11, 23, 100):
        assert 0 <= method(word, size) < size


@pytest.mark.parametrize("method", [division_method, midsquare_method, folding_method])
def test_anagrams_collide(method):
    assert method("listen", 23) == method("silent", 23)


def test_folding_equals_division_below_four_digits():
    for word in ["a", "alpha", "beta_gamma"]:
        assert ascii_sum(word) < 10000
        assert folding_method(word, 100) == division_method(word, 100)


def test_folding_of_zero_key_is_zero():
    assert folding_method("", 11) == 0


def test_midsquare_of_zero_key_is_zero():
    assert midsquare_method("", 11) == 0


@pytest.mark.parametrize("method", [division_method, midsquare_method, folding_method])
@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_table_size_rejected(method, size):
    with pytest.raises(ValueError):
        method("abc", size)