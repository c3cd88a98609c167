import pytest

from dsakit.recursion import is_palindrome, reverse_in_place, reversed_list

SAMPLES = [[], [1], [1, 2], [1, 2, 3, 4, 5, 6, 7], ["a", "b", "b", "c"]]


@pytest.mark.parametrize("items", SAMPLES)
def test_reversed_list_round_trip(items):
    original = list(items)
    result = reversed_list(items)
    assert items == original
    assert reversed_list(result) == original
    assert len(result) == len(original)
    if original:
        assert result[0] == original[-1]
        assert result[-1] == original[0]


def test_reversed_list_accepts_iterators():
    assert reversed_list(iter([1, 2, 3])) == reversed_list([1, 2, 3])


@pytest.mark.parametrize("items", SAMPLES)
def test_reverse_in_place_matches_reversed_list(items):
    data = list(items)
    expected = reversed_list(items)
    assert reverse_in_place(data) is None
    assert data == expected


def test_reverse_in_place_twice_restores():
    data = [1, 2, 3, 4, 5, 6, 7]
    reverse_in_place(data)
    reverse_in_place(data)
    assert data == [1, 2, 3, 4, 5, 6, 7]


@pytest.mark.parametrize("text", ["abba", "", "x", "racecar", "abc", "ab", "abca"])
def test_is_palindrome_matches_reversal(text):
    assert is_palindrome(text) == (text == "".join(reversed_list(text)))


def test_source_example_is_palindrome():
    assert is_palindrome("abba") is True
    assert is_palindrome("abbc") is False