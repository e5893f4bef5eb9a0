from itertools import combinations

import pytest

from algokit.strings import (
    are_anagrams,
    dual_palindromes,
    is_palindrome,
    max_beads,
    subsequences,
    to_base,
)


def test_anagram_example_from_driver():
    assert not are_anagrams("gram", "arm")


@pytest.mark.parametrize("word", ["gram", "listen", "aabbc", ""])
def test_reversed_word_is_anagram(word):
    assert are_anagrams(word, word[::-1])


def test_same_length_different_letters_not_anagram():
    assert not are_anagrams("abc", "abd")


def test_subsequences_order():
    assert list(subsequences("ab")) == ["", "b", "a", "ab"]


@pytest.mark.parametrize("text", ["", "x", "abc", "abcd"])
def test_subsequences_count_and_content(text):
    result = list(subsequences(text))
    assert len(result) == 2 ** len(text)
    expected = {
        "".join(chosen)
        for size in range(len(text) + 1)
        for chosen in combinations(text, size)
    }
    assert set(result) == expected


@pytest.mark.parametrize("base", range(2, 21))
@pytest.mark.parametrize("number", [0, 1, 7, 25, 255, 1000, 123456])
def test_to_base_round_trip(number, base):
    assert int(to_base(number, base), base) == number


def test_to_base_binary():
    assert to_base(5, 2) == "101"


@pytest.mark.parametrize("base", [0, 1, 21])
def test_to_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        to_base(10, base)


def test_to_base_rejects_negative():
    with pytest.raises(ValueError):
        to_base(-3, 10)


def test_is_palindrome():
    assert is_palindrome("abba")
    assert is_palindrome("aba")
    assert is_palindrome("")
    assert not is_palindrome("abc")


def test_dual_palindromes_sample():
    assert dual_palindromes(3, 25) == [26, 27, 28]


def test_dual_palindromes_invariants():
    start = 100
    result = dual_palindromes(5, start)
    assert len(result) == 5
    assert result == sorted(set(result))
    assert all(number > start for number in result)
    for number in result:
        hits = sum(is_palindrome(to_base(number, base)) for base in range(2, 11))
        assert hits >= 2


def test_dual_palindromes_zero_count():
    assert dual_palindromes(0, 10) == []


def test_max_beads_sample():
    assert max_beads("wwwbbrwrbrbrrbrbrwrwwrbwrwrrb") == 11


def test_max_beads_all_white_takes_everything():
    assert max_beads("wwww") == len("wwww")


def test_max_beads_two_colours_take_everything():
    assert max_beads("rrbb") == len("rrbb")


def test_max_beads_empty():
    assert max_beads("") == 0


def test_max_beads_bounded_by_length():
    beads = "rbrbrbwwrb"
    assert 0 < max_beads(beads) <= len(beads)