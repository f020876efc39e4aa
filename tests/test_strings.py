import pytest

from algokit.strings import (
    is_anagram,
    is_isomorphic,
    largest_box_string,
    length_of_last_word,
    longest_common_prefix,
    palindrome_partitions,
)


def test_lcp_example():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


@pytest.mark.parametrize("strs", [["dog", "racecar", "car"], ["interview", "internet", "interval"], ["a"]])
def test_lcp_is_prefix_of_all(strs):
    prefix = longest_common_prefix(strs)
    assert all(s.startswith(prefix) for s in strs)
    assert len(prefix) <= min(len(s) for s in strs)


def test_lcp_identical_and_empty_member():
    assert longest_common_prefix(["same", "same"]) == "same"
    assert longest_common_prefix(["abc", ""]) == ""


def test_lcp_empty_list_raises():
    with pytest.raises(ValueError):
        longest_common_prefix([])


def test_isomorphic_cases():
    assert is_isomorphic("egg", "add")
    assert is_isomorphic("paper", "title")
    assert not is_isomorphic("foo", "bar")
    assert not is_isomorphic("badc", "baba")


@pytest.mark.parametrize("s, t", [("egg", "add"), ("foo", "bar"), ("ab", "aa")])
def test_isomorphic_symmetric(s, t):
    assert is_isomorphic(s, t) == is_isomorphic(t, s)


def test_isomorphic_length_mismatch():
    assert not is_isomorphic("ab", "abc")


def test_anagram_cases():
    assert is_anagram("anagram", "nagaram")
    assert not is_anagram("rat", "car")
    assert not is_anagram("ab", "abb")


def test_anagram_of_reversal():
    word = "listening"
    assert is_anagram(word, word[::-1])


@pytest.mark.parametrize(
    "s, last",
    [("Hello World", "World"), ("   fly me   to   the moon  ", "moon"), ("luffy is still joyboy", "joyboy")],
)
def test_length_of_last_word(s, last):
    assert length_of_last_word(s) == len(last)


def test_length_of_last_word_blank():
    assert length_of_last_word("") == 0
    assert length_of_last_word("    ") == 0


def test_largest_box_example():
    assert largest_box_string("dbca", 2) == "dbc"


def test_largest_box_single_friend_keeps_word():
    assert largest_box_string("abc", 1) == "abc"


@pytest.mark.parametrize("word, friends", [("gggg", 4), ("dbca", 2), ("abzab", 3), ("zazb", 2)])
def test_largest_box_invariants(word, friends):
    result = largest_box_string(word, friends)
    limit = len(word) - friends + 1
    assert result in word
    assert 0 < len(result) <= limit
    assert all(word[i : i + limit] <= result for i in range(len(word)))


def test_largest_box_too_many_friends():
    assert largest_box_string("ab", 5) == ""


def test_palindrome_partitions_example():
    assert palindrome_partitions("aab") == [["a", "a", "b"], ["aa", "b"]]


@pytest.mark.parametrize("s", ["aab", "racecar", "abba", "abc"])
def test_palindrome_partitions_invariants(s):
    parts = palindrome_partitions(s)
    assert all("".join(p) == s for p in parts)
    assert all(piece == piece[::-1] for p in parts for piece in p)
    assert [list(s)] == parts[:1]
    assert len({tuple(p) for p in parts}) == len(parts)


def test_palindrome_partitions_single_char():
    assert palindrome_partitions("x") == [["x"]]