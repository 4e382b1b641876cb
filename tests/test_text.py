import pytest

from algosolve.text import (
    appeal_sum,
    are_almost_equal,
    can_be_valid,
    count_mentions,
    max_num_of_substrings,
    minimum_length,
    repeated_string_match,
    shifting_letters,
    word_subsets,
)


def test_repeated_string_match_is_minimal():
    a, b = "abcd", "cdabcdab"
    copies = repeated_string_match(a, b)
    assert b in a * copies
    assert b not in a * (copies - 1)


def test_repeated_string_match_single_copy():
    assert repeated_string_match("hello", "ell") == 1


def test_repeated_string_match_impossible():
    assert repeated_string_match("abc", "wxyz") == -1


def test_repeated_string_match_empty_pattern_raises():
    with pytest.raises(ValueError):
        repeated_string_match("", "a")


def test_word_subsets_selects_universal_words():
    words1 = ["amazon", "apple", "facebook", "google", "leetcode"]
    assert word_subsets(words1, ["e", "o"]) == ["facebook", "google", "leetcode"]


def test_word_subsets_respects_multiplicity():
    words1 = ["amazon", "apple", "facebook", "google", "leetcode"]
    assert word_subsets(words1, ["oo"]) == ["facebook", "google"]


def test_word_subsets_without_requirements_keeps_all():
    words1 = ["x", "yy", "zzz"]
    assert word_subsets(words1, []) == words1


def test_max_num_of_substrings_first_example():
    assert max_num_of_substrings("adefaddaccc") == ["e", "f", "ccc"]


def test_max_num_of_substrings_second_example():
    assert max_num_of_substrings("abbaccd") == ["d", "bb", "cc"]


def test_max_num_of_substrings_pieces_are_disjoint_substrings():
    s = "abcabcxyzzy"
    pieces = max_num_of_substrings(s)
    assert all(piece in s for piece in pieces)
    letters = [ch for piece in pieces for ch in set(piece)]
    assert len(letters) == len(set(letters))
    for piece in pieces:
        for ch in set(piece):
            assert piece.count(ch) == s.count(ch)


def test_are_almost_equal_single_swap():
    assert are_almost_equal("bank", "kanb")


def test_are_almost_equal_identical():
    assert are_almost_equal("kelb", "kelb")


@pytest.mark.parametrize(
    "s1, s2",
    [("attack", "defend"), ("abcd", "dcba"), ("ab", "ac"), ("aa", "bb")],
)
def test_are_almost_equal_rejects(s1, s2):
    assert not are_almost_equal(s1, s2)


@pytest.mark.parametrize(
    "s, locked",
    [("))()))", "010100"), ("()()", "0000"), (")(", "00"), ("()", "11")],
)
def test_can_be_valid_accepts(s, locked):
    assert can_be_valid(s, locked)


@pytest.mark.parametrize(
    "s, locked",
    [(")", "0"), ("(((", "111"), ("))", "11"), ("(()", "000")],
)
def test_can_be_valid_rejects(s, locked):
    assert not can_be_valid(s, locked)


def test_can_be_valid_length_mismatch_raises():
    with pytest.raises(ValueError):
        can_be_valid("()", "0")


def test_appeal_sum_examples():
    assert appeal_sum("abbca") == 28
    assert appeal_sum("code") == 20


def test_appeal_sum_repeated_letter_counts_substrings():
    s = "aaaa"
    assert appeal_sum(s) == sum(range(len(s) + 1))


def test_shifting_letters_example():
    assert shifting_letters("abc", [[0, 1, 0], [1, 2, 1], [0, 2, 1]]) == "ace"


def test_shifting_letters_round_trip():
    s = "zebra"
    forward = shifting_letters(s, [[0, 4, 1], [1, 3, 1]])
    assert forward != s
    assert shifting_letters(forward, [[0, 4, 0], [1, 3, 0]]) == s


def test_shifting_letters_full_cycle_is_identity():
    s = "wxyz"
    assert shifting_letters(s, [[0, 3, 1]] * 26) == s


def test_minimum_length_distinct_letters_unchanged():
    s = "abcde"
    assert minimum_length(s) == len(s)


def test_minimum_length_odd_run_collapses():
    assert minimum_length("aaa") == minimum_length("a")
    assert minimum_length("aaaa") == minimum_length("aa")


def test_minimum_length_never_grows():
    s = "abaacbcbb"
    assert minimum_length(s) <= len(s)


def test_count_mentions_all():
    events = [["MESSAGE", "1", "ALL"], ["MESSAGE", "5", "ALL"]]
    assert count_mentions(3, events) == [len(events)] * 3


def test_count_mentions_here_skips_offline_user():
    events = [["MESSAGE", "10", "HERE"], ["OFFLINE", "10", "0"]]
    assert count_mentions(2, events) == [0, 1]


def test_count_mentions_user_returns_after_sixty():
    back = [["OFFLINE", "10", "0"], ["MESSAGE", "70", "HERE"]]
    still_away = [["OFFLINE", "10", "0"], ["MESSAGE", "69", "HERE"]]
    assert count_mentions(2, back) == [1, 1]
    assert count_mentions(2, still_away) == [0, 1]


def test_count_mentions_ids_counted_per_token_even_when_offline():
    events = [
        ["MESSAGE", "71", "HERE"],
        ["OFFLINE", "11", "0"],
        ["MESSAGE", "10", "id1 id0"],
    ]
    assert count_mentions(2, events) == [2, 2]


def test_count_mentions_ignores_bad_tokens():
    events = [["MESSAGE", "1", "id idx id9 hello id0 id0"]]
    assert count_mentions(2, events) == [2, 0]


def test_count_mentions_unknown_offline_user_raises():
    with pytest.raises(ValueError):
        count_mentions(1, [["OFFLINE", "1", "5"]])