import re

import pytest

from dsakit.strings import check_valid_string, find_max_form, is_match, min_distance


@pytest.mark.parametrize("s, pattern", [
    ("aa", "a"),
    ("aa", "a*"),
    ("ab", ".*"),
    ("aab", "c*a*b"),
    ("mississippi", "mis*is*p*."),
    ("", ""),
    ("", "a*b*"),
    ("abc", "a.c"),
    ("abcd", "d*"),
    ("aaa", "a*a"),
    ("aaa", "ab*a*c*a"),
    ("a", ""),
])
def test_is_match_agrees_with_re(s, pattern):
    assert is_match(s, pattern) == bool(re.fullmatch(pattern, s))


def test_min_distance_identity_and_empty():
    assert min_distance("kitten", "kitten") == 0
    assert min_distance("", "abcd") == len("abcd")
    assert min_distance("abc", "") == len("abc")


def test_min_distance_worked_example():
    assert min_distance("horse", "ros") == 3


@pytest.mark.parametrize("a, b", [("intention", "execution"), ("sunday", "saturday"), ("ab", "ba")])
def test_min_distance_symmetric_and_bounded(a, b):
    d = min_distance(a, b)
    assert d == min_distance(b, a)
    assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))


def test_min_distance_triangle_inequality():
    a, b, c = "flaw", "lawn", "flown"
    assert min_distance(a, c) <= min_distance(a, b) + min_distance(b, c)


@pytest.mark.parametrize("s", ["", "()", "(*)", "(*))", "((**", "*", "(())()", "(*()"])
def test_valid_strings(s):
    assert check_valid_string(s)


@pytest.mark.parametrize("s", [")(", "(", ")", "(()", "**)))", "((*)"[::-1] + ")"])
def test_invalid_strings(s):
    assert not check_valid_string(s)


def test_stars_keep_balanced_string_valid():
    balanced = "(()(()))()"
    for i in range(len(balanced)):
        assert check_valid_string(balanced[:i] + "*" + balanced[i + 1:])


def test_find_max_form_worked_examples():
    assert find_max_form(["10", "0001", "111001", "1", "0"], 5, 3) == 4
    assert find_max_form(["10", "0", "1"], 1, 1) == 2


def test_find_max_form_everything_fits():
    strs = ["01", "0", "1", "0011"]
    assert find_max_form(strs, 100, 100) == len(strs)


def test_find_max_form_zero_budget():
    assert find_max_form(["0", "1", "01"], 0, 0) == 0


def test_find_max_form_monotone_in_budget():
    strs = ["10", "0001", "111001", "1", "0", "11", "00"]
    results = [find_max_form(strs, z, 2) for z in range(6)]
    assert results == sorted(results)
    assert all(r <= len(strs) for r in results)


def test_find_max_form_rejects_negative_budget():
    with pytest.raises(ValueError):
        find_max_form(["0"], -1, 0)