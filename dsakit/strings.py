"""String algorithms: wildcard matching, edit distance and related puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache


def is_match(s: str, pattern: str) -> bool:
    """Return whether ``pattern`` (with ``.`` and ``*``) matches all of ``s``."""

    @lru_cache(maxsize=None)
    def match(i: int, j: int) -> bool:
        if j == len(pattern):
            return i == len(s)
        first = i < len(s) and pattern[j] in (s[i], ".")
        if j + 1 < len(pattern) and pattern[j + 1] == "*":
            return match(i, j + 2) or (first and match(i + 1, j))
        return first and match(i + 1, j + 1)

    return match(0, 0)


def min_distance(word1: str, word2: str) -> int:
    """Return the Levenshtein distance between two words."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, 1):
        current = [i]
        for j, b in enumerate(word2, 1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def _balanced_one_way(chars: Iterable[str], opening: str, closing: str) -> bool:
    opened = closed = wild = 0
    for ch in chars:
        if ch == opening:
            opened += 1
        elif ch == closing:
            closed += 1
        else:
            wild += 1
        if closed > opened + wild:
            return False
    return True


def check_valid_string(s: str) -> bool:
    """Return whether ``s`` can be balanced, each ``*`` being ``(``, ``)`` or empty."""
    return _balanced_one_way(s, "(", ")") and _balanced_one_way(reversed(s), ")", "(")


def find_max_form(strs: Sequence[str], zeros: int, ones: int) -> int:
    """Return the largest number of binary strings usable within the digit budgets."""
    if zeros < 0 or ones < 0:
        raise ValueError("budgets must be non-negative")
    costs = [(text.count("1"), len(text) - text.count("1")) for text in strs]
    # best[o][z]: most strings taken from the remaining suffix with o ones and z zeros left
    best = [[0] * (zeros + 1) for _ in range(ones + 1)]
    for one_cost, zero_cost in reversed(costs):

        def cell(o: int, z: int, table=best) -> int:
            if o == 0 and z == 0:
                return 0
            skip = table[o][z]
            if one_cost > o or zero_cost > z:
                return skip
            return max(skip, 1 + table[o - one_cost][z - zero_cost])

        best = [[cell(o, z) for z in range(zeros + 1)] for o in range(ones + 1)]
    return best[ones][zeros]