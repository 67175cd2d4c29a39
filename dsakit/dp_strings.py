"""Sequence dynamic programming: common subsequences, increasing runs, edit distance, wildcards."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from functools import lru_cache


def lcs_recursive(first: str, second: str) -> int:
    """Length of the longest common subsequence, by plain recursion."""

    def length(n: int, m: int) -> int:
        if n == 0 or m == 0:
            return 0
        if first[n - 1] == second[m - 1]:
            return 1 + length(n - 1, m - 1)
        return max(length(n - 1, m), length(n, m - 1))

    return length(len(first), len(second))


def lcs_memo(first: str, second: str) -> int:
    """Length of the longest common subsequence, by memoized recursion."""

    @lru_cache(maxsize=None)
    def length(n: int, m: int) -> int:
        if n == 0 or m == 0:
            return 0
        if first[n - 1] == second[m - 1]:
            return 1 + length(n - 1, m - 1)
        return max(length(n - 1, m), length(n, m - 1))

    return length(len(first), len(second))


def _lcs_length(first: Sequence[Hashable], second: Sequence[Hashable]) -> int:
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, 1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def lcs_table(first: str, second: str) -> int:
    """Length of the longest common subsequence, by tabulation."""
    return _lcs_length(first, second)


def longest_common_substring(first: str, second: str) -> int:
    """Length of the longest run of characters that both strings contain."""
    best = 0
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, 1):
            run = previous[j - 1] + 1 if a == b else 0
            current.append(run)
            best = max(best, run)
        previous = current
    return best


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    return _lcs_length(values, sorted(set(values)))


def edit_distance(source: str, target: str) -> int:
    """Fewest insertions, deletions and replacements turning source into target."""
    previous = list(range(len(target) + 1))
    for i, a in enumerate(source, 1):
        current = [i]
        for j, b in enumerate(target, 1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def wildcard_match(text: str, pattern: str) -> bool:
    """Match the whole text against a pattern where '?' is any character and '*' any run."""
    previous = [True]
    for p in pattern:
        previous.append(previous[-1] and p == "*")
    for ch in text:
        current = [False]
        for j, p in enumerate(pattern, 1):
            if p == ch or p == "?":
                current.append(previous[j - 1])
            elif p == "*":
                current.append(previous[j] or current[j - 1])
            else:
                current.append(False)
        previous = current
    return previous[-1]