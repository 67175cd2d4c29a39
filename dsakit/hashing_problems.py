"""Problems solved with hash maps: pair sums, counts, anagrams, itineraries, subarray sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Mapping, Sequence


def pair_sum_indices(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Index pairs (earlier, later) adding up to target, pairing each later index with
    the latest earlier index of the value it needs."""
    last_seen: dict[int, int] = {}
    pairs = []
    for i, value in enumerate(values):
        partner = last_seen.get(target - value)
        if partner is not None:
            pairs.append((partner, i))
        last_seen[value] = i
    return pairs


def frequent_counts(values: Sequence[int]) -> dict[int, int]:
    """Occurrence counts of the distinct values that are at least a third of the length."""
    threshold = len(values) // 3
    return {value: count for value, count in Counter(values).items() if value >= threshold}


def is_anagram(first: str, second: str) -> bool:
    """Tell whether the two strings hold the same characters the same number of times."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def itinerary(tickets: Mapping[Hashable, Hashable]) -> list[Hashable]:
    """Follow the tickets from the one place nobody travels to, up to the final destination."""
    destinations = set(tickets.values())
    starts = [place for place in tickets if place not in destinations]
    if len(starts) != 1:
        raise ValueError("tickets must have exactly one starting place")
    route = [starts[0]]
    visited = {starts[0]}
    while route[-1] in tickets:
        nxt = tickets[route[-1]]
        if nxt in visited:
            raise ValueError(f"tickets loop back to {nxt!r}")
        visited.add(nxt)
        route.append(nxt)
    return route


def largest_zero_sum_subarray(values: Sequence[int]) -> int:
    """Length of the longest contiguous run adding up to zero."""
    first_at = {0: -1}
    total = 0
    best = 0
    for i, value in enumerate(values):
        total += value
        if total in first_at:
            best = max(best, i - first_at[total])
        else:
            first_at[total] = i
    return best


def count_subarrays_with_sum(values: Sequence[int], k: int) -> int:
    """Number of contiguous runs adding up to k."""
    seen = Counter({0: 1})
    total = 0
    count = 0
    for value in values:
        total += value
        count += seen[total - k]
        seen[total] += 1
    return count