"""Fibonacci, Catalan and matrix-chain costs by recursion, memoization and tabulation."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def _check_index(n: int) -> None:
    if n < 0:
        raise ValueError(f"index must be non-negative, got {n}")


def _check_dims(dims: Sequence[int]) -> None:
    if len(dims) < 2:
        raise ValueError("a matrix chain needs at least two dimensions")


def _fib(n: int) -> int:
    return n if n < 2 else _fib(n - 1) + _fib(n - 2)


def fibonacci_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion."""
    _check_index(n)
    return _fib(n)


def fibonacci_memo(n: int) -> int:
    """Return the n-th Fibonacci number by memoized recursion."""
    _check_index(n)
    cache = {0: 0, 1: 1}

    def fib(k: int) -> int:
        if k not in cache:
            cache[k] = fib(k - 1) + fib(k - 2)
        return cache[k]

    return fib(n)


def fibonacci_table(n: int) -> int:
    """Return the n-th Fibonacci number by filling a table bottom-up."""
    _check_index(n)
    table = [0, 1]
    for _ in range(2, n + 1):
        table.append(table[-1] + table[-2])
    return table[n]


def _catalan(n: int) -> int:
    if n < 2:
        return 1
    return sum(_catalan(i) * _catalan(n - i - 1) for i in range(n))


def catalan_recursive(n: int) -> int:
    """Return the n-th Catalan number by plain recursion."""
    _check_index(n)
    return _catalan(n)


def catalan_memo(n: int) -> int:
    """Return the n-th Catalan number by memoized recursion."""
    _check_index(n)
    cache = {0: 1, 1: 1}

    def catalan(k: int) -> int:
        if k not in cache:
            cache[k] = sum(catalan(i) * catalan(k - i - 1) for i in range(k))
        return cache[k]

    return catalan(n)


def catalan_table(n: int) -> int:
    """Return the n-th Catalan number by filling a table bottom-up."""
    _check_index(n)
    table = [1, 1]
    while len(table) <= n:
        table.append(sum(a * b for a, b in zip(table, reversed(table))))
    return table[n]


def matrix_chain_recursive(dims: Sequence[int]) -> int:
    """Minimum multiplication cost of the chain whose matrix i is dims[i-1] x dims[i]."""
    _check_dims(dims)

    def cost(i: int, j: int) -> int:
        if i == j:
            return 0
        return min(
            cost(i, k) + cost(k + 1, j) + dims[i - 1] * dims[k] * dims[j]
            for k in range(i, j)
        )

    return cost(1, len(dims) - 1)


def matrix_chain_memo(dims: Sequence[int]) -> int:
    """Minimum multiplication cost of the chain, memoized over (i, j)."""
    _check_dims(dims)

    @lru_cache(maxsize=None)
    def cost(i: int, j: int) -> int:
        if i == j:
            return 0
        return min(
            cost(i, k) + cost(k + 1, j) + dims[i - 1] * dims[k] * dims[j]
            for k in range(i, j)
        )

    return cost(1, len(dims) - 1)


def matrix_chain_table(dims: Sequence[int]) -> int:
    """Minimum multiplication cost of the chain, filled by increasing chain length."""
    _check_dims(dims)
    n = len(dims)
    best = [[0] * n for _ in range(n)]
    for length in range(2, n):
        for i in range(1, n - length + 1):
            j = i + length - 1
            best[i][j] = min(
                best[i][k] + best[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                for k in range(i, j)
            )
    return best[1][n - 1]