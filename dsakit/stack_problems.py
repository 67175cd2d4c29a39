"""Problems solved with a stack: next greater value, bracket balance, duplicate parentheses, histograms."""

from __future__ import annotations

from collections.abc import Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = set(_PAIRS.values())


def next_greater(values: Sequence[int]) -> list[int]:
    """For each value, the first strictly greater value to its right, or -1 when there is none."""
    answers = [-1] * len(values)
    candidates: list[int] = []
    for i in range(len(values) - 1, -1, -1):
        while candidates and values[i] >= candidates[-1]:
            candidates.pop()
        if candidates:
            answers[i] = candidates[-1]
        candidates.append(values[i])
    return answers


def is_balanced(text: str) -> bool:
    """Tell whether the text is a well-nested sequence of (), [] and {}.

    Every character that is not an opening bracket must close the innermost open one.
    """
    open_brackets: list[str] = []
    for ch in text:
        if ch in _OPENERS:
            open_brackets.append(ch)
        elif open_brackets and _PAIRS.get(ch) == open_brackets[-1]:
            open_brackets.pop()
        else:
            return False
    return not open_brackets


def has_duplicate_parentheses(text: str) -> bool:
    """Tell whether a balanced expression has a pair of parentheses enclosing nothing new."""
    pending: list[str] = []
    for ch in text:
        if ch != ")":
            pending.append(ch)
            continue
        if not pending:
            raise ValueError("unbalanced ')' in expression")
        if pending[-1] == "(":
            return True
        while pending and pending[-1] != "(":
            pending.pop()
        if not pending:
            raise ValueError("unbalanced ')' in expression")
        pending.pop()
    return False


def largest_histogram_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle fitting under bars of unit width."""
    n = len(heights)
    left = [-1] * n
    right = [n] * n
    stack: list[int] = []
    for i, height in enumerate(heights):
        while stack and height <= heights[stack[-1]]:
            stack.pop()
        left[i] = stack[-1] if stack else -1
        stack.append(i)
    stack.clear()
    for i in range(n - 1, -1, -1):
        while stack and heights[i] <= heights[stack[-1]]:
            stack.pop()
        right[i] = stack[-1] if stack else n
        stack.append(i)
    return max(
        ((r - l - 1) * h for h, l, r in zip(heights, left, right)),
        default=0,
    )