"""A prefix tree of words, with word breaking, unique prefixes and prefix-closed words."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass(eq=False)
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    end_of_word: bool = False
    passing: int = 0


class Trie:
    """A set of words stored character by character along shared prefixes."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add a word; every node on its path counts one more word passing through."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.passing += 1
        node.end_of_word = True

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return node.end_of_word

    def unique_prefix(self, word: str) -> str:
        """Shortest prefix of word that no other stored word shares, or word itself.

        Raises KeyError when the path runs off the trie before such a prefix is found.
        """
        node = self._root
        for length, ch in enumerate(word, 1):
            child = node.children.get(ch)
            if child is None:
                raise KeyError(word)
            if child.passing == 1:
                return word[:length]
            node = child
        return word

    def longest_word_with_all_prefixes(self) -> str:
        """Longest stored word whose every prefix is also stored; ties go to the smallest."""
        best = ""
        stack: list[tuple[_Node, str]] = [(self._root, "")]
        while stack:
            node, text = stack.pop()
            for ch, child in node.children.items():
                if not child.end_of_word:
                    continue
                word = text + ch
                if len(word) > len(best) or (len(word) == len(best) and word < best):
                    best = word
                stack.append((child, word))
        return best


def word_break(words: Iterable[str], key: str) -> bool:
    """Tell whether key can be split into pieces that are all among the words."""
    trie = Trie(words)

    @lru_cache(maxsize=None)
    def breaks(start: int) -> bool:
        if start == len(key):
            return True
        return any(
            key[start:end] in trie and breaks(end)
            for end in range(start + 1, len(key) + 1)
        )

    return breaks(0)


def unique_prefixes(words: Iterable[str]) -> list[str]:
    """The unique prefix of every word, in the order the words are given."""
    word_list = list(words)
    trie = Trie(word_list)
    return [trie.unique_prefix(word) for word in word_list]


def longest_word_with_all_prefixes(words: Iterable[str]) -> str:
    """Longest word whose every prefix is among the words; ties go to the smallest."""
    return Trie(words).longest_word_with_all_prefixes()