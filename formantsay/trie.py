"""A character trie that finds the longest matching key at a text position."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["Trie"]


class _Node:
    __slots__ = ("children", "value", "has_value")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.value: Any = None
        self.has_value = False


class Trie:
    """Maps non-empty string keys to values and matches them against text."""

    def __init__(self) -> None:
        self._root = _Node()
        self._size = 0

    def insert(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        if not isinstance(key, str):
            raise TypeError(f"trie key must be a str, not {type(key).__name__}")
        if not key:
            raise ValueError("trie key must not be empty")
        node = self._root
        for ch in key:
            node = node.children.setdefault(ch, _Node())
        if not node.has_value:
            self._size += 1
        node.value = value
        node.has_value = True

    def lookup(self, text: str, start: int = 0) -> tuple[Any, int]:
        """Follow ``text`` from ``start`` as far as the trie allows.

        Returns the value held by the deepest node reached (``None`` when
        that node holds no value or nothing matched) and the index just
        past the last character matched.
        """
        node = self._root
        value = None
        pos = start
        while pos < len(text):
            child = node.children.get(text[pos])
            if child is None:
                break
            node = child
            value = node.value
            pos += 1
        return value, pos

    def _find(self, key: str) -> _Node | None:
        node = self._root
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        node = self._find(key)
        return node is not None and node.has_value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        stack: list[tuple[str, _Node]] = [("", self._root)]
        while stack:
            prefix, node = stack.pop()
            if node.has_value:
                yield prefix
            for ch, child in reversed(list(node.children.items())):
                stack.append((prefix + ch, child))

    def clear(self) -> None:
        """Remove every key."""
        self._root = _Node()
        self._size = 0