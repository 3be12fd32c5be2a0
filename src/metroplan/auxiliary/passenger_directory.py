"""Prefix-searchable passenger directory backed by a character trie."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional


def _display_name(name: str) -> str:
    return name[:1].upper() + name[1:].lower()


@dataclass
class _TrieNode:
    children: Dict[str, "_TrieNode"] = field(default_factory=dict)
    display_name: Optional[str] = None


class PassengerDirectory:
    """Case-insensitive store of passenger names with ordered prefix search.

    Names are stored once per lower-cased spelling and reported with the first
    letter capitalised. Search results list shorter names first and names of
    equal length alphabetically.
    """

    def __init__(self, names: Optional[Iterable[str]] = None) -> None:
        self._root = _TrieNode()
        self._count = 0
        for name in names or ():
            self.insert(name)

    def insert(self, name: str) -> None:
        if not name:
            raise ValueError("Passenger names cannot be empty")
        node = self._root
        for char in name.lower():
            node = node.children.setdefault(char, _TrieNode())
        if node.display_name is None:
            self._count += 1
        node.display_name = _display_name(name)

    def prefix_search(self, prefix: Optional[str]) -> List[str]:
        if not prefix:
            return []
        node = self._descend(prefix.lower())
        if node is None:
            return []

        matches: List[str] = []
        queue = deque([node])
        while queue:
            current = queue.popleft()
            if current.display_name is not None:
                matches.append(current.display_name)
            for char in sorted(current.children):
                queue.append(current.children[char])
        return matches

    def _descend(self, key: str) -> Optional[_TrieNode]:
        node = self._root
        for char in key:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str) or not name:
            return False
        node = self._descend(name.lower())
        return node is not None and node.display_name is not None

    def __len__(self) -> int:
        return self._count


__all__ = ["PassengerDirectory"]
