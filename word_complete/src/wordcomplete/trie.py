"""
Prefix tree over a fixed alphabet.

Every node owns its children (symbol -> node); a node is marked when the path
from the root to it spells an inserted word. Children are visited in alphabet
order, so a depth-first walk that emits a node before its children yields
words in lexicographic order.
"""
from __future__ import annotations
from itertools import islice
from typing import Dict, Iterator, List, Optional

from . import config as CFG
from .errors import InvalidSymbolError
from .models import Completion


class TrieNode:
    """One symbol position along some inserted word(s)."""

    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word: bool = False


class PrefixIndex:
    """
    Insert-only word set with prefix queries.
    Build-time: insert(word) one normalized word at a time.
    Queries: all_with_prefix / iter_with_prefix (sorted enumeration),
             first_completion (echoes the prefix on a miss),
             find_completion (explicit found flag).
    """
    def __init__(self, alphabet: str = CFG.ALPHABET) -> None:
        self.alphabet = alphabet
        self._rank: Dict[str, int] = {ch: i for i, ch in enumerate(alphabet)}
        self._root = TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        node = self._walk(word)
        return node is not None and node.is_word

    # -------- Build-time API --------
    def insert(self, word: str) -> None:
        if not word:
            raise ValueError("insert(): word must be non-empty")
        # validate everything first so a rejected word leaves no partial path
        for pos, ch in enumerate(word):
            if ch not in self._rank:
                raise InvalidSymbolError(word, ch, pos)

        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if not node.is_word:
            node.is_word = True
            self._size += 1

    # -------- Queries --------
    def iter_with_prefix(self, prefix: str, limit: Optional[int] = None) -> Iterator[str]:
        """Lazily iterate every word starting with prefix, in lexicographic order."""
        node = self._walk(prefix)
        if node is None:
            return iter(())
        words = self._descend(node, prefix)
        if limit is not None:
            words = islice(words, max(0, limit))
        return words

    def all_with_prefix(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        return list(self.iter_with_prefix(prefix, limit=limit))

    def first_completion(self, prefix: str) -> str:
        """First word with this prefix, or the prefix itself when none exists."""
        return self.find_completion(prefix).word

    def find_completion(self, prefix: str) -> Completion:
        node = self._walk(prefix)
        if node is None:
            return Completion(prefix=prefix, word=prefix, found=False)
        # the smallest child always leads to a marked node (no dead branches)
        path = [prefix]
        while not node.is_word:
            if not node.children:
                return Completion(prefix=prefix, word=prefix, found=False)
            ch = min(node.children, key=self._rank.__getitem__)
            path.append(ch)
            node = node.children[ch]
        return Completion(prefix=prefix, word="".join(path), found=True)

    # -------- internals --------
    def _walk(self, s: str) -> Optional[TrieNode]:
        node = self._root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _descend(self, node: TrieNode, spelled: str) -> Iterator[str]:
        # explicit stack: word length is not bounded by the recursion limit
        stack = [(node, spelled)]
        while stack:
            cur, text = stack.pop()
            if cur.is_word:
                yield text
            # reverse order so the smallest symbol is popped first
            for ch in sorted(cur.children, key=self._rank.__getitem__, reverse=True):
                stack.append((cur.children[ch], text + ch))
