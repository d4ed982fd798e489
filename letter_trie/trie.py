"""A letter trie whose nodes live in a NodeArena.

Units can be any hashable, ordered value. Plain strings work without any
conversion, since iterating over "cat" yields its letters:

    t = Trie.create_from_wordlist(["cat", "car"])
    assert "car" in t
    assert t.has_prefix("ca")
"""

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Self, Sequence

from letter_trie.alphabet import Alphabet
from letter_trie.arena import NO_PARENT, ROOT, NodeArena
from letter_trie.errors import FrozenTrieError


@dataclass(frozen=True)
class NodeInfo[U]:
    """A detached copy of one node's stats, handy for comparing nodes in tests."""

    unit: U | None
    prefix: tuple[U, ...]
    depth: int
    is_word: bool
    child_count: int
    node_count: int
    """Nodes in this subtree, including this one."""
    word_count: int
    height: int
    """1 for a leaf."""


@dataclass(frozen=True)
class TrieNode[U]:
    """A handle onto one node of a Trie. Two handles are equal iff they point at the same node."""

    trie: "Trie[U]"
    index: int

    @property
    def unit(self) -> U | None:
        return self.trie.arena.units[self.index]

    @property
    def is_word(self) -> bool:
        return self.trie.arena.is_word[self.index]

    @property
    def depth(self) -> int:
        return self.trie.arena.depths[self.index]

    @property
    def parent(self) -> Self | None:
        parent = self.trie.arena.parents[self.index]
        if parent == NO_PARENT:
            return None
        return TrieNode(self.trie, parent)

    def child(self, unit: U) -> Self | None:
        idx = self.trie.arena.children[self.index].get(unit)
        return None if idx is None else TrieNode(self.trie, idx)

    def children(self) -> list[tuple[U, Self]]:
        """(unit, child) pairs, ordered by unit."""
        return [
            (unit, TrieNode(self.trie, idx))
            for unit, idx in self.trie.arena.sorted_children(self.index)
        ]

    def path(self) -> tuple[U, ...]:
        return self.trie.arena.path(self.index)

    def info(self) -> NodeInfo[U]:
        return self.trie.info(self)

    def __repr__(self):
        return f"TrieNode({self.index}, {self.path()!r})"


class Trie[U]:
    arena: NodeArena[U]
    version: int
    """Bumped by every change to the node graph."""

    _frozen_stats: dict[int, tuple[int, int, int]] | None

    def __init__(self):
        self.arena = NodeArena()
        self.version = 0
        self._frozen_stats = None

    @property
    def root(self) -> TrieNode[U]:
        return TrieNode(self, ROOT)

    def is_frozen(self):
        return self._frozen_stats is not None

    def insert(self, word: Iterable[U]) -> TrieNode[U]:
        """Add a word and return its node. Inserting a word twice is a no-op."""
        if self.is_frozen():
            raise FrozenTrieError("Can't insert into a frozen trie; call unfreeze() first.")
        arena = self.arena
        idx = ROOT
        for unit in word:
            child = arena.children[idx].get(unit)
            if child is None:
                child = arena.new_node(unit, idx)
                self.version += 1
            idx = child
        if not arena.is_word[idx]:
            arena.is_word[idx] = True
            self.version += 1
        return TrieNode(self, idx)

    def update(self, words: Iterable[Iterable[U]]):
        for word in words:
            self.insert(word)

    def merge(self, other: "Trie[U]"):
        """Add every word of `other`, e.g. a trie built from another part of a word list."""
        self.update(other.words())

    def _walk(self, path: Iterable[U]) -> int | None:
        children = self.arena.children
        idx = ROOT
        for unit in path:
            idx = children[idx].get(unit)
            if idx is None:
                return None
        return idx

    def node_at(self, path: Iterable[U]) -> TrieNode[U] | None:
        idx = self._walk(path)
        return None if idx is None else TrieNode(self, idx)

    def contains(self, word: Iterable[U]) -> bool:
        idx = self._walk(word)
        return idx is not None and self.arena.is_word[idx]

    __contains__ = contains

    def has_prefix(self, prefix: Iterable[U]) -> bool:
        return self._walk(prefix) is not None

    def find(self, prefix: Iterable[U]) -> NodeInfo[U] | None:
        node = self.node_at(prefix)
        return None if node is None else self.info(node)

    def size(self):
        """Number of words in the trie."""
        return sum(self.arena.is_word)

    __len__ = size

    def num_nodes(self):
        return self.arena.num_nodes()

    def height(self):
        return self._stats(ROOT)[ROOT][2]

    def words(self, limit: int | None = None) -> list[tuple[U, ...]]:
        """Complete words in unit order, optionally stopping after `limit` of them."""
        arena = self.arena
        out = []
        stack = [ROOT]
        while stack:
            if limit is not None and len(out) >= limit:
                break
            idx = stack.pop()
            if arena.is_word[idx]:
                out.append(arena.path(idx))
            stack.extend(idx for _, idx in reversed(arena.sorted_children(idx)))
        return out

    def reverse_lookup(self, node: TrieNode[U]) -> tuple[U, ...]:
        assert node.trie is self
        return node.path()

    # ---

    def freeze(self):
        """Cache per-node counts and forbid further inserts."""
        if not self.is_frozen():
            self._frozen_stats = self._compute_stats(range(self.num_nodes()))

    def unfreeze(self):
        self._frozen_stats = None

    def _compute_stats(self, indices: Iterable[int]) -> dict[int, tuple[int, int, int]]:
        """(node_count, word_count, height) for each index. Indices must be closed under children."""
        arena = self.arena
        stats = {}
        # children have larger indices than their parents
        for idx in sorted(indices, reverse=True):
            node_count = 1
            word_count = 1 if arena.is_word[idx] else 0
            max_child_height = 0
            for child in arena.children[idx].values():
                n, w, h = stats[child]
                node_count += n
                word_count += w
                max_child_height = max(max_child_height, h)
            stats[idx] = (node_count, word_count, max_child_height + 1)
        return stats

    def _stats(self, idx: int):
        if self._frozen_stats is not None:
            return self._frozen_stats
        subtree = []
        stack = [idx]
        while stack:
            i = stack.pop()
            subtree.append(i)
            stack.extend(self.arena.children[i].values())
        return self._compute_stats(subtree)

    def _info(self, idx: int, stats) -> NodeInfo[U]:
        arena = self.arena
        node_count, word_count, height = stats[idx]
        return NodeInfo(
            unit=arena.units[idx],
            prefix=arena.path(idx),
            depth=arena.depths[idx],
            is_word=arena.is_word[idx],
            child_count=len(arena.children[idx]),
            node_count=node_count,
            word_count=word_count,
            height=height,
        )

    def info(self, node: TrieNode[U]) -> NodeInfo[U]:
        assert node.trie is self
        return self._info(node.index, self._stats(node.index))

    def iter_breadth_first(self) -> Iterator[NodeInfo[U]]:
        stats = self._stats(ROOT)
        queue = deque([ROOT])
        while queue:
            idx = queue.popleft()
            yield self._info(idx, stats)
            queue.extend(child for _, child in self.arena.sorted_children(idx))

    def iter_prefix(self, prefix: Sequence[U]) -> Iterator[NodeInfo[U]]:
        """Info for the root and then each node along prefix, as far as it exists."""
        idx = ROOT
        yield self.info(TrieNode(self, idx))
        for unit in prefix:
            idx = self.arena.children[idx].get(unit)
            if idx is None:
                return
            yield self.info(TrieNode(self, idx))

    def __repr__(self):
        return f"Trie(words={self.size()}, nodes={self.num_nodes()})"

    @staticmethod
    def create_from_wordlist(
        words: Iterable[str], alphabet: Alphabet[U] | None = None
    ) -> "Trie[U]":
        trie = Trie()
        for word in words:
            trie.insert(alphabet.split(word) if alphabet else word)
        return trie

