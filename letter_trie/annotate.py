"""Annotate every trie node with an upper bound on the words completable beneath it.

For a node n with unit value own(n) and length bonus bonus(n):

    bound(n) = own(n) + max(bonus(n) if n is a word else -inf,
                            max(bound(c) for c in children(n)))

so that (score of the path above n) + bound(n) is the best score of any word in
n's subtree. The bound is exact for scores of the form in scoring.ValueTable,
which makes it admissible. A non-word leaf gets -inf, i.e. "always prune".

With non-integer values, "prefix + (v2 + v3)" and "(prefix + v2) + v3" can
differ in the last bit. So the annotation also keeps best_scores: the best word
score under each node, added up root-down exactly the way the searcher adds it.
The searcher prunes on best_scores, and rounding never hides a word.

The result is an AnnotatedTrie rather than a field on the nodes, so a trie that
was never annotated can't be searched at all. Changing the trie afterwards makes
the annotation stale, which the searcher refuses to use.
"""

import logging
import math
import time

import numpy as np

from letter_trie.arena import ROOT
from letter_trie.errors import StaleAnnotationError
from letter_trie.scoring import ValueTable
from letter_trie.trie import Trie, TrieNode

logger = logging.getLogger(__name__)


class AnnotatedTrie[U]:
    trie: Trie[U]
    scorer: ValueTable[U]
    version: int
    """The trie version these bounds were computed for."""

    own_values: list[float]
    """Value of the unit on the edge into each node (0 for the root)."""
    word_values: list[float]
    """Length bonus for word nodes, -inf for non-words."""
    bounds: list[float]
    best_scores: list[float]
    """Best full score of any word in each subtree, summed in search order."""

    def __init__(
        self,
        trie: Trie[U],
        scorer: ValueTable[U],
        own_values: list[float],
        word_values: list[float],
        bounds: list[float],
        best_scores: list[float],
    ):
        self.trie = trie
        self.scorer = scorer
        self.version = trie.version
        self.own_values = own_values
        self.word_values = word_values
        self.bounds = bounds
        self.best_scores = best_scores

    def is_stale(self):
        return self.version != self.trie.version

    def check_fresh(self):
        if self.is_stale():
            raise StaleAnnotationError(
                f"Trie changed since annotation (version {self.version} -> {self.trie.version}); "
                "re-run annotate()."
            )

    def score_bound(self, node: TrieNode[U] | int) -> float:
        self.check_fresh()
        idx = node.index if isinstance(node, TrieNode) else node
        return self.bounds[idx]

    def score(self, word) -> float:
        return self.scorer.score(word)


def annotate[U](trie: Trie[U], scorer: ValueTable[U]) -> AnnotatedTrie[U]:
    start_s = time.time()
    arena = trie.arena
    n = arena.num_nodes()

    unit_values = {u: scorer.unit_value(u) for u in set(arena.units[1:])}
    own = np.fromiter(
        (0.0 if i == ROOT else unit_values[u] for i, u in enumerate(arena.units)),
        dtype=np.float64,
        count=n,
    )
    depths = np.array(arena.depths, dtype=np.int64)
    parents = np.array(arena.parents, dtype=np.int64)
    is_word = np.array(arena.is_word, dtype=bool)
    max_depth = int(depths.max())

    bonus_by_depth = np.array(
        [scorer.word_bonus(d) for d in range(max_depth + 1)], dtype=np.float64
    )
    word_values = np.where(is_word, bonus_by_depth[depths], -np.inf)

    order = np.argsort(depths, kind="stable")
    level_starts = np.searchsorted(depths[order], np.arange(max_depth + 2))
    levels = [order[level_starts[d] : level_starts[d + 1]] for d in range(max_depth + 1)]

    # Path scores, shallowest level first.
    prefix = np.zeros(n, dtype=np.float64)
    for level in levels[1:]:
        prefix[level] = prefix[parents[level]] + own[level]
    best_scores = prefix + word_values

    # Fold each level into its parents, deepest first. When level d is reached,
    # every node on it already holds the max over its children.
    bounds = word_values.copy()
    for level in reversed(levels[1:]):
        bounds[level] += own[level]
        np.maximum.at(bounds, parents[level], bounds[level])
        np.maximum.at(best_scores, parents[level], best_scores[level])

    out = AnnotatedTrie(
        trie,
        scorer,
        own_values=own.tolist(),
        word_values=word_values.tolist(),
        bounds=bounds.tolist(),
        best_scores=best_scores.tolist(),
    )
    root_bound = out.bounds[ROOT]
    logger.debug(
        "Annotated %d nodes (height %d) in %.3fs; root bound=%s",
        n,
        max_depth,
        time.time() - start_s,
        "none" if math.isinf(root_bound) else root_bound,
    )
    return out
