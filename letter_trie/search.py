"""Depth-first search of an annotated trie under a Constraint, pruning on score bounds.

Each stack frame holds a node, a constraint state and the score of the path
above that node. With B the best score so far, a frame is discarded as soon as
it's popped if bound(node) + score <= B: nothing beneath it can beat B. That
sum is precomputed per node as AnnotatedTrie.best_scores, in the same order the
scores here are added, so the comparison is exact even for fractional values.
Words are reported when they score strictly more than B. In "improving" mode
(the default) each reported word raises B, so the output is a sequence of
strictly better words and the last one is the best. With improving=False B stays
fixed and every word scoring above it is reported once.

Children are visited in unit order, so ties go to the word whose units come
first (for plain letters: alphabetically first).
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Iterator

from letter_trie.annotate import AnnotatedTrie
from letter_trie.arena import ROOT
from letter_trie.constraint import Constraint
from letter_trie.scoring import ValueTable
from letter_trie.trie import Trie

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match[U]:
    units: tuple[U, ...]
    score: float

    @property
    def word(self) -> str:
        return "".join(str(u) for u in self.units)


@dataclass
class SearchStats:
    visited: int = 0
    pruned: int = 0
    matches: int = 0
    best: float = field(default=-math.inf)


class BoundedSearcher[U]:
    annotated: AnnotatedTrie[U]
    stats: SearchStats
    """Stats for the most recent search() call. Updated as its results are drawn."""

    def __init__(self, annotated: AnnotatedTrie[U]):
        if not isinstance(annotated, AnnotatedTrie):
            raise TypeError(
                f"BoundedSearcher needs an AnnotatedTrie (see annotate()), got {type(annotated).__name__}"
            )
        self.annotated = annotated
        self.stats = SearchStats()

    def search(
        self,
        constraint: Constraint[U, Any, Any],
        best: float = -math.inf,
        *,
        improving: bool = True,
    ) -> Iterator[Match[U]]:
        """Lazily yield matches that score more than `best`.

        Raises StaleAnnotationError right away (not on first iteration) if the trie
        changed after it was annotated.
        """
        self.annotated.check_fresh()
        self.stats = SearchStats(best=best)
        return self._search(constraint, best, improving, self.stats)

    def _search(
        self,
        constraint: Constraint[U, Any, Any],
        best: float,
        improving: bool,
        stats: SearchStats,
    ) -> Iterator[Match[U]]:
        ann = self.annotated
        arena = ann.trie.arena
        best_scores = ann.best_scores
        own_values = ann.own_values
        word_values = ann.word_values
        is_word = arena.is_word
        reported = set[int]()

        stack = [(ROOT, constraint.start(), 0.0)]
        while stack:
            idx, state, score = stack.pop()
            stats.visited += 1
            if best_scores[idx] <= best:
                stats.pruned += 1
                continue

            score += own_values[idx]
            if is_word[idx]:
                word_score = score + word_values[idx]
                if word_score > best and idx not in reported:
                    reported.add(idx)
                    stats.matches += 1
                    if improving:
                        best = word_score
                        stats.best = best
                    yield Match(arena.path(idx), word_score)

            children = arena.children[idx]
            if not children:
                continue
            frames = []
            for unit, move in constraint.options(state):
                child = children.get(unit)
                if child is not None:
                    frames.append((child, constraint.advance(state, move), score))
            # options() come in unit order; reverse so the first one is popped first.
            stack.extend(reversed(frames))

        logger.debug(
            "Search done: visited=%d pruned=%d matches=%d",
            stats.visited,
            stats.pruned,
            stats.matches,
        )


def search[U](
    annotated: AnnotatedTrie[U],
    constraint: Constraint[U, Any, Any],
    best: float = -math.inf,
    *,
    improving: bool = True,
) -> Iterator[Match[U]]:
    return BoundedSearcher(annotated).search(constraint, best, improving=improving)


def best_match[U](
    annotated: AnnotatedTrie[U],
    constraint: Constraint[U, Any, Any],
    best: float = -math.inf,
) -> Match[U] | None:
    """The highest-scoring match, or None if nothing beats `best`."""
    out = None
    for out in search(annotated, constraint, best):
        pass
    return out


def exhaustive_search[U](
    trie: Trie[U], scorer: ValueTable[U], constraint: Constraint[U, Any, Any]
) -> list[Match[U]]:
    """Every word reachable under the constraint, with no pruning.

    Same visiting order as BoundedSearcher, so this is the reference to check it against.
    """
    arena = trie.arena
    out = []
    seen = set[int]()
    stack = [(ROOT, constraint.start())]
    while stack:
        idx, state = stack.pop()
        if arena.is_word[idx] and idx not in seen:
            seen.add(idx)
            path = arena.path(idx)
            out.append(Match(path, scorer.score(path)))
        children = arena.children[idx]
        frames = []
        for unit, move in constraint.options(state):
            child = children.get(unit)
            if child is not None:
                frames.append((child, constraint.advance(state, move)))
        stack.extend(reversed(frames))
    return out
