import math
import random

import pytest

from letter_trie.annotate import AnnotatedTrie, annotate
from letter_trie.errors import StaleAnnotationError
from letter_trie.scoring import ValueTable, boggle_scores, scrabble_values
from letter_trie.trie import Trie, TrieNode

WORDS = ["cat", "car", "card", "care", "dog"]
VALUES = ValueTable({"c": 3, "a": 1, "t": 1, "r": 1, "d": 2, "e": 1, "o": 1, "g": 2})


def subtree_words(t: Trie, path) -> list[tuple]:
    return [w for w in t.words() if w[: len(path)] == tuple(path)]


def test_bounds():
    t = Trie.create_from_wordlist(WORDS)
    ann = annotate(t, VALUES)
    assert isinstance(ann, AnnotatedTrie)

    def bound(path: str):
        return ann.score_bound(t.node_at(path))

    assert bound("") == 7
    assert bound("c") == 7
    assert bound("ca") == 4
    assert bound("cat") == 1
    assert bound("car") == 3
    assert bound("card") == 2
    assert bound("care") == 1
    assert bound("d") == 5
    assert bound("dog") == 2
    assert ann.score("card") == 7


def test_empty_trie():
    t = Trie()
    ann = annotate(t, VALUES)
    assert ann.score_bound(t.root) == -math.inf
    t.insert("")
    ann = annotate(t, VALUES)
    assert ann.score_bound(t.root) == 0


def test_length_bonus():
    t = Trie.create_from_wordlist(["tea", "teapot", "teapots", "sea"])
    ann = annotate(t, boggle_scores())
    assert ann.score_bound(t.root) == 5
    assert ann.score_bound(t.node_at("s")) == 1
    assert ann.score_bound(t.node_at("teapot")) == 5

    ann = annotate(t, scrabble_values())
    # teapots: 7 tiles + 50
    assert ann.score_bound(t.root) == 59


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_bounds_are_exact(seed):
    rng = random.Random(seed)
    words = [
        "".join(rng.choice("abcdef") for _ in range(rng.randint(0, 8)))
        for _ in range(40)
    ]
    values = ValueTable(
        {c: rng.randint(-2, 9) for c in "abcdef"},
        length_bonus=[rng.randint(0, 5) for _ in range(6)],
    )
    t = Trie.create_from_wordlist(words)
    ann = annotate(t, values)
    for idx in range(t.num_nodes()):
        node = TrieNode(t, idx)
        path = node.path()
        prefix_score = sum(values.unit_value(u) for u in path[:-1])
        best = max(values.score(w) for w in subtree_words(t, path))
        # admissible, and in fact tight
        assert prefix_score + ann.score_bound(node) == pytest.approx(best)


def test_stale_annotation():
    t = Trie.create_from_wordlist(WORDS)
    ann = annotate(t, VALUES)
    t.insert("car")  # already there
    assert not ann.is_stale()
    assert ann.score_bound(t.root) == 7

    t.insert("caged")
    assert ann.is_stale()
    with pytest.raises(StaleAnnotationError):
        ann.score_bound(t.root)

    ann = annotate(t, VALUES)
    assert ann.score_bound(t.root) == 9


def test_best_scores_add_up_like_word_scores():
    values = ValueTable({"a": 0.1, "b": 0.2, "c": 0.3}, length_bonus=[0, 0.7, 0.1])
    t = Trie.create_from_wordlist(["abc", "cab", "ba", "c"])
    ann = annotate(t, values)
    for idx in range(t.num_nodes()):
        path = TrieNode(t, idx).path()
        # exact, not approx: the searcher prunes on these
        assert ann.best_scores[idx] == max(values.score(w) for w in subtree_words(t, path))
