import math

from inline_snapshot import snapshot

from letter_trie.annotate import annotate
from letter_trie.scoring import word_length
from letter_trie.tree_printer import describe_node, describe_tree, format_score
from letter_trie.trie import Trie


def test_describe_node():
    t = Trie.create_from_wordlist(["an", "and", "at"])
    assert describe_node(t.root) == snapshot(
        'Node: root ""; nodes = 5; words = 3; depth = 0; height = 4'
    )
    assert describe_node(t.node_at("an")) == snapshot(
        'Node: \'n\' "an" (word); nodes = 2; words = 2; depth = 2; height = 2'
    )
    ann = annotate(t, word_length())
    assert describe_node(t.node_at("an"), ann) == snapshot(
        'Node: \'n\' "an" (word); nodes = 2; words = 2; depth = 2; height = 2; bound = 2'
    )


def test_describe_tree():
    t = Trie.create_from_wordlist(["an", "and", "at"])
    assert describe_tree(t) == snapshot(
        """\
Node: root ""; nodes = 5; words = 3; depth = 0; height = 4
    Node: 'a' "a"; nodes = 4; words = 3; depth = 1; height = 3
        Node: 'n' "an" (word); nodes = 2; words = 2; depth = 2; height = 2
            Node: 'd' "and" (word); nodes = 1; words = 1; depth = 3; height = 1
        Node: 't' "at" (word); nodes = 1; words = 1; depth = 2; height = 1\
"""
    )

    ann = annotate(t, word_length())
    assert describe_tree(t, ann) == snapshot(
        """\
Node: root ""; nodes = 5; words = 3; depth = 0; height = 4; bound = 3
    Node: 'a' "a"; nodes = 4; words = 3; depth = 1; height = 3; bound = 3
        Node: 'n' "an" (word); nodes = 2; words = 2; depth = 2; height = 2; bound = 2
            Node: 'd' "and" (word); nodes = 1; words = 1; depth = 3; height = 1; bound = 1
        Node: 't' "at" (word); nodes = 1; words = 1; depth = 2; height = 1; bound = 1\
"""
    )


def test_describe_tree_limits():
    t = Trie.create_from_wordlist(["an", "and", "at"])
    assert describe_tree(t, max_depth=1) == snapshot(
        """\
Node: root ""; nodes = 5; words = 3; depth = 0; height = 4
    Node: 'a' "a"; nodes = 4; words = 3; depth = 1; height = 3\
"""
    )
    assert describe_tree(t.node_at("a"), max_children=1) == snapshot(
        """\
Node: 'a' "a"; nodes = 4; words = 3; depth = 1; height = 3
    Node: 'n' "an" (word); nodes = 2; words = 2; depth = 2; height = 2
        Node: 'd' "and" (word); nodes = 1; words = 1; depth = 3; height = 1\
"""
    )


def test_format_score():
    assert format_score(7.0) == "7"
    assert format_score(2.5) == "2.5"
    assert format_score(-math.inf) == "-inf"
