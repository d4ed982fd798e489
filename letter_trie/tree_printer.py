"""Plain-text dumps of a trie, for debugging small ones."""

import math

from letter_trie.annotate import AnnotatedTrie
from letter_trie.trie import Trie, TrieNode

MAX_DEPTH = 1000
MAX_CHILDREN = 1000
INDENT = "    "


def describe_node(node: TrieNode, annotated: AnnotatedTrie | None = None) -> str:
    info = node.info()
    unit = "root" if node.parent is None else repr(info.unit)
    prefix = "".join(str(u) for u in info.prefix)
    parts = [f'Node: {unit} "{prefix}"']
    if info.is_word:
        parts.append(" (word)")
    parts.append(
        f"; nodes = {info.node_count}; words = {info.word_count}"
        f"; depth = {info.depth}; height = {info.height}"
    )
    if annotated is not None:
        parts.append(f"; bound = {format_score(annotated.score_bound(node))}")
    return "".join(parts)


def format_score(score: float) -> str:
    if math.isfinite(score) and score == int(score):
        return str(int(score))
    return str(score)


def describe_tree(
    trie: Trie | TrieNode,
    annotated: AnnotatedTrie | None = None,
    max_depth=MAX_DEPTH,
    max_children=MAX_CHILDREN,
) -> str:
    """One line per node, indented by depth, children in unit order."""
    node = trie.root if isinstance(trie, Trie) else trie
    lines = []
    stack = [(node, 0)]
    while stack:
        node, depth = stack.pop()
        lines.append(INDENT * depth + describe_node(node, annotated))
        if depth < max_depth:
            children = node.children()[:max_children]
            stack.extend((child, depth + 1) for _, child in reversed(children))
    return "\n".join(lines)
