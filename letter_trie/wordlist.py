import logging
from typing import Iterator

from letter_trie.alphabet import Alphabet, Letters
from letter_trie.trie import Trie

logger = logging.getLogger(__name__)


def read_words(path: str) -> Iterator[str]:
    """One word per line. Whitespace and blank lines are ignored; words are lowercased."""
    with open(path, encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if word:
                yield word


def make_trie(path: str, alphabet: Alphabet | None = None, min_length=1) -> Trie:
    """Build a trie from a word list, skipping words the alphabet can't spell.

    min_length is measured in letters, not units.
    """
    alphabet = alphabet or Letters()
    t = Trie()
    n_read = 0
    n_skipped = 0
    for word in read_words(path):
        n_read += 1
        if len(word) < min_length:
            n_skipped += 1
            continue
        try:
            units = alphabet.split(word)
        except ValueError:
            n_skipped += 1
            continue
        t.insert(units)
    logger.info(
        "Loaded %s words from %s (%s skipped): %s nodes",
        f"{n_read - n_skipped:,}",
        path,
        f"{n_skipped:,}",
        f"{t.num_nodes():,}",
    )
    return t
