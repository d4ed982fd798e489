class LetterTrieError(Exception):
    pass


class FrozenTrieError(LetterTrieError):
    """Raised when inserting into a frozen Trie."""


class StaleAnnotationError(LetterTrieError):
    """The trie changed after it was annotated, so its score bounds can't be trusted."""
