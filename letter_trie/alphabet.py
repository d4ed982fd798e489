"""Alphabets turn surface words into tuples of trie units and back.

The trie, the annotator and the searcher only ever see units. Tiles that carry
more than one letter (the Boggle "Qu" die) are handled here by merging them into
a single unit before the word is inserted.
"""

from typing import Iterable, Protocol, Sequence

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"

# Boggle has no bare "q" die face, only "Qu".
BOGGLE_TILES = tuple(c for c in LOWERCASE if c != "q") + ("qu",)


class Alphabet[U](Protocol):
    def split(self, word: str) -> tuple[U, ...]: ...

    def join(self, units: Sequence[U]) -> str: ...


class Letters:
    """One lowercase character per unit.

    If `letters` is given, words using any other character are rejected.
    """

    def __init__(self, letters: Iterable[str] | None = None):
        self.letters = frozenset(letters) if letters is not None else None

    def split(self, word: str) -> tuple[str, ...]:
        word = word.lower()
        if self.letters is not None:
            for c in word:
                if c not in self.letters:
                    raise ValueError(f"{word!r}: {c!r} is not in the alphabet")
        return tuple(word)

    def join(self, units: Sequence[str]) -> str:
        return "".join(units)


class TileAlphabet:
    """Each unit is one tile face, which may span several letters.

    Words are split greedily, longest tile first:

        TileAlphabet(BOGGLE_TILES).split("quiz") == ("qu", "i", "z")

    A word that can't be spelled with the tiles ("qi" for Boggle) raises ValueError.
    """

    def __init__(self, tiles: Iterable[str]):
        self.tiles = frozenset(t.lower() for t in tiles)
        assert self.tiles and all(self.tiles)
        self._max_len = max(len(t) for t in self.tiles)

    def split(self, word: str) -> tuple[str, ...]:
        word = word.lower()
        out = []
        i = 0
        while i < len(word):
            for n in range(min(self._max_len, len(word) - i), 0, -1):
                tile = word[i : i + n]
                if tile in self.tiles:
                    out.append(tile)
                    i += n
                    break
            else:
                raise ValueError(f"{word!r} can't be spelled with these tiles")
        return tuple(out)

    def join(self, units: Sequence[str]) -> str:
        return "".join(units)


ALPHABETS = {
    "any": lambda: Letters(),
    "letters": lambda: Letters(LOWERCASE),
    "boggle": lambda: TileAlphabet(BOGGLE_TILES),
}
