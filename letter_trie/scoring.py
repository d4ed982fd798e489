"""Value tables for scoring words made of trie units.

A word's score is the sum of its unit values plus a bonus that depends only on
its length (in units):

    score(word) = sum(values[u] for u in word) + length_bonus[len(word)]

Pure letter values (Scrabble tiles) leave length_bonus empty. Boggle scores by
length alone, so it has no unit values at all. Keeping both terms in one shape
lets annotate() compute exact subtree bounds for either.
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

SCRABBLE_VALUES = {
    **dict.fromkeys("aeilnorstu", 1),
    **dict.fromkeys("dg", 2),
    **dict.fromkeys("bcmp", 3),
    **dict.fromkeys("fhvwy", 4),
    "k": 5,
    **dict.fromkeys("jx", 8),
    **dict.fromkeys("qz", 10),
}
assert len(SCRABBLE_VALUES) == 26

# Using all seven tiles from the rack earns 50 extra points.
BINGO_LENGTH = 7
BINGO_BONUS = 50

#               0, 1, 2, 3, 4, 5, 6, 7, 8+
BOGGLE_SCORES = (0, 0, 0, 1, 1, 2, 3, 5, 11)


@dataclass(frozen=True)
class ValueTable[U]:
    values: Mapping[U, float] = field(default_factory=dict)
    length_bonus: Sequence[float] = ()
    """Indexed by word length. Longer words get the last entry."""
    default: float = 0
    """Value of units that aren't in `values`."""

    def unit_value(self, unit: U) -> float:
        return self.values.get(unit, self.default)

    def word_bonus(self, length: int) -> float:
        if not self.length_bonus:
            return 0
        return self.length_bonus[min(length, len(self.length_bonus) - 1)]

    def score(self, word: Iterable[U]) -> float:
        length = 0
        total = 0
        for unit in word:
            total += self.unit_value(unit)
            length += 1
        return total + self.word_bonus(length)


def scrabble_values(bingo=True) -> ValueTable[str]:
    bonus = (0,) * BINGO_LENGTH + (BINGO_BONUS,) if bingo else ()
    return ValueTable(values=SCRABBLE_VALUES, length_bonus=bonus)


def boggle_scores() -> ValueTable[str]:
    return ValueTable(length_bonus=BOGGLE_SCORES)


def word_length() -> ValueTable:
    return ValueTable(default=1)


VALUE_TABLES = {
    "scrabble": scrabble_values,
    "boggle": boggle_scores,
    "length": word_length,
}
