"""Limits on which units the searcher may consume, one unit at a time.

A constraint hands out opaque states. options(state) lists the (unit, move)
pairs available from a state and advance(state, move) applies one of them.
The searcher only calls advance() for units the trie can actually follow.
"""

from collections import Counter
from typing import Iterable, Protocol, Sequence

from letter_trie.alphabet import Alphabet
from letter_trie.neighbors import dims_for_cells, init_neighbors

EMPTY_CELL = "."


class Constraint[U, S, M](Protocol):
    def start(self) -> S: ...

    def options(self, state: S) -> list[tuple[U, M]]: ...

    def advance(self, state: S, move: M) -> S: ...


class Rack[U]:
    """A multiset of units, each of which may be used once. The rack is its own state."""

    counts: Counter[U]

    def __init__(self, units: Iterable[U] = ()):
        self.counts = Counter(units)

    def __len__(self):
        return self.counts.total()

    def __eq__(self, other):
        return isinstance(other, Rack) and self.counts == other.counts

    def __hash__(self):
        return hash(frozenset(self.counts.items()))

    def __repr__(self):
        return f"Rack({''.join(str(u) * n for u, n in sorted(self.counts.items()))!r})"

    def consume(self, unit: U) -> "Rack[U] | None":
        """A new rack with one fewer `unit`, or None if there isn't one."""
        if not self.counts.get(unit):
            return None
        out = Rack()
        out.counts = self.counts.copy()
        out.counts[unit] -= 1
        if not out.counts[unit]:
            del out.counts[unit]
        return out

    def start(self) -> "Rack[U]":
        return self

    def options(self, state: "Rack[U]") -> list[tuple[U, U]]:
        return [(unit, unit) for unit in sorted(state.counts)]

    def advance(self, state: "Rack[U]", move: U) -> "Rack[U]":
        out = state.consume(move)
        assert out is not None
        return out

    @staticmethod
    def from_letters(letters: str, alphabet: Alphabet[U] | None = None) -> "Rack[U]":
        return Rack(alphabet.split(letters) if alphabet else letters.lower())


type DiceState = tuple[int | None, int]
"""(last cell, bitmask of used cells). The last cell is None before the first move."""


class DiceGrid[U]:
    """One unit per cell of a w x h grid; words follow adjacent, unused cells.

    Cells are in column-major order, matching neighbors.init_neighbors. A None
    cell is empty and can't be used.
    """

    cells: list[U | None]
    dims: tuple[int, int]

    def __init__(self, cells: Sequence[U | None], dims: tuple[int, int]):
        w, h = dims
        if len(cells) != w * h:
            raise ValueError(f"Expected {w * h} cells for a {w}x{h} grid, got {len(cells)}")
        self.cells = list(cells)
        self.dims = dims
        self._neighbors = init_neighbors(w, h)
        self._all_cells = tuple(range(len(cells)))

    def __repr__(self):
        return f"DiceGrid({self.cells!r}, {self.dims})"

    def start(self) -> DiceState:
        return (None, 0)

    def options(self, state: DiceState) -> list[tuple[U, int]]:
        last, used = state
        candidates = self._all_cells if last is None else self._neighbors[last]
        out = [
            (self.cells[i], i)
            for i in candidates
            if self.cells[i] is not None and not used & (1 << i)
        ]
        out.sort(key=lambda unit_cell: unit_cell[0])
        return out

    def advance(self, state: DiceState, move: int) -> DiceState:
        _, used = state
        assert not used & (1 << move)
        return (move, used | (1 << move))

    @staticmethod
    def from_board(
        board: str,
        dims: tuple[int, int] | None = None,
        alphabet: Alphabet[U] | None = None,
    ) -> "DiceGrid[U]":
        """Parse "abcdefghi", or "a b qu d" when faces have more than one letter.

        "." marks an empty cell.
        """
        faces = board.split() if " " in board else list(board)
        cells = []
        for face in faces:
            face = face.lower()
            if face == EMPTY_CELL:
                cells.append(None)
                continue
            units = alphabet.split(face) if alphabet else (face,)
            if len(units) != 1:
                raise ValueError(f"Die face {face!r} must be a single unit, got {units}")
            cells.append(units[0])
        return DiceGrid(cells, dims or dims_for_cells(len(cells)))
