# Every node lives at one index of a set of parallel lists. Parents are stored as
# indices, so the back-reference never participates in ownership and a node's
# identity is just its index. Nodes are only appended, so a child always has a
# larger index than its parent.

ROOT = 0
NO_PARENT = -1


class NodeArena[U]:
    units: list[U | None]
    """The unit on the edge into each node (None for the root)."""

    parents: list[int]
    depths: list[int]
    is_word: list[bool]
    children: list[dict[U, int]]

    def __init__(self):
        self.units = []
        self.parents = []
        self.depths = []
        self.is_word = []
        self.children = []
        self.new_node(None, NO_PARENT)

    def num_nodes(self):
        return len(self.units)

    def new_node(self, unit: U | None, parent: int) -> int:
        idx = len(self.units)
        self.units.append(unit)
        self.parents.append(parent)
        self.depths.append(0 if parent == NO_PARENT else self.depths[parent] + 1)
        self.is_word.append(False)
        self.children.append({})
        if parent != NO_PARENT:
            self.children[parent][unit] = idx
        return idx

    def sorted_children(self, idx: int) -> list[tuple[U, int]]:
        # unit keys are unique, so this never compares indices
        return sorted(self.children[idx].items())

    def path(self, idx: int) -> tuple[U, ...]:
        out = []
        while idx != ROOT:
            out.append(self.units[idx])
            idx = self.parents[idx]
        out.reverse()
        return tuple(out)
