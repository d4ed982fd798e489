import functools


@functools.cache
def init_neighbors(w: int, h: int) -> tuple[tuple[int, ...], ...]:
    """Cells adjacent to each cell (8-way) on a w x h grid, in column-major order.

    Cell i is at column i // h, row i % h. Each tuple is sorted.
    """
    out = []
    for i in range(w * h):
        x, y = divmod(i, h)
        out.append(
            tuple(
                nx * h + ny
                for nx in range(max(0, x - 1), min(w, x + 2))
                for ny in range(max(0, y - 1), min(h, y + 2))
                if (nx, ny) != (x, y)
            )
        )
    return tuple(out)


def parse_dims(size: int) -> tuple[int, int]:
    """33 -> (3, 3), 45 -> (4, 5)."""
    w, h = size // 10, size % 10
    if not (1 <= w <= 9 and 1 <= h <= 9):
        raise ValueError(f"Invalid board size {size}")
    return w, h


def dims_for_cells(n: int) -> tuple[int, int]:
    """Guess square-ish dimensions for a board with n cells."""
    for w in range(int(n**0.5), 0, -1):
        if n % w == 0:
            return w, n // w
    raise ValueError(f"Invalid number of cells {n}")
