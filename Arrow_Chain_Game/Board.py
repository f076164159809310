"""Grid state container: 5x5 arrow cells with 4-neighbour lookups."""

from enum import IntEnum

try:
    from engine.errors import OutOfRange
except ImportError:
    from Arrow_Chain_Game.engine.errors import OutOfRange


SIZE = 5
ROOT = (2, 2)


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3
    EMPTY = 4

    def rotated(self):
        """Next direction clockwise; EMPTY never rotates into an arrow."""
        if self is Direction.EMPTY:
            raise ValueError("cannot rotate an empty cell")
        return Direction((self + 1) % 4)

    @property
    def glyph(self):
        return _GLYPHS[self]

    @classmethod
    def parse(cls, token):
        """Accept 'U', 'up', 'Right', ... (EMPTY is not a placeable direction)."""
        key = str(token).strip().upper()
        if key in _TOKENS:
            return _TOKENS[key]
        raise ValueError(f"unknown direction: {token!r}")


# Offsets use screen coordinates: y grows downwards.
DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_GLYPHS = {
    Direction.UP: "↑",
    Direction.RIGHT: "→",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.EMPTY: "",
}

_TEXT = {
    Direction.UP: "^",
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.EMPTY: ".",
}

_TOKENS = {
    "U": Direction.UP,
    "UP": Direction.UP,
    "R": Direction.RIGHT,
    "RIGHT": Direction.RIGHT,
    "D": Direction.DOWN,
    "DOWN": Direction.DOWN,
    "L": Direction.LEFT,
    "LEFT": Direction.LEFT,
}


class Cell:
    __slots__ = ("_x", "_y", "direction")

    def __init__(self, x, y, direction=Direction.EMPTY):
        self._x = x
        self._y = y
        self.direction = direction

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def pos(self):
        return self._x, self._y

    def is_empty(self):
        return self.direction == Direction.EMPTY

    def rotate(self):
        self.direction = self.direction.rotated()

    def __repr__(self):
        return f"Cell({self._x}, {self._y}, {self.direction.name})"


class Grid:
    def __init__(self, size=SIZE):
        # Flat row-major storage; neighbours are computed, never stored.
        self.size = size
        self._cells = [Cell(x, y) for y in range(size) for x in range(size)]
        self.reset_to_initial()

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def cell_at(self, x, y):
        """Return the cell at (x, y); raise OutOfRange outside the lattice."""
        if not self.in_bounds(x, y):
            raise OutOfRange(f"({x}, {y}) is outside the {self.size}x{self.size} grid")
        return self._cells[y * self.size + x]

    def cells(self):
        return iter(self._cells)

    def neighbor(self, cell, direction):
        """Adjacent cell in direction, or None at the edge."""
        if direction not in DELTAS:
            raise ValueError(f"{direction!r} is not a propagation direction")
        dx, dy = DELTAS[direction]
        nx, ny = cell.x + dx, cell.y + dy
        if not self.in_bounds(nx, ny):
            return None
        return self._cells[ny * self.size + nx]

    def reset_to_initial(self):
        for cell in self._cells:
            cell.direction = Direction.EMPTY
        self.cell_at(*ROOT).direction = Direction.UP

    def snapshot(self):
        return tuple(cell.direction for cell in self._cells)

    def direction_counts(self):
        counts = {d: 0 for d in DELTAS}
        for cell in self._cells:
            if not cell.is_empty():
                counts[cell.direction] += 1
        return counts

    def to_text(self):
        rows = []
        for y in range(self.size):
            rows.append("".join(_TEXT[self.cell_at(x, y).direction] for x in range(self.size)))
        return "\n".join(rows)
