"""Move validation: a placement must point into an existing arrow."""

from dataclasses import dataclass

try:
    from Board import Cell, Direction, Grid
    from engine.errors import IllegalMove
except ImportError:
    from Arrow_Chain_Game.Board import Cell, Direction, Grid
    from Arrow_Chain_Game.engine.errors import IllegalMove


@dataclass(frozen=True)
class Move:
    """Candidate placement. Holds the target cell without owning it."""

    cell: Cell
    direction: Direction

    @classmethod
    def at(cls, grid: Grid, x: int, y: int, direction: Direction) -> "Move":
        return cls(grid.cell_at(x, y), Direction(direction))

    def is_legal(self, grid: Grid) -> bool:
        return is_legal_move(grid, self.cell, self.direction)

    def __str__(self):
        return f"({self.cell.x},{self.cell.y}) {self.direction.glyph}"


def check_move(grid: Grid, move: Move) -> bool:
    """
    Validate a move against occupancy and the continue-the-chain rule.
    Raises IllegalMove with the failing reason.
    """
    if move.direction == Direction.EMPTY:
        raise IllegalMove("Cannot place an empty arrow")
    if not move.cell.is_empty():
        raise IllegalMove("Cell already occupied")

    target = grid.neighbor(move.cell, move.direction)
    if target is None:
        raise IllegalMove("Arrow points off the grid")
    if target.is_empty():
        raise IllegalMove("Arrow points at an empty cell")

    return True


def is_legal_move(grid: Grid, cell: Cell, direction: Direction) -> bool:
    # Never cached: legality shifts as chains rotate neighbours.
    try:
        return check_move(grid, Move(cell, direction))
    except IllegalMove:
        return False


def legal_targets(grid: Grid, direction: Direction) -> list[Cell]:
    """Every cell where an arrow in direction could be placed right now."""
    return [cell for cell in grid.cells() if is_legal_move(grid, cell, direction)]
