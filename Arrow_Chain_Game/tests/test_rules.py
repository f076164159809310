"""Move legality: a new arrow must point into an existing one."""

import pytest

from Arrow_Chain_Game.Board import Direction, Grid
from Arrow_Chain_Game.engine import referee
from Arrow_Chain_Game.engine.errors import IllegalMove


def test_moves_toward_root_are_legal():
    g = Grid()
    toward_root = [
        ((2, 1), Direction.DOWN),
        ((2, 3), Direction.UP),
        ((1, 2), Direction.RIGHT),
        ((3, 2), Direction.LEFT),
    ]
    for (x, y), d in toward_root:
        assert referee.is_legal_move(g, g.cell_at(x, y), d)


def test_root_itself_is_never_legal():
    g = Grid()
    for d in (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT):
        assert not referee.is_legal_move(g, g.cell_at(2, 2), d)


def test_pointing_away_or_off_grid_is_illegal():
    g = Grid()
    assert not referee.is_legal_move(g, g.cell_at(2, 1), Direction.UP)
    assert not referee.is_legal_move(g, g.cell_at(0, 0), Direction.LEFT)
    assert not referee.is_legal_move(g, g.cell_at(4, 4), Direction.DOWN)


def test_check_move_reports_reason():
    g = Grid()
    with pytest.raises(IllegalMove, match="occupied"):
        referee.check_move(g, referee.Move.at(g, 2, 2, Direction.UP))
    with pytest.raises(IllegalMove, match="off the grid"):
        referee.check_move(g, referee.Move.at(g, 0, 0, Direction.UP))
    with pytest.raises(IllegalMove, match="empty cell"):
        referee.check_move(g, referee.Move.at(g, 0, 0, Direction.RIGHT))
    assert referee.check_move(g, referee.Move.at(g, 2, 1, Direction.DOWN)) is True


def test_legality_is_pure():
    g = Grid()
    before = g.snapshot()
    results = [
        referee.is_legal_move(g, cell, d)
        for _ in range(2)
        for cell in g.cells()
        for d in (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)
    ]
    half = len(results) // 2
    assert results[:half] == results[half:]
    assert g.snapshot() == before


def test_legality_follows_grid_changes():
    g = Grid()
    target = g.cell_at(2, 0)
    assert not referee.is_legal_move(g, target, Direction.DOWN)
    g.cell_at(2, 1).direction = Direction.DOWN
    assert referee.is_legal_move(g, target, Direction.DOWN)


def test_legal_targets_for_initial_grid():
    g = Grid()
    assert [c.pos for c in referee.legal_targets(g, Direction.DOWN)] == [(2, 1)]
    assert [c.pos for c in referee.legal_targets(g, Direction.LEFT)] == [(3, 2)]


def test_move_is_legal_delegates_to_predicate():
    g = Grid()
    move = referee.Move.at(g, 1, 2, Direction.RIGHT)
    assert move.is_legal(g)
    assert str(move) == "(1,2) →"
    g.cell_at(1, 2).direction = Direction.UP
    assert not move.is_legal(g)
