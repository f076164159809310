"""Accepted-move log with undo by full replay from the initial grid."""

try:
    from engine.chain_engine import ChainEngine
    from engine.errors import IllegalMove
except ImportError:
    from Arrow_Chain_Game.engine.chain_engine import ChainEngine
    from Arrow_Chain_Game.engine.errors import IllegalMove


def replay(grid, moves, engine_factory=ChainEngine):
    """
    Rebuild grid state from scratch: reset, then submit each move and run its
    chain to completion before the next. Returns the (idle) engine used.
    """
    grid.reset_to_initial()
    engine = engine_factory(grid)
    for move in moves:
        if not engine.submit(move):
            raise IllegalMove(f"Recorded move {move} no longer replays")
        engine.run_to_idle()
    return engine


def format_entry(index, move):
    return f"{index}. {move}"


class History:
    def __init__(self, grid, engine_factory=ChainEngine):
        self.grid = grid
        self.engine_factory = engine_factory
        self._moves = []

    def __len__(self):
        return len(self._moves)

    def record(self, move):
        self._moves.append(move)

    def entries(self):
        return tuple(self._moves)

    def undo_last(self):
        """Drop the last move and replay the rest. Returns the fresh engine, or None if empty."""
        if not self._moves:
            return None
        self._moves.pop()
        return replay(self.grid, self._moves, self.engine_factory)

    def reset_all(self):
        self._moves.clear()
        self.grid.reset_to_initial()

    def lines(self):
        return [format_entry(i, move) for i, move in enumerate(self._moves, start=1)]
