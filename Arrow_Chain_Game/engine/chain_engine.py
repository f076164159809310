"""Chain propagation state machine: one rotated cell per chain tick."""

try:
    from engine import referee
    from engine.errors import IllegalMove, InvalidTransition
    from utils.logger import quiet
except ImportError:
    from Arrow_Chain_Game.engine import referee
    from Arrow_Chain_Game.engine.errors import IllegalMove, InvalidTransition
    from Arrow_Chain_Game.utils.logger import quiet


class ChainEngine:
    """
    Idle (no chain) or Propagating (active cell set).

    submit() starts a chain from a legal move; step() rotates the active cell
    and hands the chain to the cell it now points at. At most one chain runs
    at a time, so a submit during propagation is rejected.
    """

    def __init__(self, grid, logger=quiet):
        self.grid = grid
        self.logger = logger
        self._in_progress = False
        self._active = None

    def is_in_progress(self):
        return self._in_progress

    def active_cell(self):
        return self._active

    def check_submit(self, move):
        """Raise InvalidTransition/IllegalMove if move cannot start a chain now."""
        if self._in_progress:
            raise InvalidTransition("A chain is already in progress")
        return referee.check_move(self.grid, move)

    def check_step(self):
        if not self._in_progress:
            raise InvalidTransition("No chain in progress")
        return True

    def submit(self, move):
        """Place the arrow and start the chain. Returns False on rejection."""
        try:
            self.check_submit(move)
        except (InvalidTransition, IllegalMove) as exc:
            self.logger(f"Rejected {move}: {exc}")
            return False

        move.cell.direction = move.direction
        self._active = self.grid.neighbor(move.cell, move.direction)
        self._in_progress = True
        return True

    def step(self):
        """Advance the chain by one cell. Returns False when called while idle."""
        try:
            self.check_step()
        except InvalidTransition as exc:
            self.logger(f"Step ignored: {exc}")
            return False

        cell = self._active
        cell.rotate()
        nxt = self.grid.neighbor(cell, cell.direction)
        if nxt is None or nxt.is_empty():
            self._in_progress = False
            self._active = None
        else:
            self._active = nxt
        return True

    def run_to_idle(self):
        """Step until the chain terminates; return the number of ticks taken."""
        ticks = 0
        while self._in_progress:
            self.step()
            ticks += 1
        return ticks
