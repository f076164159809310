"""Game state and tick scheduling: grid, chain engine, history, selector."""

from dataclasses import dataclass

try:
    from Board import Direction, Grid
    from engine import commands, referee
    from engine.chain_engine import ChainEngine
    from engine.errors import IllegalMove, InvalidTransition
    from engine.history import History
    from utils import timer
except ImportError:
    from Arrow_Chain_Game.Board import Direction, Grid
    from Arrow_Chain_Game.engine import commands, referee
    from Arrow_Chain_Game.engine.chain_engine import ChainEngine
    from Arrow_Chain_Game.engine.errors import IllegalMove, InvalidTransition
    from Arrow_Chain_Game.engine.history import History
    from Arrow_Chain_Game.utils import timer


@dataclass(frozen=True)
class RenderState:
    """Read-only view handed to renderers on each render tick."""

    grid: Grid
    selected: Direction
    legal_targets: tuple
    active_cell: object
    in_progress: bool
    counts: dict
    history: tuple


class Chaingame:
    def __init__(self, player=None, render_interval=0.03, chain_interval=1.0, logger=print, renderer=None, closer=None, log_moves=True):
        self.grid = Grid()
        self.player = player
        self.render_interval = render_interval
        self.chain_interval = chain_interval
        self.logger = logger
        self.renderer = renderer
        self.closer = closer
        self.log_moves = log_moves
        self.selected = Direction.UP
        self.history = History(self.grid, engine_factory=self._make_engine)
        self.engine = self._make_engine(self.grid)

    def _make_engine(self, grid):
        return ChainEngine(grid, logger=self._log_move)

    def _log_move(self, message):
        if self.log_moves:
            self.logger(message)

    # --- input ---

    def select(self, direction):
        direction = Direction(direction)
        if direction == Direction.EMPTY:
            raise ValueError("cannot select the empty direction")
        self.selected = direction

    def place(self, x, y, direction=None):
        """Try to start a chain at (x, y). Returns (accepted, reason)."""
        move = referee.Move.at(self.grid, x, y, self.selected if direction is None else direction)
        try:
            self.engine.check_submit(move)
        except (InvalidTransition, IllegalMove) as exc:
            self._log_move(f"Rejected {move}: {exc}")
            return False, str(exc)

        self.engine.submit(move)
        self.history.record(move)
        self._log_move(f"Move {len(self.history)}: {move}")
        return True, None

    def undo(self):
        engine = self.history.undo_last()
        if engine is None:
            return False
        self.engine = engine
        self._log_move(f"Undo: {len(self.history)} moves replayed")
        return True

    def reset(self):
        self.history.reset_all()
        self.engine = self._make_engine(self.grid)
        self._log_move("Reset")

    def on_input(self, command):
        """Apply one input action; returns the textual reply."""
        return commands.execute(self, command)

    # --- ticks ---

    def on_chain_tick(self):
        """Advance a running chain by one cell. Returns False when idle."""
        if not self.engine.is_in_progress():
            return False
        return self.engine.step()

    def legal_targets(self):
        # Nothing is placeable while a chain runs.
        if self.engine.is_in_progress():
            return ()
        return tuple(referee.legal_targets(self.grid, self.selected))

    def render_state(self):
        return RenderState(
            grid=self.grid,
            selected=self.selected,
            legal_targets=self.legal_targets(),
            active_cell=self.engine.active_cell(),
            in_progress=self.engine.is_in_progress(),
            counts=self.grid.direction_counts(),
            history=tuple(self.history.lines()),
        )

    def on_render_tick(self):
        if self.renderer:
            self.renderer(self.render_state())

    def play(self):
        """Run the scheduling loop until the player quits."""
        if self.player is None:
            raise ValueError("play() needs a player to read input from")

        next_render = timer.deadline_after(0)
        next_chain = timer.deadline_after(self.chain_interval)
        try:
            while True:
                if timer.time_remaining(next_render) <= 0:
                    self.on_render_tick()
                    next_render = timer.deadline_after(self.render_interval)
                if timer.time_remaining(next_chain) <= 0:
                    self.on_chain_tick()
                    next_chain = timer.deadline_after(self.chain_interval)

                try:
                    command = self.player.next_action(self, deadline=min(next_render, next_chain))
                    if command is None:
                        continue
                    if command.name == "QUIT":
                        break
                    if command.name == "TICK":
                        self.logger("TICK is driven by the chain timer here")
                        continue
                    reply = self.on_input(command)
                except ValueError as exc:
                    self.logger(f"Input error: {exc}")
                    continue
                if reply:
                    self.logger(reply)

            self.on_render_tick()
        finally:
            if self.closer:
                self.closer()
