"""Console renderer: prints the board whenever it changes."""

try:
    from engine.commands import format_counts
except ImportError:
    from Arrow_Chain_Game.engine.commands import format_counts


class TextView:
    def __init__(self, out=print):
        self.out = out
        self._last = None

    def render(self, state):
        # Render ticks are frequent; only print on a visible change.
        key = (state.grid.snapshot(), state.selected, state.active_cell)
        if key == self._last:
            return
        self._last = key

        legal = {cell.pos for cell in state.legal_targets}
        rows = state.grid.to_text().splitlines()
        marked = []
        for y, row in enumerate(rows):
            marked.append("".join("*" if (x, y) in legal else ch for x, ch in enumerate(row)))
        self.out("\n".join(marked))
        status = f"active {state.active_cell.x} {state.active_cell.y}" if state.active_cell else "idle"
        self.out(f"selected {state.selected.name}  {format_counts(state.counts)}  {status}")
