"""Error taxonomy shared by the grid, the referee, and the chain engine."""


class OutOfRange(ValueError):
    """Coordinate outside the lattice. Callers must reject it, never clamp."""


class IllegalMove(ValueError):
    """Legality predicate failed. Expected from user input; engines report it as False."""


class InvalidTransition(RuntimeError):
    """Submit while a chain is running, or step while idle."""


class CommandError(ValueError):
    """Malformed line in the textual command stream."""
