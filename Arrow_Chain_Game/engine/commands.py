"""Textual command stream: PLACE x y DIR, SELECT, TICK, UNDO, RESET, STATE, HISTORY, COUNT."""

from collections import namedtuple

try:
    from Board import DELTAS, Direction
    from engine.errors import CommandError
except ImportError:
    from Arrow_Chain_Game.Board import DELTAS, Direction
    from Arrow_Chain_Game.engine.errors import CommandError


Command = namedtuple("Command", ["name", "args"])

QUIT = Command("QUIT", ())

_ARITY = {
    "PLACE": (2, 3),
    "SELECT": (1, 1),
    "TICK": (0, 1),
    "UNDO": (0, 0),
    "RESET": (0, 0),
    "STATE": (0, 0),
    "HISTORY": (0, 0),
    "COUNT": (0, 0),
    "QUIT": (0, 0),
}


def _int(token, what):
    try:
        return int(token)
    except ValueError as exc:
        raise CommandError(f"{what} must be an integer, got {token!r}") from exc


def _direction(token):
    try:
        return Direction.parse(token)
    except ValueError as exc:
        raise CommandError(str(exc)) from exc


def parse_command(line):
    """Parse one line. Blank lines and '#' comments give None."""
    text = line.split("#", 1)[0].strip()
    if not text:
        return None

    name, *rest = text.split()
    name = name.upper()
    if name not in _ARITY:
        raise CommandError(f"unknown command: {name}")
    low, high = _ARITY[name]
    if not low <= len(rest) <= high:
        raise CommandError(f"{name} takes {low}-{high} arguments, got {len(rest)}")

    if name == "PLACE":
        x = _int(rest[0], "x")
        y = _int(rest[1], "y")
        direction = _direction(rest[2]) if len(rest) == 3 else None
        return Command(name, (x, y, direction))
    if name == "SELECT":
        return Command(name, (_direction(rest[0]),))
    if name == "TICK":
        if not rest:
            return Command(name, (1,))
        if rest[0].upper() == "ALL":
            return Command(name, ("ALL",))
        count = _int(rest[0], "tick count")
        if count < 0:
            raise CommandError("tick count must be non-negative")
        return Command(name, (count,))
    return Command(name, ())


def engine_status(engine):
    active = engine.active_cell()
    if not engine.is_in_progress() or active is None:
        return "idle"
    return f"active {active.x} {active.y}"


def format_counts(counts):
    return " ".join(f"{d.name.lower()}={counts[d]}" for d in DELTAS)


def execute(game, command):
    """Apply a parsed command to a Chaingame and return its textual reply."""
    name, args = command
    if name == "PLACE":
        x, y, direction = args
        accepted, reason = game.place(x, y, direction)
        return "accepted" if accepted else f"rejected: {reason}"
    if name == "SELECT":
        game.select(args[0])
        return f"selected {game.selected.name}"
    if name == "TICK":
        if args[0] == "ALL":
            game.engine.run_to_idle()
        else:
            for _ in range(args[0]):
                if not game.on_chain_tick():
                    break
        return engine_status(game.engine)
    if name == "UNDO":
        return "undone" if game.undo() else "nothing to undo"
    if name == "RESET":
        game.reset()
        return "reset"
    if name == "STATE":
        return f"{game.grid.to_text()}\nengine: {engine_status(game.engine)}"
    if name == "HISTORY":
        lines = game.history.lines()
        return "\n".join(lines) if lines else "(empty)"
    if name == "COUNT":
        return format_counts(game.grid.direction_counts())
    raise CommandError(f"{name} cannot be executed here")


def run_script(game, lines, out=print, keep_going=False):
    """
    Feed a command stream to a game without a scheduler (TICK drives the chain).
    Stops at the first malformed line unless keep_going is set.
    Returns the list of replies.
    """
    replies = []
    for line_no, line in enumerate(lines, start=1):
        try:
            command = parse_command(line)
            if command is None:
                continue
            if command.name == "QUIT":
                break
            reply = execute(game, command)
        except ValueError as exc:
            message = f"line {line_no}: {exc}"
            if not keep_going:
                raise CommandError(message) from exc
            reply = f"error: {message}"
        replies.append(reply)
        out(reply)
    return replies
