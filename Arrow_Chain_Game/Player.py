"""Input sources: scripted, text-console, and GUI players."""

try:
    from engine.commands import QUIT, parse_command
except ImportError:
    from Arrow_Chain_Game.engine.commands import QUIT, parse_command


def _has_fileno(stream):
    try:
        stream.fileno()
    except (AttributeError, OSError, ValueError):
        return False
    return True


class Player:
    def next_action(self, game, deadline=None):
        """Return the next Command, or None if nothing arrived before deadline."""
        raise NotImplementedError


class ScriptPlayer(Player):
    """Plays a fixed sequence of commands; None entries are idle polls."""

    def __init__(self, actions):
        self._actions = list(actions)
        self._idx = 0

    def next_action(self, game, deadline=None):
        if self._idx >= len(self._actions):
            return QUIT
        action = self._actions[self._idx]
        self._idx += 1
        if isinstance(action, str):
            return parse_command(action)
        return action


class HumanPlayer(Player):
    def __init__(self, stream=None):
        self.stream = stream
        self._buffer = ""

    def next_action(self, game, deadline=None):
        """Text-input player; polls stdin until deadline (None on timeout, QUIT on EOF)."""
        import os
        import sys
        import time

        stream = sys.stdin if self.stream is None else self.stream
        if deadline is None or not _has_fileno(stream):
            # No descriptor to wait on: read the next line directly.
            raw = stream.readline()
            if not raw:
                return QUIT
            return parse_command(raw)

        remaining = deadline - time.time()
        if remaining <= 0:
            return None

        if os.name == "nt" and stream is sys.stdin:
            # Windows: select() on stdin is not supported. Poll with msvcrt.
            import msvcrt

            while time.time() < deadline:
                if msvcrt.kbhit():
                    ch = msvcrt.getwche()
                    if ch in ("\r", "\n"):
                        sys.stdout.write("\n")
                        raw, self._buffer = self._buffer, ""
                        return parse_command(raw)
                    self._buffer += ch
                time.sleep(0.01)
            return None

        import select

        rlist, _, _ = select.select([stream], [], [], remaining)
        if not rlist:
            return None
        raw = stream.readline()
        if not raw:
            return QUIT
        return parse_command(raw)


class GuiHumanPlayer(Player):
    def __init__(self, view):
        self.view = view

    def next_action(self, game, deadline=None):
        if deadline is None:
            raise ValueError("GUI player requires deadline for responsiveness")
        return self.view.wait_for_action(game, deadline)
