"""Entry point for the Arrow Chain puzzle. Load config, wire input/renderer, start Chaingame."""

import logging
import sys
from pathlib import Path

import yaml

try:
    from utils.cli import parse_args
    from utils.logger import log_event, quiet
    from utils.timer import ms_to_seconds
    from Chaingame import Chaingame
    from Player import HumanPlayer, GuiHumanPlayer
    from engine.commands import run_script
    from gui.text_view import TextView
    from gui.pygame_view import PygameView
except ImportError:
    from Arrow_Chain_Game.utils.cli import parse_args
    from Arrow_Chain_Game.utils.logger import log_event, quiet
    from Arrow_Chain_Game.utils.timer import ms_to_seconds
    from Arrow_Chain_Game.Chaingame import Chaingame
    from Arrow_Chain_Game.Player import HumanPlayer, GuiHumanPlayer
    from Arrow_Chain_Game.engine.commands import run_script
    from Arrow_Chain_Game.gui.text_view import TextView
    from Arrow_Chain_Game.gui.pygame_view import PygameView


LOGGER = logging.getLogger(__name__)

PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "render_interval_ms": 30,
    "chain_interval_ms": 1000,
    "window_size": 500,
    "log_moves": True,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Arrow_Chain_Game/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Read settings YAML over the defaults. A missing file falls back to defaults."""
    path = resolve_project_path(path)
    settings = dict(DEFAULT_SETTINGS)
    if not path.exists():
        LOGGER.warning("Settings file %s not found; using defaults", path)
        return settings
    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{path}: settings must be a mapping")
    for key in loaded:
        if key not in DEFAULT_SETTINGS:
            LOGGER.warning("Ignoring unknown setting %r in %s", key, path)
    settings.update({k: v for k, v in loaded.items() if k in DEFAULT_SETTINGS})
    for key, default in DEFAULT_SETTINGS.items():
        value = settings[key]
        # bool is an int subclass; keep the two apart.
        if type(value) is not type(default):
            raise ValueError(f"{path}: {key} must be {type(default).__name__}, got {value!r}")
        if isinstance(value, int) and not isinstance(value, bool) and value < 0:
            raise ValueError(f"{path}: {key} must be non-negative, got {value}")
    return settings


def build_game(args, settings, player=None, renderer=None, closer=None):
    render_ms = args.render_ms if args.render_ms is not None else settings["render_interval_ms"]
    chain_ms = args.chain_ms if args.chain_ms is not None else settings["chain_interval_ms"]
    return Chaingame(
        player=player,
        render_interval=ms_to_seconds(render_ms),
        chain_interval=ms_to_seconds(chain_ms),
        logger=log_event,
        renderer=renderer,
        closer=closer,
        log_moves=settings["log_moves"] and not args.quiet,
    )


def run_script_mode(args, settings):
    game = build_game(args, settings)
    # Replies go to stdout verbatim; move logging would interleave with them.
    game.logger = quiet
    if args.script in (None, "-"):
        lines = sys.stdin.readlines()
    else:
        with open(args.script, "r", encoding="utf-8") as f:
            lines = f.readlines()
    run_script(game, lines, out=print, keep_going=args.keep_going)


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    if args.mode == "script":
        run_script_mode(args, settings)
        return

    if args.mode == "gui":
        view = PygameView(board_size=5, window_size=args.window_size or settings["window_size"])
        player = GuiHumanPlayer(view=view)
        game = build_game(args, settings, player=player, renderer=view.render, closer=view.close)
    else:
        view = TextView()
        player = HumanPlayer()
        game = build_game(args, settings, player=player, renderer=view.render)
        print("Commands: PLACE x y [DIR], SELECT DIR, UNDO, RESET, STATE, HISTORY, COUNT, QUIT")

    game.play()
    log_event(f"Finished after {len(game.history)} moves")


if __name__ == "__main__":
    main()
