"""Textual command stream: parsing and scripted runs against a game."""

import pytest

from Arrow_Chain_Game.Board import Direction
from Arrow_Chain_Game.Chaingame import Chaingame
from Arrow_Chain_Game.engine.commands import Command, parse_command, run_script
from Arrow_Chain_Game.engine.errors import CommandError


def quiet_game():
    return Chaingame(logger=lambda *_: None)


def test_parse_variants():
    assert parse_command("  ") is None
    assert parse_command("# just a comment") is None
    assert parse_command("place 2 1 d  # root") == Command("PLACE", (2, 1, Direction.DOWN))
    assert parse_command("PLACE 3 2") == Command("PLACE", (3, 2, None))
    assert parse_command("tick") == Command("TICK", (1,))
    assert parse_command("TICK 4") == Command("TICK", (4,))
    assert parse_command("tick all") == Command("TICK", ("ALL",))
    assert parse_command("select left") == Command("SELECT", (Direction.LEFT,))
    assert parse_command("undo") == Command("UNDO", ())


@pytest.mark.parametrize(
    "line",
    ["JUMP", "PLACE 1", "PLACE a 1 UP", "PLACE 1 1 sideways", "TICK -1", "UNDO now", "SELECT"],
)
def test_parse_rejects_malformed(line):
    with pytest.raises(CommandError):
        parse_command(line)


def test_scenario_script():
    game = quiet_game()
    out = []
    replies = run_script(
        game,
        [
            "STATE",
            "PLACE 2 1 DOWN",
            "PLACE 3 2 LEFT",
            "STATE",
            "TICK",
            "STATE",
            "HISTORY",
            "COUNT",
        ],
        out=out.append,
    )
    assert replies == out
    assert replies[0] == ".....\n.....\n..^..\n.....\n.....\nengine: idle"
    assert replies[1] == "accepted"
    assert replies[2].startswith("rejected:")
    assert replies[3].endswith("engine: active 2 2")
    assert replies[4] == "idle"
    assert replies[5] == ".....\n..v..\n..>..\n.....\n.....\nengine: idle"
    assert replies[6] == "1. (2,1) ↓"
    assert replies[7] == "up=0 right=1 down=1 left=0"


def test_undo_reset_and_tick_all():
    game = quiet_game()
    replies = run_script(
        game,
        ["UNDO", "PLACE 2 1 D", "TICK ALL", "PLACE 3 2 L", "TICK 5", "UNDO", "STATE", "RESET", "HISTORY"],
        out=lambda *_: None,
    )
    assert replies[0] == "nothing to undo"
    assert replies[2] == "idle"
    assert replies[4] == "idle"
    assert replies[5] == "undone"
    assert replies[6].startswith(".....\n..v..\n..>..")
    assert replies[7] == "reset"
    assert replies[8] == "(empty)"


def test_select_then_place_without_direction():
    game = quiet_game()
    replies = run_script(game, ["SELECT up", "PLACE 2 3"], out=lambda *_: None)
    assert replies == ["selected UP", "accepted"]
    assert game.grid.cell_at(2, 3).direction == Direction.UP


def test_bad_line_stops_unless_keep_going():
    with pytest.raises(CommandError, match="line 2"):
        run_script(quiet_game(), ["STATE", "PLACE 7 7 UP", "STATE"], out=lambda *_: None)

    replies = run_script(quiet_game(), ["PLACE 7 7 UP", "COUNT"], out=lambda *_: None, keep_going=True)
    assert replies[0].startswith("error: line 1")
    assert replies[1] == "up=1 right=0 down=0 left=0"


def test_quit_ends_script():
    replies = run_script(quiet_game(), ["COUNT", "QUIT", "RESET"], out=lambda *_: None)
    assert replies == ["up=1 right=0 down=0 left=0"]
