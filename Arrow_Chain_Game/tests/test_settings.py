"""Settings loading, CLI parsing, and script mode wiring."""

import pytest

from Arrow_Chain_Game import main as main_mod
from Arrow_Chain_Game.utils.cli import parse_args


def test_bundled_settings_resolve_from_anywhere():
    path = main_mod.resolve_project_path("config/settings.yaml")
    assert path.exists()
    settings = main_mod.load_settings("config/settings.yaml")
    assert settings["render_interval_ms"] == 30
    assert settings["chain_interval_ms"] == 1000


def test_missing_settings_fall_back_to_defaults(tmp_path):
    settings = main_mod.load_settings(tmp_path / "nope.yaml")
    assert settings == main_mod.DEFAULT_SETTINGS


def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("chain_interval_ms: 250\nboard_size: 9\n", encoding="utf-8")
    settings = main_mod.load_settings(path)
    assert settings["chain_interval_ms"] == 250
    assert "board_size" not in settings


def test_cli_overrides_settings():
    args = parse_args(["--chain-ms", "100", "--quiet"])
    game = main_mod.build_game(args, dict(main_mod.DEFAULT_SETTINGS))
    assert game.chain_interval == 0.1
    assert game.render_interval == 0.03
    assert game.log_moves is False


def test_script_mode_prints_replies(tmp_path, capsys):
    script = tmp_path / "moves.txt"
    script.write_text("PLACE 2 1 DOWN\nTICK\nCOUNT\n", encoding="utf-8")
    main_mod.main(["--mode", "script", "--script", str(script), "--settings", str(tmp_path / "none.yaml")])
    out = capsys.readouterr().out.splitlines()
    assert out == ["accepted", "idle", "up=0 right=1 down=1 left=0"]


@pytest.mark.parametrize(
    "body, key",
    [
        ("chain_interval_ms: fast\n", "chain_interval_ms"),
        ("render_interval_ms: -5\n", "render_interval_ms"),
        ("log_moves: 1\n", "log_moves"),
        ("window_size: true\n", "window_size"),
    ],
)
def test_bad_setting_values_name_the_key(tmp_path, body, key):
    path = tmp_path / "settings.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError, match=key):
        main_mod.load_settings(path)
