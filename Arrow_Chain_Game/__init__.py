"""Arrow_Chain_Game package exports."""

from .Board import Cell, Direction, Grid
from .Chaingame import Chaingame
from .Player import Player, ScriptPlayer, HumanPlayer, GuiHumanPlayer
from .engine.chain_engine import ChainEngine
from .engine.history import History
from .engine.referee import Move, is_legal_move

# Subpackages for the chain engine, GUI, and helpers
from . import engine, gui, utils

__all__ = [
    "Cell",
    "Direction",
    "Grid",
    "Chaingame",
    "Player",
    "ScriptPlayer",
    "HumanPlayer",
    "GuiHumanPlayer",
    "ChainEngine",
    "History",
    "Move",
    "is_legal_move",
    "engine",
    "gui",
    "utils",
]
