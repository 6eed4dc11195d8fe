"""Two-player tic-tac-toe game-state engine."""

from tic_tac_toe_core.board import BOARD_SIZE, CELL_COUNT, Board, Cell, PlayerSymbol
from tic_tac_toe_core.exception import GameError, InvalidArgumentError, LogicError
from tic_tac_toe_core.game import Game, GamePhase, GameSnapshot, MoveResult
from tic_tac_toe_core.game_engine import GameEngine
from tic_tac_toe_core.outcome import WINNING_LINES, Draw, InProgress, Outcome, Won, evaluate, is_terminal

__all__ = [
    "BOARD_SIZE",
    "CELL_COUNT",
    "WINNING_LINES",
    "Board",
    "Cell",
    "Draw",
    "Game",
    "GameEngine",
    "GameError",
    "GamePhase",
    "GameSnapshot",
    "InProgress",
    "InvalidArgumentError",
    "LogicError",
    "MoveResult",
    "Outcome",
    "PlayerSymbol",
    "Won",
    "evaluate",
    "is_terminal",
]
