from dataclasses import dataclass
from enum import Enum

from tic_tac_toe_core.board import Board, Cell, PlayerSymbol, check_index, other_symbol
from tic_tac_toe_core.outcome import Draw, Line, Outcome, Won, evaluate, is_terminal

FIRST_PLAYER: PlayerSymbol = "X"


class GamePhase(Enum):
    ACTIVE = "active"
    TERMINAL = "terminal"


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    board: tuple[Cell, ...]
    current_player: PlayerSymbol
    outcome: Outcome


@dataclass(frozen=True, slots=True)
class MoveResult:
    accepted: bool
    snapshot: GameSnapshot


class Game:
    """Authoritative board and turn for one game session.

    All mutation goes through ``apply_move`` and ``reset``. Illegal moves on occupied cells
    or after a win are rejected without raising; only a malformed index raises.
    """

    def __init__(self) -> None:
        self._board = Board()
        self._current_player: PlayerSymbol = FIRST_PLAYER

    @property
    def board(self) -> tuple[Cell, ...]:
        return self._board.cells

    @property
    def current_player(self) -> PlayerSymbol:
        return self._current_player

    @property
    def phase(self) -> GamePhase:
        return GamePhase.TERMINAL if is_terminal(self.current_outcome()) else GamePhase.ACTIVE

    @property
    def winning_line(self) -> Line | None:
        outcome = self.current_outcome()
        return outcome.line if isinstance(outcome, Won) else None

    def current_outcome(self) -> Outcome:  # noqa: D102
        return evaluate(self._board)

    def snapshot(self) -> GameSnapshot:  # noqa: D102
        return GameSnapshot(self._board.cells, self._current_player, self.current_outcome())

    def is_cell_playable(self, index: int) -> bool:
        """Whether a move at ``index`` would currently be accepted."""
        check_index(index)
        return self._board.is_empty(index) and not isinstance(self.current_outcome(), Won)

    def apply_move(self, index: int) -> MoveResult:
        """Place the current player's mark at ``index`` and pass the turn.

        Raises InvalidArgumentError if ``index`` is not an int in 0-8.
        """
        if not self.is_cell_playable(index):
            return MoveResult(accepted=False, snapshot=self.snapshot())

        self._board.place(index, self._current_player)
        self._current_player = other_symbol(self._current_player)
        return MoveResult(accepted=True, snapshot=self.snapshot())

    def reset(self) -> GameSnapshot:  # noqa: D102
        self._board.clear()
        self._current_player = FIRST_PLAYER
        return self.snapshot()

    def status_label(self) -> str:  # noqa: D102
        match self.current_outcome():
            case Won(winner=winner):
                return f"Winner: {winner}"
            case Draw():
                return "Draw game"
            case _:
                return f"Next player: {self._current_player}"
