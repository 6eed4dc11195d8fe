from abc import ABC, abstractmethod

from tic_tac_toe_core.game_engine import GameEngine
from tic_tac_toe_core.outcome import Outcome


class Ui(ABC):
    def __init__(self, game_engine: GameEngine) -> None:
        self._game_engine = game_engine
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True
        self._game_engine.start()

    def _stop(self) -> None:
        self._running = False

    def _apply_move(self, index: int) -> None:
        if not self._game_engine.apply_move(index):
            self._on_move_rejected(index)

    def _restart(self) -> None:
        self._game_engine.reset()

    def on_board_updated(self) -> None:
        if not self._running:
            return
        self._render_board()

    def on_game_over(self, _outcome: Outcome) -> None:
        if not self._running:
            return
        self._show_end_message(self._game_engine.game.status_label())

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _show_end_message(self, message: str) -> None:
        pass

    @abstractmethod
    def _on_move_rejected(self, index: int) -> None:
        pass
