import logging
from collections.abc import Callable

from tic_tac_toe_core.game import Game
from tic_tac_toe_core.outcome import Outcome, is_terminal

_log = logging.getLogger(__name__)


class GameEngine:
    def __init__(self) -> None:
        self._game = Game()
        self._board_updated_cbs: list[Callable[[], None]] = []
        self._game_over_cbs: list[Callable[[Outcome], None]] = []

    @property
    def game(self) -> Game:
        return self._game

    def add_board_updated_cb(self, callback: Callable[[], None]) -> None:
        self._board_updated_cbs.append(callback)

    def add_game_over_cb(self, callback: Callable[[Outcome], None]) -> None:
        self._game_over_cbs.append(callback)

    def start(self) -> None:
        """Notify listeners once so they can draw the initial board."""
        _log.info("Game started, %s", self._game.status_label())
        self._notify_board_updated()

    def apply_move(self, index: int) -> bool:
        """Try to play ``index`` for the current player.

        Listeners are only notified when the move is accepted. Returns whether it was.
        """
        player = self._game.current_player
        result = self._game.apply_move(index)
        if not result.accepted:
            _log.debug("Rejected move by %s at cell %d (%s)", player, index, self._game.status_label())
            return False

        _log.debug("Player %s played cell %d", player, index)
        self._notify_board_updated()

        outcome = result.snapshot.outcome
        if is_terminal(outcome):
            _log.info("Game over: %s", self._game.status_label())
            self._notify_game_over(outcome)
        return True

    def reset(self) -> None:  # noqa: D102
        self._game.reset()
        _log.info("Game reset")
        self._notify_board_updated()

    def _notify_board_updated(self) -> None:
        for callback in list(self._board_updated_cbs):
            callback()

    def _notify_game_over(self, outcome: Outcome) -> None:
        for callback in list(self._game_over_cbs):
            callback(outcome)
