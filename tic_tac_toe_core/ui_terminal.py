# ruff: noqa: T201

from tic_tac_toe_core.board import BOARD_SIZE, CELL_COUNT
from tic_tac_toe_core.game import GamePhase
from tic_tac_toe_core.game_engine import GameEngine
from tic_tac_toe_core.ui import Ui

RESTART_COMMANDS = ("r", "restart")
EXIT_COMMANDS = ("exit", "quit")


class TerminalUi(Ui):
    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._game_over = False

    def run(self) -> None:
        super().run()
        while self._running:
            self._get_input()
        print("Terminal UI stopped", flush=True)

    def _ask_for_move(self) -> None:
        if self._game_over:
            print("Type 'restart' to play again or 'exit' to quit: ", end="", flush=True)
            return
        player = self._game_engine.game.current_player
        print(f"Player {player}'s move (1-{CELL_COUNT}): ", end="", flush=True)

    def _get_input(self) -> None:
        try:
            input_str = input().strip().lower()
        except (KeyboardInterrupt, EOFError):
            self._stop()
            return

        if input_str in EXIT_COMMANDS:
            self._stop()
            return

        if input_str in RESTART_COMMANDS:
            self._restart()
            return

        if self._game_over:
            self._ask_for_move()
            return

        try:
            board_position = int(input_str)
        except ValueError:
            self._on_input_error("Not an integer")
            return

        if not (1 <= board_position <= CELL_COUNT):
            self._on_input_error(f"Not between 1 and {CELL_COUNT}")
            return

        self._apply_move(board_position - 1)

    def _render_board(self) -> None:
        game = self._game_engine.game
        board = game.board

        def _cell_value(index: int) -> str:
            value = board[index]
            return value if value is not None else str(index + 1)

        rows = []
        for r in range(BOARD_SIZE):
            start = r * BOARD_SIZE
            row = " | ".join(_cell_value(start + i) for i in range(BOARD_SIZE))
            rows.append(f" {row} ")

        separator = "\n-----------\n"
        output = separator.join(rows)
        print(f"\n{output}\n", flush=True)

        self._game_over = game.phase is GamePhase.TERMINAL
        if not self._game_over:
            print(game.status_label(), flush=True)
            self._ask_for_move()

    def _show_end_message(self, message: str) -> None:
        line = self._game_engine.game.winning_line
        if line is not None:
            print(f"{message} (cells {'-'.join(str(i + 1) for i in line)})", flush=True)
        else:
            print(message, flush=True)
        self._ask_for_move()

    def _on_move_rejected(self, index: int) -> None:
        self._on_input_error(f"Cell {index + 1} is not available")

    def _on_input_error(self, message: str) -> None:
        if not self._running:
            return
        print(message, flush=True)
        self._ask_for_move()
