import tkinter as tk
from functools import partial
from typing import Final

from tic_tac_toe_core.board import BOARD_SIZE, CELL_COUNT
from tic_tac_toe_core.game_engine import GameEngine
from tic_tac_toe_core.ui import Ui


class TkUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Tk)"
    WIN_BG: Final = "#bfe3bf"
    X_FG: Final = "#bf3f3f"
    O_FG: Final = "#3f3fbf"

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._buttons: list[tk.Button] = []

    def run(self) -> None:
        self._root = tk.Tk()
        self._root.title(self.TITLE)
        self._root.protocol("WM_DELETE_WINDOW", self._stop)
        self._status = tk.StringVar(self._root)
        self._build_widgets()
        super().run()
        self._root.mainloop()

    def _stop(self) -> None:
        self._root.after(0, self._root.quit)
        super()._stop()

    def _build_widgets(self) -> None:
        tk.Label(self._root, textvariable=self._status, font=("Helvetica", 18)).grid(
            row=0,
            column=0,
            columnspan=BOARD_SIZE,
            pady=4,
        )

        for i in range(CELL_COUNT):
            btn = tk.Button(
                self._root,
                text="",
                width=3,
                height=1,
                font=("Helvetica", 32),
                command=partial(self._on_click, i),
            )
            row, col = divmod(i, BOARD_SIZE)
            btn.grid(row=row + 1, column=col, padx=2, pady=2)
            self._buttons.append(btn)
        self._default_bg = self._buttons[0].cget("background")

        tk.Button(self._root, text="Restart", command=self._restart).grid(
            row=BOARD_SIZE + 1,
            column=0,
            columnspan=BOARD_SIZE,
            pady=4,
        )

    def _on_click(self, index: int) -> None:
        if not self._running:
            return
        self._apply_move(index)

    def _render_board(self) -> None:
        game = self._game_engine.game
        winning_line = game.winning_line or ()
        for i, btn in enumerate(self._buttons):
            value = game.board[i]
            btn.config(
                text=value if value is not None else "",
                state=tk.NORMAL if game.is_cell_playable(i) else tk.DISABLED,
                disabledforeground=self.X_FG if value == "X" else self.O_FG,
                background=self.WIN_BG if i in winning_line else self._default_bg,
            )
        self._status.set(game.status_label())
        self._root.title(self.TITLE)

    def _show_end_message(self, message: str) -> None:
        self._root.title(f"{self.TITLE} - {message}")

    def _on_move_rejected(self, _index: int) -> None:
        self._root.bell()
