from typing import Final

import pygame

from tic_tac_toe_core.board import BOARD_SIZE, Cell
from tic_tac_toe_core.game_engine import GameEngine
from tic_tac_toe_core.ui import Ui


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    BOARD_PX: Final = 480
    STATUS_HEIGHT: Final = 64
    CELL_SIZE: Final = BOARD_PX // BOARD_SIZE
    LINE_WIDTH: Final = 4

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    WIN_COLOR: Final = (63, 95, 63)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._board: tuple[Cell, ...] = self._game_engine.game.board
        self._winning_line: tuple[int, ...] = ()
        self._status = ""
        self._end_message = ""

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.BOARD_PX, self.BOARD_PX + self.STATUS_HEIGHT))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, 96)
        self._small_font = pygame.font.SysFont(None, 40)
        self._hint_font = pygame.font.SysFont(None, 24)

        super().run()
        self._main_loop()

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(30)
            self._handle_events()
            self._render()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.KEYDOWN if event.key == pygame.K_ESCAPE:
                    self._stop()
                case pygame.KEYDOWN if event.key == pygame.K_r:
                    self._restart()
                case pygame.MOUSEBUTTONDOWN:
                    self._on_click(event.pos)

    def _on_click(self, pos: tuple[int, int]) -> None:
        x, y = pos
        if y >= self.BOARD_PX:
            if self._end_message:
                self._restart()
            return
        col = x // self.CELL_SIZE
        row = y // self.CELL_SIZE
        if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
            return
        self._apply_move(row * BOARD_SIZE + col)

    def _render_board(self) -> None:
        game = self._game_engine.game
        self._board = game.board
        self._winning_line = game.winning_line or ()
        self._status = game.status_label()
        self._end_message = ""

    def _show_end_message(self, message: str) -> None:
        self._end_message = message

    def _on_move_rejected(self, _index: int) -> None:
        pass

    def _render(self) -> None:
        pygame.display.set_caption(f"{self.TITLE} - {self._status}")
        self._screen.fill(self.BG_COLOR)
        self._draw_winning_cells()
        self._draw_grid()
        self._draw_marks()
        self._draw_status()
        pygame.display.flip()

    def _cell_rect(self, index: int) -> pygame.Rect:
        row, col = divmod(index, BOARD_SIZE)
        return pygame.Rect(col * self.CELL_SIZE, row * self.CELL_SIZE, self.CELL_SIZE, self.CELL_SIZE)

    def _draw_winning_cells(self) -> None:
        for index in self._winning_line:
            pygame.draw.rect(self._screen, self.WIN_COLOR, self._cell_rect(index))

    def _draw_grid(self) -> None:
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self.CELL_SIZE),
                (self.BOARD_PX, i * self.CELL_SIZE),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self.CELL_SIZE, 0),
                (i * self.CELL_SIZE, self.BOARD_PX),
                self.LINE_WIDTH,
            )
        pygame.draw.line(self._screen, self.LINE_COLOR, (0, self.BOARD_PX), (self.BOARD_PX, self.BOARD_PX), 2)

    def _draw_marks(self) -> None:
        for index, value in enumerate(self._board):
            if value is None:
                continue
            text = self._font.render(value, True, self.X_COLOR if value == "X" else self.O_COLOR)  # noqa: FBT003
            rect = text.get_rect(center=self._cell_rect(index).center)
            self._screen.blit(text, rect)

    def _draw_status(self) -> None:
        center_y = self.BOARD_PX + self.STATUS_HEIGHT // 2
        status_text = self._small_font.render(self._end_message or self._status, True, self.TEXT_COLOR)  # noqa: FBT003
        hint = "Click here or press R to restart" if self._end_message else "Press R to restart"
        hint_text = self._hint_font.render(hint, True, self.LINE_COLOR)  # noqa: FBT003
        self._screen.blit(status_text, status_text.get_rect(midleft=(16, center_y)))
        self._screen.blit(hint_text, hint_text.get_rect(midright=(self.BOARD_PX - 16, center_y)))
