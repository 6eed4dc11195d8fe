from collections.abc import Iterable
from typing import Final, Literal, TypeAlias

from tic_tac_toe_core.exception import InvalidArgumentError, LogicError

BOARD_SIZE: Final = 3
CELL_COUNT: Final = BOARD_SIZE * BOARD_SIZE

PlayerSymbol: TypeAlias = Literal["X", "O"]
Cell: TypeAlias = PlayerSymbol | None

PLAYER_SYMBOLS: Final[tuple[PlayerSymbol, PlayerSymbol]] = ("X", "O")


def other_symbol(symbol: PlayerSymbol) -> PlayerSymbol:  # noqa: D103
    return "O" if symbol == "X" else "X"


def check_index(index: int) -> None:
    """Raise InvalidArgumentError unless ``index`` addresses a cell (0-8, row-major)."""
    if isinstance(index, bool) or not isinstance(index, int):
        msg = f"Cell index must be an int, got {type(index).__name__}."
        raise InvalidArgumentError(msg)
    if not (0 <= index < CELL_COUNT):
        msg = f"Cell index {index} out of range 0-{CELL_COUNT - 1}."
        raise InvalidArgumentError(msg)


class Board:
    def __init__(self, cells: Iterable[Cell] | None = None) -> None:
        self._cells: list[Cell] = [None] * CELL_COUNT if cells is None else list(cells)

        if len(self._cells) != CELL_COUNT:
            msg = f"Board must have exactly {CELL_COUNT} cells, got {len(self._cells)}."
            raise InvalidArgumentError(msg)

        for cell in self._cells:
            if cell is not None and cell not in PLAYER_SYMBOLS:
                msg = f"Invalid cell value: {cell!r}."
                raise InvalidArgumentError(msg)

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    def __getitem__(self, index: int) -> Cell:
        check_index(index)
        return self._cells[index]

    def __len__(self) -> int:
        return CELL_COUNT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self._cells!r})"

    def place(self, index: int, symbol: PlayerSymbol) -> None:
        check_index(index)
        if self._cells[index] is not None:
            raise LogicError("Cell occupied.")
        self._cells[index] = symbol

    def clear(self) -> None:
        self._cells = [None] * CELL_COUNT

    def is_empty(self, index: int) -> bool:
        return self[index] is None

