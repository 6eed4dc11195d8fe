"""Outcome evaluation.

Pure functions over a board snapshot: nothing here holds or mutates state.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, TypeAlias

from tic_tac_toe_core.board import CELL_COUNT, Board, Cell, PlayerSymbol
from tic_tac_toe_core.exception import InvalidArgumentError

Line: TypeAlias = tuple[int, int, int]

WINNING_LINES: Final[tuple[Line, ...]] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True, slots=True)
class InProgress:
    pass


@dataclass(frozen=True, slots=True)
class Won:
    winner: PlayerSymbol
    line: Line


@dataclass(frozen=True, slots=True)
class Draw:
    pass


Outcome: TypeAlias = InProgress | Won | Draw


def evaluate(board: Board | Sequence[Cell]) -> Outcome:
    """Compute the outcome of a board.

    Lines are checked in ``WINNING_LINES`` order and the first complete one is reported.
    A full board without a complete line is a draw.
    """
    cells = board.cells if isinstance(board, Board) else tuple(board)
    if len(cells) != CELL_COUNT:
        msg = f"Board must have exactly {CELL_COUNT} cells, got {len(cells)}."
        raise InvalidArgumentError(msg)

    for line in WINNING_LINES:
        a, b, c = line
        first = cells[a]
        if first is not None and first == cells[b] == cells[c]:
            return Won(first, line)

    if all(cell is not None for cell in cells):
        return Draw()
    return InProgress()


def is_terminal(outcome: Outcome) -> bool:  # noqa: D103
    return not isinstance(outcome, InProgress)
