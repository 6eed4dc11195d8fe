"""Factory functions for wiring a game session.

UI modules are imported on demand so the terminal front-end works without a display
toolkit.
"""

from typing import Final, Literal, TypeAlias

from tic_tac_toe_core.game_engine import GameEngine
from tic_tac_toe_core.ui import Ui

UiName: TypeAlias = Literal["terminal", "pygame", "tk"]

UI_CHOICES: Final[tuple[UiName, ...]] = ("terminal", "pygame", "tk")


def create_ui(ui_name: UiName, game_engine: GameEngine) -> Ui:  # noqa: D103
    match ui_name:
        case "terminal":
            from tic_tac_toe_core.ui_terminal import TerminalUi  # noqa: PLC0415

            return TerminalUi(game_engine)
        case "pygame":
            from tic_tac_toe_core.ui_pygame import PygameUi  # noqa: PLC0415

            return PygameUi(game_engine)
        case "tk":
            from tic_tac_toe_core.ui_tk import TkUi  # noqa: PLC0415

            return TkUi(game_engine)
        case _:
            msg = f"Unknown UI: {ui_name}. Choose from {', '.join(UI_CHOICES)}."
            raise ValueError(msg)


def config_game_engine(game_engine: GameEngine, uis: list[Ui]) -> GameEngine:  # noqa: D103
    for ui in uis:
        game_engine.add_board_updated_cb(ui.on_board_updated)
        game_engine.add_game_over_cb(ui.on_game_over)

    return game_engine
