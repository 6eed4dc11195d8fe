import argparse
import logging
from collections.abc import Iterable, Sequence

from tic_tac_toe_core.factories import UI_CHOICES, config_game_engine, create_ui
from tic_tac_toe_core.game_engine import GameEngine

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def main(argv: Sequence[str] | None = None) -> None:  # noqa: D103
    args = _parse_args(UI_CHOICES, argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    game_engine = GameEngine()
    ui = create_ui(args.ui, game_engine)
    config_game_engine(game_engine, [ui])

    ui.run()


def _parse_args(ui_choices: Iterable[str], argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tic-tac-toe", description="Local two-player tic-tac-toe.")

    parser.add_argument("--ui", choices=tuple(ui_choices), default="terminal")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
