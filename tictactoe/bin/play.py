#!/usr/bin/env python3

# stdlib imports
import argparse
import typing

# local imports
from tictactoe.commands.play import PlayCommand
from tictactoe.utils.config_utils import ConfigUtils
from tictactoe.utils.termcolor_utils import TermcolorUtils


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return number


def turn_delay_seconds(value: str) -> float:
    number = float(value)
    if not ConfigUtils.is_valid_turn_delay(number):
        raise argparse.ArgumentTypeError(f"{value} is not between 0 and {ConfigUtils.MAX_TURN_DELAY} seconds")
    return number


def main(argv: typing.Optional[list[str]] = None) -> int:
    # read defaults from the environment and the .env file
    config = ConfigUtils.load_config()

    ###############################################################################
    #   Parse command line arguments
    #
    argParser = argparse.ArgumentParser(
        description="Play tic tac toe on an NxN board in the terminal.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    argParser.add_argument(
        "--size",
        "-s",
        type=positive_int,
        default=config.board_size,
        help="number of rows/cols on the board",
    )
    argParser.add_argument(
        "--solo",
        "-S",
        action=argparse.BooleanOptionalAction,
        default=config.solo,
        help="single player mode, the second player is the computer (--no-solo for two players)",
    )
    argParser.add_argument(
        "--turn-delay",
        "-t",
        type=turn_delay_seconds,
        default=config.turn_delay,
        help="pause in seconds before each turn",
    )
    argParser.add_argument(
        "--no-color",
        action="store_true",
        help="disable colors in the output",
    )
    argParser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="Enable debug mode.",
    )
    args = argParser.parse_args(argv)

    if args.debug is True:
        print(f"Arguments: {args}")

    TermcolorUtils.set_enabled(not args.no_color)

    ###############################################################################
    #   Start the game
    #
    try:
        PlayCommand.play_game(size=args.size, solo=args.solo, turn_delay=args.turn_delay)
    except (EOFError, KeyboardInterrupt):
        print("")
        print(TermcolorUtils.yellow("Game aborted"))
        return 1

    return 0


###############################################################################
###############################################################################
# 	 Main Entry Point
###############################################################################
###############################################################################

if __name__ == "__main__":
    raise SystemExit(main())
