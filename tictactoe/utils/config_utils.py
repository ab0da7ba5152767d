# stdlib imports
import os
import dataclasses

# pip imports
import dotenv


@dataclasses.dataclass
class GameConfig:
    """
    Defaults for a game, before command line overrides.
    """

    board_size: int = 3
    """ Number of rows/cols on the board. """
    turn_delay: float = 0.5
    """ Pause in seconds before each turn. """
    solo: bool = False
    """ Single player mode. """


class ConfigUtils:
    """
    Game defaults, overridable with environment variables or a .env file.
    """

    class ENV:
        BOARD_SIZE = "TICTACTOE_BOARD_SIZE"
        TURN_DELAY = "TICTACTOE_TURN_DELAY"
        SOLO = "TICTACTOE_SOLO"

    # longest pause accepted between turns, in seconds
    MAX_TURN_DELAY = 3600.0

    @staticmethod
    def is_valid_turn_delay(turn_delay: float) -> bool:
        # also rejects nan and inf
        return 0 <= turn_delay <= ConfigUtils.MAX_TURN_DELAY

    @staticmethod
    def load_config(dotenv_path: str | None = None) -> GameConfig:
        """
        Build the GameConfig from the environment.

        Variables from the .env file don't override variables already set in the
        environment. A malformed value falls back to its default.
        """
        # Init dotenv to load environment variables from the .env file of the working directory
        if dotenv_path is None:
            dotenv_path = dotenv.find_dotenv(usecwd=True)
        if dotenv_path:
            dotenv.load_dotenv(dotenv_path=dotenv_path)

        defaults = GameConfig()
        board_size = ConfigUtils.get_int(ConfigUtils.ENV.BOARD_SIZE, defaults.board_size)
        turn_delay = ConfigUtils.get_float(ConfigUtils.ENV.TURN_DELAY, defaults.turn_delay)
        solo = ConfigUtils.get_bool(ConfigUtils.ENV.SOLO, defaults.solo)

        # sanity check
        if board_size <= 0:
            board_size = defaults.board_size
        if not ConfigUtils.is_valid_turn_delay(turn_delay):
            turn_delay = defaults.turn_delay

        return GameConfig(board_size=board_size, turn_delay=turn_delay, solo=solo)

    @staticmethod
    def get_int(name: str, default: int) -> int:
        value = os.getenv(name)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    @staticmethod
    def get_float(name: str, default: float) -> float:
        value = os.getenv(name)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default

    @staticmethod
    def get_bool(name: str, default: bool) -> bool:
        value = os.getenv(name)
        if value is None:
            return default
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off", ""):
            return False
        return default
