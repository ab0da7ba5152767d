# stdlib imports
import time
import typing

# local imports
from ..libs.board import Board
from ..libs.board_extra import BoardExtra
from ..libs.turn_order import TurnOrder
from ..libs.types import participant_t
from ..utils.input_utils import InputUtils, InputError
from ..utils.termcolor_utils import TermcolorUtils


class PlayCommand:

    ###############################################################################
    ###############################################################################
    # 	 Play a game of tic tac toe in the terminal, two players or solo.
    ###############################################################################
    ###############################################################################

    @staticmethod
    def play_game(
        size: int = 3,
        solo: bool = False,
        turn_delay: float = 0.5,
    ) -> typing.Optional[participant_t]:
        """
        Play a game of tic tac toe on a size x size board, reading moves from stdin.

        Parameters:
        - size (int): number of rows/cols on the board.
        - solo (bool): single player mode, the second participant is the computer.
        - turn_delay (float): pause in seconds before each turn.

        Returns the winning participant, or None on a stalemate.
        """

        ###############################################################################
        #   Game intro
        #
        print("")
        print(TermcolorUtils.cyan(f"{'TIC TAC TOE: INTERACTIVE TERMINAL VERSION':^80}"))
        print("")
        print(f"BOARD SIZE: {size}x{size}")
        print(f"MODE: {'single player' if solo else 'two player'}")
        print("")

        ###############################################################################
        #   Play the game
        #
        board = Board(size, size)
        participants = TurnOrder.participants_for_mode(solo)
        cur_participant = participants[0]
        while True:
            time.sleep(turn_delay)

            print(PlayCommand.__board_to_string(board))
            piece = TurnOrder.piece_for_participant(cur_participant)

            print("")
            print(f'TURN: {TermcolorUtils.cyan(TurnOrder.display_name(cur_participant))} ("{piece}")')
            print("")

            ###############################################################################
            #   Read the move. Any input problem restarts the same turn.
            #
            try:
                row = InputUtils.parse_index(input("select row:\n"), board.height, label="row")
                col = InputUtils.parse_index(input("select col:\n"), board.width, label="col")
            except InputError as error:
                PlayCommand.__print_error(str(error))
                continue

            if board.place(row, col, piece) is False:
                # There's a piece already there.
                PlayCommand.__print_error(f"space at row {row}, col {col} already occupied")
                continue

            ###############################################################################
            #   Determine if the game is over
            #
            if board.check_win_condition(piece):
                print(PlayCommand.__board_to_string(board))
                print("")
                print(TermcolorUtils.green(f"GAME OVER: {TurnOrder.display_name(cur_participant)} wins!"))
                return cur_participant

            # Check for stalemate
            if board.is_full():
                print(PlayCommand.__board_to_string(board))
                print("")
                print(TermcolorUtils.green("GAME OVER: stalemate"))
                print("")
                return None

            cur_participant = TurnOrder.next_participant(cur_participant, participants)

    @staticmethod
    def __board_to_string(board: Board) -> str:
        return BoardExtra.board_to_string(board, colors=TermcolorUtils.enabled)

    @staticmethod
    def __print_error(message: str) -> None:
        print("")
        print(TermcolorUtils.red(f"ERROR: {message}"))
        print("")
