# local imports
from .board import Board
from .types import piece_t
from ..utils.termcolor_utils import TermcolorUtils


class BoardExtra:
    """
    Presentation helpers for a Board. Nothing here mutates the board.
    """

    @staticmethod
    def piece_to_string(piece: piece_t, colors: bool = True) -> str:
        if colors is False:
            return piece
        return TermcolorUtils.cyan(piece) if piece == "X" else TermcolorUtils.magenta(piece)

    @staticmethod
    def board_to_string(board: Board, colors: bool = True) -> str:
        """
        Convert a Board to a text grid with row/column indices.

        Args:
            board (Board): The board to convert.
            colors (bool): Whether to color the pieces.

        Returns:
            str: The string representation of the board.

        The output looks like this for a 3x3 board:

                  0   1   2
                +---+---+---+
            0   | X |   |   |
                +---+---+---+
            1   |   | O |   |
                +---+---+---+
            2   |   |   |   |
                +---+---+---+
        """
        separator_line = "    +" + "---+" * board.width

        # column indices on top, each one centered above its cell
        header_line = "    " + "".join(f" {col:^3}" for col in range(board.width))
        board_lines = [header_line.rstrip(), separator_line]

        for row in range(board.height):
            line = f"{row:<4}|"
            for col in range(board.width):
                cell = board.get_piece(row, col)
                if cell is None:
                    line += "   |"
                else:
                    line += f" {BoardExtra.piece_to_string(cell, colors=colors)} |"
            board_lines.append(line)
            board_lines.append(separator_line)

        return "\n".join(board_lines)
