# stdlib imports
import typing

# local imports
from .types import piece_t, PIECES

cell_t = typing.Optional[piece_t]


class Board:
    """
    Grid of optional pieces, with the placement rule and the win/draw checks.

    Cells are stored row-major. A cell is either None (empty) or a piece, and once
    a piece is placed it is never removed.
    """

    def __init__(self, height: int, width: int):
        self._height = height
        self._width = width
        self._pieces: list[list[cell_t]] = [[None for _ in range(width)] for _ in range(height)]

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def get_piece(self, row: int, col: int) -> cell_t:
        self.__assert_in_bounds(row, col)
        return self._pieces[row][col]

    def cells(self) -> list[list[cell_t]]:
        """Return a copy of the grid, one list per row."""
        return [list(row) for row in self._pieces]

    def place(self, row: int, col: int, piece: piece_t) -> bool:
        """
        Attempt to place the piece, assuming there isn't a piece there already.

        Args:
            row (int): row index, must be within the board height.
            col (int): column index, must be within the board width.
            piece (piece_t): the piece to place.
        Returns:
            bool: True if the piece could be placed, False if the cell is occupied.
        """
        self.__assert_in_bounds(row, col)
        assert piece in PIECES, f"unknown piece {piece!r}"

        if self._pieces[row][col] is not None:
            return False

        self._pieces[row][col] = piece
        return True

    ###############################################################################
    #   Win checks
    #

    def check_win_condition(self, piece: piece_t) -> bool:
        """
        Determine if the given piece has won.

        A line wins only when every one of its cells holds the piece. Rows and columns
        are checked on any board; the diagonals require a square board.

        Args:
            piece (piece_t): the piece to check for.
        Returns:
            bool: True if a full row, column or diagonal holds only this piece.
        """
        # Check for a full row.
        for row in range(self._height):
            if self.__check_win_row(row, piece):
                return True

        # Check for a full column.
        for col in range(self._width):
            if self.__check_win_col(col, piece):
                return True

        # Check diagonals.
        if self.__check_win_diag_left(piece) or self.__check_win_diag_right(piece):
            return True

        return False

    def __check_win_row(self, row: int, piece: piece_t) -> bool:
        return Board.__line_is_full_of(self._pieces[row], piece)

    def __check_win_col(self, col: int, piece: piece_t) -> bool:
        column = [self._pieces[row][col] for row in range(self._height)]
        return Board.__line_is_full_of(column, piece)

    def __check_win_diag_left(self, piece: piece_t) -> bool:
        assert self._height == self._width, "diagonal calculation assumes board is square"

        diagonal = [self._pieces[i][i] for i in range(self._height)]
        return Board.__line_is_full_of(diagonal, piece)

    def __check_win_diag_right(self, piece: piece_t) -> bool:
        assert self._height == self._width, "diagonal calculation assumes board is square"

        side = self._height
        diagonal = [self._pieces[side - i - 1][i] for i in range(side)]
        return Board.__line_is_full_of(diagonal, piece)

    @staticmethod
    def __line_is_full_of(line: list[cell_t], piece: piece_t) -> bool:
        # a line without cells never counts as a win
        if len(line) == 0:
            return False
        return all(cell == piece for cell in line)

    ###############################################################################
    #   Draw check
    #

    def is_full(self) -> bool:
        """Returns True if there are no more possible moves on the board."""
        for row in self._pieces:
            for cell in row:
                if cell is None:
                    return False
        return True

    def __assert_in_bounds(self, row: int, col: int) -> None:
        assert 0 <= row < self._height, f"row selection {row} out of range of height {self._height}"
        assert 0 <= col < self._width, f"col selection {col} out of range of width {self._width}"
