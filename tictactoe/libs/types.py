# stdlib imports
import typing

# define the piece PYTHON type
piece_t = typing.Literal["X", "O"]
participant_t = typing.Literal["One", "Two", "Cpu"]

PIECES: tuple[piece_t, ...] = ("X", "O")
