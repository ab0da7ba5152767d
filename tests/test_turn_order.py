import pytest

from tictactoe.libs.turn_order import TurnOrder


def test_participants_for_mode():
    assert TurnOrder.participants_for_mode(False) == ("One", "Two")
    assert TurnOrder.participants_for_mode(True) == ("One", "Cpu")


@pytest.mark.parametrize(
    "solo, expected",
    [
        (False, ["One", "Two", "One", "Two"]),
        (True, ["One", "Cpu", "One", "Cpu"]),
    ],
)
def test_participants_alternate(solo, expected):
    participants = TurnOrder.participants_for_mode(solo)
    current = participants[0]
    seen = [current]
    for _ in range(len(expected) - 1):
        current = TurnOrder.next_participant(current, participants)
        seen.append(current)
    assert seen == expected


def test_computer_never_plays_in_two_player_mode():
    participants = TurnOrder.participants_for_mode(False)
    with pytest.raises(AssertionError):
        TurnOrder.next_participant("Cpu", participants)


@pytest.mark.parametrize("participant, piece", [("One", "X"), ("Two", "O"), ("Cpu", "O")])
def test_piece_for_participant(participant, piece):
    assert TurnOrder.piece_for_participant(participant) == piece


def test_display_name():
    assert TurnOrder.display_name("Cpu") == "Player Cpu"
