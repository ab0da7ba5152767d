# local imports
from .types import piece_t, participant_t


class TurnOrder:
    """
    Turn alternation between the two participants of a game.

    The participant pair is chosen once from the mode flag, so the computer
    participant only ever shows up in single player mode.
    """

    @staticmethod
    def participants_for_mode(solo: bool) -> tuple[participant_t, participant_t]:
        if solo:
            return ("One", "Cpu")
        return ("One", "Two")

    @staticmethod
    def next_participant(current: participant_t, participants: tuple[participant_t, participant_t]) -> participant_t:
        """
        Return the participant playing after the current one.

        Args:
            current (participant_t): the participant who just played.
            participants (tuple): the pair returned by participants_for_mode().
        Returns:
            participant_t: the other member of the pair.
        """
        assert current in participants, f"participant {current} is not part of this game {participants}"

        first, second = participants
        return second if current == first else first

    @staticmethod
    def piece_for_participant(participant: participant_t) -> piece_t:
        # Player One always plays X
        return "X" if participant == "One" else "O"

    @staticmethod
    def display_name(participant: participant_t) -> str:
        return f"Player {participant}"
