class InputError(ValueError):
    """User input that can't be used as is. The message is meant for the player."""


class InputUtils:
    @staticmethod
    def parse_index(text: str, upper_bound: int, label: str = "index") -> int:
        """
        Parse a row or column typed by the player.

        Args:
            text (str): the raw line read from the terminal.
            upper_bound (int): the index must be strictly lower than this.
            label (str): name used in the error messages, e.g. "row" or "col".
        Returns:
            int: the parsed index.
        Raises:
            InputError: if the text is not a non-negative integer, or is out of range.
        """
        stripped = text.strip()

        # only plain decimal digits, so "-1", "+1" or "1.0" are rejected
        if stripped == "" or not stripped.isascii() or not stripped.isdigit():
            raise InputError(f"invalid {label}")

        # very long digit strings exceed the int conversion limit, they are out of range anyway
        try:
            value = int(stripped)
        except ValueError:
            raise InputError(f"{label} out of range")

        if value >= upper_bound:
            raise InputError(f"{label} out of range")

        return value
