"""The text cursor: a line and a character position."""

__all__ = ["Cursor"]


class Cursor:
    """A cursor that remembers the furthest character it was moved to.

    ``max_char_reached`` lets vertical movement return to the column the
    user last chose horizontally.
    """

    def __init__(self, line_n: int = 0, char_n: int = 0) -> None:
        self.line_n = line_n
        self.char_n = char_n
        self.max_char_reached = 0

    def __repr__(self) -> str:
        return (
            f"Cursor(line_n={self.line_n}, char_n={self.char_n}, "
            f"max_char_reached={self.max_char_reached})"
        )

    def set_position(self, line_n: int, char_n: int, update_max_char: bool = False) -> None:
        self.line_n = line_n
        self.char_n = char_n
        if update_max_char:
            self.max_char_reached = char_n

    def move_up(self) -> None:
        self.line_n -= 1

    def move_down(self) -> None:
        self.line_n += 1

    def move_up_to_max_char(self) -> None:
        self.line_n -= 1
        self.char_n = self.max_char_reached

    def move_down_to_max_char(self) -> None:
        self.line_n += 1
        self.char_n = self.max_char_reached

    def move_left(self, update_max_char: bool = False) -> None:
        self.char_n -= 1
        if update_max_char:
            self.max_char_reached = self.char_n

    def move_right(self, update_max_char: bool = False) -> None:
        self.char_n += 1
        if update_max_char:
            self.max_char_reached = self.char_n

    def move_to_end(self, chars_in_line: int, update_max_char: bool = False) -> None:
        self.char_n = chars_in_line
        if update_max_char:
            self.max_char_reached = chars_in_line

    def move_to_start(self, update_max_char: bool = False) -> None:
        self.char_n = 0
        if update_max_char:
            self.max_char_reached = 0

    def next_line(self) -> None:
        self.char_n = 0
        self.move_down()