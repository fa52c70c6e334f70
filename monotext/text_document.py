"""A text buffer addressed by line and character index."""

from bisect import bisect_left
from pathlib import Path

from .special_chars import convert_special_char

__all__ = ["TextDocument"]

_LINE_BREAKS = ("\n", "\r")


class TextDocument:
    """Holds the text of a document together with the start of every line.

    Both ``\\n`` and ``\\r`` end a line.
    """

    def __init__(self, text: str = "") -> None:
        self._buffer = text
        self._line_starts: list[int] = []
        self.changed = False
        self._rebuild_line_starts()

    @property
    def text(self) -> str:
        """The whole document as a string."""
        return self._buffer

    def load(self, filename) -> None:
        """Replace the contents with those of ``filename`` (UTF-8)."""
        with open(filename, encoding="utf-8", errors="replace", newline="") as handle:
            self._buffer = handle.read()
        self._rebuild_line_starts()
        self.changed = False

    def save(self, filename) -> None:
        """Write the document to ``filename``.

        Raises UnsavableCharacterError if a character cannot be saved.
        """
        data = "".join(convert_special_char(ord(ch)) for ch in self._buffer)
        Path(filename).write_bytes(data.encode("utf-8"))
        self.changed = False

    def _rebuild_line_starts(self) -> None:
        self._line_starts = [0]
        self._line_starts.extend(
            i + 1 for i, ch in enumerate(self._buffer) if ch in _LINE_BREAKS
        )

    def _check_line(self, line: int) -> None:
        if not 0 <= line < len(self._line_starts):
            raise IndexError(
                f"line {line} is not a valid line number; "
                f"max is {len(self._line_starts) - 1}"
            )

    def _buffer_pos(self, line: int, char_n: int) -> int:
        self._check_line(line)
        return self._line_starts[line] + char_n

    def get_line(self, line_number: int) -> str:
        """Return the text of a line without its line break."""
        self._check_line(line_number)
        start = self._line_starts[line_number]
        if line_number == len(self._line_starts) - 1:
            return self._buffer[start:]
        return self._buffer[start:self._line_starts[line_number + 1] - 1]

    def chars_in_line(self, line: int) -> int:
        """Number of characters in a line, not counting its line break."""
        self._check_line(line)
        if line == len(self._line_starts) - 1:
            return len(self._buffer) - self._line_starts[line]
        return self._line_starts[line + 1] - self._line_starts[line] - 1

    def line_count(self) -> int:
        return len(self._line_starts)

    def add_text(self, text: str, line: int, char_n: int) -> None:
        """Insert ``text`` at the given position."""
        pos = self._buffer_pos(line, char_n)
        self.changed = True
        self._buffer = self._buffer[:pos] + text + self._buffer[pos:]
        size = len(text)
        self._line_starts[line + 1:] = [s + size for s in self._line_starts[line + 1:]]
        for i, ch in enumerate(text):
            if ch in _LINE_BREAKS:
                new_start = pos + i + 1
                self._line_starts.insert(bisect_left(self._line_starts, new_start), new_start)

    def remove_text(self, amount: int, line: int, char_n: int) -> None:
        """Remove up to ``amount`` characters starting at the given position."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        pos = self._buffer_pos(line, char_n)
        if pos > len(self._buffer):
            raise IndexError(f"position {pos} is past the end of the document")
        self.changed = True
        self._buffer = self._buffer[:pos] + self._buffer[pos + amount:]
        self._rebuild_line_starts()

    def get_text(self, amount: int, line: int, char_n: int) -> str:
        """Return up to ``amount`` characters starting at the given position."""
        pos = self._buffer_pos(line, char_n)
        return self._buffer[pos:pos + amount]

    def swap_lines(self, line_a: int, line_b: int) -> None:
        """Exchange two adjacent lines."""
        if line_a == line_b:
            return
        low, high = min(line_a, line_b), max(line_a, line_b)
        if low < 0 or high > self.line_count() - 1:
            raise IndexError(f"cannot swap lines {line_a} and {line_b}")
        if low != high - 1:
            raise ValueError("cannot swap non-contiguous lines")
        self.changed = True
        self._swap_with_next_line(low)

    def _swap_with_next_line(self, line: int) -> None:
        first = self.get_line(line)
        second = self.get_line(line + 1)
        start = self._line_starts[line]
        end = start + len(first) + 1 + len(second)
        self._buffer = self._buffer[:start] + second + "\n" + first + self._buffer[end:]
        self._line_starts[line + 1] = start + len(second) + 1

    def char_amount_contained(
        self, start_line: int, start_char: int, end_line: int, end_char: int
    ) -> int:
        """Number of characters from start to end, both inclusive."""
        return (
            self._buffer_pos(end_line, end_char)
            - self._buffer_pos(start_line, start_char)
            + 1
        )