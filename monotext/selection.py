"""Text selections delimited by an anchor and a moving end."""

from dataclasses import dataclass, field, replace

__all__ = ["Position", "Selection", "SelectionData"]


@dataclass(frozen=True, order=True)
class Position:
    """A line and character index; ordered by line, then character."""

    line_n: int = -1
    char_n: int = -1


@dataclass
class Selection:
    """A selection from ``anchor`` to ``extreme``.

    A selection is active only once its two ends differ.
    """

    active: bool = False
    anchor: Position = field(default_factory=Position)
    extreme: Position = field(default_factory=Position)

    def start(self) -> Position:
        """The earlier of the two ends."""
        return self.anchor if self.anchor < self.extreme else self.extreme

    def end(self) -> Position:
        """The later of the two ends."""
        return self.extreme if self.anchor < self.extreme else self.anchor


class SelectionData:
    """The set of selections in a document; the last one is the one edited."""

    def __init__(self) -> None:
        self._selections: list[Selection] = []

    def __len__(self) -> int:
        return len(self._selections)

    def create(self, line_n: int, char_n: int) -> None:
        """Start a new, still inactive, selection anchored at the position."""
        self._selections.append(Selection(anchor=Position(line_n, char_n)))

    def update_last(self, line_n: int, char_n: int) -> None:
        """Move the end of the last selection; does nothing without one."""
        if not self._selections:
            return
        last = self._selections[-1]
        last.extreme = Position(line_n, char_n)
        last.active = last.anchor != last.extreme

    def clear(self) -> None:
        self._selections.clear()

    def is_selected(self, line_n: int, char_n: int) -> bool:
        """Whether any active selection covers the character.

        The start is included and the end excluded.
        """
        for sel in self._selections:
            if not sel.active:
                continue
            start, end = sel.start(), sel.end()
            if not start.line_n <= line_n <= end.line_n:
                continue
            at_start = start.line_n == line_n
            at_end = end.line_n == line_n
            if not at_start and not at_end:
                return True
            if at_start and not at_end and start.char_n <= char_n:
                return True
            if at_end and not at_start and char_n < end.char_n:
                return True
            if at_start and at_end and start.char_n <= char_n < end.char_n:
                return True
        return False

    def last(self) -> Selection:
        """A copy of the last selection, or an empty inactive one."""
        if self._selections:
            return replace(self._selections[-1])
        return Selection()