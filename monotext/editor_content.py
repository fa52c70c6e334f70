"""Editing operations on a document: cursor movement, selections and edits."""

from .cursor import Cursor
from .selection import Selection, SelectionData
from .text_document import TextDocument

__all__ = ["EditorContent"]

_TAB_WIDTH = 4


class EditorContent:
    """Ties a :class:`TextDocument` to a cursor and a set of selections."""

    def __init__(self, document: TextDocument) -> None:
        self.document = document
        self.cursor = Cursor(0, 0)
        self.selections = SelectionData()

    # Selections

    def create_selection(self, line_n: int, char_n: int) -> None:
        self.selections.create(line_n, char_n)

    def create_selection_from_cursor(self) -> None:
        self.create_selection(self.cursor.line_n, self.cursor.char_n)

    def update_last_selection(self, line_n: int, char_n: int) -> None:
        self.selections.update_last(line_n, char_n)

    def remove_selections(self) -> None:
        self.selections.clear()

    def last_selection(self) -> Selection:
        return self.selections.last()

    def is_selected(self, line_n: int, char_n: int) -> bool:
        return self.selections.is_selected(line_n, char_n)

    def _handle_selection_on_move(self, update_selections: bool) -> None:
        if update_selections:
            self.update_last_selection(self.cursor.line_n, self.cursor.char_n)
        else:
            self.remove_selections()

    # Line operations

    def duplicate_cursor_line(self) -> None:
        """Insert a copy of the cursor's line below it and move down onto it."""
        self.remove_selections()
        line_n = self.cursor.line_n
        text = self.document.get_line(line_n)
        if line_n + 1 < self.document.line_count():
            self.document.add_text(text + "\n", line_n + 1, 0)
        else:
            self.document.add_text(
                "\n" + text, line_n, self.document.chars_in_line(line_n)
            )
        self.move_cursor_down()

    def swap_cursor_line(self, swap_with_up: bool) -> None:
        """Swap the cursor's line with its neighbour, staying inside the document."""
        current = self.cursor.line_n
        if swap_with_up:
            other = max(current - 1, 0)
        else:
            other = min(current + 1, self.document.line_count() - 1)
        self.document.swap_lines(current, other)

    def swap_selected_lines(self, swap_with_up: bool) -> None:
        """Move the lines of the last selection one line up or down.

        Without an active selection the cursor's line is swapped instead.
        """
        last = self.last_selection()
        if not last.active:
            self.swap_cursor_line(swap_with_up)
            return
        start, end = last.start(), last.end()

        if swap_with_up and start.line_n > 0:
            for line in range(start.line_n, end.line_n + 1):
                self.document.swap_lines(line, line - 1)
            shift = -1
        elif not swap_with_up and end.line_n < self.document.line_count() - 1:
            for line in range(end.line_n, start.line_n - 1, -1):
                self.document.swap_lines(line, line + 1)
            shift = 1
        else:
            return

        self.remove_selections()
        self.create_selection(start.line_n + shift, start.char_n)
        self.update_last_selection(end.line_n + shift, end.char_n)

    # Selection contents

    def _selection_span(self, selection: Selection) -> int:
        start, end = selection.start(), selection.end()
        # The end of a selection is exclusive.
        return self.document.char_amount_contained(
            start.line_n, start.char_n, end.line_n, end.char_n
        ) - 1

    def delete_selections(self) -> bool:
        """Delete the text of the last selection and all selections.

        Returns whether an active selection was deleted.
        """
        last = self.last_selection()
        self.remove_selections()
        if last.active:
            start = last.start()
            self.cursor.set_position(start.line_n, start.char_n, True)
            self.delete_text_after_cursor(self._selection_span(last))
        return last.active

    def copy_selections(self) -> str:
        """Return the text of the last selection, or "" without one.

        The cursor is moved to the start of the selection.
        """
        last = self.last_selection()
        if not last.active:
            return ""
        start = last.start()
        self.cursor.set_position(start.line_n, start.char_n, True)
        return self.document.get_text(
            self._selection_span(last), start.line_n, start.char_n
        )

    # Cursor movement

    def move_cursor_left(self, update_selections: bool = False) -> bool:
        """Move one character back, wrapping to the previous line.

        Returns whether the cursor could move.
        """
        cursor = self.cursor
        moved = cursor.line_n != 0 or cursor.char_n > 0
        if cursor.char_n <= 0:
            new_line = max(cursor.line_n - 1, 0)
            new_char = 0
            if cursor.line_n != 0:
                new_char = self.document.chars_in_line(new_line)
            cursor.set_position(new_line, new_char, True)
        else:
            cursor.move_left(True)
        self._handle_selection_on_move(update_selections)
        return moved

    def move_cursor_right(self, update_selections: bool = False) -> None:
        """Move one character forward, wrapping to the next line."""
        cursor = self.cursor
        if cursor.char_n >= self.document.chars_in_line(cursor.line_n):
            new_line = min(cursor.line_n + 1, self.document.line_count() - 1)
            if new_line != cursor.line_n:
                cursor.set_position(new_line, 0, True)
        else:
            cursor.move_right(True)
        self._handle_selection_on_move(update_selections)

    def move_cursor_up(self, update_selections: bool = False) -> None:
        cursor = self.cursor
        if cursor.line_n > 0:
            chars_above = self.document.chars_in_line(cursor.line_n - 1)
            if cursor.char_n <= chars_above and cursor.max_char_reached <= chars_above:
                cursor.move_up_to_max_char()
            else:
                cursor.set_position(cursor.line_n - 1, chars_above)
        self._handle_selection_on_move(update_selections)

    def move_cursor_down(self, update_selections: bool = False) -> None:
        cursor = self.cursor
        if cursor.line_n < self.document.line_count() - 1:
            chars_below = self.document.chars_in_line(cursor.line_n + 1)
            if cursor.char_n <= chars_below and cursor.max_char_reached <= chars_below:
                cursor.move_down_to_max_char()
            else:
                cursor.set_position(cursor.line_n + 1, chars_below)
        self._handle_selection_on_move(update_selections)

    def move_cursor_to_end(self, update_selections: bool = False) -> None:
        self.cursor.move_to_end(self.document.chars_in_line(self.cursor.line_n), True)
        self._handle_selection_on_move(update_selections)

    def move_cursor_to_start(self, update_selections: bool = False) -> None:
        self.cursor.move_to_start(True)
        self._handle_selection_on_move(update_selections)

    # Editing

    def add_text_at_cursor(self, text: str) -> None:
        """Insert ``text`` at the cursor and move the cursor past it."""
        self.document.add_text(text, self.cursor.line_n, self.cursor.char_n)
        for _ in text:
            self.move_cursor_right()

    def delete_text_after_cursor(self, amount: int) -> None:
        self.document.remove_text(amount, self.cursor.line_n, self.cursor.char_n)

    def delete_text_before_cursor(self, amount: int) -> None:
        moved = sum(1 for _ in range(amount) if self.move_cursor_left())
        self.delete_text_after_cursor(moved)

    # Queries

    def lines_count(self) -> int:
        return self.document.line_count()

    def cols_in_line(self, line: int) -> int:
        return self.document.chars_in_line(line)

    def get_line(self, line: int) -> str:
        return self.document.get_line(line)

    def cursor_line(self) -> str:
        return self.get_line(self.cursor.line_n)

    def reset_cursor(self, line: int, column: int) -> None:
        self.cursor.set_position(line, column)
        self.cursor.max_char_reached = column

    def cursor_position(self) -> tuple[int, int]:
        """The cursor's line and display column."""
        line_n = self.cursor.line_n
        return line_n, self.column_from_char(line_n, self.cursor.char_n)

    def char_index_of_column(self, line_n: int, column: int) -> int:
        """Index of the character shown at ``column``, tabs counting as four."""
        line = self.get_line(line_n)
        current_col = 0
        for index, ch in enumerate(line):
            if column <= current_col:
                return index
            current_col += _TAB_WIDTH if ch == "\t" else 1
        return max(len(line) - 1, 0)

    def column_from_char(self, line_n: int, char_n: int) -> int:
        """Display column of the character at ``char_n``, tabs counting as four."""
        line = self.get_line(line_n)
        return sum(_TAB_WIDTH if ch == "\t" else 1 for ch in line[:char_n])