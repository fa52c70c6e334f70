"""Translation of keyboard and mouse events into editing operations."""

from __future__ import annotations

from typing import Callable

import pygame

from .editor_content import EditorContent
from .editor_view import EditorView

__all__ = ["InputController"]

SHRUG = "\\_('-')_/"

_BACKSPACE = "\b"
_DELETE = "\x7f"

# Keys whose press enters a character rather than producing a text event.
_KEY_TEXT = {
    pygame.K_BACKSPACE: _BACKSPACE,
    pygame.K_DELETE: _DELETE,
    pygame.K_RETURN: "\n",
    pygame.K_KP_ENTER: "\n",
    pygame.K_TAB: "\t",
}

_WHEEL_BUTTONS = (4, 5)
_SCROLL_MARGIN_BOTTOM = 5


def _pygame_key_state(key: int) -> bool:
    return bool(pygame.key.get_pressed()[key])


class InputController:
    """Applies user input to an :class:`EditorContent` and an :class:`EditorView`.

    ``key_state`` is a callable telling whether a key is held down right now;
    by default the keyboard state kept by pygame is asked.
    """

    def __init__(
        self,
        content: EditorContent,
        key_state: Callable[[int], bool] | None = None,
    ) -> None:
        self.content = content
        self._key_state = key_state or _pygame_key_state
        self.mouse_down = False
        self.shift_pressed = False
        self.copied = ""

    def _pressed(self, *keys: int) -> bool:
        return any(self._key_state(key) for key in keys)

    def is_mouse_down(self) -> bool:
        return self.mouse_down

    def handle_events(self, view: EditorView, window_size, event) -> None:
        """Handle one event; ``window_size`` is the size of the view shown."""
        self._handle_mouse_events(view, window_size, event)
        self._handle_key_pressed(view, event)
        self._handle_key_released(event)
        self._handle_text_entered(event)

    def handle_constant_input(self, view: EditorView, window_size, mouse_pos) -> None:
        """Handle held keys and mouse dragging; called once per frame.

        ``mouse_pos`` is the mouse position in window pixels.
        """
        if self._pressed(pygame.K_LCTRL) and self._pressed(pygame.K_r):
            if self._pressed(pygame.K_LEFT):
                view.rotate_left()
            if self._pressed(pygame.K_RIGHT):
                view.rotate_right()

        if not self.mouse_down:
            return

        mouse_x, mouse_y = mouse_pos
        doc_x, doc_y = view.camera.map_pixel_to_coords(mouse_x, mouse_y)
        self._update_cursor(view, doc_x, doc_y)

        width, height = window_size
        if mouse_x < 0:
            view.scroll_left(window_size)
        elif mouse_x > width:
            view.scroll_right(window_size)

        if mouse_y < 0:
            view.scroll_up(window_size)
        elif mouse_y > height - _SCROLL_MARGIN_BOTTOM:
            view.scroll_down(window_size)

    def _update_cursor(self, view: EditorView, doc_x: float, doc_y: float) -> None:
        line, column = view.document_coords(doc_x, doc_y)
        self.content.reset_cursor(line, column)
        self.content.update_last_selection(line, column)

    def _handle_mouse_events(self, view: EditorView, window_size, event) -> None:
        if event.type == pygame.MOUSEWHEEL:
            if event.y:
                if event.y > 0:
                    view.scroll_up(window_size)
                else:
                    view.scroll_down(window_size)
            elif event.x:
                if event.x < 0:
                    view.scroll_left(window_size)
                else:
                    view.scroll_right(window_size)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button not in _WHEEL_BUTTONS:
            self.content.remove_selections()
            doc_x, doc_y = view.camera.map_pixel_to_coords(*event.pos)
            line, char_n = view.document_coords(doc_x, doc_y)
            self.content.create_selection(line, char_n)
            self.mouse_down = True

        if event.type == pygame.MOUSEBUTTONUP and event.button not in _WHEEL_BUTTONS:
            self.mouse_down = False

    def _handle_key_pressed(self, view: EditorView, event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        content = self.content
        key = event.key
        ctrl = self._pressed(pygame.K_LCTRL, pygame.K_RCTRL)
        shift = self._pressed(pygame.K_LSHIFT, pygame.K_RSHIFT)

        if key in (pygame.K_LSHIFT, pygame.K_RSHIFT) and not self.shift_pressed and not ctrl:
            self.shift_pressed = True
            content.remove_selections()
            content.create_selection_from_cursor()
            return

        if self._pressed(pygame.K_END):
            content.move_cursor_to_end(shift)
            return
        if self._pressed(pygame.K_HOME):
            content.move_cursor_to_start(shift)
            return

        if ctrl:
            if key == pygame.K_d:
                content.duplicate_cursor_line()
            elif key == pygame.K_u:
                content.delete_selections()
                content.add_text_at_cursor(SHRUG)
            elif key == pygame.K_c:
                self.copied = content.copy_selections() or content.cursor_line()
            elif key == pygame.K_v:
                content.add_text_at_cursor(self.copied)
            elif key == pygame.K_x:
                self.copied = content.copy_selections()
                content.delete_selections()

        ctrl_and_shift = ctrl and shift
        if key == pygame.K_UP:
            if ctrl_and_shift:
                content.swap_selected_lines(True)
                content.move_cursor_up(True)
            else:
                content.move_cursor_up(self.shift_pressed)
            return
        if key == pygame.K_DOWN:
            if ctrl_and_shift:
                content.swap_selected_lines(False)
                content.move_cursor_down(True)
            else:
                content.move_cursor_down(self.shift_pressed)
            return
        if key == pygame.K_LEFT:
            content.move_cursor_left(self.shift_pressed and not ctrl)
            return
        if key == pygame.K_RIGHT:
            content.move_cursor_right(self.shift_pressed and not ctrl)
            return

        if getattr(event, "mod", 0) & pygame.KMOD_CTRL:
            if key == pygame.K_KP_PLUS:
                view.zoom_in()
            elif key == pygame.K_KP_MINUS:
                view.zoom_out()

    def _handle_key_released(self, event) -> None:
        if event.type == pygame.KEYUP and event.key in (pygame.K_LSHIFT, pygame.K_RSHIFT):
            self.shift_pressed = self._pressed(pygame.K_LSHIFT, pygame.K_RSHIFT)

    @staticmethod
    def _entered_text(event) -> str | None:
        if event.type == pygame.TEXTINPUT:
            return event.text
        if event.type == pygame.KEYDOWN:
            return _KEY_TEXT.get(event.key)
        return None

    def _handle_text_entered(self, event) -> None:
        text = self._entered_text(event)
        if not text:
            return
        content = self.content
        if text == _BACKSPACE:
            if not content.delete_selections():
                content.delete_text_before_cursor(1)
        elif text == _DELETE:
            if not content.delete_selections():
                content.delete_text_after_cursor(1)
        elif not self._pressed(pygame.K_LCTRL):
            content.delete_selections()
            content.add_text_at_cursor(text)