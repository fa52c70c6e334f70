"""Drawing of the editor contents and the camera that looks at them."""

import math
import os

import pygame

from .editor_content import EditorContent

__all__ = ["Camera", "EditorView", "cols_of"]

_TAB_WIDTH = 4
_FONT_FILE = "fonts/DejaVuSansMono.ttf"

_COLOR_CHAR = (255, 255, 255)
_COLOR_SELECTION = (106, 154, 232)
_COLOR_MARGIN = (32, 44, 68)
_COLOR_CURSOR = (255, 255, 255)
_COLOR_LINE_NUMBER = (255, 255, 255)

_CAMERA_LEFT = -50
_SCROLL_SLACK = 20
_CURSOR_OFFSET_Y = 2
_CURSOR_WIDTH = 2
_SELECTION_OFFSET_Y = 2


def cols_of(text: str) -> int:
    """Display width of ``text`` in columns, a tab counting as four."""
    return sum(_TAB_WIDTH if ch == "\t" else 1 for ch in text)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Camera:
    """A view onto the document plane: a centre, a size and a rotation.

    The viewport is the pixel size of the window the camera is shown in;
    it stays fixed while the camera is zoomed.
    """

    def __init__(self, left: float, top: float, width: float, height: float) -> None:
        self.center_x = left + width / 2
        self.center_y = top + height / 2
        self.width = float(width)
        self.height = float(height)
        self.rotation = 0.0
        self.viewport_width = float(width)
        self.viewport_height = float(height)

    def __repr__(self) -> str:
        return (
            f"Camera(center=({self.center_x}, {self.center_y}), "
            f"size=({self.width}, {self.height}), rotation={self.rotation})"
        )

    def move(self, dx: float, dy: float) -> None:
        self.center_x += dx
        self.center_y += dy

    def rotate(self, degrees: float) -> None:
        self.rotation = (self.rotation + degrees) % 360

    def zoom(self, factor: float) -> None:
        """Scale the visible area by ``factor``; below 1 zooms in."""
        self.width *= factor
        self.height *= factor

    def map_pixel_to_coords(self, x: float, y: float) -> tuple[float, float]:
        """Document coordinates of the window pixel ``(x, y)``."""
        dx = (x / self.viewport_width - 0.5) * self.width
        dy = (y / self.viewport_height - 0.5) * self.height
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return (
            self.center_x + dx * cos_a - dy * sin_a,
            self.center_y + dx * sin_a + dy * cos_a,
        )


class EditorView:
    """Renders an :class:`EditorContent` with a line-number margin and cursor."""

    def __init__(self, window_size, working_directory: str, content: EditorContent) -> None:
        self.content = content
        width, height = window_size
        self.camera = Camera(_CAMERA_LEFT, 0, width, height)
        self.delta_scroll = 20.0
        self.delta_rotation = 2.0
        self.delta_zoom_in = 0.8
        self.delta_zoom_out = 1.2

        pygame.font.init()
        path = os.path.join(working_directory, _FONT_FILE) if working_directory else _FONT_FILE
        self._font_path = path if os.path.isfile(path) else None

        self.bottom_limit_px = 1.0
        self.right_limit_px = 1.0

        self.set_font_size(18)
        self.margin_x_offset = 45

    def set_font_size(self, font_size: int) -> None:
        """Change the font size; the line height follows it."""
        self.font_size = font_size
        self.line_height = font_size
        self.font = pygame.font.Font(self._font_path, font_size)
        self._number_font = pygame.font.Font(self._font_path, max(font_size - 1, 1))
        # Monospace: one wide glyph gives the width of every character.
        self.char_width = self.font.size("_")[0]

    # Drawing

    def draw(self, surface) -> None:
        """Draw the content as seen by the camera onto ``surface``."""
        cam = self.camera
        world_w = max(1, math.ceil(cam.width))
        world_h = max(1, math.ceil(cam.height))
        world = pygame.Surface((world_w, world_h), pygame.SRCALPHA)
        origin = (cam.center_x - cam.width / 2, cam.center_y - cam.height / 2)

        self._draw_lines(world, origin)
        self._draw_margin(world, origin)
        self._draw_cursor(world, origin)

        if cam.rotation:
            world = pygame.transform.rotate(world, cam.rotation)
        scale_x = surface.get_width() / cam.width
        scale_y = surface.get_height() / cam.height
        scaled_size = (
            max(1, round(world.get_width() * scale_x)),
            max(1, round(world.get_height() * scale_y)),
        )
        world = pygame.transform.scale(world, scaled_size)
        rect = world.get_rect(center=(surface.get_width() / 2, surface.get_height() / 2))
        surface.blit(world, rect)

    def _draw_lines(self, world, origin) -> None:
        ox, oy = origin
        self.bottom_limit_px = self.content.lines_count() * self.font_size

        for line_n in range(self.content.lines_count()):
            line = self.content.get_line(line_n)
            self.right_limit_px = max(int(self.right_limit_px), self.char_width * len(line))

            offset_x = 0.0
            y = line_n * self.font_size
            runs = []
            for index, ch in enumerate(line):
                selected = self.content.is_selected(line_n, index)
                if runs and runs[-1][0] == selected:
                    runs[-1][1].append(ch)
                else:
                    runs.append((selected, [ch]))

            for selected, chars in runs:
                text = "".join(chars)
                width = self.char_width * cols_of(text)
                if selected:
                    pygame.draw.rect(
                        world,
                        _COLOR_SELECTION,
                        pygame.Rect(
                            round(offset_x - ox),
                            round(_SELECTION_OFFSET_Y + y - oy),
                            width,
                            self.font_size,
                        ),
                    )
                rendered = self.font.render(
                    text.replace("\t", " " * _TAB_WIDTH), True, _COLOR_CHAR
                )
                world.blit(rendered, (round(offset_x - ox), round(y - oy)))
                offset_x += width

    def _draw_margin(self, world, origin) -> None:
        ox, oy = origin
        block_height = self.font_size
        for line_number in range(1, self.content.lines_count() + 1):
            x = round(-self.margin_x_offset - ox)
            y = round(block_height * (line_number - 1) - oy)
            pygame.draw.rect(
                world,
                _COLOR_MARGIN,
                pygame.Rect(x, y, self.margin_x_offset - 5, block_height),
            )
            number = self._number_font.render(str(line_number), True, _COLOR_LINE_NUMBER)
            world.blit(number, (x, y))

    def _draw_cursor(self, world, origin) -> None:
        ox, oy = origin
        line_n, column = self.content.cursor_position()
        pygame.draw.rect(
            world,
            _COLOR_CURSOR,
            pygame.Rect(
                round(column * self.char_width - ox),
                round(line_n * self.line_height + _CURSOR_OFFSET_Y - oy),
                _CURSOR_WIDTH,
                self.line_height,
            ),
        )

    # Camera control

    def scroll_up(self, window_size) -> None:
        """Scroll up unless the top of the document is already shown.

        ``window_size`` is the size of the view currently shown.
        """
        height = window_size[1]
        if self.camera.center_y - height / 2 > 0:
            self.camera.move(0, -self.delta_scroll)

    def scroll_down(self, window_size) -> None:
        height = window_size[1]
        bottom_limit = max(self.bottom_limit_px, height)
        if self.camera.center_y + height / 2 < bottom_limit + _SCROLL_SLACK:
            self.camera.move(0, self.delta_scroll)

    def scroll_left(self, window_size) -> None:
        width = window_size[0]
        if self.camera.center_x - width / 2 > -self.margin_x_offset:
            self.camera.move(-self.delta_scroll, 0)

    def scroll_right(self, window_size) -> None:
        width = window_size[0]
        right_limit = max(self.right_limit_px, width)
        if self.camera.center_x + width / 2 < right_limit + _SCROLL_SLACK:
            self.camera.move(self.delta_scroll, 0)

    def rotate_left(self) -> None:
        self.camera.rotate(self.delta_rotation)

    def rotate_right(self) -> None:
        self.camera.rotate(-self.delta_rotation)

    def zoom_in(self) -> None:
        self.camera.zoom(self.delta_zoom_in)

    def zoom_out(self) -> None:
        self.camera.zoom(self.delta_zoom_out)

    def set_camera_bounds(self, width: int, height: int) -> None:
        """Reset the camera to a window of the given size."""
        self.camera = Camera(_CAMERA_LEFT, 0, width, height)

    # Coordinates

    def document_coords(self, mouse_x: float, mouse_y: float) -> tuple[int, int]:
        """Line and character index under a point of the document plane.

        ``x == 0`` is where the text begins; the result is kept inside the
        document.
        """
        line_n = int(mouse_y / self.line_height)
        last_line = self.content.lines_count() - 1

        if line_n < 0:
            return 0, 0
        if line_n > last_line:
            return last_line, self.content.cols_in_line(last_line)

        column = _round_half_away(mouse_x / self.char_width)
        char_n = self.content.char_index_of_column(line_n, column)
        char_n = min(max(char_n, 0), self.content.cols_in_line(line_n))
        return line_n, char_n