"""The editor window and its main loop."""

from __future__ import annotations

import argparse
import sys

import pygame

from .editor_content import EditorContent
from .editor_view import EditorView
from .input_controller import InputController
from .paths import working_directory
from .special_chars import UnsavableCharacterError
from .text_document import TextDocument

__all__ = ["main"]

DEFAULT_FILE = "txt/textoDePruebaGuardado.txt"
WINDOW_SIZE = (720, 405)
BACKGROUND = (21, 29, 45)
FRAME_RATE = 60


def _save(document: TextDocument, filename: str) -> None:
    try:
        document.save(filename)
    except UnsavableCharacterError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return
    except OSError as exc:
        print(f"Error opening file: {filename} ({exc})", file=sys.stderr)
        return
    print(f"SAVED TO: {filename}")


def _run(filename: str, document: TextDocument) -> None:
    screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
    pygame.display.set_caption("Text Editor")
    clock = pygame.time.Clock()

    content = EditorContent(document)
    view = EditorView(WINDOW_SIZE, working_directory(""), content)
    controller = InputController(content)

    running = True
    while running:
        for event in pygame.event.get():
            view_size = (view.camera.width, view.camera.height)
            if event.type == pygame.QUIT:
                running = False
                continue
            if event.type == pygame.VIDEORESIZE:
                view.set_camera_bounds(event.w, event.h)
            if (
                event.type == pygame.KEYDOWN
                and event.key == pygame.K_s
                and pygame.key.get_pressed()[pygame.K_LCTRL]
                and document.changed
            ):
                _save(document, filename)
            controller.handle_events(view, view_size, event)

        if not running:
            break

        view_size = (view.camera.width, view.camera.height)
        controller.handle_constant_input(view, view_size, pygame.mouse.get_pos())

        screen = pygame.display.get_surface() or screen
        screen.fill(BACKGROUND)
        view.draw(screen)
        pygame.display.flip()
        clock.tick(FRAME_RATE)


def main(argv=None) -> int:
    """Open the editor on a file; Ctrl+S saves it back."""
    parser = argparse.ArgumentParser(prog="monotext", description="A small text editor.")
    parser.add_argument("file", nargs="?", default=DEFAULT_FILE, help="file to edit and save")
    args = parser.parse_args(argv)

    document = TextDocument()
    try:
        document.load(args.file)
    except OSError:
        print(f"Error opening file: {args.file}", file=sys.stderr)

    pygame.init()
    try:
        _run(args.file, document)
    finally:
        pygame.quit()
    return 0