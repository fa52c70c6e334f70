from collections import defaultdict
from unittest.mock import patch

import pygame
import pytest

from monotext.app import main


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def run(path, frames):
    """Run the editor feeding it (pressed keys, events) per frame, then quit."""
    pressed = defaultdict(bool)
    queue = list(frames)

    def fake_get(*args, **kwargs):
        if queue:
            keys, events = queue.pop(0)
        else:
            keys, events = set(), [pygame.event.Event(pygame.QUIT)]
        pressed.clear()
        pressed.update({key: True for key in keys})
        return events

    with patch("pygame.event.get", fake_get), patch(
        "pygame.key.get_pressed", lambda: pressed
    ):
        return main([str(path)])


def keydown(key, mod=0):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=mod, unicode="")


def test_typing_and_saving(tmp_path, capsys):
    path = tmp_path / "doc.txt"
    path.write_text("hello\n", encoding="utf-8")
    frames = [
        (set(), [pygame.event.Event(pygame.TEXTINPUT, text="x")]),
        ({pygame.K_LCTRL}, [keydown(pygame.K_s, pygame.KMOD_LCTRL)]),
    ]
    assert run(path, frames) == 0
    assert path.read_text(encoding="utf-8") == "xhello\n"
    assert f"SAVED TO: {path}" in capsys.readouterr().out


def test_unchanged_document_is_not_saved(tmp_path, capsys):
    path = tmp_path / "doc.txt"
    path.write_text("same", encoding="utf-8")
    frames = [({pygame.K_LCTRL}, [keydown(pygame.K_s, pygame.KMOD_LCTRL)])]
    assert run(path, frames) == 0
    assert "SAVED TO" not in capsys.readouterr().out
    assert path.read_text(encoding="utf-8") == "same"


def test_missing_file_starts_empty_and_can_be_saved(tmp_path, capsys):
    path = tmp_path / "new.txt"
    frames = [
        (set(), [pygame.event.Event(pygame.TEXTINPUT, text="hi")]),
        ({pygame.K_LCTRL}, [keydown(pygame.K_s, pygame.KMOD_LCTRL)]),
    ]
    assert run(path, frames) == 0
    assert "Error opening file" in capsys.readouterr().err
    assert path.read_text(encoding="utf-8") == "hi"


def test_unsavable_character_reports_error(tmp_path, capsys):
    path = tmp_path / "doc.txt"
    path.write_text("", encoding="utf-8")
    frames = [
        (set(), [pygame.event.Event(pygame.TEXTINPUT, text="\u20ac")]),
        ({pygame.K_LCTRL}, [keydown(pygame.K_s, pygame.KMOD_LCTRL)]),
    ]
    assert run(path, frames) == 0
    captured = capsys.readouterr()
    assert "Can't save character" in captured.err
    assert "SAVED TO" not in captured.out