# monotext

A small text editor for monospace text, drawn with pygame. It keeps the whole
document in memory and shows it with a line-number margin, one selection and
a cursor. The view can be scrolled, zoomed and rotated.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running

```
monotext [FILE]
```

`FILE` defaults to `txt/textoDePruebaGuardado.txt`, relative to the current
directory. It is read as UTF-8. If it cannot be opened, an error is printed
and the editor starts with an empty document. **Ctrl+S** writes the document
back to the same file. Nothing is written when the document has not changed.
After a save the editor prints `SAVED TO: <file>`.

Text is drawn with `fonts/DejaVuSansMono.ttf` if that file exists under the
current directory. Otherwise pygame's default font is used.

## Keys

| Keys                            | Action                                              |
|---------------------------------|-----------------------------------------------------|
| Arrow keys                      | Move the cursor                                     |
| Shift + arrows                  | Extend the selection                                |
| Home / End (Shift to select)    | Go to the start or end of the line                  |
| Ctrl+Shift+Up / Down            | Move the selected lines, or swap the cursor line    |
| Ctrl+D                          | Duplicate the cursor line                           |
| Ctrl+C                          | Copy the selection, or the cursor line if none      |
| Ctrl+X                          | Cut the selection                                   |
| Ctrl+V                          | Paste                                               |
| Ctrl+U                          | Replace the selection with `\_('-')_/`              |
| Ctrl + keypad Plus / Minus      | Zoom in or out                                      |
| Left Ctrl + R + Left / Right    | Rotate the view (while held)                        |
| Backspace / Delete              | Delete the selection, or one character              |
| Enter / Tab                     | Insert a line break / a tab                         |
| Mouse drag                      | Select text                                         |
| Mouse wheel                     | Scroll                                              |

A tab is drawn four columns wide. Both `\n` and `\r` end a line.

## Saving non-ASCII text

The file is saved as UTF-8. Only ASCII characters, the accented Latin vowels
(grave, acute and circumflex, both cases) and `ñ` can be saved.
`TextDocument.save` raises `monotext.special_chars.UnsavableCharacterError`
for any other character, and the file is left untouched. The editor prints the
error and keeps running.

## Using the pieces

The document model works without a window:

```python
from monotext.text_document import TextDocument
from monotext.editor_content import EditorContent

doc = TextDocument("first\nsecond")
content = EditorContent(doc)
content.move_cursor_to_end()
content.add_text_at_cursor("!")
print(doc.get_line(0))      # first!
doc.swap_lines(0, 1)
print(doc.get_line(0))      # second
```

- `monotext.text_document.TextDocument` is the buffer. It handles line lookup,
  insertion, removal and swapping of adjacent lines, and loading and saving.
- `monotext.cursor.Cursor` is a line/character position. It remembers the
  furthest column it was moved to.
- `monotext.selection` holds `Position`, `Selection` and `SelectionData`. The
  start of a selection is included in it and the end is not.
- `monotext.editor_content.EditorContent` combines a document, a cursor and
  selections into editing operations.
- `monotext.editor_view` holds `EditorView`, which draws onto a pygame
  surface, and its `Camera`.
- `monotext.input_controller.InputController` turns pygame events into
  editing operations.

## What it does not do

It edits one file per run, and that file is named on the command line. There
is no undo, no search, no open or save-as dialog and no syntax highlighting.