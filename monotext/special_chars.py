"""Conversion of document characters into the form written to disk."""

__all__ = ["UnsavableCharacterError", "convert_special_char"]

_ACCENTED = {
    224: "à", 225: "á", 226: "â",
    232: "è", 233: "é", 234: "ê",
    236: "ì", 237: "í", 238: "î",
    241: "ñ",
    242: "ò", 243: "ó", 244: "ô",
    249: "ù", 250: "ú", 251: "û",
    192: "À", 193: "Á", 194: "Â",
    200: "È", 201: "É", 202: "Ê",
    204: "Ì", 205: "Í", 206: "Î",
    210: "Ò", 211: "Ó", 212: "Ô",
    217: "Ù", 218: "Ú", 219: "Û",
}


class UnsavableCharacterError(ValueError):
    """Raised when a character cannot be written to a saved document."""

    def __init__(self, code: int) -> None:
        super().__init__(f"Can't save character: {code}")
        self.code = code


def convert_special_char(code: int) -> str:
    """Return the text to write for the code point ``code``.

    ASCII characters and a fixed set of accented Latin letters are accepted;
    anything else raises :class:`UnsavableCharacterError`.
    """
    accented = _ACCENTED.get(code)
    if accented is not None:
        return accented
    if 0 <= code < 128:
        return chr(code)
    raise UnsavableCharacterError(code)