"""Helpers for locating files relative to the program."""

__all__ = ["working_directory"]


def working_directory(argv_zero: str) -> str:
    """Return the directory part of ``argv_zero``, with its trailing slash.

    Returns an empty string when the path holds no slash.
    """
    return argv_zero[: argv_zero.rfind("/") + 1]