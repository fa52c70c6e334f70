"""A small monospace text editor: a document model, editing operations and a pygame front end."""

__version__ = "0.1.0"