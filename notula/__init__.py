"""A small notepad that keeps images inline with plain-text notes, with a Tk window."""

__version__ = "0.1.0"