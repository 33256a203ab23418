"""Exceptions raised by cmdpick."""


class CmdpickError(Exception):
    """Base exception for all cmdpick errors."""


class TerminalInitError(CmdpickError):
    """The picker could not take over the terminal (stdin is not a tty)."""


class TerminalIOError(CmdpickError):
    """The interactive session failed mid-way."""


class TemplateParseError(CmdpickError):
    """A command template could not be parsed."""


class CatalogError(CmdpickError):
    """The command catalog file is missing, unreadable or malformed."""
