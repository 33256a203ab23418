"""cmdpick: pick a shell command from a keyword catalog."""

__version__ = "0.1.0"
