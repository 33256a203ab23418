"""Load the command catalog from a TOML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

from cmdpick.command import Command, Commands
from cmdpick.errors import CatalogError, TemplateParseError

log = logging.getLogger(__name__)

CATALOG_ENV = "CMDPICK_CATALOG"
DEFAULT_PROMPT = "> "

BUILTIN_COMMANDS = [
    {
        "cmd": "nix-env -q '.*{}.*'",
        "description": "Search a Nix package by name",
        "keywords": ["nix", "search", "package"],
    },
    {
        "cmd": "du -sh /nix/store",
        "description": "Show the size of the Nix store",
        "keywords": ["nix", "store", "size"],
    },
    {
        "cmd": "sudo shutdown -h now",
        "description": "Shut the system down",
        "keywords": ["hardware", "shutdown"],
    },
]

SAMPLE_TOML = """
# Save as ~/.cmdpick.toml (or point CMDPICK_CATALOG at it)
prompt = "> "

[[commands]]
cmd = "nix-env -q '.*{}.*'"
description = "Search a Nix package by name"
keywords = ["nix", "search", "package"]

[[commands]]
cmd = "du -sh /nix/store"
description = "Show the size of the Nix store"
keywords = ["nix", "store", "size"]

[[commands]]
cmd = "docker compose up -d {service}"
description = "Start a compose service in the background"
keywords = ["docker", "compose", "start"]
"""


def default_catalog_path() -> Path:
    return Path(os.environ.get(CATALOG_ENV, Path.home() / ".cmdpick.toml"))


def _split_keywords(raw: Any, where: str) -> List[str]:
    if isinstance(raw, str):
        # "a, b" is accepted as a shorthand for ["a", "b"]
        raw = raw.split(",")
    if not isinstance(raw, list) or not all(isinstance(k, str) for k in raw):
        raise CatalogError(f"{where}: 'keywords' must be a list of strings")
    return [k.strip() for k in raw if k.strip()]


def command_from_entry(entry: Dict[str, Any], where: str = "command") -> Command:
    """Build a Command from a ``{cmd, description, keywords}`` mapping."""
    if not isinstance(entry, dict):
        raise CatalogError(f"{where}: expected a table, got {type(entry).__name__}")
    cmd = entry.get("cmd")
    if not isinstance(cmd, str) or not cmd.strip():
        raise CatalogError(f"{where}: 'cmd' is required")
    description = entry.get("description")
    if description is not None and not isinstance(description, str):
        raise CatalogError(f"{where}: 'description' must be a string")
    description = description or None
    keywords = _split_keywords(entry.get("keywords", []), where)
    try:
        return Command.from_strings(cmd, description, keywords)
    except TemplateParseError as e:
        raise CatalogError(f"{where}: {e}") from e


def commands_from_data(data: Dict[str, Any], source: str = "<data>") -> Commands:
    entries = data.get("commands", [])
    if not isinstance(entries, list):
        raise CatalogError(f"{source}: 'commands' must be an array of tables")
    return Commands(
        command_from_entry(entry, f"{source}: commands[{i}]")
        for i, entry in enumerate(entries)
    )


def builtin_catalog() -> Commands:
    return commands_from_data({"commands": BUILTIN_COMMANDS}, "<builtin>")


def load_catalog(path: Optional[Path] = None) -> Tuple[Commands, str]:
    """Return the catalog and its prompt.

    Without an explicit ``path`` the default location is used, and the built-in
    catalog stands in when that file does not exist.
    """
    explicit = path is not None
    if path is None:
        path = default_catalog_path()
    path = path.expanduser()

    if not path.exists():
        if explicit:
            raise CatalogError(f"catalog file not found: {path}")
        log.debug("no catalog at %s, using the built-in one", path)
        return builtin_catalog(), DEFAULT_PROMPT

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise CatalogError(f"{path}: invalid TOML: {e}") from e

    prompt = data.get("prompt", DEFAULT_PROMPT)
    if not isinstance(prompt, str):
        raise CatalogError(f"{path}: 'prompt' must be a string")
    commands = commands_from_data(data, str(path))
    log.debug("loaded %d command(s) from %s", len(commands), path)
    return commands, prompt
