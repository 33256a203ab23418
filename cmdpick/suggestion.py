"""Turn the current input and validated keywords into suggestions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Iterable, List, Set

from cmdpick.command import Command, Commands


@dataclass
class Suggestion:
    keywords: List[str] = field(default_factory=list)
    commands: List[Command] = field(default_factory=list)


def suggest(catalog: Commands, input_text: str, validated_keywords: Iterable[str]) -> Suggestion:
    """Compute the keyword and command suggestions for one editor state.

    Commands must carry every validated keyword. With an empty input they are
    all suggested; otherwise only the ones reachable through a keyword that
    starts with ``input_text`` and has not been validated yet.
    """
    validated: AbstractSet[str] = frozenset(validated_keywords)

    if validated:
        validated_commands = {
            cmd for cmd in catalog.commands
            if all(kw in cmd.keywords for kw in validated)
        }
    else:
        validated_commands = set(catalog.commands)

    suggestion = Suggestion()
    if not input_text:
        suggestion.commands = sorted(validated_commands)
        return suggestion

    matched: Set[Command] = set()
    for kw, cmds in catalog.items():
        if kw.startswith(input_text) and kw not in validated:
            suggestion.keywords.append(kw)
            matched.update(cmds & validated_commands)
    suggestion.commands = sorted(matched)
    return suggestion
