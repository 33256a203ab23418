"""Command records and the keyword index built over them."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

from cmdpick import template as tpl
from cmdpick.template import Template


@total_ordering
@dataclass(frozen=True, eq=True)
class Command:
    """One catalog entry. Commands sort by their template text."""

    template: Template
    description: Optional[str] = None
    keywords: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_strings(cls, cmd: str, description: Optional[str] = None,
                     keywords: Iterable[str] = ()) -> "Command":
        return cls(tpl.parse(cmd), description, tuple(keywords))

    @property
    def cmd(self) -> str:
        return self.template.original

    @property
    def some_description(self) -> str:
        return self.description or ""

    def __lt__(self, other: "Command") -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def _sort_key(self) -> Tuple[str, str, Tuple[str, ...]]:
        # template text first; the rest only breaks ties between equal templates
        return (self.template.original, self.some_description, self.keywords)


class Commands:
    """The immutable catalog: commands in input order plus keyword -> commands."""

    def __init__(self, commands: Iterable[Command]):
        self._commands: Tuple[Command, ...] = tuple(commands)
        index: Dict[str, Set[Command]] = {}
        for cmd in self._commands:
            for kw in cmd.keywords:
                index.setdefault(kw, set()).add(cmd)
        self._index: Dict[str, FrozenSet[Command]] = {
            kw: frozenset(index[kw]) for kw in sorted(index)
        }

    @property
    def commands(self) -> Tuple[Command, ...]:
        return self._commands

    @property
    def index(self) -> Dict[str, FrozenSet[Command]]:
        return dict(self._index)

    @property
    def keywords(self) -> List[str]:
        """All known keywords, lexicographically."""
        return list(self._index)

    def has_keyword(self, keyword: str) -> bool:
        return keyword in self._index

    def commands_for(self, keyword: str) -> FrozenSet[Command]:
        return self._index.get(keyword, frozenset())

    def items(self) -> Iterator[Tuple[str, FrozenSet[Command]]]:
        return iter(self._index.items())

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"Commands({len(self._commands)} commands, {len(self._index)} keywords)"
